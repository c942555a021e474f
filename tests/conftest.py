"""Pytest fixtures for cargo-orbit tests."""

import pytest

from cargo_orbit.tree import DependencyTree, TreeNode, parse_cargo_tree_output


@pytest.fixture
def simple_dump() -> str:
    """Root with two leaf dependencies."""
    return "0foo v1.0.0\n1bar v2.0.0\n1baz v0.3.0\n"


@pytest.fixture
def project_dump() -> str:
    """A realistic single-project dump with a repeated subtree and a proc-macro."""
    return (
        "0my-app v0.1.0 (/home/user/my-app)\n"
        "1log v0.4.20\n"
        "1serde v1.0.190\n"
        "2serde_derive v1.0.190 (proc-macro)\n"
        "3proc-macro2 v1.0.69\n"
        "4unicode-ident v1.0.12\n"
        "3quote v1.0.33\n"
        "4proc-macro2 v1.0.69 (*)\n"
        "1serde_json v1.0.108\n"
        "2itoa v1.0.9\n"
        "2serde v1.0.190 (*)\n"
    )


@pytest.fixture
def workspace_dump() -> str:
    """Two workspace members sharing a dependency."""
    return (
        "0app-core v0.1.0 (/ws/core)\n"
        "1log v0.4.20\n"
        "\n"
        "0app-cli v0.1.0 (/ws/cli)\n"
        "1app-core v0.1.0 (/ws/core)\n"
        "2log v0.4.20\n"
        "1clap v4.4.7\n"
    )


@pytest.fixture
def wide_tree() -> DependencyTree:
    """Root with one narrow child and one child that has six children."""
    nodes = {
        "root 1.0.0": TreeNode("root 1.0.0", {"narrow 1.0.0", "wide 1.0.0"}),
        "narrow 1.0.0": TreeNode("narrow 1.0.0"),
        "wide 1.0.0": TreeNode("wide 1.0.0", {f"leaf{i} 1.0.0" for i in range(6)}),
    }
    for i in range(6):
        nodes[f"leaf{i} 1.0.0"] = TreeNode(f"leaf{i} 1.0.0")
    return DependencyTree(nodes, "root 1.0.0")


@pytest.fixture
def project_tree(project_dump) -> DependencyTree:
    return parse_cargo_tree_output(project_dump)
