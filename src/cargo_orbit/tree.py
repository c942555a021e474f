"""Build a dependency tree from `cargo tree --prefix depth` output."""

import re
import subprocess
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

# Synthetic root used when the dump describes several workspace members
WORKSPACE_ROOT = "workspace"

_DEPTH_PREFIX = re.compile(r"^([0-9]+)(.*)$")


class CargoTreeError(RuntimeError):
    """The `cargo tree` process exited with a non-zero status."""

    def __init__(self, returncode: int, stderr: str):
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"cargo tree exited with status {returncode}: {stderr.strip()}")


class TreeFormatError(ValueError):
    """The dependency dump does not follow the depth-prefixed format."""


@dataclass
class TreeNode:
    """One resolved dependency and the identities of its children."""

    name: str
    children: set[str] = field(default_factory=set)


class NodeView:
    """Read-only handle on a node stored in a DependencyTree."""

    __slots__ = ("_nodes", "_node")

    def __init__(self, nodes: dict[str, TreeNode], node: TreeNode):
        self._nodes = nodes
        self._node = node

    @property
    def name(self) -> str:
        return self._node.name

    def child_count(self) -> int:
        return len(self._node.children)

    def children(self) -> Iterator["ChildView"]:
        """Yield a view for each child, ordered by name.

        Every call starts a fresh iteration over the stored children, so the
        sequence can be walked any number of times.
        """
        siblings = len(self._node.children)
        for index, name in enumerate(sorted(self._node.children), start=1):
            yield ChildView(self._nodes, self._nodes[name], index, siblings)

    def __iter__(self) -> Iterator["ChildView"]:
        return self.children()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeView):
            return NotImplemented
        return self._nodes is other._nodes and self._node.name == other._node.name

    def __hash__(self) -> int:
        return hash(self._node.name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class ChildView(NodeView):
    """A NodeView reached from its parent, aware of its position among siblings."""

    __slots__ = ("index", "siblings")

    def __init__(self, nodes: dict[str, TreeNode], node: TreeNode, index: int, siblings: int):
        super().__init__(nodes, node)
        self.index = index  # 1-based
        self.siblings = siblings


class DependencyTree:
    """Owns every node of a parsed dependency tree.

    Nodes are stored once, keyed by identity; all traversal goes through
    NodeView handles that borrow from this mapping.
    """

    def __init__(
        self,
        nodes: dict[str, TreeNode],
        root: str,
        root_candidates: list[str] | None = None,
    ):
        if root not in nodes:
            raise TreeFormatError(f"Root {root!r} is not part of the tree")
        self._nodes = nodes
        self._root = root
        self.root_candidates = list(root_candidates or [root])

    def get(self, name: str) -> NodeView | None:
        node = self._nodes.get(name)
        if node is None:
            return None
        return NodeView(self._nodes, node)

    def root(self) -> NodeView:
        return NodeView(self._nodes, self._nodes[self._root])

    def names(self) -> set[str]:
        return set(self._nodes)

    def edges(self) -> Iterator[tuple[str, str]]:
        """Yield every (parent, child) pair."""
        for name, node in self._nodes.items():
            for child in node.children:
                yield name, child

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)


def package_identity(package_id: str) -> str:
    """Normalize a cargo package id to a "name version" identity.

    `serde_json v1.0.108 (/path)` becomes `serde-json 1.0.108`.

    Raises:
        TreeFormatError: If the package id has no version part.
    """
    stop = package_id.find(" (")
    if stop == -1:
        stop = len(package_id)
    parts = package_id[:stop].strip().rsplit(" ", 1)
    if len(parts) != 2:
        raise TreeFormatError(f"Malformed package id: {package_id!r}")
    name, version = parts
    if version.startswith("v"):
        version = version[1:]
    return f"{name.replace('_', '-')} {version}"


def parse_cargo_tree_output(output: str) -> DependencyTree:
    """Parse `cargo tree --prefix depth` output into a DependencyTree.

    Each line is a depth (a run of digits) glued to a package id:
    0my-app v0.1.0 (/src/my-app)
    1serde v1.0.190
    2serde_derive v1.0.190 (proc-macro)
    1log v0.4.20

    Blank lines separate the trees of workspace members. A dependency that is
    already an ancestor on the current path is dropped so the result never
    contains a cycle.

    Args:
        output: stdout of cargo tree.

    Returns:
        DependencyTree rooted at the single project, or at a synthetic
        "workspace" node when several projects were listed.

    Raises:
        TreeFormatError: On a line without a depth prefix or when no root
            could be found.
    """
    nodes: dict[str, TreeNode] = {}
    stack: list[str] = []
    roots: list[str] = []

    def finish_local_tree() -> None:
        if stack:
            roots.append(stack[0])
            stack.clear()

    for lineno, line in enumerate(output.split("\n"), start=1):
        line = line.removesuffix("\r")
        if not line:
            # Separator between workspace members
            finish_local_tree()
            continue

        match = _DEPTH_PREFIX.match(line)
        if not match or not match.group(2).strip():
            raise TreeFormatError(f"Line {lineno} has no depth prefix: {line!r}")
        depth = int(match.group(1))

        if depth > len(stack):
            # Continuation of a subtree that was not descended into
            continue

        try:
            dep = package_identity(match.group(2))
        except TreeFormatError as err:
            raise TreeFormatError(f"Line {lineno}: {err}") from err

        if not stack and dep in nodes:
            # Already seen as part of another project, skip its subtree
            roots.append(dep)
            continue

        del stack[depth:]

        if dep in stack:
            # Pretend the dependency doesn't exist rather than add a cycle
            continue

        if dep not in nodes:
            nodes[dep] = TreeNode(dep)
        if stack:
            nodes[stack[-1]].children.add(dep)
        stack.append(dep)

    finish_local_tree()

    if not roots:
        raise TreeFormatError("No root package found in cargo tree output")

    if len(roots) == 1:
        root = roots[0]
    else:
        root = WORKSPACE_ROOT
        nodes[root] = TreeNode(root, set(roots))

    return DependencyTree(nodes, root, roots)


def run_cargo_tree(
    manifest_dir: Path,
    cargo: str = "cargo",
    extra_args: tuple[str, ...] = (),
) -> str:
    """Run `cargo tree` with depth prefixes in a project directory.

    Args:
        manifest_dir: Directory containing Cargo.toml.
        cargo: Cargo executable to run.
        extra_args: Additional arguments passed to cargo tree.

    Returns:
        stdout of cargo tree.

    Raises:
        CargoTreeError: If cargo exits with a non-zero status.
    """
    cmd = [cargo, "tree", "-e=no-dev", "--prefix", "depth", *extra_args]
    result = subprocess.run(cmd, cwd=manifest_dir, capture_output=True, text=True)
    if result.returncode != 0:
        raise CargoTreeError(result.returncode, result.stderr)
    return result.stdout


def load_tree(manifest_dir: Path, cargo: str = "cargo") -> DependencyTree:
    """Run cargo tree in manifest_dir and parse its output."""
    return parse_cargo_tree_output(run_cargo_tree(manifest_dir, cargo))
