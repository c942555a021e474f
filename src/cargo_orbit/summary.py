"""Summaries of a dependency tree."""

import json
from pathlib import Path

import networkx as nx

from .tree import DependencyTree


def to_digraph(tree: DependencyTree) -> nx.DiGraph:
    """Build a networkx DiGraph with one node per crate and one edge per dependency."""
    G = nx.DiGraph()
    G.add_nodes_from(tree.names())
    G.add_edges_from(tree.edges())
    return G


def summarize(tree: DependencyTree, top: int = 10) -> dict:
    """Compute headline numbers for a dependency tree.

    Args:
        tree: The dependency tree.
        top: Number of widest crates to report.

    Returns:
        Dictionary with root, crate/edge counts, the longest dependency
        chain, the widest fan-outs and how many crates are shared by
        several parents.
    """
    G = to_digraph(tree)
    root = tree.root().name

    fan_out = sorted(
        ((name, G.out_degree(name)) for name in G.nodes),
        key=lambda x: (-x[1], x[0]),
    )
    shared = sorted(name for name in G.nodes if G.in_degree(name) > 1)

    return {
        "root": root,
        "root_candidates": tree.root_candidates,
        "crates": G.number_of_nodes(),
        "dependencies": G.number_of_edges(),
        "depth": nx.dag_longest_path_length(G),
        "longest_chain": nx.dag_longest_path(G),
        "widest": [[name, count] for name, count in fan_out[:top] if count > 0],
        "shared": shared,
    }


def write_json(summary: dict, output_file: Path) -> None:
    with open(output_file, "w") as f:
        json.dump(summary, f, indent=2)


def format_summary(summary: dict) -> str:
    """Human-readable rendition of summarize() output."""
    lines = [
        "=" * 60,
        f"Dependency tree of {summary['root']}",
        "=" * 60,
        "",
        f"Crates: {summary['crates']}",
        f"Dependency edges: {summary['dependencies']}",
        f"Depth: {summary['depth']}",
    ]
    if len(summary["root_candidates"]) > 1:
        lines.append(f"Workspace members: {len(summary['root_candidates'])}")

    if summary["widest"]:
        lines += ["", "Widest fan-out:", "-" * 40]
        lines += [f"  {count:4d}  {name}" for name, count in summary["widest"]]

    if summary["shared"]:
        lines += ["", f"Shared by several parents: {len(summary['shared'])}"]

    if summary["longest_chain"]:
        lines += ["", "Longest chain:"]
        for i, name in enumerate(summary["longest_chain"]):
            arrow = "-> " if i > 0 else ""
            lines.append(f"{'  ' * i}{arrow}{name}")

    return "\n".join(lines) + "\n"
