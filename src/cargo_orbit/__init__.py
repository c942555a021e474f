"""Radial maps of Cargo dependency trees."""

from .tree import (
    CargoTreeError,
    DependencyTree,
    TreeFormatError,
    load_tree,
    parse_cargo_tree_output,
)

__all__ = [
    "CargoTreeError",
    "DependencyTree",
    "TreeFormatError",
    "load_tree",
    "parse_cargo_tree_output",
]
