"""CLI for cargo-orbit."""

import argparse
import math
import sys
from pathlib import Path

from .layout import HighlightState, layout_tree, render_html, write_svg
from .summary import format_summary, summarize, write_json
from .tree import CargoTreeError, DependencyTree, parse_cargo_tree_output, run_cargo_tree


def load_config(config_path: Path) -> dict:
    """Load configuration from YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Dictionary of configuration values.
    """
    try:
        import yaml

        with open(config_path) as f:
            return yaml.safe_load(f) or {}
    except ImportError as err:
        raise ImportError("PyYAML required for config files: pip install pyyaml") from err


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add common arguments shared between subcommands."""
    parser.add_argument(
        "--manifest-dir",
        type=Path,
        help="Directory containing Cargo.toml (default: current directory)",
    )
    parser.add_argument(
        "--input",
        type=Path,
        help="Read saved `cargo tree --prefix depth` output instead of running cargo",
    )
    parser.add_argument("--cargo", type=str, help="Cargo executable (default: cargo)")
    parser.add_argument("--config", type=Path, help="Path to YAML config file")


def resolve_common_args(args: argparse.Namespace) -> dict:
    """Fill unset common arguments from the config file and defaults.

    Returns:
        The loaded config so subcommands can read their own keys.
    """
    config = load_config(args.config) if args.config else {}

    if not args.manifest_dir and "manifest-dir" in config:
        args.manifest_dir = Path(config["manifest-dir"])
    if not args.input and "input" in config:
        args.input = Path(config["input"])
    if not args.cargo:
        args.cargo = config.get("cargo", "cargo")

    if args.manifest_dir is None:
        args.manifest_dir = Path.cwd()
    args.manifest_dir = args.manifest_dir.resolve()
    if args.input:
        args.input = args.input.resolve()
    return config


def build_tree(args: argparse.Namespace) -> DependencyTree:
    """Read or generate the dependency dump and parse it."""
    if args.input:
        print(f"Reading {args.input}...")
        output = args.input.read_text()
    else:
        print(f"Running cargo tree in {args.manifest_dir}...")
        output = run_cargo_tree(args.manifest_dir, args.cargo)
    tree = parse_cargo_tree_output(output)
    print(f"Found {len(tree)} crates")
    if len(tree.root_candidates) > 1:
        print(f"Workspace with {len(tree.root_candidates)} members")
    return tree


def cmd_render(args: argparse.Namespace) -> None:
    """Lay out the tree and write it as SVG or HTML."""
    config = resolve_common_args(args)
    if args.output is None:
        args.output = Path(config.get("output", "dependencies.svg"))
    if args.format is None:
        args.format = config.get("format", "html" if args.output.suffix == ".html" else "svg")
    if args.radius is None:
        args.radius = float(config.get("radius", 40.0))
    if args.phase is None:
        args.phase = float(config.get("phase", 0.0))

    if not 0.0 <= args.transition <= 1.0:
        print(f"Warning: clamping --transition {args.transition} to [0, 1]", file=sys.stderr)
        args.transition = min(max(args.transition, 0.0), 1.0)

    tree = build_tree(args)

    highlight = HighlightState(
        active=set(args.active or []),
        completed=set(args.completed or []),
        transition=args.transition,
    )
    for name in sorted((highlight.active | highlight.completed) - tree.names()):
        print(f"Warning: {name!r} is not in the dependency tree", file=sys.stderr)

    crates, lines = layout_tree(
        tree,
        highlight,
        radius=args.radius,
        phase_accum=math.radians(args.phase),
    )

    if args.format == "html":
        render_html(crates, args.output)
    else:
        write_svg(crates, lines, args.output)
    print(f"Wrote {args.output} ({len(crates)} crates, {len(lines)} edges)")


def cmd_summary(args: argparse.Namespace) -> None:
    """Print headline numbers for the tree."""
    resolve_common_args(args)
    tree = build_tree(args)
    summary = summarize(tree, top=args.top)
    print()
    print(format_summary(summary), end="")
    if args.json:
        write_json(summary, args.json)
        print(f"\nWrote {args.json}")


def main() -> None:
    """Main entry point for cargo-orbit CLI."""
    parser = argparse.ArgumentParser(
        description="Draw the dependency tree of a Cargo project as a radial map"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    render_parser = subparsers.add_parser(
        "render",
        help="Lay out the dependency tree and write an SVG or HTML file",
    )
    add_common_args(render_parser)
    render_parser.add_argument(
        "--output",
        type=Path,
        help="Output file (default: dependencies.svg)",
    )
    render_parser.add_argument(
        "--format",
        choices=["svg", "html"],
        help="Output format (default: from the output file extension)",
    )
    render_parser.add_argument(
        "--radius", type=float, help="Radius of the root circle (default: 40)"
    )
    render_parser.add_argument(
        "--phase", type=float, help="Rotation of every fan-out in degrees (default: 0)"
    )
    render_parser.add_argument(
        "--active",
        action="append",
        metavar="CRATE",
        help="Crate being built, as 'name version' (can be repeated)",
    )
    render_parser.add_argument(
        "--completed",
        action="append",
        metavar="CRATE",
        help="Crate already built, as 'name version' (can be repeated)",
    )
    render_parser.add_argument(
        "--transition",
        type=float,
        default=1.0,
        help="Progress of the active-crate color animation, 0 to 1 (default: 1)",
    )

    summary_parser = subparsers.add_parser(
        "summary",
        help="Print crate counts, depth and widest fan-outs",
    )
    add_common_args(summary_parser)
    summary_parser.add_argument("--json", type=Path, help="Also write the summary as JSON")
    summary_parser.add_argument(
        "-n",
        "--top",
        type=int,
        default=10,
        help="Number of widest crates to list (default: 10)",
    )

    args = parser.parse_args()

    try:
        if args.command == "render":
            cmd_render(args)
        elif args.command == "summary":
            cmd_summary(args)
        else:
            # No subcommand provided - show help
            parser.print_help()
    except CargoTreeError as err:
        print(f"Error: cargo tree exited with status {err.returncode}", file=sys.stderr)
        print(err.stderr, file=sys.stderr, end="")
        sys.exit(err.returncode)


if __name__ == "__main__":
    main()
