"""Turn draw commands into SVG documents and pyvis HTML pages."""

import html
from pathlib import Path

from .color import to_hex
from .radial import DrawCrate, DrawLine, bounding_box

BACKGROUND = "#1e1e2e"
MARGIN = 20.0


def _label_size(radius: float) -> float:
    """Font size that keeps a crate label roughly inside its circle."""
    return max(radius / 3, 4.0)


def render_svg(crates: list[DrawCrate], lines: list[DrawLine]) -> str:
    """Render circles and lines as a standalone SVG document.

    Lines are drawn first so circles sit on top of them. Each circle carries
    its crate identity as a tooltip.

    Args:
        crates: Circles from draw_tree.
        lines: Lines from draw_tree.

    Returns:
        SVG document text.
    """
    min_x, min_y, max_x, max_y = bounding_box(crates)
    min_x -= MARGIN
    min_y -= MARGIN
    width = max_x - min_x + MARGIN
    height = max_y - min_y + MARGIN

    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'viewBox="{min_x:.2f} {min_y:.2f} {width:.2f} {height:.2f}">',
        f'  <rect x="{min_x:.2f}" y="{min_y:.2f}" width="{width:.2f}" '
        f'height="{height:.2f}" fill="{BACKGROUND}"/>',
    ]

    for line in lines:
        parts.append(
            f'  <line x1="{line.p1[0]:.2f}" y1="{line.p1[1]:.2f}" '
            f'x2="{line.p2[0]:.2f}" y2="{line.p2[1]:.2f}" '
            f'stroke="{to_hex(line.color)}" stroke-width="1"/>'
        )

    for crate in crates:
        name = html.escape(crate.name)
        x, y = crate.center
        parts.append(
            f'  <g><title>{name}</title>'
            f'<circle cx="{x:.2f}" cy="{y:.2f}" r="{crate.radius:.2f}" '
            f'fill="{to_hex(crate.color)}"/>'
            f'<text x="{x:.2f}" y="{y:.2f}" text-anchor="middle" '
            f'dominant-baseline="middle" font-family="monospace" '
            f'font-size="{_label_size(crate.radius):.1f}" fill="#333">'
            f"{html.escape(crate.name.rsplit(' ', 1)[0])}</text></g>"
        )

    parts.append("</svg>")
    return "\n".join(parts) + "\n"


def write_svg(crates: list[DrawCrate], lines: list[DrawLine], output_path: Path) -> None:
    """Write render_svg output to output_path."""
    with open(output_path, "w") as f:
        f.write(render_svg(crates, lines))


def render_html(crates: list[DrawCrate], output_path: Path) -> None:
    """Render the layout as an interactive pyvis page with fixed positions.

    Edges are taken from the tree itself through each crate's node handle,
    so only crates present in the layout are connected.

    Args:
        crates: Circles from draw_tree.
        output_path: Path to write the HTML file.
    """
    from pyvis.network import Network

    net = Network(
        height="100vh",
        width="100%",
        bgcolor=BACKGROUND,
        font_color="#ffffff",
        directed=True,
    )
    net.toggle_physics(False)

    drawn = {crate.name for crate in crates}
    for crate in crates:
        net.add_node(
            crate.name,
            label=crate.name,
            title=f"{crate.name}\n{crate.node.child_count()} dependencies",
            x=crate.center[0],
            y=crate.center[1],
            fixed=True,
            shape="dot",
            size=crate.radius,
            color=to_hex(crate.color),
            font={"size": _label_size(crate.radius)},
        )

    for crate in crates:
        for child in crate.node.children():
            if child.name in drawn:
                net.add_edge(crate.name, child.name, color="#ffffff", width=0.5)

    net.set_options("""
    {
        "physics": {"enabled": false},
        "interaction": {
            "navigationButtons": true,
            "zoomView": true,
            "dragView": true,
            "hover": true,
            "tooltipDelay": 100
        },
        "edges": {
            "arrows": {"to": {"enabled": false}},
            "smooth": false
        }
    }
    """)

    net.save_graph(str(output_path))
