#!/usr/bin/env python
"""
Example: Surface Gallery

Renders every available surface function as an isometric SVG image:
1. Default white mesh
2. Two-color elevation gradient
3. Custom canvas size and grid resolution

License: BSD-3-Clause
"""

from surfsvg import (
    RenderConfig,
    Surface,
    format_hex_color,
    parse_hex_color,
    render_svg,
    sample_surface,
    zcolor,
)


def main():
    # Parameters
    peak = parse_hex_color("ff4000")  # t = 0
    valley = parse_hex_color("2040ff")  # t = 1
    cells = 60

    print("Rendering surfaces...")
    print(f"  Grid size: {cells}x{cells}")

    for surface in Surface:
        config = RenderConfig(surface=surface, cells=cells, peak=peak, valley=valley)
        sampled = sample_surface(config)
        print(
            f"  {surface.value:>7}: {len(sampled)} cells, {sampled.dropped} dropped, "
            f"z in [{sampled.zmin:.3f}, {sampled.zmax:.3f}]"
        )

        # Highest and lowest cells with their fill colors
        valid = list(sampled)
        if valid:
            for label, cell in (
                ("highest", max(valid, key=lambda c: c.elevation)),
                ("lowest", min(valid, key=lambda c: c.elevation)),
            ):
                color = zcolor(cell.elevation, sampled.zmin, sampled.zmax, peak, valley)
                print(
                    f"           {label} cell ({cell.i}, {cell.j}): "
                    f"z = {cell.elevation:.3f}, fill {format_hex_color(color)}"
                )

        filename = f"{surface.value}.svg"
        with open(filename, "w", encoding="utf-8") as f:
            f.write(render_svg(config))

    # Wide canvas: scale factors follow the canvas size
    wide = RenderConfig(surface=Surface.MOGULS, width=1200, height=400, cells=120, peak=peak, valley=valley)
    with open("moguls_wide.svg", "w", encoding="utf-8") as f:
        f.write(render_svg(wide, verbose=True))

    print("\nSurfaces rendered successfully!")
    print("Images saved as '<surface>.svg' and 'moguls_wide.svg'")


if __name__ == "__main__":
    main()
