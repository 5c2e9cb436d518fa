"""
Command line interface.

    surfsvg serve [--host HOST] [--port PORT]
    surfsvg render [--function NAME] [--width W] [--height H] [-o FILE]
"""

import argparse
import sys

from .config import CELLS, HEIGHT, WIDTH, XYRANGE, RenderConfig
from .render import parse_hex_color, write_svg
from .surfaces import Surface, surface_from_name


def _color(text: str):
    try:
        return parse_hex_color(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _surface(text: str):
    try:
        return surface_from_name(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="surfsvg",
        description="Render 3-D surface functions as isometric SVG images.",
    )
    sub = p.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP service.")
    serve.add_argument("--host", default="localhost", help="Interface to bind (default: localhost).")
    serve.add_argument("--port", type=int, default=8000, help="Port to listen on (default: 8000).")

    render = sub.add_parser("render", help="Write one SVG image.")
    render.add_argument(
        "--function",
        type=_surface,
        default=Surface.RIPPLE,
        help=f"Surface function: {', '.join(s.value for s in Surface)} (default: ripple).",
    )
    render.add_argument("--width", type=int, default=WIDTH, help=f"Canvas width (default: {WIDTH}).")
    render.add_argument("--height", type=int, default=HEIGHT, help=f"Canvas height (default: {HEIGHT}).")
    render.add_argument("--cells", type=int, default=CELLS, help=f"Grid resolution (default: {CELLS}).")
    render.add_argument("--xyrange", type=float, default=XYRANGE, help=f"Axis range (default: {XYRANGE}).")
    render.add_argument("--peak", type=_color, default="ffffff", help="Hex RGB color at t = 0.")
    render.add_argument("--valley", type=_color, default="ffffff", help="Hex RGB color at t = 1.")
    render.add_argument("-o", "--output", default="-", help="Output file (default: stdout).")
    render.add_argument("-v", "--verbose", action="store_true", help="Print a sampling summary (with --output only).")
    return p


def cmd_serve(args) -> int:
    from .app import app

    app.run(host=args.host, port=args.port, threaded=True)
    return 0


def cmd_render(args, parser: argparse.ArgumentParser) -> int:
    try:
        config = RenderConfig(
            surface=args.function,
            width=args.width,
            height=args.height,
            cells=args.cells,
            xyrange=args.xyrange,
            peak=args.peak,
            valley=args.valley,
        )
    except ValueError as e:
        parser.error(str(e))
    if args.verbose and args.output == "-":
        parser.error("--verbose requires --output, the summary would mix with the SVG on stdout")

    if args.output == "-":
        write_svg(sys.stdout, config)
    else:
        with open(args.output, "w", encoding="utf-8") as f:
            write_svg(f, config, verbose=args.verbose)
        print(f"wrote {args.output}", file=sys.stderr)
    return 0


def main(argv=None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    if args.command == "serve":
        return cmd_serve(args)
    return cmd_render(args, ap)


if __name__ == "__main__":
    raise SystemExit(main())
