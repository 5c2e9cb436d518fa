"""
HTTP front end.

GET / renders a surface as SVG. Query parameters (all optional):

    function   ripple | eggbox | moguls | saddle | flat (alias: sin)
    width      canvas width in pixels
    height     canvas height in pixels
    cells      grid resolution
    xyrange    axis range in world units
    peak       hex RGB color of the gradient at t = 0
    valley     hex RGB color of the gradient at t = 1

Invalid parameters are rejected with 400 before any rendering starts.
"""

from __future__ import annotations
from typing import Any, Mapping

from flask import Flask, Response, request, jsonify

from .config import RenderConfig
from .render import MIME_TYPE, iter_svg, parse_hex_color
from .surfaces import Surface, surface_from_name


def _parse(args: Mapping[str, str], name: str, convert, what: str) -> Any:
    text = args.get(name, "")
    try:
        return convert(text)
    except ValueError:
        raise ValueError(f"cannot parse {name!r}={text!r} as {what}") from None


def config_from_query(args: Mapping[str, str]) -> RenderConfig:
    """
    Build a `RenderConfig` from request query parameters.

    Empty or missing parameters keep their defaults.

    Raises
    ------
    ValueError
        If a parameter cannot be parsed or is out of range.
    """
    kwargs: dict[str, Any] = {}
    if args.get("function"):
        kwargs["surface"] = surface_from_name(args["function"])
    if args.get("width"):
        kwargs["width"] = _parse(args, "width", int, "an integer")
    if args.get("height"):
        kwargs["height"] = _parse(args, "height", int, "an integer")
    if args.get("cells"):
        kwargs["cells"] = _parse(args, "cells", int, "an integer")
    if args.get("xyrange"):
        kwargs["xyrange"] = _parse(args, "xyrange", float, "a number")
    if args.get("peak"):
        kwargs["peak"] = _parse(args, "peak", parse_hex_color, "a hex RGB color")
    if args.get("valley"):
        kwargs["valley"] = _parse(args, "valley", parse_hex_color, "a hex RGB color")
    return RenderConfig(**kwargs)


def create_app() -> Flask:
    app = Flask(__name__)

    # ======= CORS =======
    @app.after_request
    def _cors(resp):
        resp.headers["Access-Control-Allow-Origin"] = "*"
        resp.headers["Access-Control-Allow-Headers"] = "*"
        resp.headers["Access-Control-Allow-Methods"] = "GET,OPTIONS"
        return resp

    @app.route("/", methods=["GET"])
    def surface():
        try:
            config = config_from_query(request.args)
        except ValueError as e:
            app.logger.warning("rejected render request %s: %s", request.query_string, e)
            return jsonify({"error": str(e)}), 400
        return Response(iter_svg(config), mimetype=MIME_TYPE)

    @app.route("/health", methods=["GET"])
    def health():
        return {"ok": True, "functions": [s.value for s in Surface]}

    return app


app = create_app()
