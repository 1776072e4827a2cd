from __future__ import annotations

import logging
import math
from typing import Any, List, Mapping, Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

# Project-local algorithms
from .adapters import CANVAS_SIZE, ui_points_to_control_points
from .convert import InvalidColorError, canon_hex
from .core_types import ColorScale, ControlPoint
from .curves import apply_color_curves, apply_range_color_curves
from .interpolate import as_control_points
from .palette import KINDS, Palette
from .scales import generate_color_scale, generate_custom_color_scale, generate_neutrals

log = logging.getLogger(__name__)

SCALE_KINDS = ("default", "custom", "neutral")

DEFAULT_CONFIG: Mapping[str, Any] = {
    "CANVAS_WIDTH": CANVAS_SIZE,
    "CANVAS_HEIGHT": CANVAS_SIZE,
    "MAX_CONTROL_POINTS": 32,
}


class BadRequest(ValueError):
    """Payload problem reported back to the client as a 400."""


def parse_points(raw: Any, limit: int) -> List[ControlPoint]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise BadRequest("control points must be a list")
    if len(raw) > limit:
        raise BadRequest(f"at most {limit} control points are accepted")
    try:
        return as_control_points(raw)
    except (TypeError, ValueError, KeyError, ArithmeticError) as exc:
        raise BadRequest(f"invalid control point: {exc}") from exc


def color_field(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise BadRequest(f"{key} must be a hex color string")
    return canon_hex(value)


def build_scale(base: str, kind: str) -> ColorScale:
    if kind == "neutral":
        return generate_neutrals(base)
    if kind == "custom":
        return generate_custom_color_scale(base)
    return generate_color_scale(base)


# ----------------------------- Flask app ----------------------------------


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(DEFAULT_CONFIG)
    app.config.from_prefixed_env("COLOR_SCALES")
    if config:
        app.config.from_mapping(config)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    def body() -> Mapping[str, Any]:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise BadRequest("expected a JSON object")
        return data

    def limit() -> int:
        return int(app.config["MAX_CONTROL_POINTS"])

    @app.errorhandler(InvalidColorError)
    def invalid_color(exc: InvalidColorError):
        return jsonify({"error": f"invalid color: {exc}"}), 400

    @app.errorhandler(BadRequest)
    def bad_request(exc: BadRequest):
        return jsonify({"error": str(exc)}), 400

    @app.errorhandler(Exception)
    def unexpected(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        log.exception("Unhandled error on %s", request.path)
        return jsonify({"error": "internal error"}), 500

    @app.route("/scale")
    def scale():
        base = canon_hex(request.args.get("base", "3b82f6"))
        kind = (request.args.get("kind") or "default").lower()
        if kind not in SCALE_KINDS:
            return (
                jsonify({"error": f"unknown scale kind '{kind}'", "supported": SCALE_KINDS}),
                400,
            )
        try:
            return jsonify(build_scale(base, kind))
        except Exception as exc:
            log.exception("Scale generation failed")
            return jsonify({"error": str(exc)}), 500

    @app.route("/curves", methods=["POST"])
    def curves():
        data = body()
        base = color_field(data, "base")
        split = data.get("range")
        if split is not None:
            if not isinstance(split, dict):
                raise BadRequest("range must be an object")
            return jsonify(
                apply_range_color_curves(
                    base,
                    parse_points(split.get("lightLightness"), limit()),
                    parse_points(split.get("darkLightness"), limit()),
                    parse_points(split.get("lightChroma"), limit()),
                    parse_points(split.get("darkChroma"), limit()),
                )
            )
        return jsonify(
            apply_color_curves(
                base,
                parse_points(data.get("lightness"), limit()),
                parse_points(data.get("chroma"), limit()),
            )
        )

    @app.route("/control-points", methods=["POST"])
    def control_points():
        data = body()
        raw = data.get("points")
        if not isinstance(raw, list):
            raise BadRequest("points must be a list")
        if len(raw) > limit():
            raise BadRequest(f"at most {limit()} control points are accepted")
        try:
            width = float(data.get("width", app.config["CANVAS_WIDTH"]))
            height = float(data.get("height", app.config["CANVAS_HEIGHT"]))
        except (TypeError, ValueError, ArithmeticError) as exc:
            raise BadRequest(f"invalid canvas size: {exc}") from exc
        finite = math.isfinite(width) and math.isfinite(height)
        if not finite or width <= 0 or height <= 0:
            raise BadRequest("canvas size must be positive and finite")
        try:
            pts = ui_points_to_control_points(
                raw, bool(data.get("chroma", False)), width=width, height=height
            )
        except (TypeError, ValueError, KeyError, IndexError, ArithmeticError) as exc:
            raise BadRequest(f"invalid point: {exc}") from exc
        return jsonify([p.to_dict() for p in pts])

    @app.route("/palette", methods=["POST"])
    def palette():
        data = body()
        pal = Palette(
            lightness_points=tuple(parse_points(data.get("lightness"), limit())),
            chroma_points=tuple(parse_points(data.get("chroma"), limit())),
        )
        # order matters: primary drags neutral along, an explicit neutral wins
        for kind in KINDS:
            if data.get(kind) is not None:
                pal = pal.with_base_color(kind, color_field(data, kind))
        return jsonify(
            {
                "colors": {kind: getattr(pal, kind) for kind in KINDS},
                "scales": pal.scales(),
            }
        )

    return app


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
