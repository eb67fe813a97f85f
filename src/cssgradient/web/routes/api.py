from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify, request

from cssgradient.errors import GradientError
from cssgradient.geometry import to_paint
from cssgradient.parser import parse_gradient

api_bp = Blueprint("api", __name__)

logger = logging.getLogger(__name__)


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "POST, OPTIONS"
    return response


@api_bp.route("/validate", methods=["OPTIONS"])
@api_bp.route("/convert", methods=["OPTIONS"])
def preflight():
    """Handle CORS preflight for the API."""
    return "", 204


def _css_from_request() -> str | None:
    data = request.get_json(silent=True)
    if not data or not isinstance(data.get("css"), str):
        return None
    return data["css"]


@api_bp.route("/validate", methods=["POST"])
def validate():
    """Report whether the posted CSS parses as one or more gradients."""
    css = _css_from_request()
    if css is None:
        return jsonify({"error": "css required"}), 400

    config = current_app.extensions["gradient_config"]
    try:
        gradients = parse_gradient(css, config=config)
    except GradientError as exc:
        return jsonify({"valid": False, "error": str(exc)})
    if not gradients:
        return jsonify({"valid": False, "error": "no gradient found"})
    return jsonify({"valid": True, "count": len(gradients)})


@api_bp.route("/convert", methods=["POST"])
def convert():
    """Convert the posted CSS into gradient paints."""
    css = _css_from_request()
    if css is None:
        return jsonify({"error": "css required"}), 400

    data = request.get_json()
    try:
        width = float(data["width"]) if "width" in data else None
        height = float(data["height"]) if "height" in data else None
    except (TypeError, ValueError):
        return jsonify({"error": "width and height must be numbers"}), 400

    config = current_app.extensions["gradient_config"]
    try:
        paints = to_paint(css, width, height, config=config)
    except GradientError as exc:
        logger.info("rejected gradient %r: %s", css, exc)
        return jsonify({"error": "invalid input", "detail": str(exc)}), 422
    return jsonify({"paints": [paint.to_dict() for paint in paints]})
