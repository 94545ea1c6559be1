from __future__ import annotations

import logging
from typing import Any

from flask import Blueprint, current_app, jsonify, request

from stylegate import __version__
from stylegate.accessibility import build_report, check, check_contrast, check_stylesheet, suggest
from stylegate.errors import ContextError
from stylegate.model import RuleContext
from stylegate.validation import to_inline_style, validate

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


@api_bp.errorhandler(ContextError)
def context_error(exc: ContextError):
    return _error(str(exc), 400)


# ---------------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------------


def _error(message: str, status: int):
    return jsonify({"success": False, "error": message}), status


def _config():
    return current_app.extensions["stylegate_config"]


def _body() -> dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _too_large(css: str) -> bool:
    return len(css.encode("utf-8")) > _config().max_css_bytes


def _declarations_or_none(data: dict[str, Any]) -> dict[str, Any] | None:
    css = data.get("css")
    return css if isinstance(css, dict) and css else None


def _stylesheet_or_none(data: dict[str, Any]) -> str | None:
    css = data.get("css")
    return css if isinstance(css, str) and css.strip() else None


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


@api_bp.route("/validate", methods=["POST"])
def validate_css():
    """Validate a property map; 400 with error codes when anything is rejected."""
    data = _body()
    declarations = _declarations_or_none(data)
    if declarations is None:
        return _error("css must be a non-empty object of property: value pairs", 400)

    strict = data.get("strict", _config().strict)
    if not isinstance(strict, bool):
        return _error("strict must be a boolean", 400)

    result = validate(declarations, strict=strict)
    status = 200 if result.ok else 400
    return jsonify({"success": result.ok, **result.to_dict()}), status


@api_bp.route("/inline-style", methods=["POST"])
def inline_style():
    declarations = _declarations_or_none(_body())
    if declarations is None:
        return _error("css must be a non-empty object of property: value pairs", 400)
    return jsonify({"success": True, "style": to_inline_style(declarations)})


# ---------------------------------------------------------------------------
# Accessibility
# ---------------------------------------------------------------------------


@api_bp.route("/accessibility/check", methods=["POST"])
def accessibility_check():
    """Check a stylesheet string, or a property map after validating it."""
    data = _body()
    context = RuleContext.from_dict(data.get("context"))

    declarations = _declarations_or_none(data)
    if declarations is not None:
        validation = validate(declarations)
        if not validation.ok:
            return jsonify({"success": False, **validation.to_dict()}), 400
        report = check(validation.validated, context)
        return jsonify({"success": True, "result": report.to_dict()})

    css = _stylesheet_or_none(data)
    if css is None:
        return _error("css is required", 400)
    if _too_large(css):
        return _error("CSS exceeds the maximum allowed size", 413)
    report = check_stylesheet(css, context)
    return jsonify({"success": True, "result": report.to_dict()})


@api_bp.route("/accessibility/contrast", methods=["POST"])
def accessibility_contrast():
    data = _body()
    foreground = data.get("foreground")
    background = data.get("background")
    if not isinstance(foreground, str) or not isinstance(background, str):
        return _error("foreground and background colors are required", 400)

    large_text = data.get("large_text", False)
    if not isinstance(large_text, bool):
        return _error("large_text must be a boolean", 400)

    result = check_contrast(
        foreground,
        background,
        level=data.get("level") or "AA",
        large_text=large_text,
    )
    if result.error:
        return _error(result.error, 400)
    return jsonify({"success": True, "result": result.to_dict()})


@api_bp.route("/accessibility/suggestions", methods=["POST"])
def accessibility_suggestions():
    css = _stylesheet_or_none(_body())
    if css is None:
        return _error("css is required", 400)
    if _too_large(css):
        return _error("CSS exceeds the maximum allowed size", 413)
    suggestions = suggest(css)
    return jsonify({
        "success": True,
        "suggestions": [issue.to_dict() for issue in suggestions],
        "count": len(suggestions),
    })


@api_bp.route("/accessibility/report", methods=["POST"])
def accessibility_report():
    data = _body()
    css = _stylesheet_or_none(data)
    if css is None:
        return _error("css is required", 400)
    if _too_large(css):
        return _error("CSS exceeds the maximum allowed size", 413)

    context = RuleContext.from_dict(data.get("context"))
    report = build_report(css, context, data.get("level") or _config().default_target_level)
    logger.debug("Report for %d bytes of CSS: meets target %s", len(css), report.meets_target)
    return jsonify({"success": True, "report": report.to_dict()})


@api_bp.route("/health")
def health():
    return jsonify({"status": "ok", "version": __version__})
