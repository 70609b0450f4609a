from __future__ import annotations

import logging

from flask import Blueprint, Response, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from radtools.fontfiles import discover_fonts
from radtools.model.results import SwitchErrorKind
from radtools.modes import apply_mode
from radtools.scanner.components import scan_components
from radtools.serialize import (
    component_to_dict,
    font_from_dict,
    font_to_dict,
    mode_from_dict,
    style_from_dict,
    style_to_dict,
    tokens_from_dict,
    tokens_to_dict,
)
from radtools.theme.switcher import current_theme_import, switch_theme_import

logger = logging.getLogger(__name__)

api_bp = Blueprint("devtools_api", __name__)


def _config():
    return current_app.extensions["radtools_config"]


def _sync():
    return current_app.extensions["stylesheet_sync"]


@api_bp.before_request
def require_development():
    """Reject every devtools request outside development."""
    if not _config().is_development:
        return jsonify({"error": "Dev tools API not available in production"}), 403
    return None


@api_bp.errorhandler(Exception)
def handle_unexpected(exc: Exception):
    if isinstance(exc, HTTPException):
        return exc
    logger.exception("Unhandled devtools API error")
    return jsonify({"error": "Internal server error", "details": str(exc)}), 500


@api_bp.route("/read-css")
def read_css():
    """Return the raw stylesheet."""
    try:
        css = _sync().read()
    except OSError as exc:
        return jsonify({"error": "Failed to read CSS", "details": str(exc)}), 500
    return Response(css, mimetype="text/css")


@api_bp.route("/tokens")
def tokens():
    """Return the parsed token model, fonts and typography styles."""
    sync = _sync()
    try:
        model = sync.load()
        fonts, styles = sync.load_typography()
    except OSError as exc:
        return jsonify({"error": "Failed to read CSS", "details": str(exc)}), 500
    data = tokens_to_dict(model)
    data["fonts"] = [font_to_dict(f) for f in fonts]
    data["typographyStyles"] = [style_to_dict(s) for s in styles]
    return jsonify(data)


@api_bp.route("/write-css", methods=["POST"])
def write_css():
    """Write any of baseColors/borderRadius/colorModes/fonts/typographyStyles to the stylesheet."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "JSON body required"}), 400

    sync = _sync()
    model = None
    if data.get("baseColors") is not None or data.get("borderRadius") is not None:
        try:
            current = sync.load()
        except OSError:
            return jsonify({"error": "Could not read globals.css"}), 500
        model = tokens_from_dict(data, base=current)

    fonts = [font_from_dict(f) for f in data["fonts"]] if data.get("fonts") is not None else None
    styles = (
        [style_from_dict(s) for s in data["typographyStyles"]]
        if data.get("typographyStyles") is not None
        else None
    )
    modes = (
        [mode_from_dict(m) for m in data["colorModes"]]
        if data.get("colorModes") is not None
        else None
    )

    result = sync.write(tokens=model, fonts=fonts, typography=styles, color_modes=modes)
    if result.failed:
        return jsonify({
            "error": "Failed to write CSS",
            "details": result.error,
            "hint": f"Try restoring from backup: copy {result.backup_path or 'the .backup file'} over the stylesheet",
        }), 500
    return jsonify({"success": True, "backupPath": result.backup_path})


@api_bp.route("/themes/switch", methods=["POST"])
def switch_theme():
    """Point the stylesheet's theme import at another theme package."""
    data = request.get_json(silent=True) or {}
    package_name = data.get("themePackageName")
    if not package_name or not isinstance(package_name, str):
        return jsonify({"error": "Theme package name is required"}), 400

    result = switch_theme_import(_config().stylesheet_path, package_name)
    if result.error_kind is SwitchErrorKind.VALIDATION:
        return jsonify({
            "error": "Invalid theme package name",
            "message": "Package name must follow pattern: @radflow/theme-<name> or theme-<name>",
        }), 400
    if result.failed:
        return jsonify({"error": "Failed to switch theme", "message": result.error}), 500

    return jsonify({
        "success": True,
        "previousTheme": result.previous_theme,
        "newTheme": result.new_theme,
        "message": f"Theme switched to {result.new_theme}",
    })


@api_bp.route("/themes/current")
def current_theme():
    return jsonify({"themePackageName": current_theme_import(_config().stylesheet_path)})


@api_bp.route("/components")
def components():
    """Scan the components directory, optionally a single folder of it."""
    config = _config()
    found = scan_components(
        config.components_path,
        folder=request.args.get("folder") or None,
        project_root=config.root_path,
    )
    return jsonify({"components": [component_to_dict(c) for c in found]})


@api_bp.route("/fonts")
def fonts():
    return jsonify({"fonts": [font_to_dict(f) for f in discover_fonts(_config().fonts_path)]})


@api_bp.route("/modes/preview", methods=["POST"])
def preview_mode():
    """Return the CSS variable context with a color mode applied."""
    data = request.get_json(silent=True) or {}
    try:
        model = _sync().load()
    except OSError as exc:
        return jsonify({"error": "Failed to read CSS", "details": str(exc)}), 500
    context = apply_mode(model, data.get("modeId"))
    if context is None:
        return jsonify({"error": "not found"}), 404
    return jsonify({"modeId": data.get("modeId"), "variables": context})
