from __future__ import annotations

from flask import Blueprint, Response, current_app, jsonify

from ..clock import iso_now

health_bp = Blueprint("health", __name__)


@health_bp.get("/health", strict_slashes=False, provide_automatic_options=False)
def health() -> Response:
    # コンテナ/Cloud Run の疎通確認用。応答できる限り常に 200
    settings = current_app.extensions["settings"]
    return jsonify({"status": "healthy", "uptime": settings.uptime(), "timestamp": iso_now()})


@health_bp.get("/ready", strict_slashes=False, provide_automatic_options=False)
def ready() -> Response:
    return jsonify({"status": "ready", "timestamp": iso_now()})
