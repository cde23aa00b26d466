from __future__ import annotations

import traceback

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

AVAILABLE_ENDPOINTS = ["/", "/health", "/ready"]

_FALLBACK_500 = '{"error":"Internal Server Error","message":"Internal Server Error"}\n'


def _original_url() -> str:
    qs = request.query_string.decode("utf-8", errors="replace")
    return f"{request.path}?{qs}" if qs else request.path


def not_found(_e: Exception) -> Response:
    resp = jsonify(
        {
            "error": "Not Found",
            "message": f"Route {_original_url()} not found",
            "availableEndpoints": list(AVAILABLE_ENDPOINTS),
        }
    )
    resp.status_code = 404
    return resp


def internal_error(e: Exception) -> Response:
    try:
        if isinstance(e, HTTPException):
            message = e.description or e.name
        else:
            message = str(e)
        print("Error:", type(e).__name__, message)
        print(traceback.format_exc())
        resp = jsonify({"error": "Internal Server Error", "message": message})
        resp.status_code = 500
        return resp
    except Exception:
        return Response(_FALLBACK_500, status=500, content_type="application/json")


def register_error_handlers(app: Flask) -> None:
    # 404/405 はコード指定のハンドラが優先されるため、汎用ハンドラには届かない
    app.register_error_handler(404, not_found)
    app.register_error_handler(405, not_found)
    app.register_error_handler(Exception, internal_error)
