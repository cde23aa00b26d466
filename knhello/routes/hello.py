from __future__ import annotations

import json
from typing import Any

from flask import Blueprint, Response, current_app, jsonify, request

from ..clock import iso_now
from ..config import APP_VERSION, Settings
from ..slack.notifier import SlackNotifier

hello_bp = Blueprint("hello", __name__)


def _settings() -> Settings:
    return current_app.extensions["settings"]  # type: ignore[no-any-return]


def _read_json_body() -> Any:
    # JSON の Content-Type のみパースする。それ以外や空ボディは {} 扱い
    if not request.is_json or not request.get_data():
        return {}
    # 不正な JSON は BadRequest になり、アプリ側のハンドラで 500 に変換される
    return request.get_json()


def data_size(data: Any) -> int:
    return len(json.dumps(data, separators=(",", ":"), ensure_ascii=False).encode("utf-8"))


def _notification_args(data: Any, default_channel: str) -> tuple[str, str]:
    body = data if isinstance(data, dict) else {}
    message = body.get("message")
    channel = body.get("channel")
    if not isinstance(message, str) or not message:
        message = json.dumps(data, indent=2, ensure_ascii=False)
    if not isinstance(channel, str) or not channel:
        channel = default_channel
    return message, channel


@hello_bp.get("/", provide_automatic_options=False)
def hello() -> Response:
    settings = _settings()
    body = {
        "message": "Hello World from Knative!",
        "timestamp": iso_now(),
        "version": APP_VERSION,
        "environment": settings.environment,
    }
    print("Sending response:", json.dumps(body, ensure_ascii=False))
    return jsonify(body)


@hello_bp.post("/", provide_automatic_options=False)
def receive() -> Response:
    data = _read_json_body()

    print("=== POST Request Received ===")
    print("Request Body:", json.dumps(data, indent=2, ensure_ascii=False))
    print("Content-Type:", request.content_type)
    print("============================")

    body: dict[str, Any] = {
        "message": "POST request received successfully",
        "timestamp": iso_now(),
        "receivedData": data,
        "dataSize": data_size(data),
    }

    notifier: SlackNotifier | None = current_app.extensions.get("slack_notifier")
    if notifier is not None:
        message, channel = _notification_args(data, notifier.default_channel)
        body["slackNotification"] = notifier.notify(message, channel).to_dict()

    resp = jsonify(body)
    resp.status_code = 200
    return resp
