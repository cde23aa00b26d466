from __future__ import annotations

import signal
import sys

from flask import Flask, request

from .clock import iso_now
from .config import Settings, load_settings
from .routes import health_bp, hello_bp, register_error_handlers
from .slack import build_notifier


def create_app(settings: Settings | None = None, *, slack_relay: bool = False) -> Flask:
    settings = settings or load_settings()

    app = Flask(__name__)
    app.extensions["settings"] = settings
    # receivedData などはキーの順序をそのまま返す
    app.json.sort_keys = False  # type: ignore[attr-defined]

    # POST / が参照する。None なら通常の hello サービス
    app.extensions["slack_notifier"] = build_notifier(settings) if slack_relay else None

    @app.before_request
    def log_request() -> None:
        print(f"[{iso_now()}] {request.method} {request.path}")

    app.register_blueprint(hello_bp)
    app.register_blueprint(health_bp)
    register_error_handlers(app)

    return app


def create_slack_app(settings: Settings | None = None) -> Flask:
    return create_app(settings, slack_relay=True)


def _exit_on_signal(signum: int, _frame: object) -> None:
    name = signal.Signals(signum).name
    print(f"{name} signal received: closing HTTP server")
    # 処理中のリクエストは待たずに終了する
    sys.exit(0)


def install_signal_handlers() -> None:
    signal.signal(signal.SIGTERM, _exit_on_signal)
    signal.signal(signal.SIGINT, _exit_on_signal)


def serve(app: Flask) -> None:
    settings: Settings = app.extensions["settings"]
    install_signal_handlers()

    print(f"✅ Server is running on port {settings.port}")
    print(f"📍 Environment: {settings.environment}")
    if app.extensions.get("slack_notifier") is not None:
        configured = "configured" if settings.slack_webhook_url else "NOT configured"
        print(f"💬 Slack webhook: {configured} (default channel {settings.slack_channel})")
    print("🚀 Ready to accept requests")

    app.run(host="0.0.0.0", port=settings.port)


def main() -> None:
    serve(create_app())


def main_slack() -> None:
    serve(create_slack_app())
