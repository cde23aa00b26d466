from __future__ import annotations

import os
import time
from dataclasses import dataclass, field

APP_VERSION = "1.0.0"
DEFAULT_ENVIRONMENT = "production"
DEFAULT_SLACK_CHANNEL = "#general"


@dataclass(frozen=True)
class Settings:
    port: int = 8080
    environment: str = DEFAULT_ENVIRONMENT
    slack_webhook_url: str | None = None
    slack_channel: str = DEFAULT_SLACK_CHANNEL
    # uptime の基準時刻（time.monotonic）
    started_at: float = field(default_factory=time.monotonic)

    def uptime(self) -> float:
        return max(0.0, time.monotonic() - self.started_at)


def load_settings() -> Settings:
    port = int(os.environ.get("PORT") or "8080")
    return Settings(
        port=port,
        environment=(os.environ.get("APP_ENV") or os.environ.get("NODE_ENV") or DEFAULT_ENVIRONMENT),
        slack_webhook_url=(os.environ.get("SLACK_WEBHOOK_URL") or "").strip() or None,
        slack_channel=(os.environ.get("SLACK_CHANNEL") or "").strip() or DEFAULT_SLACK_CHANNEL,
    )
