from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from slack_sdk.webhook import WebhookClient

from ..config import DEFAULT_SLACK_CHANNEL

BOT_USERNAME = "Knative Bot"
BOT_ICON_EMOJI = ":robot_face:"


@dataclass(frozen=True)
class NotificationResult:
    success: bool
    status: int | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"success": self.success}
        if self.status is not None:
            d["status"] = self.status
        if self.error is not None:
            d["error"] = self.error
        return d


@dataclass(frozen=True)
class SlackNotifier:
    webhook_url: str | None
    default_channel: str = DEFAULT_SLACK_CHANNEL
    username: str = BOT_USERNAME
    icon_emoji: str = BOT_ICON_EMOJI

    def build_payload(self, message: str, channel: str | None = None) -> dict[str, str]:
        return {
            "channel": channel or self.default_channel,
            "username": self.username,
            "text": message,
            "icon_emoji": self.icon_emoji,
        }

    def notify(self, message: str, channel: str | None = None) -> NotificationResult:
        """
        Post one message to the incoming webhook.

        Failures are reported through the returned result, never raised.
        """
        if not self.webhook_url:
            print("[slack] notification skipped: SLACK_WEBHOOK_URL is not set")
            return NotificationResult(success=False, error="SLACK_WEBHOOK_URL is not set")

        payload = self.build_payload(message, channel)
        try:
            # リトライなし（slack_sdk は既定で接続エラーを再試行するため明示的に空にする）
            client = WebhookClient(self.webhook_url, retry_handlers=[])
            resp = client.send_dict(payload)
        except Exception as e:
            err = str(e) or type(e).__name__
            print(f"[slack] notification failed: {type(e).__name__}: {err}")
            return NotificationResult(success=False, error=err)

        if not 200 <= resp.status_code < 300:
            print(f"[slack] notification failed: status={resp.status_code} body={resp.body!r}")
            return NotificationResult(
                success=False,
                status=resp.status_code,
                error=f"Request failed with status code {resp.status_code}",
            )

        print(f"[slack] notification sent to {payload['channel']} (status={resp.status_code})")
        return NotificationResult(success=True, status=resp.status_code)
