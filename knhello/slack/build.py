from __future__ import annotations

from ..config import Settings
from .notifier import SlackNotifier


def build_notifier(settings: Settings) -> SlackNotifier:
    if not settings.slack_webhook_url:
        # 未設定でもアプリは起動させる。notify() のたびに失敗結果として返す
        print("[slack] SLACK_WEBHOOK_URL is not set; notifications will fail")
    return SlackNotifier(
        webhook_url=settings.slack_webhook_url,
        default_channel=settings.slack_channel,
    )
