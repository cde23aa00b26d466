from __future__ import annotations

from datetime import datetime, timezone


def iso_now() -> str:
    # 例: 2026-10-18T12:34:56.789Z
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
