"""Game availability window helpers."""

from __future__ import annotations

import datetime as dt
from typing import Literal

GameStatus = Literal["generating", "ready", "active", "expired", "completed"]

Timestamp = dt.datetime | str | None


def _parse_timestamp(value: Timestamp) -> dt.datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, dt.datetime):
        parsed = value
    else:
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = dt.datetime.fromisoformat(text)
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=dt.timezone.utc)
    return parsed


def _utc_now(now: dt.datetime | None) -> dt.datetime:
    if now is None:
        return dt.datetime.now(dt.timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=dt.timezone.utc)
    return now


def is_game_open(
    status: str,
    opens_at: Timestamp,
    closes_at: Timestamp,
    now: dt.datetime | None = None,
) -> bool:
    """A game is playable only while active and inside [opens_at, closes_at)."""

    if status != "active":
        return False

    opens = _parse_timestamp(opens_at)
    closes = _parse_timestamp(closes_at)
    if opens is None or closes is None:
        return False

    current = _utc_now(now)
    return opens <= current < closes


def get_game_status(
    status: str,
    closes_at: Timestamp,
    now: dt.datetime | None = None,
) -> GameStatus:
    """Effective status; an active game past ``closes_at`` reports ``expired``."""

    if status in {"completed", "generating", "ready"}:
        return status  # type: ignore[return-value]

    closes = _parse_timestamp(closes_at)
    if closes is not None and _utc_now(now) >= closes:
        return "expired"
    return "active"
