"""UTC datetime utilities."""

from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MS = timedelta(milliseconds=1)


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def to_unix_ms(dt: datetime) -> int:
    """Milliseconds since the Unix epoch (exact, no float rounding)."""
    return (dt - _EPOCH) // _MS


def from_unix_ms(ms: int) -> datetime:
    return _EPOCH + timedelta(milliseconds=ms)
