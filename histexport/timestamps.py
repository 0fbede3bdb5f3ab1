from collections.abc import Callable
from datetime import UTC, datetime

# 2021-01-01T00:00:00+0000 (numeric offset, no colon inside it)
AS_OF_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def _now_default() -> datetime:
    return datetime.now(UTC)


def as_of_timestamp(*, now_fn: Callable[[], datetime] = _now_default) -> str:
    now = now_fn()
    if now.tzinfo is None:
        # наивное время считаем UTC
        now = now.replace(tzinfo=UTC)
    return now.strftime(AS_OF_FORMAT)


def filename_safe(ts: str) -> str:
    """Windows forbids ':' in file names."""
    return str(ts).replace(":", "-")
