from datetime import datetime, timedelta, timezone
from email.utils import format_datetime


def utc_now() -> datetime:
    """Timezone-aware current time in UTC. Default clock for crawls and profiling."""
    return datetime.now(timezone.utc)


def deadline_after(start: datetime, timeout: timedelta) -> datetime:
    return start + timeout


def format_rfc1123(value: datetime) -> str:
    """Render `value` as an RFC 1123 date, e.g. 'Mon, 19 Oct 2026 10:00:00 GMT'.

    Naive datetimes are assumed to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value.astimezone(timezone.utc), usegmt=True)


def format_duration(duration: timedelta) -> str:
    """Render a duration as '<minutes>m <seconds>s <millis>ms'."""
    total_ms = duration // timedelta(milliseconds=1)
    minutes, rem_ms = divmod(total_ms, 60_000)
    seconds, millis = divmod(rem_ms, 1000)
    return f"{minutes}m {seconds}s {millis}ms"
