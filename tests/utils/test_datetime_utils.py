from datetime import datetime, timezone, timedelta

from wordcrawl.utils.datetime_utils import deadline_after, format_duration, format_rfc1123, utc_now


def test_utc_now_is_timezone_aware():
    assert utc_now().tzinfo is not None


def test_deadline_after_adds_timeout():
    start = datetime(2020, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    assert deadline_after(start, timedelta(seconds=30)) == datetime(2020, 1, 1, 12, 0, 30, tzinfo=timezone.utc)


def test_format_rfc1123_converts_to_gmt():
    dt = datetime(2020, 1, 1, 12, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    assert format_rfc1123(dt) == "Wed, 01 Jan 2020 10:00:00 GMT"


def test_format_rfc1123_treats_naive_as_utc():
    assert format_rfc1123(datetime(2020, 1, 1, 12, 0, 0)) == "Wed, 01 Jan 2020 12:00:00 GMT"


def test_format_duration():
    assert format_duration(timedelta(0)) == "0m 0s 0ms"
    assert format_duration(timedelta(minutes=2, seconds=3, milliseconds=45)) == "2m 3s 45ms"
