from datetime import UTC, datetime, timedelta, timezone

from histexport.timestamps import as_of_timestamp, filename_safe


def test_as_of_timestamp_utc_numeric_offset():
    ts = as_of_timestamp(now_fn=lambda: datetime(2021, 1, 1, tzinfo=UTC))
    assert ts == "2021-01-01T00:00:00+0000"


def test_as_of_timestamp_keeps_foreign_offset():
    tz = timezone(timedelta(hours=3))
    ts = as_of_timestamp(now_fn=lambda: datetime(2020, 5, 17, 14, 3, 9, tzinfo=tz))
    assert ts == "2020-05-17T14:03:09+0300"


def test_as_of_timestamp_naive_is_treated_as_utc():
    ts = as_of_timestamp(now_fn=lambda: datetime(2021, 1, 1, 12, 0, 0))
    assert ts.endswith("+0000")


def test_as_of_timestamp_default_clock_is_parseable():
    ts = as_of_timestamp()
    parsed = datetime.strptime(ts, "%Y-%m-%dT%H:%M:%S%z")
    assert parsed.utcoffset() == timedelta(0)


def test_filename_safe_replaces_every_colon():
    out = filename_safe("2021-01-01T00:00:00+00:00")
    assert ":" not in out
    assert out == "2021-01-01T00-00-00+00-00"
