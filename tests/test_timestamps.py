from datetime import date, datetime, timedelta, timezone
import pytest
from snowflake_codec.services.snowflake.timestamps import now_milliseconds, to_milliseconds


def test_int_milliseconds_pass_through():
  assert to_milliseconds(1_700_000_000_123) == 1_700_000_000_123


def test_float_milliseconds_are_truncated():
  assert to_milliseconds(1.9) == 1


def test_aware_datetime():
  dt = datetime(2020, 1, 1, 0, 0, 0, 123000, tzinfo=timezone.utc)
  assert to_milliseconds(dt) == 1577836800123


def test_aware_datetime_in_another_timezone():
  dt = datetime(2020, 1, 1, 2, 0, tzinfo=timezone(timedelta(hours=2)))
  assert to_milliseconds(dt) == 1577836800000


def test_naive_datetime_is_read_as_utc():
  assert to_milliseconds(datetime(2020, 1, 1)) == 1577836800000


def test_date_is_midnight_utc():
  assert to_milliseconds(date(2020, 1, 1)) == 1577836800000


def test_unix_epoch_is_zero():
  assert to_milliseconds(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 0


@pytest.mark.parametrize("value", [True, "1577836800000", None])
def test_rejects_other_types(value):
  with pytest.raises(TypeError):
    to_milliseconds(value)


def test_now_milliseconds_tracks_the_clock():
  before = int(datetime.now(timezone.utc).timestamp() * 1000)
  assert abs(now_milliseconds() - before) < 1000
