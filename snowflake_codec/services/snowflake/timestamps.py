from datetime import date, datetime, timezone
from typing import Union
import time

TimeValue = Union[datetime, date, int, float]


def now_milliseconds() -> int:
  """Get the current timestamp in milliseconds"""
  return int(time.time() * 1000)


def to_milliseconds(value: TimeValue) -> int:
  """
  Normalizes a point in time into milliseconds since the Unix epoch.

  - datetime: converted as-is. Naive datetimes are read as UTC so the same
    value gives the same id on every host, whatever its local timezone.
  - date: midnight UTC of that day.
  - int/float: already milliseconds since the Unix epoch. Floats are
    truncated toward zero.
  """
  # bool is an int subclass, but True/False as a timestamp is always a mistake
  if isinstance(value, bool):
    raise TypeError("Expected a datetime, date or millisecond number, got bool")

  if isinstance(value, datetime):
    if value.tzinfo is None:
      value = value.replace(tzinfo=timezone.utc)
    # Integer arithmetic on the timedelta avoids float rounding on large dates
    delta = value - datetime(1970, 1, 1, tzinfo=timezone.utc)
    return (delta.days * 86_400_000) + (delta.seconds * 1000) + (delta.microseconds // 1000)

  if isinstance(value, date):
    return to_milliseconds(datetime(value.year, value.month, value.day, tzinfo=timezone.utc))

  if isinstance(value, (int, float)):
    return int(value)

  raise TypeError(f"Expected a datetime, date or millisecond number, got {type(value).__name__}")
