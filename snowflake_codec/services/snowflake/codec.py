import re
import threading
from typing import Optional
from snowflake_codec.config import settings
from snowflake_codec.exceptions import SnowflakeError
from snowflake_codec.services.logger import app_logger
from snowflake_codec.types import DeconstructedSnowflake
from .layout import (
  MAX_TIMESTAMP,
  SEQUENCE_BITS,
  SHARD_ID_BITS,
  SHARD_ID_OFFSET,
  SEQUENCE_OFFSET,
  SHARD_ID_SHIFT,
  TIMESTAMP_SHIFT,
  SnowflakeResolvable,
  binary,
  to_int,
)
from . import timestamps
from .timestamps import TimeValue, to_milliseconds

# 17 to 22 ASCII digits, used with fullmatch. re.ASCII keeps \d from matching other unicode digits.
SNOWFLAKE_PATTERN = re.compile(r"\d{17,22}", re.ASCII)


class SnowflakeCodec:
  def __init__(self, epoch: TimeValue = 0, shard_id: int = 1, sequence: int = 1):
    """
    Generates and parses snowflake IDs

    64-bit structure:
    - 42 bits: timestamp (milliseconds since the epoch)
    - 10 bits: shard id
    - 12 bits: sequence number

    Each codec owns its own defaults (epoch, shard_id) and its own sequence
    counter. Keep one instance around for the lifetime of the process, since
    the sequence counter is only useful if it lives across calls. Use
    get_snowflake_codec() to share one.

    Note:
    The codec doesn't coordinate anything across shards or hosts. Handing out a
    distinct shard_id per process and keeping clocks sane is the caller's job.
    - Shard ids wrap modulo 1024 and sequences wrap modulo 4096. That's part
      of the contract, so callers can cycle through shard ids if they want.
    - A timestamp before the epoch, or more than 42 bits of milliseconds after it,
      still produces an id, it just won't decode back to the same timestamp.
    """
    self.epoch = epoch
    self.shard_id = shard_id

    '''
    ##### Runtime state #####
    The sequence counter increments on every generate() call, regardless of the
    timestamp. The lock makes read-and-increment one step, so two threads
    generating in the same millisecond never see the same sequence value.
    '''
    self._lock = threading.Lock()
    self._sequence = sequence

  @property
  def epoch(self) -> int:
    """Default epoch in milliseconds since the Unix epoch"""
    return self._epoch

  @epoch.setter
  def epoch(self, value: TimeValue):
    self._epoch = to_milliseconds(value)

  @property
  def sequence(self) -> int:
    """The sequence value the next generate() call will use (before wrapping)"""
    with self._lock:
      return self._sequence

  @sequence.setter
  def sequence(self, value: int):
    with self._lock:
      self._sequence = value

  def _next_sequence(self) -> int:
    """Returns the current sequence value and increments the counter"""
    with self._lock:
      sequence = self._sequence
      self._sequence += 1
      return sequence

  def _resolve_epoch(self, epoch: Optional[TimeValue]) -> int:
    return self._epoch if epoch is None else to_milliseconds(epoch)

  def generate(
    self,
    timestamp: Optional[TimeValue] = None,
    shard_id: Optional[int] = None,
    epoch: Optional[TimeValue] = None,
  ) -> str:
    """
    Generates a single snowflake and returns it as a decimal string.

    Every argument is optional. timestamp defaults to now, shard_id and epoch
    default to the codec's own. The sequence counter is incremented exactly once
    per call, no matter what was passed in.
    """
    timestamp_ms = timestamps.now_milliseconds() if timestamp is None else to_milliseconds(timestamp)
    epoch_ms = self._resolve_epoch(epoch)
    shard_id = self.shard_id if shard_id is None else shard_id

    delta = timestamp_ms - epoch_ms
    if not (0 <= delta <= MAX_TIMESTAMP):
      app_logger.warning(
        f"Timestamp delta {delta}ms doesn't fit in the timestamp field, the snowflake won't decode to the same timestamp"
      )
    if not (0 <= shard_id < (1 << SHARD_ID_BITS)):
      app_logger.warning(f"Shard id {shard_id} is out of range and wraps to {shard_id % (1 << SHARD_ID_BITS)}")

    '''
    ## Pack the fields
    The timestamp delta goes in the top bits, the shard id just below it and
    the sequence in the lowest 12 bits, so it needs no shift.
    '''
    snowflake_id = (
      (delta << TIMESTAMP_SHIFT) |
      ((shard_id % (1 << SHARD_ID_BITS)) << SHARD_ID_SHIFT) |
      (self._next_sequence() % (1 << SEQUENCE_BITS))
    )

    app_logger.debug(f"Generated snowflake {snowflake_id} (shard {shard_id}, epoch {epoch_ms})")
    return str(snowflake_id)

  def parse(self, snowflake: SnowflakeResolvable, epoch: Optional[TimeValue] = None) -> DeconstructedSnowflake:
    """
    Deconstructs a snowflake into its timestamp, shard id and sequence.

    The epoch has to be the one the snowflake was generated with, otherwise the
    timestamp comes out wrong (no error is raised for that).

    Raises InvalidSnowflakeError if the snowflake isn't an integer, and
    SnowflakeRangeError if it doesn't fit in 64 bits.
    """
    value = to_int(snowflake)
    bits = binary(value)
    epoch_ms = self._resolve_epoch(epoch)

    deconstructed = DeconstructedSnowflake(
      timestamp=(value >> TIMESTAMP_SHIFT) + epoch_ms,
      shard_id=int(bits[SHARD_ID_OFFSET:SHARD_ID_OFFSET + SHARD_ID_BITS], 2),
      sequence=int(bits[SEQUENCE_OFFSET:], 2),
      binary=bits,
    )
    app_logger.debug(f"Parsed snowflake {snowflake}: {deconstructed}")
    return deconstructed

  def is_valid(self, snowflake: str) -> bool:
    """
    Checks that a value looks like a snowflake: 17 to 22 digits that parse.

    This is only a shape check. It doesn't look at whether the timestamp is
    sane or whether the shard id means anything.
    """
    if not isinstance(snowflake, str) or not SNOWFLAKE_PATTERN.fullmatch(snowflake):
      app_logger.debug(f"Rejected snowflake {snowflake!r}: not 17-22 digits")
      return False
    try:
      self.parse(snowflake)
      return True
    except SnowflakeError as e:
      app_logger.debug(f"Rejected snowflake {snowflake!r}: {e}")
      return False


_snowflake_codec = SnowflakeCodec(
  epoch=settings.SNOWFLAKE_EPOCH,
  shard_id=settings.SNOWFLAKE_SHARD_ID,
  sequence=settings.SNOWFLAKE_SEQUENCE,
)


def get_snowflake_codec() -> SnowflakeCodec:
  """Returns the process-wide codec, configured from the environment

  Note: Everything that generates ids in this process should go through this
  instance so they all share one sequence counter.
  """
  return _snowflake_codec


def generate(
  timestamp: Optional[TimeValue] = None,
  shard_id: Optional[int] = None,
  epoch: Optional[TimeValue] = None,
) -> str:
  return _snowflake_codec.generate(timestamp=timestamp, shard_id=shard_id, epoch=epoch)


def parse(snowflake: SnowflakeResolvable, epoch: Optional[TimeValue] = None) -> DeconstructedSnowflake:
  return _snowflake_codec.parse(snowflake, epoch=epoch)


def is_valid(snowflake: str) -> bool:
  return _snowflake_codec.is_valid(snowflake)
