from typing import Optional, Union
from snowflake_codec.exceptions import InvalidSnowflakeError, SnowflakeRangeError

'''
##### Bit layout #####
A snowflake is a 64-bit unsigned integer, read from the most significant bit:

  [ timestamp delta: 42 bits | shard id: 10 bits | sequence: 12 bits ]

The timestamp delta is the number of milliseconds since the codec's epoch.
42 bits of milliseconds is roughly 139 years of range.
'''
TIMESTAMP_BITS = 42
SHARD_ID_BITS = 10
SEQUENCE_BITS = 12
TOTAL_BITS = TIMESTAMP_BITS + SHARD_ID_BITS + SEQUENCE_BITS

MAX_TIMESTAMP = (1 << TIMESTAMP_BITS) - 1
MAX_SHARD_ID = (1 << SHARD_ID_BITS) - 1
MAX_SEQUENCE = (1 << SEQUENCE_BITS) - 1
MAX_SNOWFLAKE = (1 << TOTAL_BITS) - 1

# Left shifts used when packing (counted from the least significant bit)
SHARD_ID_SHIFT = SEQUENCE_BITS
TIMESTAMP_SHIFT = SHARD_ID_BITS + SEQUENCE_BITS

# String offsets used when extracting (counted from the most significant bit)
SHARD_ID_OFFSET = TIMESTAMP_BITS
SEQUENCE_OFFSET = TIMESTAMP_BITS + SHARD_ID_BITS

SnowflakeResolvable = Union[str, int]


def to_int(snowflake: SnowflakeResolvable) -> int:
  """Converts a decimal snowflake string into an int. Ints pass through unchanged."""
  if isinstance(snowflake, bool):
    raise InvalidSnowflakeError(f"Invalid snowflake: {snowflake!r}")
  if isinstance(snowflake, int):
    return snowflake
  if not isinstance(snowflake, str):
    raise InvalidSnowflakeError(f"Invalid snowflake type: {type(snowflake).__name__}")
  # int() also takes "1_000" and non-ASCII digits, neither is a decimal snowflake
  if "_" in snowflake or not snowflake.isascii():
    raise InvalidSnowflakeError(f"Invalid snowflake: {snowflake!r}")
  try:
    return int(snowflake, 10)
  except ValueError as e:
    raise InvalidSnowflakeError(f"Invalid snowflake: {snowflake!r}") from e


def binary(snowflake: SnowflakeResolvable) -> str:
  """
  Transforms a snowflake into its 64-bit binary string, left-padded with zeros.

  Every bit offset used by extract_bits() assumes exactly 64 characters, so
  values that don't fit (negative, or wider than 64 bits) raise a
  SnowflakeRangeError instead of returning a misaligned string.
  """
  value = to_int(snowflake)
  if value < 0 or value > MAX_SNOWFLAKE:
    raise SnowflakeRangeError(f"Snowflake {value} is outside the unsigned {TOTAL_BITS}-bit range")
  return format(value, "b").zfill(TOTAL_BITS)


def extract_bits(snowflake: SnowflakeResolvable, start: int, length: Optional[int] = None) -> int:
  """
  Extracts the integer value of a bit range of a snowflake.

  start and length are offsets into the 64-bit binary string, counted from the
  most significant bit. Without a length, everything from start to the end is read.
  """
  bits = binary(snowflake)
  field = bits[start:start + length] if length else bits[start:]
  return int(field, 2)
