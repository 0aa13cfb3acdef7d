"""
Generates and parses 64-bit snowflake ids.

  [ timestamp delta: 42 bits | shard id: 10 bits | sequence: 12 bits ]

Ids are passed around as decimal strings.
"""
from .exceptions import InvalidSnowflakeError, SnowflakeError, SnowflakeRangeError
from .services.snowflake import (
  SnowflakeCodec,
  binary,
  extract_bits,
  generate,
  get_snowflake_codec,
  is_valid,
  parse,
)
from .types import DeconstructedSnowflake

__all__ = [
  "SnowflakeCodec",
  "DeconstructedSnowflake",
  "get_snowflake_codec",
  "generate",
  "parse",
  "is_valid",
  "binary",
  "extract_bits",
  "SnowflakeError",
  "InvalidSnowflakeError",
  "SnowflakeRangeError",
]
