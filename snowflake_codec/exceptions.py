"""Errors raised while decoding snowflakes.

Each error derives from ValueError, so callers that only care about
"bad input" can keep catching ValueError.
"""


class SnowflakeError(ValueError):
  """Base class for every snowflake decoding error."""


class InvalidSnowflakeError(SnowflakeError):
  """The snowflake is not a base-10 non-negative integer."""


class SnowflakeRangeError(SnowflakeError):
  """The snowflake does not fit in an unsigned 64-bit integer."""
