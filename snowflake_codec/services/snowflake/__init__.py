from .codec import SnowflakeCodec, generate, get_snowflake_codec, is_valid, parse
from .layout import binary, extract_bits

# Now we get: from snowflake_codec.services.snowflake import SnowflakeCodec
# Instead of: from snowflake_codec.services.snowflake.codec import SnowflakeCodec
__all__ = [
  "SnowflakeCodec",
  "get_snowflake_codec",
  "generate",
  "parse",
  "is_valid",
  "binary",
  "extract_bits",
]
