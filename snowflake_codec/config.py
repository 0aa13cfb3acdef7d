# Environment variables for the default snowflake codec
import os
from pydantic_settings import BaseSettings
from snowflake_codec.services.logger import app_logger
from dotenv import load_dotenv

load_dotenv()

def get_env_with_logging(key: str, default: str = None) -> str:
  """Get environment variable with logging"""
  value = os.getenv(key, default)
  if not value:
    app_logger.info(f"Environment variable '{key}' not found, using default: {default}")
    value = default
  return value

class Settings(BaseSettings):
  # Milliseconds since the Unix epoch that mark the zero point of the timestamp field
  SNOWFLAKE_EPOCH: int = get_env_with_logging("SNOWFLAKE_EPOCH", "0")

  # Shard/worker id of this process. Wraps modulo 1024 when encoded.
  SNOWFLAKE_SHARD_ID: int = get_env_with_logging("SNOWFLAKE_SHARD_ID", "1")

  # Starting value of the sequence counter
  SNOWFLAKE_SEQUENCE: int = get_env_with_logging("SNOWFLAKE_SEQUENCE", "1")

  LOG_LEVEL: str = get_env_with_logging("LOG_LEVEL", "INFO")

settings = Settings()

app_logger.setLevel(settings.LOG_LEVEL.upper())
