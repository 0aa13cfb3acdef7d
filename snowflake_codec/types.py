from datetime import datetime, timedelta, timezone
from pydantic import BaseModel, ConfigDict, Field


class DeconstructedSnowflake(BaseModel):
  """Data model representing a snowflake broken back into its fields.

  This is a derived view: it's recomputed on every parse and never stored.
  """

  model_config = ConfigDict(frozen=True)

  timestamp: int  # Absolute, in milliseconds since the Unix epoch (epoch already added back)
  shard_id: int = Field(ge=0, le=1023)  # 10 bits
  sequence: int = Field(ge=0, le=4095)  # 12 bits
  binary: str = Field(min_length=64, max_length=64)

  @property
  def created_at(self) -> datetime:
    """The timestamp as a timezone-aware UTC datetime"""
    return datetime(1970, 1, 1, tzinfo=timezone.utc) + timedelta(milliseconds=self.timestamp)
