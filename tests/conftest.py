import pytest
from snowflake_codec import SnowflakeCodec


@pytest.fixture
def codec():
  """A fresh codec with the stock defaults: Unix epoch, shard 1, sequence starting at 1"""
  return SnowflakeCodec(epoch=0, shard_id=1, sequence=1)
