import pytest
import snowflake_codec
from snowflake_codec import SnowflakeCodec, get_snowflake_codec
from snowflake_codec.config import settings


@pytest.fixture
def default_codec():
  """The shared codec, with its settings restored after the test"""
  codec = get_snowflake_codec()
  epoch, shard_id, sequence = codec.epoch, codec.shard_id, codec.sequence
  yield codec
  codec.epoch, codec.shard_id, codec.sequence = epoch, shard_id, sequence


def test_get_snowflake_codec_is_a_singleton():
  assert get_snowflake_codec() is get_snowflake_codec()
  assert isinstance(get_snowflake_codec(), SnowflakeCodec)


def test_default_codec_is_built_from_settings():
  codec = get_snowflake_codec()
  assert codec.epoch == settings.SNOWFLAKE_EPOCH
  assert codec.shard_id == settings.SNOWFLAKE_SHARD_ID


def test_module_functions_share_the_default_counter(default_codec):
  default_codec.epoch = 0
  default_codec.shard_id = 1
  default_codec.sequence = 1
  assert snowflake_codec.generate(timestamp=1) == "4198401"
  assert default_codec.sequence == 2


def test_module_parse_uses_the_default_epoch(default_codec):
  default_codec.epoch = 1000
  snowflake = snowflake_codec.generate(timestamp=1500)
  assert snowflake_codec.parse(snowflake).timestamp == 1500
  assert snowflake_codec.parse(snowflake, epoch=0).timestamp == 500


def test_module_parse_round_trip_near_now(default_codec):
  from snowflake_codec.services.snowflake import timestamps

  before = timestamps.now_milliseconds()
  deconstructed = snowflake_codec.parse(snowflake_codec.generate())
  assert abs(deconstructed.timestamp - before) < 1000


def test_module_is_valid():
  assert snowflake_codec.is_valid("123") is False
  assert snowflake_codec.is_valid("12345678901234567890123") is False
  assert snowflake_codec.is_valid("175928847299117063") is True
