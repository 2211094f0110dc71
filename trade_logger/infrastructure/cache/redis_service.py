import logging
from typing import Optional

import redis

from trade_logger.core.errors import StorageUnavailable
from trade_logger.core.interfaces.trade_store import ITradeStore

logger = logging.getLogger(__name__)


class RedisTradeStore(ITradeStore):
    def __init__(self, redis_url: str, key: str = "trades", client: Optional[redis.Redis] = None):
        self.key = key
        self.client = client
        if self.client is None:
            try:
                self.client = redis.from_url(redis_url, decode_responses=True)
                # Test connection
                self.client.ping()
                logger.info("Connected to Redis trade store.")
            except redis.RedisError as e:
                raise StorageUnavailable(f"Failed to connect to Redis: {e}") from e

    def load(self) -> Optional[str]:
        try:
            return self.client.get(self.key)
        except redis.RedisError as e:
            raise StorageUnavailable(f"Redis get error: {e}") from e

    def save(self, blob: str) -> None:
        try:
            self.client.set(self.key, blob)
        except redis.RedisError as e:
            raise StorageUnavailable(f"Redis set error: {e}") from e
