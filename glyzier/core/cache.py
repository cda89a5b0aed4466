import logging
from typing import Optional

import redis.asyncio as redis

from . import config

logger = logging.getLogger(__name__)

# The client connects lazily, so importing this module never needs a running Redis
redis_client = redis.from_url(config.REDIS_URL, decode_responses=True)


async def get_cache(key: str) -> Optional[str]:
    """
    Read a cached value.

    Args:
        key: cache key

    Returns:
        Optional[str]: the cached string, or None on a miss, when caching is
        disabled, or when Redis is unreachable
    """
    if not config.CACHE_ENABLED:
        return None
    try:
        return await redis_client.get(key)
    except Exception as e:
        logger.error(f"Error reading cache key {key}: {str(e)}")
        return None


async def set_cache(key: str, value: str, expire: int = 300) -> bool:
    if not config.CACHE_ENABLED:
        return False
    try:
        await redis_client.set(key, value, ex=expire)
        return True
    except Exception as e:
        logger.error(f"Error writing cache key {key}: {str(e)}")
        return False
