import logging
from typing import List

from . import config
from .cache import redis_client

logger = logging.getLogger(__name__)

PRODUCT_LIST_PATTERN = "products:page:*"
DASHBOARD_STATS_KEY = "admin:dashboard:stats"


async def invalidate_pattern(pattern: str) -> bool:
    """
    Delete every cache key matching a glob pattern using SCAN.

    Args:
        pattern: Redis glob, e.g. "products:page:*"

    Returns:
        bool: True when the scan completed (or caching is off), False on error
    """
    if not config.CACHE_ENABLED:
        return True
    try:
        cursor = 0
        while True:
            cursor, keys = await redis_client.scan(cursor=cursor, match=pattern, count=100)
            if keys:
                logger.info(f"Invalidating {len(keys)} cache keys matching pattern: {pattern}")
                await redis_client.delete(*keys)
            if cursor == 0:
                break
        return True
    except Exception as e:
        logger.error(f"Error invalidating cache pattern {pattern}: {str(e)}")
        return False


async def invalidate_product_cache() -> bool:
    """Drop cached product listing pages and the admin stats after catalogue changes."""
    listing_ok = await invalidate_pattern(PRODUCT_LIST_PATTERN)
    stats_ok = await invalidate_specific_cache([DASHBOARD_STATS_KEY])
    return listing_ok and stats_ok


async def invalidate_dashboard_cache() -> bool:
    return await invalidate_specific_cache([DASHBOARD_STATS_KEY])


async def invalidate_specific_cache(cache_keys: List[str]) -> bool:
    if not config.CACHE_ENABLED:
        return True
    try:
        if cache_keys:
            await redis_client.delete(*cache_keys)
            logger.info(f"Invalidated specific cache keys: {cache_keys}")
        return True
    except Exception as e:
        logger.error(f"Error invalidating specific cache keys: {str(e)}")
        return False
