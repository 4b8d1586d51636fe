"""Disk caching utilities using diskcache."""

from typing import Any, Optional, Callable, TypeVar, ParamSpec
from functools import wraps
import diskcache as dc
from .config import settings
from .logging_config import get_logger

logger = get_logger(__name__)

# Type variables for decorator
P = ParamSpec('P')
T = TypeVar('T')

# Global cache instance and the directory it was opened on
_cache: Optional[dc.Cache] = None
_cache_dir: Optional[str] = None


def get_cache() -> dc.Cache:
    """Get or create the global cache instance for the configured directory."""
    global _cache, _cache_dir
    if _cache is None or _cache_dir != settings.cache_dir:
        if _cache is not None:
            _cache.close()
        _cache_dir = settings.cache_dir
        _cache = dc.Cache(
            directory=settings.cache_dir,
            size_limit=256 * 1024 * 1024,  # 256MB
            eviction_policy="least-recently-used",
        )
    return _cache


def cached(
    ttl_seconds: Optional[int] = None,
    key_prefix: str = "",
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """
    Decorator to cache function results on disk.
    
    Keys are built from ``repr`` of the arguments so they stay stable
    between interpreter runs.
    
    Args:
        ttl_seconds: Time to live in seconds. If None, uses default from settings.
        key_prefix: Prefix for cache keys.
    """
    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            cache = get_cache()
            expire = ttl_seconds
            if expire is None:
                expire = settings.cache_ttl_days * 24 * 60 * 60
            
            cache_key = f"{key_prefix}:{func.__name__}:{args!r}:{sorted(kwargs.items())!r}"
            
            try:
                result = cache.get(cache_key)
                if result is not None:
                    logger.debug(f"Cache hit for {cache_key}")
                    return result
            except Exception as e:
                logger.debug(f"Cache read failed for {cache_key}: {e}")
            
            result = func(*args, **kwargs)
            
            try:
                cache.set(cache_key, result, expire=expire)
            except Exception as e:
                logger.debug(f"Cache write failed for {cache_key}: {e}")
            
            return result
        
        return wrapper
    return decorator


def clear_cache() -> None:
    """Clear all cached data."""
    cache = get_cache()
    cache.clear()


def cache_stats() -> dict[str, Any]:
    """Get cache statistics."""
    cache = get_cache()
    return {
        "size": len(cache),
        "volume": cache.volume(),
        "statistics": cache.stats(enable=True),
    }
