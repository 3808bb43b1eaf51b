# apps/analytics/performance.py
from functools import wraps
from django.conf import settings
import time
import logging

logger = logging.getLogger(__name__)


def monitor_query_performance(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.time()
        result = func(*args, **kwargs)
        execution_time = time.time() - start_time

        if execution_time > settings.ANALYTICS_SLOW_QUERY_SECONDS:  # Log slow queries
            logger.warning(f"Slow query: {func.__name__} took {execution_time:.2f}s")
        else:
            logger.debug(f"{func.__name__} took {execution_time * 1000:.1f}ms")

        return result
    return wrapper
