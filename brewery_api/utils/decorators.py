# brewery_api/utils/decorators.py
from functools import wraps
from time import perf_counter

from brewery_api.core.logging import get_logger

logger = get_logger(__name__)


def log_request(func):
    """
    Logs how long an async endpoint took and whether it raised.
    FastAPI still sees the original signature through ``__wrapped__``.
    """

    @wraps(func)
    async def wrapper(*args, **kwargs):
        start_time = perf_counter()
        try:
            response = await func(*args, **kwargs)
        except Exception as exc:
            logger.info(
                "Endpoint %s raised %s after %.4f seconds",
                func.__name__, type(exc).__name__, perf_counter() - start_time,
            )
            raise
        logger.info("Endpoint %s finished in %.4f seconds", func.__name__, perf_counter() - start_time)
        return response

    return wrapper
