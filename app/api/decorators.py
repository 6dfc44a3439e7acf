import inspect
import logging
from functools import wraps

from fastapi import HTTPException, status

from app.core.exceptions import VehicleValidationError

logger = logging.getLogger(__name__)

# Raised on purpose by handlers and rendered by the app's exception handlers
PASSTHROUGH_EXCEPTIONS = (HTTPException, VehicleValidationError)

def handle_exceptions(message: str):
    """
    Turn unexpected errors raised by a route handler into a 500 response.

    The traceback is logged; the client only receives ``message``.
    """
    def decorator(func):
        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def wrapper(*args, **kwargs):
                try:
                    return await func(*args, **kwargs)
                except PASSTHROUGH_EXCEPTIONS:
                    raise
                except Exception:
                    logger.exception("Unhandled error in %s", func.__name__)
                    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)
            return wrapper

        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except PASSTHROUGH_EXCEPTIONS:
                raise
            except Exception:
                logger.exception("Unhandled error in %s", func.__name__)
                raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)
        return wrapper
    return decorator
