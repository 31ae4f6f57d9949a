"""
View decorators for error handling and request logging.
"""
import functools
import uuid
from typing import Any, Callable, Tuple, Type
from flask import Response
from logger_config import get_logger
from utils.exceptions import ParameterStoreError, S3OperationError

logger = get_logger(__name__)

REMOTE_ERRORS: Tuple[Type[Exception], ...] = (
    S3OperationError,
    ParameterStoreError,
)


def remote_call(
    error_status: int,
    errors: Tuple[Type[Exception], ...] = REMOTE_ERRORS
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Decorator for views that forward to a single AWS call.

    Provides:
    - Request correlation IDs for logging
    - Mapping of remote errors to an empty response with ``error_status``

    Error details never reach the client; they are logged only.

    Args:
        error_status: HTTP status returned when one of ``errors`` is raised
        errors: Exception types treated as remote-call failures

    Returns:
        Decorator for a Flask view function
    """
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            correlation_id = str(uuid.uuid4())

            logger.info(
                f"Handler {func.__name__} invoked",
                extra={
                    "correlation_id": correlation_id,
                    "handler": func.__name__,
                }
            )

            try:
                result = func(*args, **kwargs)
            except errors as e:
                logger.warning(
                    f"Handler {func.__name__} remote call failed: {str(e)}",
                    extra={"correlation_id": correlation_id}
                )
                return Response(status=error_status)

            logger.info(
                f"Handler {func.__name__} completed successfully",
                extra={"correlation_id": correlation_id}
            )
            return result

        return wrapper

    return decorator
