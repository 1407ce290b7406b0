"""Request logging decorator for route handlers."""

import logging
import time
from functools import wraps
from typing import Callable

from flask import request
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


def log_request(include_response_time: bool = True):
    """Decorator for request/response logging.

    Args:
        include_response_time: Whether to log response time

    Returns:
        Decorated function with request/response logging
    """
    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def decorated_function(*args, **kwargs):
            start_time = time.time() if include_response_time else None

            logger.info(
                f"Request: {request.method} {request.path}",
                extra={
                    "method": request.method,
                    "path": request.path,
                    "endpoint": request.endpoint,
                    "ip": request.remote_addr,
                    "content_length": request.content_length,
                }
            )

            try:
                response = f(*args, **kwargs)

                if include_response_time:
                    duration = time.time() - start_time
                    logger.info(
                        f"Response: {request.method} {request.path} - {duration:.3f}s",
                        extra={
                            "method": request.method,
                            "path": request.path,
                            "endpoint": request.endpoint,
                            "response_time": duration,
                        }
                    )

                return response

            except HTTPException:
                raise
            except Exception as err:
                logger.error(
                    f"Error: {request.method} {request.path} - {err}",
                    extra={
                        "method": request.method,
                        "path": request.path,
                        "endpoint": request.endpoint,
                        "ip": request.remote_addr,
                        "error": str(err),
                    },
                    exc_info=True
                )
                raise

        return decorated_function
    return decorator
