"""
Service error handling utilities.

Provides a decorator that maps domain exceptions raised by the service layer
to HTTPExceptions with consistent logging across user, session and photo
endpoints.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from photobooth.core.exceptions import (
    NotFoundError,
    PhotoboothException,
    StorageFaultError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_service_errors(func: F) -> F:
    """
    Decorator to handle service errors and transform them into HTTPExceptions.

    This centralizes:
    - Logging of errors with entity context
    - Mapping domain exceptions to HTTP status codes
    - The {"detail": message} error body
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except NotFoundError as e:
            logger.warning(
                "Resource not found",
                extra={"entity": e.entity, "entity_id": str(e.entity_id)},
            )
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=str(e),
            )

        except ValidationError as e:
            logger.warning("Invalid request", extra={"error": str(e), **e.details})
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e),
            )

        except StorageFaultError as e:
            logger.error("Storage failure", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=str(e),
            )

        except PhotoboothException as e:
            logger.error("Unhandled domain error", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=str(e),
            )

        except Exception as e:
            logger.exception(
                "Unexpected failure in service operation",
                extra={"error": str(e)},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred",
            )

    return wrapper  # type: ignore
