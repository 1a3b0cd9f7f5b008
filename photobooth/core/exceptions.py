"""
Exception hierarchy for the Photobooth application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class PhotoboothException(Exception):
    """Base exception for all Photobooth application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return the human-readable message."""
        return self.message


class NotFoundError(PhotoboothException):
    """Raised when a referenced user, session or photo does not exist."""

    def __init__(
        self,
        entity: str,
        entity_id: Any,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize not found error.

        Args:
            entity: Entity kind ("User", "Session", "Photo")
            entity_id: Identifier that was looked up
            details: Additional context
        """
        details = details or {}
        details.update({"entity": entity, "entity_id": entity_id})
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found with id: {entity_id}", details)


class ValidationError(PhotoboothException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class InvalidInputError(ValidationError):
    """Raised for unusable upload payloads: malformed base64, empty file, bad extension."""

    pass


class StorageFaultError(PhotoboothException):
    """Raised when writing an uploaded file to storage fails."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize storage fault.

        Args:
            message: Error message
            path: Destination path that could not be written
            details: Additional context
        """
        details = details or {}
        if path:
            details["path"] = path
        super().__init__(message, details)


class UploadLinkError(PhotoboothException):
    """
    Raised when an uploaded file was saved but no photo record could be created.

    The file stays on disk; filename and image_url identify it to the caller.
    The original failure is kept as ``cause``.
    """

    def __init__(
        self,
        cause: Exception,
        filename: str,
        image_url: str,
    ) -> None:
        """
        Initialize upload link error from the failure raised while linking.

        Args:
            cause: Exception raised while creating the photo record
            filename: Generated filename of the saved file
            image_url: Public URL of the saved file
        """
        self.cause = cause
        self.filename = filename
        self.image_url = image_url
        if isinstance(cause, NotFoundError):
            reason = cause.message
        else:
            reason = "Photo record could not be created"
        super().__init__(
            f"{reason}. File was saved as {image_url} but no photo record was created",
            {"filename": filename, "image_url": image_url},
        )

    @property
    def is_not_found(self) -> bool:
        """True when linking failed because the session does not exist."""
        return isinstance(self.cause, NotFoundError)
