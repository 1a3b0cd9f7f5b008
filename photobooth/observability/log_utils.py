"""
Structured logging helpers for the upload pipeline.

Upload log records share the same extra keys (source, stored_file,
session_id, photo_id) so a stored file can be followed from write to link.

Dependencies: logging (stdlib)
System role: Upload logging helpers
"""

import logging


def upload_context(
    source: str | None = None,
    stored_file: str | None = None,
    session_id: int | None = None,
    photo_id: int | None = None,
) -> dict[str, str]:
    """
    Build the log extra for an upload event.

    Unset fields are left out. Values are stringified so log formatters
    never see None or ints mixed into the same key.
    """
    fields = {
        "source": source,
        "stored_file": stored_file,
        "session_id": session_id,
        "photo_id": photo_id,
    }
    return {key: str(value) for key, value in fields.items() if value is not None}


def log_upload(
    logger: logging.Logger,
    level: int,
    message: str,
    **fields,
) -> None:
    """Log an upload event with its upload context."""
    logger.log(level, message, extra=upload_context(**fields))


def log_upload_failure(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **fields,
) -> None:
    """
    Log a failed upload step with traceback and upload context.

    Call from inside the except block that caught exc.
    """
    extra = upload_context(**fields)
    extra.update({
        "error_type": type(exc).__name__,
        "error_msg": str(exc),
    })
    logger.exception(message, extra=extra)
