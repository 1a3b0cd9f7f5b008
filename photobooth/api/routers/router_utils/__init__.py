"""
Router utility functions.

Contains helper functions extracted from router endpoints to keep them clean.
"""

from photobooth.api.routers.router_utils.error_handling import handle_service_errors
from photobooth.api.routers.router_utils.responses import (
    upload_error_response,
    upload_failure,
)

__all__ = [
    "handle_service_errors",
    "upload_error_response",
    "upload_failure",
]
