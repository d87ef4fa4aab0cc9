"""timberpy - Async Python client for the Timber accounting API."""

from timberpy._version import __version__
from timberpy.client import TimberClient, create_client
from timberpy.environment import Environment, detect_environment
from timberpy.exceptions import (
    TimberAPIError,
    TimberCancelledError,
    TimberError,
    TimberFormDataError,
    TimberValidationError,
)
from timberpy.forms import FormPayload, get_form_data
from timberpy.uploads import CancelToken, UploadProgress

__all__ = [
    "__version__",
    "TimberClient",
    "create_client",
    "Environment",
    "detect_environment",
    "FormPayload",
    "get_form_data",
    "CancelToken",
    "UploadProgress",
    "TimberError",
    "TimberAPIError",
    "TimberCancelledError",
    "TimberFormDataError",
    "TimberValidationError",
]
