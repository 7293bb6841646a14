from .client import Late
from .config import ClientOptions
from .errors import (
    LateApiError,
    MissingApiKeyError,
    RateLimitError,
    ValidationError,
    parse_api_error,
)
from .common import SendRequestError

__all__ = [
    "Late",
    "ClientOptions",
    "LateApiError",
    "MissingApiKeyError",
    "RateLimitError",
    "ValidationError",
    "SendRequestError",
    "parse_api_error",
]
