"""Error handling and fallback responses."""
from campus.services.errors.error_handler import ErrorHandler
from campus.services.errors.fallback_responses import FallbackResponses
from campus.services.errors.exceptions import (
    AskProxyError,
    CompletionApiError,
    MethodNotAllowedError,
    MissingQueryError,
    ProxyCallFailedError,
    ServerMisconfiguredError,
)

__all__ = [
    "ErrorHandler",
    "FallbackResponses",
    "AskProxyError",
    "CompletionApiError",
    "MethodNotAllowedError",
    "MissingQueryError",
    "ProxyCallFailedError",
    "ServerMisconfiguredError",
]
