"""Ask proxy error taxonomy."""
from typing import Optional


class AskProxyError(Exception):
    """Base class for errors the ask proxy turns into a JSON error response."""

    status_code: int = 500
    message: str = "AI proxy failed"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class MethodNotAllowedError(AskProxyError):
    """Request used a method other than POST."""
    status_code = 405
    message = "Method not allowed"


class MissingQueryError(AskProxyError):
    """Request body carried no usable query."""
    status_code = 400
    message = "Missing query"


class ServerMisconfiguredError(AskProxyError):
    """The completion API credential is not configured."""
    status_code = 500
    message = "Server misconfigured: missing OPENAI_API_KEY"


class ProxyCallFailedError(AskProxyError):
    """The outbound completion call itself failed."""
    status_code = 500
    message = "AI proxy failed"


class CompletionApiError(Exception):
    """Raised by the completion client when no usable payload came back."""
