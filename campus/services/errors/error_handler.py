"""Error handling utilities."""
from campus.models.response import ProxyResponse
from campus.services.errors.exceptions import AskProxyError, ProxyCallFailedError
from campus.services.errors.fallback_responses import FallbackResponses
from campus.utils.logger import logger


class ErrorHandler:
    """Centralized conversion of failures into displayable responses."""

    @staticmethod
    def handle_proxy_error(error: AskProxyError) -> ProxyResponse:
        """Turn a proxy error into its JSON error response."""
        if isinstance(error, ProxyCallFailedError):
            logger.error(f"AI proxy error: {str(error.__cause__ or error)}", exc_info=error)
        else:
            logger.warning(f"Rejected ask request ({error.status_code}): {error.message}")
        return ProxyResponse.error(error.status_code, error.message)

    @staticmethod
    def handle_upstream_error(message: str) -> ProxyResponse:
        """Relay an upstream error message as a best-effort answer."""
        logger.warning(f"Completion API returned an error: {message}")
        return ProxyResponse.ok(message)

    @staticmethod
    def handle_client_error(error: Exception) -> str:
        """Log a failed chat exchange and return the fallback answer."""
        logger.error(f"Chat request failed: {str(error)}")
        return FallbackResponses.get_response("client_fallback")
