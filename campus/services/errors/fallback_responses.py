"""Fallback responses for error scenarios."""


class FallbackResponses:
    """Predefined user-visible strings used when no real answer is available."""

    ENGLISH_RESPONSES = {
        # Shown in chat history when the proxy call fails for any reason
        "client_fallback": "Fallback: network issue or AI error.",
        # Upstream payload had neither a completion nor an error message
        "no_answer": "No answer from AI",
        # Proxy answered with a failure status but no error text
        "client_error": "AI error",
    }

    @classmethod
    def get_response(cls, error_type: str) -> str:
        """
        Get fallback response for error type.

        Args:
            error_type: Type of error (client_fallback, no_answer, client_error)

        Returns:
            Fallback response text
        """
        return cls.ENGLISH_RESPONSES.get(error_type, cls.ENGLISH_RESPONSES["client_error"])
