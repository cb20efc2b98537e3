"""Client for the hosted chat-completion API."""
from typing import Any, Dict, List, Optional

import httpx
from openai import APIConnectionError, APIStatusError, OpenAI

from campus.services.completion.completion_result import CompletionResult
from campus.services.errors.exceptions import CompletionApiError
from campus.services.errors.fallback_responses import FallbackResponses
from campus.utils.logger import logger


class CompletionClient:
    """Issues single, non-retried chat completion requests using the OpenAI SDK."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        http_client: Optional[httpx.Client] = None
    ):
        client_kwargs: Dict[str, Any] = {
            "api_key": api_key,
            "base_url": base_url,
            "max_retries": 0,
        }
        if timeout_seconds is not None:
            client_kwargs["timeout"] = timeout_seconds
        if http_client is not None:
            client_kwargs["http_client"] = http_client

        self.client = OpenAI(**client_kwargs)
        self.model = model
        # An injected transport belongs to the caller and stays open
        self._owns_http_client = http_client is None

    def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        if self._owns_http_client:
            self.client.close()

    def __enter__(self) -> "CompletionClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def complete(
        self,
        messages: List[Dict[str, str]],
        max_tokens: int,
        temperature: float
    ) -> Dict[str, Any]:
        """
        Send one chat completion request and return the raw JSON payload.

        Error payloads (including those sent with a non-2xx status) are
        returned as-is so the caller can relay their message.

        Args:
            messages: System and user messages
            max_tokens: Upper bound on generated tokens
            temperature: Sampling temperature

        Returns:
            Decoded JSON payload from the completion API

        Raises:
            CompletionApiError: On transport failure or a non-JSON response
        """
        try:
            raw = self.client.chat.completions.with_raw_response.create(
                model=self.model,
                messages=messages,  # type: ignore
                max_tokens=max_tokens,
                temperature=temperature
            )
            response = raw.http_response
        except APIStatusError as e:
            logger.debug(f"Completion API returned HTTP {e.status_code}")
            response = e.response
        except APIConnectionError as e:
            raise CompletionApiError(f"completion API connection error: {str(e)}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise CompletionApiError("completion API returned non-JSON response") from e

        if not isinstance(payload, dict):
            raise CompletionApiError("completion API response must be an object")
        return payload


def extract_answer(payload: Dict[str, Any]) -> CompletionResult:
    """
    Pick the displayable answer out of a completion API payload.

    Tries ``choices[0].message.content``, then ``error.message``, then the
    fixed "no answer" string.
    """
    choices = payload.get("choices")
    if isinstance(choices, list) and choices and isinstance(choices[0], dict):
        message = choices[0].get("message")
        if isinstance(message, dict):
            content = message.get("content")
            if isinstance(content, str) and content:
                return CompletionResult(answer=content)

    error = payload.get("error")
    if isinstance(error, dict):
        error_message = error.get("message")
        if isinstance(error_message, str) and error_message:
            return CompletionResult(answer=error_message, upstream_error=error_message)

    return CompletionResult(answer=FallbackResponses.get_response("no_answer"))
