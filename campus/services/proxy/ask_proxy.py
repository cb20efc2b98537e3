"""Ask proxy: forwards campus questions to the completion API without exposing its key."""
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from app.config import Settings, settings
from campus.models.question import QueryRequest
from campus.models.response import ProxyResponse
from campus.services.completion.completion_client import CompletionClient, extract_answer
from campus.services.errors.error_handler import ErrorHandler
from campus.services.errors.exceptions import (
    AskProxyError,
    MethodNotAllowedError,
    MissingQueryError,
    ProxyCallFailedError,
    ServerMisconfiguredError,
)
from campus.services.prompts.prompt_builder import PromptBuilder
from campus.utils.logger import logger


class AskProxy:
    """
    Stateless request handler between the chat UI and the completion API.

    Every call is independent: one request in, at most one outbound
    completion call, one response out.
    """

    ALLOWED_METHOD = "POST"

    def __init__(
        self,
        config: Optional[Settings] = None,
        prompt_builder: Optional[PromptBuilder] = None,
        http_client: Optional[httpx.Client] = None
    ):
        self.config = config or settings
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.http_client = http_client

    def handle(self, method: str, body: Any) -> ProxyResponse:
        """
        Handle one ask request.

        Args:
            method: HTTP method of the incoming request
            body: Decoded JSON body (anything that is not an object counts as empty)

        Returns:
            ProxyResponse with the status code and JSON body to send back
        """
        try:
            return self._handle(method, body)
        except AskProxyError as e:
            return ErrorHandler.handle_proxy_error(e)

    def _handle(self, method: str, body: Any) -> ProxyResponse:
        if (method or "").upper() != self.ALLOWED_METHOD:
            raise MethodNotAllowedError()

        request = self._parse_request(body)

        # The key is read per request so a missing key only fails asks, not startup
        api_key = self.config.OPENAI_API_KEY
        if not api_key:
            raise ServerMisconfiguredError()

        messages = self.prompt_builder.build_messages(request.query)
        try:
            with self._build_client(api_key) as client:
                payload = client.complete(
                    messages=messages,
                    max_tokens=self.config.ASK_MAX_TOKENS,
                    temperature=self.config.ASK_TEMPERATURE
                )
            result = extract_answer(payload)
        except Exception as e:
            raise ProxyCallFailedError() from e

        if result.is_upstream_error():
            return ErrorHandler.handle_upstream_error(result.answer)

        logger.info(f"Answered query ({len(request.query)} chars)")
        return ProxyResponse.ok(result.answer)

    def _parse_request(self, body: Any) -> QueryRequest:
        """Validate the request body into a QueryRequest."""
        if not isinstance(body, dict):
            body = {}
        try:
            return QueryRequest.model_validate(body)
        except ValidationError as e:
            raise MissingQueryError() from e

    def _build_client(self, api_key: str) -> CompletionClient:
        """Build a completion client for a single request."""
        return CompletionClient(
            api_key=api_key,
            model=self.config.OPENAI_MODEL,
            base_url=self.config.OPENAI_BASE_URL,
            timeout_seconds=self.config.ASK_TIMEOUT_SECONDS,
            http_client=self.http_client
        )
