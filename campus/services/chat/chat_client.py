"""Chat client that talks to the ask proxy and always produces an answer."""
from typing import List, Optional

import httpx
from pydantic import ValidationError

from app.config import settings
from campus.models.answer import AnswerRecord, AnswerResponse
from campus.services.chat.chat_state import ChatState
from campus.services.errors.error_handler import ErrorHandler
from campus.services.errors.fallback_responses import FallbackResponses
from campus.utils.logger import logger


class AskRequestError(Exception):
    """The proxy call did not yield a usable answer."""


class ChatClient:
    """
    Drives the user-facing question/answer exchange.

    Each submitted non-blank query produces exactly one history entry: the
    proxy's answer on success, or the fixed fallback answer on any failure.
    Submissions are not serialized; concurrent calls each prepend their
    entry when they resolve.
    """

    def __init__(
        self,
        proxy_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        state: Optional[ChatState] = None
    ):
        self.proxy_url = proxy_url or settings.ASK_PROXY_URL
        self.http_client = http_client
        self.state = state or ChatState()

    @property
    def history(self) -> List[AnswerRecord]:
        return self.state.history

    async def submit_query(self, query: Optional[str] = None) -> None:
        """
        Submit a question and record the outcome in the session history.

        Args:
            query: Question text; defaults to the current ``state.query``
        """
        question = self.state.query if query is None else query
        if not question or not question.strip():
            return

        self.state.busy = True
        self.state.clear_error()
        try:
            answer = await self._ask(question)
            self.state.prepend(AnswerRecord(question=question, answer=answer))
        except Exception as e:
            self.state.error = str(e) or FallbackResponses.get_response("client_error")
            fallback = ErrorHandler.handle_client_error(e)
            self.state.prepend(AnswerRecord(question=question, answer=fallback))
        finally:
            self.state.busy = False
            self.state.query = ""

    async def _ask(self, question: str) -> str:
        """POST the question to the proxy and return its answer."""
        if self.http_client is not None:
            response = await self.http_client.post(self.proxy_url, json={"query": question})
        else:
            async with httpx.AsyncClient() as client:
                response = await client.post(self.proxy_url, json={"query": question})

        try:
            body = response.json()
        except ValueError as e:
            raise AskRequestError(f"Malformed response from proxy (HTTP {response.status_code})") from e

        if not response.is_success:
            message = body.get("error") if isinstance(body, dict) else None
            raise AskRequestError(message or FallbackResponses.get_response("client_error"))

        try:
            answer = AnswerResponse.model_validate(body).answer
        except ValidationError as e:
            raise AskRequestError("Malformed response from proxy") from e
        logger.debug(f"Received answer ({len(answer)} chars)")
        return answer
