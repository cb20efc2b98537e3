"""Tests for the chat client."""
import asyncio
import json

import httpx

from app.config import Settings
from app.main import app
from app.routes.ask import get_ask_proxy
from campus.services.chat.chat_client import ChatClient
from campus.services.proxy.ask_proxy import AskProxy

PROXY_URL = "http://testserver/api/ask"
FALLBACK = "Fallback: network issue or AI error."


def make_client(handler):
    """Build a ChatClient whose proxy calls go to a mock transport."""
    calls = []

    def recording_handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return handler(request)

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
    return ChatClient(proxy_url=PROXY_URL, http_client=http_client), calls


class TestChatClientSubmit:
    """Test cases for ChatClient.submit_query."""

    def test_success_prepends_answer(self):
        client, calls = make_client(lambda r: httpx.Response(200, json={"answer": "X"}))
        asyncio.run(client.submit_query("Where is the mess?"))

        assert len(calls) == 1
        assert [(h.question, h.answer) for h in client.history] == [("Where is the mess?", "X")]
        assert client.state.error is None

    def test_request_body(self):
        client, calls = make_client(lambda r: httpx.Response(200, json={"answer": "X"}))
        asyncio.run(client.submit_query("Dress code?"))

        assert calls[0].method == "POST"
        assert str(calls[0].url) == PROXY_URL
        assert json.loads(calls[0].content) == {"query": "Dress code?"}

    def test_blank_query_is_noop(self):
        client, calls = make_client(lambda r: httpx.Response(200, json={"answer": "X"}))
        for query in ["", "   ", "\n\t"]:
            asyncio.run(client.submit_query(query))

        assert calls == []
        assert client.history == []
        assert client.state.busy is False

    def test_history_is_most_recent_first(self):
        answers = iter(["first", "second"])
        client, _ = make_client(lambda r: httpx.Response(200, json={"answer": next(answers)}))

        async def run():
            await client.submit_query("Q1")
            await client.submit_query("Q2")

        asyncio.run(run())
        assert [(h.question, h.answer) for h in client.history] == [("Q2", "second"), ("Q1", "first")]

    def test_concurrent_submissions_ordered_by_completion(self):
        async def run():
            second_done = asyncio.Event()

            async def handler(request):
                query = json.loads(request.content)["query"]
                if query == "Q1":
                    await second_done.wait()
                return httpx.Response(200, json={"answer": f"answer to {query}"})

            client = ChatClient(
                proxy_url=PROXY_URL,
                http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler))
            )

            async def submit_second():
                await client.submit_query("Q2")
                second_done.set()

            await asyncio.gather(client.submit_query("Q1"), submit_second())
            return client

        client = asyncio.run(run())
        assert [(h.question, h.answer) for h in client.history] == [
            ("Q1", "answer to Q1"),
            ("Q2", "answer to Q2"),
        ]
        assert client.state.busy is False
        assert client.state.error is None

    def test_proxy_error_uses_fallback(self):
        client, _ = make_client(lambda r: httpx.Response(500, json={"error": "AI proxy failed"}))
        asyncio.run(client.submit_query("Is the lake open?"))

        assert len(client.history) == 1
        assert client.history[0].question == "Is the lake open?"
        assert client.history[0].answer == FALLBACK
        assert client.state.error == "AI proxy failed"

    def test_error_status_without_message(self):
        client, _ = make_client(lambda r: httpx.Response(502, json={}))
        asyncio.run(client.submit_query("hello"))

        assert client.history[0].answer == FALLBACK
        assert client.state.error == "AI error"

    def test_network_error_uses_fallback(self):
        def refused(request):
            raise httpx.ConnectError("connection refused", request=request)

        client, _ = make_client(refused)
        asyncio.run(client.submit_query("hello"))

        assert client.history[0].answer == FALLBACK
        assert client.state.error == "connection refused"
        assert client.state.busy is False

    def test_malformed_body_uses_fallback(self):
        client, _ = make_client(lambda r: httpx.Response(200, text="oops"))
        asyncio.run(client.submit_query("hello"))

        assert client.history[0].answer == FALLBACK
        assert client.state.error

    def test_missing_answer_field_uses_fallback(self):
        client, _ = make_client(lambda r: httpx.Response(200, json={"result": "X"}))
        asyncio.run(client.submit_query("hello"))

        assert client.history[0].answer == FALLBACK
        assert client.state.error == "Malformed response from proxy"

    def test_new_submission_clears_previous_error(self):
        responses = iter([
            httpx.Response(500, json={"error": "AI proxy failed"}),
            httpx.Response(200, json={"answer": "ok"}),
        ])
        client, _ = make_client(lambda r: next(responses))

        async def run():
            await client.submit_query("Q1")
            await client.submit_query("Q2")

        asyncio.run(run())
        assert client.state.error is None
        assert [h.answer for h in client.history] == ["ok", FALLBACK]


class TestChatClientState:
    """Busy flag and input field transitions."""

    def test_busy_while_outstanding(self):
        seen = []

        def handler(request):
            seen.append(client.state.busy)
            return httpx.Response(200, json={"answer": "X"})

        client, _ = make_client(handler)
        asyncio.run(client.submit_query("hello"))

        assert seen == [True]
        assert client.state.busy is False

    def test_submits_current_input_and_clears_it(self):
        client, calls = make_client(lambda r: httpx.Response(200, json={"answer": "X"}))
        client.state.query = "from the input box"
        asyncio.run(client.submit_query())

        assert len(calls) == 1
        assert client.history[0].question == "from the input box"
        assert client.state.query == ""

    def test_input_cleared_after_failure(self):
        client, _ = make_client(lambda r: httpx.Response(500, json={"error": "AI proxy failed"}))
        client.state.query = "hello"
        asyncio.run(client.submit_query())

        assert client.state.query == ""
        assert client.state.busy is False


class TestChatClientWithProxy:
    """Chat client talking to the real ask endpoint."""

    def test_proxy_failure_becomes_fallback(self):
        def timeout(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        proxy = AskProxy(
            config=Settings(OPENAI_API_KEY="test-key"),
            http_client=httpx.Client(transport=httpx.MockTransport(timeout))
        )
        app.dependency_overrides[get_ask_proxy] = lambda: proxy
        try:
            http_client = httpx.AsyncClient(transport=httpx.ASGITransport(app=app))
            client = ChatClient(proxy_url=PROXY_URL, http_client=http_client)
            asyncio.run(client.submit_query("Where is the library?"))
        finally:
            app.dependency_overrides.clear()

        assert client.history[0].answer == FALLBACK
        assert client.state.error == "AI proxy failed"

    def test_upstream_answer_reaches_history(self):
        proxy = AskProxy(
            config=Settings(OPENAI_API_KEY="test-key"),
            http_client=httpx.Client(transport=httpx.MockTransport(
                lambda r: httpx.Response(200, json={"choices": [{"message": {"content": "Second floor."}}]})
            ))
        )
        app.dependency_overrides[get_ask_proxy] = lambda: proxy
        try:
            http_client = httpx.AsyncClient(transport=httpx.ASGITransport(app=app))
            client = ChatClient(proxy_url=PROXY_URL, http_client=http_client)
            asyncio.run(client.submit_query("Where is the library?"))
        finally:
            app.dependency_overrides.clear()

        assert [(h.question, h.answer) for h in client.history] == [("Where is the library?", "Second floor.")]
        assert client.state.error is None
