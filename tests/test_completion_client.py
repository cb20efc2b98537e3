"""Tests for completion payload handling."""
import httpx

from campus.services.completion.completion_client import CompletionClient, extract_answer


class TestExtractAnswer:
    """Test cases for extract_answer."""

    def test_first_choice_content(self):
        payload = {"choices": [
            {"message": {"content": "first"}},
            {"message": {"content": "second"}},
        ]}
        result = extract_answer(payload)
        assert result.answer == "first"
        assert not result.is_upstream_error()

    def test_error_message_when_no_choices(self):
        result = extract_answer({"error": {"message": "rate limited"}})
        assert result.answer == "rate limited"
        assert result.is_upstream_error()

    def test_empty_content_falls_through_to_error(self):
        payload = {"choices": [{"message": {"content": ""}}], "error": {"message": "quota"}}
        assert extract_answer(payload).answer == "quota"

    def test_no_answer(self):
        assert extract_answer({"choices": []}).answer == "No answer from AI"
        assert extract_answer({"error": "oops"}).answer == "No answer from AI"
        assert extract_answer({"choices": [{"text": "legacy"}]}).answer == "No answer from AI"


class TestCompletionClientLifecycle:
    """Test cases for CompletionClient resource handling."""

    def test_owned_client_closed_on_exit(self):
        with CompletionClient(api_key="test-key", model="gpt-4o-mini") as client:
            assert not client.client.is_closed()
        assert client.client.is_closed()

    def test_injected_client_not_closed(self):
        http_client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={})))
        with CompletionClient(api_key="test-key", model="gpt-4o-mini", http_client=http_client):
            pass
        assert not http_client.is_closed
