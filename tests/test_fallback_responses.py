"""Tests for fallback responses."""
from campus.services.errors.fallback_responses import FallbackResponses


class TestFallbackResponses:
    """Test cases for FallbackResponses."""

    def test_known_types(self):
        assert FallbackResponses.get_response("client_fallback") == "Fallback: network issue or AI error."
        assert FallbackResponses.get_response("no_answer") == "No answer from AI"

    def test_unknown_type_uses_generic_error(self):
        assert FallbackResponses.get_response("missing") == "AI error"
