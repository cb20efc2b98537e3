"""Completion API access."""
from campus.services.completion.completion_client import CompletionClient, extract_answer
from campus.services.completion.completion_result import CompletionResult

__all__ = [
    "CompletionClient",
    "CompletionResult",
    "extract_answer",
]
