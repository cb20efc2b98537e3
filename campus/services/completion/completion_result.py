"""Result types for completion calls."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class CompletionResult:
    """Answer text extracted from one completion API payload."""
    answer: str
    upstream_error: Optional[str] = None  # Set when the answer is an upstream error message

    def is_upstream_error(self) -> bool:
        """Check if the answer was relayed from an upstream error payload."""
        return self.upstream_error is not None
