"""Session state owned by a chat client."""
from dataclasses import dataclass, field
from typing import List, Optional

from campus.models.answer import AnswerRecord


@dataclass
class ChatState:
    """UI state for one chat session. History is most-recent-first."""
    query: str = ""
    history: List[AnswerRecord] = field(default_factory=list)
    busy: bool = False
    error: Optional[str] = None

    def prepend(self, record: AnswerRecord) -> None:
        """Add a completed exchange to the front of the history."""
        self.history.insert(0, record)

    def clear_error(self) -> None:
        """Dismiss the error indicator."""
        self.error = None
