"""Client-side chat session."""
from campus.services.chat.chat_client import AskRequestError, ChatClient
from campus.services.chat.chat_state import ChatState

__all__ = [
    "AskRequestError",
    "ChatClient",
    "ChatState",
]
