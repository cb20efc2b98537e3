"""Campus guide services.

Main Services:
- AskProxy: server-side relay between the chat UI and the completion API
- ChatClient: client-side session that always records an answer
- CompletionClient: single-shot OpenAI chat completion calls

Usage:
    from campus.services import AskProxy, ChatClient

    # Server side
    proxy = AskProxy()
    response = proxy.handle("POST", {"query": "Where is the mess?"})

    # Client side
    client = ChatClient("http://localhost:8000/api/ask")
    await client.submit_query("Where is the mess?")
"""
from campus.services.proxy import AskProxy
from campus.services.chat import ChatClient, ChatState
from campus.services.completion import CompletionClient

__all__ = [
    "AskProxy",
    "ChatClient",
    "ChatState",
    "CompletionClient",
]
