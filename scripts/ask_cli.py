"""Interactive terminal chat against a running ask proxy."""
import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import settings
from campus.services.chat.chat_client import ChatClient
from campus.utils.logger import logger


def print_history(client: ChatClient, limit: int) -> None:
    """Print the most recent exchanges, newest first."""
    for record in client.history[:limit]:
        print(f"Q: {record.question}")
        print(f"A: {record.answer}")
        print()


async def run_chat(proxy_url: str, limit: int) -> None:
    """
    Read questions from stdin until EOF or an empty line.

    Args:
        proxy_url: Ask proxy endpoint
        limit: Number of history entries shown after each answer
    """
    client = ChatClient(proxy_url=proxy_url)
    logger.info(f"Chatting with {proxy_url}")

    while True:
        try:
            line = input("Ask Sumi> ")
        except EOFError:
            break
        if not line.strip():
            break

        client.state.query = line
        await client.submit_query()

        if client.state.error:
            print(f"Error: {client.state.error}")
        print_history(client, limit)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Chat with the campus guide from the terminal")
    parser.add_argument("--url", default=settings.ASK_PROXY_URL, help="Ask proxy URL")
    parser.add_argument("--history", type=int, default=5, help="History entries to show")
    args = parser.parse_args()

    asyncio.run(run_chat(args.url, args.history))
