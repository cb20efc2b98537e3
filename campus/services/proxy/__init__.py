"""Server-side ask proxy."""
from campus.services.proxy.ask_proxy import AskProxy

__all__ = ["AskProxy"]
