"""Response data models."""
from typing import Any, Dict

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error response body."""
    error: str


class ProxyResponse(BaseModel):
    """Status code and JSON body produced by the ask proxy."""
    status_code: int
    body: Dict[str, Any]

    @classmethod
    def ok(cls, answer: str) -> "ProxyResponse":
        return cls(status_code=200, body={"answer": answer})

    @classmethod
    def error(cls, status_code: int, message: str) -> "ProxyResponse":
        return cls(status_code=status_code, body=ErrorResponse(error=message).model_dump())
