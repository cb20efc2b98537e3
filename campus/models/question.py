"""Question data models."""
from pydantic import BaseModel, field_validator


class QueryRequest(BaseModel):
    """Ask request body."""
    query: str

    @field_validator("query")
    @classmethod
    def query_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("query must not be empty")
        return value
