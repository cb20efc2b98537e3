"""Answer data models."""
from pydantic import BaseModel, ConfigDict


class AnswerResponse(BaseModel):
    """Successful ask response body."""
    answer: str


class AnswerRecord(BaseModel):
    """One question/answer exchange kept in a chat session's history."""
    model_config = ConfigDict(frozen=True)

    question: str
    answer: str
