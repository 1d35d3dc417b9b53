"""Request and response bodies for the HTTP API."""

from typing import Optional

from pydantic import BaseModel


class AddKnowledgeRequest(BaseModel):
    content: Optional[str] = None
    source: Optional[str] = None


class AskRequest(BaseModel):
    question: Optional[str] = None


class SuccessResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    method: Optional[str] = None


class AnswerResponse(BaseModel):
    answer: str


class ErrorResponse(BaseModel):
    error: str
    kind: Optional[str] = None
