"""Chat relay — request/response models."""

from pydantic import BaseModel


class ChatRequest(BaseModel):
    message: str = ""


class ChatReply(BaseModel):
    response: str


class ChatErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    service: str
