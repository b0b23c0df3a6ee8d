"""Conversation request, response and message models."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

Role = Literal["user", "assistant"]
AgentLabel = Literal["chat", "weather", "news"]


class ConversationMessage(BaseModel):
    """A user or assistant message as exchanged with callers."""

    role: Role
    content: str = Field(..., min_length=1)
    agent: AgentLabel | None = None

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Reject whitespace-only content."""
        if not v.strip():
            raise ValueError("Message content cannot be empty")
        return v


class ChatRequest(BaseModel):
    """Request model for the stateless chat endpoint."""

    messages: list[ConversationMessage] = Field(..., min_length=1)

    @model_validator(mode="after")
    def validate_last_message(self) -> "ChatRequest":
        """The history must end with the user's message."""
        if self.messages[-1].role != "user":
            raise ValueError("The last message must come from the user")
        return self


class ReplyMetadata(BaseModel):
    """Metadata describing how a reply was produced."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    persona: str
    model: str
    agent: AgentLabel
    tool_name: str | None = None
    tool_response: str | None = None
    rounds: int = 0


class ChatResponse(BaseModel):
    """Response model for chat endpoints."""

    message: ConversationMessage
    history: list[ConversationMessage]
    metadata: ReplyMetadata


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    status: str
    timestamp: datetime
    version: str
