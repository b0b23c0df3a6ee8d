"""Persisted chat models."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from friday.models.conversation import AgentLabel, ConversationMessage, Role


@dataclass
class Chat:
    """A chat owned by the conversation store."""

    id: str
    title: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def touch(self) -> None:
        """Update the last activity timestamp."""
        self.updated_at = datetime.now(UTC)


class StoredMessage(BaseModel):
    """A message saved to a chat."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    chat_id: str
    role: Role
    content: str
    agent: AgentLabel | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    def as_conversation_message(self) -> ConversationMessage:
        return ConversationMessage(role=self.role, content=self.content, agent=self.agent)


class ChatSummary(BaseModel):
    """Response model for a chat."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_chat(cls, chat: Chat) -> "ChatSummary":
        return cls(id=chat.id, title=chat.title, created_at=chat.created_at, updated_at=chat.updated_at)


class CreateChatRequest(BaseModel):
    """Request model for creating a chat."""

    title: str = Field(default="New Chat", min_length=1, max_length=200)


class SendMessageRequest(BaseModel):
    """Request model for posting a user message to a chat."""

    content: str = Field(..., min_length=1)

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Reject whitespace-only content."""
        if not v.strip():
            raise ValueError("Please enter a message")
        return v
