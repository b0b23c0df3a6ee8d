"""Tests for data models."""

import json
from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from friday.models.chat import Chat, ChatSummary, SendMessageRequest, StoredMessage
from friday.models.conversation import ChatRequest, ChatResponse, ConversationMessage, HealthResponse, ReplyMetadata


class TestConversationModels:
    """Tests for conversation request/response models."""

    def test_conversation_message_valid(self):
        """Test valid conversation message."""
        message = ConversationMessage(role="user", content="Hello")
        assert message.role == "user"
        assert message.content == "Hello"
        assert message.agent is None

    def test_conversation_message_with_agent(self):
        """Test assistant message carrying an agent label."""
        message = ConversationMessage(role="assistant", content="Sunny.", agent="weather")
        assert message.agent == "weather"

    def test_conversation_message_invalid_role(self):
        """Test conversation message with invalid role."""
        with pytest.raises(ValidationError) as exc_info:
            ConversationMessage(role="system", content="Hello")  # type: ignore
        assert "Input should be 'user' or 'assistant'" in str(exc_info.value)

    def test_conversation_message_invalid_agent(self):
        """Test unknown agent labels are rejected."""
        with pytest.raises(ValidationError):
            ConversationMessage(role="assistant", content="Hi", agent="stocks")  # type: ignore

    def test_conversation_message_blank_content(self):
        """Test empty and whitespace content are rejected."""
        with pytest.raises(ValidationError):
            ConversationMessage(role="user", content="")
        with pytest.raises(ValidationError):
            ConversationMessage(role="user", content=" \n ")

    def test_chat_request_from_json(self):
        """Test chat request parsing from JSON."""
        data = json.loads('{"messages": [{"role": "user", "content": "Hello, FRIDAY"}]}')
        request = ChatRequest.model_validate(data)
        assert request.messages[0].content == "Hello, FRIDAY"

    def test_chat_request_requires_user_last(self):
        """Test the history must end with a user message."""
        with pytest.raises(ValidationError, match="last message must come from the user"):
            ChatRequest(
                messages=[
                    ConversationMessage(role="user", content="Hi"),
                    ConversationMessage(role="assistant", content="Hello"),
                ]
            )

    def test_chat_request_requires_messages(self):
        """Test an empty history is rejected."""
        with pytest.raises(ValidationError):
            ChatRequest(messages=[])

    def test_reply_metadata_camel_case(self):
        """Test metadata serializes with camelCase keys."""
        metadata = ReplyMetadata(
            persona="tony",
            model="claude",
            agent="weather",
            tool_name="get_real_time_weather",
            tool_response="Sunny.",
            rounds=2,
        )

        dumped = metadata.model_dump(by_alias=True)

        assert dumped["toolName"] == "get_real_time_weather"
        assert dumped["toolResponse"] == "Sunny."
        assert ReplyMetadata.model_validate(dumped) == metadata

    def test_chat_response_structure(self):
        """Test the response envelope."""
        reply = ConversationMessage(role="assistant", content="Hi", agent="chat")
        response = ChatResponse(
            message=reply,
            history=[ConversationMessage(role="user", content="Hey"), reply],
            metadata=ReplyMetadata(persona="tony", model="claude", agent="chat"),
        )

        dumped = response.model_dump(by_alias=True)
        assert set(dumped) == {"message", "history", "metadata"}
        assert dumped["metadata"]["toolName"] is None

    def test_health_response_valid(self):
        """Test valid health response."""
        now = datetime.now(UTC)
        response = HealthResponse(status="healthy", timestamp=now, version="1.0.0")
        assert response.status == "healthy"
        assert response.timestamp == now


class TestChatModels:
    """Tests for persisted chat models."""

    def test_chat_touch(self):
        """Test touch advances the activity timestamp."""
        chat = Chat(id="c1", title="New Chat")
        before = chat.updated_at
        chat.touch()
        assert chat.updated_at >= before
        assert chat.created_at <= chat.updated_at

    def test_stored_message_round_trip(self):
        """Test conversion back to a conversation message keeps the agent."""
        stored = StoredMessage(id="m1", chat_id="c1", role="assistant", content="Sunny.", agent="weather")
        assert stored.as_conversation_message() == ConversationMessage(
            role="assistant", content="Sunny.", agent="weather"
        )
        assert "chatId" in stored.model_dump(by_alias=True)

    def test_chat_summary(self):
        """Test summary built from a chat."""
        chat = Chat(id="c1", title="Ops")
        summary = ChatSummary.from_chat(chat)
        assert summary.id == "c1"
        assert summary.title == "Ops"

    def test_send_message_request_blank(self):
        """Test blank messages are rejected."""
        with pytest.raises(ValidationError, match="Please enter a message"):
            SendMessageRequest(content="   ")
