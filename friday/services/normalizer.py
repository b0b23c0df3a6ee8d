"""Conversions between model messages and the external message contract."""

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage

from friday.errors import InvalidReply
from friday.models.conversation import AgentLabel, ConversationMessage


def message_text(message: BaseMessage | None) -> str:
    """Extract the textual content of a message.

    Plain string content is returned unchanged. Chunked content keeps the
    text chunks in order, drops everything else and trims the result.
    """
    if message is None:
        return ""

    content = message.content
    if isinstance(content, str):
        return content

    parts = []
    for chunk in content:
        if isinstance(chunk, str):
            parts.append(chunk)
        elif isinstance(chunk, dict) and chunk.get("text"):
            parts.append(str(chunk["text"]))

    return "".join(parts).strip()


def is_tool_request(message: BaseMessage | None) -> bool:
    return isinstance(message, AIMessage) and bool(message.tool_calls)


def to_conversation_message(message: BaseMessage | None, agent: AgentLabel | None = None) -> ConversationMessage:
    """Convert the model's final reply into a ConversationMessage.

    Raises:
        InvalidReply: If the reply is missing, not from the assistant, or has no text
    """
    if not isinstance(message, AIMessage):
        raise InvalidReply("Assistant did not return a valid reply.")

    content = message_text(message)
    if not content.strip():
        raise InvalidReply("Assistant returned an empty reply.")

    return ConversationMessage(role="assistant", content=content, agent=agent)


def to_history(messages: list[BaseMessage]) -> list[ConversationMessage]:
    """Project a trace onto user and assistant turns.

    Tool-call requests and tool results are internal to a turn and are
    left out, as are turns with no text.
    """
    history = []
    for message in messages:
        if isinstance(message, HumanMessage):
            role = "user"
        elif isinstance(message, AIMessage) and not is_tool_request(message):
            role = "assistant"
        else:
            continue

        content = message_text(message).strip()
        if content:
            history.append(ConversationMessage(role=role, content=content))

    return history


def to_base_messages(history: list[ConversationMessage]) -> list[BaseMessage]:
    """Map external messages onto model messages."""
    return [
        AIMessage(content=message.content) if message.role == "assistant" else HumanMessage(content=message.content)
        for message in history
    ]
