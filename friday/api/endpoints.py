"""API endpoints for the agent service."""

from datetime import UTC, datetime

from fastapi import APIRouter, HTTPException, Response

from friday import __version__
from friday.errors import ConfigurationError, InvalidReply, TurnTimeoutError
from friday.models.chat import ChatSummary, CreateChatRequest, SendMessageRequest, StoredMessage
from friday.models.conversation import ChatRequest, ChatResponse, ConversationMessage, HealthResponse
from friday.services.chat_store import ChatNotFoundError, chat_store
from friday.services.conversation import conversation_service
from friday.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()

OFFLINE_MESSAGE = "The assistant is offline right now. Please try again."


async def _run_turn(history: list[ConversationMessage]) -> ChatResponse:
    """Run a turn, mapping turn-level failures onto HTTP errors."""
    try:
        return await conversation_service.generate_reply(history)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        raise HTTPException(status_code=500, detail=str(e)) from e
    except InvalidReply as e:
        logger.error(f"Invalid reply from model: {e}")
        raise HTTPException(status_code=502, detail=str(e)) from e
    except TurnTimeoutError as e:
        raise HTTPException(status_code=504, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Conversation processing error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=OFFLINE_MESSAGE) from e


@router.post("/chat", response_model=ChatResponse, tags=["Conversation"])
async def handle_chat(request: ChatRequest) -> ChatResponse:
    """Answer the last user message of a caller-supplied history."""
    logger.info(f"Processing chat turn with {len(request.messages)} messages: {request.messages[-1].content[:50]}...")
    response = await _run_turn(request.messages)
    logger.info(f"Generated {response.metadata.agent} reply: {response.message.content[:50]}...")
    return response


@router.post("/chats", response_model=ChatSummary, status_code=201, tags=["Chats"])
async def create_chat(request: CreateChatRequest | None = None) -> ChatSummary:
    """Create a new chat."""
    chat = chat_store.create_chat((request or CreateChatRequest()).title)
    return ChatSummary.from_chat(chat)


@router.get("/chats", response_model=list[ChatSummary], tags=["Chats"])
async def list_chats() -> list[ChatSummary]:
    """List chats, most recently active first."""
    return [ChatSummary.from_chat(chat) for chat in chat_store.list_chats()]


@router.delete("/chats/{chat_id}", status_code=204, tags=["Chats"])
async def delete_chat(chat_id: str) -> Response:
    """Delete a chat and its messages."""
    try:
        chat_store.delete_chat(chat_id)
    except ChatNotFoundError as e:
        raise HTTPException(status_code=404, detail=f"Chat not found: {chat_id}") from e
    return Response(status_code=204)


@router.get("/chats/{chat_id}/messages", response_model=list[StoredMessage], tags=["Chats"])
async def list_messages(chat_id: str) -> list[StoredMessage]:
    """List a chat's messages, oldest first."""
    try:
        return chat_store.list(chat_id)
    except ChatNotFoundError as e:
        raise HTTPException(status_code=404, detail=f"Chat not found: {chat_id}") from e


@router.post("/chats/{chat_id}/messages", response_model=ChatResponse, tags=["Chats"])
async def send_message(chat_id: str, request: SendMessageRequest) -> ChatResponse:
    """Answer a user message from the chat's history.

    The user message and the reply are stored together once the turn
    succeeds, so a failed turn leaves the chat untouched for a retry.
    """
    try:
        stored = chat_store.list(chat_id)
    except ChatNotFoundError as e:
        raise HTTPException(status_code=404, detail=f"Chat not found: {chat_id}") from e

    user_message = ConversationMessage(role="user", content=request.content)
    history = [message.as_conversation_message() for message in stored] + [user_message]
    logger.info(f"Processing turn for chat {chat_id} with {len(history)} messages")

    response = await _run_turn(history)

    # Chat may have been deleted while the turn ran
    try:
        chat_store.save(chat_id, user_message)
        chat_store.save(chat_id, response.message)
    except ChatNotFoundError as e:
        raise HTTPException(status_code=404, detail=f"Chat not found: {chat_id}") from e
    return response


@router.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(UTC),
        version=__version__,
    )
