"""In-memory chat and message storage."""

from cuid2 import cuid_wrapper

from friday.models.chat import Chat, StoredMessage
from friday.models.conversation import ConversationMessage
from friday.utils.logging import get_logger

logger = get_logger(__name__)

cuid = cuid_wrapper()


class ChatNotFoundError(KeyError):
    """Raised when a chat ID is unknown."""


class InMemoryChatStore:
    """In-memory chat store.

    The turn controller never touches the store; handlers persist the user
    message before a turn and the assistant reply after it.
    """

    def __init__(self):
        self.chats: dict[str, Chat] = {}
        self.messages: dict[str, list[StoredMessage]] = {}

    def create_chat(self, title: str = "New Chat") -> Chat:
        """Create an empty chat."""
        chat = Chat(id=self._generate_id(), title=title)
        self.chats[chat.id] = chat
        self.messages[chat.id] = []
        logger.info(f"Created chat {chat.id}")
        return chat

    def get_chat(self, chat_id: str) -> Chat:
        """Get a chat by ID.

        Raises:
            ChatNotFoundError: If the chat doesn't exist
        """
        chat = self.chats.get(chat_id)
        if chat is None:
            raise ChatNotFoundError(chat_id)
        return chat

    def list_chats(self) -> list[Chat]:
        """List chats, most recently updated first."""
        return sorted(self.chats.values(), key=lambda chat: chat.updated_at, reverse=True)

    def delete_chat(self, chat_id: str) -> None:
        """Delete a chat and its messages.

        Raises:
            ChatNotFoundError: If the chat doesn't exist
        """
        self.get_chat(chat_id)
        del self.chats[chat_id]
        del self.messages[chat_id]
        logger.info(f"Deleted chat {chat_id}")

    def save(self, chat_id: str, message: ConversationMessage) -> StoredMessage:
        """Append a message to a chat and bump its activity timestamp.

        Raises:
            ChatNotFoundError: If the chat doesn't exist
        """
        chat = self.get_chat(chat_id)
        stored = StoredMessage(
            id=self._generate_id(),
            chat_id=chat_id,
            role=message.role,
            content=message.content,
            agent=message.agent,
        )
        self.messages[chat_id].append(stored)
        chat.touch()
        return stored

    def list(self, chat_id: str) -> list[StoredMessage]:
        """List a chat's messages, oldest first.

        Raises:
            ChatNotFoundError: If the chat doesn't exist
        """
        self.get_chat(chat_id)
        return list(self.messages[chat_id])

    def _generate_id(self) -> str:
        """Generate a new CUID-based ID."""
        return cuid()


chat_store = InMemoryChatStore()
