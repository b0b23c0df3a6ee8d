"""Conversation service running turns for the HTTP handlers."""

import asyncio
from collections.abc import Callable

from friday.errors import TurnTimeoutError
from friday.graphs.conversation import TurnController, get_turn_controller
from friday.models.conversation import ChatResponse, ConversationMessage, ReplyMetadata
from friday.services.attribution import infer_agent_context
from friday.services.normalizer import to_base_messages, to_conversation_message, to_history
from friday.utils.logging import get_logger

logger = get_logger(__name__)

PERSONA = "tony"


class ConversationService:
    """Runs one turn over a caller-supplied history and shapes the reply."""

    def __init__(self, controller_factory: Callable[[], TurnController] = get_turn_controller):
        """Initialize conversation service.

        Args:
            controller_factory: Returns the turn controller, resolved per call so
                a missing credential surfaces on the request that needs it
        """
        self.controller_factory = controller_factory

    async def generate_reply(self, history: list[ConversationMessage]) -> ChatResponse:
        """Produce the assistant's reply to a history ending with a user message.

        Raises:
            ConfigurationError: If a required credential is missing
            InvalidReply: If the model returned no usable final message
            TurnTimeoutError: If the turn exceeded its time budget
        """
        controller = self.controller_factory()
        timeout = controller.config.timeout_seconds

        try:
            async with asyncio.timeout(timeout):
                result = await controller.run(to_base_messages(history))
        except TimeoutError as e:
            logger.warning(f"Turn timed out after {timeout}s")
            raise TurnTimeoutError(f"The assistant did not answer within {timeout:g} seconds.") from e

        agent_context = infer_agent_context(result.messages)
        reply = to_conversation_message(result.final_message, agent_context.agent)

        logger.info(f"Reply attributed to {agent_context.agent} after {result.rounds} rounds")

        return ChatResponse(
            message=reply,
            history=to_history(result.messages),
            metadata=ReplyMetadata(
                persona=PERSONA,
                model=controller.model_name,
                agent=agent_context.agent,
                tool_name=agent_context.tool_name,
                tool_response=agent_context.tool_response,
                rounds=result.rounds,
            ),
        )


conversation_service = ConversationService()
