"""Transition logic for the turn controller."""

from friday.graphs.state import TurnPhase, TurnState
from friday.utils.logging import get_logger

logger = get_logger(__name__)


def route_agent_output(state: TurnState, max_rounds: int) -> TurnPhase:
    """Decide what follows a model reply.

    A reply with tool calls moves to tool execution unless the round budget
    is spent; a reply without tool calls is the final answer.
    """
    tool_calls = state.pending_tool_calls()

    if not tool_calls:
        state.stop_reason = "answer"
        return TurnPhase.DONE

    if state.rounds >= max_rounds:
        logger.warning(f"Round limit ({max_rounds}) reached with {len(tool_calls)} tool calls pending")
        state.stop_reason = "max_rounds"
        return TurnPhase.DONE

    logger.debug(f"Routing {len(tool_calls)} tool calls to execution")
    return TurnPhase.EXECUTING_TOOL


def route_tool_output(state: TurnState) -> TurnPhase:
    """Tool results always go back to the model."""
    return TurnPhase.AWAITING_MODEL
