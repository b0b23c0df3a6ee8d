"""Step implementations for the turn controller."""

import asyncio

from langchain_core.messages import AIMessage, BaseMessage, SystemMessage, ToolMessage
from langchain_core.runnables import Runnable

from friday.graphs.state import TurnState
from friday.tools.registry import ToolsRegistry
from friday.utils.logging import get_logger

logger = get_logger(__name__)


async def agent_node(state: TurnState, model: Runnable, system_prompt: str) -> BaseMessage:
    """Ask the model for the next action.

    The system prompt is prepended to every call and never stored in the
    trace.
    """
    state.rounds += 1
    logger.info(f"Model round {state.rounds} with {len(state.messages)} messages")

    response = await model.ainvoke([SystemMessage(content=system_prompt), *state.messages])

    usage = getattr(response, "usage_metadata", None)
    if usage:
        state.usage.input_tokens += usage.get("input_tokens", 0)
        state.usage.output_tokens += usage.get("output_tokens", 0)

    if isinstance(response, AIMessage) and response.tool_calls:
        logger.info(f"Model requested {len(response.tool_calls)} tool calls")

    state.messages.append(response)
    return response


async def tools_node(state: TurnState, registry: ToolsRegistry) -> list[ToolMessage]:
    """Execute every tool call of the latest reply concurrently.

    Results are appended in request order, one per call.
    """
    tool_calls = state.pending_tool_calls()
    logger.info(f"Executing tools: {', '.join(tc['name'] for tc in tool_calls)}")

    results = await asyncio.gather(*(registry.execute(tc) for tc in tool_calls))

    state.messages.extend(results)
    return list(results)
