"""Turn controller driving the model and tools to a final answer."""

import os
from dataclasses import dataclass

from langchain_core.messages import AIMessage, BaseMessage
from langchain_core.runnables import Runnable

from friday.graphs.edges import route_agent_output, route_tool_output
from friday.graphs.nodes import agent_node, tools_node
from friday.graphs.state import TurnPhase, TurnResult, TurnState
from friday.services.llm import AnthropicConfig, create_chat_model
from friday.tools.registry import ToolsRegistry, get_tools_registry
from friday.utils.logging import get_logger

logger = get_logger(__name__)

SYSTEM_PROMPT = """You are "FRIDAY+", an upgraded Tony Stark-style AI co-pilot.
- speak with witty confidence, sprinkling subtle Stark sarcasm only when helpful
- respond with concise, actionable insights tailored to ambitious builders
- always acknowledge previous context and suggest next tactical moves
- prioritize clarity, creativity, and momentum; never be dismissive or vague
- Use tools when helpful: call `get_real_time_weather` for hyper-local forecasts and `get_top_headlines` \
for timely news intel before responding with a synthesized plan"""

ROUND_LIMIT_MESSAGE = (
    "I apologize, but that request needed more lookups than I can run in a single turn. "
    "Please narrow it down and ask again."
)


@dataclass
class TurnConfig:
    """Limits applied to every turn."""

    max_rounds: int = 6
    timeout_seconds: float = 60.0

    @classmethod
    def from_env(cls) -> "TurnConfig":
        return cls(
            max_rounds=int(os.getenv("FRIDAY_MAX_ROUNDS", "6")),
            timeout_seconds=float(os.getenv("FRIDAY_TURN_TIMEOUT_SECONDS", "60")),
        )


class TurnController:
    """Bounded request/response loop between the model and the tools registry.

    The controller holds only fixed configuration (model, system prompt,
    tool set), so a single instance serves every request.
    """

    def __init__(
        self,
        model: Runnable,
        registry: ToolsRegistry,
        model_name: str,
        system_prompt: str = SYSTEM_PROMPT,
        config: TurnConfig | None = None,
    ):
        """Initialize the turn controller.

        Args:
            model: Chat model exposing bind_tools and ainvoke
            registry: Tools the model may call
            model_name: Model identity reported in response metadata
            system_prompt: Prompt prepended to every model call
            config: Round and timeout limits
        """
        self.registry = registry
        self.model = model.bind_tools(registry.get_model_tools())
        self.model_name = model_name
        self.system_prompt = system_prompt
        self.config = config or TurnConfig()

    async def run(self, history: list[BaseMessage]) -> TurnResult:
        """Drive one turn to completion.

        Args:
            history: Prior conversation as model messages, ending with the user's message

        Returns:
            The full trace, the final message and loop statistics

        Raises:
            ConfigurationError: If a tool's provider credential is missing
        """
        state = TurnState(messages=list(history))
        logger.info(f"Starting turn with {len(history)} messages, max_rounds: {self.config.max_rounds}")

        while state.phase is not TurnPhase.DONE:
            if state.phase is TurnPhase.AWAITING_MODEL:
                await agent_node(state, self.model, self.system_prompt)
                state.phase = route_agent_output(state, self.config.max_rounds)
            elif state.phase is TurnPhase.EXECUTING_TOOL:
                await tools_node(state, self.registry)
                state.phase = route_tool_output(state)

        if state.stop_reason == "max_rounds":
            state.messages.append(AIMessage(content=ROUND_LIMIT_MESSAGE))

        logger.info(
            f"Turn completed in {state.rounds} rounds ({state.stop_reason}), "
            f"tokens in/out: {state.usage.input_tokens}/{state.usage.output_tokens}"
        )

        return TurnResult(
            messages=state.messages,
            final_message=state.last_message,
            rounds=state.rounds,
            stop_reason=state.stop_reason or "answer",
            usage=state.usage,
        )


_turn_controller: TurnController | None = None


def get_turn_controller() -> TurnController:
    """Get or create the process-wide turn controller.

    Built on first use and kept for the process lifetime.

    Raises:
        ConfigurationError: If ANTHROPIC_API_KEY is not set
    """
    global _turn_controller

    if _turn_controller is None:
        anthropic_config = AnthropicConfig.from_env()
        _turn_controller = TurnController(
            model=create_chat_model(anthropic_config),
            registry=get_tools_registry(),
            model_name=anthropic_config.model,
            config=TurnConfig.from_env(),
        )
        logger.info("Turn controller created")

    return _turn_controller


def reset_turn_controller() -> None:
    """Drop the process-wide controller so the next call rebuilds it."""
    global _turn_controller
    _turn_controller = None
