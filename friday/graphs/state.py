"""State definitions for the turn controller."""

from enum import Enum
from typing import Literal

from langchain_core.messages import AIMessage, BaseMessage
from pydantic import BaseModel, ConfigDict, Field

StopReason = Literal["answer", "max_rounds"]


class TurnPhase(str, Enum):
    """Phases of a single turn."""

    AWAITING_MODEL = "awaiting_model"
    EXECUTING_TOOL = "executing_tool"
    DONE = "done"


class TokenUsage(BaseModel):
    """Token usage accumulated across the rounds of a turn."""

    input_tokens: int = 0
    output_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens


class TurnState(BaseModel):
    """Mutable state carried through one turn.

    `messages` is the conversation trace without the system prompt: the
    caller's history followed by every model reply and tool result produced
    during the turn.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    messages: list[BaseMessage]
    phase: TurnPhase = TurnPhase.AWAITING_MODEL
    rounds: int = 0
    stop_reason: StopReason | None = None
    usage: TokenUsage = Field(default_factory=TokenUsage)

    @property
    def last_message(self) -> BaseMessage | None:
        return self.messages[-1] if self.messages else None

    def pending_tool_calls(self) -> list:
        """Tool calls requested by the latest model reply, if any."""
        last = self.last_message
        if isinstance(last, AIMessage):
            return list(last.tool_calls)
        return []


class TurnResult(BaseModel):
    """Outcome of a completed turn."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    messages: list[BaseMessage]
    final_message: BaseMessage | None
    rounds: int
    stop_reason: StopReason
    usage: TokenUsage
