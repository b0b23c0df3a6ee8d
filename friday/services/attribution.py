"""Post-hoc labelling of which capability produced an answer."""

from dataclasses import dataclass

from langchain_core.messages import BaseMessage, HumanMessage, ToolMessage

from friday.models.conversation import AgentLabel
from friday.services.normalizer import message_text
from friday.tools.news import NEWS_TOOL_NAME
from friday.tools.weather import WEATHER_TOOL_NAME

TOOL_AGENTS: dict[str, AgentLabel] = {
    WEATHER_TOOL_NAME: "weather",
    NEWS_TOOL_NAME: "news",
}


@dataclass(frozen=True)
class AgentContext:
    """Capability label for a completed turn."""

    agent: AgentLabel
    tool_name: str | None = None
    tool_response: str | None = None


def infer_agent_context(messages: list[BaseMessage]) -> AgentContext:
    """Label the final answer from the most recent tool result of the turn.

    Scans backward from the end of the trace, stopping at the latest user
    message. Only the tool result nearest the answer is attributed; results
    from tools without a label are skipped.
    """
    for message in reversed(messages):
        if isinstance(message, HumanMessage):
            break
        if isinstance(message, ToolMessage) and message.name in TOOL_AGENTS:
            return AgentContext(
                agent=TOOL_AGENTS[message.name],
                tool_name=message.name,
                tool_response=message_text(message),
            )

    return AgentContext(agent="chat")
