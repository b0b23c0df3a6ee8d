"""Tools registry for managing AI assistant tools."""

from typing import Any

from langchain_core.messages import ToolCall, ToolMessage
from pydantic import ValidationError

from friday.errors import ToolInvocationError
from friday.tools.base import ToolDefinition
from friday.tools.news import create_news_tool
from friday.tools.weather import create_weather_tool
from friday.utils.logging import get_logger

logger = get_logger(__name__)


class ToolsRegistry:
    """Registry for managing AI assistant tools."""

    def __init__(self, tools: list[ToolDefinition] | None = None):
        """Initialize tools registry.

        Args:
            tools: Tools to register, defaults to the weather and news tools
        """
        self._tools: dict[str, ToolDefinition] = {}
        for tool in tools if tools is not None else self._default_tools():
            self.register_tool(tool)

    @staticmethod
    def _default_tools() -> list[ToolDefinition]:
        return [create_weather_tool(), create_news_tool()]

    def register_tool(self, tool: ToolDefinition) -> None:
        """Register a new tool in the registry."""
        self._tools[tool.name] = tool

    def get_model_tools(self) -> list[dict[str, Any]]:
        """Get tool descriptions to bind to the chat model."""
        return [tool.as_model_tool() for tool in self._tools.values()]

    def get_tool_names(self) -> list[str]:
        """Get list of all registered tool names."""
        return list(self._tools.keys())

    def has_tool(self, name: str) -> bool:
        """Check if a tool is registered."""
        return name in self._tools

    async def execute(self, tool_call: ToolCall) -> ToolMessage:
        """Run one requested tool call and wrap the outcome as a tool result.

        Validation errors, provider failures and unknown tool names all become
        error results so the model can explain them. ConfigurationError is not
        caught: a missing credential fails the whole turn.
        """
        name = tool_call["name"]
        call_id = tool_call["id"] or ""

        tool = self._tools.get(name)
        if tool is None:
            logger.error(f"Unknown tool requested: {name}")
            return ToolMessage(
                content=f"Error: Unknown tool {name}",
                tool_call_id=call_id,
                name=name,
                status="error",
            )

        logger.debug(f"Executing tool: {name} with input: {tool_call['args']}")
        try:
            params = tool.parse_input(tool_call["args"])
        except ValidationError as e:
            logger.warning(f"Tool {name} rejected its arguments: {e}")
            return ToolMessage(
                content=f"Error: invalid arguments for {name}: {_validation_summary(e)}",
                tool_call_id=call_id,
                name=name,
                status="error",
            )

        try:
            output = await tool.handler(params)
        except ToolInvocationError as e:
            logger.warning(f"Tool {name} failed: {e}")
            return ToolMessage(content=str(e), tool_call_id=call_id, name=name, status="error")

        logger.debug(f"Tool {name} succeeded: {output.narrative[:100]}...")
        return ToolMessage(
            content=output.narrative,
            artifact=output.data,
            tool_call_id=call_id,
            name=name,
        )


def _validation_summary(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in item['loc']) or 'input'}: {item['msg']}" for item in error.errors()
    )


_tools_registry: ToolsRegistry | None = None


def get_tools_registry() -> ToolsRegistry:
    """Get or create tools registry instance."""
    global _tools_registry

    if _tools_registry is None:
        _tools_registry = ToolsRegistry()

    return _tools_registry
