"""Base types and definitions for tools."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel


@dataclass
class ToolOutput:
    """Normalized result of a successful tool call.

    The narrative is what the model sees; the structured fields travel
    alongside it for callers that want them.
    """

    narrative: str
    data: dict[str, Any] = field(default_factory=dict)


ToolHandler = Callable[[BaseModel], Awaitable[ToolOutput]]


@dataclass
class ToolDefinition:
    """Definition of a tool available to the AI assistant."""

    name: str
    description: str
    input_schema_class: type[BaseModel]
    handler: ToolHandler

    def get_json_schema(self) -> dict[str, Any]:
        """Get JSON schema for this tool's input."""
        return self.input_schema_class.model_json_schema()

    def parse_input(self, raw_input: dict[str, Any]) -> BaseModel:
        """Parse and validate tool input."""
        return self.input_schema_class.model_validate(raw_input)

    def as_model_tool(self) -> dict[str, Any]:
        """Describe the tool in the format bound to the chat model."""
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.get_json_schema(),
        }

    async def invoke(self, raw_input: dict[str, Any]) -> ToolOutput:
        """Validate raw arguments and run the handler."""
        return await self.handler(self.parse_input(raw_input))
