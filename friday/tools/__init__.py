"""Tools for the conversational AI assistant."""

from friday.tools.news import NEWS_TOOL_NAME
from friday.tools.registry import ToolsRegistry, get_tools_registry
from friday.tools.weather import WEATHER_TOOL_NAME

__all__ = ["NEWS_TOOL_NAME", "WEATHER_TOOL_NAME", "ToolsRegistry", "get_tools_registry"]
