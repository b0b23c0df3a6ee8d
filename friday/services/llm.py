"""Chat model construction for the agent."""

import os
from dataclasses import dataclass

from langchain_anthropic import ChatAnthropic

from friday.errors import ConfigurationError
from friday.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_MODEL_NAME = "claude-sonnet-4-5-20250929"


@dataclass
class AnthropicConfig:
    """Configuration for the Anthropic chat model."""

    api_key: str | None = None
    model: str = DEFAULT_MODEL_NAME
    temperature: float = 0.6
    max_tokens: int = 1024

    @classmethod
    def from_env(cls) -> "AnthropicConfig":
        """Read ANTHROPIC_API_KEY and ANTHROPIC_MODEL from the environment."""
        return cls(
            api_key=os.getenv("ANTHROPIC_API_KEY") or None,
            model=os.getenv("ANTHROPIC_MODEL") or DEFAULT_MODEL_NAME,
        )


def create_chat_model(config: AnthropicConfig | None = None) -> ChatAnthropic:
    """Create the Anthropic chat model.

    Raises:
        ConfigurationError: If no API key is configured
    """
    config = config or AnthropicConfig.from_env()
    if not config.api_key:
        raise ConfigurationError("ANTHROPIC_API_KEY is not configured.")

    logger.info(f"Creating chat model {config.model}")
    return ChatAnthropic(
        model=config.model,
        temperature=config.temperature,
        max_tokens=config.max_tokens,
        anthropic_api_key=config.api_key,
    )
