"""Shared fixtures for tool, controller and endpoint tests."""

import pytest

from friday.graphs.conversation import TurnConfig, TurnController
from friday.tools.news import create_news_tool
from friday.tools.registry import ToolsRegistry
from friday.tools.weather import create_weather_tool
from tests.helpers import NEWS_PAYLOAD, WEATHER_PAYLOAD, ProviderStub, ScriptedChatModel, make_provider_client


@pytest.fixture
def weather_stub() -> ProviderStub:
    return ProviderStub(payload=WEATHER_PAYLOAD)


@pytest.fixture
def news_stub() -> ProviderStub:
    return ProviderStub(payload=NEWS_PAYLOAD)


@pytest.fixture
def registry(weather_stub, news_stub) -> ToolsRegistry:
    return ToolsRegistry(
        tools=[
            create_weather_tool(make_provider_client("Weather", weather_stub)),
            create_news_tool(make_provider_client("News", news_stub)),
        ]
    )


@pytest.fixture
def make_controller(registry):
    """Build a controller around a scripted model."""

    def _make(model: ScriptedChatModel, max_rounds: int = 6, timeout_seconds: float = 5.0) -> TurnController:
        return TurnController(
            model=model,
            registry=registry,
            model_name="test-model",
            config=TurnConfig(max_rounds=max_rounds, timeout_seconds=timeout_seconds),
        )

    return _make
