"""Test helpers: a scripted chat model and stubbed provider clients."""

import json
from collections.abc import Callable
from typing import Any

import httpx
from langchain_core.messages import AIMessage, BaseMessage

from friday.clients.providers import ProviderClient, ProviderConfig
from friday.tools.weather import WEATHER_TOOL_NAME

WEATHER_PAYLOAD = {
    "location": {"name": "Lagos", "region": "Lagos", "country": "Nigeria", "localtime": "2026-10-19 14:00"},
    "current": {
        "temp_c": 31.0,
        "temp_f": 87.8,
        "feelslike_c": 36.2,
        "feelslike_f": 97.2,
        "humidity": 70,
        "wind_kph": 14.4,
        "wind_mph": 8.9,
        "condition": {"text": "Partly cloudy"},
        "last_updated": "2026-10-19 13:45",
    },
}

NEWS_PAYLOAD = {
    "status": "ok",
    "totalResults": 38,
    "articles": [
        {
            "title": "Markets rally on rate cut hopes",
            "url": "https://example.com/markets",
            "description": "Stocks climbed.",
            "source": {"name": "Reuters"},
            "publishedAt": "2026-10-19T08:00:00Z",
        },
        {
            "title": "New chip unveiled",
            "url": "https://example.com/chip",
            "source": {"name": "The Verge"},
        },
    ],
}


class ScriptedChatModel:
    """Stand-in for the chat model returning queued replies.

    Each queued item is either a message or a callable receiving the
    messages sent to the model. With repeat_last, the final item is reused
    once the queue runs dry.
    """

    def __init__(self, replies: list[BaseMessage | Callable[[list[BaseMessage]], BaseMessage]], repeat_last=False):
        self.replies = list(replies)
        self.repeat_last = repeat_last
        self.calls: list[list[BaseMessage]] = []
        self.bound_tools: list[dict[str, Any]] | None = None

    def bind_tools(self, tools):
        self.bound_tools = tools
        return self

    async def ainvoke(self, messages, config=None):
        self.calls.append(list(messages))
        if not self.replies:
            raise AssertionError("Model called more times than scripted")

        reply = self.replies[0] if self.repeat_last and len(self.replies) == 1 else self.replies.pop(0)
        return reply if isinstance(reply, BaseMessage) else reply(messages)


def tool_request(name: str, args: dict[str, Any], call_id: str = "call_1", content: str = "") -> AIMessage:
    """Build a model reply requesting one tool call."""
    return AIMessage(content=content, tool_calls=[{"name": name, "args": args, "id": call_id}])


def weather_request(location: str = "Lagos", call_id: str = "call_1", content: str = "", **args) -> AIMessage:
    return tool_request(WEATHER_TOOL_NAME, {"location": location, **args}, call_id, content)


class ProviderStub:
    """Records provider requests and answers them with a canned response."""

    def __init__(self, status_code: int = 200, payload: Any = None, body: str | None = None):
        self.status_code = status_code
        self.payload = payload
        self.body = body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.body is not None:
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, content=json.dumps(self.payload).encode())

    @property
    def last_params(self) -> dict[str, str]:
        return dict(self.requests[-1].url.params)


def make_provider_client(
    name: str, stub: ProviderStub, api_key: str | None = "test-key", requests_per_minute: int = 100
) -> ProviderClient:
    key_env = f"{name.upper()}_API_KEY"
    return ProviderClient(
        ProviderConfig(
            name=name,
            base_url=f"https://{name.lower()}.test/v1",
            api_key=api_key,
            api_key_env=key_env,
            requests_per_minute=requests_per_minute,
        ),
        transport=httpx.MockTransport(stub),
    )


