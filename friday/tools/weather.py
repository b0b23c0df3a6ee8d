"""Real-time weather lookup tool."""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from friday.clients.providers import ProviderClient, ProviderConfig
from friday.errors import ToolInvocationError
from friday.tools.base import ToolDefinition, ToolOutput
from friday.utils.logging import get_logger

logger = get_logger(__name__)

WEATHER_TOOL_NAME = "get_real_time_weather"
DEFAULT_WEATHER_URL = "https://api.weatherapi.com/v1/"

WeatherUnit = Literal["celsius", "fahrenheit"]


class WeatherInput(BaseModel):
    """Input schema for the weather tool."""

    location: str = Field(
        ...,
        min_length=1,
        description="City, region, or coordinates to inspect (e.g., 'Paris, FR' or '37.77,-122.42').",
        examples=["Lagos", "Paris, FR", "37.77,-122.42"],
    )
    unit: WeatherUnit = Field(
        default="celsius",
        description="Unit to emphasize in the summary.",
    )

    @field_validator("location")
    @classmethod
    def validate_location(cls, v: str) -> str:
        """Reject blank locations before the provider is contacted."""
        if not v.strip():
            raise ValueError("Please provide a city, region, or coordinates for the weather lookup.")
        return v.strip()


class WeatherSummary(BaseModel):
    """Normalized current conditions for a location."""

    location: str
    condition: str
    temperature_c: float
    temperature_f: float
    feels_like_c: float
    feels_like_f: float
    humidity: float
    wind_kph: float
    wind_mph: float
    last_updated: str
    narrative: str


def build_weather_narrative(current: dict[str, Any], label: str, unit: WeatherUnit) -> str:
    """Summarize current conditions in one sentence for the model."""
    if unit == "fahrenheit":
        temperature, feels_like, suffix = current.get("temp_f"), current.get("feelslike_f"), "°F"
    else:
        temperature, feels_like, suffix = current.get("temp_c"), current.get("feelslike_c"), "°C"

    condition = _condition_text(current) or "Weather update unavailable"

    return (
        f"{label}: {condition}. "
        f"Temperature {temperature}{suffix} (feels like {feels_like}{suffix}), "
        f"humidity {current.get('humidity')}% with winds around {current.get('wind_kph')} kph."
    )


def _condition_text(current: dict[str, Any]) -> str | None:
    condition = current.get("condition")
    if condition is None:
        return None
    if not isinstance(condition, dict):
        raise ToolInvocationError("Weather API returned an unexpected response.")
    return condition.get("text")


def parse_weather_payload(payload: dict[str, Any], unit: WeatherUnit) -> WeatherSummary:
    """Map a WeatherAPI current.json payload onto a WeatherSummary.

    Raises:
        ToolInvocationError: If the location or current sections are missing or malformed
    """
    location = payload.get("location")
    current = payload.get("current")
    if not location or not current or not isinstance(location, dict) or not isinstance(current, dict):
        raise ToolInvocationError("Weather API returned an unexpected response.")

    label = ", ".join(
        part for part in (location.get("name"), location.get("region"), location.get("country")) if part
    )

    try:
        return WeatherSummary(
            location=label,
            condition=_condition_text(current) or "Unknown conditions",
            temperature_c=current["temp_c"],
            temperature_f=current["temp_f"],
            feels_like_c=current["feelslike_c"],
            feels_like_f=current["feelslike_f"],
            humidity=current["humidity"],
            wind_kph=current["wind_kph"],
            wind_mph=current["wind_mph"],
            last_updated=current["last_updated"],
            narrative=build_weather_narrative(current, label, unit),
        )
    except (KeyError, ValueError) as e:
        raise ToolInvocationError("Weather API returned an unexpected response.") from e


async def fetch_weather_summary(client: ProviderClient, location: str, unit: WeatherUnit = "celsius") -> WeatherSummary:
    """Fetch current conditions for a location.

    Raises:
        ConfigurationError: If WEATHER_API_KEY is not set
        ToolInvocationError: If the provider call fails or returns malformed data
    """
    api_key = client.config.require_api_key()

    status, payload = await client.get_json("current.json", {"key": api_key, "q": location, "aqi": "no"})

    error = payload.get("error")
    if not 200 <= status < 300 or error:
        if isinstance(error, dict):
            reason = error.get("message") or f"status {status}"
        elif isinstance(error, str):
            reason = error
        else:
            reason = f"status {status}"
        logger.warning(f"Weather lookup for {location!r} failed: {reason}")
        raise ToolInvocationError(f"Weather lookup failed: {reason}")

    return parse_weather_payload(payload, unit)


def create_weather_tool(client: ProviderClient | None = None) -> ToolDefinition:
    """Create the weather tool bound to a provider client."""
    weather_client = client or ProviderClient(
        ProviderConfig.from_env("Weather", "WEATHER_API_KEY", "WEATHER_API_URL", DEFAULT_WEATHER_URL)
    )

    async def weather_handler(params: WeatherInput) -> ToolOutput:
        summary = await fetch_weather_summary(weather_client, params.location, params.unit)
        return ToolOutput(narrative=summary.narrative, data=summary.model_dump())

    return ToolDefinition(
        name=WEATHER_TOOL_NAME,
        description=(
            "Look up real-time weather (temperature, feels-like, humidity, wind) "
            "for any city, region, or coordinates."
        ),
        input_schema_class=WeatherInput,
        handler=weather_handler,
    )
