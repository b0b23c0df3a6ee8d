"""Top headlines lookup tool."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from friday.clients.providers import ProviderClient, ProviderConfig
from friday.errors import ToolInvocationError
from friday.tools.base import ToolDefinition, ToolOutput
from friday.utils.logging import get_logger

logger = get_logger(__name__)

NEWS_TOOL_NAME = "get_top_headlines"
DEFAULT_NEWS_URL = "https://newsapi.org/v2/"
MAX_ARTICLES = 5


class NewsInput(BaseModel):
    """Input schema for the headlines tool."""

    model_config = ConfigDict(populate_by_name=True)

    country: str = Field(
        default="us",
        min_length=2,
        max_length=2,
        description="Two-letter country code, e.g., 'us' or 'gb'. Defaults to US.",
    )
    category: str | None = Field(
        default=None,
        description="News category such as business, technology, sports, entertainment.",
    )
    query: str | None = Field(
        default=None,
        description="Keyword filter if the user mentioned a specific topic.",
    )
    page_size: int = Field(
        default=MAX_ARTICLES,
        ge=1,
        le=MAX_ARTICLES,
        alias="pageSize",
        description="Maximum headlines to retrieve (1-5).",
    )


class NewsArticle(BaseModel):
    """A single headline."""

    title: str
    url: str
    source: str
    description: str | None = None
    published_at: str | None = None


class NewsSummary(BaseModel):
    """Normalized headline listing."""

    total_results: int
    articles: list[NewsArticle]
    narrative: str


def build_news_narrative(articles: list[NewsArticle]) -> str:
    """Summarize headlines in one line for the model."""
    if not articles:
        return "No fresh headlines were available for the requested filters."

    highlights = " ".join(f"{index}. {article.title} ({article.source})" for index, article in enumerate(articles, 1))
    return f"Top headlines: {highlights}"


def _parse_article(article: dict[str, Any]) -> NewsArticle:
    source = article.get("source") or {}
    if not isinstance(source, dict):
        raise ToolInvocationError("News API returned an unexpected response.")

    return NewsArticle(
        title=article.get("title") or "Untitled",
        url=article.get("url") or "",
        source=source.get("name") or "Unknown",
        description=article.get("description") or None,
        published_at=article.get("publishedAt"),
    )


def parse_news_payload(payload: dict[str, Any], page_size: int) -> NewsSummary:
    """Map a NewsAPI top-headlines payload onto a NewsSummary.

    Raises:
        ToolInvocationError: If the articles list or any article in it is malformed
    """
    raw_articles = payload.get("articles") or []
    if not isinstance(raw_articles, list):
        raise ToolInvocationError("News API returned an unexpected response.")

    try:
        articles = [_parse_article(article) for article in raw_articles[:page_size] if isinstance(article, dict)]
    except ValueError as e:
        raise ToolInvocationError("News API returned an unexpected response.") from e

    total_results = payload.get("totalResults")
    return NewsSummary(
        total_results=total_results if isinstance(total_results, int) else len(articles),
        articles=articles,
        narrative=build_news_narrative(articles),
    )


async def fetch_top_headlines(
    client: ProviderClient,
    country: str = "us",
    category: str | None = None,
    query: str | None = None,
    page_size: int = MAX_ARTICLES,
) -> NewsSummary:
    """Fetch top headlines for the given filters.

    Raises:
        ConfigurationError: If NEWS_API_KEY is not set
        ToolInvocationError: If the provider call fails or returns malformed data
    """
    api_key = client.config.require_api_key()
    page_size = min(max(page_size, 1), MAX_ARTICLES)

    params = {"apiKey": api_key, "pageSize": str(page_size), "country": country.lower()}
    if category:
        params["category"] = category.lower()
    if query:
        params["q"] = query

    status, payload = await client.get_json("top-headlines", params)

    if not 200 <= status < 300 or payload.get("status") == "error":
        reason = payload.get("message") or f"status {status}"
        logger.warning(f"News lookup failed: {reason}")
        raise ToolInvocationError(f"News lookup failed: {reason}")

    return parse_news_payload(payload, page_size)


def create_news_tool(client: ProviderClient | None = None) -> ToolDefinition:
    """Create the headlines tool bound to a provider client."""
    news_client = client or ProviderClient(
        ProviderConfig.from_env("News", "NEWS_API_KEY", "NEWS_API_URL", DEFAULT_NEWS_URL)
    )

    async def news_handler(params: NewsInput) -> ToolOutput:
        summary = await fetch_top_headlines(
            news_client,
            country=params.country,
            category=params.category,
            query=params.query,
            page_size=params.page_size,
        )
        return ToolOutput(narrative=summary.narrative, data=summary.model_dump())

    return ToolDefinition(
        name=NEWS_TOOL_NAME,
        description=(
            "Fetch top news headlines for a given country, category, or search topic "
            "from NewsAPI (max 5 concise results)."
        ),
        input_schema_class=NewsInput,
        handler=news_handler,
    )
