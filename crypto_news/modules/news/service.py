import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from crypto_news.errors import (
    ClientApiError,
    ClientConfigError,
    ClientError,
    ClientErrorKind,
)
from crypto_news.modules.news.contracts import TransportContract
from crypto_news.modules.news.models import (
    ARTICLES_PATH,
    ARTICLES_SENTIMENT_PATH,
    LIMIT_DEFAULT,
    PAGE_DEFAULT,
    Source,
    SourceRoute,
    get_route,
)
from crypto_news.modules.news.schemas import (
    Article,
    ArticleDetail,
    ArticlesPage,
    ErrorEnvelope,
    PaginatedArticles,
    QueryModel,
    SentimentResult,
    articles_adapter,
    envelope_adapter,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

QueryInput = QueryModel | Mapping[str, Any] | None


def invalid_source_error() -> ClientError:
    return ClientError("Invalid crypto source", kind=ClientErrorKind.UNKNOWN)


class NewsService:
    """Routes (source, operation) pairs to endpoints and normalizes the replies."""

    def __init__(self, transport: TransportContract) -> None:
        self._transport = transport

    # ── Aggregate endpoints ─────────────────────────────────────

    async def get_articles(self, interval: str) -> list[Article]:
        self._ensure_required(interval, "interval")
        data = await self._request(ARTICLES_PATH, {"interval": interval})
        return self._parse(articles_adapter, data or [])

    async def get_articles_sentiment(self, interval: str) -> SentimentResult:
        self._ensure_required(interval, "interval")
        data = await self._request(ARTICLES_SENTIMENT_PATH, {"interval": interval})
        return self._parse(SentimentResult, data)

    # ── Per-source endpoints ────────────────────────────────────

    async def list_articles(self, source: Source | str, query: QueryInput = None) -> ArticlesPage:
        route = self._resolve(source)
        params = self._to_params(query)
        if not params.get("page"):
            params["page"] = PAGE_DEFAULT
        if not params.get("limit"):
            params["limit"] = LIMIT_DEFAULT

        data = await self._request(route.list_path, params)
        page = self._parse(PaginatedArticles, data or {})
        articles = [
            self._parse(Article, {**raw, "source": route.source}) for raw in page.data or []
        ]
        return ArticlesPage(articles=articles, has_more=page.has_next_page or False)

    async def get_article_detail(self, source: Source | str, identifier: Any) -> ArticleDetail:
        route = self._resolve(source)
        if not route.supports_detail:
            raise ClientError(
                f"Article detail is not supported for {route.source.value}",
                kind=ClientErrorKind.UNKNOWN,
            )
        self._ensure_required(identifier, route.detail_key.value)

        path, params = route.detail_request(identifier)
        data = await self._request(path, params)
        if not isinstance(data, Mapping):
            raise ClientApiError("Malformed response from API", details=data)
        return self._parse(ArticleDetail, {**data, "source": route.source})

    async def get_sentiment(self, source: Source | str, query: QueryInput) -> SentimentResult:
        route = self._resolve(source)
        params = self._to_params(query)
        self._ensure_required(params.get("interval"), "interval")

        data = await self._request(route.sentiment_path, params)
        return self._parse(SentimentResult, data)

    # ── Envelope handling ───────────────────────────────────────

    async def _request(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        try:
            body = await self._transport.get(path, params)
        except ClientError:
            raise
        except Exception as exc:
            logger.exception("Unexpected transport failure for %s", path)
            raise ClientError(
                str(exc) or "An unknown error occurred",
                kind=ClientErrorKind.UNKNOWN,
                cause=exc,
            ) from exc

        return self._unwrap(body)

    @staticmethod
    def _unwrap(body: Any) -> Any:
        if body is None or body == "":
            raise ClientApiError("Empty response from API")

        try:
            envelope = envelope_adapter.validate_python(body)
        except ValidationError as exc:
            message = body.get("message") if isinstance(body, Mapping) else None
            raise ClientApiError(message or "API error", details=body) from exc

        if isinstance(envelope, ErrorEnvelope):
            logger.warning("API reported an error: %s", envelope.message)
            raise ClientApiError(envelope.message or "API error", details=body)
        return envelope.data

    # ── Helpers ─────────────────────────────────────────────────

    @staticmethod
    def _parse(schema: type[T] | TypeAdapter[T], data: Any) -> T:
        try:
            if isinstance(schema, TypeAdapter):
                return schema.validate_python(data)
            return schema.model_validate(data)
        except ValidationError as exc:
            raise ClientApiError(
                "Malformed response from API",
                details=exc.errors(include_url=False),
            ) from exc

    @staticmethod
    def _resolve(source: Source | str) -> SourceRoute:
        route = get_route(source)
        if route is None:
            raise invalid_source_error()
        return route

    @staticmethod
    def _to_params(query: QueryInput) -> dict[str, Any]:
        if query is None:
            return {}
        if isinstance(query, QueryModel):
            return query.to_params()
        return {
            key: value.value if isinstance(value, Enum) else value
            for key, value in query.items()
            if value is not None
        }

    @staticmethod
    def _ensure_required(value: Any, field: str) -> None:
        if value is None or value == "":
            raise ClientConfigError(f"{field} is required")
