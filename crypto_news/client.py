import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from crypto_news.config.settings import Settings, settings as default_settings
from crypto_news.errors import ClientConfigError
from crypto_news.modules.news.contracts import CryptoClientContract
from crypto_news.modules.news.requests import (
    news_detail_request_adapter,
    news_request_adapter,
    sentiment_request_adapter,
)
from crypto_news.modules.news.schemas import (
    Article,
    ArticleDetail,
    ArticlesPage,
    SentimentResult,
)
from crypto_news.modules.news.service import NewsService, invalid_source_error
from crypto_news.modules.transport.service import TransportService

logger = logging.getLogger(__name__)

_TAG_ERRORS = {"union_tag_invalid", "union_tag_not_found"}


class CryptoClient(CryptoClientContract):
    """Entry point for the crypto news API.

    Fetches aggregated articles, per-source listings, article details and
    sentiment analysis. Every call is a single request; failures surface as
    ``ClientError`` with a ``kind`` discriminant. ``timeout`` is in seconds
    and defaults to ``CRYPTO_NEWS_TIMEOUT`` (10.0).

    Usage::

        async with CryptoClient(api_key="...") as client:
            page = await client.get_news({"source": "DECRYPT", "limit": 5})
            detail = await client.get_news_detail(
                {"source": "DECRYPT", "id": page.articles[0].id}
            )
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not api_key:
            raise ClientConfigError("api_key is required")

        self._transport = TransportService(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )
        self._news = NewsService(self._transport)

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "CryptoClient":
        settings = settings or default_settings
        return cls(
            settings.api_key,
            base_url=settings.base_url,
            timeout=settings.timeout,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> "CryptoClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ── Aggregates ──────────────────────────────────────────────

    async def get_articles(self, interval: str) -> list[Article]:
        return await self._news.get_articles(interval)

    async def get_articles_sentiment(self, interval: str) -> SentimentResult:
        return await self._news.get_articles_sentiment(interval)

    # ── Source-tagged operations ────────────────────────────────

    async def get_news(self, request: Any) -> ArticlesPage:
        parsed = self._validate(news_request_adapter, request)
        params = {k: v for k, v in parsed.to_params().items() if k != "source"}
        return await self._news.list_articles(parsed.source, params)

    async def get_news_detail(self, request: Any) -> ArticleDetail:
        parsed = self._validate(news_detail_request_adapter, request)
        return await self._news.get_article_detail(parsed.source, parsed.identifier)

    async def get_sentiment(self, request: Any) -> SentimentResult:
        parsed = self._validate(sentiment_request_adapter, request)
        params = {k: v for k, v in parsed.to_params().items() if k != "source"}
        return await self._news.get_sentiment(parsed.source, params)

    @staticmethod
    def _validate(adapter: TypeAdapter[Any], request: Any) -> Any:
        if isinstance(request, BaseModel):
            request = request.model_dump(by_alias=True)
        if not isinstance(request, Mapping):
            raise invalid_source_error()

        source = request.get("source")
        if isinstance(source, Enum):
            request = {**request, "source": source.value}

        try:
            return adapter.validate_python(request)
        except ValidationError as exc:
            errors = exc.errors(include_url=False)
            if any(err["type"] in _TAG_ERRORS for err in errors):
                raise invalid_source_error() from exc
            logger.debug("Rejected request for %s: %s", source, errors)
            raise ClientConfigError(
                "; ".join(
                    f"{'.'.join(str(p) for p in err['loc'][1:]) or 'request'}: {err['msg']}"
                    for err in errors
                )
            ) from exc
