from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from crypto_news.modules.news.schemas import (
    Article,
    ArticleDetail,
    ArticlesPage,
    SentimentResult,
)


class TransportContract(ABC):
    @abstractmethod
    async def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any: ...

    @abstractmethod
    async def aclose(self) -> None: ...


class CryptoClientContract(ABC):
    @abstractmethod
    async def get_articles(self, interval: str) -> list[Article]: ...

    @abstractmethod
    async def get_articles_sentiment(self, interval: str) -> SentimentResult: ...

    @abstractmethod
    async def get_news(self, request: Any) -> ArticlesPage: ...

    @abstractmethod
    async def get_news_detail(self, request: Any) -> ArticleDetail: ...

    @abstractmethod
    async def get_sentiment(self, request: Any) -> SentimentResult: ...
