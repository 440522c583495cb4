"""
Tagged requests accepted by ``CryptoClient``.

Each operation takes a closed union keyed by ``source``. Adding a provider
means adding one variant here and one row to ``ROUTES``. Fields a variant
does not declare are rejected.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import ConfigDict, Field, TypeAdapter

from crypto_news.modules.news.schemas import (
    ArticleQuery,
    DecryptQuery,
    SentimentQuery,
    WireModel,
)

# ── News listing ────────────────────────────────────────────────


class BitcoinistNewsRequest(ArticleQuery):
    source: Literal["BITCOINIST"] = "BITCOINIST"


class CoinDeskNewsRequest(ArticleQuery):
    source: Literal["COIN_DESK"] = "COIN_DESK"


class CointelegraphNewsRequest(ArticleQuery):
    source: Literal["COINTELEGRAPH"] = "COINTELEGRAPH"


class CryptoDailyNewsRequest(ArticleQuery):
    source: Literal["CRYPTO_DAILY"] = "CRYPTO_DAILY"


class CryptoNewsNewsRequest(ArticleQuery):
    source: Literal["CRYPTO_NEWS"] = "CRYPTO_NEWS"


class DecryptNewsRequest(DecryptQuery):
    source: Literal["DECRYPT"] = "DECRYPT"


NewsRequest = Annotated[
    Union[
        BitcoinistNewsRequest,
        CoinDeskNewsRequest,
        CointelegraphNewsRequest,
        CryptoDailyNewsRequest,
        CryptoNewsNewsRequest,
        DecryptNewsRequest,
    ],
    Field(discriminator="source"),
]

# ── Article detail ──────────────────────────────────────────────


class DetailRequest(WireModel):
    model_config = ConfigDict(extra="forbid")


class CryptoDailyDetailRequest(DetailRequest):
    source: Literal["CRYPTO_DAILY"] = "CRYPTO_DAILY"
    url: str

    @property
    def identifier(self) -> str:
        return self.url


class DecryptDetailRequest(DetailRequest):
    source: Literal["DECRYPT"] = "DECRYPT"
    id: Any  # opaque; may be numeric-looking but is never coerced

    @property
    def identifier(self) -> Any:
        return self.id


class SlugDetailRequest(DetailRequest):
    source: Literal["BITCOINIST", "COINTELEGRAPH", "CRYPTO_NEWS"]
    slug: str

    @property
    def identifier(self) -> str:
        return self.slug


NewsDetailRequest = Annotated[
    Union[CryptoDailyDetailRequest, DecryptDetailRequest, SlugDetailRequest],
    Field(discriminator="source"),
]

# ── Sentiment ───────────────────────────────────────────────────


class BitcoinistSentimentRequest(SentimentQuery):
    source: Literal["BITCOINIST"] = "BITCOINIST"


class CoinDeskSentimentRequest(SentimentQuery):
    source: Literal["COIN_DESK"] = "COIN_DESK"


class CointelegraphSentimentRequest(SentimentQuery):
    source: Literal["COINTELEGRAPH"] = "COINTELEGRAPH"


class CryptoDailySentimentRequest(SentimentQuery):
    source: Literal["CRYPTO_DAILY"] = "CRYPTO_DAILY"


class CryptoNewsSentimentRequest(SentimentQuery):
    source: Literal["CRYPTO_NEWS"] = "CRYPTO_NEWS"


class DecryptSentimentRequest(SentimentQuery):
    source: Literal["DECRYPT"] = "DECRYPT"


SentimentRequest = Annotated[
    Union[
        BitcoinistSentimentRequest,
        CoinDeskSentimentRequest,
        CointelegraphSentimentRequest,
        CryptoDailySentimentRequest,
        CryptoNewsSentimentRequest,
        DecryptSentimentRequest,
    ],
    Field(discriminator="source"),
]

news_request_adapter: TypeAdapter[Any] = TypeAdapter(NewsRequest)
news_detail_request_adapter: TypeAdapter[Any] = TypeAdapter(NewsDetailRequest)
sentiment_request_adapter: TypeAdapter[Any] = TypeAdapter(SentimentRequest)
