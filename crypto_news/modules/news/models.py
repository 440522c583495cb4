from dataclasses import dataclass
from enum import Enum
from typing import Any
from urllib.parse import quote

API_BASE = "/api/v1"

PAGE_DEFAULT = 1
LIMIT_DEFAULT = 10

API_KEY_HEADER = "X-RapidAPI-Key"


class Source(str, Enum):
    BITCOINIST = "BITCOINIST"
    COIN_DESK = "COIN_DESK"
    COINTELEGRAPH = "COINTELEGRAPH"
    CRYPTO_DAILY = "CRYPTO_DAILY"
    CRYPTO_NEWS = "CRYPTO_NEWS"
    DECRYPT = "DECRYPT"


class ResponseStatus(str, Enum):
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


class SentimentType(str, Enum):
    POSITIVE = "POSITIVE"
    NEUTRAL = "NEUTRAL"
    NEGATIVE = "NEGATIVE"


class ContentBlockType(str, Enum):
    HEADING = "HEADING"
    PARAGRAPH = "PARAGRAPH"
    IMAGE = "IMAGE"
    QUOTE = "QUOTE"
    LIST = "LIST"
    TEXT = "TEXT"
    LINK = "LINK"
    SPAN = "SPAN"
    DIV = "DIV"


# ── Known category and sort tokens (any string is accepted) ────


class BitcoinistCategory(str, Enum):
    BITCOIN = "BITCOIN"
    ETHEREUM = "ETHEREUM"
    ALTCOIN = "ALTCOIN"
    REGULATION = "REGULATION"
    ANALYSIS = "ANALYSIS"


class CoinDeskCategory(str, Enum):
    MARKETS = "MARKETS"
    FINANCE = "FINANCE"
    TECH = "TECH"
    POLICY = "POLICY"
    BUSINESS = "BUSINESS"


class CointelegraphCategory(str, Enum):
    BITCOIN = "BITCOIN"
    ETHEREUM = "ETHEREUM"
    ALTCOIN = "ALTCOIN"
    BLOCKCHAIN = "BLOCKCHAIN"
    BUSINESS = "BUSINESS"
    REGULATION = "REGULATION"


class CryptoDailyCategory(str, Enum):
    BITCOIN = "BITCOIN"
    ETHEREUM = "ETHEREUM"
    DEFI = "DEFI"
    NFT = "NFT"
    ALTCOINS = "ALTCOINS"


class CryptoNewsCategory(str, Enum):
    BITCOIN = "BITCOIN"
    ETHEREUM = "ETHEREUM"
    ALTCOIN = "ALTCOIN"
    DEFI = "DEFI"
    NFT = "NFT"


class DecryptCategory(str, Enum):
    NEWS = "NEWS"
    COINS = "COINS"
    BUSINESS = "BUSINESS"
    TECHNOLOGY = "TECHNOLOGY"
    DEFI = "DEFI"


class DecryptSort(str, Enum):
    LATEST = "LATEST"
    TRENDING = "TRENDING"


# ── Routing table ───────────────────────────────────────────────


class DetailKey(str, Enum):
    """How a source identifies a single article."""

    SLUG = "slug"
    URL = "url"
    ID = "id"


@dataclass(frozen=True)
class SourceRoute:
    source: Source
    segment: str
    detail_key: DetailKey | None

    @property
    def list_path(self) -> str:
        return f"{API_BASE}/{self.segment}"

    @property
    def sentiment_path(self) -> str:
        return f"{API_BASE}/{self.segment}/sentiment-analysis"

    @property
    def supports_detail(self) -> bool:
        return self.detail_key is not None

    def detail_request(self, identifier: Any) -> tuple[str, dict[str, Any] | None]:
        """Return (path, params) for fetching one article.

        URL-keyed sources take the identifier as a query parameter, every
        other source embeds it as a percent-encoded path segment.
        """
        if self.detail_key is DetailKey.URL:
            return f"{API_BASE}/{self.segment}/detail", {"url": identifier}
        return f"{API_BASE}/{self.segment}/{quote(str(identifier), safe='')}", None


ROUTES: dict[Source, SourceRoute] = {r.source: r for r in [
    SourceRoute(Source.BITCOINIST, "bitcoinist", DetailKey.SLUG),
    SourceRoute(Source.COIN_DESK, "coin-desk", None),
    SourceRoute(Source.COINTELEGRAPH, "cointelegraph", DetailKey.SLUG),
    SourceRoute(Source.CRYPTO_DAILY, "crypto-daily", DetailKey.URL),
    SourceRoute(Source.CRYPTO_NEWS, "crypto-news", DetailKey.SLUG),
    SourceRoute(Source.DECRYPT, "decrypt", DetailKey.ID),
]}

ARTICLES_PATH = f"{API_BASE}/articles"
ARTICLES_SENTIMENT_PATH = f"{API_BASE}/articles/sentiment-analysis"


def get_route(source: Any) -> SourceRoute | None:
    try:
        return ROUTES.get(Source(source))
    except ValueError:
        return None
