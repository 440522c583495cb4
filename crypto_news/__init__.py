"""
Typed async SDK for the crypto news API.

Sources: Bitcoinist, CoinDesk, Cointelegraph, CryptoDaily, CryptoNews,
Decrypt. Each exposes article listings and sentiment analysis; all but
CoinDesk also expose article details.

Usage:
    from crypto_news import CryptoClient, Source

    async with CryptoClient(api_key="...") as client:
        page = await client.get_news({"source": Source.COINTELEGRAPH, "limit": 5})
        sentiment = await client.get_articles_sentiment("24h")
"""

from .client import CryptoClient
from .errors import (
    ClientApiError,
    ClientConfigError,
    ClientError,
    ClientErrorKind,
    ClientHttpError,
    ClientNetworkError,
)
from .modules.news.models import (
    BitcoinistCategory,
    CoinDeskCategory,
    CointelegraphCategory,
    ContentBlockType,
    CryptoDailyCategory,
    CryptoNewsCategory,
    DecryptCategory,
    DecryptSort,
    ResponseStatus,
    SentimentType,
    Source,
)
from .modules.news.requests import (
    BitcoinistNewsRequest,
    BitcoinistSentimentRequest,
    CoinDeskNewsRequest,
    CoinDeskSentimentRequest,
    CointelegraphNewsRequest,
    CointelegraphSentimentRequest,
    CryptoDailyDetailRequest,
    CryptoDailyNewsRequest,
    CryptoDailySentimentRequest,
    CryptoNewsNewsRequest,
    CryptoNewsSentimentRequest,
    DecryptDetailRequest,
    DecryptNewsRequest,
    DecryptSentimentRequest,
    NewsDetailRequest,
    NewsRequest,
    SentimentRequest,
    SlugDetailRequest,
)
from .modules.news.schemas import (
    Article,
    ArticleDetail,
    ArticlesPage,
    ContentBlock,
    SentimentItem,
    SentimentResult,
)


__all__ = [
    # Client
    "CryptoClient",

    # Enums
    "Source",
    "ContentBlockType",
    "SentimentType",
    "ResponseStatus",
    "BitcoinistCategory",
    "CoinDeskCategory",
    "CointelegraphCategory",
    "CryptoDailyCategory",
    "CryptoNewsCategory",
    "DecryptCategory",
    "DecryptSort",

    # Models
    "Article",
    "ArticleDetail",
    "ArticlesPage",
    "ContentBlock",
    "SentimentItem",
    "SentimentResult",

    # Requests
    "NewsRequest",
    "NewsDetailRequest",
    "SentimentRequest",
    "BitcoinistNewsRequest",
    "CoinDeskNewsRequest",
    "CointelegraphNewsRequest",
    "CryptoDailyNewsRequest",
    "CryptoNewsNewsRequest",
    "DecryptNewsRequest",
    "CryptoDailyDetailRequest",
    "DecryptDetailRequest",
    "SlugDetailRequest",
    "BitcoinistSentimentRequest",
    "CoinDeskSentimentRequest",
    "CointelegraphSentimentRequest",
    "CryptoDailySentimentRequest",
    "CryptoNewsSentimentRequest",
    "DecryptSentimentRequest",

    # Errors
    "ClientError",
    "ClientErrorKind",
    "ClientApiError",
    "ClientConfigError",
    "ClientHttpError",
    "ClientNetworkError",
]


__version__ = "1.0.0"
