import logging
from collections.abc import Mapping
from typing import Any

import httpx

from crypto_news.config.settings import settings
from crypto_news.errors import ClientConfigError, ClientHttpError, ClientNetworkError
from crypto_news.modules.news.contracts import TransportContract
from crypto_news.modules.news.models import API_KEY_HEADER

logger = logging.getLogger(__name__)


class TransportService(TransportContract):
    """Single GET round trip against the crypto news API.

    Returns the decoded body untouched; envelope interpretation belongs to
    the caller.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not api_key:
            raise ClientConfigError("api_key is required")

        self.base_url = base_url or settings.base_url
        self.timeout = timeout if timeout is not None else settings.timeout
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers={API_KEY_HEADER: api_key},
            transport=transport,
            follow_redirects=True,
        )

    # ── HTTP layer ──────────────────────────────────────────────

    async def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        logger.debug("GET %s params=%s", path, params)
        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            logger.warning("GET %s failed with HTTP %d", path, status_code)
            raise ClientHttpError(
                str(exc),
                status_code=status_code,
                details=self._decode(exc.response),
            ) from exc
        except httpx.RequestError as exc:
            logger.warning("GET %s failed: %s", path, exc)
            raise ClientNetworkError(str(exc) or exc.__class__.__name__, cause=exc) from exc

        return self._decode(response)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    # ── Lifecycle ───────────────────────────────────────────────

    async def aclose(self) -> None:
        await self._client.aclose()
