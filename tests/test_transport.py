import httpx
import pytest

from conftest import API_KEY, BASE_URL, success
from crypto_news.config.settings import settings
from crypto_news.errors import (
    ClientConfigError,
    ClientErrorKind,
    ClientHttpError,
    ClientNetworkError,
)
from crypto_news.modules.transport.service import TransportService


def _transport(mock_api, **kwargs) -> TransportService:
    return TransportService(API_KEY, base_url=BASE_URL, transport=mock_api.transport, **kwargs)


# ── Construction ────────────────────────────────────────────────


@pytest.mark.parametrize("api_key", ["", None])
def test_missing_api_key_fails_before_client_exists(monkeypatch, api_key):
    def _no_client(*args, **kwargs):
        raise AssertionError("httpx client must not be constructed")

    monkeypatch.setattr(httpx, "AsyncClient", _no_client)

    with pytest.raises(ClientConfigError) as exc_info:
        TransportService(api_key)

    assert exc_info.value.kind is ClientErrorKind.CONFIG
    assert exc_info.value.message == "api_key is required"


@pytest.mark.asyncio
async def test_uses_default_configuration():
    transport = TransportService(API_KEY)

    try:
        assert transport.base_url == settings.base_url
        assert transport.timeout == settings.timeout
    finally:
        await transport.aclose()


def test_applies_overrides(mock_api):
    transport = _transport(mock_api, timeout=2.5)

    assert transport.base_url == BASE_URL
    assert transport.timeout == 2.5


# ── Requests ────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_get_sends_params_and_api_key_header(mock_api):
    mock_api.reply(success([{"id": 1}]))
    transport = _transport(mock_api)

    body = await transport.get("/api/v1/articles", {"interval": "24h"})

    assert body == success([{"id": 1}])
    assert len(mock_api.requests) == 1
    request = mock_api.last
    assert request.method == "GET"
    assert request.url.host == "api.test"
    assert request.url.path == "/api/v1/articles"
    assert dict(request.url.params) == {"interval": "24h"}
    assert request.headers["X-RapidAPI-Key"] == API_KEY


@pytest.mark.asyncio
async def test_base_url_with_path_prefix_is_kept(mock_api):
    transport = TransportService(
        API_KEY, base_url="https://gateway.test/proxy", transport=mock_api.transport
    )

    await transport.get("/api/v1/decrypt")

    assert mock_api.last.url.path == "/proxy/api/v1/decrypt"


@pytest.mark.asyncio
async def test_empty_body_decodes_to_none(mock_api):
    mock_api.reply(b"")
    transport = _transport(mock_api)

    assert await transport.get("/api/v1/articles") is None


@pytest.mark.asyncio
async def test_non_json_body_is_returned_as_text(mock_api):
    mock_api.reply("not json")
    transport = _transport(mock_api)

    assert await transport.get("/api/v1/articles") == "not json"


# ── Failures ────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_http_error_status_raises_http_error(mock_api):
    mock_api.reply({"error": "server"}, status=500)
    transport = _transport(mock_api)

    with pytest.raises(ClientHttpError) as exc_info:
        await transport.get("/api/v1/articles")

    error = exc_info.value
    assert error.kind is ClientErrorKind.HTTP
    assert error.status_code == 500
    assert error.details == {"error": "server"}


@pytest.mark.asyncio
async def test_http_error_keeps_text_body(mock_api):
    mock_api.reply("Forbidden", status=403)
    transport = _transport(mock_api)

    with pytest.raises(ClientHttpError) as exc_info:
        await transport.get("/api/v1/articles")

    assert exc_info.value.status_code == 403
    assert exc_info.value.details == "Forbidden"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error_cls",
    [httpx.ConnectError, httpx.ReadTimeout, httpx.RemoteProtocolError],
)
async def test_unreachable_remote_raises_network_error(mock_api, error_cls):
    mock_api.fail(error_cls("Network down"))
    transport = _transport(mock_api)

    with pytest.raises(ClientNetworkError) as exc_info:
        await transport.get("/api/v1/articles")

    error = exc_info.value
    assert error.kind is ClientErrorKind.NETWORK
    assert error.status_code is None
    assert isinstance(error.cause, error_cls)
    assert error.__cause__ is error.cause


@pytest.mark.asyncio
async def test_aclose_closes_underlying_client(mock_api):
    transport = _transport(mock_api)

    await transport.aclose()

    with pytest.raises(RuntimeError):
        await transport.get("/api/v1/articles")
