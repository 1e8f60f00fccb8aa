import httpx
import pytest

from venue_dashboard.clients.membership_client import MembershipClient, MembershipTransportError


class _FakeAsyncClient:
    responses: list[httpx.Response] = []
    calls: list[dict] = []
    raise_on_post: Exception | None = None

    def __init__(self, timeout: float):
        self.timeout = timeout

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def post(self, url, json=None, headers=None):
        self.calls.append(
            {"url": url, "json": json, "headers": headers or {}, "timeout": self.timeout}
        )
        if self.raise_on_post is not None:
            raise self.raise_on_post
        response = self.responses.pop(0)
        response.request = httpx.Request("POST", url)
        return response


@pytest.fixture(autouse=True)
def _patch_async_client(monkeypatch):
    _FakeAsyncClient.responses = []
    _FakeAsyncClient.calls = []
    _FakeAsyncClient.raise_on_post = None
    monkeypatch.setattr("httpx.AsyncClient", _FakeAsyncClient)


@pytest.mark.asyncio
async def test_lookup_posts_mobile_with_timeout_and_correlation_header():
    _FakeAsyncClient.responses.append(httpx.Response(200, text='{"membershipSummary": {}}'))
    client = MembershipClient(webhook_url="http://n8n/webhook/Membership-Info", timeout_seconds=2.5)

    status, body = await client.lookup(mobile="0812345678", correlation_id="corr-1")

    assert status == 200
    assert body == '{"membershipSummary": {}}'
    call = _FakeAsyncClient.calls[0]
    assert call["url"] == "http://n8n/webhook/Membership-Info"
    assert call["json"] == {"mobile": "0812345678"}
    assert call["headers"] == {"X-Correlation-Id": "corr-1"}
    assert call["timeout"] == 2.5


@pytest.mark.asyncio
async def test_lookup_returns_raw_text_for_error_status():
    _FakeAsyncClient.responses.append(httpx.Response(503, text="Service Unavailable"))
    client = MembershipClient(webhook_url="http://n8n/webhook", timeout_seconds=1.0)

    status, body = await client.lookup(mobile="0812345678", correlation_id="")

    assert status == 503
    assert body == "Service Unavailable"
    assert _FakeAsyncClient.calls[0]["headers"] == {}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        httpx.ConnectError("connection refused"),
        httpx.ReadTimeout("timed out"),
    ],
)
async def test_lookup_wraps_transport_errors(error):
    _FakeAsyncClient.raise_on_post = error
    client = MembershipClient(webhook_url="http://n8n/webhook", timeout_seconds=1.0)

    with pytest.raises(MembershipTransportError) as exc_info:
        await client.lookup(mobile="0812345678", correlation_id="corr-1")

    assert error.__class__.__name__ in str(exc_info.value)
    assert exc_info.value.__cause__ is error
