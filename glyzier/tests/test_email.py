import json
import httpx
import pytest
from ..core import config, email_utils


@pytest.fixture
def provider(monkeypatch):
    """Route the email client through an in-process transport."""
    captured = {"requests": [], "status": 202}

    def handler(request):
        captured["requests"].append(request)
        return httpx.Response(captured["status"])

    real_client = httpx.AsyncClient
    monkeypatch.setattr(email_utils.httpx, "AsyncClient",
                        lambda **kwargs: real_client(transport=httpx.MockTransport(handler), **kwargs))
    monkeypatch.setattr(config, "EMAIL_API_URL", "https://mail.glyzier.io/v3/send")
    monkeypatch.setattr(config, "EMAIL_API_KEY", "test-key")
    return captured


@pytest.mark.asyncio
async def test_reset_code_is_sent_through_provider(provider):
    assert await email_utils.send_password_reset_code("user@glyzier.io", "482913") is True

    request = provider["requests"][0]
    assert request.headers["Authorization"] == "Bearer test-key"
    payload = json.loads(request.content)
    assert payload["personalizations"][0]["to"] == [{"email": "user@glyzier.io"}]
    assert "482913" in payload["content"][0]["value"]


@pytest.mark.asyncio
async def test_provider_errors_return_false(provider):
    provider["status"] = 500
    assert await email_utils.send_email("user@glyzier.io", "Subject", "Body") is False


@pytest.mark.asyncio
async def test_unconfigured_provider_is_skipped(monkeypatch):
    monkeypatch.setattr(config, "EMAIL_API_URL", "")
    assert email_utils.is_email_configured() is False
    assert await email_utils.send_password_reset_code("user@glyzier.io", "000111") is False
