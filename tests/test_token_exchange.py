"""Tests for the token exchange client."""

import json
from urllib.parse import parse_qs

import httpx
import pytest

from errors import MalformedResponse, NetworkError, ProviderError
from oauth.models import TokenSet
from oauth.token_exchange import TokenExchangeClient

TOKEN_URL = "https://id.kick.test/oauth/token"


def make_client(handler) -> TokenExchangeClient:
    return TokenExchangeClient(
        TOKEN_URL,
        "client-id",
        "client-secret",
        "http://localhost:3030/auth/callback",
        timeout=1.0,
        transport=httpx.MockTransport(handler),
    )


class TestTokenExchange:
    """Tests for TokenExchangeClient.exchange."""

    @pytest.mark.asyncio
    async def test_success_sends_form_encoded_request(self):
        captured = {}

        def handler(request):
            captured["method"] = request.method
            captured["content_type"] = request.headers["content-type"]
            captured["form"] = {k: v[0] for k, v in parse_qs(request.content.decode()).items()}
            return httpx.Response(200, json={
                "access_token": "at",
                "refresh_token": "rt",
                "token_type": "Bearer",
                "expires_in": 7200,
                "scope": "events:subscribe",
            })

        tokens = await make_client(handler).exchange("the-code", "the-verifier")

        assert tokens == TokenSet("at", "rt", "Bearer", 7200, "events:subscribe")
        assert captured["method"] == "POST"
        assert captured["content_type"].startswith("application/x-www-form-urlencoded")
        assert captured["form"] == {
            "grant_type": "authorization_code",
            "client_id": "client-id",
            "client_secret": "client-secret",
            "redirect_uri": "http://localhost:3030/auth/callback",
            "code_verifier": "the-verifier",
            "code": "the-code",
        }

    @pytest.mark.asyncio
    async def test_optional_fields_may_be_absent(self):
        client = make_client(lambda request: httpx.Response(200, json={"access_token": "at"}))

        tokens = await client.exchange("c", "v")

        assert tokens.access_token == "at"
        assert tokens.refresh_token is None

    @pytest.mark.asyncio
    async def test_null_optional_fields_use_defaults(self):
        client = make_client(lambda request: httpx.Response(200, json={
            "access_token": "at",
            "refresh_token": None,
            "token_type": None,
            "expires_in": None,
            "scope": None,
        }))

        tokens = await client.exchange("c", "v")

        assert tokens == TokenSet("at", None, "", 0, "")

    @pytest.mark.asyncio
    async def test_provider_error(self):
        client = make_client(lambda request: httpx.Response(400, text='{"error":"invalid_grant"}'))

        with pytest.raises(ProviderError) as exc_info:
            await client.exchange("c", "v")

        assert exc_info.value.status == 400
        assert "invalid_grant" in exc_info.value.body

    @pytest.mark.asyncio
    async def test_missing_access_token(self):
        client = make_client(lambda request: httpx.Response(200, json={"token_type": "Bearer"}))

        with pytest.raises(MalformedResponse):
            await client.exchange("c", "v")

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        client = make_client(lambda request: httpx.Response(200, text="<html>ok</html>"))

        with pytest.raises(MalformedResponse):
            await client.exchange("c", "v")

    @pytest.mark.asyncio
    async def test_undecodable_body(self):
        client = make_client(lambda request: httpx.Response(200, content=b"\xff\xfe\x00\x81garbage"))

        with pytest.raises(MalformedResponse):
            await client.exchange("c", "v")

    @pytest.mark.asyncio
    async def test_non_string_access_token(self):
        client = make_client(lambda request: httpx.Response(200, json={"access_token": 12345}))

        with pytest.raises(MalformedResponse):
            await client.exchange("c", "v")

    @pytest.mark.asyncio
    async def test_non_object_json_body(self):
        client = make_client(lambda request: httpx.Response(200, text=json.dumps(["access_token"])))

        with pytest.raises(MalformedResponse):
            await client.exchange("c", "v")

    @pytest.mark.asyncio
    async def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(NetworkError):
            await make_client(handler).exchange("c", "v")

    @pytest.mark.asyncio
    async def test_timeout_is_network_error(self):
        def handler(request):
            raise httpx.ReadTimeout("too slow", request=request)

        with pytest.raises(NetworkError):
            await make_client(handler).exchange("c", "v")
