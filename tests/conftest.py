"""Shared fixtures: a throwaway RSA key pair and a stubbed Kick provider."""

import base64
import json
from pathlib import Path
from urllib.parse import parse_qs

import httpx
import pytest
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from fastapi.testclient import TestClient

from oauth import (
    AuthorizationStateStore,
    AuthorizationURLBuilder,
    OAuthManager,
    TokenExchangeClient,
)
from relay import EventRelay
from server.app import create_app
from utils.storage import TokenStorage
from webhooks import PublicKeyCache

AUTHORIZE_URL = "https://id.kick.test/oauth/authorize"
TOKEN_URL = "https://id.kick.test/oauth/token"
PUBLIC_KEY_URL = "https://api.kick.test/public/v1/public-key"
CLIENT_ID = "test-client-id"
CLIENT_SECRET = "test-client-secret"
REDIRECT_URI = "http://localhost:3030/auth/callback"
SCOPE = "events:subscribe"

TOKEN_RESPONSE = {
    "access_token": "access-123",
    "refresh_token": "refresh-456",
    "token_type": "Bearer",
    "expires_in": 3600,
    "scope": "events:subscribe",
}


@pytest.fixture(scope="session")
def rsa_private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def public_pem(rsa_private_key):
    return rsa_private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("utf-8")


@pytest.fixture
def sign(rsa_private_key):
    """Sign a webhook the way Kick does: messageId.timestamp.rawBody"""

    def _sign(message_id: str, timestamp: str, body: bytes) -> str:
        payload = f"{message_id}.{timestamp}.".encode("utf-8") + body
        signature = rsa_private_key.sign(payload, padding.PKCS1v15(), hashes.SHA256())
        return base64.b64encode(signature).decode("ascii")

    return _sign


class ProviderStub:
    """Fake Kick token and public-key endpoints behind an httpx.MockTransport"""

    def __init__(self, public_pem: str):
        self.public_pem = public_pem
        self.token_status = 200
        self.token_body = json.dumps(TOKEN_RESPONSE)
        self.token_requests = []
        self.key_requests = 0

    def handler(self, request: httpx.Request) -> httpx.Response:
        if str(request.url) == TOKEN_URL:
            self.token_requests.append(
                {k: v[0] for k, v in parse_qs(request.content.decode("utf-8")).items()}
            )
            return httpx.Response(self.token_status, text=self.token_body)
        if str(request.url) == PUBLIC_KEY_URL:
            self.key_requests += 1
            return httpx.Response(200, json={"data": {"public_key": self.public_pem}})
        return httpx.Response(404, text="not found")

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def provider(public_pem):
    return ProviderStub(public_pem)


@pytest.fixture
def state_store(tmp_path):
    return AuthorizationStateStore(tmp_path / "pkce.json")


@pytest.fixture
def token_storage(tmp_path):
    return TokenStorage(tmp_path / "tokens.json")


@pytest.fixture
def oauth_manager(provider, state_store, token_storage):
    return OAuthManager(
        state_store=state_store,
        auth_builder=AuthorizationURLBuilder(AUTHORIZE_URL, CLIENT_ID, REDIRECT_URI, SCOPE),
        exchange_client=TokenExchangeClient(
            TOKEN_URL, CLIENT_ID, CLIENT_SECRET, REDIRECT_URI, transport=provider.transport
        ),
        storage=token_storage,
    )


@pytest.fixture
def relay():
    return EventRelay(predictor=lambda user: f"{user}, the stars align.")


@pytest.fixture
def app(oauth_manager, provider, relay):
    key_cache = PublicKeyCache(PUBLIC_KEY_URL, transport=provider.transport)
    return create_app(oauth_manager, key_cache, relay)


@pytest.fixture
def client(app):
    return TestClient(app)


def read_pending(path: Path) -> dict:
    return json.loads(path.read_text())
