"""Tests for PKCE generation and the authorize URL."""

import base64
import hashlib
from urllib.parse import parse_qs, urlparse

from oauth.authorization import AuthorizationURLBuilder
from oauth.pkce import compute_challenge, generate


class TestPKCE:
    """Tests for PKCE utilities."""

    def test_generate_lengths(self):
        """Verifier is 32 random bytes base64url encoded, state is 16 bytes hex."""
        request = generate()

        assert len(request.verifier) == 43
        assert len(request.challenge) == 43
        assert len(request.state) == 32
        int(request.state, 16)

    def test_challenge_is_sha256_of_verifier(self):
        """challenge == base64url(SHA256(verifier)) without padding."""
        for _ in range(20):
            request = generate()
            digest = hashlib.sha256(request.verifier.encode("ascii")).digest()
            expected = base64.urlsafe_b64encode(digest).decode("ascii").rstrip("=")

            assert request.challenge == expected
            assert request.challenge != request.verifier

    def test_no_padding_or_unsafe_characters(self):
        """Encoded values use the URL-safe alphabet with padding stripped."""
        for _ in range(20):
            request = generate()
            for value in (request.verifier, request.challenge):
                assert "=" not in value
                assert "+" not in value
                assert "/" not in value

    def test_compute_challenge_rfc7636_vector(self):
        """Known test vector (RFC 7636 Appendix B)."""
        verifier = "dBjftJeZ4CVP-mB92K27uhbUJU1p1r_wW1gFWFOEjXk"
        assert compute_challenge(verifier) == "E9Melhoa2OwvFrEMTJguCHaoeK1t8URWbuGJSstw-cM"

    def test_generate_unique(self):
        """Each request gets a fresh verifier and state."""
        requests = [generate() for _ in range(10)]

        assert len({r.verifier for r in requests}) == 10
        assert len({r.state for r in requests}) == 10


class TestAuthorizationURLBuilder:
    """Tests for authorize URL construction."""

    def test_authorize_url_parameters(self):
        builder = AuthorizationURLBuilder(
            "https://id.kick.com/oauth/authorize",
            "client-id",
            "http://localhost:3030/auth/callback",
            "events:subscribe chat:read",
        )
        request = generate()

        url = urlparse(builder.get_authorize_url(request))
        params = {k: v[0] for k, v in parse_qs(url.query).items()}

        assert f"{url.scheme}://{url.netloc}{url.path}" == "https://id.kick.com/oauth/authorize"
        assert params == {
            "response_type": "code",
            "client_id": "client-id",
            "redirect_uri": "http://localhost:3030/auth/callback",
            "scope": "events:subscribe chat:read",
            "state": request.state,
            "code_challenge": request.challenge,
            "code_challenge_method": "S256",
        }
