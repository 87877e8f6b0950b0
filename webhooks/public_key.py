"""Lazy, fetch-once cache of the Kick webhook signing key"""

import asyncio
import json
import logging
from typing import Optional

import httpx
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from errors import MalformedResponse, NetworkError, ProviderError, UpstreamError
from .models import PublicKeyMaterial

logger = logging.getLogger(__name__)

# Pinned copy of Kick's published webhook key, used when the key endpoint is unreachable
FALLBACK_PUBLIC_KEY_PEM = """-----BEGIN PUBLIC KEY-----
MIIBIjANBgkqhkiG9w0BAQEFAAOCAQ8AMIIBCgKCAQEAq/+l1WnlRrGSolDMA+A8
6rAhMbQGmQ2SapVcGM3zq8ANXjnhDWocMqfWcTd95btDydITa10kDvHzw9WQOqp2
MZI7ZyrfzJuz5nhTPCiJwTwnEtWft7nV14BYRDHvlfqPUaZ+1KR4OCaO/wWIk/rQ
L/TjY0M70gse8rlBkbo2a8rKhu69RQTRsoaf4DVhDPEeSeI5jVrRDGAMGL3cGuyY
6CLKGdjVEM78g3JfYOvDU/RvfqD7L89TZ3iN94jrmWdGz34JNlEI5hqK8dd7C5EF
BEbZ5jgB8s8ReQV8H+MkuffjdAj3ajDDX3DOJMIut1lBrUVD1AaSrGCKHooWoL2e
twIDAQAB
-----END PUBLIC KEY-----
"""


class PublicKeyCache:
    """Fetches the signing key on first use and keeps it for the process lifetime

    Concurrent first callers wait on one lock, so the key endpoint is hit at
    most once. A failed fetch, or a response that does not hold a loadable
    public key, caches the pinned fallback key instead. There is no TTL.
    """

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        fallback_pem: str = FALLBACK_PUBLIC_KEY_PEM,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout
        self.fallback_pem = fallback_pem
        self._transport = transport
        self._key: Optional[PublicKeyMaterial] = None
        self._lock = asyncio.Lock()

    @property
    def cached(self) -> Optional[PublicKeyMaterial]:
        return self._key

    async def get(self) -> PublicKeyMaterial:
        """Return the cached key, fetching it on the first call"""
        if self._key is not None:
            return self._key

        async with self._lock:
            if self._key is None:
                try:
                    pem = await self._fetch()
                    self._key = PublicKeyMaterial(pem=pem, source="remote")
                    logger.info(f"Fetched webhook public key from {self.url}")
                except UpstreamError as e:
                    logger.warning(f"Public key fetch failed, using pinned fallback key: {e}")
                    self._key = PublicKeyMaterial(pem=self.fallback_pem, source="fallback")
        return self._key

    async def _fetch(self) -> str:
        """Download the PEM from the key endpoint

        Raises:
            NetworkError: On transport failure or timeout
            ProviderError: On a non-2xx status
            MalformedResponse: If the response holds no loadable PEM public key
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(self.url)
        except httpx.TimeoutException as e:
            raise NetworkError(f"Public key fetch timed out: {e}") from e
        except httpx.RequestError as e:
            raise NetworkError(f"Public key fetch failed: {e}") from e

        if not response.is_success:
            raise ProviderError(response.status_code, response.text)

        pem = _extract_pem(response.text)
        try:
            public_key = serialization.load_pem_public_key(pem.encode("utf-8"))
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise MalformedResponse(f"Public key response holds no usable PEM key: {e}", response.text) from e
        if not isinstance(public_key, rsa.RSAPublicKey):
            raise MalformedResponse("Public key response holds a non-RSA key", response.text)
        return pem


def _extract_pem(body: str) -> str:
    """Pull the PEM out of the key endpoint response

    Kick wraps the key as {"data": {"public_key": ...}}; a flat
    {"public_key": ...} or a bare PEM body are accepted too.
    """
    text = body.strip()
    if text.startswith("-----BEGIN"):
        return text

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedResponse(f"Public key response is not JSON or PEM: {e}", body) from e

    if isinstance(payload, dict):
        data = payload.get("data")
        if isinstance(data, dict) and isinstance(data.get("public_key"), str) and data["public_key"].strip():
            return data["public_key"]
        if isinstance(payload.get("public_key"), str) and payload["public_key"].strip():
            return payload["public_key"]

    raise MalformedResponse("Public key response has no public_key field", body)
