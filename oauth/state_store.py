"""Pending authorization storage between the redirect and the callback"""

import json
import logging
import os
import secrets
import threading
from pathlib import Path
from typing import Optional

from errors import StateMismatch
from .models import AuthorizationRequest

logger = logging.getLogger(__name__)


class AuthorizationStateStore:
    """Holds the single in-flight authorization on disk

    Only one authorization can be pending at a time; ``put`` replaces any
    earlier request. ``consume`` is single-use, so a callback cannot be
    replayed once it has succeeded.
    """

    def __init__(self, pkce_file: Path):
        """Initialize the store

        Args:
            pkce_file: Path of the JSON document holding the pending request
        """
        self.pkce_file = Path(pkce_file)
        self._lock = threading.Lock()

    def put(self, request: AuthorizationRequest) -> None:
        """Persist a pending request, replacing any previous one"""
        data = json.dumps({"state": request.state, "verifier": request.verifier})
        with self._lock:
            self.pkce_file.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(self.pkce_file, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, "w") as f:
                f.write(data)
        logger.debug(f"Stored pending authorization in {self.pkce_file}")

    def consume(self, state: Optional[str], code: Optional[str]) -> str:
        """Match the callback against the pending request and discard it

        Args:
            state: State parameter from the provider callback
            code: Authorization code from the provider callback

        Returns:
            The code verifier of the matched request

        Raises:
            StateMismatch: If code or state is missing, nothing is pending,
                or the state does not match
        """
        if not code or not state:
            raise StateMismatch()

        with self._lock:
            pending = self._load()
            if pending is None:
                raise StateMismatch()

            stored_state = pending.get("state") or ""
            if not secrets.compare_digest(stored_state.encode(), state.encode()):
                raise StateMismatch()

            self.pkce_file.unlink(missing_ok=True)

        return pending["verifier"]

    def clear(self) -> None:
        """Discard any pending request"""
        with self._lock:
            self.pkce_file.unlink(missing_ok=True)

    def has_pending(self) -> bool:
        """True while a started login is waiting for its callback"""
        return self._load() is not None

    def _load(self) -> Optional[dict]:
        if not self.pkce_file.exists():
            return None
        try:
            data = json.loads(self.pkce_file.read_text())
        except (ValueError, OSError) as e:
            logger.error(f"Failed to read pending authorization: {e}")
            return None
        if not isinstance(data, dict) or not data.get("verifier"):
            return None
        return data
