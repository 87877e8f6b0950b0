import json
import logging
import os
import platform
import tempfile
import time
from pathlib import Path
from typing import Any, Dict, Optional

from oauth.models import TokenSet

logger = logging.getLogger(__name__)


class TokenStorage:
    """Durable token storage with atomic replace and restrictive permissions"""

    def __init__(self, token_file: Path):
        self.token_path = Path(token_file)
        self._ensure_secure_directory()

    def _ensure_secure_directory(self):
        """Create parent directory with secure permissions"""
        parent_dir = self.token_path.parent
        if not parent_dir.exists():
            parent_dir.mkdir(parents=True, exist_ok=True)
            # Set directory permissions to 700 on Unix-like systems
            if platform.system() != "Windows":
                os.chmod(parent_dir, 0o700)

    def save(self, tokens: TokenSet) -> None:
        """Replace the stored token set

        Writes to a temporary file in the same directory and renames it over
        the target, so a reader sees either the old or the new document.
        """
        data = tokens.to_dict()
        data["saved_at"] = int(time.time())

        self._ensure_secure_directory()
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.token_path.name}.", suffix=".tmp", dir=self.token_path.parent
        )
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(data, f, indent=2)
                f.flush()
                os.fsync(f.fileno())
            # mkstemp already creates the file with mode 600
            os.replace(tmp_name, self.token_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.info(f"Saved token set to {self.token_path}")

    def load_tokens(self) -> Optional[Dict[str, Any]]:
        """Load the raw token document from storage"""
        if not self.token_path.exists():
            return None

        try:
            return json.loads(self.token_path.read_text())
        except (ValueError, OSError) as e:
            logger.error(f"Failed to load tokens: {e}")
            return None

    def load(self) -> Optional[TokenSet]:
        """Load the stored token set, or None if nothing usable is stored"""
        data = self.load_tokens()
        if not data or not data.get("access_token"):
            return None
        return TokenSet.from_dict(data)

    def clear_tokens(self):
        """Remove stored tokens"""
        if self.token_path.exists():
            self.token_path.unlink()

    def get_status(self) -> Dict[str, Any]:
        """Get token status without exposing secrets"""
        data = self.load_tokens()
        if not data or not data.get("access_token"):
            return {
                "has_tokens": False,
                "is_expired": True,
                "expires_at": None,
                "time_until_expiry": "No tokens",
                "scope": None,
            }

        saved_at = data.get("saved_at", 0)
        expires_in = data.get("expires_in") or 0
        expires_at = saved_at + expires_in
        current_time = int(time.time())

        from datetime import datetime
        expires_str = datetime.fromtimestamp(expires_at).isoformat()

        if current_time >= expires_at:
            return {
                "has_tokens": True,
                "is_expired": True,
                "expires_at": expires_str,
                "time_until_expiry": "expired",
                "scope": data.get("scope"),
                "has_refresh_token": bool(data.get("refresh_token")),
            }

        time_remaining = expires_at - current_time
        hours = time_remaining // 3600
        minutes = (time_remaining % 3600) // 60

        if hours > 0:
            time_str = f"{hours}h {minutes}m"
        else:
            time_str = f"{minutes}m"

        return {
            "has_tokens": True,
            "is_expired": False,
            "expires_at": expires_str,
            "time_until_expiry": time_str,
            "expires_in_seconds": time_remaining,
            "scope": data.get("scope"),
            "has_refresh_token": bool(data.get("refresh_token")),
        }

    @property
    def token_file(self) -> Path:
        """Get the token file path"""
        return self.token_path
