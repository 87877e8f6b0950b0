"""Configuration loader for Zoltar Relay

Values come from the process environment first, then from a .env file, then
from the defaults written in settings.py. The type of each default decides how
the raw string is coerced.
"""

import logging
import os
from pathlib import Path
from typing import Any, List, Optional
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

TRUE_VALUES = ("true", "1", "yes", "on")


class ConfigLoader:
    """Typed lookups over the environment and an optional .env file"""

    def __init__(self, env_path: Optional[str] = None):
        """
        Args:
            env_path: Path of the .env file. Defaults to '.env' in the working directory.
                      Variables already set in the environment are never overridden by it.
        """
        self.env_path = Path(env_path) if env_path else Path(".env")
        self._load_env_file()

    def _load_env_file(self):
        if self.env_path.exists():
            load_dotenv(dotenv_path=self.env_path)
            logger.debug(f"Loaded relay settings from {self.env_path}")
        else:
            logger.debug(f"No .env file at {self.env_path}, using environment and defaults")

    def get(self, env_var: str, default: Any) -> Any:
        """Look up a setting, coerced to the type of its default

        bool defaults accept true/1/yes/on (case-insensitive). int and float
        values that fail to parse log a warning and fall back to the default.
        """
        raw = os.getenv(env_var)
        if raw is None:
            return default
        return self._coerce(env_var, raw, default)

    def get_path(self, env_var: str, default: str) -> str:
        """Look up a filesystem path, expanding a leading ``~`` in either source"""
        return str(Path(self.get(env_var, default)).expanduser())

    def get_list(self, env_var: str, default: List[str]) -> List[str]:
        """Look up a comma-separated setting; blank items are dropped"""
        raw = os.getenv(env_var)
        if raw is None:
            return list(default)
        return [item.strip() for item in raw.split(",") if item.strip()]

    @staticmethod
    def _coerce(env_var: str, raw: str, default: Any) -> Any:
        # bool before int: bool is a subclass of int
        if isinstance(default, bool):
            return raw.strip().lower() in TRUE_VALUES
        for kind in (int, float):
            if isinstance(default, kind):
                try:
                    return kind(raw)
                except ValueError:
                    logger.warning(f"Ignoring {env_var}={raw!r}: not a valid {kind.__name__}, using {default}")
                    return default
        return raw


_config_loader = None


def get_config_loader() -> ConfigLoader:
    """Get or create the process-wide ConfigLoader"""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader
