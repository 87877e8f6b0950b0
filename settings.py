from pathlib import Path

from config.loader import get_config_loader
from errors import ConfigError

# Get the config loader instance
config = get_config_loader()

# Server configuration
PORT = config.get("PORT", 3030)
LOG_LEVEL = config.get("LOG_LEVEL", "info")
BIND_ADDRESS = config.get("BIND_ADDRESS", "0.0.0.0")
DEBUG = config.get("DEBUG", False)
CORS_ALLOW_ORIGINS = config.get_list("CORS_ALLOW_ORIGINS", ["*"])

# Outbound timeout for the token and public key endpoints (seconds)
HTTP_TIMEOUT = config.get("HTTP_TIMEOUT", 10.0)

# Kick OAuth configuration
# Authorization and token exchange both live on id.kick.com
AUTHORIZE_URL = "https://id.kick.com/oauth/authorize"
TOKEN_URL = "https://id.kick.com/oauth/token"
CLIENT_ID = config.get("KICK_CLIENT_ID", "")
CLIENT_SECRET = config.get("KICK_CLIENT_SECRET", "")
REDIRECT_URI = config.get("REDIRECT_URI", "")
SCOPE = config.get("KICK_OAUTH_SCOPE", "events:subscribe")

REQUIRED_OAUTH_VARS = ("KICK_CLIENT_ID", "KICK_CLIENT_SECRET", "REDIRECT_URI")

# Kick webhook signing key
PUBLIC_KEY_URL = "https://api.kick.com/public/v1/public-key"

# Chat trigger that earns a prediction
ZOLTAR_TRIGGER = config.get("ZOLTAR_TRIGGER", "!zoltar give me a prediction")

# Persisted state
DATA_DIR = config.get_path("DATA_DIR", "~/.zoltar-relay")
TOKEN_FILE = config.get_path("TOKEN_FILE", str(Path(DATA_DIR) / "tokens.json"))
PKCE_FILE = config.get_path("PKCE_FILE", str(Path(DATA_DIR) / "pkce.json"))


def require_oauth_settings() -> None:
    """Fail fast when the OAuth client credentials are not configured

    Raises:
        ConfigError: If any of KICK_CLIENT_ID, KICK_CLIENT_SECRET or REDIRECT_URI is unset
    """
    values = {
        "KICK_CLIENT_ID": CLIENT_ID,
        "KICK_CLIENT_SECRET": CLIENT_SECRET,
        "REDIRECT_URI": REDIRECT_URI,
    }
    missing = [name for name in REQUIRED_OAUTH_VARS if not values[name]]
    if missing:
        raise ConfigError(f"Missing required configuration: {', '.join(missing)}")
