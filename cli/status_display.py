"""Status display functionality for CLI"""

from rich.table import Table
from utils.storage import TokenStorage


def show_token_status(storage: TokenStorage, console):
    """
    Display stored token status without secrets

    Args:
        storage: TokenStorage instance
        console: Rich console for output
    """
    status = storage.get_status()

    table = Table(title="Kick Token Status")
    table.add_column("Property", style="cyan")
    table.add_column("Value")

    table.add_row("Has Tokens", "Yes" if status["has_tokens"] else "No")
    table.add_row("Is Expired", "Yes" if status["is_expired"] else "No")

    if status["expires_at"]:
        table.add_row("Expires At", status["expires_at"])
        table.add_row("Time Until Expiry", status["time_until_expiry"])
    if status.get("scope"):
        table.add_row("Scope", status["scope"])
    if status["has_tokens"]:
        table.add_row("Refresh Token", "Yes" if status.get("has_refresh_token") else "No")

    table.add_row("Token File", str(storage.token_file))

    console.print(table)
