"""CLI entry point and argument parsing"""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console

import settings
from errors import ConfigError
from utils.storage import TokenStorage
from cli.status_display import show_token_status


console = Console()


def _setup_logging():
    logging.basicConfig(
        level=str(settings.LOG_LEVEL).upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def main(argv=None):
    """Entry point for the CLI"""
    parser = argparse.ArgumentParser(description="Zoltar Relay: Kick OAuth, webhooks and Unreal mailboxes")
    parser.add_argument("--debug", "-d", action="store_true", help="Enable debug logging (also enabled by DEBUG=true)")
    parser.add_argument("--bind", "-b", default=None, help="Override bind address (default: from config)")
    parser.add_argument("--port", "-p", type=int, default=None, help="Override listen port (default: from config)")
    parser.add_argument("--status", action="store_true", help="Show stored token status and exit")

    args = parser.parse_args(argv)

    if args.status:
        show_token_status(TokenStorage(Path(settings.TOKEN_FILE)), console)
        return 0

    debug = args.debug or settings.DEBUG
    if not debug:
        _setup_logging()

    # Imported here so --status works without the server stack
    from server import RelayServer

    try:
        server = RelayServer(debug=debug, bind_address=args.bind, port=args.port)
    except ConfigError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        console.print("Set KICK_CLIENT_ID, KICK_CLIENT_SECRET and REDIRECT_URI in the environment or .env")
        return 1

    console.print(f"[green]✓ Zoltar Relay starting on http://{server.bind_address}:{server.port}[/green]")
    console.print(f"  Log in at http://localhost:{server.port}/auth/start")

    try:
        server.run()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        console.print("Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
