"""CLI entry point for shortcut-proxy."""

import sys
from datetime import datetime

from rich.console import Console

from app import create_app
from auth import create_auth_app
from core.config import Config, load_config
from core.exceptions import ConfigurationError
from ui.console import ConsoleLogger
from ui.log_utils import CLI_LOG_FILE, clear_logs, mask, write_cli_log

console = Console()


def main():
    """Main CLI entry point."""
    args = sys.argv[1:]

    if args and args[0] in ("--help", "-h"):
        _print_help()
        return

    try:
        config = load_config()
        if args and args[0] == "--auth":
            config.credentials()
    except ConfigurationError as e:
        console.print(f"[red][ERROR][/red] {e}")
        sys.exit(1)

    if args and args[0] == "--config":
        _print_config(config)
        return

    logger = ConsoleLogger(config)
    if args and args[0] == "--auth":
        app = create_auth_app(config, logger)
        name = "Auth service"
    elif args:
        console.print(f"[red][ERROR][/red] Unknown argument: {args[0]}")
        _print_help()
        sys.exit(2)
    else:
        app = create_app(config, logger)
        name = "Proxy"

    import uvicorn

    uvicorn_config = uvicorn.Config(
        app,
        host=config.proxy_host,
        port=config.proxy_port,
        log_level="debug" if config.debug else "warning",
    )
    server = uvicorn.Server(uvicorn_config)

    console.print(f"[bold cyan]{name}[/bold cyan] listening on {config.proxy_host}:{config.proxy_port}")
    clear_logs()
    start_time = datetime.now()
    write_cli_log("STARTUP", f"{name} started", port=config.proxy_port, target=config.proxy_target)
    try:
        server.run()
    finally:
        duration = datetime.now() - start_time
        write_cli_log("SHUTDOWN", f"{name} stopped", duration=str(duration))


def _print_config(config: Config):
    """Print effective configuration with secrets masked."""
    for key, value in config.model_dump().items():
        if key == "auth_passwords" and value:
            value = ",".join(mask(p) for p in value.split(","))
        console.print(f"[bold]{key.upper()}:[/bold] {value}")
    console.print(f"[bold]LOG_FILE:[/bold] {CLI_LOG_FILE}")


def _print_help():
    """Print help message."""
    help_text = """
[bold cyan]Shortcut Proxy[/bold cyan]

Validates requests to a URL-shortener API and forwards valid ones upstream.

[bold]Usage:[/bold]
    shortcut-proxy              Start the validating proxy
    shortcut-proxy --auth       Start the forward-auth service
    shortcut-proxy --config     Show effective configuration
    shortcut-proxy --help       Show this help

[bold]Environment:[/bold]
    PROXY_TARGET       Upstream base URL
    LOG_LEVEL          off | debug
    PROXY_HOST         Bind host (default 0.0.0.0)
    PROXY_PORT         Bind port (default 8000)
    AUTH_USERNAMES     Comma-separated usernames (--auth)
    AUTH_PASSWORDS     Comma-separated passwords (--auth)
"""
    console.print(help_text)


if __name__ == "__main__":
    main()
