"""Console request logger."""

from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from core.config import Config
from ui.log_utils import CLI_LOG_FILE, redact_header, write_cli_log


class ConsoleLogger:
    """Print request diagnostics when LOG_LEVEL=debug; errors are always shown.

    Errors are also appended to the CLI log file unless ``log_file`` is None.
    """

    def __init__(
        self,
        config: Config,
        console: Console | None = None,
        log_file: Path | None = CLI_LOG_FILE,
    ):
        self.debug = config.debug
        self.console = console or Console(stderr=True)
        self.log_file = log_file

    def log_request(self, method: str, path: str) -> None:
        """Log an inbound request line."""
        self._debug(f"[bold]Request:[/bold] {escape(method)} {escape(path)}")

    def log_rejected(self, stage: str, reason: str) -> None:
        """Log which validation stage rejected a request."""
        self._debug(f"[yellow]Rejected ({escape(stage)}):[/yellow] {escape(reason)}")

    def log_forwarded(self, method: str, url: str) -> None:
        self._debug(f"[cyan]Proxying:[/cyan] {escape(method)} {escape(url)}")

    def log_header(self, direction: str, name: str, value: str) -> None:
        label = "Request Header" if direction == "request" else "Response Header"
        self._debug(f"[dim]{label}: {escape(name)}: {escape(redact_header(name, value))}[/dim]")

    def log_response(self, status: int) -> None:
        style = "green" if status < 400 else "red"
        self._debug(f"[{style}]Proxied response:[/{style}] {status}")

    def log_error(self, status: int, message: str) -> None:
        """Log an error."""
        self.console.print(f"{self._timestamp()} [red bold]! {status}[/red bold] {escape(message[:200])}")
        if self.log_file is not None:
            write_cli_log("ERROR", message[:200], log_file=self.log_file, status=status)

    def _debug(self, message: str) -> None:
        if self.debug:
            self.console.print(f"{self._timestamp()} {message}")

    @staticmethod
    def _timestamp() -> str:
        return f"[dim]{datetime.now().strftime('%H:%M:%S')}[/dim]"
