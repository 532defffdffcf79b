"""Shared logging utilities."""

from datetime import UTC, datetime
from pathlib import Path
from typing import Any

LOG_ROOT = Path.cwd() / "logs"
CLI_LOG_FILE = LOG_ROOT / "proxy.log"

SENSITIVE_HEADER_MARKERS = ("authorization", "key", "cookie", "password")


def write_cli_log(
    level: str,
    message: str,
    *,
    log_file: Path = CLI_LOG_FILE,
    **extra: Any,
) -> None:
    """Append a line to the rolling CLI log file."""
    log_file.parent.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S")
    extra_str = " ".join(f"{k}={v}" for k, v in extra.items()) if extra else ""
    line = f"[{timestamp}] {level}: {message}"
    if extra_str:
        line += f" {extra_str}"
    line += "\n"
    with log_file.open("a") as f:
        f.write(line)


def clear_logs(log_file: Path = CLI_LOG_FILE) -> None:
    """Truncate the CLI log file."""
    if log_file.exists():
        log_file.write_text("")


def redact_header(name: str, value: str) -> str:
    """Mask values of credential-bearing headers."""
    name = name.lower()
    if any(marker in name for marker in SENSITIVE_HEADER_MARKERS):
        return mask(value)
    return value


def mask(value: str) -> str:
    if len(value) <= 10:
        return "***"
    return value[:6] + "..." + value[-4:]
