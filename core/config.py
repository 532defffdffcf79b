"""Configuration model and loading."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.exceptions import ConfigurationError

DEFAULT_PATH_PREFIX = "/rest/v3/short-urls"
LOG_LEVELS = ("off", "debug")


class Config(BaseSettings):
    """Settings read once from the process environment (or a .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    proxy_target: str = "http://localhost:8080"
    log_level: str = "off"
    proxy_host: str = "0.0.0.0"
    proxy_port: int = Field(default=8000, ge=1, le=65535)
    path_prefix: str = DEFAULT_PATH_PREFIX
    preserve_query: bool = True
    upstream_timeout: float = Field(default=300.0, gt=0)
    auth_usernames: str = ""
    auth_passwords: str = ""

    @field_validator("proxy_target")
    @classmethod
    def _validate_target(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("PROXY_TARGET must be an http(s) URL")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        # Anything but debug disables request diagnostics
        v = v.strip().lower()
        return v if v in LOG_LEVELS else "off"

    @field_validator("path_prefix")
    @classmethod
    def _validate_prefix(cls, v: str) -> str:
        v = "/" + v.strip().strip("/")
        if v == "/":
            raise ValueError("PATH_PREFIX must not be empty")
        return v

    @property
    def debug(self) -> bool:
        return self.log_level == "debug"

    def credentials(self) -> list[tuple[str, str]]:
        """Pair usernames and passwords positionally."""
        usernames = _split_list(self.auth_usernames)
        passwords = _split_list(self.auth_passwords)
        if len(usernames) != len(passwords):
            raise ConfigurationError(
                f"AUTH_USERNAMES has {len(usernames)} entries but AUTH_PASSWORDS has {len(passwords)}"
            )
        return list(zip(usernames, passwords))


def _split_list(value: str) -> list[str]:
    if not value:
        return []
    return value.split(",")


def load_config(**overrides) -> Config:
    """Load configuration from the environment, raising ConfigurationError if invalid."""
    try:
        return Config(**overrides)
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e
