"""Configuration management for the NetBox provider."""

import logging
import logging.config
from typing import Any, Literal

from pydantic import AnyUrl, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Everything needed to reach NetBox and to serve lifecycle requests.

    Values are resolved from command-line overrides first, then environment
    variables (NETBOX_URL, NETBOX_TOKEN, TIMEOUT, ...), then a local .env file.
    """

    # NetBox connection
    netbox_url: AnyUrl
    """NetBox root URL; the /api suffix is optional"""

    netbox_token: SecretStr
    """NetBox API token, sent as ``Authorization: Token <token>``"""

    verify_ssl: bool = True
    """Verify the NetBox TLS certificate"""

    timeout: float = 30.0
    """Seconds a single NetBox request may take"""

    # Lifecycle requests
    transport: Literal["stdio", "http"] = "stdio"
    """How hosts reach the provider: over stdin/stdout, or over HTTP"""

    host: str = "127.0.0.1"
    """Listen address when transport is http"""

    port: int = 8000
    """Listen port when transport is http"""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not (0 < v < 65536):
            raise ValueError(f"Port must be between 1 and 65535, got {v}")
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"Timeout must be positive, got {v}")
        return v

    @field_validator("netbox_url")
    @classmethod
    def validate_netbox_url(cls, v: AnyUrl) -> AnyUrl:
        if not v.scheme or not v.host:
            raise ValueError(
                "NETBOX_URL must include scheme and host (e.g., https://netbox.example.com/)"
            )
        return v

    def get_effective_config_summary(self) -> dict:
        """Settings as they are safe to log: the token is masked, listen options only apply to http."""
        return {
            "netbox_url": str(self.netbox_url),
            "netbox_token": "***REDACTED***",
            "transport": self.transport,
            "host": self.host if self.transport == "http" else "N/A",
            "port": self.port if self.transport == "http" else "N/A",
            "verify_ssl": self.verify_ssl,
            "timeout": self.timeout,
            "log_level": self.log_level,
        }


def configure_logging(
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
) -> None:
    """
    Configure console logging on stderr using dictConfig.

    stdout is left alone since the stdio transport owns it.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    http_level = "DEBUG" if log_level == "DEBUG" else "WARNING"
    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "console",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "urllib3": {"level": http_level},
            "requests": {"level": http_level},
        },
        "root": {
            "level": log_level,
            "handlers": ["console"],
        },
    }

    logging.config.dictConfig(config)
