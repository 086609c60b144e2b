"""Configuration for the order-book HTTP server."""

import logging
from dataclasses import dataclass

from ..shared.constants import PUBLIC_KEY_PREFIXES

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 17001
# Request bodies are capped before JSON decoding
MAX_REQUEST_BODY_SIZE_BYTES = 10 * 1024 * 1024


def _validate_log_level(log_level: str) -> None:
    # getLevelName maps a known name to its int level
    if not isinstance(logging.getLevelName(str(log_level).upper()), int):
        raise ValueError(f"Unknown log level {log_level!r}")


@dataclass
class ServerConfig:
    """Configuration for the order-book server."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    max_body_bytes: int = MAX_REQUEST_BODY_SIZE_BYTES
    network: str = "mainnet"
    log_level: str = "INFO"

    def __post_init__(self):
        if self.network not in PUBLIC_KEY_PREFIXES:
            raise ValueError(
                f"Unknown network {self.network!r} (must be one of {sorted(PUBLIC_KEY_PREFIXES)})"
            )
        if self.max_body_bytes <= 0:
            raise ValueError(f"max_body_bytes must be positive, got {self.max_body_bytes}")
        _validate_log_level(self.log_level)

    @classmethod
    def default(cls) -> "ServerConfig":
        """Create default config (mainnet, localhost)."""
        return cls()

    @classmethod
    def testnet(cls) -> "ServerConfig":
        """Create config for a testnet node."""
        return cls(network="testnet")

    def with_host(self, host: str) -> "ServerConfig":
        """Set listen host."""
        self.host = host
        return self

    def with_port(self, port: int) -> "ServerConfig":
        """Set listen port."""
        self.port = port
        return self

    def with_max_body_bytes(self, max_body_bytes: int) -> "ServerConfig":
        """Set request body size cap."""
        if max_body_bytes <= 0:
            raise ValueError(f"max_body_bytes must be positive, got {max_body_bytes}")
        self.max_body_bytes = max_body_bytes
        return self

    def with_log_level(self, log_level: str) -> "ServerConfig":
        """Set log level name."""
        _validate_log_level(log_level)
        self.log_level = log_level
        return self
