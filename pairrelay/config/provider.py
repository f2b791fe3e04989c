"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from typing import List, Protocol


@dataclass
class APIConfig:
    """API configuration."""
    port: int
    host: str
    debug: bool
    cors_origins: List[str]


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_api_config(self) -> APIConfig:
        """Get API configuration."""
        ...

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    DEFAULT_PORT = 3000

    def get_api_config(self) -> APIConfig:
        """Get API configuration from environment variables."""
        return APIConfig(
            port=self._parse_port(os.getenv("PORT", str(self.DEFAULT_PORT))),
            host=os.getenv("HOST", "0.0.0.0"),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            cors_origins=[
                origin.strip()
                for origin in os.getenv("CORS_ORIGINS", "*").split(",")
                if origin.strip()
            ],
        )

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration from environment variables."""
        level = os.getenv("LOG_LEVEL", "INFO").upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid LOG_LEVEL: {level}")
        return LoggingConfig(level=level)

    @staticmethod
    def _parse_port(value: str) -> int:
        try:
            port = int(value)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got '{value}'") from None

        if not 1 <= port <= 65535:
            raise ValueError(f"PORT out of range: {port}")
        return port
