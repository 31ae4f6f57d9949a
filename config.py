"""
Configuration module for environment variable validation and type-safe config.

The service refuses to start without a VERSION; everything else has a
default or is left to the boto3 credential/region chain.
"""
import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Type-safe configuration object with validated environment variables."""

    version: str
    aws_region: Optional[str] = None
    log_level: str = "INFO"
    request_timeout: float = 10.0

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create Config instance from environment variables.

        Raises:
            ValueError: If required environment variables are missing or invalid.
        """
        version = os.environ.get("VERSION")
        if not version:
            raise ValueError(
                "VERSION environment variable is required"
            )

        # None lets boto3 resolve the region from its own chain
        aws_region = os.environ.get("AWS_REGION") or None
        log_level = os.environ.get("LOG_LEVEL", "INFO").upper()

        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if log_level not in valid_log_levels:
            raise ValueError(
                f"LOG_LEVEL must be one of {valid_log_levels}, got: {log_level}"
            )

        raw_timeout = os.environ.get("AWS_REQUEST_TIMEOUT", "10")
        try:
            request_timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(
                f"AWS_REQUEST_TIMEOUT must be a number, got: {raw_timeout}"
            ) from None
        if request_timeout <= 0:
            raise ValueError(
                f"AWS_REQUEST_TIMEOUT must be positive, got: {raw_timeout}"
            )

        return cls(
            version=version,
            aws_region=aws_region,
            log_level=log_level,
            request_timeout=request_timeout,
        )


_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config: The validated configuration object

    Raises:
        ValueError: If required environment variables are missing or invalid.
    """
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config
