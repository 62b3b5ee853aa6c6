"""Configuration and settings management."""

from pydantic_settings import BaseSettings
from pydantic import field_validator

from ..core.constants import CARD_SCAN_TRIES


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_CARD_NUMBERS: bool = False

    # Scanning
    CARD_SCAN_TRIES: int = CARD_SCAN_TRIES

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        """Convert empty/whitespace strings to default."""
        if isinstance(v, str) and not v.strip():
            return "INFO"
        return v

    @field_validator('CARD_SCAN_TRIES', mode='before')
    @classmethod
    def validate_scan_tries_blank(cls, v):
        """Convert empty/whitespace strings to default."""
        if isinstance(v, str) and not v.strip():
            return CARD_SCAN_TRIES
        return v

    @field_validator('CARD_SCAN_TRIES')
    @classmethod
    def validate_scan_tries(cls, v):
        """At least one valid observation is needed to stabilize a card."""
        if v < 1:
            raise ValueError("CARD_SCAN_TRIES must be at least 1")
        return v

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore"
    }

# Global settings instance
settings = Settings()
