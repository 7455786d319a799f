"""
Configuration module for the Storefront validation service.

Loads environment variables and validates required settings.
"""
import logging
import os
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS Settings (comma-separated, only used in production)
    CORS_ALLOWED_ORIGINS: List[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",")
        if origin.strip()
    ]

    # Upper bound for the `limit` query value on paginated listings
    MAX_PAGE_SIZE: int = int(os.getenv("MAX_PAGE_SIZE", "100"))

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for LOG_LEVEL (falls back to INFO)."""
        level = logging.getLevelName(self.LOG_LEVEL.upper())
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def validate(cls) -> None:
        """
        Validate that settings hold usable values.

        Raises:
            ValueError: If LOG_LEVEL is unknown or MAX_PAGE_SIZE is not positive.
        """
        problems = []

        if not isinstance(logging.getLevelName(cls.LOG_LEVEL.upper()), int):
            problems.append(f"LOG_LEVEL={cls.LOG_LEVEL!r} is not a logging level")

        if cls.MAX_PAGE_SIZE < 1:
            problems.append(f"MAX_PAGE_SIZE={cls.MAX_PAGE_SIZE} must be at least 1")

        if problems:
            raise ValueError(
                f"Invalid configuration: {'; '.join(problems)}. "
                "Please check your .env file."
            )

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production environment."""
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def is_development(cls) -> bool:
        """Check if running in development environment."""
        return cls.ENVIRONMENT.lower() == "development"


# Create a singleton instance
settings = Settings()

# Validate settings on module import (will fail fast if misconfigured)
# Skip validation during tests or when importing for introspection
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    try:
        settings.validate()
    except ValueError as e:
        # In development, warn but don't crash
        if settings.is_development():
            print(f"⚠️  Warning: {e}")
            print("   Falling back to defaults where possible.")
        else:
            raise
