"""
RecipeBox Backend: Application Configuration
==============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the database layer, the app factory, and middleware.
When:  Loaded once at module import time; validated before the app starts.

Environment:
    MONGO_URI is the only value a deployment normally has to provide.
    The logical database and collection names default to the layout the
    recipe data was seeded with (`recipes` database; `cuisine`, `tags`,
    `recipes` collections).
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern for readability.
    """

    # ── Document Store ────────────────────────────────────────────────────
    # What: MongoDB connection string (mongodb:// or mongodb+srv://)
    mongo_uri: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection string",
    )

    # What: Logical database holding the cuisine, tags and recipes collections
    mongo_db_name: str = Field(default="recipes")

    cuisine_collection: str = Field(default="cuisine")
    tags_collection: str = Field(default="tags")
    recipes_collection: str = Field(default="recipes")

    # What: How long the driver waits to find a usable server before failing
    # Valid range: 100ms - 60s
    mongo_server_selection_timeout_ms: int = Field(default=5000, ge=100, le=60_000)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=3000, ge=1024, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # MONGO_URI and mongo_uri both work
    }

    def validate_required_for_production(self) -> None:
        """
        What:  Validates that critical settings are configured.
        When:  Called during app startup (lifespan).
        How:   Checks each required field and raises ValueError with guidance.
        """
        errors = []
        if not self.mongo_uri.strip():
            errors.append(
                "MONGO_URI is not set. "
                "Provide a connection string such as mongodb://localhost:27017"
            )
        elif not self.mongo_uri.startswith(("mongodb://", "mongodb+srv://")):
            errors.append(
                f"MONGO_URI must start with mongodb:// or mongodb+srv:// (got '{self.mongo_uri[:16]}...')"
            )
        if not self.mongo_db_name.strip():
            errors.append("MONGO_DB_NAME must not be empty")
        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )


# Singleton instance, imported throughout the application
settings = Settings()
