"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Literal, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="INTAKE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Food Bank Customer Intake API"
    api_prefix: str = "/api"
    environment: Literal["development", "test", "production"] = Field(
        default="development",
        description="Execution mode. Geocoding is disabled in the test environment.",
    )
    log_level: str = Field(default="INFO", description="Root logging level.")

    geocoder_provider: Literal["google", "nominatim", "none"] = Field(
        default="google",
        description="Geocoding provider used to resolve customer addresses.",
    )
    geocoder_api_key: Optional[str] = Field(
        default=None,
        description="API key for the geocoding provider (required for google).",
    )
    geocoder_base_url: Optional[str] = Field(
        default=None,
        description="Override for the provider endpoint (e.g. a self-hosted Nominatim).",
    )
    geocoder_timeout_seconds: float = Field(default=10.0, gt=0.0)
    geocoder_user_agent: str = Field(default="foodbank-intake")

    questionnaire_file: Optional[Path] = Field(
        default=None,
        description="JSON file with questionnaire definitions replacing the built-in ones.",
    )

    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    # Supabase configuration
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL (e.g., https://xxx.supabase.co).",
    )
    supabase_key: Optional[str] = Field(
        default=None,
        description="Supabase service role key for backend operations.",
    )

    @field_validator("questionnaire_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Optional[Path]:
        if value is None or value == "":
            return None
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            # Try JSON first
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @property
    def is_test(self) -> bool:
        return self.environment == "test"


settings = Settings()
