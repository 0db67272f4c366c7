"""Library configuration and settings management."""

import json
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="POSTNL_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    domain_namespace: str = Field(
        default="http://postnl.nl/",
        description="XML namespace shared by every PostNL domain entity.",
    )
    namespace_overrides: Annotated[dict[str, str], NoDecode] = Field(
        default_factory=dict,
        description="Per-service namespace URIs keyed by service name (e.g., Location).",
    )

    @field_validator("domain_namespace")
    @classmethod
    def _require_namespace(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("domain_namespace must not be empty")
        return value

    @field_validator("namespace_overrides", mode="before")
    @classmethod
    def _parse_mapping_from_env(cls, value: Any) -> dict[str, str]:
        """Parse a service mapping from environment variable (JSON object or Service=uri pairs)."""
        if value is None:
            return {}
        if isinstance(value, dict):
            return {str(key): str(item) for key, item in value.items()}
        if isinstance(value, str):
            # Try JSON first
            try:
                parsed = json.loads(value)
                if isinstance(parsed, dict):
                    return {str(key): str(item) for key, item in parsed.items()}
            except (json.JSONDecodeError, TypeError):
                pass
            # Comma-separated Service=uri pairs
            mapping: dict[str, str] = {}
            for chunk in value.split(","):
                if not chunk.strip():
                    continue
                key, sep, uri = chunk.partition("=")
                if not sep or not key.strip() or not uri.strip():
                    raise ValueError(f"Invalid namespace override entry: {chunk.strip()!r}")
                mapping[key.strip()] = uri.strip()
            return mapping
        raise ValueError("namespace_overrides must be a mapping or a string")


settings = Settings()
