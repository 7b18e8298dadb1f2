"""Configuration management - config-driven architecture."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from automeal_planner.models.catalog import MealCatalog

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "meal_catalog.yaml"


class Settings(BaseSettings):
    """Application settings from environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=3000, description="Bind port")

    # Providers, tried in this order. Comma-separated in the environment: PROVIDER_ORDER=openai,groq
    provider_order: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["groq", "openai"],
        description="Provider names in fallback order",
    )
    provider_timeout_seconds: float = Field(default=60.0, gt=0, description="Per-provider timeout")
    llm_temperature: float = Field(default=0.4, description="Sampling temperature")
    llm_max_tokens: int = Field(default=2048, description="Completion token limit")

    groq_api_key: str = Field(default="", description="Groq API key; empty disables Groq")
    groq_model: str = Field(default="llama-3.3-70b-versatile", description="Groq model name")

    openai_api_key: str = Field(default="", description="OpenAI API key; empty disables OpenAI")
    openai_base_url: str | None = Field(default=None, description="OpenAI-compatible API base URL")
    openai_model: str = Field(default="gpt-4o-mini", description="OpenAI model name")

    # Data
    data_dir: Path = Field(default=Path("data"), description="Directory for JSON persistence")
    catalog_path: Path | None = Field(default=None, description="Override for the offline meal catalog YAML")

    @field_validator("provider_order", mode="before")
    @classmethod
    def _split_provider_order(cls, v: Any) -> Any:
        if isinstance(v, str):
            text = v.strip()
            if text.startswith("["):
                return json.loads(text)
            return [name.strip() for name in text.split(",") if name.strip()]
        return v


def load_yaml_config(config_path: Path) -> dict[str, Any]:
    """Load YAML config file."""
    if not config_path.exists():
        return {}
    with config_path.open() as f:
        return yaml.safe_load(f) or {}


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()


@lru_cache
def get_meal_catalog(catalog_path_str: str = "") -> MealCatalog:
    """Load the offline meal catalog. Missing or invalid catalog is a startup error."""
    path = Path(catalog_path_str) if catalog_path_str else DEFAULT_CATALOG_PATH
    return MealCatalog.model_validate(load_yaml_config(path))
