"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"
DATA_DIR = PROJECT_ROOT / "data"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")


class ApiSettings(BaseModel):
    """Settings for the remote stock history service."""
    base_url: str = "http://68.183.138.24:3001"
    skus_path: str = "/api/skus"
    timeout_seconds: float = 30.0
    use_mock_data: bool = False


class LLMSettings(BaseModel):
    """LLM API settings."""
    model_config = ConfigDict(validate_assignment=True)

    provider: Literal["openai", "anthropic"] = "openai"
    openai_model: str = "gpt-4o"
    anthropic_model: str = "claude-sonnet-4-5-20250929"
    max_tokens: int = 2048
    temperature: float = 0.7


class DashboardSettings(BaseModel):
    """Dashboard defaults and local store location."""
    default_period: int = 7
    periods: list[int] = Field(default_factory=lambda: [1, 7])
    store_path: str = str(DATA_DIR / "dashboard_store.json")
    favorites_key: str = "favoriteSkus"


class Settings(BaseModel):
    """Top-level application settings."""
    api: ApiSettings = Field(default_factory=ApiSettings)
    llm: LLMSettings = Field(default_factory=LLMSettings)
    dashboard: DashboardSettings = Field(default_factory=DashboardSettings)

    @classmethod
    def load(cls, settings_path: Path | None = None) -> Settings:
        """Load settings from config/settings.yaml, falling back to defaults.

        Environment variables take precedence over the YAML file.
        """
        settings_path = settings_path or CONFIG_DIR / "settings.yaml"
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            loaded = cls(**data)
        else:
            loaded = cls()
        loaded.apply_env_overrides()
        return loaded

    def apply_env_overrides(self) -> None:
        """Load overrides from environment."""
        if url := os.getenv("API_BASE_URL"):
            self.api.base_url = url
        if mock := os.getenv("STOCK_USE_MOCK_DATA"):
            self.api.use_mock_data = mock.strip().lower() in ("1", "true", "yes")
        if timeout := os.getenv("REQUEST_TIMEOUT"):
            self.api.timeout_seconds = float(timeout)
        if provider := os.getenv("LLM_PROVIDER"):
            self.llm.provider = provider.strip().lower()
        if store := os.getenv("DASHBOARD_STORE_PATH"):
            self.dashboard.store_path = store

    @property
    def skus_url(self) -> str:
        """Full URL of the SKU listing endpoint."""
        return self.api.base_url.rstrip("/") + self.api.skus_path


def get_openai_api_key() -> str:
    """Get OpenAI API key from environment."""
    key = os.getenv("OPENAI_API_KEY", "")
    if not key:
        raise ValueError("OPENAI_API_KEY not set in environment")
    return key


def get_anthropic_api_key() -> str:
    """Get Anthropic API key from environment."""
    key = os.getenv("ANTHROPIC_API_KEY", "")
    if not key:
        raise ValueError("ANTHROPIC_API_KEY not set in environment")
    return key


# Singleton settings instance
settings = Settings.load()
