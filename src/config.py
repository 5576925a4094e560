"""
Configuration loading for the AI News Digest application.

Secrets come from the environment (or a local .env file) through
pydantic-settings; pipeline options come from config.json.
"""

import json
import logging
import os
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.exceptions import ConfigError

logger = logging.getLogger(__name__)

NEWS_API_ENDPOINT = "https://newsapi.org/v2/everything"
OPENAI_CHAT_ENDPOINT = "https://api.openai.com/v1/chat/completions"
DEFAULT_QUERY = 'LLM AI "Large Language Models"'
DEFAULT_TITLE_PATTERN = "AI|LLM|Large Language Model|Artificial Intelligence"


class Settings(BaseSettings):
    """API keys read from NEWS_API_KEY and OPENAI_API_KEY."""

    news_api_key: str = ""
    openai_api_key: str = ""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


class NewsConfig(BaseModel):
    """Options for the news search fetcher."""

    model_config = ConfigDict(frozen=True)

    api_key: str = ""
    endpoint: str = NEWS_API_ENDPOINT
    query: str = DEFAULT_QUERY
    sort_by: str = "popularity"
    title_pattern: str = DEFAULT_TITLE_PATTERN
    timeout: float = Field(default=30, gt=0)


class LLMConfig(BaseModel):
    """Options for the chat-completion summarizer."""

    model_config = ConfigDict(frozen=True)

    api_key: str = ""
    endpoint: str = OPENAI_CHAT_ENDPOINT
    model: str = "gpt-4o-mini"
    system_prompt: str = "You are a helpful assistant."
    mode: Literal["parallel", "sequential"] = "parallel"
    max_workers: Optional[int] = Field(default=None, ge=1)
    timeout: float = Field(default=30, gt=0)


def load_config(config_filename: str = "config.json") -> Dict[str, Any]:
    """Loads configuration from a JSON file."""
    # Build absolute path relative to this package
    base_dir = os.path.dirname(os.path.abspath(__file__))
    config_path = os.path.join(base_dir, config_filename)

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        logger.warning("Config file not found at %s. Using defaults.", config_path)
        return {}
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {config_path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e


def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"Config section '{name}' must be an object.")
    return section


def build_news_config(config: Dict[str, Any], settings: Settings) -> NewsConfig:
    """Combines the `news` config section with the NewsAPI key."""
    try:
        return NewsConfig.model_validate(
            {**_section(config, "news"), "api_key": settings.news_api_key}
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid 'news' config: {e}") from e


def build_llm_config(config: Dict[str, Any], settings: Settings) -> LLMConfig:
    """Combines the `llm` config section with the OpenAI key."""
    try:
        return LLMConfig.model_validate(
            {**_section(config, "llm"), "api_key": settings.openai_api_key}
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid 'llm' config: {e}") from e
