"""
NewsAPI fetcher implementation.

This module provides the NewsAPIFetcher class, which searches the NewsAPI
`everything` endpoint and keeps the articles whose titles mention AI or LLMs.
"""

import logging
import re
from typing import Any, Dict, List

import requests
from pydantic import ValidationError

from src.config import NewsConfig
from src.exceptions import ConfigError, FetchError
from src.fetchers.base import ArticleFetcher
from src.models import Article, NewsSearchResponse

logger = logging.getLogger(__name__)


class NewsAPIFetcher(ArticleFetcher):
    """Fetches AI/LLM related articles from NewsAPI."""

    def __init__(self, config: NewsConfig):
        self.config = config
        try:
            self._title_re = re.compile(config.title_pattern, re.IGNORECASE)
        except re.error as e:
            raise ConfigError(
                f"Invalid title pattern {config.title_pattern!r}: {e}"
            ) from e

    def _params(self) -> Dict[str, str]:
        return {
            "q": self.config.query,
            "sortBy": self.config.sort_by,
            "apiKey": self.config.api_key,
        }

    def _handle_response(self, resp: requests.Response) -> Dict[str, Any]:
        """Decodes the body, surfacing NewsAPI's error envelope when present."""
        try:
            data = resp.json()
        except ValueError:
            data = None

        # NewsAPI reports errors as {"status": "error", "code": ..., "message": ...}
        if isinstance(data, dict) and data.get("status") == "error":
            code = data.get("code", "")
            message = data.get("message", "")
            raise FetchError(f"News API error: {code} - {message}")

        try:
            resp.raise_for_status()
        except requests.HTTPError as e:
            raise FetchError(f"News API request failed: {e}") from e

        if not isinstance(data, dict):
            raise FetchError("News API returned a body that is not a JSON object.")
        return data

    def _parse_articles(self, data: Dict[str, Any]) -> List[Article]:
        try:
            result = NewsSearchResponse.model_validate(data)
        except ValidationError as e:
            raise FetchError(f"News API returned malformed articles: {e}") from e
        return result.articles or []

    def matches(self, article: Article) -> bool:
        """True when the title mentions one of the configured keywords."""
        return self._title_re.search(article.title) is not None

    def fetch(self) -> List[Article]:
        """Searches NewsAPI and returns matching articles in response order."""
        try:
            resp = requests.get(
                self.config.endpoint,
                params=self._params(),
                timeout=self.config.timeout,
            )
        except requests.RequestException as req_err:
            raise FetchError(f"Network error: {req_err}") from req_err

        articles = self._parse_articles(self._handle_response(resp))
        relevant = [a for a in articles if self.matches(a)]
        logger.info(
            "News API: %d received -> %d relevant.", len(articles), len(relevant)
        )
        return relevant
