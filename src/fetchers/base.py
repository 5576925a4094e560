"""
Base classes and interfaces for article fetchers.

This module defines the contract that all article fetchers must follow.
"""

from typing import Protocol, List
from src.models import Article


class ArticleFetcher(Protocol):
    """
    Protocol for article fetchers.

    Classes implementing this protocol query a news source and return the
    relevant articles, raising FetchError when the source cannot be read.
    """

    def fetch(self) -> List[Article]:
        """Fetches and filters articles."""
