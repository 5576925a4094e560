"""
Console output for summarized articles.

This module provides the ConsoleReporter class which renders each summarized
article as a plain-text block and writes it to a stream.
"""

import sys
from typing import Iterable, Optional, TextIO

from src.models import SummarizedArticle


class ConsoleReporter:
    """Prints summarized articles."""

    _TEMPLATE = "\nTitle: {title}\nURL: {url}\nSummary: {summary}"

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def render(self, article: SummarizedArticle) -> str:
        """Renders one article block."""
        return self._TEMPLATE.format(
            title=article.title, url=article.url, summary=article.summary
        )

    def message(self, text: str) -> None:
        """Writes a single informational line."""
        print(text, file=self.stream)

    def report(self, articles: Iterable[SummarizedArticle]) -> None:
        """Writes every article block."""
        for article in articles:
            print(self.render(article), file=self.stream)
