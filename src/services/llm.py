"""
LLM Service Module.

This module provides the ArticleSummarizer class, which calls the OpenAI
chat-completion endpoint to summarize news articles one request per article.
"""

import concurrent.futures
import logging
from typing import List, Optional, Sequence

import requests
from pydantic import ValidationError

from src.config import LLMConfig
from src.exceptions import SummarizeError
from src.models import Article, ChatCompletionResponse, SummarizedArticle

logger = logging.getLogger(__name__)


class ArticleSummarizer:
    """
    Summarizes articles through the OpenAI chat-completion API.

    Failed completions are logged and dropped; they never abort a batch.
    In "parallel" mode requests are issued from a thread pool and results keep
    input order. In "sequential" mode requests run one at a time and progress
    is logged after each success.
    """

    _PROMPT = "Summarize this news article: {title}\n\n{description}"

    def __init__(self, config: LLMConfig):
        self.config = config

    def build_prompt(self, article: Article) -> str:
        """Returns the user prompt for an article."""
        return self._PROMPT.format(
            title=article.title, description=article.description or ""
        )

    def _request_completion(self, prompt: str) -> str:
        """Sends one chat-completion request and returns the first choice's text."""
        payload = {
            "model": self.config.model,
            "messages": [
                {"role": "system", "content": self.config.system_prompt},
                {"role": "user", "content": prompt},
            ],
        }
        headers = {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }
        try:
            resp = requests.post(
                self.config.endpoint,
                json=payload,
                headers=headers,
                timeout=self.config.timeout,
            )
            resp.raise_for_status()
            completion = ChatCompletionResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            # Covers undecodable JSON as well as schema mismatches
            raise SummarizeError(f"Malformed completion response: {e}") from e
        except requests.RequestException as e:
            raise SummarizeError(f"Completion request failed: {e}") from e

        return completion.choices[0].message.content

    def summarize_one(self, article: Article) -> Optional[SummarizedArticle]:
        """Summarizes a single article, returning None if the call fails."""
        try:
            summary = self._request_completion(self.build_prompt(article))
        except SummarizeError as e:
            logger.error('Error summarizing article "%s": %s', article.title, e)
            return None
        return SummarizedArticle(title=article.title, url=article.url, summary=summary)

    def _summarize_parallel(
        self, articles: Sequence[Article]
    ) -> List[SummarizedArticle]:
        with concurrent.futures.ThreadPoolExecutor(
            max_workers=self.config.max_workers or len(articles)
        ) as executor:
            results = list(executor.map(self.summarize_one, articles))
        return [r for r in results if r is not None]

    def _summarize_sequential(
        self, articles: Sequence[Article]
    ) -> List[SummarizedArticle]:
        summarized: List[SummarizedArticle] = []
        for article in articles:
            result = self.summarize_one(article)
            if result is None:
                continue
            summarized.append(result)
            logger.info(
                "Summarized %d so far: %s",
                len(summarized),
                [s.title for s in summarized],
            )
        return summarized

    def summarize(self, articles: Sequence[Article]) -> List[SummarizedArticle]:
        """Summarizes articles, keeping only the successful ones."""
        if not articles:
            return []

        logger.info(
            "Summarizing %d articles with %s (%s)...",
            len(articles),
            self.config.model,
            self.config.mode,
        )
        if self.config.mode == "sequential":
            summarized = self._summarize_sequential(articles)
        else:
            summarized = self._summarize_parallel(articles)

        logger.info(
            "Summarization: %d requested -> %d succeeded.",
            len(articles),
            len(summarized),
        )
        return summarized
