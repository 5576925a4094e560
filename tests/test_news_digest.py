"""Unit tests for news_digest module."""

import io
import unittest
from unittest.mock import MagicMock, patch

import requests

from src import news_digest
from src.config import LLMConfig, NewsConfig
from src.exceptions import DriverError, FetchError
from src.fetchers.newsapi import NewsAPIFetcher
from src.models import SummarizedArticle
from src.services.console import ConsoleReporter
from src.services.llm import ArticleSummarizer


class TestRun(unittest.TestCase):
    """Test cases for the fetch -> summarize -> print pipeline."""

    def setUp(self):
        self.out = io.StringIO()
        self.reporter = ConsoleReporter(self.out)
        self.fetcher = MagicMock()
        self.summarizer = MagicMock()

    def test_no_articles_skips_summarizer(self):
        self.fetcher.fetch.return_value = []

        result = news_digest.run(self.fetcher, self.summarizer, self.reporter)

        self.assertEqual(result, [])
        self.summarizer.summarize.assert_not_called()
        self.assertEqual(self.out.getvalue(), "No articles found related to AI or LLM.\n")

    def test_prints_each_summary(self):
        self.fetcher.fetch.return_value = ["a1", "a2"]
        summaries = [
            SummarizedArticle(title="AI one", url="https://e.com/1", summary="First."),
            SummarizedArticle(title="AI two", url="https://e.com/2", summary="Second."),
        ]
        self.summarizer.summarize.return_value = summaries

        result = news_digest.run(self.fetcher, self.summarizer, self.reporter)

        self.assertEqual(result, summaries)
        self.summarizer.summarize.assert_called_once_with(["a1", "a2"])
        output = self.out.getvalue()
        self.assertIn("Fetched 2 articles. Summarizing...", output)
        self.assertIn("Title: AI one\nURL: https://e.com/1\nSummary: First.", output)
        self.assertIn("Title: AI two\nURL: https://e.com/2\nSummary: Second.", output)

    def test_fetch_error_propagates(self):
        self.fetcher.fetch.side_effect = FetchError("boom")

        with self.assertRaises(FetchError):
            news_digest.run(self.fetcher, self.summarizer, self.reporter)

    def test_unexpected_error_is_wrapped(self):
        self.fetcher.fetch.return_value = ["a1"]
        self.summarizer.summarize.side_effect = RuntimeError("kaput")

        with self.assertRaises(DriverError) as ctx:
            news_digest.run(self.fetcher, self.summarizer, self.reporter)
        self.assertIsInstance(ctx.exception.__cause__, RuntimeError)


class TestEndToEnd(unittest.TestCase):
    """Runs the real components against mocked HTTP endpoints."""

    @patch("requests.post")
    @patch("requests.get")
    def test_only_relevant_article_is_summarized(self, mock_get, mock_post):
        search = MagicMock()
        search.json.return_value = {
            "status": "ok",
            "totalResults": 2,
            "articles": [
                {
                    "source": {"id": None, "name": "Tech Daily"},
                    "author": "A. Writer",
                    "title": "New AI model released",
                    "description": "A lab shipped a model.",
                    "url": "https://example.com/ai-model",
                    "urlToImage": "https://example.com/ai.png",
                    "publishedAt": "2024-05-01T12:00:00Z",
                    "content": "...",
                },
                {
                    "source": {"id": "weather", "name": "Weather Now"},
                    "author": "B. Writer",
                    "title": "Weather forecast for Tuesday",
                    "description": "Rain.",
                    "url": "https://example.com/weather",
                    "urlToImage": "https://example.com/rain.png",
                    "publishedAt": "2024-05-01T08:00:00Z",
                    "content": "...",
                },
            ],
        }
        mock_get.return_value = search

        chat = MagicMock()
        chat.json.return_value = {
            "choices": [{"message": {"role": "assistant", "content": "S"}}]
        }
        mock_post.return_value = chat

        out = io.StringIO()
        result = news_digest.run(
            NewsAPIFetcher(NewsConfig(api_key="n")),
            ArticleSummarizer(LLMConfig(api_key="o")),
            ConsoleReporter(out),
        )

        self.assertEqual(
            result,
            [
                SummarizedArticle(
                    title="New AI model released",
                    url="https://example.com/ai-model",
                    summary="S",
                )
            ],
        )
        self.assertEqual(mock_post.call_count, 1)
        self.assertIn("Fetched 1 articles. Summarizing...", out.getvalue())


class TestMain(unittest.TestCase):
    """main() logs failures and returns normally."""

    @patch("src.news_digest.load_config", return_value={})
    @patch("src.news_digest.NewsAPIFetcher")
    def test_fetch_error_is_logged(self, mock_fetcher_cls, _mock_load_config):
        mock_fetcher_cls.return_value.fetch.side_effect = FetchError("offline")

        with self.assertLogs("src.news_digest", level="ERROR") as logs:
            self.assertIsNone(news_digest.main())
        self.assertTrue(any("offline" in line for line in logs.output))

    @patch("src.news_digest.load_config")
    def test_unexpected_error_is_logged(self, mock_load_config):
        mock_load_config.side_effect = UnicodeDecodeError(
            "utf-8", b"\xff", 0, 1, "invalid start byte"
        )

        with self.assertLogs("src.news_digest", level="ERROR") as logs:
            self.assertIsNone(news_digest.main())
        self.assertIn("invalid start byte", logs.output[0])

    @patch("src.news_digest.load_config", return_value={})
    @patch("requests.get")
    def test_fetch_error_is_logged_once(self, mock_get, _mock_load_config):
        mock_get.side_effect = requests.ConnectionError("connection refused")

        with self.assertLogs("src", level="ERROR") as logs:
            news_digest.main()
        self.assertEqual(len(logs.records), 1)
        self.assertEqual(logs.records[0].name, "src.news_digest")

    @patch("src.news_digest.load_config", return_value={"llm": {"mode": "bogus"}})
    @patch("src.news_digest.NewsAPIFetcher")
    def test_config_error_is_logged(self, mock_fetcher_cls, _mock_load_config):
        with self.assertLogs("src.news_digest", level="ERROR"):
            news_digest.main()
        mock_fetcher_cls.assert_not_called()

    @patch("src.news_digest.load_config", return_value={})
    @patch("src.news_digest.ArticleSummarizer")
    @patch("src.news_digest.NewsAPIFetcher")
    def test_no_articles_message(self, mock_fetcher_cls, mock_summarizer_cls, _mock_cfg):
        mock_fetcher_cls.return_value.fetch.return_value = []

        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            news_digest.main()

        self.assertIn("No articles found related to AI or LLM.", stdout.getvalue())
        mock_summarizer_cls.return_value.summarize.assert_not_called()


if __name__ == "__main__":
    unittest.main()
