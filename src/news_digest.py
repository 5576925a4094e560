"""
AI News Digest
This script searches NewsAPI for articles about AI and large language models,
keeps those with a relevant title, summarizes each one with OpenAI and prints
the summaries to the console.
"""

import logging
from typing import List

from src.config import Settings, build_llm_config, build_news_config, load_config
from src.exceptions import DriverError, FetchError, NewsDigestError
from src.fetchers.base import ArticleFetcher
from src.fetchers.newsapi import NewsAPIFetcher
from src.models import SummarizedArticle
from src.services.console import ConsoleReporter
from src.services.llm import ArticleSummarizer


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

NO_ARTICLES_MESSAGE = "No articles found related to AI or LLM."


def run(
    fetcher: ArticleFetcher,
    summarizer: ArticleSummarizer,
    reporter: ConsoleReporter,
) -> List[SummarizedArticle]:
    """Fetches, summarizes and prints articles. Returns the summaries."""
    try:
        articles = fetcher.fetch()
        if not articles:
            reporter.message(NO_ARTICLES_MESSAGE)
            return []

        reporter.message(f"Fetched {len(articles)} articles. Summarizing...")
        summarized = summarizer.summarize(articles)
        reporter.report(summarized)
        return summarized
    except NewsDigestError:
        raise
    except Exception as e:  # pylint: disable=broad-exception-caught
        raise DriverError(f"Unexpected error: {e}") from e


def main():
    """Main execution entry point."""
    try:
        settings = Settings()
        config = load_config()
        news_config = build_news_config(config, settings)
        llm_config = build_llm_config(config, settings)

        if not settings.news_api_key:
            logger.warning("NEWS_API_KEY not set. The search request will be rejected.")
        if not settings.openai_api_key:
            logger.warning("OPENAI_API_KEY not set. Summaries will fail.")

        run(NewsAPIFetcher(news_config), ArticleSummarizer(llm_config), ConsoleReporter())
    except FetchError as e:
        logger.error("Failed to fetch articles: %s", e)
    except NewsDigestError as e:
        logger.error("Error in main function: %s", e)
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.error("Unexpected error in main function: %s", e)


if __name__ == "__main__":
    main()
