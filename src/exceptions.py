"""
Exception hierarchy for the AI News Digest application.
"""


class NewsDigestError(Exception):
    """Base class for all errors raised by this application."""


class ConfigError(NewsDigestError):
    """Raised when config.json holds invalid values."""


class FetchError(NewsDigestError):
    """Raised when the news search call fails or returns an unusable body."""


class SummarizeError(NewsDigestError):
    """Raised when a single completion call fails."""


class DriverError(NewsDigestError):
    """Raised when an unexpected error escapes the pipeline."""
