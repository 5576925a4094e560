"""
Data models for the AI News Digest application.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ArticleSource(BaseModel):
    """Publisher of an article, as reported by NewsAPI."""

    id: Optional[str] = None
    name: str


class Article(BaseModel):
    """A news item as returned by the NewsAPI `everything` endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    source: ArticleSource
    author: Optional[str] = None
    title: str
    description: Optional[str] = None
    url: str
    url_to_image: Optional[str] = Field(default=None, alias="urlToImage")
    published_at: Optional[str] = Field(default=None, alias="publishedAt")
    content: Optional[str] = None


class NewsSearchResponse(BaseModel):
    """Body of a NewsAPI search response."""

    model_config = ConfigDict(populate_by_name=True)

    status: Optional[str] = None
    total_results: int = Field(default=0, alias="totalResults")
    articles: Optional[List[Article]] = None


class SummarizedArticle(BaseModel):
    """An article reduced to its title, link and generated summary."""

    model_config = ConfigDict(frozen=True)

    title: str
    url: str
    summary: str


class ChatMessage(BaseModel):
    role: str
    content: str


class ChatChoice(BaseModel):
    message: ChatMessage


class ChatCompletionResponse(BaseModel):
    choices: List[ChatChoice] = Field(min_length=1)
