from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class ArticleCategory(str, Enum):
    NEWS = "News"
    BEST_PRACTICE = "Best Practice"
    NEW_SCHEME = "New Scheme"


class ArticleIcon(str, Enum):
    NEWSPAPER = "newspaper"
    LIGHTBULB = "lightbulb"
    GIFT = "gift"


class Article(BaseModel):
    title: str = Field(description="The headline of the news article or tip.")
    summary: str = Field(description="A one or two-sentence summary of the content.")
    category: ArticleCategory = Field(description="The category of the content.")
    icon: ArticleIcon = Field(
        description=(
            'An appropriate icon name ("newspaper" for News, "lightbulb" for Best '
            'Practice, "gift" for New Scheme).'
        )
    )


class FarmingNewsOutput(BaseModel):
    articles: List[Article] = Field(
        min_length=1,
        description="A list of 3-5 summarized farming news articles and best practice tips.",
    )


class NewsArticle(BaseModel):
    """Raw article as returned by the news collaborator."""

    title: str
    description: Optional[str] = None
    snippet: Optional[str] = None
    url: Optional[str] = None
    source: Optional[str] = None
    published_at: Optional[str] = None


class SummarizeNewsInput(BaseModel):
    articles_json: str = Field(
        min_length=2, description="The raw news articles serialized as JSON."
    )
