import json
import logging
from typing import Optional

from kisan_advisor.core.advisory import AdvisoryFlow
from kisan_advisor.core.config import settings
from kisan_advisor.core.model_client import ModelClient
from kisan_advisor.core.prompt_template import AdvisoryPrompt
from kisan_advisor.models.farming_news import (
    Article,
    ArticleCategory,
    ArticleIcon,
    FarmingNewsOutput,
    SummarizeNewsInput,
)
from kisan_advisor.prompts.farming_news_prompt import FARMING_NEWS_PROMPT

from .news_service import fetch_latest_news

logger = logging.getLogger(__name__)

DEFAULT_FARMING_NEWS = FarmingNewsOutput(
    articles=[
        Article(
            title="Government Increases MSP for Kharif Crops",
            summary=(
                "The central government has announced a hike in the Minimum Support "
                "Price for several key Kharif crops to boost farmer income."
            ),
            category=ArticleCategory.NEWS,
            icon=ArticleIcon.NEWSPAPER,
        ),
        Article(
            title="Pradhan Mantri Fasal Bima Yojana (PMFBY) Application Window Open",
            summary=(
                "Farmers can now apply for the government's flagship crop insurance "
                "scheme to protect against yield losses."
            ),
            category=ArticleCategory.NEW_SCHEME,
            icon=ArticleIcon.GIFT,
        ),
        Article(
            title="Soil Health Management",
            summary=(
                "Regularly test your soil's pH and nutrient levels to ensure optimal crop "
                "growth. Use organic compost to improve soil structure."
            ),
            category=ArticleCategory.BEST_PRACTICE,
            icon=ArticleIcon.LIGHTBULB,
        ),
        Article(
            title="Integrated Pest Management (IPM)",
            summary=(
                "Combine biological, cultural, and chemical practices to manage pests "
                "effectively while minimizing environmental impact."
            ),
            category=ArticleCategory.BEST_PRACTICE,
            icon=ArticleIcon.LIGHTBULB,
        ),
        Article(
            title="Water Conservation Techniques",
            summary=(
                "Utilize drip irrigation or sprinkler systems to reduce water wastage. "
                "Mulching can also help retain soil moisture."
            ),
            category=ArticleCategory.BEST_PRACTICE,
            icon=ArticleIcon.LIGHTBULB,
        ),
    ]
)

SUMMARIZE_NEWS_FLOW = AdvisoryFlow(
    name="farming_news",
    prompt=AdvisoryPrompt(
        name="farming_news_prompt",
        template=FARMING_NEWS_PROMPT,
        input_model=SummarizeNewsInput,
    ),
    output_model=FarmingNewsOutput,
)


async def get_farming_news(
    *,
    client: Optional[ModelClient] = None,
    live: Optional[bool] = None,
) -> FarmingNewsOutput:
    """
    Farming news and best-practice tips for the dashboard.

    Serves the built-in digest unless live news is enabled and the news API
    returned articles, in which case the model summarizes those.
    """
    if live is None:
        live = settings.LIVE_NEWS_ENABLED
    if not live:
        return DEFAULT_FARMING_NEWS.model_copy(deep=True)

    articles = await fetch_latest_news()
    if not articles:
        logger.info("No live news available, serving the built-in digest")
        return DEFAULT_FARMING_NEWS.model_copy(deep=True)

    articles_json = json.dumps(
        [article.model_dump(exclude_none=True) for article in articles],
        ensure_ascii=False,
    )
    return await SUMMARIZE_NEWS_FLOW.run(
        SummarizeNewsInput(articles_json=articles_json), client=client
    )
