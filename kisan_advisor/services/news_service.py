import asyncio
import logging
import time
from typing import Dict, List, Optional, Tuple

import httpx
from pydantic import ValidationError

from kisan_advisor.core.config import settings
from kisan_advisor.models.farming_news import NewsArticle

logger = logging.getLogger(__name__)

NEWS_CACHE_KEY = "farming-news"

_news_cache: Dict[str, Tuple[float, List[NewsArticle]]] = {}
_news_cache_lock = asyncio.Lock()


def _now() -> float:
    return time.monotonic()


def clear_news_cache() -> None:
    _news_cache.clear()


async def _fetch_news_from_api(
    http_client: Optional[httpx.AsyncClient] = None,
) -> Optional[List[NewsArticle]]:
    """Returns None when the fetch failed, so failures are not cached."""
    if not settings.NEWS_API_KEY:
        logger.error("NEWS_API_KEY is not set.")
        return None

    params = {
        "api_token": settings.NEWS_API_KEY,
        "search": settings.NEWS_SEARCH_TERMS,
        "language": "en",
        "locale": "in",
        "limit": 5,
    }
    logger.info("Fetching fresh farming news from %s", settings.NEWS_API_URL)
    try:
        if http_client is None:
            async with httpx.AsyncClient(timeout=15.0) as client:
                response = await client.get(settings.NEWS_API_URL, params=params)
        else:
            response = await http_client.get(settings.NEWS_API_URL, params=params)
        response.raise_for_status()
        items = response.json().get("data") or []
        return [NewsArticle.model_validate(item) for item in items]
    except httpx.HTTPStatusError as e:
        logger.error(
            "News API request failed with status %s: %s",
            e.response.status_code,
            e.response.text,
        )
    except (httpx.RequestError, ValueError, ValidationError):
        logger.exception("Failed to fetch news from %s", settings.NEWS_API_URL)
    return None


async def fetch_latest_news(
    http_client: Optional[httpx.AsyncClient] = None,
) -> List[NewsArticle]:
    """
    Latest farming news, cached for NEWS_CACHE_TTL_SECONDS.

    Returns an empty list when the news API is unavailable.
    """
    async with _news_cache_lock:
        cached = _news_cache.get(NEWS_CACHE_KEY)
        if cached and _now() - cached[0] < settings.NEWS_CACHE_TTL_SECONDS:
            return list(cached[1])

        articles = await _fetch_news_from_api(http_client)
        if articles is None:
            return []
        _news_cache[NEWS_CACHE_KEY] = (_now(), articles)
        return list(articles)
