import sys
import unittest
from pathlib import Path
from unittest.mock import AsyncMock, patch

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(Path(__file__).resolve().parent))

import httpx  # noqa: E402
from fakes import make_client, prompt_text  # noqa: E402

from kisan_advisor.models.farming_news import NewsArticle  # noqa: E402
from kisan_advisor.services import farming_news_service, news_service  # noqa: E402

NEWS_PAYLOAD = {
    "data": [
        {
            "title": "Monsoon arrives early in Kerala",
            "description": "IMD confirms onset of the southwest monsoon.",
            "url": "https://example.com/monsoon",
            "source": "example.com",
            "published_at": "2024-06-01T06:00:00Z",
            "uuid": "abc",
        }
    ]
}


def http_client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class NewsCacheTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        news_service.clear_news_cache()
        self.requests = []
        patcher = patch.object(news_service.settings, "NEWS_API_KEY", "test-key")
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(news_service.clear_news_cache)

    def _ok(self, request):
        self.requests.append(request)
        return httpx.Response(200, json=NEWS_PAYLOAD)

    async def test_results_are_cached_until_ttl(self) -> None:
        async with http_client(self._ok) as client:
            with patch.object(news_service, "_now", return_value=1000.0):
                first = await news_service.fetch_latest_news(client)
            with patch.object(news_service, "_now", return_value=1000.0 + 60):
                second = await news_service.fetch_latest_news(client)
            self.assertEqual(len(self.requests), 1)

            ttl = news_service.settings.NEWS_CACHE_TTL_SECONDS
            with patch.object(news_service, "_now", return_value=1000.0 + ttl + 1):
                await news_service.fetch_latest_news(client)
            self.assertEqual(len(self.requests), 2)

        self.assertEqual(first, second)
        self.assertEqual(first[0].title, "Monsoon arrives early in Kerala")
        self.assertEqual(self.requests[0].url.params["api_token"], "test-key")

    async def test_failure_returns_empty_and_is_not_cached(self) -> None:
        def failing(request):
            self.requests.append(request)
            return httpx.Response(500, text="upstream error")

        async with http_client(failing) as client:
            self.assertEqual(await news_service.fetch_latest_news(client), [])
        async with http_client(self._ok) as client:
            articles = await news_service.fetch_latest_news(client)
        self.assertEqual(len(articles), 1)
        self.assertEqual(len(self.requests), 2)

    async def test_missing_api_key_skips_request(self) -> None:
        with patch.object(news_service.settings, "NEWS_API_KEY", ""):
            async with http_client(self._ok) as client:
                self.assertEqual(await news_service.fetch_latest_news(client), [])
        self.assertEqual(self.requests, [])


class FarmingNewsTests(unittest.IsolatedAsyncioTestCase):
    async def test_default_digest_without_model_call(self) -> None:
        client, backend = make_client()
        news = await farming_news_service.get_farming_news(client=client, live=False)
        self.assertEqual(len(news.articles), 5)
        self.assertEqual(backend.calls, [])

        news.articles.clear()
        again = await farming_news_service.get_farming_news(client=client, live=False)
        self.assertEqual(len(again.articles), 5)

    async def test_live_without_articles_falls_back(self) -> None:
        client, backend = make_client()
        with patch.object(
            farming_news_service, "fetch_latest_news", AsyncMock(return_value=[])
        ):
            news = await farming_news_service.get_farming_news(client=client, live=True)
        self.assertEqual(news, farming_news_service.DEFAULT_FARMING_NEWS)
        self.assertEqual(backend.calls, [])

    async def test_live_articles_are_summarized(self) -> None:
        summary = {
            "articles": [
                {
                    "title": "Early monsoon in Kerala",
                    "summary": "The monsoon reached Kerala ahead of schedule.",
                    "category": "News",
                    "icon": "newspaper",
                }
            ]
        }
        client, backend = make_client(summary)
        article = NewsArticle(title="Monsoon arrives early in Kerala")
        with patch.object(
            farming_news_service, "fetch_latest_news", AsyncMock(return_value=[article])
        ):
            news = await farming_news_service.get_farming_news(client=client, live=True)

        self.assertEqual(news.articles[0].title, "Early monsoon in Kerala")
        self.assertIn("Monsoon arrives early in Kerala", prompt_text(backend.calls[0]))


if __name__ == "__main__":
    unittest.main()
