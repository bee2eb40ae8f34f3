import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from kisan_advisor.core.backend import GenerationResult, GenerativeBackend  # noqa: E402
from kisan_advisor.core.model_client import ModelClient  # noqa: E402


class FakeBackend(GenerativeBackend):
    """Replays scripted responses and records every call it receives.

    A dict response is returned as structured data, an exception is raised.
    """

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.calls = []

    async def generate(self, messages, output_schema=None, tools=None):
        self.calls.append(
            {
                "messages": list(messages),
                "output_schema": output_schema,
                "tools": list(tools or []),
            }
        )
        if not self.responses:
            raise AssertionError("Unexpected backend call")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if isinstance(response, dict):
            return GenerationResult(data=response)
        return response


def make_client(*responses, max_retries=0):
    backend = FakeBackend(responses)
    client = ModelClient(
        backend,
        max_retries=max_retries,
        retry_initial_delay=0,
        retry_max_delay=0,
    )
    return client, backend


def prompt_text(call) -> str:
    content = call["messages"][0].content
    if isinstance(content, str):
        return content
    return content[0]["text"]


FORECAST = {
    "forecast": [
        {
            "day": "Monday",
            "date": "June 10",
            "high_temp": 32.0,
            "low_temp": 24.0,
            "condition": "Sunny",
            "precipitation_chance": 10.0,
        }
    ],
    "location_name": "Coimbatore, Tamil Nadu, India",
}

MARKET_ANALYSIS = {
    "crop_name": "Wheat",
    "price_trend": {"current_price": 2150.0, "trend": "up", "change": 2.5},
    "demand_forecast": "Demand is expected to stay strong ahead of the festive season.",
    "top_buyers": [
        {"name": "Azadpur Mandi, Delhi", "price": 2200.0},
        {"name": "Khanna Mandi, Punjab", "price": 2180.0},
        {"name": "Indore Mandi, Madhya Pradesh", "price": 2160.0},
    ],
    "recommendation": "Hold the crop for two more weeks before selling.",
}

PEST_ANALYSIS = {
    "pest_or_disease": "Aphids",
    "summary": "Spray neem oil and monitor the field for a week.",
    "recommended_actions": "Apply neem oil at 5 ml per litre of water every 7 days.",
    "health_percentage": 70.0,
    "risk_level": "Medium",
}

PHOTO_DATA_URI = "data:image/jpeg;base64,/9j/4AAQSkZJRgABAQAAAQABAAD"
