import logging
from typing import Optional

from kisan_advisor.core.model_client import ModelClient
from kisan_advisor.core.tool_descriptor import ToolDescriptor
from kisan_advisor.models.krishi_assistant import WeatherToolInput
from kisan_advisor.services.weather_forecast_service import get_weather_forecast

logger = logging.getLogger(__name__)

WEATHER_TOOL_NAME = "get_current_weather"


def build_weather_tool(client: Optional[ModelClient] = None) -> ToolDescriptor:
    async def _current_weather(latitude: float, longitude: float) -> str:
        logger.info("Fetching weather forecast for: lat=%s, lon=%s", latitude, longitude)
        forecast = await get_weather_forecast(
            {"latitude": latitude, "longitude": longitude}, client=client
        )
        today = forecast.forecast[0]
        return (
            f"The weather in {forecast.location_name} is currently "
            f"{today.condition.lower()} with a high of {today.high_temp:g}°C."
        )

    return ToolDescriptor(
        name=WEATHER_TOOL_NAME,
        description=(
            "Get the current weather for a specific location. "
            "This is a simulation and not real-time data."
        ),
        input_model=WeatherToolInput,
        func=_current_weather,
    )
