import logging
import random
from datetime import date
from typing import Any, Mapping, Optional, Union

from kisan_advisor.core.advisory import AdvisoryFlow, format_prompt_date
from kisan_advisor.core.errors import NoResponseError
from kisan_advisor.core.model_client import ModelClient
from kisan_advisor.core.prompt_template import AdvisoryPrompt
from kisan_advisor.models.weather import (
    CurrentWeather,
    WeatherForecastInput,
    WeatherForecastOutput,
)
from kisan_advisor.prompts.weather_forecast_prompt import WEATHER_FORECAST_PROMPT

logger = logging.getLogger(__name__)

WEATHER_FORECAST_FLOW = AdvisoryFlow(
    name="weather_forecast",
    prompt=AdvisoryPrompt(
        name="weather_forecast_prompt",
        template=WEATHER_FORECAST_PROMPT,
        input_model=WeatherForecastInput,
        context_variables=("today",),
    ),
    output_model=WeatherForecastOutput,
)


async def get_weather_forecast(
    payload: Union[WeatherForecastInput, Mapping[str, Any]],
    *,
    client: Optional[ModelClient] = None,
    today: Optional[date] = None,
) -> WeatherForecastOutput:
    """Simulated 5-day forecast for a coordinate pair."""
    return await WEATHER_FORECAST_FLOW.run(
        payload,
        client=client,
        today=format_prompt_date(today or date.today()),
    )


async def get_current_weather(
    latitude: float,
    longitude: float,
    *,
    client: Optional[ModelClient] = None,
    rng: Optional[random.Random] = None,
) -> CurrentWeather:
    """
    Current conditions, taken from the first day of the simulated forecast.

    The forecast carries no wind data, so wind speed is simulated in the
    5-15 km/h range.
    """
    forecast = await get_weather_forecast(
        {"latitude": latitude, "longitude": longitude}, client=client
    )
    if not forecast.forecast:
        raise NoResponseError("Could not retrieve forecast.")

    today = forecast.forecast[0]
    wind_speed = 5 + (rng or random).random() * 10
    logger.info("Current weather for %s: %s", forecast.location_name, today.condition)
    return CurrentWeather(
        temperature=today.high_temp,
        wind_speed=round(wind_speed, 1),
        condition=today.condition,
        location_name=forecast.location_name,
    )
