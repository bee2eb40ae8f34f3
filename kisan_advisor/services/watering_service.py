import logging
from datetime import date
from functools import partial
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from kisan_advisor.core.advisory import AdvisoryFlow, validate_input
from kisan_advisor.core.errors import ValidationError
from kisan_advisor.core.model_client import ModelClient
from kisan_advisor.core.prompt_template import AdvisoryPrompt
from kisan_advisor.models.watering import (
    WateringPromptInput,
    WateringRecommendationInput,
    WateringRecommendationOutput,
)
from kisan_advisor.models.weather import CurrentWeather
from kisan_advisor.prompts.watering_prompt import WATERING_RECOMMENDATION_PROMPT

from .weather_forecast_service import get_current_weather

logger = logging.getLogger(__name__)

WeatherProvider = Callable[[float, float], Awaitable[CurrentWeather]]

WATERING_RECOMMENDATION_FLOW = AdvisoryFlow(
    name="watering_recommendation",
    prompt=AdvisoryPrompt(
        name="watering_recommendation_prompt",
        template=WATERING_RECOMMENDATION_PROMPT,
        input_model=WateringPromptInput,
    ),
    output_model=WateringRecommendationOutput,
)


def format_weather_summary(weather: CurrentWeather) -> str:
    return (
        f"Temperature: {weather.temperature:g}°C, "
        f"Wind: {weather.wind_speed:g} km/h, "
        f"Condition: {weather.condition}"
    )


def days_since(planting_date: date, today: date) -> int:
    return (today - planting_date).days


async def get_watering_recommendation(
    payload: Union[WateringRecommendationInput, Mapping[str, Any]],
    *,
    client: Optional[ModelClient] = None,
    today: Optional[date] = None,
    weather_provider: Optional[WeatherProvider] = None,
) -> WateringRecommendationOutput:
    """
    Irrigation advice for the next 24-48 hours.

    Looks up the current weather for the field, derives the crop age from the
    planting date, then asks the model for a recommendation.
    """
    request = validate_input(WateringRecommendationInput, payload)
    today = today or date.today()

    days_since_planting = days_since(request.planting_date, today)
    if days_since_planting < 0:
        raise ValidationError("planting_date", "Planting date cannot be in the future.")

    if weather_provider is None:
        weather_provider = partial(get_current_weather, client=client)
    current_weather = await weather_provider(request.latitude, request.longitude)

    logger.info(
        "Watering recommendation for %s planted %s day(s) ago",
        request.crop_type,
        days_since_planting,
    )
    return await WATERING_RECOMMENDATION_FLOW.run(
        WateringPromptInput(
            crop_type=request.crop_type,
            days_since_planting=days_since_planting,
            weather=format_weather_summary(current_weather),
        ),
        client=client,
    )
