from fastapi import APIRouter, Depends

from kisan_advisor.core.model_client import ModelClient, get_model_client
from kisan_advisor.models.weather import (
    CurrentWeather,
    WeatherForecastInput,
    WeatherForecastOutput,
)
from kisan_advisor.services.weather_forecast_service import (
    get_current_weather,
    get_weather_forecast,
)

router = APIRouter(prefix="/weather", tags=["Weather"])


@router.post("/forecast", response_model=WeatherForecastOutput)
async def weather_forecast(
    request: WeatherForecastInput,
    client: ModelClient = Depends(get_model_client),
):
    """
    Get a simulated 5-day forecast for a specific location.
    """
    return await get_weather_forecast(request, client=client)


@router.post("/current", response_model=CurrentWeather)
async def current_weather(
    request: WeatherForecastInput,
    client: ModelClient = Depends(get_model_client),
):
    """
    Get current weather conditions for a specific location.
    """
    return await get_current_weather(request.latitude, request.longitude, client=client)
