from typing import List

from pydantic import BaseModel, Field

from .common import Latitude, Longitude


class WeatherForecastInput(BaseModel):
    latitude: Latitude = Field(description="The latitude of the location.")
    longitude: Longitude = Field(description="The longitude of the location.")


class DailyForecast(BaseModel):
    day: str = Field(description='The day of the week (e.g., "Monday").')
    date: str = Field(description='The date in a readable format (e.g., "August 26").')
    high_temp: float = Field(description="The high temperature in Celsius.")
    low_temp: float = Field(description="The low temperature in Celsius.")
    condition: str = Field(
        description=(
            'A brief description of the weather condition (e.g., "Partly Cloudy", '
            '"Showers", "Sunny").'
        )
    )
    precipitation_chance: float = Field(
        ge=0,
        le=100,
        description="The chance of precipitation as a percentage (0-100).",
    )


class WeatherForecastOutput(BaseModel):
    forecast: List[DailyForecast] = Field(
        min_length=1, description="A list of 5 daily forecast objects."
    )
    location_name: str = Field(
        description='The name of the location for the forecast (e.g., "Pusa, Bihar, India").'
    )


class CurrentWeather(BaseModel):
    temperature: float = Field(description="The current temperature in Celsius.")
    wind_speed: float = Field(description="The current wind speed in km/h.")
    condition: str = Field(
        description="A brief description of the weather condition (e.g., 'Sunny', 'Cloudy')."
    )
    location_name: str = Field(description="The name of the location for the forecast.")
