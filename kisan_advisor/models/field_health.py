from datetime import date

from pydantic import BaseModel, Field

from .common import DataUri, NonEmptyStr


class FieldHealthSummaryInput(BaseModel):
    field_id: NonEmptyStr = Field(description="The ID of the field to analyze.")
    satellite_imagery_data_uri: DataUri = Field(
        description=(
            "Satellite imagery of the field, as a data URI that must include a MIME type "
            "and use Base64 encoding. Expected format: 'data:<mimetype>;base64,<encoded_data>'."
        )
    )
    weather_data: NonEmptyStr = Field(description="Weather data for the field.")
    crop_type: NonEmptyStr = Field(description="The type of crop planted in the field.")
    planting_date: date = Field(description="The planting date of the crop.")


class FieldHealthSummaryOutput(BaseModel):
    summary: str = Field(
        description=(
            "A comprehensive, multi-sentence summary of the overall field health, "
            "including key findings and potential issues."
        )
    )
    ndvi: float = Field(
        ge=0,
        le=1,
        description=(
            "The Normalized Difference Vegetation Index (NDVI) of the field, as a value "
            "between 0 and 1. This indicates vegetation density and health."
        ),
    )
    soil_moisture: float = Field(
        ge=0,
        le=100,
        description="The estimated soil moisture level of the field as a percentage.",
    )
    crop_stress: str = Field(
        description='A qualitative assessment of crop stress (e.g., "Low", "Moderate", "High").'
    )
    drought_risk: str = Field(
        description='The predicted drought risk for the field (e.g., "Low", "Medium", "High").'
    )
    flood_risk: str = Field(
        description='The predicted flood risk for the field (e.g., "Low", "Medium", "High").'
    )
    pest_disease_likelihood: str = Field(
        description=(
            'The likelihood of pest and disease infestation (e.g., "Low", "Medium", "High").'
        )
    )
    yield_anomaly_prediction: str = Field(
        description=(
            'The predicted yield anomaly for the field (e.g., "Normal", '
            '"Slightly Below Average", "Above Average").'
        )
    )
    suggested_actions: str = Field(
        description=(
            "A bulleted or numbered list of clear, actionable, and prioritized "
            "suggestions for the farmer to improve field health."
        )
    )
