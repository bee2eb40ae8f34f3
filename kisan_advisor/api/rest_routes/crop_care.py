from fastapi import APIRouter, Depends

from kisan_advisor.core.model_client import ModelClient, get_model_client
from kisan_advisor.models.field_health import (
    FieldHealthSummaryInput,
    FieldHealthSummaryOutput,
)
from kisan_advisor.models.harvest_time import HarvestTimeInput, HarvestTimeOutput
from kisan_advisor.models.pest_detection import (
    AnalyzeUploadedImageInput,
    AnalyzeUploadedImageOutput,
)
from kisan_advisor.models.watering import (
    WateringRecommendationInput,
    WateringRecommendationOutput,
)
from kisan_advisor.services.field_health_service import get_field_health_summary
from kisan_advisor.services.harvest_time_service import predict_harvest_time
from kisan_advisor.services.pest_detection_service import analyze_uploaded_image
from kisan_advisor.services.watering_service import get_watering_recommendation

router = APIRouter(prefix="/crop-care", tags=["Crop Care"])


@router.post("/pest-detection", response_model=AnalyzeUploadedImageOutput)
async def detect_pests(
    request: AnalyzeUploadedImageInput,
    client: ModelClient = Depends(get_model_client),
):
    """
    Identify pests or diseases in a crop photo and suggest remedies.
    """
    return await analyze_uploaded_image(request, client=client)


@router.post("/field-health", response_model=FieldHealthSummaryOutput)
async def field_health_summary(
    request: FieldHealthSummaryInput,
    client: ModelClient = Depends(get_model_client),
):
    """
    Summarize field health from satellite imagery and weather data.
    """
    return await get_field_health_summary(request, client=client)


@router.post("/harvest-prediction", response_model=HarvestTimeOutput)
async def harvest_prediction(
    request: HarvestTimeInput,
    client: ModelClient = Depends(get_model_client),
):
    return await predict_harvest_time(request, client=client)


@router.post("/watering-recommendation", response_model=WateringRecommendationOutput)
async def watering_recommendation(
    request: WateringRecommendationInput,
    client: ModelClient = Depends(get_model_client),
):
    """
    Watering advice for the next 24-48 hours based on crop age and weather.
    """
    return await get_watering_recommendation(request, client=client)
