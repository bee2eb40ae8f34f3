from fastapi import APIRouter, Body, Depends, status

from kisan_advisor.core.model_client import ModelClient, get_model_client
from kisan_advisor.core.session_store import SessionStore, get_session_store
from kisan_advisor.models.harvest_time import HarvestTimeOutput
from kisan_advisor.models.session import (
    FarmerSession,
    FarmerSessionCreate,
    FarmField,
    FarmFieldCreate,
    LoanApplication,
    LoanApplicationCreate,
    LoanApplicationStatus,
    SchemeApplication,
    SchemeApplicationCreate,
    SchemeApplicationStatus,
    SupportedLanguage,
)
from kisan_advisor.models.watering import WateringRecommendationOutput
from kisan_advisor.services import farmer_session_service
from kisan_advisor.services.harvest_time_service import predict_harvest_time
from kisan_advisor.services.watering_service import get_watering_recommendation

router = APIRouter(prefix="/farmers", tags=["Farmers"])


@router.put("/{farmer_id}", response_model=FarmerSession)
async def create_or_update_farmer(
    farmer_id: str,
    data: FarmerSessionCreate,
    store: SessionStore = Depends(get_session_store),
):
    """
    Create a farmer session, or update the name and language of an existing one.
    """
    return await farmer_session_service.create_or_replace_session(store, farmer_id, data)


@router.get("/{farmer_id}", response_model=FarmerSession)
async def get_farmer(farmer_id: str, store: SessionStore = Depends(get_session_store)):
    return await farmer_session_service.get_session(store, farmer_id)


@router.delete("/{farmer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_farmer(farmer_id: str, store: SessionStore = Depends(get_session_store)):
    await farmer_session_service.delete_session(store, farmer_id)


@router.patch("/{farmer_id}/language", response_model=FarmerSession)
async def update_language(
    farmer_id: str,
    language: SupportedLanguage = Body(..., embed=True),
    store: SessionStore = Depends(get_session_store),
):
    return await farmer_session_service.set_language(store, farmer_id, language)


@router.patch("/{farmer_id}/notifications", response_model=FarmerSession)
async def update_notifications(
    farmer_id: str,
    enabled: bool = Body(..., embed=True),
    store: SessionStore = Depends(get_session_store),
):
    return await farmer_session_service.set_notifications(store, farmer_id, enabled)


@router.post(
    "/{farmer_id}/fields",
    response_model=FarmField,
    status_code=status.HTTP_201_CREATED,
)
async def add_field(
    farmer_id: str,
    data: FarmFieldCreate,
    store: SessionStore = Depends(get_session_store),
):
    return await farmer_session_service.add_field(store, farmer_id, data)


@router.delete("/{farmer_id}/fields/{field_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_field(
    farmer_id: str,
    field_id: str,
    store: SessionStore = Depends(get_session_store),
):
    await farmer_session_service.delete_field(store, farmer_id, field_id)


@router.post(
    "/{farmer_id}/fields/{field_id}/watering-recommendation",
    response_model=WateringRecommendationOutput,
)
async def field_watering_recommendation(
    farmer_id: str,
    field_id: str,
    store: SessionStore = Depends(get_session_store),
    client: ModelClient = Depends(get_model_client),
):
    """
    Watering advice for one of the farmer's saved fields.
    """
    field = await farmer_session_service.get_field(store, farmer_id, field_id)
    return await get_watering_recommendation(
        {
            "crop_type": field.crop_type,
            "planting_date": field.planting_date,
            "latitude": field.latitude,
            "longitude": field.longitude,
        },
        client=client,
    )


@router.post(
    "/{farmer_id}/fields/{field_id}/harvest-prediction",
    response_model=HarvestTimeOutput,
)
async def field_harvest_prediction(
    farmer_id: str,
    field_id: str,
    store: SessionStore = Depends(get_session_store),
    client: ModelClient = Depends(get_model_client),
):
    """
    Harvest estimate for one of the farmer's saved fields.
    """
    field = await farmer_session_service.get_field(store, farmer_id, field_id)
    return await predict_harvest_time(
        {"crop_type": field.crop_type, "planting_date": field.planting_date},
        client=client,
    )


@router.post(
    "/{farmer_id}/loan-applications",
    response_model=LoanApplication,
    status_code=status.HTTP_201_CREATED,
)
async def submit_loan_application(
    farmer_id: str,
    data: LoanApplicationCreate,
    store: SessionStore = Depends(get_session_store),
):
    return await farmer_session_service.add_loan_application(store, farmer_id, data)


@router.patch(
    "/{farmer_id}/loan-applications/{application_id}/status",
    response_model=LoanApplication,
)
async def update_loan_application_status(
    farmer_id: str,
    application_id: str,
    new_status: LoanApplicationStatus = Body(..., embed=True, alias="status"),
    store: SessionStore = Depends(get_session_store),
):
    return await farmer_session_service.update_loan_application_status(
        store, farmer_id, application_id, new_status
    )


@router.post(
    "/{farmer_id}/scheme-applications",
    response_model=SchemeApplication,
    status_code=status.HTTP_201_CREATED,
)
async def submit_scheme_application(
    farmer_id: str,
    data: SchemeApplicationCreate,
    store: SessionStore = Depends(get_session_store),
):
    return await farmer_session_service.add_scheme_application(store, farmer_id, data)


@router.patch(
    "/{farmer_id}/scheme-applications/{application_id}/status",
    response_model=SchemeApplication,
)
async def update_scheme_application_status(
    farmer_id: str,
    application_id: str,
    new_status: SchemeApplicationStatus = Body(..., embed=True, alias="status"),
    store: SessionStore = Depends(get_session_store),
):
    return await farmer_session_service.update_scheme_application_status(
        store, farmer_id, application_id, new_status
    )
