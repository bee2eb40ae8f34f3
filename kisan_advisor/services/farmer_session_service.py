import logging

from fastapi import HTTPException, status

from kisan_advisor.core.session_store import SessionMutation, SessionStore
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

logger = logging.getLogger(__name__)


def _session_not_found(farmer_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Farmer session '{farmer_id}' not found.",
    )


def _field_not_found(farmer_id: str, field_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Field '{field_id}' not found for farmer '{farmer_id}'.",
    )


async def _update_session(
    store: SessionStore, farmer_id: str, mutate: SessionMutation
) -> FarmerSession:
    session = await store.update(farmer_id, mutate)
    if session is None:
        raise _session_not_found(farmer_id)
    return session


async def create_or_replace_session(
    store: SessionStore, farmer_id: str, data: FarmerSessionCreate
) -> FarmerSession:
    def apply(session: FarmerSession) -> None:
        session.name = data.name
        session.language = data.language

    session = await store.update(farmer_id, apply)
    if session:
        return session
    logger.info("Creating session for farmer %s", farmer_id)
    return await store.save(
        FarmerSession(farmer_id=farmer_id, name=data.name, language=data.language)
    )


async def get_session(store: SessionStore, farmer_id: str) -> FarmerSession:
    session = await store.get(farmer_id)
    if not session:
        raise _session_not_found(farmer_id)
    return session


async def delete_session(store: SessionStore, farmer_id: str) -> None:
    if not await store.delete(farmer_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Farmer session '{farmer_id}' not found for deletion.",
        )


async def set_language(
    store: SessionStore, farmer_id: str, language: SupportedLanguage
) -> FarmerSession:
    def apply(session: FarmerSession) -> None:
        session.language = language

    return await _update_session(store, farmer_id, apply)


async def set_notifications(
    store: SessionStore, farmer_id: str, enabled: bool
) -> FarmerSession:
    def apply(session: FarmerSession) -> None:
        session.notifications_enabled = enabled

    return await _update_session(store, farmer_id, apply)


async def add_field(
    store: SessionStore, farmer_id: str, data: FarmFieldCreate
) -> FarmField:
    field = FarmField(**data.model_dump())
    await _update_session(
        store, farmer_id, lambda session: session.farm_fields.append(field)
    )
    return field


async def get_field(store: SessionStore, farmer_id: str, field_id: str) -> FarmField:
    session = await get_session(store, farmer_id)
    field = session.get_field(field_id)
    if not field:
        raise _field_not_found(farmer_id, field_id)
    return field


async def delete_field(store: SessionStore, farmer_id: str, field_id: str) -> None:
    def apply(session: FarmerSession) -> None:
        remaining = [item for item in session.farm_fields if item.id != field_id]
        if len(remaining) == len(session.farm_fields):
            raise _field_not_found(farmer_id, field_id)
        session.farm_fields = remaining

    await _update_session(store, farmer_id, apply)


async def add_loan_application(
    store: SessionStore, farmer_id: str, data: LoanApplicationCreate
) -> LoanApplication:
    application = LoanApplication(**data.model_dump())
    await _update_session(
        store, farmer_id, lambda session: session.loan_applications.append(application)
    )
    logger.info("Loan application %s submitted to %s", application.id, application.bank_name)
    return application


async def update_loan_application_status(
    store: SessionStore,
    farmer_id: str,
    application_id: str,
    new_status: LoanApplicationStatus,
) -> LoanApplication:
    def find(session: FarmerSession) -> LoanApplication:
        application = next(
            (item for item in session.loan_applications if item.id == application_id),
            None,
        )
        if not application:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Loan application '{application_id}' not found.",
            )
        return application

    def apply(session: FarmerSession) -> None:
        find(session).status = new_status

    return find(await _update_session(store, farmer_id, apply))


async def add_scheme_application(
    store: SessionStore, farmer_id: str, data: SchemeApplicationCreate
) -> SchemeApplication:
    application = SchemeApplication(**data.model_dump())
    await _update_session(
        store, farmer_id, lambda session: session.scheme_applications.append(application)
    )
    return application


async def update_scheme_application_status(
    store: SessionStore,
    farmer_id: str,
    application_id: str,
    new_status: SchemeApplicationStatus,
) -> SchemeApplication:
    def find(session: FarmerSession) -> SchemeApplication:
        application = next(
            (item for item in session.scheme_applications if item.id == application_id),
            None,
        )
        if not application:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Scheme application '{application_id}' not found.",
            )
        return application

    def apply(session: FarmerSession) -> None:
        find(session).status = new_status

    return find(await _update_session(store, farmer_id, apply))
