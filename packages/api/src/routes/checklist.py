# This project was developed with assistance from AI tools.
"""Company bidding checklist routes.

The company is always the caller's own (``company_id`` token claim); there is
no way to address another company's checklist from here. Reads of derived
views (validation, summary, progress) never create the row.
"""

import logging
from dataclasses import asdict

from db import CompanyChecklist, get_db
from db.enums import Jurisdiction, UserRole
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..middleware.auth import CurrentUser, require_roles
from ..schemas.auth import UserContext
from ..schemas.checklist import (
    ApplicationGateResponse,
    ChecklistBulkUpdate,
    ChecklistCatalogResponse,
    ChecklistCategory,
    ChecklistFieldUpdate,
    ChecklistItemSchema,
    ChecklistProgressResponse,
    ChecklistResponse,
    ChecklistSummaryResponse,
    CriticalItemsResponse,
    ValidationResultResponse,
)
from ..services.checklist import store, validation
from ..services.checklist.catalog import CATALOG
from ..services.checklist.store import ChecklistFieldError

logger = logging.getLogger(__name__)

router = APIRouter()

_EDITOR_ROLES = (UserRole.COMPANY_OWNER, UserRole.ADMIN)

_require_editor = require_roles(*_EDITOR_ROLES)

_JURISDICTIONS_QUERY = Query(
    default=None,
    description="Jurisdictions to validate. Omit for all four.",
)


async def _company_id(user: UserContext, session: AsyncSession) -> int:
    """The caller's company id, or 404 when the caller has none."""
    if user.company_id is None or await store.get_company(session, user.company_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No company found")
    return user.company_id


async def _editable_company_id(
    user: CurrentUser,
    session: AsyncSession = Depends(get_db),
) -> int:
    """Company first (404), then the editor role (403)."""
    company_id = await _company_id(user, session)
    await _require_editor(user)
    return company_id


def _to_response(checklist: CompanyChecklist) -> ChecklistResponse:
    return ChecklistResponse(
        id=checklist.id,
        company_id=checklist.company_id,
        fields=checklist.to_fields(),
        last_updated_by=checklist.last_updated_by,
        notes=checklist.notes,
        created_at=checklist.created_at,
        updated_at=checklist.updated_at,
    )


def _validation_response(
    result: validation.ValidationResult, jurisdictions: list[Jurisdiction]
) -> ValidationResultResponse:
    return ValidationResultResponse(jurisdictions=jurisdictions, **asdict(result))


def _validate(record, jurisdictions: list[Jurisdiction]) -> validation.ValidationResult:
    if len(jurisdictions) == 1:
        return validation.validate_for_jurisdiction(record, jurisdictions[0])
    return validation.validate_for_application(record, jurisdictions)


@router.get("", response_model=ChecklistResponse)
async def get_checklist(
    user: CurrentUser,
    session: AsyncSession = Depends(get_db),
) -> ChecklistResponse:
    """Return the caller's checklist, creating an empty one on first access."""
    company_id = await _company_id(user, session)
    checklist = await store.get_or_create_checklist(session, company_id)
    return _to_response(checklist)


@router.put("", response_model=ChecklistResponse)
async def update_checklist_field(
    body: ChecklistFieldUpdate,
    user: CurrentUser,
    company_id: int = Depends(_editable_company_id),
    session: AsyncSession = Depends(get_db),
) -> ChecklistResponse:
    try:
        checklist = await store.update_checklist_field(
            session, user, company_id, body.field, body.value
        )
    except ChecklistFieldError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return _to_response(checklist)


@router.patch("", response_model=ChecklistResponse)
async def bulk_update_checklist(
    body: ChecklistBulkUpdate,
    user: CurrentUser,
    company_id: int = Depends(_editable_company_id),
    session: AsyncSession = Depends(get_db),
) -> ChecklistResponse:
    notes = {"notes": body.notes} if "notes" in body.model_fields_set else {}
    try:
        checklist = await store.bulk_update_checklist(
            session, user, company_id, body.updates, **notes
        )
    except ChecklistFieldError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return _to_response(checklist)


@router.get("/catalog", response_model=ChecklistCatalogResponse)
async def get_catalog(user: CurrentUser) -> ChecklistCatalogResponse:
    return ChecklistCatalogResponse(
        total_items=len(CATALOG),
        categories=[
            ChecklistCategory(
                category=category,
                items=[ChecklistItemSchema.model_validate(item) for item in items],
            )
            for category, items in CATALOG.categories().items()
        ],
        critical_item_fields=CATALOG.critical_item_fields(),
    )


@router.get("/validation", response_model=ValidationResultResponse)
async def get_validation(
    user: CurrentUser,
    jurisdictions: list[Jurisdiction] | None = _JURISDICTIONS_QUERY,
    session: AsyncSession = Depends(get_db),
) -> ValidationResultResponse:
    """Completion status for one jurisdiction, or pooled across several."""
    company_id = await _company_id(user, session)
    checklist = await store.get_checklist(session, company_id)
    selected = jurisdictions or list(Jurisdiction.ordered())
    return _validation_response(_validate(checklist, selected), selected)


@router.get("/summary", response_model=ChecklistSummaryResponse)
async def get_summary(
    user: CurrentUser,
    session: AsyncSession = Depends(get_db),
) -> ChecklistSummaryResponse:
    company_id = await _company_id(user, session)
    checklist = await store.get_checklist(session, company_id)
    return ChecklistSummaryResponse(**asdict(validation.summarize(checklist)))


@router.get("/progress", response_model=ChecklistProgressResponse)
async def get_progress(
    user: CurrentUser,
    session: AsyncSession = Depends(get_db),
) -> ChecklistProgressResponse:
    company_id = await _company_id(user, session)
    checklist = await store.get_checklist(session, company_id)
    return ChecklistProgressResponse(**asdict(validation.progress(checklist)))


@router.get("/critical", response_model=CriticalItemsResponse)
async def get_critical_items(
    user: CurrentUser,
    session: AsyncSession = Depends(get_db),
) -> CriticalItemsResponse:
    company_id = await _company_id(user, session)
    checklist = await store.get_checklist(session, company_id)
    missing = validation.critical_items_missing(checklist)
    return CriticalItemsResponse(critical_items_missing=missing, count=len(missing))


@router.get("/gate", response_model=ApplicationGateResponse)
async def get_application_gate(
    user: CurrentUser,
    jurisdictions: list[Jurisdiction] | None = _JURISDICTIONS_QUERY,
    session: AsyncSession = Depends(get_db),
) -> ApplicationGateResponse:
    """Whether the caller may submit an application for ``jurisdictions``.

    The percentage gate and the critical-item veto are both reported.
    """
    company_id = await _company_id(user, session)
    checklist = await store.get_checklist(session, company_id)
    selected = jurisdictions or list(Jurisdiction.ordered())
    gate = validation.evaluate_application_gate(checklist, selected)
    if not gate.may_submit:
        logger.info(
            "Application gate closed for company %s: %d%% complete, %d critical missing",
            company_id,
            gate.validation.completion_percentage,
            len(gate.critical_items_missing),
        )
    return ApplicationGateResponse(
        validation=_validation_response(gate.validation, selected),
        critical_items_missing=gate.critical_items_missing,
        may_submit=gate.may_submit,
    )
