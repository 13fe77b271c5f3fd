# This project was developed with assistance from AI tools.
"""Checklist persistence.

One ``company_checklist`` row per company, created lazily on first access.
Writes are last-writer-wins; concurrent edits to different fields of the same
row are not merged.
"""

import logging
from collections.abc import Mapping
from typing import Any

from db import Company, CompanyChecklist
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ...schemas.auth import UserContext

logger = logging.getLogger(__name__)

# Distinguishes "notes not sent" from an explicit None that clears them.
_UNSET: Any = object()


class ChecklistFieldError(ValueError):
    """Raised when a checklist update names an unknown field or a wrongly typed value."""

    pass


async def get_company(session: AsyncSession, company_id: int) -> Company | None:
    return await session.get(Company, company_id)


async def get_checklist(session: AsyncSession, company_id: int) -> CompanyChecklist | None:
    stmt = select(CompanyChecklist).where(CompanyChecklist.company_id == company_id)
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


def _new_checklist(company_id: int) -> CompanyChecklist:
    # Column defaults only apply at flush; set flags now so the row reads as all-false.
    checklist = CompanyChecklist(company_id=company_id)
    for name in CompanyChecklist.boolean_fields():
        setattr(checklist, name, False)
    return checklist


async def get_or_create_checklist(session: AsyncSession, company_id: int) -> CompanyChecklist:
    """Return the company's checklist, inserting an all-false row if absent.

    Two first reads racing on the same company both try to insert; the loser
    hits the unique constraint, rolls back, and reads the winner's row.
    """
    checklist = await get_checklist(session, company_id)
    if checklist is not None:
        return checklist

    checklist = _new_checklist(company_id)
    session.add(checklist)
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        logger.warning("Checklist for company %s created concurrently, re-reading", company_id)
        existing = await get_checklist(session, company_id)
        if existing is None:
            raise
        return existing

    await session.refresh(checklist)
    logger.info("Created checklist for company %s", company_id)
    return checklist


def _check_value(field: str, value: Any) -> None:
    if field in CompanyChecklist.boolean_fields():
        if not isinstance(value, bool):
            raise ChecklistFieldError(f"Field '{field}' expects a boolean value")
    elif field in CompanyChecklist.text_fields():
        if value is not None and not isinstance(value, str):
            raise ChecklistFieldError(f"Field '{field}' expects a string value")
    else:
        raise ChecklistFieldError(f"Unknown checklist field: {field}")


async def update_checklist_field(
    session: AsyncSession,
    user: UserContext,
    company_id: int,
    field: str,
    value: bool | str | None,
) -> CompanyChecklist:
    """Set a single checklist field.

    Boolean columns take ``bool``; text columns take ``str`` (or ``None`` to
    clear). Raises ChecklistFieldError before touching the database.
    """
    _check_value(field, value)

    checklist = await get_or_create_checklist(session, company_id)
    setattr(checklist, field, value)
    checklist.last_updated_by = user.user_id
    await session.commit()
    await session.refresh(checklist)

    logger.info(
        "Checklist field %s updated for company %s by %s", field, company_id, user.user_id
    )
    return checklist


async def bulk_update_checklist(
    session: AsyncSession,
    user: UserContext,
    company_id: int,
    updates: Mapping[str, Any],
    notes: str | None = _UNSET,
) -> CompanyChecklist:
    """Apply several completion flags at once.

    Only boolean columns are written, and only with boolean values; anything
    else in ``updates`` for a known column is skipped. Unknown field names
    raise ChecklistFieldError. ``notes`` is left alone when omitted and
    cleared when passed as None.
    """
    known = set(CompanyChecklist.boolean_fields()) | set(CompanyChecklist.text_fields())
    unknown = sorted(name for name in updates if name not in known)
    if unknown:
        raise ChecklistFieldError(f"Unknown checklist field(s): {', '.join(unknown)}")

    checklist = await get_or_create_checklist(session, company_id)

    boolean_fields = set(CompanyChecklist.boolean_fields())
    applied = []
    for name, value in updates.items():
        if name in boolean_fields and isinstance(value, bool):
            setattr(checklist, name, value)
            applied.append(name)

    if notes is not _UNSET:
        checklist.notes = notes
    checklist.last_updated_by = user.user_id
    await session.commit()
    await session.refresh(checklist)

    logger.info(
        "Checklist bulk update for company %s by %s: %d field(s) applied, %d skipped",
        company_id,
        user.user_id,
        len(applied),
        len(updates) - len(applied),
    )
    return checklist
