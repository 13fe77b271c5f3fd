# This project was developed with assistance from AI tools.
"""Tests for checklist persistence (mocked AsyncSession)."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from db import CompanyChecklist
from db.enums import UserRole
from sqlalchemy.exc import IntegrityError

from src.schemas.auth import UserContext
from src.services.checklist.store import (
    ChecklistFieldError,
    bulk_update_checklist,
    get_or_create_checklist,
    update_checklist_field,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _owner() -> UserContext:
    return UserContext(
        user_id="owner-1",
        role=UserRole.COMPANY_OWNER,
        email="owner@acme.test",
        name="Olive Owner",
        company_id=7,
    )


def _result(row):
    result = MagicMock()
    result.scalar_one_or_none.return_value = row
    return result


def _session(*rows) -> AsyncMock:
    """Session whose successive ``execute`` calls return ``rows`` in order."""
    session = AsyncMock()
    session.execute = AsyncMock(side_effect=[_result(row) for row in rows])
    session.add = MagicMock()
    return session


def _existing(**values) -> CompanyChecklist:
    checklist = CompanyChecklist(id=3, company_id=7)
    for name in CompanyChecklist.boolean_fields():
        setattr(checklist, name, False)
    for name, value in values.items():
        setattr(checklist, name, value)
    return checklist


# ---------------------------------------------------------------------------
# get_or_create_checklist
# ---------------------------------------------------------------------------


async def test_get_or_create_returns_existing_row():
    existing = _existing()
    session = _session(existing)

    checklist = await get_or_create_checklist(session, 7)

    assert checklist is existing
    session.add.assert_not_called()
    session.commit.assert_not_awaited()


async def test_get_or_create_inserts_all_false_row():
    session = _session(None)

    checklist = await get_or_create_checklist(session, 7)

    session.add.assert_called_once_with(checklist)
    session.commit.assert_awaited_once()
    assert checklist.company_id == 7
    assert all(getattr(checklist, name) is False for name in CompanyChecklist.boolean_fields())
    assert all(getattr(checklist, name) is None for name in CompanyChecklist.text_fields())


async def test_get_or_create_recovers_from_concurrent_insert():
    winner = _existing()
    session = _session(None, winner)
    session.commit.side_effect = IntegrityError("INSERT", {}, Exception("duplicate key"))

    checklist = await get_or_create_checklist(session, 7)

    assert checklist is winner
    session.rollback.assert_awaited_once()


async def test_get_or_create_reraises_when_row_still_missing():
    session = _session(None, None)
    session.commit.side_effect = IntegrityError("INSERT", {}, Exception("fk violation"))

    with pytest.raises(IntegrityError):
        await get_or_create_checklist(session, 7)


# ---------------------------------------------------------------------------
# update_checklist_field
# ---------------------------------------------------------------------------


async def test_update_boolean_field():
    existing = _existing()
    session = _session(existing)

    checklist = await update_checklist_field(
        session, _owner(), 7, "business_license_state", True
    )

    assert checklist.business_license_state is True
    assert checklist.last_updated_by == "owner-1"
    session.commit.assert_awaited_once()


async def test_update_text_field():
    existing = _existing()
    session = _session(existing)

    checklist = await update_checklist_field(
        session, _owner(), 7, "federal_ein_value_state", "12-3456789"
    )

    assert checklist.federal_ein_value_state == "12-3456789"


async def test_update_creates_row_when_absent():
    session = _session(None)

    checklist = await update_checklist_field(session, _owner(), 7, "w9_form_city", True)

    assert checklist.w9_form_city is True
    # insert commit + update commit
    assert session.commit.await_count == 2


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("business_license_state", "yes"),
        ("business_license_state", None),
        ("federal_ein_value_state", True),
        ("no_such_field", True),
        ("company_id", 9),
        ("last_updated_by", "someone"),
    ],
)
async def test_update_rejects_bad_input_before_touching_db(field, value):
    session = _session()

    with pytest.raises(ChecklistFieldError):
        await update_checklist_field(session, _owner(), 7, field, value)

    session.execute.assert_not_awaited()
    session.commit.assert_not_awaited()


def test_field_error_is_value_error():
    assert issubclass(ChecklistFieldError, ValueError)


# ---------------------------------------------------------------------------
# bulk_update_checklist
# ---------------------------------------------------------------------------


async def test_bulk_update_applies_only_booleans():
    existing = _existing()
    session = _session(existing)

    checklist = await bulk_update_checklist(
        session,
        _owner(),
        7,
        {
            "business_license_state": True,
            "federal_ein_county": True,
            "insurance_certificates_city": "true",
            "cal_eprocure_number": "EP-1",
        },
        notes="Renewed licenses",
    )

    assert checklist.business_license_state is True
    assert checklist.federal_ein_county is True
    assert checklist.insurance_certificates_city is False
    assert checklist.cal_eprocure_number is None
    assert checklist.notes == "Renewed licenses"
    assert checklist.last_updated_by == "owner-1"
    session.commit.assert_awaited_once()


async def test_bulk_update_keeps_notes_when_omitted():
    existing = _existing(notes="keep me")
    session = _session(existing)

    checklist = await bulk_update_checklist(session, _owner(), 7, {"w9_form_city": True})

    assert checklist.notes == "keep me"


async def test_bulk_update_clears_notes_with_explicit_none():
    existing = _existing(notes="old")
    session = _session(existing)

    checklist = await bulk_update_checklist(session, _owner(), 7, {}, notes=None)

    assert checklist.notes is None
    session.commit.assert_awaited_once()


async def test_bulk_update_can_clear_flags():
    existing = _existing(business_license_city=True)
    session = _session(existing)

    checklist = await bulk_update_checklist(
        session, _owner(), 7, {"business_license_city": False}
    )

    assert checklist.business_license_city is False


async def test_bulk_update_unknown_field_raises():
    session = _session()

    with pytest.raises(ChecklistFieldError, match="bogus"):
        await bulk_update_checklist(session, _owner(), 7, {"bogus": True})

    session.commit.assert_not_awaited()
