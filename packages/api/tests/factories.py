# This project was developed with assistance from AI tools.
"""Shared test factory functions for creating checklist test objects."""

from datetime import UTC, datetime
from unittest.mock import MagicMock

from db import CompanyChecklist


def make_mock_company(id=7, name="Acme Contracting"):
    """Create a mock Company ORM object."""
    company = MagicMock()
    company.id = id
    company.name = name
    return company


def make_checklist(company_id=7, id=3, completed=(), **values):
    """Create a transient CompanyChecklist with every flag set explicitly.

    Args:
        company_id: Owning company.
        id: Row id.
        completed: Boolean fields to set True; all others are False.
        **values: Any other column values (text fields, notes, ...).

    Returns:
        CompanyChecklist instance, not attached to a session.
    """
    checklist = CompanyChecklist(id=id, company_id=company_id)
    for name in CompanyChecklist.boolean_fields():
        setattr(checklist, name, name in completed)
    for name, value in values.items():
        setattr(checklist, name, value)
    checklist.created_at = datetime(2026, 10, 1, tzinfo=UTC)
    checklist.updated_at = datetime(2026, 10, 1, tzinfo=UTC)
    return checklist
