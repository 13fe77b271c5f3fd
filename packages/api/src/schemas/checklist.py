# This project was developed with assistance from AI tools.
"""Company checklist request/response schemas."""

from datetime import datetime
from typing import Any

from db.enums import InputType, Jurisdiction
from pydantic import BaseModel, ConfigDict, Field


class ChecklistItemSchema(BaseModel):
    """A catalog entry as shown to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    label: str
    category: Jurisdiction
    field: str
    input_type: InputType
    required: bool
    description: str = ""
    placeholder: str = ""


class ChecklistCategory(BaseModel):
    category: Jurisdiction
    items: list[ChecklistItemSchema]


class ChecklistCatalogResponse(BaseModel):
    """Full catalog grouped by jurisdiction."""

    total_items: int
    categories: list[ChecklistCategory]
    critical_item_fields: list[str]


class ChecklistResponse(BaseModel):
    """A company's stored checklist row."""

    id: int
    company_id: int
    fields: dict[str, bool | str | None]
    last_updated_by: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ChecklistFieldUpdate(BaseModel):
    """Single-field update (PUT)."""

    field: str = Field(min_length=1)
    value: bool | str | None


class ChecklistBulkUpdate(BaseModel):
    """Multi-field update (PATCH). Only boolean values are applied."""

    updates: dict[str, Any]
    notes: str | None = None


class ValidationResultResponse(BaseModel):
    """Completion and gate status for one or more jurisdictions."""

    jurisdictions: list[Jurisdiction]
    is_complete: bool
    missing_items: list[str]
    completion_percentage: int
    can_apply: bool
    recommendations: list[str]


class ChecklistSummaryResponse(BaseModel):
    total_items: int
    completed_items: int
    completion_percentage: int
    by_jurisdiction: dict[Jurisdiction, int]
    critical_items_missing: int


class ChecklistProgressResponse(BaseModel):
    total: int
    completed: int
    percentage: int
    by_category: dict[Jurisdiction, int]


class CriticalItemsResponse(BaseModel):
    critical_items_missing: list[str]
    count: int


class ApplicationGateResponse(BaseModel):
    """Percentage gate and critical-item veto, reported side by side."""

    validation: ValidationResultResponse
    critical_items_missing: list[str]
    may_submit: bool
