# This project was developed with assistance from AI tools.
"""Bidding checklist catalog, validation rules, and persistence."""

from .catalog import CATALOG, CHECKLIST_ITEMS, CRITICAL_ITEM_FIELDS, ChecklistCatalog, ChecklistItem
from .store import ChecklistFieldError
from .validation import (
    APPLICATION_GATE_THRESHOLD,
    ApplicationGate,
    ChecklistProgress,
    ChecklistSummary,
    ValidationResult,
    critical_items_missing,
    evaluate_application_gate,
    progress,
    summarize,
    validate_for_application,
    validate_for_jurisdiction,
)

__all__ = [
    "APPLICATION_GATE_THRESHOLD",
    "CATALOG",
    "CHECKLIST_ITEMS",
    "CRITICAL_ITEM_FIELDS",
    "ApplicationGate",
    "ChecklistCatalog",
    "ChecklistFieldError",
    "ChecklistItem",
    "ChecklistProgress",
    "ChecklistSummary",
    "ValidationResult",
    "critical_items_missing",
    "evaluate_application_gate",
    "progress",
    "summarize",
    "validate_for_application",
    "validate_for_jurisdiction",
]
