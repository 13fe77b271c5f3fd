# This project was developed with assistance from AI tools.
"""Checklist validation rules.

Pure functions -- no DB calls, fully testable with plain values. A record is
anything that exposes checklist fields either as attributes (a
``CompanyChecklist`` row) or as mapping keys (a plain dict). ``None`` and
absent fields both count as "not completed".

Two percentage conventions coexist: validation over an empty item set is
vacuously 100% complete, while the whole-catalog summary of an empty catalog
reports 0%.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from db.enums import InputType, Jurisdiction

from .catalog import CATALOG, ChecklistCatalog, ChecklistItem

APPLICATION_GATE_THRESHOLD = 80

_ALMOST_READY_MAX_MISSING = 3
_VERY_CLOSE_MAX_MISSING = 5
_GOOD_PROGRESS_MAX_MISSING = 10


@dataclass
class ValidationResult:
    """Outcome of validating a record against one or more jurisdictions."""

    is_complete: bool
    missing_items: list[str]
    completion_percentage: int
    can_apply: bool
    recommendations: list[str] = field(default_factory=list)


@dataclass
class ChecklistSummary:
    """Whole-catalog completion snapshot."""

    total_items: int
    completed_items: int
    completion_percentage: int
    by_jurisdiction: dict[Jurisdiction, int]
    critical_items_missing: int


@dataclass
class ChecklistProgress:
    """Dashboard progress counts."""

    total: int
    completed: int
    percentage: int
    by_category: dict[Jurisdiction, int]


@dataclass
class ApplicationGate:
    """Both submission signals for a set of jurisdictions."""

    validation: ValidationResult
    critical_items_missing: list[str]

    @property
    def may_submit(self) -> bool:
        return self.validation.can_apply and not self.critical_items_missing


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _value(record: Any, name: str) -> Any:
    if record is None:
        return None
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _percent(completed: int, total: int) -> int:
    """Integer percentage rounded half-up (50.5 -> 51)."""
    return (200 * completed + total) // (2 * total)


def _items_in_scope(catalog: ChecklistCatalog, jurisdiction: Jurisdiction) -> list[ChecklistItem]:
    return [
        item
        for item in catalog.items_for_jurisdiction(jurisdiction)
        if item.required and item.input_type == InputType.BOOLEAN
    ]


def _jurisdiction_recommendations(jurisdiction: Jurisdiction, missing: int) -> list[str]:
    if missing == 0:
        return [f"Excellent! All {jurisdiction.value} requirements are complete."]
    recommendations = [
        f"Complete the {missing} missing {jurisdiction.value.lower()} requirements"
    ]
    if missing <= _ALMOST_READY_MAX_MISSING:
        recommendations.append(
            "You're almost ready! Complete the remaining items to improve your "
            "competitive position."
        )
    else:
        recommendations.append(
            "Focus on completing the most critical items first: Business License, "
            "Insurance Certificates, and Financial Statements."
        )
    return recommendations


def _overall_recommendations(missing: int, jurisdiction_count: int) -> list[str]:
    if missing == 0:
        return [
            "Perfect! You're fully prepared for government contracting across all "
            "jurisdictions."
        ]
    recommendations = [
        f"You have {missing} missing requirements across {jurisdiction_count} jurisdictions"
    ]
    if missing <= _VERY_CLOSE_MAX_MISSING:
        recommendations.append(
            "You're very close to being fully prepared for government contracting!"
        )
    elif missing <= _GOOD_PROGRESS_MAX_MISSING:
        recommendations.append(
            "Good progress! Focus on completing the most common requirements first."
        )
    else:
        recommendations.append(
            "Consider starting with smaller jurisdictions or focusing on your "
            "strongest areas first."
        )
    return recommendations


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def validate_for_jurisdiction(
    record: Any,
    jurisdiction: Jurisdiction | str,
    catalog: ChecklistCatalog = CATALOG,
) -> ValidationResult:
    """Validate the required boolean items of a single jurisdiction.

    An empty item set is vacuously complete (100%, may apply).
    """
    jurisdiction = Jurisdiction(jurisdiction)
    items = _items_in_scope(catalog, jurisdiction)
    missing = [item.label for item in items if not _value(record, item.field)]

    total = len(items)
    percentage = _percent(total - len(missing), total) if total else 100

    return ValidationResult(
        is_complete=not missing,
        missing_items=missing,
        completion_percentage=percentage,
        can_apply=percentage >= APPLICATION_GATE_THRESHOLD,
        recommendations=_jurisdiction_recommendations(jurisdiction, len(missing)),
    )


def validate_for_application(
    record: Any,
    jurisdictions: Iterable[Jurisdiction | str],
    catalog: ChecklistCatalog = CATALOG,
) -> ValidationResult:
    """Validate several jurisdictions as one pooled application.

    The percentage is computed over the summed item counts, never as a mean
    of the per-jurisdiction percentages, so larger jurisdictions weigh more.
    """
    jurisdictions = [Jurisdiction(j) for j in jurisdictions]

    total = 0
    missing: list[str] = []
    per_jurisdiction: list[str] = []
    for jurisdiction in jurisdictions:
        result = validate_for_jurisdiction(record, jurisdiction, catalog)
        total += len(_items_in_scope(catalog, jurisdiction))
        missing.extend(result.missing_items)
        per_jurisdiction.extend(result.recommendations)

    percentage = _percent(total - len(missing), total) if total else 100

    return ValidationResult(
        is_complete=not missing,
        missing_items=missing,
        completion_percentage=percentage,
        can_apply=percentage >= APPLICATION_GATE_THRESHOLD,
        recommendations=_overall_recommendations(len(missing), len(jurisdictions))
        + per_jurisdiction,
    )


def critical_items_missing(record: Any, catalog: ChecklistCatalog = CATALOG) -> list[str]:
    """Labels of critical items the record has not completed.

    Not folded into ``can_apply``: a record can clear the 80%
    gate while still missing one of these. Critical fields with no catalog
    item are ignored.
    """
    missing = []
    for name in catalog.critical_item_fields():
        item = catalog.item_for_field(name)
        if item is None or _value(record, name):
            continue
        missing.append(item.label)
    return missing


def summarize(record: Any, catalog: ChecklistCatalog = CATALOG) -> ChecklistSummary:
    """Whole-catalog counts by truthiness, text items included.

    An empty catalog reports 0%, unlike validation's vacuous 100%.
    """
    by_jurisdiction = {j: 0 for j in Jurisdiction.ordered()}
    for item in catalog:
        if _value(record, item.field):
            by_jurisdiction[item.category] += 1

    total = len(catalog)
    completed = sum(by_jurisdiction.values())
    return ChecklistSummary(
        total_items=total,
        completed_items=completed,
        completion_percentage=_percent(completed, total) if total else 0,
        by_jurisdiction=by_jurisdiction,
        critical_items_missing=len(critical_items_missing(record, catalog)),
    )


def _is_filled(item: ChecklistItem, value: Any) -> bool:
    if item.input_type == InputType.BOOLEAN:
        return value is True
    return value is not None and str(value).strip() != ""


def progress(record: Any, catalog: ChecklistCatalog = CATALOG) -> ChecklistProgress:
    """Completion counts for the dashboard progress bar.

    Boolean items count only when exactly ``True``; other inputs count when
    they hold non-blank text.
    """
    by_category = {j: 0 for j in Jurisdiction.ordered()}
    completed = 0
    for item in catalog:
        if _is_filled(item, _value(record, item.field)):
            completed += 1
            by_category[item.category] += 1

    total = len(catalog)
    return ChecklistProgress(
        total=total,
        completed=completed,
        percentage=_percent(completed, total) if total else 0,
        by_category=by_category,
    )


def evaluate_application_gate(
    record: Any,
    jurisdictions: Iterable[Jurisdiction | str],
    catalog: ChecklistCatalog = CATALOG,
) -> ApplicationGate:
    return ApplicationGate(
        validation=validate_for_application(record, jurisdictions, catalog),
        critical_items_missing=critical_items_missing(record, catalog),
    )
