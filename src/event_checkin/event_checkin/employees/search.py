"""Typo-tolerant name lookup used at the check-in desk.

Each searchable field gets a distance in [0, 1] (0 = exact) from
``rapidfuzz``: the best partial alignment of the query inside the value, or
a whole-string comparison when the value is shorter than the query. A field
counts as matched when its distance is within the threshold; a record is
returned when any field matches. Records are ranked by the weighted product
of matched distances, lowest first.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from rapidfuzz import fuzz

from ..core.constants import SEARCH_MAX_RESULTS, SEARCH_MIN_QUERY_LENGTH, SEARCH_THRESHOLD, SEARCH_WEIGHTS
from .model import EmployeeRecord

# Stands in for a zero distance so exact hits still rank by weight.
_EPSILON = 1e-3


def field_distance(query: str, value: Optional[str]) -> Optional[float]:
    if not value:
        return None
    value = value.lower()
    # A fragment may sit anywhere inside a longer value, but a value shorter
    # than the query has to resemble the whole query.
    if len(query) <= len(value):
        return 1.0 - fuzz.partial_ratio(query, value) / 100.0
    return 1.0 - fuzz.ratio(query, value) / 100.0


def score_employee(employee: EmployeeRecord, query: str, *, threshold: float = SEARCH_THRESHOLD) -> Optional[float]:
    """Combined score for one record, or None when no field is close enough."""
    fields = {
        "first_name": employee.first_name,
        "last_name": employee.last_name,
        "email": employee.email,
    }

    total = 1.0
    matched = False
    for name, value in fields.items():
        distance = field_distance(query, value)
        if distance is None or distance > threshold:
            continue
        matched = True
        total *= max(distance, _EPSILON) ** SEARCH_WEIGHTS[name]

    return total if matched else None


def fuzzy_search(
    employees: Iterable[EmployeeRecord],
    query: str,
    *,
    threshold: float = SEARCH_THRESHOLD,
    limit: int = SEARCH_MAX_RESULTS,
    min_length: int = SEARCH_MIN_QUERY_LENGTH,
) -> Sequence[EmployeeRecord]:
    q = (query or "").strip().lower()
    if len(q) < min_length:
        return []

    scored: list[tuple[float, int, EmployeeRecord]] = []
    for position, employee in enumerate(employees):
        score = score_employee(employee, q, threshold=threshold)
        if score is not None:
            scored.append((score, position, employee))

    scored.sort(key=lambda item: (item[0], item[1]))
    return [employee for _, _, employee in scored[:limit]]
