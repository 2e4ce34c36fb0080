"""Query validator for live feedback while a query is typed.

Independent of the parser: works on partial input and reports every
applicable error at once. Errors are advisory; callers decide whether to
block submission on ``is_valid``.
"""

import logging
from collections import Counter
from collections.abc import Iterator

from talent_query.core.schemas import ValidationResult
from talent_query.query.fields import (
    LIST_FIELDS,
    TIME_SCOPE_FIELDS,
    canonical_label,
    extract_scalar,
    is_recognized_label,
    iter_clauses,
)
from talent_query.query.terms import extract_terms

logger = logging.getLogger(__name__)

UNMATCHED_PARENTHESES = "Unmatched parentheses in query"
UNMATCHED_QUOTES = "Unmatched quotes in query"


def validate(raw_query: str) -> ValidationResult:
    """Check parenthesis and quote balance and field labels."""
    errors: list[str] = []

    if raw_query.count("(") != raw_query.count(")"):
        errors.append(UNMATCHED_PARENTHESES)

    if raw_query.count('"') % 2 != 0:
        errors.append(UNMATCHED_QUOTES)

    labels = list(iter_field_labels(raw_query))
    for label in labels:
        if not is_recognized_label(label):
            errors.append(f"Unknown field: {label}")

    warnings = _collect_warnings(raw_query, labels)
    if errors:
        logger.debug("Query invalid: %s", errors)
    return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)


def iter_field_labels(raw_query: str) -> Iterator[str]:
    """Yield the trimmed text between each ``+`` and the following ``:``.

    Scanning resumes after each colon, so a label may span anything but a
    colon (``+ stuff, +Job title:`` yields one label).
    """
    pos = 0
    while True:
        plus = raw_query.find("+", pos)
        if plus == -1:
            return
        colon = raw_query.find(":", plus + 1)
        if colon == -1:
            return
        if colon == plus + 1:
            pos = plus + 1
            continue
        yield raw_query[plus + 1 : colon].strip()
        pos = colon + 1


def _collect_warnings(raw_query: str, labels: list[str]) -> list[str]:
    warnings: list[str] = []

    counts = Counter(c for c in (canonical_label(label) for label in labels) if c)
    for label, count in counts.items():
        if count > 1:
            warnings.append(f"Duplicate field: {label} (only the first complete clause is used)")

    for label in LIST_FIELDS:
        if any(
            content is not None and not extract_terms(content).terms
            for content in iter_clauses(raw_query, label)
        ):
            warnings.append(f"Empty value for field: {label}")

    for label in TIME_SCOPE_FIELDS:
        value = extract_scalar(raw_query, label)
        if value is None:
            continue
        if "current" not in value and "past" not in value:
            warnings.append(f"Unrecognized time scope for {label}: {value}")

    return warnings
