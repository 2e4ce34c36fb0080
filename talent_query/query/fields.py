"""Field extraction: locate ``+Label:`` clauses and capture their raw text.

Rules:
  - The first complete clause wins; labels match case-insensitively. A
    clause with an unclosed group or an empty value is skipped in favour of
    a later clause for the same label.
  - ``+Label:(...)`` returns the group content with balanced nesting.
  - Keywords also takes the unparenthesised text trailing its group, up to
    the next field marker.
  - A list field without parentheses is read as a scalar up to the next
    comma or field marker (``+Keywords:Platform`` gives ``Platform``). The
    web client ignores such clauses and only reads parenthesised groups.
  - Time-scope fields are scalars read up to the next comma or ``+``.
"""

import logging
import re
from collections.abc import Iterator
from functools import lru_cache

from talent_query.core.schemas import TimeScope
from talent_query.query.lexer import find_group_end, find_next_marker

logger = logging.getLogger(__name__)

KEYWORDS = "Keywords"
JOB_TITLE = "Job title"
JOB_OCCUPATION = "Job occupation"
COMPANY = "Company"
LOCATION = "Location"
JOB_TITLE_TIME_SCOPE = "Job title time scope"
COMPANY_TIME_SCOPE = "Company time scope"

LIST_FIELDS: tuple[str, ...] = (KEYWORDS, JOB_TITLE, JOB_OCCUPATION, COMPANY, LOCATION)
TIME_SCOPE_FIELDS: tuple[str, ...] = (JOB_TITLE_TIME_SCOPE, COMPANY_TIME_SCOPE)
RECOGNIZED_LABELS: tuple[str, ...] = LIST_FIELDS + TIME_SCOPE_FIELDS


@lru_cache(maxsize=32)
def _marker_pattern(label: str) -> re.Pattern[str]:
    return re.compile(r"\+" + re.escape(label) + r":\s*", re.IGNORECASE)


def find_marker(raw_query: str, label: str) -> int | None:
    """Return the index just past ``+label:`` and any whitespace, or None."""
    match = _marker_pattern(label).search(raw_query)
    return match.end() if match else None


def is_recognized_label(label: str) -> bool:
    """True if *label* contains one of the recognized labels (case-insensitive)."""
    lowered = label.lower()
    return any(valid.lower() in lowered for valid in RECOGNIZED_LABELS)


def canonical_label(label: str) -> str | None:
    """Return the recognized label equal to *label* ignoring case, else None."""
    lowered = label.strip().lower()
    for valid in RECOGNIZED_LABELS:
        if valid.lower() == lowered:
            return valid
    return None


def iter_clauses(raw_query: str, label: str) -> Iterator[str | None]:
    """Yield the raw content of every *label* clause, in order.

    Unclosed groups yield None; empty groups and empty scalars yield "".
    """
    for match in _marker_pattern(label).finditer(raw_query):
        start = match.end()
        if start < len(raw_query) and raw_query[start] == "(":
            end = find_group_end(raw_query, start)
            if end is None:
                logger.debug("Field '%s' has an unclosed group at %d", label, start)
                yield None
                continue
            content = raw_query[start + 1 : end]
            if label.lower() == KEYWORDS.lower():
                trailing = raw_query[end + 1 : find_next_marker(raw_query, end + 1)].strip()
                if trailing:
                    content = f"{content} {trailing}"
            yield content
            continue

        stop = min(_find_or_end(raw_query, ",", start), find_next_marker(raw_query, start))
        yield raw_query[start:stop].strip()


def extract_field(raw_query: str, label: str) -> str | None:
    """Return the raw, unparsed content of the first complete *label* clause."""
    for content in iter_clauses(raw_query, label):
        if content is not None and content.strip():
            return content
    return None


def extract_scalar(raw_query: str, label: str) -> str | None:
    """Return the first non-empty scalar after *label*, up to ``,`` or ``+``.

    The value is trimmed and lower-cased.
    """
    for match in _marker_pattern(label).finditer(raw_query):
        start = match.end()
        stop = min(_find_or_end(raw_query, ",", start), _find_or_end(raw_query, "+", start))
        value = raw_query[start:stop].strip().lower()
        if value:
            return value
    return None


def resolve_time_scope(value: str | None) -> TimeScope:
    """Map free text such as "Current or past" onto a TimeScope."""
    if not value:
        return TimeScope.BOTH
    value = value.lower()
    has_current = "current" in value
    has_past = "past" in value
    if has_current and not has_past:
        return TimeScope.CURRENT
    if has_past and not has_current:
        return TimeScope.PAST
    return TimeScope.BOTH


def extract_time_scope(raw_query: str, label: str) -> TimeScope:
    """Return the TimeScope of a time-scope clause, ``both`` when absent."""
    return resolve_time_scope(extract_scalar(raw_query, label))


def _find_or_end(text: str, needle: str, start: int) -> int:
    index = text.find(needle, start)
    return len(text) if index == -1 else index
