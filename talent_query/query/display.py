"""Display helpers: example queries, boolean-query detection, highlighting."""

import html
import re

from talent_query.core.config import DisplayConfig
from talent_query.query.fields import RECOGNIZED_LABELS, find_marker

EXAMPLE_QUERIES: tuple[str, ...] = (
    '+Keywords:(B2G OR Government OR "Public Sector") SAAS AND enterprise, '
    '+Job title:("Sales" OR "Business Development"), +Job title time scope:Current or past, '
    "+Location:(Riyadh, Saudi Arabia)",
    "+Keywords:(React OR Angular OR Vue) AND (TypeScript OR JavaScript), "
    '+Job title:("Frontend Developer" OR "UI Developer"), +Location:(Dublin, Ireland)',
    "+Keywords:(Python AND Django) OR (Node.js AND Express), "
    '+Job title:("Backend Developer" OR "Full Stack Developer"), +Job title time scope:Current',
    '+Keywords:(AWS OR Azure OR "Google Cloud") AND DevOps, '
    '+Job title:("DevOps Engineer" OR "Cloud Engineer"), +Location:(London, UK)',
    '+Keywords:Platform, +Company:("Integrant, Inc."), +Company time scope:Current or past, '
    "+Location:(Egypt)",
    '+Keywords:FinTech, +Job title:("UX Designer"), '
    "+Job occupation:((Product Designer) OR (User Experience Designer)), "
    '+Company:("Careem" OR "Jahez" OR "Deliveroo"), +Job title time scope:Current or past',
)

# Leftmost match wins, so operators inside a quoted phrase stay part of the phrase.
_HIGHLIGHT_RE = re.compile(
    r'(?P<field>\+[^:+,()"]+:)|(?P<phrase>"[^"]+")|(?P<operator>\b(?:OR|AND|NOT)\b)',
    re.ASCII,
)


def is_boolean_query(text: str) -> bool:
    """True if *text* contains any recognized ``+Label:`` marker."""
    return any(find_marker(text, label) is not None for label in RECOGNIZED_LABELS)


def format_for_display(query: str, config: DisplayConfig | None = None) -> str:
    """Return *query* as escaped HTML with field markers, phrases and operators wrapped.

    Only upper-case operators are highlighted.
    """
    config = config or DisplayConfig()
    classes = {
        "field": config.field_class,
        "phrase": config.phrase_class,
        "operator": config.operator_class,
    }
    parts: list[str] = []
    pos = 0
    for match in _HIGHLIGHT_RE.finditer(query):
        parts.append(html.escape(query[pos : match.start()]))
        kind = match.lastgroup or "operator"
        parts.append(
            f'<span class="{html.escape(classes[kind])}">{html.escape(match.group())}</span>'
        )
        pos = match.end()
    parts.append(html.escape(query[pos:]))
    return "".join(parts)
