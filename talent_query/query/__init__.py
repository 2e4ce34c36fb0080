"""Boolean search query language.

Usage:
    from talent_query.query import compile_filters, parse, validate

    result = validate(raw)
    if result.is_valid:
        payload = compile_filters(parse(raw)).to_payload()
"""

from talent_query.query.compiler import compile_filters, compile_query
from talent_query.query.display import EXAMPLE_QUERIES, format_for_display, is_boolean_query
from talent_query.query.parser import parse
from talent_query.query.validator import validate

__all__ = [
    "EXAMPLE_QUERIES",
    "compile_filters",
    "compile_query",
    "format_for_display",
    "is_boolean_query",
    "parse",
    "validate",
]
