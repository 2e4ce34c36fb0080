"""Query parser: raw boolean query string → ParsedQuery.

Total function. Malformed or unrecognized sections degrade to empty
extraction; nothing here raises for any input string.
"""

import logging

from talent_query.core.schemas import FieldOperators, ParsedQuery
from talent_query.query.fields import (
    COMPANY,
    COMPANY_TIME_SCOPE,
    JOB_OCCUPATION,
    JOB_TITLE,
    JOB_TITLE_TIME_SCOPE,
    KEYWORDS,
    LOCATION,
    extract_field,
    extract_time_scope,
)
from talent_query.query.terms import extract_terms

logger = logging.getLogger(__name__)

# Field label → ParsedQuery / FieldOperators attribute
LIST_FIELD_ATTRS: dict[str, str] = {
    KEYWORDS: "keywords",
    JOB_TITLE: "job_titles",
    JOB_OCCUPATION: "job_occupations",
    COMPANY: "companies",
    LOCATION: "locations",
}


def parse(raw_query: str, *, exclude_negated: bool = False) -> ParsedQuery:
    """Parse *raw_query* into a ParsedQuery.

    Every known label is extracted exactly once. Absent fields yield empty
    lists and ``both`` time scopes, so an empty string parses to an empty
    query.
    """
    terms: dict[str, list[str]] = {}
    operators: dict[str, list[str]] = {}

    for label, attr in LIST_FIELD_ATTRS.items():
        content = extract_field(raw_query, label)
        if content is None:
            terms[attr] = []
            operators[attr] = []
            continue
        extraction = extract_terms(content, exclude_negated=exclude_negated)
        terms[attr] = extraction.terms
        operators[attr] = extraction.operators
        logger.debug(
            "%s: %d terms, operators=%s", label, len(extraction.terms), extraction.operators,
        )

    return ParsedQuery(
        **terms,
        time_scope=extract_time_scope(raw_query, JOB_TITLE_TIME_SCOPE),
        company_time_scope=extract_time_scope(raw_query, COMPANY_TIME_SCOPE),
        operators=FieldOperators(**operators),
        raw_query=raw_query,
    )
