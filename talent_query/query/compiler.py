"""Filter compiler: ParsedQuery → SearchFilters (backend filter record).

Mapping:
  keywords        → skillsKeywords.items
  job_titles      → job.titles
  job_occupations → job.titles (appended, deduplicated)
  companies       → company.names
  locations       → location.currentLocations

Time scopes have no effect: the search backend has no time-scope dimension
yet, so ``general`` is never populated. Empty dimensions are omitted.
"""

import logging

from talent_query.core.config import Settings
from talent_query.core.schemas import (
    CompanyFilter,
    CompiledQuery,
    JobFilter,
    LocationFilter,
    ParsedQuery,
    SearchFilters,
    SkillsKeywordsFilter,
    TimeScope,
)
from talent_query.query.parser import parse
from talent_query.query.validator import validate

logger = logging.getLogger(__name__)


def compile_filters(parsed: ParsedQuery) -> SearchFilters:
    """Build a new SearchFilters record from *parsed*. Never mutates it."""
    sections: dict[str, object] = {}

    if parsed.keywords:
        sections["skills_keywords"] = SkillsKeywordsFilter(items=list(parsed.keywords))

    titles = list(dict.fromkeys([*parsed.job_titles, *parsed.job_occupations]))
    if titles:
        sections["job"] = JobFilter(titles=titles)

    if parsed.companies:
        sections["company"] = CompanyFilter(names=list(parsed.companies))

    if parsed.locations:
        sections["location"] = LocationFilter(current_locations=list(parsed.locations))

    # TODO: encode time scopes into `general` once the search API accepts them.
    for name, scope in (
        ("job title", parsed.time_scope),
        ("company", parsed.company_time_scope),
    ):
        if scope is not TimeScope.BOTH:
            logger.debug(
                "Ignoring %s time scope '%s': not supported by search filters",
                name, scope.value,
            )

    return SearchFilters(**sections)


def compile_query(raw_query: str, settings: Settings | None = None) -> CompiledQuery:
    """Validate, parse and compile *raw_query* in one call.

    Does not gate on validity: callers check ``result.validation.is_valid``.
    """
    settings = settings or Settings()
    validation = validate(raw_query)
    parsed = parse(raw_query, exclude_negated=settings.parser.exclude_negated_terms)
    filters = compile_filters(parsed)
    logger.info(
        "Compiled query: %d active filter sections, valid=%s",
        len(filters.to_payload()), validation.is_valid,
    )
    return CompiledQuery(validation=validation, parsed=parsed, filters=filters)
