"""Core data models for the boolean search query language."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TimeScope(str, Enum):
    """Whether a title/company match must be the current one, a past one, or either."""

    CURRENT = "current"
    PAST = "past"
    BOTH = "both"


class FieldOperators(BaseModel):
    """Boolean operator tokens found in each list field, in source order.

    Metadata only: the compiler never evaluates them.
    """

    model_config = ConfigDict(frozen=True)

    keywords: list[str] = Field(default_factory=list)
    job_titles: list[str] = Field(default_factory=list)
    job_occupations: list[str] = Field(default_factory=list)
    companies: list[str] = Field(default_factory=list)
    locations: list[str] = Field(default_factory=list)


class ParsedQuery(BaseModel):
    """Structured form of a raw boolean query.

    Every list holds unique, non-empty terms. Terms are implicitly OR'd
    regardless of the operators recorded in ``operators``.
    """

    model_config = ConfigDict(frozen=True)

    keywords: list[str] = Field(default_factory=list)
    job_titles: list[str] = Field(default_factory=list)
    job_occupations: list[str] = Field(default_factory=list)
    companies: list[str] = Field(default_factory=list)
    locations: list[str] = Field(default_factory=list)
    time_scope: TimeScope = TimeScope.BOTH
    company_time_scope: TimeScope = TimeScope.BOTH
    operators: FieldOperators = Field(default_factory=FieldOperators)
    raw_query: str = ""

    @property
    def is_empty(self) -> bool:
        """True when no list field extracted anything."""
        return not (
            self.keywords
            or self.job_titles
            or self.job_occupations
            or self.companies
            or self.locations
        )


class ValidationResult(BaseModel):
    """Outcome of validating a raw query. Warnings never affect ``is_valid``."""

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


# --- Search filter record (backend contract, camelCase on the wire) ---


class _FilterSection(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class SkillsKeywordsFilter(_FilterSection):
    items: list[str]


class JobFilter(_FilterSection):
    titles: list[str]


class CompanyFilter(_FilterSection):
    names: list[str]


class LocationFilter(_FilterSection):
    current_locations: list[str] = Field(alias="currentLocations")


class GeneralFilter(_FilterSection):
    """Reserved for time-scope data once the search backend supports it."""


class SearchFilters(_FilterSection):
    """Candidate search filter record handed to the search backend.

    Sparse: a section is present only when its filter is active.
    """

    skills_keywords: SkillsKeywordsFilter | None = Field(default=None, alias="skillsKeywords")
    job: JobFilter | None = None
    company: CompanyFilter | None = None
    location: LocationFilter | None = None
    general: GeneralFilter | None = None

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready dict in the backend's key format."""
        return self.model_dump(by_alias=True, exclude_none=True)


class CompiledQuery(BaseModel):
    """Validation, parse and compilation results for one raw query."""

    model_config = ConfigDict(frozen=True)

    validation: ValidationResult
    parsed: ParsedQuery
    filters: SearchFilters
