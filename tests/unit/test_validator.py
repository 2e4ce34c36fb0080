"""Tests for the query validator."""

from talent_query.query.validator import (
    UNMATCHED_PARENTHESES,
    UNMATCHED_QUOTES,
    iter_field_labels,
    validate,
)

SAMPLE = (
    '+Keywords:(B2G OR Government OR "Public Sector") SAAS AND enterprise, '
    '+Job title:("Sales" OR "Business Development"), '
    "+Job title time scope:Current or past, +Location:(Riyadh, Saudi Arabia)"
)


class TestValidateErrors:
    def test_valid_sample(self) -> None:
        result = validate(SAMPLE)
        assert result.is_valid
        assert result.errors == []

    def test_unmatched_parentheses(self) -> None:
        result = validate("+Keywords:(A OR B")
        assert not result.is_valid
        assert UNMATCHED_PARENTHESES in result.errors

    def test_extra_close_paren(self) -> None:
        assert validate("+Keywords:(A))").errors == [UNMATCHED_PARENTHESES]

    def test_unmatched_quotes(self) -> None:
        result = validate('+Job title:("Sales)')
        assert result.errors == [UNMATCHED_QUOTES]

    def test_unknown_field(self) -> None:
        result = validate("+Skills:(Python)")
        assert not result.is_valid
        assert any("Skills" in e for e in result.errors)
        assert result.errors == ["Unknown field: Skills"]

    def test_errors_accumulate_in_order(self) -> None:
        result = validate('+Skills:("Python')
        assert result.errors == [
            UNMATCHED_PARENTHESES,
            UNMATCHED_QUOTES,
            "Unknown field: Skills",
        ]

    def test_each_unknown_field_reported(self) -> None:
        result = validate("+Skills:(a), +Tools:(b)")
        assert result.errors == ["Unknown field: Skills", "Unknown field: Tools"]

    def test_label_matched_by_containment(self) -> None:
        assert validate("+Current location:(Paris)").is_valid

    def test_label_case_insensitive(self) -> None:
        assert validate("+KEYWORDS:(python)").is_valid

    def test_label_trimmed(self) -> None:
        assert validate("+ Skills :(x)").errors == ["Unknown field: Skills"]

    def test_plain_text_valid(self) -> None:
        assert validate("hello world").is_valid

    def test_partial_input(self) -> None:
        assert validate("+Keywo").is_valid
        assert not validate("+Keywords:(Py").is_valid

    def test_empty_label_ignored(self) -> None:
        assert validate("+:(x)").is_valid


class TestIterFieldLabels:
    def test_labels_in_order(self) -> None:
        assert list(iter_field_labels(SAMPLE)) == [
            "Keywords", "Job title", "Job title time scope", "Location",
        ]

    def test_label_spans_to_next_colon(self) -> None:
        assert list(iter_field_labels("+ stuff, +Job title:(x)")) == ["stuff, +Job title"]

    def test_no_colon(self) -> None:
        assert list(iter_field_labels("C++ developer")) == []


class TestValidateWarnings:
    def test_no_warnings_for_sample(self) -> None:
        assert validate(SAMPLE).warnings == []

    def test_duplicate_field(self) -> None:
        result = validate("+Location:(Paris), +location:(Rome)")
        assert result.is_valid
        assert result.warnings == [
            "Duplicate field: Location (only the first complete clause is used)",
        ]

    def test_empty_group(self) -> None:
        result = validate("+Keywords:()")
        assert result.is_valid
        assert result.warnings == ["Empty value for field: Keywords"]

    def test_operators_only_group(self) -> None:
        assert validate("+Job title:(AND AND)").warnings == ["Empty value for field: Job title"]

    def test_empty_scalar(self) -> None:
        result = validate("+Location:, +Location:(Paris)")
        assert result.is_valid
        assert result.warnings == [
            "Duplicate field: Location (only the first complete clause is used)",
            "Empty value for field: Location",
        ]

    def test_unrecognized_time_scope(self) -> None:
        result = validate("+Job title time scope:Sometimes")
        assert result.is_valid
        assert result.warnings == [
            "Unrecognized time scope for Job title time scope: sometimes",
        ]

    def test_fresh_result_per_call(self) -> None:
        first = validate("+Skills:(x)")
        second = validate("+Skills:(x)")
        assert first == second
        assert first is not second
