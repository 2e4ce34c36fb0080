"""Term extraction for a single field's content.

Operators are recorded, never evaluated: every extracted term is treated as
present (implicitly OR'd) whatever AND / OR / NOT text surrounds it.
Inner parentheses and commas are punctuation only.
"""

import logging
from typing import NamedTuple

from talent_query.query.lexer import Token, TokenKind, scan_operators, tokenize

logger = logging.getLogger(__name__)


class TermExtraction(NamedTuple):
    terms: list[str]
    operators: list[str]


def extract_terms(content: str, *, exclude_negated: bool = False) -> TermExtraction:
    """Extract unique terms and the operator list from one field's content.

    Args:
        content: Raw field text, e.g. ``B2G OR "Public Sector"``.
        exclude_negated: Drop the term (or group) directly after an unquoted
            NOT, unless the same term also appears un-negated.

    Returns:
        TermExtraction with terms in first-seen order and operators
        upper-cased in source order (quoted text included).
    """
    marked = _mark_negation(tokenize(content))
    if exclude_negated:
        kept = [term for term, negated in marked if not negated]
        dropped = {term for term, negated in marked if negated} - set(kept)
        if dropped:
            logger.debug("Excluding negated terms: %s", sorted(dropped))
    else:
        kept = [term for term, _ in marked]

    terms = list(dict.fromkeys(kept))
    return TermExtraction(terms=terms, operators=scan_operators(content))


def _mark_negation(tokens: list[Token]) -> list[tuple[str, bool]]:
    """Pair every non-empty term with whether a NOT applies to it."""
    marked: list[tuple[str, bool]] = []
    depth = 0
    negated_depth: int | None = None
    pending_not = False

    for token in tokens:
        if token.kind is TokenKind.OPERATOR:
            pending_not = token.text == "NOT"
        elif token.kind is TokenKind.LPAREN:
            depth += 1
            if pending_not and negated_depth is None:
                negated_depth = depth
            pending_not = False
        elif token.kind is TokenKind.RPAREN:
            if negated_depth is not None and depth <= negated_depth:
                negated_depth = None
            depth = max(depth - 1, 0)
            pending_not = False
        elif token.kind is TokenKind.COMMA:
            pending_not = False
        else:
            term = token.text.strip()
            if term:
                marked.append((term, pending_not or negated_depth is not None))
            pending_not = False
    return marked
