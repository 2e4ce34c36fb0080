"""Character scanner for field content and raw queries.

Pure functions, no regex-driven splitting of terms:
  - tokenize() turns one field's content into WORD / QUOTED / OPERATOR /
    LPAREN / RPAREN / COMMA tokens.
  - find_group_end() matches a field's opening parenthesis, ignoring
    parentheses inside double quotes.
  - scan_operators() reports standalone OR / AND / NOT words anywhere in the
    text, quoted or not, for display metadata.
"""

import logging
import re
from enum import Enum
from typing import NamedTuple

logger = logging.getLogger(__name__)

OPERATORS = frozenset({"OR", "AND", "NOT"})

# Same boundary rules as a JS /\b(OR|AND|NOT)\b/gi scan (ASCII word chars).
_OPERATOR_RE = re.compile(r"\b(OR|AND|NOT)\b", re.IGNORECASE | re.ASCII)

# Next "+Label:" marker, used to bound unparenthesised text.
_MARKER_RE = re.compile(r'\+[^:+,()"]+:')


class TokenKind(str, Enum):
    WORD = "word"
    QUOTED = "quoted"
    OPERATOR = "operator"
    LPAREN = "lparen"
    RPAREN = "rparen"
    COMMA = "comma"


class Token(NamedTuple):
    kind: TokenKind
    text: str
    position: int


_PUNCTUATION: dict[str, TokenKind] = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ",": TokenKind.COMMA,
}

_WORD_BREAKS = frozenset('"(),')


def tokenize(text: str) -> list[Token]:
    """Split field content into tokens.

    Quoted phrases become a single QUOTED token with inner whitespace kept,
    so an operator-like word inside quotes is never an OPERATOR. Operator
    text is upper-cased. An unterminated quote is dropped and scanning
    continues after it.
    """
    tokens: list[Token] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch.isspace():
            i += 1
            continue

        kind = _PUNCTUATION.get(ch)
        if kind is not None:
            tokens.append(Token(kind, ch, i))
            i += 1
            continue

        if ch == '"':
            end = text.find('"', i + 1)
            if end == -1:
                logger.debug("Unterminated quote at position %d, ignoring it", i)
                i += 1
                continue
            tokens.append(Token(TokenKind.QUOTED, text[i + 1 : end], i))
            i = end + 1
            continue

        start = i
        while i < n and not text[i].isspace() and text[i] not in _WORD_BREAKS:
            i += 1
        word = text[start:i]
        if word.upper() in OPERATORS:
            tokens.append(Token(TokenKind.OPERATOR, word.upper(), start))
        else:
            tokens.append(Token(TokenKind.WORD, word, start))
    return tokens


def find_group_end(text: str, open_index: int) -> int | None:
    """Return the index of the ``)`` closing the ``(`` at *open_index*.

    Nested groups are balanced; parentheses inside a closed pair of double
    quotes do not count. Returns None when the group is never closed.
    """
    depth = 0
    i = open_index
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == '"':
            close = text.find('"', i + 1)
            if close != -1:
                i = close + 1
                continue
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return None


def find_next_marker(text: str, start: int = 0) -> int:
    """Return the index of the next ``+Label:`` marker, or ``len(text)``."""
    match = _MARKER_RE.search(text, start)
    return match.start() if match else len(text)


def scan_operators(text: str) -> list[str]:
    """Return every standalone OR/AND/NOT in *text*, upper-cased, in order."""
    return [m.group(1).upper() for m in _OPERATOR_RE.finditer(text)]
