"""Per-character classification shared by ``normalize`` and ``tokenize``.

Rules are evaluated in order; the first match wins.

0. ``,`` when splitting levels (tokenize only)    -> SEPARATOR
1. character present in the replacement table     -> SUBSTITUTE
2. ``A``-``Z``                                    -> ASCII_UPPER
3. ``a``-``z`` or ``0``-``9``                     -> ASCII_LOWER_OR_DIGIT
4. ``?`` or ``*`` when wildcards are allowed      -> WILDCARD
5. any other Unicode letter                       -> IGNORED_LETTER
6. anything else                                  -> BOUNDARY

Only SUBSTITUTE, ASCII_UPPER, ASCII_LOWER_OR_DIGIT and WILDCARD carry
output text.  The comma can never be a table key, so rule 0 does not
shadow rule 1.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

LEVEL_SEPARATOR = ","
WILDCARDS: frozenset[str] = frozenset("?*")

# Letters from U+0250 upward belong to scripts with no useful Latin folding
# and are dropped silently.
_REPORTABLE_LIMIT = 0x0250

# Dropped silently even below U+0250:
#   170, 186  feminine/masculine ordinal indicators (Spanish 1ª, 2º)
#   439, 440  Ezh and reversed Ezh, seen only as noise in place data
_SILENT_LETTERS: frozenset[int] = frozenset({170, 186, 439, 440})


class CharClass(str, Enum):
    SEPARATOR = "separator"
    SUBSTITUTE = "substitute"
    ASCII_UPPER = "ascii_upper"
    ASCII_LOWER_OR_DIGIT = "ascii_lower_or_digit"
    WILDCARD = "wildcard"
    IGNORED_LETTER = "ignored_letter"
    BOUNDARY = "boundary"


@dataclass(frozen=True, slots=True)
class Classification:
    kind: CharClass
    text: str = ""
    reportable: bool = False

    @property
    def emits(self) -> bool:
        """True when the character contributes text to the current token."""
        return self.kind in _EMITTING


_EMITTING: frozenset[CharClass] = frozenset({
    CharClass.SUBSTITUTE,
    CharClass.ASCII_UPPER,
    CharClass.ASCII_LOWER_OR_DIGIT,
    CharClass.WILDCARD,
})

_SEPARATOR = Classification(CharClass.SEPARATOR)
_BOUNDARY = Classification(CharClass.BOUNDARY)
_REPORTED_LETTER = Classification(CharClass.IGNORED_LETTER, reportable=True)
_SILENT_LETTER = Classification(CharClass.IGNORED_LETTER)


def is_reportable_letter(char: str) -> bool:
    """Return True if dropping *char* should raise an untokenized-letter diagnostic."""
    cp = ord(char)
    return cp < _REPORTABLE_LIMIT and cp not in _SILENT_LETTERS


def classify(
    char: str,
    replacements: Mapping[str, str],
    *,
    allow_wildcards: bool = False,
    split_levels: bool = False,
) -> Classification:
    """Classify a single character.

    Parameters
    ----------
    char:
        One character of the input text.
    replacements:
        Character replacement table; values are already lowercase.
    allow_wildcards:
        Keep ``?`` and ``*`` (normalize only).
    split_levels:
        Treat ``,`` as a level separator (tokenize only).
    """
    if split_levels and char == LEVEL_SEPARATOR:
        return _SEPARATOR

    replacement = replacements.get(char)
    if replacement is not None:
        return Classification(CharClass.SUBSTITUTE, replacement)

    if "A" <= char <= "Z":
        return Classification(CharClass.ASCII_UPPER, char.lower())

    if "a" <= char <= "z" or "0" <= char <= "9":
        return Classification(CharClass.ASCII_LOWER_OR_DIGIT, char)

    if allow_wildcards and char in WILDCARDS:
        return Classification(CharClass.WILDCARD, char)

    if char.isalpha():
        return _REPORTED_LETTER if is_reportable_letter(char) else _SILENT_LETTER

    return _BOUNDARY
