"""Place-name normalizer.

Flattens free-text place names into lowercase ``[a-z0-9]`` keys for
exact-match lookup, and splits them into comma-delimited levels of tokens
for indexing::

    >>> normalizer.normalize("Møn, Denmark")
    'mondenmark'
    >>> normalizer.tokenize("Saint-Louis, Missouri")
    [['saint', 'louis'], ['missouri']]

Both operations share the character policy in
``placenorm.normalization.classifier``.  Letters the replacement table does
not cover are dropped; some of them are reported through the
``on_untokenized`` callback, which defaults to a WARNING log record.

A ``Normalizer`` never changes after construction, so a single instance can
be shared by any number of threads.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from functools import lru_cache
from pathlib import Path

from placenorm.core.settings import get_settings
from placenorm.normalization.classifier import CharClass, classify
from placenorm.normalization.replacements import (
    freeze_character_replacements,
    load_character_replacements,
)

logger = logging.getLogger(__name__)

UntokenizedLetterCallback = Callable[[str, str], None]


def log_untokenized_letter(char: str, text: str) -> None:
    """Default diagnostics sink: log the dropped letter with its source text."""
    logger.warning("Untokenized letter: %s (%d) in %s", char, ord(char), text)


def _last_letter_index(text: str) -> int:
    """Return the index of the last letter in *text*, or -1.

    Any character above U+007F is assumed to be a letter.
    """
    for pos in range(len(text) - 1, -1, -1):
        c = text[pos]
        if "A" <= c <= "Z" or "a" <= c <= "z" or ord(c) > 127:
            return pos
    return -1


class Normalizer:
    """Normalize and tokenize place names with a fixed replacement table.

    The table is copied, lowercased and validated on construction; an
    invalid replacement raises ``ConfigurationError``.
    """

    def __init__(
        self,
        replacements: Mapping[str, str],
        on_untokenized: UntokenizedLetterCallback | None = None,
    ) -> None:
        # Copied so later changes to the caller's mapping cannot leak in.
        self._replacements = freeze_character_replacements(replacements)
        self._on_untokenized = on_untokenized or log_untokenized_letter

    @classmethod
    def from_file(
        cls,
        path: str | Path | None = None,
        on_untokenized: UntokenizedLetterCallback | None = None,
    ) -> Normalizer:
        """Build a normalizer from a replacement table file.

        Raises ``ConfigurationError`` if the table cannot be loaded.
        """
        return cls(load_character_replacements(path), on_untokenized=on_untokenized)

    @property
    def replacements(self) -> Mapping[str, str]:
        return self._replacements

    def _report(self, char: str, text: str) -> None:
        try:
            self._on_untokenized(char, text)
        except Exception:
            logger.debug("Untokenized-letter callback failed for U+%04X", ord(char), exc_info=True)

    def normalize(self, text: str, allow_wildcards: bool = False) -> str:
        """Remove diacritics, lowercase, and drop non-alphanumeric characters.

        Parameters
        ----------
        text:
            Place name to normalize.
        allow_wildcards:
            Keep ``?`` and ``*`` so the result can be used as a search pattern.

        Returns
        -------
        str
            The concatenation of every emitted character; ``""`` for empty
            input.
        """
        buf: list[str] = []
        for c in text:
            result = classify(c, self._replacements, allow_wildcards=allow_wildcards)
            if result.emits:
                buf.append(result.text)
            elif result.reportable:
                self._report(c, text)
        return "".join(buf)

    def tokenize(self, text: str) -> list[list[str]]:
        """Split *text* into comma-delimited levels of normalized tokens.

        Everything after the last letter is discarded first, so trailing
        punctuation and numbers (``"Paris, France 75001."``) never produce
        tokens.  Commas close the current level; any other non-alphanumeric
        character ends the current token.  Dropped letters end nothing.

        Returns
        -------
        list[list[str]]
            Levels in input order.  Never contains an empty level or an
            empty token.
        """
        levels: list[list[str]] = []
        level_words: list[str] = []
        buf: list[str] = []

        def flush_word() -> None:
            word = "".join(buf)
            buf.clear()
            if word:
                level_words.append(word)

        for c in text[: _last_letter_index(text) + 1]:
            result = classify(c, self._replacements, split_levels=True)
            if result.kind is CharClass.SEPARATOR:
                flush_word()
                if level_words:
                    levels.append(level_words)
                    level_words = []
            elif result.kind is CharClass.BOUNDARY:
                flush_word()
            elif result.emits:
                buf.append(result.text)
            elif result.reportable:
                self._report(c, text)

        flush_word()
        if level_words:
            levels.append(level_words)

        return levels


@lru_cache(maxsize=1)
def get_normalizer() -> Normalizer:
    """Return the process-wide normalizer built from settings."""
    return Normalizer.from_file(get_settings().character_replacements_path)
