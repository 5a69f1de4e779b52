"""Character replacement table loader.

The table maps a single source character to its replacement string and is
the only piece of configuration the place normalizer needs.  It is read
from a YAML document holding one key, ``characterReplacements``, whose value
is a comma-separated list of ``<char>:<replacement>`` entries::

    characterReplacements: "é:e,ø:o,ß:ss,':"

The first character of an entry is the key; everything after the fixed
two-character offset is the replacement.  Replacements are lowercased once
here so callers can emit them unchanged.

Any failure to read or parse the table raises ``ConfigurationError``.  A
normalizer cannot be built without its table, so callers should let the
error propagate and fail at startup.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

import yaml

logger = logging.getLogger(__name__)

REPLACEMENTS_KEY = "characterReplacements"

DEFAULT_REPLACEMENTS_PATH: Path = Path(__file__).resolve().parent.parent / "data" / "place_normalizer.yaml"

_ENTRY_SEPARATOR = ","
_KEY_DELIMITER = ":"
_VALID_REPLACEMENT_RE = re.compile(r"[a-z0-9]*")


class ConfigurationError(RuntimeError):
    """Raised when the character replacement table cannot be loaded."""


def _checked_replacement(char: str, replacement: str) -> str:
    replacement = replacement.lower()
    if not _VALID_REPLACEMENT_RE.fullmatch(replacement):
        raise ConfigurationError(
            f"Replacement for {char!r} must be lowercase ASCII letters or digits, "
            f"got {replacement!r}"
        )
    return replacement


def freeze_character_replacements(replacements: Mapping[str, str]) -> Mapping[str, str]:
    """Return a read-only, lowercased copy of *replacements*.

    Raises
    ------
    ConfigurationError
        If a key is not a single character or a replacement falls outside
        ``[a-z0-9]`` after lowercasing.
    """
    table: dict[str, str] = {}
    for char, replacement in replacements.items():
        if len(char) != 1:
            raise ConfigurationError(f"Replacement key must be one character, got {char!r}")
        table[char] = _checked_replacement(char, replacement)
    return MappingProxyType(table)


def parse_character_replacements(value: str) -> Mapping[str, str]:
    """Parse a comma-separated replacement list into a read-only mapping.

    Raises
    ------
    ConfigurationError
        If an entry is shorter than two characters, lacks the ``:``
        delimiter at offset 1, or has a replacement outside ``[a-z0-9]``
        after lowercasing.
    """
    table: dict[str, str] = {}
    for position, entry in enumerate(value.split(_ENTRY_SEPARATOR)):
        if not entry:
            continue
        if len(entry) < 2 or entry[1] != _KEY_DELIMITER:
            raise ConfigurationError(
                f"Malformed character replacement entry #{position}: {entry!r}"
            )

        char, replacement = entry[0], _checked_replacement(entry[0], entry[2:])
        if char in table:
            logger.warning(
                "Duplicate character replacement for %r (U+%04X); keeping last entry",
                char,
                ord(char),
            )
        table[char] = replacement

    return MappingProxyType(table)


def load_character_replacements(path: str | Path | None = None) -> Mapping[str, str]:
    """Load the replacement table from a YAML file.

    Parameters
    ----------
    path:
        YAML file to read.  Defaults to the table bundled with the package.

    Raises
    ------
    ConfigurationError
        If the file is missing or unreadable, is not valid YAML, does not
        hold a string ``characterReplacements`` value, or contains a
        malformed entry.
    """
    path = Path(path) if path is not None else DEFAULT_REPLACEMENTS_PATH

    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"{path}: cannot read character replacements: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"{path}: invalid YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: expected a YAML mapping, got {type(data).__name__}")

    value = data.get(REPLACEMENTS_KEY)
    if not isinstance(value, str):
        raise ConfigurationError(f"{path}: {REPLACEMENTS_KEY!r} must be a string")

    try:
        table = parse_character_replacements(value)
    except ConfigurationError as exc:
        raise ConfigurationError(f"{path}: {exc}") from exc

    logger.info("Loaded %d character replacements from %s", len(table), path)
    return table
