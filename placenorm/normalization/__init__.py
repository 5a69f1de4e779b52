"""Normalization package.

Turns free-text place names into diacritic-free, lowercase keys for
exact-match lookup and indexing.

* ``replacements`` loads the character replacement table.
* ``classifier`` decides what happens to each input character.
* ``place_normalizer`` applies that policy to whole strings.
"""
from placenorm.normalization.place_normalizer import Normalizer, get_normalizer
from placenorm.normalization.replacements import ConfigurationError

__all__ = ["ConfigurationError", "Normalizer", "get_normalizer"]
