from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from placenorm.core.settings import get_settings
from placenorm.normalization.place_normalizer import Normalizer, get_normalizer
from placenorm.normalization.replacements import load_character_replacements


@pytest.fixture(autouse=True)
def _clear_cached_singletons():
    get_settings.cache_clear()
    get_normalizer.cache_clear()
    yield
    get_settings.cache_clear()
    get_normalizer.cache_clear()


@pytest.fixture(scope="session")
def bundled_replacements():
    return load_character_replacements()


@pytest.fixture
def untokenized() -> list[tuple[str, str]]:
    """Collects (char, text) pairs passed to the diagnostics callback."""
    return []


@pytest.fixture
def normalizer(bundled_replacements, untokenized) -> Normalizer:
    return Normalizer(
        bundled_replacements,
        on_untokenized=lambda char, text: untokenized.append((char, text)),
    )


@pytest.fixture
def client() -> TestClient:
    from placenorm.main import app

    with TestClient(app) as test_client:
        yield test_client
