import pytest
from fastapi.testclient import TestClient

from phonecheck.metadata.region import RegionMetadata


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch) -> TestClient:
    monkeypatch.delenv("DEFAULT_REGION", raising=False)

    from phonecheck.core.settings import get_settings
    from phonecheck.metadata.store import get_metadata_store

    get_settings.cache_clear()
    get_metadata_store.cache_clear()

    from phonecheck.main import app

    with TestClient(app) as test_client:
        yield test_client

    get_settings.cache_clear()
    get_metadata_store.cache_clear()


@pytest.fixture
def store():
    from phonecheck.metadata.store import get_metadata_store

    return get_metadata_store()


def _make_region(region_code: str = "ZZ", calling_code: int = 999, **overrides) -> RegionMetadata:
    """Small region with sane defaults for store and formatter tests."""
    fields = dict(
        region_code=region_code,
        country_calling_code=calling_code,
        general_pattern=r"[1-9]\d{5}",
        possible_lengths=frozenset({6}),
    )
    fields.update(overrides)
    return RegionMetadata(**fields)


@pytest.fixture
def make_region():
    return _make_region
