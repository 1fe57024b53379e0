from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from advisor.main import app
from advisor.models.catalog import Catalog, Course
from advisor.services.store import CatalogStore, get_store

SAMPLE_CATALOG = Path(__file__).resolve().parents[1] / "data" / "courses.csv"


def make_catalog(*entries: tuple) -> Catalog:
    """Build a catalog from ``(code, title, [prereqs])`` tuples."""
    courses = []
    for entry in entries:
        code, title = entry[0], entry[1]
        prereqs = tuple(entry[2]) if len(entry) > 2 else ()
        courses.append(Course(code=code, title=title, prereqs=prereqs))
    return Catalog.from_courses(courses)


@pytest.fixture
def sample_path() -> Path:
    return SAMPLE_CATALOG


@pytest.fixture
def store() -> CatalogStore:
    return CatalogStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
