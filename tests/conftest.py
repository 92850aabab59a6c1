import os

# Settings are cached on first use; pin the in-memory backend before anything reads them
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["REVIEW_SOURCE"] = "memory"
os.environ["REDIS_URL"] = ""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from shopreviews.api import deps
from shopreviews.core.config import get_settings
from shopreviews.domain.repositories.catalog_store import InMemoryCatalogStore
from shopreviews.domain.repositories.review_store import InMemoryReviewStore
from shopreviews.domain.sources.memory_source import MemoryReviewSource

get_settings.cache_clear()


class TickingClock:
    """Each call is one second later than the previous one."""

    def __init__(self, start=datetime(2025, 10, 1, 12, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self):
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture()
def review_store():
    return InMemoryReviewStore(clock=TickingClock())


@pytest.fixture()
def catalog_store():
    return InMemoryCatalogStore()


@pytest.fixture()
def review_source():
    return MemoryReviewSource()


@pytest.fixture()
def make_review():
    def _make(**overrides):
        data = {
            "product_id": 1,
            "source": "Amazon",
            "author": "Sarah Johnson",
            "rating": 5,
            "title": "Excellent quality!",
            "body": "Fast charging and solid build quality.",
        }
        data.update(overrides)
        return data
    return _make


@pytest.fixture()
def client(review_store, catalog_store, review_source):
    from shopreviews.main import create_app

    app = create_app()
    app.dependency_overrides[deps.review_store] = lambda: review_store
    app.dependency_overrides[deps.catalog_store] = lambda: catalog_store
    app.dependency_overrides[deps.review_source] = lambda: review_source
    app.dependency_overrides[deps.redis_dep] = lambda: None
    return TestClient(app)
