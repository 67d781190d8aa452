"""
Pytest fixtures - in-memory document store, sample catalog, API client.
Challenge: Isolated tests; no real Elasticsearch.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from course_search.config import get_settings
from course_search.core.dependencies import get_course_store
from course_search.main import app
from course_search.services.indexing_service import CourseIndexer
from tests.fakes import SAMPLE_COURSES, FakeDocumentStore

settings = get_settings()


@pytest.fixture
def store() -> FakeDocumentStore:
    return FakeDocumentStore()


@pytest_asyncio.fixture
async def seeded_store(store: FakeDocumentStore) -> FakeDocumentStore:
    """Fake store with the courses index created and the three sample courses indexed."""
    await store.create_index(settings.courses_index, {})
    assert await CourseIndexer(store, settings.courses_index).bulk_index(SAMPLE_COURSES)
    store.calls.clear()
    return store


@pytest_asyncio.fixture
async def client(seeded_store: FakeDocumentStore):
    async def override_get_course_store():
        return seeded_store

    app.dependency_overrides[get_course_store] = override_get_course_store
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
