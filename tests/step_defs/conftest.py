"""
Shared BDD steps (pytest-bdd): fake store setup, HTTP calls, response checks.
Steps are sync; TestClient drives the ASGI app without running the lifespan.
"""

import pytest
from fastapi.testclient import TestClient
from pytest_bdd import given, parsers, then, when

from course_search.config import get_settings
from course_search.core.dependencies import get_course_store
from course_search.main import app
from course_search.schemas.course import CourseDocument
from course_search.search.elasticsearch_client import courses_index_body
from tests.fakes import SAMPLE_COURSES, FakeDocumentStore

INDEX = get_settings().courses_index


@pytest.fixture
def bdd_store() -> FakeDocumentStore:
    return FakeDocumentStore()


@pytest.fixture
def api(bdd_store: FakeDocumentStore):
    async def override_get_course_store():
        return bdd_store

    app.dependency_overrides[get_course_store] = override_get_course_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def response():
    """Store last response for then steps."""
    return {}


def _create_index(store: FakeDocumentStore) -> None:
    store.indices[INDEX] = courses_index_body()
    store.docs.setdefault(INDEX, {})


@given("the courses index exists")
def courses_index_exists(bdd_store: FakeDocumentStore):
    _create_index(bdd_store)


@given("the catalog contains the sample courses")
def catalog_contains_sample_courses(bdd_store: FakeDocumentStore):
    _create_index(bdd_store)
    for course in SAMPLE_COURSES:
        bdd_store.docs[INDEX][course.id] = CourseDocument.from_course(course).to_source()


@when(parsers.parse('I request "{method}" "{path}"'))
def request_path(api: TestClient, response: dict, method: str, path: str):
    r = api.request(method, path)
    response["status"] = r.status_code
    response["body"] = r.json()


@then(parsers.parse("the response status should be {code:d}"))
def status_is(response: dict, code: int):
    assert response["status"] == code


@then(parsers.parse('the response body should have "{key}" equals "{value}"'))
def body_field_equals(response: dict, key: str, value: str):
    assert response["body"].get(key) == value


@then(parsers.parse("the response total should be {total:d}"))
def total_is(response: dict, total: int):
    assert response["body"]["total"] == total


def _split(names: str) -> list[str]:
    return [n.strip() for n in names.split(",") if n.strip()]


@then(parsers.parse('the response titles should be "{titles}"'))
def titles_are(response: dict, titles: str):
    assert [c["title"] for c in response["body"]["courses"]] == _split(titles)


@then(parsers.parse('the suggestions should be "{titles}"'))
def suggestions_are(response: dict, titles: str):
    assert sorted(response["body"]) == sorted(_split(titles))


@then("there should be no suggestions")
def no_suggestions(response: dict):
    assert response["body"] == []
