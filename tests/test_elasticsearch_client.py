"""
CourseStore tests - AsyncElasticsearch calls and response normalization (client mocked).
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from course_search.search.elasticsearch_client import (
    CourseStore,
    courses_index_body,
    courses_index_mappings,
    ensure_courses_index,
)


def _mock_es() -> MagicMock:
    es = MagicMock()
    es.search = AsyncMock()
    es.bulk = AsyncMock()
    es.indices.exists = AsyncMock()
    es.indices.create = AsyncMock()
    return es


def test_mapping_types():
    props = courses_index_mappings()["properties"]
    assert props["suggest"] == {"type": "completion"}
    assert props["title"]["fields"]["keyword"]["type"] == "keyword"
    for field in ("category", "type", "gradeRange"):
        assert props[field]["type"] == "keyword"
    assert props["nextSessionDate"]["type"] == "date"
    assert courses_index_body()["settings"]["index"]["number_of_replicas"] == 0


@pytest.mark.asyncio
async def test_search_maps_hits_and_total():
    es = _mock_es()
    es.search.return_value = {
        "hits": {
            "total": {"value": 7, "relation": "eq"},
            "hits": [{"_id": "a", "_source": {"title": "A"}}, {"_id": "b"}],
        }
    }
    result = await CourseStore(es).search("courses", {"query": {"match_all": {}}, "from": 10, "size": 5, "_source": ["title"]})
    assert result == {"hits": [{"id": "a", "source": {"title": "A"}}, {"id": "b", "source": None}], "total": 7}
    kwargs = es.search.await_args.kwargs
    assert kwargs["index"] == "courses"
    assert kwargs["from_"] == 10
    assert kwargs["source"] == ["title"]


@pytest.mark.asyncio
async def test_search_without_total():
    es = _mock_es()
    es.search.return_value = {"hits": {"hits": []}}
    assert (await CourseStore(es).search("courses", {}))["total"] is None


@pytest.mark.asyncio
async def test_suggest_flattens_options():
    es = _mock_es()
    es.search.return_value = {
        "suggest": {"course-suggest": [{"text": "ma", "options": [{"text": "Math Explorers"}, {"text": "Math Wizards"}]}]}
    }
    options = await CourseStore(es).suggest("courses", "suggest", "ma", 10)
    assert options == [{"text": "Math Explorers"}, {"text": "Math Wizards"}]
    completion = es.search.await_args.kwargs["suggest"]["course-suggest"]["completion"]
    assert completion == {"field": "suggest", "skip_duplicates": True, "size": 10}


@pytest.mark.asyncio
async def test_bulk_write_reports_errors():
    es = _mock_es()
    es.bulk.return_value = {"errors": True, "items": [{"index": {"_id": "a", "error": {"type": "x"}}}]}
    result = await CourseStore(es).bulk_write("courses", [{"index": {"_id": "a"}}, {"id": "a"}])
    assert result["errors"] is True
    assert es.bulk.await_args.kwargs["refresh"] is True


@pytest.mark.asyncio
async def test_ensure_index_creates_once():
    es = _mock_es()
    es.indices.exists.return_value = False
    assert await ensure_courses_index(CourseStore(es), "courses") is True
    es.indices.create.assert_awaited_once()
    assert es.indices.create.await_args.kwargs["mappings"] == courses_index_mappings()

    es.indices.exists.return_value = True
    assert await ensure_courses_index(CourseStore(es), "courses") is False
    es.indices.create.assert_awaited_once()
