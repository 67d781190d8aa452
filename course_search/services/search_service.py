"""
Course search service - runs the built query and shapes hits into a page.
Challenge: Keep the endpoint usable when Elasticsearch is down or returns junk.
Design: Depends on the DocumentStore abstraction; easy to test with a fake.
"""

import logging

from pydantic import ValidationError

from course_search.schemas.course import Course, CoursePage, CourseSearchParams
from course_search.search.elasticsearch_client import DocumentStore
from course_search.search.query_builder import build_search_query

logger = logging.getLogger(__name__)


def _hit_to_course(hit: dict) -> Course | None:
    source = hit.get("source")
    if not source:
        return None
    data = dict(source)
    if data.get("id") is None and hit.get("id") is not None:
        data["id"] = hit["id"]
    return Course.model_validate(data)


class CourseSearchService:
    """Full-text + filtered + sorted + paginated course search."""

    def __init__(self, store: DocumentStore, index: str):
        self.store = store
        self.index = index

    async def search(self, params: CourseSearchParams) -> CoursePage:
        query_spec = build_search_query(params)
        try:
            result = await self.store.search(self.index, query_spec)
            courses = []
            for hit in result.get("hits", []):
                course = _hit_to_course(hit)
                if course is not None:
                    courses.append(course)
        except ValidationError as e:
            logger.warning(
                "search_courses: could not map hit to course: q=%r page=%s size=%s error=%s",
                params.q, params.page, params.size, e,
            )
            return CoursePage()
        except Exception as e:
            logger.warning(
                "search_courses failed: q=%r page=%s size=%s error=%s",
                params.q, params.page, params.size, e,
            )
            return CoursePage()

        total = result.get("total") or 0
        if total == 0:
            logger.info("search_courses: q=%r returned 0 hits", params.q)
        return CoursePage(total=total, courses=courses)
