"""
Bulk indexing of course records.
Challenge: One request per batch; suggest field derived for every document before it is written.
"""

import logging
from collections.abc import Sequence

from course_search.schemas.course import Course, CourseDocument
from course_search.search.elasticsearch_client import DocumentStore

logger = logging.getLogger(__name__)


def build_bulk_operations(index: str, courses: Sequence[Course]) -> list[dict]:
    """Action/source pairs, one index action per course keyed by its id."""
    operations: list[dict] = []
    for course in courses:
        operations.append({"index": {"_index": index, "_id": course.id}})
        operations.append(CourseDocument.from_course(course).to_source())
    return operations


def _failed_items(response: dict) -> list[dict]:
    failed = []
    for item in response.get("items", []):
        result = next(iter(item.values()), {})
        if result.get("error"):
            failed.append(result)
    return failed


class CourseIndexer:
    def __init__(self, store: DocumentStore, index: str):
        self.store = store
        self.index = index

    async def bulk_index(self, courses: Sequence[Course]) -> bool:
        """Write the batch in a single bulk request. Logs failures, never raises or retries."""
        if not courses:
            return True
        operations = build_bulk_operations(self.index, courses)
        try:
            response = await self.store.bulk_write(self.index, operations, refresh=True)
        except Exception as e:
            logger.error("bulk_index failed: index=%s courses=%d error=%s", self.index, len(courses), e)
            return False

        if response.get("errors"):
            failed = _failed_items(response)
            reason = failed[0].get("error") if failed else None
            logger.error(
                "bulk_index: %d of %d courses failed in index=%s, first error: %s",
                len(failed), len(courses), self.index, reason,
            )
            return False
        logger.info("Successfully indexed %d courses.", len(courses))
        return True
