"""
Catalog loading - JSON file of courses read at startup and bulk indexed.
A catalog that cannot be read is fatal; an unreachable store is not.
"""

import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from course_search.core.exceptions import CatalogLoadError
from course_search.schemas.course import Course
from course_search.search.elasticsearch_client import DocumentStore, ensure_courses_index
from course_search.services.indexing_service import CourseIndexer

logger = logging.getLogger(__name__)

_catalog_adapter = TypeAdapter(list[Course])


def load_catalog(path: str | Path) -> list[Course]:
    """Parse a JSON array of courses. Raises CatalogLoadError on any read or validation problem."""
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise CatalogLoadError(str(path), str(e)) from e
    try:
        courses = _catalog_adapter.validate_json(raw)
    except ValidationError as e:
        raise CatalogLoadError(str(path), f"{e.error_count()} validation error(s): {e}") from e
    logger.info("Loaded %d courses from %s", len(courses), path)
    return courses


async def bootstrap_catalog(store: DocumentStore, index: str, catalog_path: str | Path) -> bool:
    """
    Load the catalog, ensure the index exists, bulk index.
    CatalogLoadError propagates; store failures are logged and reported as False.
    """
    courses = load_catalog(catalog_path)
    try:
        await ensure_courses_index(store, index)
    except Exception as e:
        # Store may be down; app still starts and search returns empty pages
        logger.warning("ensure_courses_index failed: index=%s error=%s", index, e)
        return False
    return await CourseIndexer(store, index).bulk_index(courses)
