"""
FastAPI dependencies - injection for the document store and services (SOLID: Dependency Inversion).
Challenge: One override point (get_course_store) swaps Elasticsearch for a fake in tests.
"""

from typing import Annotated

from fastapi import Depends

from course_search.config import get_settings
from course_search.search.elasticsearch_client import CourseStore, DocumentStore, get_elasticsearch
from course_search.services.search_service import CourseSearchService
from course_search.services.suggestion_service import CourseSuggestionService

settings = get_settings()


async def get_course_store() -> DocumentStore:
    """Store backed by the shared AsyncElasticsearch client."""
    return CourseStore(await get_elasticsearch())


Store = Annotated[DocumentStore, Depends(get_course_store)]


def get_search_service(store: Store) -> CourseSearchService:
    return CourseSearchService(store, settings.courses_index)


def get_suggestion_service(store: Store) -> CourseSuggestionService:
    return CourseSuggestionService(
        store,
        settings.courses_index,
        strategy=settings.suggest_strategy,
        size=settings.suggest_size,
    )


SearchService = Annotated[CourseSearchService, Depends(get_search_service)]
SuggestionService = Annotated[CourseSuggestionService, Depends(get_suggestion_service)]
