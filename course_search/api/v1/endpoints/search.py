"""
Search endpoints - course search and title autocomplete over Elasticsearch.
Challenge: Expose every filter as an optional query param, bound page size, graceful fallback if ES down.
"""

from datetime import datetime

from fastapi import APIRouter, Query

from course_search.config import get_settings
from course_search.core.dependencies import SearchService, SuggestionService
from course_search.schemas.course import CoursePage, CourseSearchParams

router = APIRouter()
settings = get_settings()


@router.get("", response_model=CoursePage)
async def search_courses(
    search_service: SearchService,
    q: str | None = None,
    min_age: int | None = Query(None, alias="minAge", ge=0),
    max_age: int | None = Query(None, alias="maxAge", ge=0),
    category: str | None = None,
    type: str | None = None,
    min_price: float | None = Query(None, alias="minPrice", ge=0),
    max_price: float | None = Query(None, alias="maxPrice", ge=0),
    start_date: datetime | None = Query(None, alias="startDate"),
    sort: str = "upcoming",
    page: int = Query(0, ge=0),
    size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
):
    """Filtered, sorted, paginated course search. Empty q returns the whole catalog."""
    params = CourseSearchParams(
        q=q,
        min_age=min_age,
        max_age=max_age,
        category=category,
        type=type,
        min_price=min_price,
        max_price=max_price,
        start_date=start_date,
        sort=sort,
        page=page,
        size=size,
    )
    return await search_service.search(params)


@router.get("/suggest", response_model=list[str])
async def suggest_titles(suggestion_service: SuggestionService, q: str):
    """Autocomplete course titles from a partial title."""
    return await suggestion_service.suggest(q)
