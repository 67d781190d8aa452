"""
Query construction for course search.
Pure functions: search params in, Elasticsearch request body out. No I/O.
"""

from typing import Any

from course_search.schemas.course import CourseSearchParams

TEXT_FIELDS = ["title^2", "description"]
DEFAULT_SORT_FIELD = "nextSessionDate"


def _is_set(value: str | None) -> bool:
    return value is not None and bool(value.strip())


def _range(field: str, op: str, value: Any) -> dict:
    return {"range": {field: {op: value}}}


def build_text_clause(q: str | None) -> dict:
    """Fuzzy multi-field match, or match_all when there is no text."""
    if not _is_set(q):
        return {"match_all": {}}
    return {
        "multi_match": {
            "query": q,
            "fields": TEXT_FIELDS,
            "fuzziness": "AUTO",
        }
    }


def build_filters(params: CourseSearchParams) -> list[dict]:
    filters: list[dict] = []
    if _is_set(params.category):
        filters.append({"term": {"category": params.category}})
    if _is_set(params.type):
        filters.append({"term": {"type": params.type}})
    if params.start_date is not None:
        filters.append(_range("nextSessionDate", "gte", params.start_date.isoformat()))
    if params.min_price is not None:
        filters.append(_range("price", "gte", params.min_price))
    if params.max_price is not None:
        filters.append(_range("price", "lte", params.max_price))
    # Age bands overlap: course.maxAge >= requested min and course.minAge <= requested max
    if params.min_age is not None:
        filters.append(_range("maxAge", "gte", params.min_age))
    if params.max_age is not None:
        filters.append(_range("minAge", "lte", params.max_age))
    return filters


def resolve_sort(sort: str | None) -> list[dict]:
    mode = (sort or "").lower()
    if mode == "priceasc":
        return [{"price": {"order": "asc"}}]
    if mode == "pricedesc":
        return [{"price": {"order": "desc"}}]
    return [{DEFAULT_SORT_FIELD: {"order": "asc"}}]


def build_search_query(params: CourseSearchParams) -> dict:
    """Bool query (scored text clause + non-scoring filters), sort and from/size window."""
    return {
        "query": {
            "bool": {
                "must": [build_text_clause(params.q)],
                "filter": build_filters(params),
            }
        },
        "sort": resolve_sort(params.sort),
        "from": params.page * params.size,
        "size": params.size,
    }


def build_prefix_query(prefix: str, size: int) -> dict:
    """Case-insensitive prefix match on the unanalyzed title, titles only."""
    return {
        "query": {
            "prefix": {
                "title.keyword": {"value": prefix, "case_insensitive": True},
            }
        },
        "size": size,
        "_source": ["title"],
    }
