"""
Title autocomplete - completion suggester or prefix query, same contract either way.
Best effort: failures give an empty list.
"""

import logging
from collections.abc import Iterable

from course_search.search.elasticsearch_client import DocumentStore
from course_search.search.query_builder import build_prefix_query

logger = logging.getLogger(__name__)

SUGGEST_FIELD = "suggest"
MAX_SUGGESTIONS = 10


def dedupe_titles(titles: Iterable[str | None], limit: int) -> list[str]:
    """Drop blanks and duplicates, keep first-seen order, cap at limit."""
    seen: set[str] = set()
    result: list[str] = []
    for title in titles:
        if not title or not title.strip() or title in seen:
            continue
        seen.add(title)
        result.append(title)
        if len(result) >= limit:
            break
    return result


class CourseSuggestionService:
    def __init__(
        self,
        store: DocumentStore,
        index: str,
        strategy: str = "completion",
        size: int = MAX_SUGGESTIONS,
    ):
        self.store = store
        self.index = index
        self.strategy = strategy
        self.size = min(size, MAX_SUGGESTIONS)

    async def suggest(self, partial_title: str | None) -> list[str]:
        if partial_title is None or not partial_title.strip():
            return []
        try:
            if self.strategy == "prefix":
                titles = await self._prefix_titles(partial_title)
            else:
                titles = await self._completion_titles(partial_title)
        except Exception as e:
            logger.warning("suggest_titles failed: prefix=%r strategy=%s error=%s", partial_title, self.strategy, e)
            return []
        return dedupe_titles(titles, self.size)

    async def _completion_titles(self, prefix: str) -> list[str]:
        options = await self.store.suggest(self.index, SUGGEST_FIELD, prefix, self.size)
        return [option.get("text") for option in options]

    async def _prefix_titles(self, prefix: str) -> list[str]:
        result = await self.store.search(self.index, build_prefix_query(prefix, self.size))
        return [(hit.get("source") or {}).get("title") for hit in result.get("hits", [])]
