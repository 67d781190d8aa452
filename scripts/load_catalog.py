#!/usr/bin/env python3
"""
Load a course catalog JSON file into Elasticsearch (one bulk request).
Use this to refresh the index without restarting the API (which loads the catalog at startup).

If the mapping changed or the index is broken, delete and recreate it first:
  python scripts/load_catalog.py --reset-index

  python scripts/load_catalog.py
  python scripts/load_catalog.py --catalog data/my-courses.json
"""

import argparse
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from course_search.config import get_settings
from course_search.core.exceptions import CatalogLoadError
from course_search.core.logging_config import configure_logging
from course_search.search.elasticsearch_client import CourseStore, close_elasticsearch, get_elasticsearch
from course_search.services.catalog_loader import bootstrap_catalog


async def delete_courses_index(index: str) -> None:
    """Delete the index so bootstrap recreates it with the current mapping."""
    es = await get_elasticsearch()
    if await es.indices.exists(index=index):
        await es.indices.delete(index=index)
        print(f"Deleted index '{index}'.")
    else:
        print(f"Index '{index}' does not exist (already deleted or never created).")


async def run(catalog: str, reset_index: bool) -> bool:
    settings = get_settings()
    try:
        if reset_index:
            await delete_courses_index(settings.courses_index)
        store = CourseStore(await get_elasticsearch())
        return await bootstrap_catalog(store, settings.courses_index, catalog)
    finally:
        await close_elasticsearch()


def main():
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Bulk index a course catalog into Elasticsearch")
    ap.add_argument("--catalog", default=settings.catalog_path, help="Path to the catalog JSON file")
    ap.add_argument("--reset-index", action="store_true", help="Delete the courses index first, then recreate and load")
    args = ap.parse_args()

    configure_logging(settings.log_level)
    try:
        ok = asyncio.run(run(args.catalog, args.reset_index))
    except CatalogLoadError as e:
        print(e)
        sys.exit(1)
    if not ok:
        print("Catalog was not indexed; see the log above.")
        sys.exit(1)
    print(f"Indexed catalog {args.catalog} into '{settings.courses_index}'.")
    print(f"Try: curl -s '{settings.elasticsearch_url.rstrip('/')}/{settings.courses_index}/_count?pretty'")


if __name__ == "__main__":
    main()
