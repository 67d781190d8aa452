#!/usr/bin/env python3
"""
Create the Elasticsearch courses index with raw HTTP (no Python ES client).
Use this when you want the index (mapping + completion field) in place before the API starts:
  python scripts/create_courses_index.py

Then load the catalog WITHOUT --reset-index:
  python scripts/load_catalog.py

Reads ELASTICSEARCH_URL and COURSES_INDEX from .env (defaults http://localhost:9200, courses).
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import httpx
from course_search.config import get_settings
from course_search.search.elasticsearch_client import courses_index_body


def main():
    settings = get_settings()
    base = settings.elasticsearch_url.rstrip("/")
    index = settings.courses_index
    url = f"{base}/{index}"

    with httpx.Client(timeout=30.0, verify=settings.elasticsearch_verify_certs) as client:
        r = client.head(url)
        if r.status_code == 200:
            print(f"Index '{index}' already exists. Delete it first if you want to recreate:")
            print(f"  curl -X DELETE '{base}/{index}'")
            return
        r = client.put(url, json=courses_index_body())
        if r.status_code not in (200, 201):
            print(f"Failed to create index: {r.status_code}")
            print(r.text[:500])
            sys.exit(1)
    print(f"Created index '{index}' with number_of_replicas=0.")
    print("Run: python scripts/load_catalog.py   (no --reset-index)")


if __name__ == "__main__":
    main()
