"""
Health checks - for load balancers, Kubernetes, and monitoring.
Challenge: Fast liveness; readiness checks that the courses index exists.
"""

import logging

from fastapi import APIRouter, Response, status

from course_search.config import get_settings
from course_search.core.dependencies import Store

logger = logging.getLogger(__name__)

router = APIRouter()
settings = get_settings()


@router.get("")
async def health():
    """Liveness: is the process up?"""
    return {"status": "ok", "app": settings.app_name}


@router.get("/ready")
async def ready(store: Store, response: Response):
    """Readiness: is the courses index there to serve searches?"""
    try:
        index_ok = await store.exists(settings.courses_index)
    except Exception as e:
        logger.warning("readiness check failed: %s", e)
        index_ok = False
    if not index_ok:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return {"status": "unavailable", "index": settings.courses_index}
    return {"status": "ready", "index": settings.courses_index}
