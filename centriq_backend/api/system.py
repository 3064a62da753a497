"""
System API routes - response cache maintenance.
"""
from typing import List

from fastapi import APIRouter, Depends, Query

from centriq_backend.api.deps import get_cache
from centriq_backend.config import settings
from centriq_backend.core.cache import ResponseCache
from centriq_backend.models.activity import Actions
from centriq_backend.schemas.common import CacheInvalidation
from centriq_backend.services.activity_service import activity_service

router = APIRouter(prefix=settings.API_PREFIX, tags=["system"])


@router.delete("/cache", response_model=CacheInvalidation)
async def invalidate_cache(
    prefix: List[str] = Query(default=[], description="Key prefix, e.g. ?prefix=campaigns"),
    cache: ResponseCache = Depends(get_cache)
):
    """Evict cached responses under a key prefix; no prefix clears everything."""
    evicted = cache.invalidate(*prefix)

    activity_service.log(
        action=Actions.CACHE_INVALIDATED,
        entity_type="cache",
        description="/".join(prefix) or "all",
        meta_data={"evicted": evicted}
    )

    return CacheInvalidation(prefix=prefix, evicted=evicted)
