"""
Feed onboarding API routes.
"""
from typing import Optional

from fastapi import APIRouter, Depends

from centriq_backend.api.deps import get_feed_service
from centriq_backend.config import settings
from centriq_backend.models.feed import FeedNodes, FeedFields, ValidationResult
from centriq_backend.schemas.common import ERROR_RESPONSES
from centriq_backend.schemas.feed import (
    FeedAnalysis,
    FeedResetResponse,
    FeedValidationRequest,
    MappingCheckRequest,
    MappingExportRequest,
    MappingReport,
    OnboardingForm,
    SystemFieldCatalog,
)
from centriq_backend.services.feed_service import FeedService

router = APIRouter(prefix=f"{settings.API_PREFIX}/feed", tags=["feed"], responses=ERROR_RESPONSES)


@router.get("/system-fields", response_model=SystemFieldCatalog)
async def get_system_fields(
    category: Optional[str] = None,
    feed_service: FeedService = Depends(get_feed_service)
):
    """System field catalog, required fields first."""
    return feed_service.system_fields(category)


@router.post("/validate", response_model=ValidationResult)
async def validate_feed(
    request: FeedValidationRequest,
    feed_service: FeedService = Depends(get_feed_service)
):
    return await feed_service.validate(request)


@router.post("/analyze", response_model=FeedAnalysis)
async def analyze_feed(
    request: FeedValidationRequest,
    feed_service: FeedService = Depends(get_feed_service)
):
    """Validate a feed and load its nodes and fields."""
    return await feed_service.analyze(request)


@router.post("/onboarding", response_model=FeedAnalysis)
async def submit_onboarding(
    form: OnboardingForm,
    feed_service: FeedService = Depends(get_feed_service)
):
    """First wizard step: client details and feed URL."""
    return await feed_service.onboard(form)


@router.get("/{validation_id}/nodes", response_model=FeedNodes)
async def get_feed_nodes(
    validation_id: str,
    feed_service: FeedService = Depends(get_feed_service)
):
    return await feed_service.nodes(validation_id)


@router.get("/{validation_id}/fields", response_model=FeedFields)
async def get_feed_fields(
    validation_id: str,
    feed_service: FeedService = Depends(get_feed_service)
):
    return await feed_service.fields(validation_id)


@router.post("/mappings/check", response_model=MappingReport)
async def check_field_mappings(
    request: MappingCheckRequest,
    feed_service: FeedService = Depends(get_feed_service)
):
    """Whether every required system field is mapped."""
    return feed_service.check_mappings(request.field_mappings)


@router.post("/mappings/export")
async def export_field_mappings(
    request: MappingExportRequest,
    feed_service: FeedService = Depends(get_feed_service)
):
    """Mapping summary document for download."""
    return feed_service.export_mappings(request)


@router.delete("/cache", response_model=FeedResetResponse)
async def reset_feed_state(feed_service: FeedService = Depends(get_feed_service)):
    """Drop cached nodes and fields so the wizard starts over."""
    return feed_service.reset()
