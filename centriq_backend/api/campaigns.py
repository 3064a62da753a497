"""
Campaigns API routes.
"""
from datetime import date, datetime, time
from typing import Optional

from fastapi import APIRouter, Depends, Query

from centriq_backend.api.deps import get_campaign_service, get_feed_service
from centriq_backend.config import settings
from centriq_backend.core.exceptions import raise_validation_error
from centriq_backend.core.listing import ListViewState
from centriq_backend.models.campaign import CampaignStatus
from centriq_backend.schemas.campaign import (
    CampaignActionResponse,
    CampaignCreate,
    CampaignFilters,
    CampaignOverview,
    CampaignPage,
    CampaignRow,
    DateRange,
)
from centriq_backend.schemas.common import ERROR_RESPONSES
from centriq_backend.schemas.feed import CampaignSetupRequest, CampaignSetupResponse
from centriq_backend.services.campaign_service import CampaignService
from centriq_backend.services.feed_service import FeedService

router = APIRouter(prefix=f"{settings.API_PREFIX}/campaigns", tags=["campaigns"], responses=ERROR_RESPONSES)


def build_filters(
    client: Optional[str],
    status_filter: Optional[CampaignStatus],
    start: Optional[date],
    end: Optional[date]
) -> Optional[CampaignFilters]:
    """Server-side filters from query parameters."""
    if (start is None) != (end is None):
        raise_validation_error("start and end must be given together", field="start" if start is None else "end")
    date_range = None
    if start is not None:
        if end < start:
            raise_validation_error("end must not be before start", field="end")
        date_range = DateRange(start=datetime.combine(start, time.min), end=datetime.combine(end, time.max))
    if not (client or status_filter or date_range):
        return None
    return CampaignFilters(client=client, status=status_filter, date_range=date_range)


@router.get("/", response_model=CampaignPage)
async def list_campaigns(
    q: Optional[str] = Query(None, description="Case-insensitive search on campaign or client name"),
    status: Optional[str] = Query(None, description="Dashboard status filter label, e.g. 'In Review'"),
    page: int = Query(1, ge=1),
    page_size: Optional[int] = Query(None, ge=1),
    client: Optional[str] = None,
    status_filter: Optional[CampaignStatus] = Query(None, description="Server-side status filter"),
    start: Optional[date] = None,
    end: Optional[date] = None,
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    """One page of the campaigns table."""
    filters = build_filters(client, status_filter, start, end)
    state = ListViewState.from_query(search=q, status=status, page=page, page_size=page_size)
    return await campaign_service.list_page(filters, state)


@router.post("/", response_model=CampaignRow, status_code=201)
async def create_campaign(
    campaign_data: CampaignCreate,
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    """Create a new campaign."""
    return await campaign_service.create(campaign_data)


@router.post("/setup", response_model=CampaignSetupResponse)
async def setup_campaign(
    request: CampaignSetupRequest,
    feed_service: FeedService = Depends(get_feed_service)
):
    """Create a campaign from a validated, mapped feed."""
    return await feed_service.setup_campaign(request)


@router.get("/{campaign_id}", response_model=CampaignRow)
async def get_campaign(
    campaign_id: str,
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    """Get a campaign by ID."""
    return await campaign_service.get(campaign_id)


@router.get("/{campaign_id}/overview", response_model=CampaignOverview)
async def get_campaign_overview(
    campaign_id: str,
    from_date: Optional[date] = None,
    to_date: Optional[date] = None,
    target_applications: Optional[int] = Query(None, ge=0, description="Application goal for the progress figures"),
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    """Campaign overview: budget, goal, job stats and daily activity chart."""
    return await campaign_service.overview(campaign_id, from_date, to_date, target_applications)


@router.post("/{campaign_id}/pause", response_model=CampaignActionResponse)
async def pause_campaign(
    campaign_id: str,
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    """Request a pause of an active campaign."""
    return await campaign_service.pause(campaign_id)


@router.post("/{campaign_id}/resume", response_model=CampaignActionResponse)
async def resume_campaign(
    campaign_id: str,
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    """Request a resume of a paused campaign."""
    return await campaign_service.resume(campaign_id)
