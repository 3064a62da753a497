"""
Reporting API routes - programmatic job stats.
"""
from fastapi import APIRouter, Depends

from centriq_backend.api.deps import get_campaign_service
from centriq_backend.config import settings
from centriq_backend.models.report import JobStatsRequest, JobStatsResponse
from centriq_backend.schemas.common import ERROR_RESPONSES
from centriq_backend.services.campaign_service import CampaignService

router = APIRouter(prefix=f"{settings.API_PREFIX}/reports", tags=["reports"], responses=ERROR_RESPONSES)


@router.post("/jobstats", response_model=JobStatsResponse)
async def get_job_stats(
    request: JobStatsRequest,
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    """Job stats for one campaign over a date range."""
    return await campaign_service.job_stats(request)


@router.post("/campaignstats", response_model=JobStatsResponse)
async def get_campaign_stats(
    request: JobStatsRequest,
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    """Job stats across all campaigns of the organization."""
    return await campaign_service.campaign_stats(request)
