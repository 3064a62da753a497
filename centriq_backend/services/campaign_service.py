"""
Campaign service - campaign listing, overview and status requests.
"""
import logging
from datetime import date
from typing import Optional

from centriq_backend.config import settings
from centriq_backend.core.budget import budget_summary, resolve_budget_utilized
from centriq_backend.core.charts import build_activity_chart
from centriq_backend.core.exceptions import BusinessRuleError, UpstreamError, ValidationError
from centriq_backend.core.formatting import format_currency, format_date, format_date_range, format_duration
from centriq_backend.core.listing import ListViewState, STATUS_FILTER_OPTIONS, derive_page, status_label
from centriq_backend.core.pagination import page_count_label
from centriq_backend.models.activity import Actions
from centriq_backend.models.campaign import Campaign, CampaignStatus
from centriq_backend.models.report import JobStatsRequest, JobStatsResponse
from centriq_backend.repositories.campaign_repo import CampaignRepository
from centriq_backend.repositories.report_repo import ReportRepository
from centriq_backend.schemas.campaign import (
    CampaignActionResponse,
    CampaignCreate,
    CampaignFilters,
    CampaignOverview,
    CampaignPage,
    CampaignRow,
)
from centriq_backend.services.activity_service import ActivityService, activity_service

logger = logging.getLogger(__name__)


def to_row(campaign: Campaign) -> CampaignRow:
    """Campaign plus its display values."""
    utilized, source = resolve_budget_utilized(campaign)
    data = campaign.model_dump()
    data["budget_utilized"] = utilized
    return CampaignRow(
        **data,
        status_label=status_label(campaign.status),
        budget_utilized_source=source,
        formatted_budget=format_currency(campaign.budget, campaign.currency_code),
        formatted_start_date=format_date(campaign.start_date),
        formatted_end_date=format_date(campaign.end_date),
    )


class CampaignService:
    """Service for campaign operations."""

    def __init__(
        self,
        campaign_repo: CampaignRepository,
        report_repo: Optional[ReportRepository] = None,
        activity: ActivityService = activity_service
    ):
        self.campaign_repo = campaign_repo
        self.report_repo = report_repo
        self.activity = activity

    async def list_page(
        self,
        filters: Optional[CampaignFilters],
        state: ListViewState
    ) -> CampaignPage:
        """Fetch with server-side filters, then search, status filter and paginate."""
        campaigns = await self.campaign_repo.list(filters)
        result = derive_page(campaigns, state)
        logger.info(
            f"Campaign table: {result['total']} of {len(campaigns)} match, "
            f"{page_count_label(result['pages'], result['page'])}"
        )
        result["items"] = [to_row(c) for c in result["items"]]
        return CampaignPage(
            **result,
            search=state.search,
            status=state.status,
            status_options=STATUS_FILTER_OPTIONS,
            page_size_options=settings.PAGE_SIZE_OPTIONS,
        )

    async def get(self, campaign_id: str) -> CampaignRow:
        campaign = await self.campaign_repo.get_by_id(campaign_id)
        return to_row(campaign)

    async def create(self, campaign_data: CampaignCreate) -> CampaignRow:
        """Create a new campaign."""
        campaign = await self.campaign_repo.create(campaign_data)

        self.activity.log(
            action=Actions.CAMPAIGN_CREATED,
            entity_type="campaign",
            entity_id=campaign.id,
            description=f"Campaign '{campaign.name}' created"
        )

        return to_row(campaign)

    async def overview(
        self,
        campaign_id: str,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
        target_applications: Optional[int] = None
    ) -> CampaignOverview:
        """
        Campaign detail with budget, goal, job stats and chart.

        Job stats failures do not fail the overview: the error text is
        returned in `stats_error` and the chart falls back to empty.
        Only an inverted range given explicitly by the caller is rejected.
        """
        campaign = await self.campaign_repo.get_by_id(campaign_id)

        start = from_date or campaign.start_date.date()
        end = to_date or date.today()
        if end < start and from_date is not None and to_date is not None:
            raise ValidationError("to_date must not be before from_date", field="to_date")

        stats: Optional[JobStatsResponse] = None
        stats_error: Optional[str] = None
        if self.report_repo is None:
            stats_error = "Job stats are not configured"
        elif campaign.org_id is None:
            stats_error = "Campaign has no organization id"
        elif end < start:
            stats_error = f"No activity before the campaign starts on {format_date(campaign.start_date)}"
        else:
            request = JobStatsRequest(
                from_date=start,
                to_date=end,
                org_id=campaign.org_id,
                campaign_name=campaign.name,
            )
            try:
                stats = await self.report_repo.job_stats(request)
            except UpstreamError as e:
                logger.warning(f"Job stats unavailable for campaign {campaign.name}: {e.message}")
                stats_error = e.message

        current_applications = stats.applies if stats else campaign.achieved_ctas

        return CampaignOverview(
            campaign=to_row(campaign),
            date_range=format_date_range(campaign.start_date, campaign.end_date),
            duration=format_duration(campaign.start_date, campaign.end_date),
            budget=budget_summary(campaign, target_applications, current_applications),
            stats=stats,
            stats_error=stats_error,
            chart=build_activity_chart(stats.campaign_stats if stats else []),
        )

    async def pause(self, campaign_id: str) -> CampaignActionResponse:
        """Request a pause. Logged only; the status is owned upstream."""
        campaign = await self.campaign_repo.get_by_id(campaign_id)
        if campaign.status != CampaignStatus.ACTIVE:
            raise BusinessRuleError(f"Can only pause active campaigns (status is '{campaign.status.value}')")

        self.activity.log(
            action=Actions.CAMPAIGN_PAUSE_REQUESTED,
            entity_type="campaign",
            entity_id=campaign.id,
            description=f"Pause requested for campaign '{campaign.name}'"
        )

        return CampaignActionResponse(
            campaign_id=campaign.id,
            requested_status=CampaignStatus.PAUSED,
            accepted=True,
            message=f"Pause requested for '{campaign.name}'",
        )

    async def resume(self, campaign_id: str) -> CampaignActionResponse:
        """Request a resume. Logged only; the status is owned upstream."""
        campaign = await self.campaign_repo.get_by_id(campaign_id)
        if campaign.status != CampaignStatus.PAUSED:
            raise BusinessRuleError(f"Can only resume paused campaigns (status is '{campaign.status.value}')")

        self.activity.log(
            action=Actions.CAMPAIGN_RESUME_REQUESTED,
            entity_type="campaign",
            entity_id=campaign.id,
            description=f"Resume requested for campaign '{campaign.name}'"
        )

        return CampaignActionResponse(
            campaign_id=campaign.id,
            requested_status=CampaignStatus.ACTIVE,
            accepted=True,
            message=f"Resume requested for '{campaign.name}'",
        )

    async def job_stats(self, request: JobStatsRequest) -> JobStatsResponse:
        if self.report_repo is None:
            raise BusinessRuleError("Job stats are not configured")
        return await self.report_repo.job_stats(request)

    async def campaign_stats(self, request: JobStatsRequest) -> JobStatsResponse:
        if self.report_repo is None:
            raise BusinessRuleError("Job stats are not configured")
        return await self.report_repo.campaign_stats(request)
