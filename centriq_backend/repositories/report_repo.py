"""
Report repository - programmatic job statistics.
"""
from typing import Dict

from centriq_backend.config import settings
from centriq_backend.core.cache import make_key
from centriq_backend.models.report import JobStatsRequest, JobStatsResponse
from centriq_backend.repositories.base import BaseRepository

JOBSTATS = "jobstats"
CAMPAIGNSTATS = "campaignstats"


class ReportRepository(BaseRepository):
    """Job stats from the reporting API (authorized with an API key)."""
    service = "Reports API"

    def __init__(self, *args, api_key: str = "", **kwargs):
        super().__init__(*args, **kwargs)
        self.api_key = api_key

    @property
    def headers(self) -> Dict[str, str]:
        headers = super().headers
        if self.api_key:
            headers["Authorization"] = self.api_key
        return headers

    async def job_stats(self, request: JobStatsRequest) -> JobStatsResponse:
        """Aggregate counters and daily activity for one campaign."""
        payload = request.model_dump(by_alias=True, mode="json", exclude_none=True)

        async def fetch() -> JobStatsResponse:
            data = await self.post("reports/programmatic/jobstats", json=payload)
            return self.parse(JobStatsResponse, data)

        return await self.cache.get_or_fetch(make_key(JOBSTATS, payload), fetch, settings.JOBSTATS_CACHE_TTL)

    async def campaign_stats(self, request: JobStatsRequest) -> JobStatsResponse:
        """Same counters across all campaigns of the organization."""
        payload = request.model_dump(by_alias=True, mode="json", exclude_none=True)
        payload.pop("CampaignName", None)

        async def fetch() -> JobStatsResponse:
            data = await self.post("reports/programmatic/campaignstats", json=payload)
            return self.parse(JobStatsResponse, data)

        return await self.cache.get_or_fetch(make_key(CAMPAIGNSTATS, payload), fetch, settings.JOBSTATS_CACHE_TTL)
