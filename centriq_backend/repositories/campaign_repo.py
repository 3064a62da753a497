"""
Campaign repository.
"""
import logging
from typing import List, Optional

from centriq_backend.config import settings
from centriq_backend.core.cache import make_key
from centriq_backend.core.exceptions import NotFoundError
from centriq_backend.models.campaign import Campaign
from centriq_backend.repositories.base import BaseRepository
from centriq_backend.schemas.campaign import CampaignCreate, CampaignFilters, CampaignsEnvelope

logger = logging.getLogger(__name__)

CAMPAIGNS = "campaigns"


class CampaignRepository(BaseRepository):
    """Repository for campaign operations against the campaign API."""
    service = "Campaign API"

    async def list(self, filters: Optional[CampaignFilters] = None) -> List[Campaign]:
        """Campaigns matching the server-side filters, in upstream order."""
        params = filters.as_params() if filters else {}

        async def fetch() -> List[Campaign]:
            data = await self.get("campaigns", params=params or None)
            envelope = self.parse(CampaignsEnvelope, data)
            logger.info(f"Fetched {len(envelope.campaigns)} campaigns (upstream total {envelope.total})")
            return envelope.campaigns

        return await self.cache.get_or_fetch(
            make_key(CAMPAIGNS, params),
            fetch,
            settings.CAMPAIGNS_CACHE_TTL,
        )

    async def get_by_id(self, campaign_id: str) -> Campaign:
        """Look a campaign up in the unfiltered list."""
        campaigns = await self.list()
        for campaign in campaigns:
            if campaign.id == campaign_id:
                return campaign
        raise NotFoundError("Campaign", campaign_id)

    async def create(self, campaign_data: CampaignCreate) -> Campaign:
        """Create a campaign; every cached campaign list becomes stale."""
        payload = campaign_data.model_dump(by_alias=True, mode="json")
        data = await self.post("campaign", json=payload)
        campaign = self.parse(Campaign, data)
        self.cache.invalidate(CAMPAIGNS)
        return campaign

    def invalidate(self) -> int:
        return self.cache.invalidate(CAMPAIGNS)
