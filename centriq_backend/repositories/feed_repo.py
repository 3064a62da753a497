"""
Feed repository - job feed validation and campaign setup.
"""
from centriq_backend.config import settings
from centriq_backend.core.cache import make_key
from centriq_backend.models.feed import ValidationResult, FeedNodes, FeedFields
from centriq_backend.repositories.base import BaseRepository
from centriq_backend.repositories.campaign_repo import CAMPAIGNS
from centriq_backend.schemas.feed import FeedValidationRequest, CampaignSetupRequest, CampaignSetupResponse

FEED_NODES = "feed-nodes"
FEED_FIELDS = "feed-available-fields"
FEED_PREFIXES = (FEED_NODES, FEED_FIELDS)


class FeedRepository(BaseRepository):
    """Repository for feed validation calls."""
    service = "Feed API"

    async def validate(self, request: FeedValidationRequest) -> ValidationResult:
        """Validate a feed document. Never cached: each call re-reads the feed."""
        payload = request.model_dump(by_alias=True, mode="json", exclude_none=True)
        data = await self.post("feed/validate", json=payload)
        return self.parse(ValidationResult, data)

    async def nodes(self, validation_id: str) -> FeedNodes:
        async def fetch() -> FeedNodes:
            data = await self.get(f"feed/nodes/{validation_id}")
            return self.parse(FeedNodes, data)

        return await self.cache.get_or_fetch(
            make_key(FEED_NODES, {"validationId": validation_id}),
            fetch,
            settings.FEED_NODES_CACHE_TTL,
        )

    async def fields(self, validation_id: str) -> FeedFields:
        async def fetch() -> FeedFields:
            data = await self.get(f"feed/fields/{validation_id}")
            return self.parse(FeedFields, data)

        return await self.cache.get_or_fetch(
            make_key(FEED_FIELDS, {"validationId": validation_id}),
            fetch,
            settings.FEED_FIELDS_CACHE_TTL,
        )

    async def setup_campaign(self, request: CampaignSetupRequest) -> CampaignSetupResponse:
        payload = request.model_dump(by_alias=True, mode="json", exclude_none=True)
        data = await self.post("campaign/setup", json=payload)
        result = self.parse(CampaignSetupResponse, data)
        self.cache.invalidate(CAMPAIGNS)
        return result

    def reset(self) -> int:
        """Forget every cached feed lookup."""
        return sum(self.cache.invalidate(prefix) for prefix in FEED_PREFIXES)
