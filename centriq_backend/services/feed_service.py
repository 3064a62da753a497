"""
Feed service - job feed validation, field mapping and campaign setup.
"""
import asyncio
import logging
from typing import List, Optional

from centriq_backend.core.exceptions import BusinessRuleError
from centriq_backend.core.field_mapping import (
    check_mappings,
    default_mappings,
    ensure_known_fields,
    mapped_entries,
    summarize_mappings,
)
from centriq_backend.core.system_fields import ordered_fields, get_fields_by_category
from centriq_backend.models.activity import Actions
from centriq_backend.models.feed import FeedNodes, FeedFields, ValidationResult
from centriq_backend.repositories.feed_repo import FeedRepository, FEED_PREFIXES
from centriq_backend.schemas.feed import (
    CampaignSetupRequest,
    CampaignSetupResponse,
    FeedAnalysis,
    FeedResetResponse,
    FeedValidationRequest,
    FieldMapping,
    MappingExportRequest,
    MappingReport,
    OnboardingForm,
    SystemFieldCatalog,
    SystemFieldResponse,
)
from centriq_backend.services.activity_service import ActivityService, activity_service

logger = logging.getLogger(__name__)


class FeedService:
    """Service for the feed onboarding wizard."""

    def __init__(self, feed_repo: FeedRepository, activity: ActivityService = activity_service):
        self.feed_repo = feed_repo
        self.activity = activity

    def system_fields(self, category: Optional[str] = None) -> SystemFieldCatalog:
        """The mapping form: catalog plus a blank mapping per field."""
        fields = ordered_fields()
        if category:
            wanted = {f.name for f in get_fields_by_category(category)}
            fields = [f for f in fields if f.name in wanted]
        return SystemFieldCatalog(
            fields=[
                SystemFieldResponse(
                    name=f.name,
                    required=f.required,
                    description=f.description,
                    data_type=f.data_type,
                    category=f.category,
                )
                for f in fields
            ],
            default_mappings=default_mappings(fields),
        )

    async def validate(self, request: FeedValidationRequest) -> ValidationResult:
        result = await self.feed_repo.validate(request)

        self.activity.log(
            action=Actions.FEED_VALIDATED,
            entity_type="feed",
            entity_id=result.validation_id,
            description=f"Feed {request.feed_url} validated",
            meta_data={"is_valid": result.is_valid, "total_records": result.total_records}
        )

        if not result.is_valid:
            logger.warning(
                f"Feed {request.feed_url} is invalid: {result.error_message or 'no message'} "
                f"({len(result.validation_errors)} validation error(s))"
            )
        return result

    async def analyze(self, request: FeedValidationRequest) -> FeedAnalysis:
        """
        Validate, then fetch nodes and available fields in parallel.
        An invalid feed (or one without a validation id) yields empty lists.
        """
        result = await self.validate(request)

        if not (result.is_valid and result.validation_id):
            return FeedAnalysis(
                validation_result=result,
                detected_format_name=result.format_name,
            )

        nodes, fields = await asyncio.gather(
            self.feed_repo.nodes(result.validation_id),
            self.feed_repo.fields(result.validation_id),
        )
        return FeedAnalysis(
            validation_result=result,
            detected_format_name=result.format_name,
            nodes=nodes.nodes,
            feed_structure=nodes.feed_structure,
            available_fields=fields.fields,
        )

    async def onboard(self, form: OnboardingForm) -> FeedAnalysis:
        """First wizard step: the form is already schema-validated."""
        logger.info(f"Onboarding feed for client '{form.client_name}'")
        return await self.analyze(FeedValidationRequest(feed_url=form.feed_url))

    async def nodes(self, validation_id: str) -> FeedNodes:
        return await self.feed_repo.nodes(validation_id)

    async def fields(self, validation_id: str) -> FeedFields:
        return await self.feed_repo.fields(validation_id)

    def check_mappings(self, mappings: List[FieldMapping]) -> MappingReport:
        ensure_known_fields(mappings)
        return check_mappings(mappings)

    def export_mappings(self, request: MappingExportRequest) -> dict:
        ensure_known_fields(request.field_mappings)
        document = summarize_mappings(
            request.field_mappings,
            client_name=request.client_name,
            client_email=request.client_email,
            feed_url=request.feed_url,
            validation=request.validation_result,
        )

        self.activity.log(
            action=Actions.MAPPING_EXPORTED,
            entity_type="feed",
            entity_id=request.validation_result.validation_id if request.validation_result else None,
            meta_data=document["mappingCount"]
        )

        return document

    async def setup_campaign(self, request: CampaignSetupRequest) -> CampaignSetupResponse:
        """
        Create a campaign from a mapped feed. Refused until every required
        field is mapped; only mapped entries are sent upstream.
        """
        report = self.check_mappings(request.field_mappings)
        if not report.ready:
            raise BusinessRuleError(
                f"Required fields are not mapped: {', '.join(report.missing_required)}"
            )

        outgoing = request.model_copy(update={"field_mappings": mapped_entries(request.field_mappings)})
        result = await self.feed_repo.setup_campaign(outgoing)

        self.activity.log(
            action=Actions.CAMPAIGN_SETUP_SUBMITTED,
            entity_type="campaign",
            entity_id=result.campaign_id or None,
            description=f"Campaign '{request.campaign_name}' setup: {result.status}",
            meta_data={"mapped_fields": len(outgoing.field_mappings)}
        )

        if result.status == "error":
            logger.error(f"Campaign setup failed for '{request.campaign_name}': {result.message}")
        return result

    def reset(self) -> FeedResetResponse:
        """Forget cached nodes and fields so the wizard starts over."""
        evicted = self.feed_repo.reset()
        self.activity.log(
            action=Actions.FEED_STATE_RESET,
            entity_type="feed",
            meta_data={"evicted": evicted}
        )
        return FeedResetResponse(evicted=evicted, prefixes=list(FEED_PREFIXES))
