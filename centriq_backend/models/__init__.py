"""
Domain read models.
"""
from centriq_backend.models.campaign import Campaign, CampaignStatus
from centriq_backend.models.client import Client
from centriq_backend.models.feed import ValidationResult, FeedNodes, FeedFields, FeedStructure
from centriq_backend.models.report import JobStatsRequest, JobStatsResponse, CampaignStat, TopJob
from centriq_backend.models.activity import Actions

__all__ = [
    "Campaign", "CampaignStatus",
    "Client",
    "ValidationResult", "FeedNodes", "FeedFields", "FeedStructure",
    "JobStatsRequest", "JobStatsResponse", "CampaignStat", "TopJob",
    "Actions",
]
