"""
Reporting models - job statistics returned by the programmatic reports API.
The upstream mixes PascalCase and snake-ish keys, so aliases are explicit.
"""
from datetime import datetime, date
from typing import Optional, List, Any

from pydantic import BaseModel, Field


class TopJob(BaseModel):
    """Per-job counters."""
    job_guid: str = Field(default="", alias="JobGuid")
    job_code: str = Field(default="", alias="JobCode")
    job_title: str = Field(default="", alias="JobTitle")
    location: str = Field(default="", alias="Location")
    company: str = Field(default="", alias="Company")
    campaign: str = Field(default="", alias="Campaign")
    total_clicks: int = Field(default=0, alias="TotalClicks")
    valid_clicks: int = Field(default=0, alias="ValidClicks")
    valid_applies: int = Field(default=0, alias="ValidApplies")
    total_applies: int = Field(default=0, alias="TotalApplies")
    bot_clicks: int = Field(default=0, alias="BotClicks")
    invalid_clicks: int = Field(default=0, alias="InvalidClicks")
    latent_clicks: int = Field(default=0, alias="LatentClicks")
    duplicate_clicks: int = Field(default=0, alias="DuplicateClicks")
    total_click_cost: float = Field(default=0, alias="TotalClickCost")

    class Config:
        populate_by_name = True


class CampaignStat(BaseModel):
    """One activity date of a campaign."""
    click_count: int = Field(default=0, alias="Click_count")
    apply_count: int = Field(default=0, alias="Apply_count")
    invalid_click_count: int = Field(default=0, alias="InvalidClick_Count")
    bot_click_count: int = Field(default=0, alias="BotClick_Count")
    latent_click_count: int = Field(default=0, alias="LatentClick_Count")
    duplicate_click_count: int = Field(default=0, alias="DuplicateClick_Count")
    spent: float = Field(default=0, alias="Spent")
    activity_date: datetime = Field(alias="Activity_date")
    campaign_name: str = Field(default="", alias="Campaign_name")

    class Config:
        populate_by_name = True

    @property
    def activity_datetime(self) -> datetime:
        """Activity date as a naive datetime, for chronological ordering."""
        return self.activity_date.replace(tzinfo=None)


class JobStatsRequest(BaseModel):
    """Body of `POST reports/programmatic/jobstats`."""
    from_date: date = Field(alias="FromDate")
    to_date: date = Field(alias="ToDate")
    org_id: int = Field(alias="OrgId")
    campaign_name: Optional[str] = Field(default=None, alias="CampaignName")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "FromDate": "2025-06-15",
                "ToDate": "2025-07-20",
                "OrgId": 552499,
                "CampaignName": "Drivers For Ubers"
            }
        }


class JobStatsResponse(BaseModel):
    """Aggregate counters plus the per-date activity series."""
    org_id: Optional[int] = Field(default=None, alias="OrgId")
    org_name: str = Field(default="", alias="OrgName")
    budget: float = Field(default=0, alias="Budget")
    total_jobs: int = Field(default=0, alias="Total_jobs")
    active_jobs: int = Field(default=0, alias="Active_jobs")
    top_jobs: List[TopJob] = Field(default_factory=list, alias="TopJobs")
    all_jobs: List[Any] = Field(default_factory=list, alias="TotalJobs")
    cpc: float = Field(default=0, alias="CPC")
    cpa: float = Field(default=0, alias="CPA")
    clicks: int = Field(default=0, alias="Clicks")
    bot_clicks: int = Field(default=0, alias="BotClicks")
    invalid_clicks: int = Field(default=0, alias="InvalidClicks")
    latent_clicks: int = Field(default=0, alias="LatentClicks")
    duplicate_clicks: int = Field(default=0, alias="DuplicateClicks")
    applies: int = Field(default=0, alias="Applies")
    conversion_rate: float = Field(default=0, alias="CR")
    show_publisher_wise_graph: bool = Field(default=False, alias="ShowPublisherWiseGraph")
    campaign_stats: List[CampaignStat] = Field(default_factory=list, alias="Campaign_stats")

    class Config:
        populate_by_name = True
