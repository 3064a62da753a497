"""
Campaign schemas.
"""
from datetime import datetime
from typing import Optional, List, Literal, Dict, Any, Tuple

from pydantic import BaseModel, Field, model_validator

from centriq_backend.models.base import CamelModel, PascalModel
from centriq_backend.models.campaign import Campaign, CampaignStatus
from centriq_backend.models.report import JobStatsResponse


class DateRange(CamelModel):
    start: datetime
    end: datetime

    @model_validator(mode="after")
    def check_order(self):
        if self.end < self.start:
            raise ValueError("Date range end must not be before its start")
        return self


class CampaignFilters(CamelModel):
    """Server-side filters forwarded to `GET campaigns`."""
    client: Optional[str] = None
    status: Optional[CampaignStatus] = None
    date_range: Optional[DateRange] = None

    def as_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if self.client:
            params["client"] = self.client
        if self.status:
            params["status"] = self.status.value
        if self.date_range:
            params["startDate"] = self.date_range.start.isoformat()
            params["endDate"] = self.date_range.end.isoformat()
        return params


class CampaignsEnvelope(CamelModel):
    """Body of `GET campaigns`."""
    campaigns: List[Campaign] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    page_size: int = 10


class CampaignRule(PascalModel):
    field: str
    operation: str
    value: str


class CampaignRuleGroup(PascalModel):
    operation: Literal["And", "Or"]
    rules: List[CampaignRule] = Field(default_factory=list)


class CampaignCreate(PascalModel):
    """Create a new campaign (`POST campaign`)."""
    org_id: int
    name: str = Field(min_length=1)
    start_date: datetime
    end_date: Optional[datetime] = None
    budget: float = Field(ge=0)
    threshold: float = Field(default=0, ge=0, le=100)
    mark_up: float = 0
    mark_down: Optional[float] = None
    cpa: Optional[float] = Field(default=None, alias="CPA", ge=0)
    cpc: float = Field(default=0, alias="CPC", ge=0)
    status: Optional[str] = None
    bid_type: str = "CPC"
    id: Optional[str] = None
    client_id: Optional[str] = None
    client_name: str
    rule_groups: List[CampaignRuleGroup] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("EndDate must not be before StartDate")
        return self

    class Config:
        json_schema_extra = {
            "example": {
                "OrgId": 552499,
                "Name": "Drivers For Ubers",
                "StartDate": "2025-06-15T00:00:00Z",
                "EndDate": "2025-09-15T00:00:00Z",
                "Budget": 8000,
                "Threshold": 75,
                "MarkUp": 20,
                "CPC": 12,
                "BidType": "CPC",
                "ClientName": "GlobalTech Solutions",
                "RuleGroups": []
            }
        }


class CampaignRow(Campaign):
    """Campaign plus the display values a table row needs."""
    status_label: str
    budget_utilized_source: str
    formatted_budget: str
    formatted_start_date: str
    formatted_end_date: str


class CampaignPage(CamelModel):
    """One page of the campaigns table."""
    items: List[CampaignRow]
    total: int
    page: int
    page_size: int
    pages: int
    has_next: bool
    has_prev: bool
    start_item: Optional[int] = None
    end_item: Optional[int] = None
    search: str = ""
    status: Optional[CampaignStatus] = None
    status_options: List[str] = Field(default_factory=list)
    page_size_options: List[int] = Field(default_factory=list)


class BudgetSummary(CamelModel):
    total_budget: float
    current_spend: Optional[float] = None
    remaining_budget: Optional[float] = None
    budget_utilized: Optional[float] = None
    budget_utilized_source: str
    target_applications: Optional[float] = None
    current_applications: Optional[float] = None
    applications_needed: Optional[float] = None
    goal_progress: Optional[float] = None  # percentage, not clamped


class ChartPoint(BaseModel):
    date: str
    clicks: int
    applies: int
    spend: float


class ActivityChart(CamelModel):
    points: List[ChartPoint]
    count_domain: Tuple[float, float]
    spend_domain: Tuple[float, float]


class CampaignOverview(CamelModel):
    """Everything the campaign overview screen shows."""
    campaign: CampaignRow
    date_range: str
    duration: str
    budget: BudgetSummary
    stats: Optional[JobStatsResponse] = None
    stats_error: Optional[str] = None  # set when job stats could not be fetched
    chart: ActivityChart


class CampaignActionResponse(CamelModel):
    """Result of a stubbed status request (not persisted upstream)."""
    campaign_id: str
    requested_status: CampaignStatus
    accepted: bool
    message: str
