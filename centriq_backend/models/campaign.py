"""
Campaign read model - recruitment advertising campaigns as served by the
upstream campaign API.
"""
from datetime import datetime
from enum import Enum
from typing import Optional, List, Dict, Any

from pydantic import Field

from centriq_backend.models.base import CamelModel


class CampaignStatus(str, Enum):
    """Closed status enumeration. Transitions are decided upstream."""
    REVIEW = "Review"
    ACTIVE = "Active"
    PAUSED = "Paused"
    COMPLETED = "Completed"
    PENDING = "Pending"


class Campaign(CamelModel):
    """
    Campaign entity as returned by `GET campaigns`.
    Display fields (current_spend, budget_utilized, ...) are nullable:
    consumers pick their own fallback.

    `publishers` and `rule_groups` are passed through untyped. The read
    endpoint does not fix their shape or key casing; the typed PascalCase
    `CampaignRuleGroup` only applies to the create body.
    """
    # Identity
    id: str

    # Descriptive
    name: str
    description: str = ""
    client_id: str = ""
    client_name: str

    # Status
    status: CampaignStatus

    # Temporal
    start_date: datetime
    end_date: Optional[datetime] = None
    created_date: datetime
    modified_date: Optional[datetime] = None
    created_by: str = ""
    modified_by: str = ""

    # Ownership
    org_id: Optional[int] = None
    priority: Optional[int] = None

    # Financial
    currency_code: str = "USD"
    budget: float
    threshold: float = 0
    mark_up: float = 0
    mark_down: Optional[float] = None
    cpa: Optional[float] = None
    cpc: float = 0
    bid_type: str = ""

    # Targeting metadata (opaque pass-through)
    publishers: List[Any] = Field(default_factory=list)
    rule_groups: List[Dict[str, Any]] = Field(default_factory=list)
    is_job_expansion_enabled: bool = False
    is_job_code_required: bool = False
    sub_group_name: str = ""
    sub_group_priority: Optional[int] = None
    apply_type: Optional[str] = None

    # Threshold notifications
    pre_threshold_notified_at: Optional[datetime] = None
    threshold_notified_at: Optional[datetime] = None

    # Calculated fields for display
    current_spend: Optional[float] = None
    budget_utilized: Optional[float] = None  # percentage, not clamped
    achieved_ctas: Optional[float] = Field(default=None, alias="achievedCTAs")
    cost_per_action: Optional[float] = None
