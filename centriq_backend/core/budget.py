"""
Budget and goal derivations for the campaign overview.

Upstream sometimes supplies budget utilization and sometimes only the raw
spend; the server value wins when present.
"""
from typing import Optional, Tuple

from centriq_backend.models.campaign import Campaign


SOURCE_SERVER = "server"
SOURCE_COMPUTED = "computed"
SOURCE_UNAVAILABLE = "unavailable"


def resolve_budget_utilized(campaign: Campaign) -> Tuple[Optional[float], str]:
    """
    Budget utilization percentage and where it came from.
    Not clamped: overspend shows as > 100.
    """
    if campaign.budget_utilized is not None:
        return campaign.budget_utilized, SOURCE_SERVER
    if campaign.current_spend is not None and campaign.budget > 0:
        return round(campaign.current_spend / campaign.budget * 100, 2), SOURCE_COMPUTED
    return None, SOURCE_UNAVAILABLE


def remaining_budget(budget: float, current_spend: Optional[float]) -> Optional[float]:
    if current_spend is None:
        return None
    return budget - current_spend


def goal_progress(target: Optional[float], current: Optional[float]) -> dict:
    """
    Application goal figures. Progress is None without a positive target
    and is not clamped, so an overshoot shows as > 100.
    """
    if target is None or current is None:
        return {"applications_needed": None, "goal_progress": None}
    needed = max(target - current, 0)
    if target <= 0:
        return {"applications_needed": needed, "goal_progress": None}
    return {"applications_needed": needed, "goal_progress": round(current / target * 100, 2)}


def budget_summary(
    campaign: Campaign,
    target_applications: Optional[float] = None,
    current_applications: Optional[float] = None
) -> dict:
    utilized, source = resolve_budget_utilized(campaign)
    return {
        "total_budget": campaign.budget,
        "current_spend": campaign.current_spend,
        "remaining_budget": remaining_budget(campaign.budget, campaign.current_spend),
        "budget_utilized": utilized,
        "budget_utilized_source": source,
        "target_applications": target_applications,
        "current_applications": current_applications,
        **goal_progress(target_applications, current_applications),
    }
