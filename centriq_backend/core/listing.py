"""
List derivation for table views.

Raw fetched campaigns -> search filter -> status filter -> one page.
Both filters run before pagination and preserve the fetch order.
"""
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Sequence

from centriq_backend.config import settings
from centriq_backend.core.exceptions import ValidationError
from centriq_backend.core.pagination import paginate
from centriq_backend.models.campaign import Campaign, CampaignStatus


ALL_STATES = "All States"

# Dashboard filter vocabulary -> status enumeration. None means "no filter".
# "Alerts" and "Warning" have no counterpart in the enumeration; they are
# bound to Pending and Completed as the dashboard has always shown them.
STATUS_FILTER_TABLE = {
    "all states": None,
    "all": None,
    "active": CampaignStatus.ACTIVE,
    "in review": CampaignStatus.REVIEW,
    "paused": CampaignStatus.PAUSED,
    "alerts": CampaignStatus.PENDING,
    "warning": CampaignStatus.COMPLETED,
    # raw enumeration values are accepted as-is
    "review": CampaignStatus.REVIEW,
    "pending": CampaignStatus.PENDING,
    "completed": CampaignStatus.COMPLETED,
}

# Labels offered by the status dropdown, in display order
STATUS_FILTER_OPTIONS = [ALL_STATES, "Active", "In Review", "Alerts", "Warning", "Paused"]

STATUS_LABELS = {
    CampaignStatus.ACTIVE: "Active",
    CampaignStatus.REVIEW: "In Review",
    CampaignStatus.PENDING: "Pending",
    CampaignStatus.PAUSED: "Paused",
    CampaignStatus.COMPLETED: "Completed",
}


def resolve_status_filter(label: Optional[str]) -> Optional[CampaignStatus]:
    """
    Map a dashboard filter label onto the status enumeration.

    Returns None for "all". Unknown labels are rejected rather than guessed.
    """
    if label is None or not label.strip():
        return None
    key = label.strip().casefold()
    if key not in STATUS_FILTER_TABLE:
        raise ValidationError(
            f"Unknown status filter '{label}'. Expected one of: {', '.join(STATUS_FILTER_OPTIONS)}",
            field="status",
        )
    return STATUS_FILTER_TABLE[key]


def status_label(status: CampaignStatus) -> str:
    return STATUS_LABELS[status]


def matches_search(campaign: Campaign, query: str) -> bool:
    """Case-insensitive substring match on campaign name or client name."""
    if not query:
        return True
    needle = query.casefold()
    return needle in campaign.name.casefold() or needle in campaign.client_name.casefold()


def matches_status(campaign: Campaign, status: Optional[CampaignStatus]) -> bool:
    return status is None or campaign.status == status


def filter_campaigns(
    campaigns: Iterable[Campaign],
    query: str = "",
    status: Optional[CampaignStatus] = None
) -> List[Campaign]:
    """Search AND status, order preserved."""
    return [
        campaign for campaign in campaigns
        if matches_search(campaign, query) and matches_status(campaign, status)
    ]


def validate_page_size(page_size: int, options: Sequence[int] = None) -> int:
    options = options or settings.PAGE_SIZE_OPTIONS
    if page_size not in options:
        raise ValidationError(
            f"Page size must be one of {', '.join(str(o) for o in options)}",
            field="page_size",
        )
    return page_size


@dataclass(frozen=True)
class ListViewState:
    """
    Current state of a table view.

    Changing the search, the status filter or the page size always goes
    back to page 1 so the user never lands on a page that no longer exists.
    """
    search: str = ""
    status: Optional[CampaignStatus] = None
    page: int = 1
    page_size: int = 10

    def __post_init__(self):
        if self.page < 1:
            object.__setattr__(self, "page", 1)

    @classmethod
    def from_query(
        cls,
        search: Optional[str] = None,
        status: Optional[str] = None,
        page: int = 1,
        page_size: Optional[int] = None
    ) -> "ListViewState":
        """Build a view state from raw request parameters."""
        size = validate_page_size(page_size or settings.DEFAULT_PAGE_SIZE)
        return cls(
            search=(search or "").strip(),
            status=resolve_status_filter(status),
            page=page,
            page_size=size,
        )

    def with_search(self, search: str) -> "ListViewState":
        return replace(self, search=search.strip(), page=1)

    def with_status(self, label: Optional[str]) -> "ListViewState":
        return replace(self, status=resolve_status_filter(label), page=1)

    def with_page_size(self, page_size: int) -> "ListViewState":
        return replace(self, page_size=validate_page_size(page_size), page=1)

    def with_page(self, page: int) -> "ListViewState":
        return replace(self, page=max(page, 1))


def derive_page(campaigns: Sequence[Campaign], state: ListViewState) -> dict:
    """
    Run the full pipeline for one table view.

    Returns the paginated response dictionary (see core.pagination); its
    `page` reflects any clamping applied to an out-of-range request.
    """
    filtered = filter_campaigns(campaigns, state.search, state.status)
    return paginate(filtered, state.page, state.page_size)
