"""
Tests for the campaign list pipeline: search, status filter, pagination.
"""
import math

import pytest

from centriq_backend.core.exceptions import ValidationError
from centriq_backend.core.listing import (
    ListViewState,
    derive_page,
    filter_campaigns,
    resolve_status_filter,
    status_label,
)
from centriq_backend.models.campaign import CampaignStatus
from factories import make_campaign


def dashboard_campaigns():
    """Twelve campaigns: one mentions Uber, five are active."""
    rows = [
        ("Drivers For Ubers", "GlobalTech Solutions", "Active"),
        ("Warehouse Associates", "Acme Logistics", "Active"),
        ("Night Nurses", "Mercy Health", "Active"),
        ("Retail Leads", "ShopRight", "Active"),
        ("Line Cooks", "Diner Group", "Active"),
        ("Forklift Operators", "Acme Logistics", "Paused"),
        ("Bank Tellers", "First Bank", "Review"),
        ("Data Analysts", "Insight Co", "Review"),
        ("Truck Drivers", "RoadRunner", "Pending"),
        ("Call Center", "TalkTime", "Pending"),
        ("Summer Interns", "Campus Hire", "Completed"),
        ("Cashiers", "ShopRight", "Paused"),
    ]
    return [
        make_campaign(id=f"c-{i}", name=name, clientName=client, status=status)
        for i, (name, client, status) in enumerate(rows, start=1)
    ]


class TestStatusFilter:
    """Dashboard label table"""

    @pytest.mark.parametrize("label,expected", [
        ("All States", None),
        ("all", None),
        ("Active", CampaignStatus.ACTIVE),
        ("In Review", CampaignStatus.REVIEW),
        ("Paused", CampaignStatus.PAUSED),
        ("Alerts", CampaignStatus.PENDING),
        ("Warning", CampaignStatus.COMPLETED),
        ("Completed", CampaignStatus.COMPLETED),
        ("  in review ", CampaignStatus.REVIEW),
    ])
    def test_label_mapping(self, label, expected):
        assert resolve_status_filter(label) == expected

    def test_blank_means_no_filter(self):
        assert resolve_status_filter(None) is None
        assert resolve_status_filter("   ") is None

    def test_unknown_label_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            resolve_status_filter("Archived")
        assert exc_info.value.field == "status"

    def test_review_label(self):
        assert status_label(CampaignStatus.REVIEW) == "In Review"


class TestFiltering:

    def test_search_matches_name_or_client_case_insensitively(self):
        campaigns = dashboard_campaigns()
        assert [c.name for c in filter_campaigns(campaigns, "uber")] == ["Drivers For Ubers"]
        assert len(filter_campaigns(campaigns, "ACME")) == 2

    def test_empty_search_passes_everything(self):
        campaigns = dashboard_campaigns()
        assert filter_campaigns(campaigns, "") == campaigns

    @pytest.mark.parametrize("query", ["", "er", "Acme", "zzz", "shop"])
    def test_search_is_idempotent(self, query):
        once = filter_campaigns(dashboard_campaigns(), query)
        assert filter_campaigns(once, query) == once

    def test_filters_preserve_fetch_order(self):
        campaigns = dashboard_campaigns()
        active = filter_campaigns(campaigns, status=CampaignStatus.ACTIVE)
        assert [c.id for c in active] == ["c-1", "c-2", "c-3", "c-4", "c-5"]

    def test_uber_active_scenario(self):
        campaigns = dashboard_campaigns()
        assert len(filter_campaigns(campaigns, "Uber")) == 1
        assert len(filter_campaigns(campaigns, status=CampaignStatus.ACTIVE)) == 5

        state = ListViewState.from_query(search="Uber", status="Active", page=1, page_size=10)
        result = derive_page(campaigns, state)

        intersection = filter_campaigns(campaigns, "Uber", CampaignStatus.ACTIVE)
        assert [c.id for c in result["items"]] == [c.id for c in intersection]
        assert result["pages"] == math.ceil(len(intersection) / 10)
        assert result["start_item"] == 1
        assert result["end_item"] == 1


class TestPaging:

    @pytest.mark.parametrize("page_size", [1, 5, 10, 25])
    def test_pages_concatenate_to_filtered_collection(self, page_size):
        campaigns = dashboard_campaigns()
        pages = derive_page(campaigns, ListViewState(page_size=page_size))["pages"]

        seen = []
        for page in range(1, pages + 1):
            seen.extend(derive_page(campaigns, ListViewState(page=page, page_size=page_size))["items"])

        assert [c.id for c in seen] == [c.id for c in campaigns]

    @pytest.mark.parametrize("page", [1, 2, 3])
    def test_item_range_bounds(self, page):
        result = derive_page(dashboard_campaigns(), ListViewState(page=page, page_size=5))
        assert 1 <= result["start_item"] <= result["end_item"] <= result["total"]

    def test_empty_result_hides_item_range(self):
        result = derive_page(dashboard_campaigns(), ListViewState(search="nothing matches"))
        assert result["total"] == 0
        assert result["page"] == 1
        assert result["pages"] == 0
        assert result["items"] == []
        assert result["start_item"] is None
        assert result["end_item"] is None

    def test_out_of_range_page_clamps_to_last(self):
        result = derive_page(dashboard_campaigns(), ListViewState(page=9, page_size=5))
        assert result["page"] == 3
        assert [c.id for c in result["items"]] == ["c-11", "c-12"]
        assert result["has_next"] is False


class TestListViewState:

    def test_changing_page_size_resets_page(self):
        state = ListViewState(page=3, page_size=10)
        assert state.with_page_size(25).page == 1

    def test_changing_search_or_status_resets_page(self):
        state = ListViewState(page=2)
        assert state.with_search(" uber ").page == 1
        assert state.with_search(" uber ").search == "uber"
        assert state.with_status("Paused").page == 1
        assert state.with_status("Paused").status == CampaignStatus.PAUSED

    def test_with_page_keeps_filters(self):
        state = ListViewState(search="acme", status=CampaignStatus.ACTIVE).with_page(2)
        assert (state.search, state.status, state.page) == ("acme", CampaignStatus.ACTIVE, 2)

    def test_page_never_below_one(self):
        assert ListViewState(page=0).page == 1
        assert ListViewState().with_page(-4).page == 1

    def test_unsupported_page_size_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            ListViewState.from_query(page_size=7)
        assert exc_info.value.field == "page_size"

    def test_default_page_size(self):
        assert ListViewState.from_query().page_size == 10
