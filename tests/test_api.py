"""
HTTP surface tests: FastAPI TestClient against a fake upstream.
"""
from datetime import datetime, timedelta

from centriq_backend.core.system_fields import SYSTEM_FIELDS
from factories import campaign_payload

JOBSTATS_PATH = "/api/v3/reports/programmatic/jobstats"


def seed_campaigns(upstream, *campaigns):
    campaigns = campaigns or (campaign_payload(),)
    upstream.add("GET", "/api/campaigns", json={
        "campaigns": list(campaigns), "total": len(campaigns), "page": 1, "pageSize": 10
    })


def full_mapping(skip=()):
    return [
        {"centralField": f.name, "feedField": "Select Node" if f.name in skip else f"feed_{f.name}",
         "isRequired": f.required}
        for f in SYSTEM_FIELDS
    ]


class TestRoot:

    def test_root(self, api):
        response = api.get("/")
        assert response.status_code == 200
        assert response.json()["docs"] == "/docs"

    def test_health(self, api):
        response = api.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestCampaignList:

    def test_search_and_status_filter(self, api, upstream):
        seed_campaigns(
            upstream,
            campaign_payload(id="c-1", name="Drivers For Ubers", status="Active"),
            campaign_payload(id="c-2", name="Uber Eats Couriers", status="Paused"),
            campaign_payload(id="c-3", name="Night Nurses", status="Active"),
        )

        response = api.get("/api/campaigns/", params={"q": "uber", "status": "Active"})

        assert response.status_code == 200
        body = response.json()
        assert [c["id"] for c in body["items"]] == ["c-1"]
        assert body["total"] == 1
        assert body["startItem"] == 1
        assert body["endItem"] == 1
        assert body["items"][0]["statusLabel"] == "Active"
        assert body["items"][0]["formattedBudget"] == "$8,000.00"
        assert body["statusOptions"][0] == "All States"

    def test_empty_page(self, api, upstream):
        seed_campaigns(upstream)
        body = api.get("/api/campaigns/", params={"q": "nothing"}).json()
        assert body["total"] == 0
        assert body["page"] == 1
        assert body["startItem"] is None

    def test_server_side_filters_are_forwarded(self, api, upstream):
        seed_campaigns(upstream)
        response = api.get("/api/campaigns/", params={
            "client": "GlobalTech", "status_filter": "Active", "start": "2025-06-01", "end": "2025-06-30"
        })
        assert response.status_code == 200
        params = upstream.last("GET", "/api/campaigns").url.params
        assert params["client"] == "GlobalTech"
        assert params["status"] == "Active"
        assert params["startDate"].startswith("2025-06-01T00:00:00")
        assert params["endDate"].startswith("2025-06-30T23:59:59")

    def test_half_open_date_range_rejected(self, api, upstream):
        seed_campaigns(upstream)
        response = api.get("/api/campaigns/", params={"start": "2025-06-01"})
        assert response.status_code == 422
        assert "'end'" in response.json()["detail"]

    def test_unknown_status_label(self, api, upstream):
        seed_campaigns(upstream)
        response = api.get("/api/campaigns/", params={"status": "Archived"})
        assert response.status_code == 422
        assert "Unknown status filter" in response.json()["detail"]

    def test_unsupported_page_size(self, api, upstream):
        seed_campaigns(upstream)
        response = api.get("/api/campaigns/", params={"page_size": 7})
        assert response.status_code == 422

    def test_upstream_failure_is_a_bad_gateway(self, api, upstream):
        upstream.add("GET", "/api/campaigns", json={}, status_code=503)
        response = api.get("/api/campaigns/")
        assert response.status_code == 502
        assert response.json() == {"detail": "Campaign API call failed: HTTP error! status: 503"}

    def test_list_is_served_from_cache(self, api, upstream):
        seed_campaigns(upstream)
        api.get("/api/campaigns/")
        api.get("/api/campaigns/", params={"page": 2})
        assert upstream.count("GET", "/api/campaigns") == 1

        assert api.delete("/api/cache", params={"prefix": "campaigns"}).json() == {
            "prefix": ["campaigns"], "evicted": 1
        }
        api.get("/api/campaigns/")
        assert upstream.count("GET", "/api/campaigns") == 2


class TestCampaignDetail:

    def test_get_campaign(self, api, upstream):
        seed_campaigns(upstream, campaign_payload(currentSpend=2000))
        body = api.get("/api/campaigns/c-1").json()
        assert body["budgetUtilized"] == 25.0
        assert body["budgetUtilizedSource"] == "computed"
        assert body["formattedStartDate"] == "06/15/2025"

    def test_missing_campaign(self, api, upstream):
        seed_campaigns(upstream)
        response = api.get("/api/campaigns/nope")
        assert response.status_code == 404
        assert response.json() == {"detail": "Campaign with id 'nope' not found"}

    def test_create_campaign(self, api, upstream):
        upstream.add("POST", "/api/campaign", json=campaign_payload(id="c-new"))
        response = api.post("/api/campaigns/", json={
            "OrgId": 552499,
            "Name": "Drivers For Ubers",
            "StartDate": "2025-06-15T00:00:00",
            "Budget": 8000,
            "ClientName": "GlobalTech Solutions",
        })
        assert response.status_code == 201
        assert response.json()["id"] == "c-new"

    def test_create_campaign_rejects_inverted_dates(self, api):
        response = api.post("/api/campaigns/", json={
            "OrgId": 1, "Name": "x", "StartDate": "2025-06-15T00:00:00", "EndDate": "2025-06-01T00:00:00",
            "Budget": 10, "ClientName": "y",
        })
        assert response.status_code == 422


class TestCampaignOverview:

    def test_overview_with_stats(self, api, upstream):
        seed_campaigns(upstream, campaign_payload(currentSpend=6000))
        upstream.add("POST", JOBSTATS_PATH, json={
            "Clicks": 203,
            "Campaign_stats": [
                {"Activity_date": "2025-06-16T00:00:00", "Click_count": 52, "Apply_count": 3, "Spent": 100},
                {"Activity_date": "2025-06-15T00:00:00", "Click_count": 45, "Apply_count": 2, "Spent": 90},
            ],
        })

        response = api.get("/api/campaigns/c-1/overview", params={"to_date": "2025-07-14"})

        assert response.status_code == 200
        body = response.json()
        assert body["statsError"] is None
        assert body["stats"]["Clicks"] == 203
        assert [p["date"] for p in body["chart"]["points"]] == ["2025-06-15", "2025-06-16"]
        assert body["budget"]["remainingBudget"] == 2000
        assert body["duration"] == "30 days"
        assert body["dateRange"] == "June 15, 2025 - July 14, 2025"
        sent = upstream.last("POST", JOBSTATS_PATH).read().replace(b" ", b"")
        assert b'"FromDate":"2025-06-15"' in sent
        assert b'"CampaignName":"DriversForUbers"' in sent

    def test_stats_failure_becomes_data(self, api, upstream):
        seed_campaigns(upstream)
        upstream.add("POST", JOBSTATS_PATH, json={}, status_code=500)

        response = api.get("/api/campaigns/c-1/overview")

        assert response.status_code == 200
        body = response.json()
        assert body["stats"] is None
        assert body["statsError"] == "Reports API call failed: HTTP error! status: 500"
        assert body["chart"]["countDomain"] == [0, 100]

    def test_campaign_without_org(self, api, upstream):
        seed_campaigns(upstream, campaign_payload(orgId=None))
        body = api.get("/api/campaigns/c-1/overview").json()
        assert body["statsError"] == "Campaign has no organization id"
        assert upstream.count("POST", JOBSTATS_PATH) == 0

    def test_campaign_starting_in_the_future(self, api, upstream):
        start = (datetime.now() + timedelta(days=10)).replace(hour=0, minute=0, second=0, microsecond=0)
        seed_campaigns(upstream, campaign_payload(status="Pending", startDate=start.isoformat(), endDate=None))

        response = api.get("/api/campaigns/c-1/overview")

        assert response.status_code == 200
        body = response.json()
        assert body["stats"] is None
        assert body["statsError"] == f"No activity before the campaign starts on {start.strftime('%m/%d/%Y')}"
        assert body["dateRange"].endswith(" - ongoing")
        assert upstream.count("POST", JOBSTATS_PATH) == 0

    def test_malformed_stats_become_data(self, api, upstream):
        seed_campaigns(upstream)
        upstream.add("POST", JOBSTATS_PATH, json={
            "Campaign_stats": [{"Activity_date": "06/15/2025", "Click_count": 45}],
        })

        response = api.get("/api/campaigns/c-1/overview")

        assert response.status_code == 200
        body = response.json()
        assert body["statsError"] == "Reports API call failed: Unexpected JobStatsResponse payload"
        assert body["chart"]["points"] == []

    def test_goal_progress_from_stats(self, api, upstream):
        seed_campaigns(upstream)
        upstream.add("POST", JOBSTATS_PATH, json={"Applies": 11})

        body = api.get("/api/campaigns/c-1/overview", params={"target_applications": 20}).json()

        assert body["budget"]["currentApplications"] == 11
        assert body["budget"]["applicationsNeeded"] == 9
        assert body["budget"]["goalProgress"] == 55.0

    def test_goal_progress_falls_back_to_achieved_ctas(self, api, upstream):
        seed_campaigns(upstream, campaign_payload(orgId=None, achievedCTAs=30))

        body = api.get("/api/campaigns/c-1/overview", params={"target_applications": 0}).json()

        assert body["budget"]["currentApplications"] == 30
        assert body["budget"]["applicationsNeeded"] == 0
        assert body["budget"]["goalProgress"] is None

    def test_inverted_range(self, api, upstream):
        seed_campaigns(upstream)
        response = api.get("/api/campaigns/c-1/overview", params={
            "from_date": "2025-07-01", "to_date": "2025-06-01"
        })
        assert response.status_code == 422


class TestCampaignActions:

    def test_pause_active(self, api, upstream):
        seed_campaigns(upstream)
        response = api.post("/api/campaigns/c-1/pause")
        assert response.status_code == 200
        assert response.json()["requestedStatus"] == "Paused"

    def test_pause_paused_conflicts(self, api, upstream):
        seed_campaigns(upstream, campaign_payload(status="Paused"))
        assert api.post("/api/campaigns/c-1/pause").status_code == 409
        assert api.post("/api/campaigns/c-1/resume").json()["requestedStatus"] == "Active"

    def test_resume_active_conflicts(self, api, upstream):
        seed_campaigns(upstream)
        response = api.post("/api/campaigns/c-1/resume")
        assert response.status_code == 409
        assert "paused" in response.json()["detail"]


class TestCampaignSetup:

    def test_refused_until_required_fields_mapped(self, api, upstream):
        response = api.post("/api/campaigns/setup", json={
            "clientId": "cl-1",
            "validationId": "v-1",
            "campaignName": "Drivers",
            "fieldMappings": full_mapping(skip={"CentriQ_ApplyUrl"}),
        })
        assert response.status_code == 409
        assert "CentriQ_ApplyUrl" in response.json()["detail"]
        assert upstream.count("POST", "/api/campaign/setup") == 0

    def test_only_mapped_entries_are_sent(self, api, upstream):
        upstream.add("POST", "/api/campaign/setup", json={
            "campaignId": "c-9", "status": "pending", "message": "queued"
        })
        response = api.post("/api/campaigns/setup", json={
            "clientId": "cl-1",
            "validationId": "v-1",
            "campaignName": "Drivers",
            "fieldMappings": full_mapping(skip={"CentriQ_JobCode", "CentriQ_State"}),
        })
        assert response.status_code == 200
        assert response.json()["campaignId"] == "c-9"
        sent = upstream.last("POST", "/api/campaign/setup").read()
        assert b"CentriQ_JobCode" not in sent
        assert b"Select Node" not in sent


class TestFeed:

    def test_system_fields(self, api):
        body = api.get("/api/feed/system-fields").json()
        assert len(body["fields"]) == 15
        assert body["fields"][0]["required"] is True
        assert body["defaultMappings"][0]["feedField"] == "Select Node"

    def test_system_fields_by_category(self, api):
        body = api.get("/api/feed/system-fields", params={"category": "financial"}).json()
        assert [f["name"] for f in body["fields"]] == ["CentriQ_CostPerApplicant", "CentriQ_CostPerClick"]

    def test_analyze_valid_feed(self, api, upstream):
        upstream.add("POST", "/api/feed/validate", json={
            "isValid": True, "detectedFormat": 1, "totalRecords": 120, "validationId": "v-1"
        })
        upstream.add("GET", "/api/feed/nodes/v-1", json={
            "nodes": ["job", "title"], "feedStructure": {"rootElement": "jobs", "itemElement": "job"}
        })
        upstream.add("GET", "/api/feed/fields/v-1", json={"fields": ["title", "city"]})

        response = api.post("/api/feed/analyze", json={"feedUrl": "https://example.com/jobs.xml"})

        assert response.status_code == 200
        body = response.json()
        assert body["detectedFormatName"] == "XML"
        assert body["availableFields"] == ["title", "city"]
        assert body["feedStructure"]["itemElement"] == "job"

    def test_analyze_invalid_feed_skips_lookups(self, api, upstream):
        upstream.add("POST", "/api/feed/validate", json={
            "isValid": False, "errorMessage": "Malformed XML", "validationErrors": ["line 3"]
        })
        body = api.post("/api/feed/analyze", json={"feedUrl": "https://example.com/jobs.xml"}).json()
        assert body["nodes"] == []
        assert body["validationResult"]["errorMessage"] == "Malformed XML"
        assert upstream.count("GET", "/api/feed/fields/v-1") == 0

    def test_onboarding_form_validation(self, api):
        response = api.post("/api/feed/onboarding", json={
            "clientName": "GlobalTech", "clientEmail": "not-an-email", "feedUrl": "https://example.com/jobs.xml"
        })
        assert response.status_code == 422

    def test_feed_unreachable(self, api, upstream):
        upstream.add("POST", "/api/feed/validate", json={"message": "down"}, status_code=502)
        response = api.post("/api/feed/validate", json={"feedUrl": "https://example.com/jobs.xml"})
        assert response.status_code == 502

    def test_mapping_check(self, api):
        body = api.post("/api/feed/mappings/check", json={
            "fieldMappings": full_mapping(skip={"CentriQ_Title"})
        }).json()
        assert body["ready"] is False
        assert body["missingRequired"] == ["CentriQ_Title"]

    def test_mapping_check_unknown_field(self, api):
        response = api.post("/api/feed/mappings/check", json={
            "fieldMappings": [{"centralField": "CentriQ_Salary", "feedField": "pay"}]
        })
        assert response.status_code == 422

    def test_mapping_export(self, api):
        body = api.post("/api/feed/mappings/export", json={
            "clientName": "GlobalTech",
            "fieldMappings": full_mapping(skip={"CentriQ_State"}),
        }).json()
        assert body["mappingCount"]["mapped"] == 14
        assert body["unmappedFields"] == [{"centriqField": "CentriQ_State", "isRequired": False}]

    def test_reset(self, api, upstream):
        upstream.add("GET", "/api/feed/nodes/v-1", json={"nodes": ["job"]})
        api.get("/api/feed/v-1/nodes")
        body = api.delete("/api/feed/cache").json()
        assert body["evicted"] == 1


class TestClientsAndReports:

    def test_create_client(self, api, upstream):
        upstream.add("POST", "/api/clients", json={
            "id": "cl-1", "name": "GlobalTech", "type": "business", "email": "talent@globaltech.example",
            "createdAt": "2025-01-01T00:00:00", "updatedAt": "2025-01-01T00:00:00",
        })
        response = api.post("/api/clients/", json={
            "name": "GlobalTech", "type": "business", "email": "talent@globaltech.example"
        })
        assert response.status_code == 201
        assert response.json()["status"] == "pending"

    def test_create_client_rejects_bad_email(self, api):
        response = api.post("/api/clients/", json={"name": "GlobalTech", "type": "business", "email": "nope"})
        assert response.status_code == 422

    def test_job_stats(self, api, upstream):
        upstream.add("POST", JOBSTATS_PATH, json={"OrgId": 552499, "Applies": 11})
        response = api.post("/api/reports/jobstats", json={
            "FromDate": "2025-06-15", "ToDate": "2025-07-20", "OrgId": 552499
        })
        assert response.status_code == 200
        assert response.json()["Applies"] == 11
