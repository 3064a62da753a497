"""
API dependencies - shared across all routes.
"""
import httpx
from fastapi import Depends, Request

from centriq_backend.config import settings
from centriq_backend.core.cache import ResponseCache
from centriq_backend.repositories.campaign_repo import CampaignRepository
from centriq_backend.repositories.client_repo import ClientRepository
from centriq_backend.repositories.feed_repo import FeedRepository
from centriq_backend.repositories.report_repo import ReportRepository
from centriq_backend.services.campaign_service import CampaignService
from centriq_backend.services.client_service import ClientService
from centriq_backend.services.feed_service import FeedService


def get_cache(request: Request) -> ResponseCache:
    """The process-wide response cache created at startup."""
    return request.app.state.cache


def get_http_client(request: Request) -> httpx.AsyncClient:
    """The shared upstream HTTP client created at startup."""
    return request.app.state.http_client


def get_campaign_repo(
    client: httpx.AsyncClient = Depends(get_http_client),
    cache: ResponseCache = Depends(get_cache)
) -> CampaignRepository:
    return CampaignRepository(client, cache, settings.API_BASE_URL)


def get_report_repo(
    client: httpx.AsyncClient = Depends(get_http_client),
    cache: ResponseCache = Depends(get_cache)
) -> ReportRepository:
    return ReportRepository(client, cache, settings.REPORTS_API_URL, api_key=settings.REPORTS_API_KEY)


def get_feed_repo(
    client: httpx.AsyncClient = Depends(get_http_client),
    cache: ResponseCache = Depends(get_cache)
) -> FeedRepository:
    return FeedRepository(client, cache, settings.API_BASE_URL)


def get_client_repo(
    client: httpx.AsyncClient = Depends(get_http_client),
    cache: ResponseCache = Depends(get_cache)
) -> ClientRepository:
    return ClientRepository(client, cache, settings.API_BASE_URL)


def get_campaign_service(
    campaign_repo: CampaignRepository = Depends(get_campaign_repo),
    report_repo: ReportRepository = Depends(get_report_repo)
) -> CampaignService:
    return CampaignService(campaign_repo, report_repo)


def get_feed_service(feed_repo: FeedRepository = Depends(get_feed_repo)) -> FeedService:
    return FeedService(feed_repo)


def get_client_service(client_repo: ClientRepository = Depends(get_client_repo)) -> ClientService:
    return ClientService(client_repo)
