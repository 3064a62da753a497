"""
Base repository over an upstream REST API.
Subclasses name the service, its base URL and the calls it offers.
"""
import logging
from typing import TypeVar, Type, Any, Dict, List, Optional

import httpx
import pydantic

from centriq_backend.core.cache import ResponseCache
from centriq_backend.core.exceptions import (
    UpstreamHTTPError,
    UpstreamPayloadError,
    UpstreamUnavailableError,
)

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=pydantic.BaseModel)


class BaseRepository:
    """
    Thin JSON gateway: one shared httpx client, one shared response cache.
    No retries; failures surface once as Upstream* exceptions.
    """
    service: str = "Upstream API"

    def __init__(self, client: httpx.AsyncClient, cache: ResponseCache, base_url: str):
        self.client = client
        self.cache = cache
        self.base_url = base_url.rstrip("/")

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[dict] = None,
        json: Any = None
    ) -> Any:
        """Send one request and return the decoded JSON body."""
        try:
            response = await self.client.request(
                method,
                self.url(path),
                params=params,
                json=json,
                headers=self.headers,
            )
        except httpx.TimeoutException as e:
            logger.error(f"{self.service} timeout on {method} {path}")
            raise UpstreamUnavailableError(self.service, "Request timeout") from e
        except httpx.HTTPError as e:
            logger.error(f"{self.service} unreachable on {method} {path}: {str(e)}")
            raise UpstreamUnavailableError(self.service, str(e)) from e

        if response.is_error:
            logger.error(f"{self.service} error: {response.status_code} - {response.text}")
            raise UpstreamHTTPError(self.service, response.status_code, _error_detail(response))

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{self.service} returned a non-JSON body for {method} {path}")
            raise UpstreamPayloadError(self.service, "Response is not JSON") from e

    async def get(self, path: str, params: Optional[dict] = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None) -> Any:
        return await self.request("POST", path, json=json)

    def parse(self, model: Type[ModelType], data: Any) -> ModelType:
        """Validate an upstream body against the documented shape."""
        try:
            return model.model_validate(data)
        except pydantic.ValidationError as e:
            logger.error(f"{self.service} payload does not match {model.__name__}: {e.error_count()} error(s)")
            raise UpstreamPayloadError(self.service, f"Unexpected {model.__name__} payload") from e

    def parse_list(self, model: Type[ModelType], data: Any) -> List[ModelType]:
        if not isinstance(data, list):
            raise UpstreamPayloadError(self.service, f"Expected a list of {model.__name__}")
        return [self.parse(model, item) for item in data]


def _error_detail(response: httpx.Response) -> Optional[str]:
    """Best-effort short message from an upstream error body."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        for key in ("message", "detail", "error", "errorMessage"):
            if isinstance(body.get(key), str):
                return body[key]
    return None
