"""
Common schemas used across multiple endpoints.
"""
from typing import List
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str

    class Config:
        json_schema_extra = {"example": {"detail": "Campaign API call failed: HTTP error! status: 503"}}


# Documented on every router that reaches an upstream API
ERROR_RESPONSES = {
    404: {"model": ErrorResponse, "description": "Resource not found"},
    409: {"model": ErrorResponse, "description": "Not allowed in the current state"},
    502: {"model": ErrorResponse, "description": "Upstream API failed"},
    504: {"model": ErrorResponse, "description": "Upstream API unreachable or timed out"},
}


class CacheInvalidation(BaseModel):
    """Result of a cache eviction."""
    prefix: List[str]
    evicted: int


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str = "1.0.0"
    cached_responses: int = 0
