"""
Custom exceptions for the Centriq dashboard API.
Provides consistent error handling across the application.
"""
from typing import Optional

from fastapi import HTTPException, status


class DashboardException(Exception):
    """Base exception for the dashboard backend"""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class NotFoundError(DashboardException):
    """Resource not found"""
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str = "Resource", resource_id: str = None):
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(message)


class ValidationError(DashboardException):
    """Validation failed"""
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY

    def __init__(self, message: str = "Validation failed", field: str = None):
        self.field = field
        if field:
            message = f"Validation failed for field '{field}': {message}"
        super().__init__(message)


class BusinessRuleError(DashboardException):
    """Request is well formed but not allowed in the current state"""
    status_code = status.HTTP_409_CONFLICT


class UpstreamError(DashboardException):
    """Base for failures talking to the upstream REST services"""
    status_code = status.HTTP_502_BAD_GATEWAY

    def __init__(self, service: str = "Upstream service", message: str = None):
        self.service = service
        msg = f"{service} call failed"
        if message:
            msg = f"{msg}: {message}"
        super().__init__(msg)


class UpstreamUnavailableError(UpstreamError):
    """Network or transport failure, including timeouts"""
    status_code = status.HTTP_504_GATEWAY_TIMEOUT


class UpstreamHTTPError(UpstreamError):
    """Upstream answered with a non-2xx status"""

    def __init__(self, service: str, upstream_status: int, message: Optional[str] = None):
        self.upstream_status = upstream_status
        detail = f"HTTP error! status: {upstream_status}"
        if message:
            detail = f"{detail} ({message})"
        super().__init__(service, detail)


class UpstreamPayloadError(UpstreamError):
    """Upstream answered 2xx but the body does not match the documented shape"""


# HTTP Exception helpers
def raise_validation_error(message: str = "Validation failed", field: str = None):
    """Raise 422 HTTPException"""
    err = ValidationError(message, field)
    raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=err.message)
