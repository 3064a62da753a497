"""
Client model - advertisers whose job feeds are onboarded.
"""
from datetime import datetime
from typing import Optional, Literal

from centriq_backend.models.base import CamelModel


ClientType = Literal["individual", "business"]
ClientStatus = Literal["active", "inactive", "pending"]


class Client(CamelModel):
    """Client as returned by `GET clients`."""
    id: str
    name: str
    type: ClientType
    email: str
    phone: Optional[str] = None
    status: ClientStatus = "pending"
    created_at: datetime
    updated_at: datetime
