"""
Client schemas.
"""
from typing import Optional

from pydantic import EmailStr, Field

from centriq_backend.models.base import CamelModel
from centriq_backend.models.client import ClientType


class ClientCreate(CamelModel):
    """Create a new client."""
    name: str = Field(min_length=1)
    type: ClientType
    email: EmailStr
    phone: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "name": "GlobalTech Solutions",
                "type": "business",
                "email": "talent@globaltech.example"
            }
        }
