"""
Feed onboarding schemas - validation, field mapping and campaign setup.
"""
from typing import Optional, List, Literal

from pydantic import BaseModel, EmailStr, Field, HttpUrl, field_validator

from centriq_backend.models.base import CamelModel
from centriq_backend.models.feed import ValidationResult, FeedStructure


UNSELECTED = "Select Node"


class FeedValidationRequest(CamelModel):
    """Validate a client's job feed."""
    feed_url: HttpUrl
    client_id: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {"feedUrl": "https://example.com/jobs.xml", "clientId": "ae6b4817"}
        }


class OnboardingForm(CamelModel):
    """First step of the client onboarding wizard."""
    client_name: str = Field(min_length=1)
    client_email: EmailStr
    feed_url: HttpUrl

    @field_validator("client_name")
    @classmethod
    def client_name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Client name is required")
        return value.strip()


class FeedAnalysis(CamelModel):
    """Validation result plus the feed's nodes and fields when it is valid."""
    validation_result: ValidationResult
    detected_format_name: str
    nodes: List[str] = Field(default_factory=list)
    feed_structure: Optional[FeedStructure] = None
    available_fields: List[str] = Field(default_factory=list)


class FieldMapping(CamelModel):
    """One system field paired with the chosen feed field."""
    central_field: str
    feed_field: str = UNSELECTED
    is_required: bool = False


class SystemFieldResponse(CamelModel):
    name: str
    required: bool
    description: str
    data_type: str
    category: str


class SystemFieldCatalog(CamelModel):
    fields: List[SystemFieldResponse]
    default_mappings: List[FieldMapping]


class MappingCheckRequest(CamelModel):
    field_mappings: List[FieldMapping]


class MappingReport(CamelModel):
    """Readiness of a mapping set. Only missing required fields block."""
    ready: bool
    missing_required: List[str]
    unmapped_optional: List[str]
    unmapped_optional_count: int
    hint: Optional[str] = None


class MappingExportRequest(CamelModel):
    client_name: str = ""
    client_email: str = ""
    feed_url: str = ""
    validation_result: Optional[ValidationResult] = None
    field_mappings: List[FieldMapping]


class CampaignSettings(CamelModel):
    frequency: Literal["hourly", "daily", "weekly"] = "daily"
    auto_approve: bool = False
    notifications: bool = True


class CampaignSetupRequest(CamelModel):
    """Final step of the wizard: create a campaign from a mapped feed."""
    client_id: str
    validation_id: str
    field_mappings: List[FieldMapping]
    campaign_name: str = Field(min_length=1)
    campaign_settings: Optional[CampaignSettings] = None

    class Config:
        json_schema_extra = {
            "example": {
                "clientId": "ae6b4817-5c16-4b3d-8e44-ca468c67ef4f",
                "validationId": "k2j3h4g5f",
                "fieldMappings": [
                    {"centralField": "CentriQ_Title", "feedField": "job_title", "isRequired": True}
                ],
                "campaignName": "Drivers For Ubers",
                "campaignSettings": {"frequency": "daily", "autoApprove": False, "notifications": True}
            }
        }


class CampaignSetupResponse(CamelModel):
    campaign_id: str = ""
    status: Literal["pending", "active", "error"]
    message: str
    next_steps: Optional[List[str]] = None


class FeedResetResponse(BaseModel):
    evicted: int
    prefixes: List[str]
