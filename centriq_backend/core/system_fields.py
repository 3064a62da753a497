"""
Catalog of Centriq system fields a client job feed is mapped onto.
"""
from dataclasses import dataclass
from typing import List, Literal, Optional

DataType = Literal["string", "number", "boolean", "date", "url", "email"]
Category = Literal["basic", "location", "experience", "financial", "metadata"]


@dataclass(frozen=True)
class SystemField:
    name: str
    required: bool
    description: str = ""
    data_type: DataType = "string"
    category: Category = "basic"


SYSTEM_FIELDS: List[SystemField] = [
    # Required fields
    SystemField("CentriQ_Title", True, "Job title or position name", "string", "basic"),
    SystemField("CentriQ_Description", True, "Job description content", "string", "basic"),
    SystemField("CentriQ_City", True, "Job location city", "string", "location"),
    SystemField("CentriQ_ApplyUrl", True, "URL where candidates can apply", "url", "basic"),

    # Optional fields - Location
    SystemField("CentriQ_State", False, "Job location state/province", "string", "location"),
    SystemField("CentriQ_ZipCode", False, "Job location postal code", "string", "location"),
    SystemField("CentriQ_CountryCode", False, "Job location country code", "string", "location"),

    # Optional fields - Experience
    SystemField("CentriQ_MinExperience", False, "Minimum years of experience required", "number", "experience"),
    SystemField("CentriQ_MaxExperience", False, "Maximum years of experience preferred", "number", "experience"),

    # Optional fields - Financial
    SystemField("CentriQ_CostPerClick", False, "Cost per click for job posting", "number", "financial"),
    SystemField("CentriQ_CostPerApplicant", False, "Cost per applicant for job posting", "number", "financial"),

    # Optional fields - Metadata
    SystemField("CentriQ_ViewUrl", False, "URL to view job details", "url", "metadata"),
    SystemField("CentriQ_JobCode", False, "Internal job code or reference", "string", "metadata"),
    SystemField("CentriQ_Client", False, "Client identifier or name", "string", "metadata"),
    SystemField("CentriQ_CampaignInfo", False, "Campaign information or metadata", "string", "metadata"),
]


def get_required_fields() -> List[SystemField]:
    return [field for field in SYSTEM_FIELDS if field.required]


def get_optional_fields() -> List[SystemField]:
    return [field for field in SYSTEM_FIELDS if not field.required]


def get_fields_by_category(category: Category) -> List[SystemField]:
    return [field for field in SYSTEM_FIELDS if field.category == category]


def get_field_by_name(name: str) -> Optional[SystemField]:
    return next((field for field in SYSTEM_FIELDS if field.name == name), None)


def ordered_fields() -> List[SystemField]:
    """Required fields first, then alphabetical - the order of the mapping form."""
    return sorted(SYSTEM_FIELDS, key=lambda field: (not field.required, field.name))
