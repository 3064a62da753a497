"""
Feed validation models - results of validating and inspecting a client's
job feed document.
"""
from typing import Optional, List, Union

from pydantic import Field

from centriq_backend.models.base import CamelModel


FORMAT_NAMES = {1: "XML", 2: "JSON", 3: "CSV"}


def format_name(detected_format: Union[int, str, None]) -> str:
    """Normalize the detected feed format (numeric code or name) to a name."""
    if isinstance(detected_format, int):
        return FORMAT_NAMES.get(detected_format, "Unknown")
    if isinstance(detected_format, str):
        if detected_format.isdigit():
            return FORMAT_NAMES.get(int(detected_format), "Unknown")
        return detected_format.upper() or "Unknown"
    return "Unknown"


class ValidationResult(CamelModel):
    """Outcome of `POST feed/validate`."""
    is_valid: bool
    detected_format: Union[int, str, None] = None
    total_nodes: int = 0
    total_records: int = 0
    processing_time: str = ""
    content_type: str = ""
    error_message: Optional[str] = None
    validation_errors: List[str] = Field(default_factory=list)
    validation_id: Optional[str] = None  # used for subsequent calls

    @property
    def format_name(self) -> str:
        return format_name(self.detected_format)


class FeedStructure(CamelModel):
    root_element: str
    item_element: str
    namespace: Optional[str] = None


class FeedNodes(CamelModel):
    """Outcome of `GET feed/nodes/{validationId}`."""
    nodes: List[str] = Field(default_factory=list)
    validation_id: str = ""
    feed_structure: Optional[FeedStructure] = None


class FeedFields(CamelModel):
    """Outcome of `GET feed/fields/{validationId}`."""
    fields: List[str] = Field(default_factory=list)
    feed_url: Optional[str] = None
    validation_id: str = ""
    detected_at: Optional[str] = None
