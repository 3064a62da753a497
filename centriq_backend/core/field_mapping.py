"""
Field mapping readiness for the feed onboarding wizard.

The wizard may only proceed once every required system field is paired
with a feed field. Unmapped optional fields only produce a hint.
"""
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Sequence

from centriq_backend.core.exceptions import ValidationError
from centriq_backend.core.system_fields import SystemField, SYSTEM_FIELDS, ordered_fields, get_field_by_name
from centriq_backend.models.feed import ValidationResult
from centriq_backend.schemas.feed import FieldMapping, MappingReport, UNSELECTED


def is_mapped(feed_field: Optional[str]) -> bool:
    """A target counts only when it is non-empty and not the placeholder."""
    if feed_field is None:
        return False
    value = feed_field.strip()
    return bool(value) and value != UNSELECTED


def default_mappings(catalog: Sequence[SystemField] = None) -> List[FieldMapping]:
    """One unselected entry per system field, required first."""
    fields = ordered_fields() if catalog is None else sorted(catalog, key=lambda f: (not f.required, f.name))
    return [
        FieldMapping(central_field=field.name, feed_field=UNSELECTED, is_required=field.required)
        for field in fields
    ]


def ensure_known_fields(mappings: Iterable[FieldMapping]) -> None:
    """Reject mappings that target a system field outside the catalog."""
    for mapping in mappings:
        if get_field_by_name(mapping.central_field) is None:
            raise ValidationError(f"Unknown system field '{mapping.central_field}'", field="fieldMappings")


def check_mappings(
    mappings: Sequence[FieldMapping],
    catalog: Sequence[SystemField] = SYSTEM_FIELDS
) -> MappingReport:
    """
    Ready iff every required field has a usable target. The catalog decides
    which of its fields are required; the entry flag only counts for fields
    outside the catalog. A required field with no entry at all is missing too.
    """
    known = {f.name for f in catalog}
    required = [f.name for f in catalog if f.required]
    required += [
        m.central_field for m in mappings
        if m.is_required and m.central_field not in known and m.central_field not in required
    ]

    mapped = {m.central_field for m in mappings if is_mapped(m.feed_field)}
    missing_required = [name for name in required if name not in mapped]

    optional = [f.name for f in catalog if not f.required]
    unmapped_optional = [name for name in optional if name not in mapped]

    hint = None
    if unmapped_optional:
        noun = "field" if len(unmapped_optional) == 1 else "fields"
        hint = f"{len(unmapped_optional)} optional {noun} unmapped. Consider mapping for richer job data."

    return MappingReport(
        ready=not missing_required,
        missing_required=missing_required,
        unmapped_optional=unmapped_optional,
        unmapped_optional_count=len(unmapped_optional),
        hint=hint,
    )


def mapped_entries(mappings: Iterable[FieldMapping]) -> List[FieldMapping]:
    return [m for m in mappings if is_mapped(m.feed_field)]


def summarize_mappings(
    mappings: Sequence[FieldMapping],
    client_name: str = "",
    client_email: str = "",
    feed_url: str = "",
    validation: Optional[ValidationResult] = None
) -> dict:
    """Exportable mapping document for the onboarding wizard."""
    mapped = mapped_entries(mappings)
    unmapped = [m for m in mappings if not is_mapped(m.feed_field)]

    validation_info = None
    if validation is not None:
        validation_info = {
            "isValid": validation.is_valid,
            "detectedFormat": validation.format_name,
            "totalRecords": validation.total_records,
            "totalNodes": validation.total_nodes,
            "processingTime": validation.processing_time,
        }

    return {
        "clientInfo": {
            "clientName": client_name,
            "clientEmail": client_email,
            "feedUrl": feed_url,
        },
        "validationInfo": validation_info,
        "fieldMappings": [
            {"centriqField": m.central_field, "feedNode": m.feed_field.strip(), "isRequired": m.is_required}
            for m in mapped
        ],
        "unmappedFields": [
            {"centriqField": m.central_field, "isRequired": m.is_required}
            for m in unmapped
        ],
        "mappingCount": {
            "total": len(mappings),
            "mapped": len(mapped),
            "unmapped": len(mappings) - len(mapped),
            "requiredMapped": len([m for m in mapped if m.is_required]),
            "requiredTotal": len([m for m in mappings if m.is_required]),
        },
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
