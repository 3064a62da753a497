"""
Activity service - activity logging.
"""
import logging
from typing import Optional

logger = logging.getLogger("centriq_backend.activity")


class ActivityService:
    """Service for activity logging. Entries go to the activity logger only."""

    def log(
        self,
        action: str,
        entity_type: str,
        entity_id: Optional[str] = None,
        description: Optional[str] = None,
        meta_data: Optional[dict] = None
    ) -> dict:
        """Log an activity and return the entry that was written."""
        entry = {
            "action": action,
            "entity_type": entity_type,
            "entity_id": entity_id,
            "description": description,
            "meta_data": meta_data or {},
        }
        logger.info(
            f"{action} {entity_type}:{entity_id or '-'} {description or ''}".rstrip(),
            extra={"activity": entry},
        )
        return entry


activity_service = ActivityService()
