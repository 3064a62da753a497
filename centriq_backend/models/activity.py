"""
Activity constants - audit trail vocabulary for operator actions.
Activities are written to the log, not persisted.
"""


# Action constants for consistency
class Actions:
    # Campaign actions
    CAMPAIGN_CREATED = "campaign_created"
    CAMPAIGN_PAUSE_REQUESTED = "campaign_pause_requested"
    CAMPAIGN_RESUME_REQUESTED = "campaign_resume_requested"
    CAMPAIGN_SETUP_SUBMITTED = "campaign_setup_submitted"

    # Client actions
    CLIENT_CREATED = "client_created"

    # Feed actions
    FEED_VALIDATED = "feed_validated"
    FEED_STATE_RESET = "feed_state_reset"
    MAPPING_EXPORTED = "mapping_exported"

    # Cache actions
    CACHE_INVALIDATED = "cache_invalidated"
