# ABOUTME: Services module initialization.
# ABOUTME: Exports the Wayback Machine archival service and failure classification.

from mod_note_archiver.services.wayback_service import WaybackService, classify_failure

__all__ = [
    "WaybackService",
    "classify_failure",
]
