# ABOUTME: Job that archives every link found in a newly created mod note.
# ABOUTME: Extracts URLs from the note text and hands them to the WaybackService.

import structlog

from mod_note_archiver.config import Settings, get_settings
from mod_note_archiver.extraction import extract_urls
from mod_note_archiver.models import NoteRecord
from mod_note_archiver.services.wayback_service import WaybackService

log = structlog.get_logger(component="archive_mod_note_links")


class ArchiveModNoteLinksJob:
    """Archives the links of a mod note to the Wayback Machine.

    The scheduler calls perform() once per created note and owns retries of
    failed invocations.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        service: WaybackService | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._service = service
        self._owns_service = service is None

    @property
    def queue_name(self) -> str:
        return self.settings.archive_queue

    @property
    def service(self) -> WaybackService:
        """Lazy-initialized archival service."""
        if self._service is None:
            self._service = WaybackService(self.settings)
        return self._service

    def close(self) -> None:
        """Close the archival service if this job created it."""
        if self._owns_service and self._service is not None:
            self._service.close()
            self._service = None

    def __enter__(self) -> "ArchiveModNoteLinksJob":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def perform(self, mod_note: NoteRecord) -> None:
        """Archive all URLs in the note text.

        Args:
            mod_note: Record exposing ``id`` and ``note``. Never modified.
        """
        urls = extract_urls(mod_note.note)
        if not urls:
            return

        log.info("archiving_mod_note_links", count=len(urls), mod_note_id=mod_note.id)

        try:
            self.service.dispatch(urls)
        finally:
            self.close()
