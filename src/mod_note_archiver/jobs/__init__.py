# ABOUTME: Background jobs invoked by the external job scheduler.
# ABOUTME: Exports the mod note link archiving job.

from mod_note_archiver.jobs.archive_mod_note_links import ArchiveModNoteLinksJob

__all__ = ["ArchiveModNoteLinksJob"]
