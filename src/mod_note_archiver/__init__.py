# ABOUTME: Main package for archiving links found in moderator notes.
# ABOUTME: Exports URL extraction, the archiving job, and configuration.

from mod_note_archiver.config import get_settings
from mod_note_archiver.extraction import extract_urls
from mod_note_archiver.jobs import ArchiveModNoteLinksJob
from mod_note_archiver.models import ArchiveOutcome, FailureKind, ModNote

__all__ = [
    "get_settings",
    "extract_urls",
    "ArchiveModNoteLinksJob",
    "ArchiveOutcome",
    "FailureKind",
    "ModNote",
]
