# ABOUTME: Pydantic models and protocols for the link archiving pipeline.
# ABOUTME: Defines ModNote, FailureKind, and the per-URL ArchiveOutcome.

from enum import Enum
from typing import Protocol

from pydantic import BaseModel


class NoteRecord(Protocol):
    """Anything the archiving job can read note text from."""

    id: int | str
    note: str


class ModNote(BaseModel):
    """Moderator note as handed over by the job scheduler."""

    id: int | str
    note: str = ""


class FailureKind(str, Enum):
    """Network failures that are recovered per URL."""

    TIMEOUT = "timeout"
    CONNECTION_REFUSED = "connection_refused"
    DNS_FAILURE = "dns_failure"
    TLS_FAILURE = "tls_failure"
    TOO_MANY_REDIRECTS = "too_many_redirects"
    DECODE_FAILURE = "decode_failure"
    SOCKET_FAILURE = "socket_failure"


class ArchiveOutcome(BaseModel):
    """Result of a single save request.

    A status code means the request reached the Wayback Machine, whatever the
    code. A failure means it never did. Neither means no response came back.
    """

    url: str
    status_code: int | None = None
    failure: FailureKind | None = None
    error: str | None = None

    @property
    def reached_service(self) -> bool:
        return self.status_code is not None
