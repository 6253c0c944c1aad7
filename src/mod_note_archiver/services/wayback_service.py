# ABOUTME: Service for archiving URLs to the Wayback Machine.
# ABOUTME: Submits URLs one at a time with a fixed pause, recovering from network failures.

import socket
import ssl
import zlib
from collections.abc import Iterator, Sequence
from time import sleep

import httpx
import structlog

from mod_note_archiver.config import Settings, get_settings
from mod_note_archiver.models import ArchiveOutcome, FailureKind

log = structlog.get_logger(component="archive_mod_note_links")

_TLS_MARKERS = ("[ssl", "ssl:", "certificate verify failed", "tlsv1", "tls handshake")
_DNS_MARKERS = (
    "name or service not known",
    "nodename nor servname",
    "temporary failure in name resolution",
    "no address associated with hostname",
    "getaddrinfo failed",
)
_REFUSED_MARKERS = ("connection refused", "errno 111", "errno 61")


def _exception_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield exc followed by its causes, guarding against cycles."""
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def _classify_os_error(exc: BaseException) -> FailureKind | None:
    # SSLError subclasses OSError, so it goes first
    if isinstance(exc, ssl.SSLError):
        return FailureKind.TLS_FAILURE
    if isinstance(exc, socket.gaierror):
        return FailureKind.DNS_FAILURE
    if isinstance(exc, socket.timeout):
        return FailureKind.TIMEOUT
    if isinstance(exc, ConnectionRefusedError):
        return FailureKind.CONNECTION_REFUSED
    if isinstance(exc, ConnectionError):
        return FailureKind.SOCKET_FAILURE
    return None


def _classify_connect_error(exc: httpx.ConnectError) -> FailureKind:
    for cause in _exception_chain(exc):
        kind = _classify_os_error(cause)
        if kind is not None:
            return kind

    message = str(exc).lower()
    if any(marker in message for marker in _TLS_MARKERS):
        return FailureKind.TLS_FAILURE
    if any(marker in message for marker in _DNS_MARKERS):
        return FailureKind.DNS_FAILURE
    if any(marker in message for marker in _REFUSED_MARKERS):
        return FailureKind.CONNECTION_REFUSED
    return FailureKind.SOCKET_FAILURE


def classify_failure(exc: BaseException) -> FailureKind | None:
    """Map a transport exception to a recoverable failure kind.

    Args:
        exc: Exception raised while submitting a URL.

    Returns:
        The failure kind, or None when the exception is not a network
        failure and must propagate.
    """
    if isinstance(exc, httpx.TimeoutException):
        return FailureKind.TIMEOUT
    if isinstance(exc, httpx.TooManyRedirects):
        return FailureKind.TOO_MANY_REDIRECTS
    if isinstance(exc, (httpx.DecodingError, zlib.error)):
        return FailureKind.DECODE_FAILURE
    if isinstance(exc, httpx.ConnectError):
        return _classify_connect_error(exc)
    if isinstance(exc, (httpx.NetworkError, httpx.RemoteProtocolError, httpx.ProxyError)):
        return FailureKind.SOCKET_FAILURE
    if isinstance(exc, OSError):
        return _classify_os_error(exc)
    return None


class WaybackService:
    """Submits URLs to the Internet Archive's Wayback Machine save endpoint."""

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._client = client

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialized HTTP client.

        Retries and TLS verification live on the transport.
        """
        if self._client is None:
            transport = httpx.HTTPTransport(
                retries=self.settings.archive_retries,
                verify=self.settings.archive_verify_tls,
            )
            self._client = httpx.Client(
                transport=transport,
                timeout=self.settings.archive_timeout,
                headers={"User-agent": self.settings.archive_user_agent},
                follow_redirects=True,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "WaybackService":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def save_url(self, url: str) -> str:
        """Build the save endpoint for url, appended verbatim."""
        return f"{self.settings.wayback_save_url}{url}"

    def archive_url(self, url: str) -> ArchiveOutcome:
        """Submit a single URL to the Wayback Machine.

        Any response counts as handled, whatever its status code.

        Args:
            url: The URL to archive

        Returns:
            The outcome of the submission.

        Raises:
            Exception: Anything that is not a classified network failure.
        """
        try:
            response = self.client.get(self.save_url(url))
        except Exception as e:
            failure = classify_failure(e)
            if failure is None:
                raise
            log.warning(
                "archive_failed",
                url=url,
                failure=failure.value,
                error_type=type(e).__name__,
                error=str(e),
            )
            return ArchiveOutcome(url=url, failure=failure, error=f"{type(e).__name__}: {e}")

        if response is None:
            log.warning("archive_no_response", url=url)
            return ArchiveOutcome(url=url)

        log.info("url_archived", url=url, status=response.status_code)
        return ArchiveOutcome(url=url, status_code=response.status_code)

    def dispatch(self, urls: Sequence[str]) -> None:
        """Archive URLs sequentially, pausing between requests.

        No pause follows the last URL. A failure on one URL never stops the
        remaining ones.

        Args:
            urls: URLs to archive, in submission order
        """
        last = len(urls) - 1
        for i, url in enumerate(urls):
            self.archive_url(url)
            if i < last:
                sleep(self.settings.archive_delay_seconds)
