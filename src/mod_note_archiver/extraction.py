# ABOUTME: Extracts absolute http(s) URLs from free-form note text.
# ABOUTME: Strips trailing prose/markdown punctuation and de-duplicates in order.

import re

# Longer URLs are rejected by the HTTP client before any request is made
MAX_URL_LENGTH = 8192

# RFC 3986 unreserved + reserved characters and percent escapes, minus brackets
# and parens, which only appear in an IP-literal host or a balanced pair
_URL_CHARS = r"A-Za-z0-9\-._~:/?#@!$&'*+,;=%"

_URL_PATTERN = re.compile(
    rf"https?://"
    rf"(?:\[[0-9A-Fa-f:.]+\])?"
    rf"(?:[{_URL_CHARS}]|\([{_URL_CHARS}]*\))*"
)

# e.g. the ")" of "[text](url)" or the "." ending a sentence
_TRAILING_PUNCTUATION = re.compile(r"[)\]>,;:!?.]+\Z")


def _strip_trailing_punctuation(url: str) -> str:
    return _TRAILING_PUNCTUATION.sub("", url)


def extract_urls(text: str) -> list[str]:
    """Extract http and https URLs from text.

    Markdown links placed back to back, like ``[url](url)`` or
    ``(url)(url)``, yield separate URLs.

    Args:
        text: Arbitrary text, possibly containing markdown.

    Returns:
        Normalized URLs in order of first occurrence, without duplicates.
        URLs longer than MAX_URL_LENGTH are skipped. Empty list when the
        text contains no URL.
    """
    if not text:
        return []

    seen: set[str] = set()
    urls: list[str] = []

    for match in _URL_PATTERN.finditer(text):
        url = _strip_trailing_punctuation(match.group(0))
        _, _, rest = url.partition("://")
        if not rest or len(url) > MAX_URL_LENGTH or url in seen:
            continue
        seen.add(url)
        urls.append(url)

    return urls
