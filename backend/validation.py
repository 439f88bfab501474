"""Normalization and validation of user-supplied website URLs."""

import re
from urllib.parse import urlparse

from errors import InvalidURL

ALLOWED_SCHEMES = {"http", "https"}
DEFAULT_SCHEME_PREFIX = "https://"

# Anything that already names a scheme, e.g. "ftp://" or "mailto:".
_EXPLICIT_SCHEME = re.compile(r"^[a-z][a-z0-9+.\-]*:(//)?", re.IGNORECASE)


def normalize_and_validate(raw: str) -> str:
    """
    Return the normalized absolute URL for `raw`.

    Raises InvalidURL(EMPTY_INPUT) for blank input and InvalidURL(BAD_SCHEME)
    when the normalized string is not an absolute http(s) URL.
    """
    text = str(raw or "").strip()
    if not text:
        raise InvalidURL(InvalidURL.EMPTY_INPUT)

    if not text.startswith("http"):
        match = _EXPLICIT_SCHEME.match(text)
        if match and match.group(1):
            # Schemes are case-insensitive: "HTTP://" and "Https://" are fine as-is.
            scheme = match.group(0).split(":", 1)[0].lower()
            if scheme not in ALLOWED_SCHEMES:
                raise InvalidURL(InvalidURL.BAD_SCHEME)
        else:
            text = DEFAULT_SCHEME_PREFIX + text

    if not is_valid_http_url(text):
        raise InvalidURL(InvalidURL.BAD_SCHEME)
    return text


def is_valid_http_url(url: str) -> bool:
    try:
        parsed = urlparse(url)
        # Accessing .port raises on a malformed port component.
        parsed.port
    except ValueError:
        return False
    if parsed.scheme not in ALLOWED_SCHEMES:
        return False
    if not parsed.netloc or not parsed.hostname:
        return False
    if any(ch.isspace() for ch in url):
        return False
    return True
