"""
validation.py

URL normalization and the validity check that must pass before scoring.

Public functions:
    normalize_url(raw: str) -> str
    parse_url(normalized: str) -> UrlParts
    validate_url(raw: str) -> str
"""

import re
from urllib.parse import unquote, urlsplit

from .models import UrlParts

SCHEME_RE = re.compile(r'^https?://', re.IGNORECASE)
DEFAULT_SCHEME = 'http://'

# characters a browser refuses inside a decoded hostname
FORBIDDEN_HOST_CHARS = set(' \t\n\r#%/<>?@^|')
DIGITS_RE = re.compile(r'^[0-9]+$')


class URLValidationError(ValueError):
    """Base class for inputs rejected before scoring."""


class EmptyInput(URLValidationError):
    def __init__(self, message: str = "Please enter a URL to analyze"):
        super().__init__(message)


class InvalidURL(URLValidationError):
    def __init__(self, url: str, reason: str = ""):
        self.url = url
        self.reason = reason
        super().__init__("Please enter a valid URL (e.g., https://example.com)")


def normalize_url(raw: str) -> str:
    """Prepend http:// unless the string already starts with http(s)://."""
    if not SCHEME_RE.match(raw):
        return DEFAULT_SCHEME + raw
    return raw


def _bad_host(host: str) -> bool:
    return any(ch in FORBIDDEN_HOST_CHARS or ord(ch) < 0x20 or ord(ch) == 0x7f for ch in host)


def _bad_ipv4(host: str) -> bool:
    """True for an all-numeric host that is not a valid IPv4 address.

    Like a browser, fewer than four parts are allowed and the last part
    then covers the remaining bytes (``http://10.1`` is 10.0.0.1).
    """
    labels = host.split('.')
    if len(labels) > 1 and labels[-1] == '':
        labels = labels[:-1]
    if not all(DIGITS_RE.match(label) for label in labels):
        return False
    if len(labels) > 4:
        return True
    numbers = [int(label) for label in labels]
    if any(n > 255 for n in numbers[:-1]):
        return True
    return numbers[-1] >= 256 ** (5 - len(numbers))


def parse_url(normalized: str) -> UrlParts:
    """Split a normalized URL into the parts the rules need.

    A backslash ends the host like a slash does, and the host is
    percent-decoded before it is checked. Raises InvalidURL when the
    string would not parse as a URL.
    """
    try:
        parsed = urlsplit(normalized.replace('\\', '/'))
        port = parsed.port
    except ValueError as e:
        raise InvalidURL(normalized, str(e)) from e

    host = unquote(parsed.hostname or '').lower()
    if not host:
        raise InvalidURL(normalized, "missing hostname")
    if _bad_host(host):
        raise InvalidURL(normalized, f"illegal character in hostname {host!r}")
    if _bad_ipv4(host):
        raise InvalidURL(normalized, f"invalid IPv4 address {host!r}")

    return UrlParts(url=normalized, scheme=parsed.scheme.lower(), hostname=host, port=port)


def validate_url(raw: str) -> str:
    """Reject empty or unparseable input; return the normalized URL otherwise."""
    value = (raw or '').strip()
    if not value:
        raise EmptyInput()
    normalized = normalize_url(value)
    parse_url(normalized)
    return normalized
