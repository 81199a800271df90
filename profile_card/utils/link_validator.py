"""
Link Validator Module

Builds contact addresses for the preview card and checks that they are
well-formed URLs. Resolution never raises: every input yields either a
usable address or an invalid result that the card shows as plain text.

Example Usage:
    from profile_card.utils.link_validator import build_social_url, resolve_link

    result = resolve_link(build_social_url("github", "octocat"))
    result.is_valid  # True
    result.host      # "github.com"
"""

import re
from typing import Optional
from urllib.parse import urlsplit

from pydantic import AnyUrl, BaseModel, TypeAdapter, ValidationError

from profile_card.models.config import DisplayStrings

# RFC 3986 unreserved + reserved characters, plus "%" for escapes
_URL_CHARS = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]*")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*:")

_any_url = TypeAdapter(AnyUrl)


class LinkResolution(BaseModel):
    """Outcome of resolving a contact address.

    Attributes:
        raw: The address string that was checked
        url: Usable address when valid, otherwise None
        host: Host part of a hierarchical address (case preserved)
        is_valid: Whether the address can be opened
        reason: Short explanation when invalid
    """

    raw: str
    url: Optional[str] = None
    host: Optional[str] = None
    is_valid: bool = False
    reason: Optional[str] = None


class AlertDialog(BaseModel):
    """A modal dialog with a single acknowledgement action."""

    title: str
    message: str
    dismiss_label: str


def build_social_url(platform: str, username: str) -> str:
    """Build the web address for a social entry.

    The platform name is used as the domain as-is; it is not checked
    against any list of real services.
    """
    return f"https://{platform}.com/{username}"


def build_mail_url(email: str) -> str:
    """Build the mail address for the email contact row."""
    return f"mailto:{email}"


def invalid_link_alert(strings: Optional[DisplayStrings] = None) -> AlertDialog:
    """Dialog shown when an invalid contact row is activated."""
    strings = strings or DisplayStrings()
    return AlertDialog(
        title=strings.invalid_url_title,
        message=strings.invalid_url_message,
        dismiss_label=strings.invalid_url_dismiss,
    )


def _extract_host(netloc: str) -> str:
    """Strip userinfo and port from a netloc, keeping the host's case."""
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        return host[: host.find("]") + 1]
    name, sep, port = host.rpartition(":")
    if sep and port.isdigit():
        return name
    return host


def _invalid(raw: str, reason: str) -> LinkResolution:
    return LinkResolution(raw=raw, is_valid=False, reason=reason)


def resolve_link(raw: str) -> LinkResolution:
    """Check whether an address is a well-formed URL.

    Valid addresses contain only RFC 3986 characters, well-formed percent
    escapes and a scheme; "scheme://" addresses also need a host. The result
    must additionally be accepted by pydantic's AnyUrl.

    Args:
        raw: Address string to check

    Returns:
        LinkResolution describing a usable or invalid address
    """
    if not isinstance(raw, str):
        return LinkResolution(raw=repr(raw), is_valid=False, reason="not a string")

    if not _URL_CHARS.fullmatch(raw):
        return _invalid(raw, "contains characters not allowed in URLs")
    if _BAD_ESCAPE.search(raw):
        return _invalid(raw, "malformed percent escape")
    if not _SCHEME.match(raw):
        return _invalid(raw, "missing scheme")

    try:
        parts = urlsplit(raw)
    except ValueError as e:
        return _invalid(raw, str(e))

    host: Optional[str] = None
    if raw[len(parts.scheme) + 1 :].startswith("//"):
        host = _extract_host(parts.netloc)
        if not host:
            return _invalid(raw, "missing host")

    try:
        _any_url.validate_python(raw)
    except ValidationError as e:
        return _invalid(raw, e.errors()[0]["msg"])

    return LinkResolution(raw=raw, url=raw, host=host, is_valid=True)
