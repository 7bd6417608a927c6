"""
Service URI grammar for Lokstra.

A service URI locates a named instance of a service interface:

    lokstra://[package.]Interface/instanceName

Examples:
    lokstra://UserService/primary           -> valid
    lokstra://auth.TokenService/default     -> valid (package segment ignored)
    lokstra://user_service/primary          -> interface name must be CamelCase
    lokstra://a.b.c/primary                 -> invalid serviceType format
    lokstra://{{.Svc}}/primary              -> invalid URI (bad host character)
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult, unquote, urlsplit

from pydantic import BaseModel, ConfigDict

SERVICE_URI_SCHEME = "lokstra"

# Scheme literal followed by "://" and any run of non-space, non-quote characters
SERVICE_URI_PATTERN = re.compile(rf"{SERVICE_URI_SCHEME}://[^\s\"']+")

# Characters a host may carry besides ASCII letters, digits and non-ASCII text
_HOST_PUNCTUATION = "-._~!$&'()*+,;=:[]<>\"%"
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_ASCII_HOST_ESCAPE = re.compile(r"%(?!25)[0-7][0-9A-Fa-f]")
_CONTROL_CHAR = re.compile(r"[\x00-\x1f\x7f]")


class ServiceURI(BaseModel):
    """
    Parsed service URI.

    Attributes:
        raw: The input string
        scheme: URI scheme (lower-cased by the parser)
        host: Authority component, the serviceType
        package: Package qualifier for two-segment hosts
        interface: Interface name taken from the host
        instance: Path with leading/trailing slashes trimmed
        error: First grammar violation, None when valid
    """

    raw: str
    scheme: str = ""
    host: str = ""
    package: str | None = None
    interface: str | None = None
    instance: str = ""
    error: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_valid(self) -> bool:
        return self.error is None


def is_camel_case(name: str) -> bool:
    """Upper-camel-case check: leading uppercase letter, no underscores."""
    if not name or not name[0].isupper():
        return False
    return "_" not in name


def _syntax_error(parts: SplitResult) -> str | None:
    """First generic URI syntax problem in the authority or path, if any."""
    for component in (parts.netloc, parts.path):
        if match := _CONTROL_CHAR.search(component):
            return f"invalid control character {match.group()!r} in URI"
        if match := _BAD_ESCAPE.search(component):
            return f'invalid URL escape "{component[match.start() : match.start() + 3]}"'

    host = parts.netloc.rpartition("@")[2]
    for char in host:
        if char.isascii() and not (char.isalnum() or char in _HOST_PUNCTUATION):
            return f'invalid character "{char}" in host name'
    # Escapes in a host may only encode non-ASCII bytes, or a literal "%"
    if match := _ASCII_HOST_ESCAPE.search(host):
        return f'invalid URL escape "{match.group()}"'

    try:
        parts.port  # noqa: B018 - raises on a malformed port
    except ValueError as e:
        return str(e)
    return None


def parse_service_uri(uri: str) -> ServiceURI:
    """
    Parse a service URI, recording the first rule it breaks.

    Host and path are percent-decoded before the grammar rules run, so
    ``lokstra://Svc/primary%2Fb`` names the instance ``primary/b``.

    Args:
        uri: Candidate service reference

    Returns:
        ServiceURI; check ``is_valid`` / ``error`` for the outcome
    """
    try:
        parts = urlsplit(uri)
    except ValueError as e:
        return ServiceURI(raw=uri, error=f"invalid URI: {e}")

    if syntax_error := _syntax_error(parts):
        return ServiceURI(raw=uri, scheme=parts.scheme, error=f"invalid URI: {syntax_error}")

    if parts.scheme != SERVICE_URI_SCHEME:
        return ServiceURI(raw=uri, scheme=parts.scheme, error=f"invalid scheme: {parts.scheme}")

    # Authority minus any userinfo
    host = unquote(parts.netloc.rpartition("@")[2])
    fields = {"raw": uri, "scheme": parts.scheme, "host": host}
    if not host:
        return ServiceURI(**fields, error="missing serviceType (interface)")

    instance = unquote(parts.path).strip("/")
    fields["instance"] = instance
    if not instance:
        return ServiceURI(**fields, error="missing service instance name")

    segments = host.split(".")
    if len(segments) == 1:
        interface = segments[0]
    elif len(segments) == 2:
        # package.Interface
        fields["package"] = segments[0]
        interface = segments[1]
    else:
        return ServiceURI(**fields, error=f"invalid serviceType format: {host}")

    fields["interface"] = interface
    if not is_camel_case(interface):
        return ServiceURI(**fields, error=f"interface name must be CamelCase: {interface}")

    return ServiceURI(**fields)


def validate_service_uri(uri: str) -> tuple[bool, str | None]:
    """
    Validate a service URI.

    Args:
        uri: Candidate service reference

    Returns:
        (is_valid, error_message)

    Examples:
        validate_service_uri("lokstra://UserService/primary")  # -> (True, None)
        validate_service_uri("lokstra://UserService")  # -> (False, "missing service instance name")
    """
    parsed = parse_service_uri(uri)
    return (parsed.is_valid, parsed.error)


def find_service_uris(text: str) -> list[str]:
    """Extract every ``lokstra://`` token from arbitrary text, in order."""
    return SERVICE_URI_PATTERN.findall(text)
