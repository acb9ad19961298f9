# skyns/skylink.py
"""
Skylink parsing and formatting.

A skylink is a 34-byte content identifier. Users paste it in many shapes:

    XABvi7JtJbQSMAcDwnUnmp2FKDPjg8_tTTFP4BwMSxVdEg
    sia://XABvi7JtJbQSMAcDwnUnmp2FKDPjg8_tTTFP4BwMSxVdEg
    https://siasky.net/XABvi7JtJbQSMAcDwnUnmp2FKDPjg8_tTTFP4BwMSxVdEg/index.html
    https://<55 char base32>.siasky.net

parse_skylink() reduces all of them to a Skylink.
"""

import re
from dataclasses import dataclass
from urllib.parse import urlparse

from .codec import decode_base32hex, decode_base64, encode_base32hex, encode_base64
from .errors import DecodeError, MalformedSkylink

SKYLINK_SIZE = 34
BASE64_SKYLINK_LENGTH = 46
BASE32_SKYLINK_LENGTH = 55

_BASE64_RE = re.compile(r"^([a-zA-Z0-9_-]{46})$")
_BASE32_RE = re.compile(r"^([a-vA-V0-9]{55})$")
_PATHNAME_RE = re.compile(r"^/?([a-zA-Z0-9_-]{46})((/.*)?)$")
_SIA_PREFIXES = ("sia://", "sia:")


@dataclass(frozen=True)
class Skylink:
    """A decoded skylink."""
    raw: bytes

    def __post_init__(self):
        if len(self.raw) != SKYLINK_SIZE:
            raise MalformedSkylink(
                f"Skylink must be {SKYLINK_SIZE} bytes, got {len(self.raw)}"
            )

    def to_base64(self) -> str:
        """Canonical 46-char URL-safe form."""
        return encode_base64(self.raw, padded=False, urlsafe=True)

    def to_base32(self) -> str:
        """55-char lower-case base32hex form."""
        return encode_base32hex(self.raw)

    def subdomain_url(self, portal_url: str) -> str:
        """URL serving the skylink from its own portal subdomain."""
        host = urlparse(portal_url).netloc or portal_url
        return f"https://{self.to_base32()}.{host}"

    def __str__(self) -> str:
        return self.to_base64()


def _from_base64(text: str) -> Skylink:
    try:
        return Skylink(decode_base64(text))
    except DecodeError as e:
        raise MalformedSkylink(f"Invalid skylink {text!r}: {e}") from e


def _from_base32(text: str) -> Skylink:
    try:
        return Skylink(decode_base32hex(text))
    except DecodeError as e:
        raise MalformedSkylink(f"Invalid skylink {text!r}: {e}") from e


def parse_skylink(text: str) -> Skylink:
    """
    Extract a skylink from user input.

    Args:
        text: Bare skylink, sia: URI, portal URL/path, or base32 subdomain URL

    Returns:
        The parsed Skylink

    Raises:
        MalformedSkylink: if no skylink can be found
    """
    if not isinstance(text, str) or not text.strip():
        raise MalformedSkylink("Skylink is empty")

    text = text.strip()
    for prefix in _SIA_PREFIXES:
        if text.startswith(prefix):
            text = text[len(prefix):]
            break

    if _BASE64_RE.match(text):
        return _from_base64(text)
    if _BASE32_RE.match(text):
        return _from_base32(text)

    # bare host such as <base32>.siasky.net/path
    if "://" not in text and "." in text.split("/", 1)[0]:
        text = f"//{text}"
    parsed = urlparse(text)

    # https://<base32>.portal/...
    if parsed.hostname:
        label = parsed.hostname.split(".", 1)[0]
        if _BASE32_RE.match(label):
            return _from_base32(label)

    match = _PATHNAME_RE.match(parsed.path.rstrip("/"))
    if match:
        return _from_base64(match.group(1))

    raise MalformedSkylink(f"Not a recognizable skylink: {text!r}")
