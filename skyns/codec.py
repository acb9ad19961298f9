# skyns/codec.py
"""
Text encodings for skylinks.

Skylinks travel as URL-safe Base64 (46 characters, no padding) and as
lower-case base32hex (55 characters, no padding) when used as a portal
subdomain. These helpers convert between the text forms and raw bytes.
"""

import base64
import binascii
from typing import Optional

from .errors import DecodeError

_URLSAFE_TO_STANDARD = str.maketrans("-_", "+/")


def decode_base64(text: Optional[str]) -> Optional[bytes]:
    """
    Decode Base64 text, padding it first.

    Accepts both the standard and the URL-safe alphabet.

    Returns:
        Decoded bytes, or None for empty input
    """
    if not text:
        return None

    if len(text) % 4 == 1:
        raise DecodeError(f"Invalid Base64 length: {len(text)}")

    padded = text.translate(_URLSAFE_TO_STANDARD) + "=" * (-len(text) % 4)
    try:
        return base64.b64decode(padded, validate=True)
    except binascii.Error as e:
        raise DecodeError(f"Invalid Base64 input: {e}") from e


def encode_base64(data: Optional[bytes], padded: bool = True, urlsafe: bool = False) -> Optional[str]:
    """Encode bytes as Base64 text. Returns None for empty input."""
    if not data:
        return None

    if urlsafe:
        encoded = base64.urlsafe_b64encode(data).decode("ascii")
    else:
        encoded = base64.b64encode(data).decode("ascii")
    return encoded if padded else encoded.rstrip("=")


def encode_base32hex(data: Optional[bytes]) -> Optional[str]:
    """
    Encode bytes with the RFC 4648 base32hex alphabet.

    Padding is dropped and the result is lower-cased.
    Returns None for empty input.
    """
    if not data:
        return None

    return base64.b32hexencode(data).decode("ascii").rstrip("=").lower()


def decode_base32hex(text: Optional[str]) -> Optional[bytes]:
    """Decode unpadded base32hex text (any case). Returns None for empty input."""
    if not text:
        return None

    padded = text.upper() + "=" * (-len(text) % 8)
    try:
        return base64.b32hexdecode(padded)
    except binascii.Error as e:
        raise DecodeError(f"Invalid Base32 input: {e}") from e
