# tests/test_codec.py
"""Tests for skylink text encodings."""

import os

import pytest

from skyns.codec import decode_base32hex, decode_base64, encode_base32hex, encode_base64
from skyns.errors import DecodeError


class TestDecodeBase64:
    """Test decode_base64."""

    def test_decode_padded(self):
        assert decode_base64("Zm9vYmFy") == b"foobar"

    def test_decode_adds_missing_padding(self):
        """Unpadded input is padded to a multiple of 4."""
        assert decode_base64("Zm9vYg") == b"foob"
        assert decode_base64("Zm9vYmE") == b"fooba"

    def test_decode_urlsafe_alphabet(self):
        assert decode_base64("-_8") == b"\xfb\xff"
        assert decode_base64("+/8") == b"\xfb\xff"

    def test_empty_is_no_value(self):
        assert decode_base64("") is None
        assert decode_base64(None) is None

    def test_wrong_alphabet(self):
        with pytest.raises(DecodeError):
            decode_base64("Zm9v*mFy")

    def test_impossible_length(self):
        with pytest.raises(DecodeError):
            decode_base64("Zm9vY")


class TestEncodeBase32Hex:
    """Test encode_base32hex."""

    def test_rfc4648_vector(self):
        """RFC 4648 base32hex test vector, unpadded and lower case."""
        assert encode_base32hex(b"foobar") == "cpnmuoj1e8"
        assert encode_base32hex(b"f") == "co"

    def test_empty_is_no_value(self):
        assert encode_base32hex(b"") is None
        assert encode_base32hex(None) is None

    def test_decode_any_case(self):
        assert decode_base32hex("cpnmuoj1e8") == b"foobar"
        assert decode_base32hex("CPNMUOJ1E8") == b"foobar"

    def test_decode_invalid(self):
        with pytest.raises(DecodeError):
            decode_base32hex("wxyz")


class TestRoundTrip:
    """Base64 -> bytes -> Base32 -> bytes recovers the input."""

    @pytest.mark.parametrize("size", [1, 2, 3, 5, 34, 64])
    def test_base64_to_base32_round_trip(self, size):
        data = os.urandom(size)

        decoded = decode_base64(encode_base64(data, padded=True))
        assert decoded == data

        base32 = encode_base32hex(decoded)
        assert base32 == base32.lower()
        assert "=" not in base32
        assert decode_base32hex(base32) == data

    def test_unpadded_urlsafe_round_trip(self):
        data = bytes(range(200, 234))
        text = encode_base64(data, padded=False, urlsafe=True)
        assert "=" not in text
        assert decode_base64(text) == data
