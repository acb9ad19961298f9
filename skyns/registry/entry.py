# skyns/registry/entry.py
"""
Registry entry model and its signing hash.

The portal identifies an entry by (public key, hash of data key) and accepts
a write only if it carries a higher revision and a valid signature over
hash_registry_entry().
"""

import hashlib
import struct
from dataclasses import dataclass

MAX_REVISION = 2**64 - 1
MAX_DATA_SIZE = 64


def _encode_number(value: int) -> bytes:
    """uint64, little-endian."""
    return struct.pack("<Q", value)


def _encode_prefixed_bytes(data: bytes) -> bytes:
    return _encode_number(len(data)) + data


def _hash_all(*parts: bytes) -> bytes:
    hasher = hashlib.blake2b(digest_size=32)
    for part in parts:
        hasher.update(part)
    return hasher.digest()


def hash_data_key(data_key: str) -> bytes:
    """Hash a human-readable data key into the 32 bytes the portal stores."""
    return _hash_all(_encode_prefixed_bytes(data_key.encode("utf-8")))


@dataclass(frozen=True)
class RegistryEntry:
    """
    A registry entry as composed by the client.

    Attributes:
        data_key: Human-readable data key (hashed before it leaves the client)
        revision: uint64 revision counter
        data: Payload, at most 64 bytes
    """
    data_key: str
    revision: int
    data: bytes

    def __post_init__(self):
        if not 0 <= self.revision <= MAX_REVISION:
            raise ValueError(f"Revision out of range: {self.revision}")
        if len(self.data) > MAX_DATA_SIZE:
            raise ValueError(
                f"Entry data is {len(self.data)} bytes, max is {MAX_DATA_SIZE}"
            )


def hash_registry_entry(entry: RegistryEntry) -> bytes:
    """Hash that is signed when writing an entry."""
    return _hash_all(
        hash_data_key(entry.data_key),
        _encode_prefixed_bytes(entry.data),
        _encode_number(entry.revision),
    )
