# skyns/registry/__init__.py
"""
Skynet registry access.

The registry maps (public key, data key) to a small signed payload with a
revision counter. Only the key owner can write, and every write must bump
the revision.

Example:
    client = SkynetRegistryClient("https://siasky.net")
    entry = client.get_entry(public_key, "my-site")
    revision = entry.revision + 1 if entry else 0
"""

from .client import DEFAULT_PORTAL_URL, RegistryClient, SkynetRegistryClient
from .entry import MAX_DATA_SIZE, RegistryEntry, hash_data_key, hash_registry_entry

__all__ = [
    "DEFAULT_PORTAL_URL",
    "RegistryClient",
    "SkynetRegistryClient",
    "RegistryEntry",
    "MAX_DATA_SIZE",
    "hash_data_key",
    "hash_registry_entry",
]
