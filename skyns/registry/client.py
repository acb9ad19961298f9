# skyns/registry/client.py
"""
Clients for the Skynet registry.

RegistryClient is the interface the update flow depends on.
SkynetRegistryClient talks to a portal over HTTP.

Usage:
    client = SkynetRegistryClient("https://siasky.net")

    entry = client.get_entry(keypair.public_key, "my-key")
    client.set_entry(keypair.private_key, RegistryEntry("my-key", 0, b"..."))
    url = client.get_entry_url(keypair.public_key, "my-key")
"""

import json
import logging
from abc import ABC, abstractmethod
from http.client import HTTPException
from typing import Dict, Optional
from urllib.error import HTTPError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

from ..crypto import public_key_from_private, sign, verify
from ..errors import RegistryReadError, WriteRejected
from .entry import RegistryEntry, hash_data_key, hash_registry_entry

logger = logging.getLogger(__name__)

REGISTRY_ENDPOINT = "/skynet/registry"
DEFAULT_PORTAL_URL = "https://siasky.net"


class RegistryClient(ABC):
    """
    Read/write access to registry entries.

    A single instance is meant to be shared by every update; implementations
    keep no per-call state.
    """

    @abstractmethod
    def get_entry(self, public_key: bytes, data_key: str) -> Optional[RegistryEntry]:
        """
        Fetch the current entry.

        Returns:
            The entry, or None if nothing has been written yet
        """
        pass

    @abstractmethod
    def set_entry(self, private_key: bytes, entry: RegistryEntry) -> None:
        """
        Sign and write an entry.

        Raises:
            WriteRejected: if the registry refuses the entry
        """
        pass

    @abstractmethod
    def get_entry_url(self, public_key: bytes, data_key: str) -> str:
        """URL that looks up the entry, with publickey and datakey query parameters."""
        pass


class SkynetRegistryClient(RegistryClient):
    """
    Registry client for a Skynet portal.

    Args:
        portal_url: Portal URL (e.g., "https://siasky.net")
        timeout: HTTP request timeout in seconds
        get_entry_timeout: Seconds the portal may spend looking an entry up
    """

    def __init__(
        self,
        portal_url: str = DEFAULT_PORTAL_URL,
        timeout: float = 30,
        get_entry_timeout: int = 5,
    ):
        self.portal_url = portal_url.rstrip("/")
        self.timeout = timeout
        self.get_entry_timeout = get_entry_timeout

    def _query(self, public_key: bytes, data_key: str) -> Dict[str, str]:
        return {
            "publickey": f"ed25519:{public_key.hex()}",
            "datakey": hash_data_key(data_key).hex(),
        }

    def _request(self, method: str, url: str, data: dict = None) -> str:
        """Make HTTP request to the portal and return the response body."""
        if data is not None:
            body = json.dumps(data).encode()
            headers = {"Content-Type": "application/json"}
        else:
            body = None
            headers = {}

        req = Request(url, data=body, headers=headers, method=method)

        with urlopen(req, timeout=self.timeout) as response:
            return response.read().decode(errors="replace")

    def get_entry(self, public_key: bytes, data_key: str) -> Optional[RegistryEntry]:
        query = self._query(public_key, data_key)
        query["timeout"] = str(self.get_entry_timeout)
        url = f"{self.portal_url}{REGISTRY_ENDPOINT}?{urlencode(query)}"

        try:
            raw = self._request("GET", url)
        except HTTPError as e:
            if e.code == 404:
                logger.debug(f"No registry entry for {data_key}")
                return None
            raise RegistryReadError(f"HTTP {e.code}: {e.read().decode(errors='replace')}") from e
        except (OSError, HTTPException) as e:
            # URLError, timeouts and dropped connections
            raise RegistryReadError(f"Failed to reach portal: {e}") from e

        try:
            result = json.loads(raw)
            entry = RegistryEntry(
                data_key=data_key,
                revision=int(result["revision"]),
                data=bytes.fromhex(result["data"]),
            )
            signature = bytes.fromhex(result["signature"])
        except (KeyError, TypeError, ValueError) as e:
            raise RegistryReadError(f"Malformed registry response: {e}") from e

        if not verify(public_key, hash_registry_entry(entry), signature):
            raise RegistryReadError(f"Could not verify signature of entry {data_key}")

        logger.debug(f"Fetched entry {data_key} at revision {entry.revision}")
        return entry

    def set_entry(self, private_key: bytes, entry: RegistryEntry) -> None:
        public_key = public_key_from_private(private_key)
        signature = sign(private_key, hash_registry_entry(entry))

        payload = {
            "publickey": {"algorithm": "ed25519", "key": list(public_key)},
            "datakey": hash_data_key(entry.data_key).hex(),
            "revision": entry.revision,
            "data": list(entry.data),
            "signature": list(signature),
        }

        try:
            self._request("POST", f"{self.portal_url}{REGISTRY_ENDPOINT}", payload)
        except HTTPError as e:
            error_body = e.read().decode(errors="replace")
            try:
                message = json.loads(error_body).get("message", str(e))
            except (json.JSONDecodeError, AttributeError):
                message = error_body or str(e)
            raise WriteRejected(f"HTTP {e.code}: {message}", status=e.code) from e
        except (OSError, HTTPException) as e:
            raise WriteRejected(f"Failed to reach portal: {e}") from e

        logger.debug(f"Wrote entry {entry.data_key} at revision {entry.revision}")

    def get_entry_url(self, public_key: bytes, data_key: str) -> str:
        query = urlencode(self._query(public_key, data_key))
        return f"{self.portal_url}{REGISTRY_ENDPOINT}?{query}"
