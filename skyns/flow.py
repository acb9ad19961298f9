# skyns/flow.py
"""
Point a registry entry at a skylink and derive its skyns:// URI.

The update is a read-modify-write:
1. Parse the skylink
2. Derive the keypair from the seed
3. Read the current entry (if any)
4. Write a new entry with revision + 1 (0 for a new entry)
5. Turn the entry URL into skyns://<publickey>/<datakey>

Two updates racing on the same entry can both read the same revision; the
portal then rejects one of them with WriteRejected. Nothing is retried.
"""

import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

from .crypto import gen_keypair_from_seed
from .errors import MissingInput, UpdateError
from .registry import DEFAULT_PORTAL_URL, RegistryClient, RegistryEntry
from .skylink import parse_skylink

logger = logging.getLogger(__name__)

URI_SCHEME = "skyns"


@dataclass(frozen=True)
class RegistryURI:
    """
    A skyns:// lookup URI.

    Both parts are kept exactly as they appear in the entry URL's query
    string (still URL-encoded), e.g. "ed25519%3A<hex>".
    """
    public_key: str
    data_key: str
    scheme: str = URI_SCHEME

    def __str__(self) -> str:
        return f"{self.scheme}://{self.public_key}/{self.data_key}"


def compute_next_revision(entry: Optional[RegistryEntry]) -> int:
    """Revision for the next write: 0 for a new entry, otherwise current + 1."""
    return entry.revision + 1 if entry is not None else 0


def _query_params(url: str) -> dict:
    """Raw (undecoded) query parameters of a URL."""
    params = {}
    query = urlparse(url).query
    for pair in query.split("&"):
        if not pair:
            continue
        name, _, value = pair.partition("=")
        params[name] = value
    return params


def registry_uri_from_url(entry_url: str, scheme: str = URI_SCHEME) -> RegistryURI:
    """
    Build the lookup URI from an entry URL.

    Args:
        entry_url: URL carrying publickey and datakey query parameters
        scheme: URI scheme

    Raises:
        ValueError: if either parameter is missing
    """
    params = _query_params(entry_url)
    try:
        return RegistryURI(
            public_key=params["publickey"],
            data_key=params["datakey"],
            scheme=scheme,
        )
    except KeyError as e:
        raise ValueError(f"Entry URL has no {e.args[0]} parameter: {entry_url}") from e


def parse_registry_uri(text: str) -> RegistryURI:
    """Parse scheme://<publickey>/<datakey> text back into a RegistryURI."""
    scheme, sep, rest = text.partition("://")
    public_key, _, data_key = rest.partition("/")
    if not sep or not scheme or not public_key or not data_key or "/" in data_key:
        raise ValueError(f"Invalid registry URI: {text}")
    return RegistryURI(public_key=public_key, data_key=data_key, scheme=scheme)


class RegistryUpdateFlow:
    """
    Updates registry entries to point at skylinks.

    Args:
        client: Shared registry client
        portal_url: Portal used for the logged base32 skylink URL
        scheme: Scheme of the produced URIs
    """

    def __init__(
        self,
        client: RegistryClient,
        portal_url: str = DEFAULT_PORTAL_URL,
        scheme: str = URI_SCHEME,
    ):
        self.client = client
        self.portal_url = portal_url
        self.scheme = scheme

    def update(self, seed: str, data_key: str, skylink: str) -> RegistryURI:
        """
        Point the entry (seed, data_key) at skylink.

        Args:
            seed: Seed the signing keypair is derived from
            data_key: Data key of the entry
            skylink: Skylink in any accepted form

        Returns:
            The lookup URI for the updated entry

        Raises:
            MissingInput: seed or data_key is empty (no network calls made)
            MalformedSkylink: skylink could not be parsed
            RegistryReadError: the current entry could not be read
            WriteRejected: the portal refused the write
        """
        if not seed or not data_key:
            raise MissingInput("Need seed and data key for registry updates")

        parsed = parse_skylink(skylink)
        logger.debug(f"Base32 skylink: {parsed.subdomain_url(self.portal_url)}")

        keypair = gen_keypair_from_seed(seed)

        current = self.client.get_entry(keypair.public_key, data_key)
        revision = compute_next_revision(current)

        entry = RegistryEntry(
            data_key=data_key,
            revision=revision,
            data=parsed.to_base64().encode("utf-8"),
        )
        self.client.set_entry(keypair.private_key, entry)

        entry_url = self.client.get_entry_url(keypair.public_key, data_key)
        logger.info(f"Registry entry updated: {entry_url} (revision {revision})")

        uri = registry_uri_from_url(entry_url, scheme=self.scheme)
        logger.info(f"Update namebase HNS record with: {uri}")
        return uri

    def lookup_uri(self, seed: str, data_key: str) -> RegistryURI:
        """Lookup URI for (seed, data_key) without touching the registry."""
        if not seed or not data_key:
            raise MissingInput("Need seed and data key to build a registry URI")

        keypair = gen_keypair_from_seed(seed)
        entry_url = self.client.get_entry_url(keypair.public_key, data_key)
        return registry_uri_from_url(entry_url, scheme=self.scheme)

    def submit(self, seed: str, data_key: str, skylink: str) -> Optional[RegistryURI]:
        """
        Run update() and log instead of raising.

        Returns:
            The URI, or None if the update did not complete
        """
        try:
            return self.update(seed, data_key, skylink)
        except (UpdateError, ValueError) as e:
            logger.error(f"Failed to update registry entry: {e}")
            return None
