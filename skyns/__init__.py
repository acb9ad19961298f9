# skyns - Point Skynet registry entries at skylinks
#
# Updates a registry entry (keyed by a seed-derived ed25519 public key and a
# data key) to hold a skylink, then derives the skyns://<publickey>/<datakey>
# URI that a Handshake name can point at.
#
# Core concepts:
# - Skylink: 34-byte content identifier with Base64 and Base32 text forms
# - KeyPair: ed25519 keys derived deterministically from a seed
# - RegistryEntry: (data key, revision, data) signed by the key owner
# - RegistryUpdateFlow: read current revision, write revision + 1, build URI

from .codec import decode_base64, encode_base32hex
from .config import Config
from .crypto import KeyPair, gen_keypair_from_seed
from .errors import (
    DecodeError,
    MalformedSkylink,
    MissingInput,
    RegistryReadError,
    UpdateError,
    WriteRejected,
)
from .flow import RegistryURI, RegistryUpdateFlow, compute_next_revision
from .registry import RegistryClient, RegistryEntry, SkynetRegistryClient
from .skylink import Skylink, parse_skylink

__all__ = [
    # Codec
    "decode_base64",
    "encode_base32hex",
    "Skylink",
    "parse_skylink",
    # Keys
    "KeyPair",
    "gen_keypair_from_seed",
    # Registry
    "RegistryClient",
    "RegistryEntry",
    "SkynetRegistryClient",
    # Flow
    "RegistryURI",
    "RegistryUpdateFlow",
    "compute_next_revision",
    "Config",
    # Errors
    "UpdateError",
    "MissingInput",
    "MalformedSkylink",
    "DecodeError",
    "RegistryReadError",
    "WriteRejected",
]

__version__ = "0.1.0"
