# skyns/crypto.py
"""
Key derivation and signing for registry entries.

Registry entries are signed with ed25519. The keypair is derived from a
human-chosen seed string, so the same seed always controls the same
entries:

    seed --PBKDF2-HMAC-SHA256 (salt "", 1000 rounds)--> 32 bytes --> ed25519
"""

from dataclasses import dataclass

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

PBKDF2_ITERATIONS = 1000
SEED_SIZE = 32


@dataclass(frozen=True)
class KeyPair:
    """
    An ed25519 keypair.

    Attributes:
        public_key: 32-byte raw public key
        private_key: 64-byte secret key (seed followed by public key)
    """
    public_key: bytes
    private_key: bytes

    @property
    def public_key_hex(self) -> str:
        return self.public_key.hex()

    def __repr__(self) -> str:
        return f"KeyPair(public_key={self.public_key_hex!r})"


def _derive_seed(seed: str) -> bytes:
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=SEED_SIZE,
        salt=b"",
        iterations=PBKDF2_ITERATIONS,
    )
    return kdf.derive(seed.encode("utf-8"))


def gen_keypair_from_seed(seed: str) -> KeyPair:
    """
    Deterministically derive a keypair from a seed string.

    Args:
        seed: Secret seed phrase

    Returns:
        KeyPair for signing registry entries
    """
    secret = _derive_seed(seed)
    private_key = Ed25519PrivateKey.from_private_bytes(secret)
    public_bytes = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )
    return KeyPair(public_key=public_bytes, private_key=secret + public_bytes)


def _load_private_key(private_key: bytes) -> Ed25519PrivateKey:
    """Accepts a 64-byte secret key (seed || public key) or a bare 32-byte seed."""
    if len(private_key) not in (SEED_SIZE, 2 * SEED_SIZE):
        raise ValueError(f"Private key must be 32 or 64 bytes, got {len(private_key)}")
    return Ed25519PrivateKey.from_private_bytes(private_key[:SEED_SIZE])


def public_key_from_private(private_key: bytes) -> bytes:
    """Raw 32-byte public key belonging to a private key."""
    return _load_private_key(private_key).public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )


def sign(private_key: bytes, message: bytes) -> bytes:
    """Sign message with a 64-byte secret key or a 32-byte seed."""
    return _load_private_key(private_key).sign(message)


def verify(public_key: bytes, message: bytes, signature: bytes) -> bool:
    """
    Verify an ed25519 signature.

    Returns:
        True if signature is valid
    """
    try:
        Ed25519PublicKey.from_public_bytes(public_key).verify(signature, message)
        return True
    except (InvalidSignature, ValueError):
        return False
