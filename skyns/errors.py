# skyns/errors.py
"""
Exceptions raised while updating a registry entry.

Everything derives from UpdateError so the top of the update flow can catch
a single type.
"""

from typing import Optional


class UpdateError(Exception):
    """Base class for registry update failures."""


class MissingInput(UpdateError, ValueError):
    """Seed or data key was empty."""


class DecodeError(UpdateError, ValueError):
    """Base64/Base32 text could not be decoded."""


class MalformedSkylink(UpdateError, ValueError):
    """Input is not a skylink in any accepted encoding."""


class RegistryReadError(UpdateError):
    """The current registry entry could not be fetched or verified."""


class WriteRejected(UpdateError):
    """The portal refused the new registry entry."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status
