"""Payload exceptions: encoding, decoding and referential integrity."""

from typing import Any

from .base import BundlescopeError


class PayloadError(BundlescopeError):
    """Base class for errors in the embedded stats payload."""

    pass


class EncodeError(PayloadError):
    """Raised when a payload cannot be serialized for embedding."""

    def __init__(self, reason: str):
        super().__init__("Cannot encode payload", details={"reason": reason})
        self.reason = reason


class DecodeError(PayloadError):
    """Raised when a compact string cannot be turned back into JSON."""

    def __init__(self, reason: str):
        super().__init__("Cannot decode payload", details={"reason": reason})
        self.reason = reason


class ReferentialIntegrityError(PayloadError):
    """Raised when an asset or chunk points at an id missing from the payload.

    ``kind`` is ``"chunk"`` for a missing asset->chunk reference and
    ``"module"`` for a chunk module absent from the module lookup.
    """

    def __init__(self, kind: str, missing_id: Any, owner: str):
        super().__init__(
            f"Missing {kind} {missing_id!r} referenced by {owner}",
            details={"kind": kind, "id": missing_id, "owner": owner},
        )
        self.kind = kind
        self.missing_id = missing_id
        self.owner = owner
