"""Hash algorithm abstractions used by the digest engine."""

from __future__ import annotations

import enum
import hashlib
from typing import Protocol, runtime_checkable


@runtime_checkable
class IHasher(Protocol):
    """Incremental hasher interface all supported algorithms satisfy."""

    @property
    def digest_size(self) -> int:
        """Length in bytes of the finalised digest."""

    def update(self, data: bytes, /) -> None:
        """Absorb ``data`` into the running hash state."""

    def digest(self) -> bytes:
        """Return the fixed-length digest of everything absorbed so far."""


class Algorithm(str, enum.Enum):
    """Closed set of digest algorithms selectable from the command line."""

    SHA256 = "sha256"
    SHA512 = "sha512"

    @classmethod
    def from_token(cls, token: str) -> "Algorithm | None":
        """Return the algorithm named by ``token`` (case-insensitive)."""

        try:
            return cls(token.lower())
        except ValueError:
            return None

    @property
    def label(self) -> str:
        return self.value.upper()

    @property
    def digest_size(self) -> int:
        return _DIGEST_SIZES[self]

    @property
    def hex_length(self) -> int:
        return self.digest_size * 2

    def new_hasher(self) -> IHasher:
        """Return a fresh incremental hasher for this algorithm."""

        return _FACTORIES[self]()


_FACTORIES = {
    Algorithm.SHA256: hashlib.sha256,
    Algorithm.SHA512: hashlib.sha512,
}
_DIGEST_SIZES = {
    Algorithm.SHA256: 32,
    Algorithm.SHA512: 64,
}


__all__ = ["Algorithm", "IHasher"]
