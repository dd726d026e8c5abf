"""Hashing helpers."""

from __future__ import annotations

from typing import BinaryIO, Iterator

from boohash.core.algorithms import IHasher

DEFAULT_CHUNK_SIZE = 1024
MAX_CHUNK_SIZE = 64 * 1024 * 1024


def iter_chunks(handle: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    """Yield successive reads of at most ``chunk_size`` bytes until EOF."""

    if not 1 <= chunk_size <= MAX_CHUNK_SIZE:
        raise ValueError(f"chunk_size must be between 1 and {MAX_CHUNK_SIZE}, got {chunk_size}")
    return iter(lambda: handle.read(chunk_size), b"")


def hash_stream(handle: BinaryIO, hasher: IHasher, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> bytes:
    """Feed ``handle`` through ``hasher`` and return the finalised digest."""

    for chunk in iter_chunks(handle, chunk_size):
        hasher.update(chunk)
    return hasher.digest()


def to_hex(digest: bytes) -> str:
    """Render ``digest`` as lowercase hexadecimal without separators."""

    return digest.hex()


__all__ = ["DEFAULT_CHUNK_SIZE", "MAX_CHUNK_SIZE", "hash_stream", "iter_chunks", "to_hex"]
