"""Tests for :mod:`boohash.utils.hash`."""

from __future__ import annotations

import hashlib
import io

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from boohash.core.algorithms import Algorithm
from boohash.utils.hash import MAX_CHUNK_SIZE, hash_stream, iter_chunks, to_hex


class _CountingReader(io.BytesIO):
    def __init__(self, data: bytes) -> None:
        super().__init__(data)
        self.sizes: list[int] = []

    def read(self, size: int | None = -1) -> bytes:
        self.sizes.append(size)
        return super().read(size)


def test_iter_chunks_reads_bounded_pieces() -> None:
    reader = _CountingReader(b"x" * 2500)

    chunks = list(iter_chunks(reader, 1024))

    assert [len(chunk) for chunk in chunks] == [1024, 1024, 452]
    assert set(reader.sizes) == {1024}


def test_iter_chunks_empty_stream() -> None:
    assert list(iter_chunks(io.BytesIO(b""), 16)) == []


def test_iter_chunks_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError):
        iter_chunks(io.BytesIO(b"abc"), 0)


def test_hash_stream_matches_hashlib() -> None:
    payload = bytes(range(256)) * 40
    for algorithm in Algorithm:
        digest = hash_stream(io.BytesIO(payload), algorithm.new_hasher(), chunk_size=1)
        assert digest == hashlib.new(algorithm.value, payload).digest()


def test_to_hex_is_lowercase_without_separators() -> None:
    assert to_hex(b"\x00\xab\xff") == "00abff"


@given(
    payload=st.binary(max_size=4096),
    chunk_size=st.integers(min_value=1, max_value=5000),
    algorithm=st.sampled_from(list(Algorithm)),
)
@settings(max_examples=75, deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture])
def test_chunk_size_never_changes_digest(payload: bytes, chunk_size: int, algorithm: Algorithm) -> None:
    """Digest of a stream is independent of the read size."""

    whole = algorithm.new_hasher()
    whole.update(payload)

    assert hash_stream(io.BytesIO(payload), algorithm.new_hasher(), chunk_size=chunk_size) == whole.digest()


def test_iter_chunks_rejects_oversized_chunk() -> None:
    with pytest.raises(ValueError):
        iter_chunks(io.BytesIO(b"abc"), MAX_CHUNK_SIZE + 1)
