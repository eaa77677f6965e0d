"""GHASH universal hash over GF(2^128), as used by GCM."""

from __future__ import annotations

from collections.abc import Iterable

BLOCK_SIZE = 16

# Reduction constant for x^128 + x^7 + x^2 + x + 1 in GCM's reflected bit order.
_R = 0xE1 << 120


def _gf_mul(x: int, y: int) -> int:
    """Multiply two field elements given as big-endian 128-bit integers."""
    z = 0
    v = y
    for i in range(127, -1, -1):
        if (x >> i) & 1:
            z ^= v
        v = (v >> 1) ^ _R if v & 1 else v >> 1
    return z


def _as_bytes(data, what: str) -> bytes:
    try:
        return bytes(data)
    except TypeError as exc:
        raise TypeError(f"{what} must be bytes-like") from exc


class GHash:
    """Incremental GHASH keyed with a 16-byte hash subkey."""

    def __init__(self, key) -> None:
        key = _as_bytes(key, "key")
        if len(key) != BLOCK_SIZE:
            raise ValueError(f"GHASH key must be {BLOCK_SIZE} bytes, got {len(key)}")
        self._h = int.from_bytes(key, "big")
        self._y = 0

    def copy(self) -> GHash:
        """Return an independent hasher with the same key and state."""
        clone = GHash.__new__(GHash)
        clone._h = self._h
        clone._y = self._y
        return clone

    def update(self, blocks: Iterable) -> None:
        """Absorb an iterable of whole 16-byte blocks."""
        if isinstance(blocks, (bytes, bytearray, memoryview)):
            raise TypeError("update() takes an iterable of blocks; use update_padded() for raw data")
        for block in blocks:
            block = _as_bytes(block, "block")
            if len(block) != BLOCK_SIZE:
                raise ValueError(f"block must be {BLOCK_SIZE} bytes, got {len(block)}")
            self._y = _gf_mul(self._y ^ int.from_bytes(block, "big"), self._h)

    def update_padded(self, data) -> None:
        """Absorb arbitrary data, zero-padding the last block to 16 bytes."""
        data = _as_bytes(data, "data")
        remainder = len(data) % BLOCK_SIZE
        if remainder:
            data += bytes(BLOCK_SIZE - remainder)
        self.update(data[i : i + BLOCK_SIZE] for i in range(0, len(data), BLOCK_SIZE))

    def finalize(self) -> bytes:
        """Return the 16-byte hash of everything absorbed so far."""
        return self._y.to_bytes(BLOCK_SIZE, "big")