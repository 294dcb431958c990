"""
Randomness sources and entropy helpers.

A randomness source is anything with `randbelow(n)` returning an integer
drawn uniformly from [0, n), independently on every call. The generator
only ever talks to that one method.
"""

from __future__ import annotations

import hashlib
import random
from typing import List, Optional, Protocol


class RandomSource(Protocol):
    def randbelow(self, n: int) -> int:
        ...


def _check_bound(n: int) -> None:
    if n <= 0:
        raise ValueError(f"randbelow() needs a positive bound, got {n}")


class SystemRandomSource:
    """
    Default source backed by the `random` module.

    With a seed it is a plain, reproducible `random.Random`; without one it
    reads from the operating system via `random.SystemRandom`.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            self._rng: random.Random = random.SystemRandom()
        else:
            self._rng = random.Random(seed)

    def randbelow(self, n: int) -> int:
        _check_bound(n)
        return self._rng.randrange(n)


class BitstreamSource:
    """
    Source fed by a stream of raw bits.

    Subclasses implement `_refill()` returning fresh bits. Integers are
    built from just enough bits to cover the bound and values outside it
    are thrown away (rejection sampling), so no index is favoured.
    """

    def __init__(self) -> None:
        self._buffer: List[int] = []

    def _refill(self) -> List[int]:
        raise NotImplementedError

    def _take_bits(self, count: int) -> List[int]:
        while len(self._buffer) < count:
            fresh = self._refill()
            if not fresh:
                raise RuntimeError("Bit supplier returned no bits.")
            self._buffer.extend(fresh)

        taken = self._buffer[:count]
        del self._buffer[:count]
        return taken

    def randbelow(self, n: int) -> int:
        _check_bound(n)
        if n == 1:
            return 0

        width = (n - 1).bit_length()
        while True:
            value = 0
            for bit in self._take_bits(width):
                value = (value << 1) | bit
            if value < n:
                return value


def bits_to_bytes(bits: List[int]) -> bytes:
    """
    Pack a list of bits [0,1,1,0,...] into bytes (8 bits per byte).
    If bits length is not a multiple of 8, pad with zeros at the end.
    """
    if not bits:
        return b""

    pad_len = (8 - (len(bits) % 8)) % 8
    padded = bits + [0] * pad_len

    out = bytearray()
    for i in range(0, len(padded), 8):
        byte = 0
        for bit in padded[i : i + 8]:
            byte = (byte << 1) | bit
        out.append(byte)

    return bytes(out)


def bytes_to_bits(data: bytes) -> List[int]:
    # MSB first
    return [(byte >> (7 - i)) & 1 for byte in data for i in range(8)]


def amplify_entropy(bits: List[int], rounds: int = 1) -> List[int]:
    """
    Hash the bits with SHA-256 `rounds` times and return the digest bits.

    With rounds <= 0 the input is returned unchanged; otherwise the result
    is always 256 bits long.
    """
    if rounds <= 0:
        return bits

    data = bits_to_bytes(bits)
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()

    return bytes_to_bits(data)
