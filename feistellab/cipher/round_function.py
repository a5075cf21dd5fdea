"""Keyed, length-adapting round function built on a fixed-digest hash.

F(data, subkey) = H(subkey || data), stretched or cut to len(data).

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import hashlib
from typing import Callable

RoundFunction = Callable[[bytes, bytes], bytes]

DEFAULT_ALGORITHM = "sha256"

# Fixed-output digests only; SHAKE needs an explicit length and is excluded.
SUPPORTED_ALGORITHMS = ("sha256", "sha512", "sha3_256", "blake2b", "blake2s")


def adapt_digest(digest: bytes, length: int) -> bytes:
    """Truncate or cyclically repeat ``digest`` to exactly ``length`` bytes."""
    if length <= 0:
        return b""
    if not digest:
        raise ValueError("cannot stretch an empty digest")
    if length <= len(digest):
        return digest[:length]
    reps = -(-length // len(digest))
    return (digest * reps)[:length]


def _check_algorithm(algorithm: str) -> str:
    name = algorithm.lower()
    if name not in SUPPORTED_ALGORITHMS:
        raise ValueError(
            f"Unsupported round function hash: {algorithm!r} "
            f"(expected one of {', '.join(SUPPORTED_ALGORITHMS)})"
        )
    return name


def hash_round_function(data: bytes, subkey: bytes, *, algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    """Return ``H(subkey || data)`` adapted to ``len(data)`` bytes."""
    if not data:
        return b""
    digest = hashlib.new(_check_algorithm(algorithm), bytes(subkey) + bytes(data)).digest()
    return adapt_digest(digest, len(data))


def make_round_function(algorithm: str = DEFAULT_ALGORITHM) -> RoundFunction:
    """Bind a hash algorithm and return a ``(data, subkey) -> bytes`` PRF."""
    name = _check_algorithm(algorithm)

    def round_fn(data: bytes, subkey: bytes) -> bytes:
        return hash_round_function(data, subkey, algorithm=name)

    round_fn.__name__ = f"round_fn_{name}"
    round_fn.__doc__ = f"{name.upper()}(subkey || data), length-adapted to len(data)."
    return round_fn
