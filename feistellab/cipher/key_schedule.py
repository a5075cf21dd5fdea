"""Popcount-salted rotation key schedule.

For round ``r`` the salt is ``popcount(key) + r`` and every key byte is
rotated left by ``salt mod 8`` bits. Decryption at reverse step ``i`` uses the
forward index ``rounds - 1 - i`` so both directions see the same subkeys.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

from typing import Iterator, List, Literal

from .errors import InvalidKey, InvalidRounds

Direction = Literal["forward", "reverse"]

# Round counters are unsigned 32-bit.
MAX_ROUNDS = 2**32 - 1


def check_rounds(rounds) -> int:
    if isinstance(rounds, bool) or not isinstance(rounds, int):
        raise InvalidRounds(f"rounds must be an int, got {type(rounds).__name__}")
    if rounds < 0 or rounds > MAX_ROUNDS:
        raise InvalidRounds(f"rounds must be in [0, {MAX_ROUNDS}], got {rounds}")
    return rounds


def check_key(key) -> bytes:
    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise InvalidKey(f"key must be bytes-like, got {type(key).__name__}")
    return bytes(key)


def rotate_left(x: int, r: int, w: int = 8) -> int:
    """Rotate-left x by r bits in a w-bit word (r taken mod w)."""
    mask = (1 << w) - 1
    r %= w
    x &= mask
    return ((x << r) & mask) | (x >> (w - r))


def popcount_sum(key: bytes) -> int:
    return sum(b.bit_count() for b in key)


def effective_round(round_index: int, rounds: int, direction: Direction = "forward") -> int:
    """Map a loop step to the forward round index it corresponds to."""
    check_rounds(rounds)
    if isinstance(round_index, bool) or not isinstance(round_index, int):
        raise InvalidRounds(f"round_index must be an int, got {type(round_index).__name__}")
    if not 0 <= round_index < rounds:
        raise InvalidRounds(f"round_index {round_index} out of range for {rounds} rounds")
    if direction == "forward":
        return round_index
    if direction == "reverse":
        return rounds - round_index - 1
    raise ValueError(f"direction must be 'forward' or 'reverse', got {direction!r}")


def _rotate_key(key: bytes, salt: int) -> bytes:
    return bytes(rotate_left(b, salt) for b in key)


def derive_subkey(key: bytes, round_index: int, rounds: int, direction: Direction = "forward") -> bytes:
    """Subkey for one round; same length as ``key`` (empty key -> empty subkey)."""
    key = check_key(key)
    salt = popcount_sum(key) + effective_round(round_index, rounds, direction)
    return _rotate_key(key, salt)


def iter_subkeys(key: bytes, rounds: int, direction: Direction = "forward") -> Iterator[bytes]:
    """Yield the subkey for each loop step in order; nothing is cached."""
    key = check_key(key)
    check_rounds(rounds)
    if direction not in ("forward", "reverse"):
        raise ValueError(f"direction must be 'forward' or 'reverse', got {direction!r}")
    base = popcount_sum(key)
    for i in range(rounds):
        r = i if direction == "forward" else rounds - i - 1
        yield _rotate_key(key, base + r)


def key_schedule(key: bytes, rounds: int, direction: Direction = "forward") -> List[bytes]:
    return list(iter_subkeys(key, rounds, direction))
