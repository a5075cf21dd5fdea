"""Variable-length, variable-round Feistel network.

The input is split into Left/Right at ``len // 2`` and each round computes::

    L, R = R, L XOR F(R, k_r)

XOR covers ``min(len(L), len(R))`` bytes; when Left is the longer half its
trailing byte is carried over unchanged, so lengths alternate between rounds
and the total length is preserved. The output is ``R || L``.

Decryption replays the same step with the subkeys in reverse order. It needs
the encrypt-time split point, which moves by one byte for odd-length data when
the round count is even.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Tuple

from .errors import InvalidData
from .key_schedule import Direction, check_key, check_rounds, iter_subkeys
from .round_function import RoundFunction, make_round_function

logger = logging.getLogger(__name__)

KeySchedule = Callable[[bytes, int, Direction], Iterable[bytes]]


def _check_data(data) -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise InvalidData(f"data must be bytes-like, got {type(data).__name__}")
    return bytes(data)


def split_index(length: int, rounds: int, *, decrypting: bool = False) -> int:
    """Where to cut the input into Left/Right."""
    half = length // 2
    if decrypting and rounds % 2 == 0 and length % 2 == 1:
        return half + 1
    return half


def feistel_round(left: bytes, right: bytes, subkey: bytes, round_fn: RoundFunction) -> Tuple[bytes, bytes]:
    """One Feistel step: ``(L, R) -> (R, L XOR F(R, k))``."""
    tmp = round_fn(right, subkey)
    n = min(len(left), len(tmp))
    new_right = bytes(x ^ y for x, y in zip(left[:n], tmp[:n])) + left[n:]
    return right, new_right


@dataclass
class FeistelNetwork:
    round_function: RoundFunction = field(default_factory=make_round_function)
    key_schedule: KeySchedule = iter_subkeys

    def _run(self, data: bytes, key: bytes, rounds: int, direction: Direction) -> bytes:
        cut = split_index(len(data), rounds, decrypting=direction == "reverse")
        left, right = data[:cut], data[cut:]
        for subkey in self.key_schedule(key, rounds, direction):
            left, right = feistel_round(left, right, subkey, self.round_function)
        return right + left

    def encrypt(self, plaintext: bytes, key: bytes, rounds: int) -> bytes:
        plaintext = _check_data(plaintext)
        key = check_key(key)
        check_rounds(rounds)
        logger.debug("encrypt: %d bytes, %d rounds", len(plaintext), rounds)
        return self._run(plaintext, key, rounds, "forward")

    def decrypt(self, ciphertext: bytes, key: bytes, rounds: int) -> bytes:
        ciphertext = _check_data(ciphertext)
        key = check_key(key)
        check_rounds(rounds)
        logger.debug("decrypt: %d bytes, %d rounds", len(ciphertext), rounds)
        return self._run(ciphertext, key, rounds, "reverse")


_DEFAULT_NETWORK = FeistelNetwork()


def encrypt(plaintext: bytes, key: bytes, rounds: int) -> bytes:
    """Encrypt with the default network (SHA-256 round function)."""
    return _DEFAULT_NETWORK.encrypt(plaintext, key, rounds)


def decrypt(ciphertext: bytes, key: bytes, rounds: int) -> bytes:
    """Invert :func:`encrypt` for the same ``key`` and ``rounds``."""
    return _DEFAULT_NETWORK.decrypt(ciphertext, key, rounds)
