"""Avalanche measurement for the Feistel network.

Flips one random plaintext (or key) bit per trial and records the fraction
of ciphertext bits that change. A well-diffusing network sits near 0.5.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import random
import statistics
from dataclasses import dataclass, asdict
from typing import Any, Dict

from feistellab.cipher.engine import FeistelNetwork


def _hamming_distance_bytes(a: bytes, b: bytes) -> int:
    if len(a) != len(b):
        raise ValueError("hamming distance length mismatch")
    dist = 0
    for x, y in zip(a, b):
        dist += (x ^ y).bit_count()
    return dist


def _flip_bit(data: bytes, bit_index: int) -> bytes:
    byte_i = bit_index // 8
    bit_i = bit_index % 8
    if byte_i < 0 or byte_i >= len(data):
        raise IndexError("bit_index out of range")
    mask = 1 << bit_i
    out = bytearray(data)
    out[byte_i] ^= mask
    return bytes(out)


def _rand_bytes(rng: random.Random, n: int) -> bytes:
    return bytes(rng.randrange(0, 256) for _ in range(n))


@dataclass
class AvalancheResult:
    """Flip-fraction statistics for one input type."""
    input_type: str             # "plaintext" or "key"
    rounds: int
    data_len: int
    key_len: int
    trials: int
    mean: float = 0.0           # ~0.5 ideal
    std: float = 0.0
    min_frac: float = 0.0
    max_frac: float = 0.0

    @property
    def deviation(self) -> float:
        return abs(self.mean - 0.5)

    @property
    def passes(self) -> bool:
        """Heuristic: mean flip fraction within 0.05 of 0.5."""
        return self.deviation < 0.05

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["deviation"] = round(self.deviation, 6)
        d["passes"] = self.passes
        return d

    def summary(self) -> str:
        status = "PASS" if self.passes else "FAIL"
        return (
            f"[{status}] avalanche({self.input_type}, rounds={self.rounds}, "
            f"{self.data_len}B data, {self.key_len}B key): "
            f"mean={self.mean:.4f}, std={self.std:.4f}, "
            f"min={self.min_frac:.4f}, max={self.max_frac:.4f}"
        )


def _measure(
    network: FeistelNetwork,
    *,
    input_type: str,
    rounds: int,
    data_len: int,
    key_len: int,
    trials: int,
    rng: random.Random,
) -> AvalancheResult:
    if data_len <= 0:
        raise ValueError("data_len must be positive")
    if input_type == "key" and key_len <= 0:
        raise ValueError("key_len must be positive for key avalanche")

    total_bits = data_len * 8
    flip_space = total_bits if input_type == "plaintext" else key_len * 8
    fracs = []
    for _ in range(trials):
        key = _rand_bytes(rng, key_len)
        pt = _rand_bytes(rng, data_len)
        ct = network.encrypt(pt, key, rounds)
        bit = rng.randrange(0, flip_space)
        if input_type == "plaintext":
            ct2 = network.encrypt(_flip_bit(pt, bit), key, rounds)
        else:
            ct2 = network.encrypt(pt, _flip_bit(key, bit), rounds)
        fracs.append(_hamming_distance_bytes(ct, ct2) / total_bits)

    return AvalancheResult(
        input_type=input_type,
        rounds=rounds,
        data_len=data_len,
        key_len=key_len,
        trials=trials,
        mean=round(statistics.mean(fracs), 6) if fracs else 0.0,
        std=round(statistics.stdev(fracs), 6) if len(fracs) > 1 else 0.0,
        min_frac=round(min(fracs), 6) if fracs else 0.0,
        max_frac=round(max(fracs), 6) if fracs else 0.0,
    )


def avalanche_plaintext(
    network: FeistelNetwork,
    *,
    rounds: int,
    data_len: int = 32,
    key_len: int = 16,
    trials: int = 200,
    seed: int = 1337,
) -> AvalancheResult:
    rng = random.Random(seed)
    return _measure(
        network, input_type="plaintext", rounds=rounds,
        data_len=data_len, key_len=key_len, trials=trials, rng=rng,
    )


def avalanche_key(
    network: FeistelNetwork,
    *,
    rounds: int,
    data_len: int = 32,
    key_len: int = 16,
    trials: int = 200,
    seed: int = 1337,
) -> AvalancheResult:
    rng = random.Random(seed + 1)
    return _measure(
        network, input_type="key", rounds=rounds,
        data_len=data_len, key_len=key_len, trials=trials, rng=rng,
    )
