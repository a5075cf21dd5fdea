"""Algebraic unit testing: roundtrip verification P = D(E(P, K), K).

Generates randomized variable-length test vectors (empty, odd and
unbalanced inputs included) and verifies that decryption perfectly inverts
encryption and preserves length for every vector.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field, asdict
from typing import Any, Callable, Dict, List, Optional

from feistellab.cipher.builder import build_network
from feistellab.cipher.registry import ComponentRegistry
from feistellab.cipher.spec import FeistelSpec

logger = logging.getLogger(__name__)


@dataclass
class RoundtripFailure:
    """Details of a single failed roundtrip test vector."""
    vector_index: int
    plaintext_hex: str
    key_hex: str
    ciphertext_hex: str
    decrypted_hex: str       # What decrypt returned (should equal plaintext)
    error: Optional[str]     # Exception message if decrypt/encrypt threw


@dataclass
class RoundtripResult:
    """Aggregate result of roundtrip testing for one spec."""
    spec_name: str
    rounds: int
    round_function: str
    key_schedule: str
    total_vectors: int
    passed: int
    failed: int
    failures: List[RoundtripFailure] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    seed: int = 1337

    @property
    def success_rate(self) -> float:
        return self.passed / self.total_vectors if self.total_vectors > 0 else 0.0

    @property
    def is_perfect(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        status = "PASS" if self.is_perfect else "FAIL"
        return (
            f"[{status}] {self.spec_name} (rounds={self.rounds}, {self.round_function}): "
            f"{self.passed}/{self.total_vectors} vectors passed "
            f"({self.elapsed_seconds:.2f}s)"
        )


def _rand_bytes(rng: random.Random, n: int) -> bytes:
    return bytes(rng.randrange(0, 256) for _ in range(n))


def run_roundtrip_tests(
    spec: FeistelSpec,
    *,
    num_vectors: int = 1000,
    seed: int = 1337,
    max_plaintext_len: int = 96,
    max_key_len: int = 32,
    max_failures_recorded: int = 10,
    registry: Optional[ComponentRegistry] = None,
) -> RoundtripResult:
    """Run roundtrip verification P = D(E(P, K), K) across many test vectors.

    Plaintext and key lengths are drawn uniformly from ``[0, max_*_len]`` so
    that empty, odd-length and key-longer-than-data cases are all exercised.

    Args:
        spec: Network specification to test.
        num_vectors: Number of random (plaintext, key) pairs to test.
        seed: Random seed for deterministic reproducibility.
        max_plaintext_len: Largest plaintext length drawn.
        max_key_len: Largest key length drawn.
        max_failures_recorded: Maximum number of failure details to keep.
        registry: Optional component registry; uses default if not provided.

    Returns:
        RoundtripResult with pass/fail counts and failure details.
    """
    reg = registry or ComponentRegistry()
    network = build_network(spec, reg)

    rng = random.Random(seed)
    passed = 0
    failed = 0
    failures: List[RoundtripFailure] = []

    start = time.perf_counter()

    for i in range(num_vectors):
        pt = _rand_bytes(rng, rng.randint(0, max_plaintext_len))
        key = _rand_bytes(rng, rng.randint(0, max_key_len))

        try:
            ct = network.encrypt(pt, key, spec.rounds)
            pt2 = network.decrypt(ct, key, spec.rounds)

            if pt == pt2 and len(ct) == len(pt):
                passed += 1
            else:
                failed += 1
                if len(failures) < max_failures_recorded:
                    failures.append(RoundtripFailure(
                        vector_index=i,
                        plaintext_hex=pt.hex(),
                        key_hex=key.hex(),
                        ciphertext_hex=ct.hex(),
                        decrypted_hex=pt2.hex(),
                        error=None,
                    ))
        except Exception as exc:
            failed += 1
            logger.warning("Vector %d raised %s: %s", i, type(exc).__name__, exc)
            if len(failures) < max_failures_recorded:
                failures.append(RoundtripFailure(
                    vector_index=i,
                    plaintext_hex=pt.hex(),
                    key_hex=key.hex(),
                    ciphertext_hex="<error>",
                    decrypted_hex="<error>",
                    error=f"{type(exc).__name__}: {exc}",
                ))

    elapsed = time.perf_counter() - start

    if failed:
        logger.warning("%s: %d/%d roundtrip vectors failed", spec.name, failed, num_vectors)

    return RoundtripResult(
        spec_name=spec.name,
        rounds=spec.rounds,
        round_function=spec.components["round_function"],
        key_schedule=spec.components["key_schedule"],
        total_vectors=num_vectors,
        passed=passed,
        failed=failed,
        failures=failures,
        elapsed_seconds=round(elapsed, 4),
        seed=seed,
    )


def run_rounds_sweep(
    spec: FeistelSpec,
    *,
    max_rounds: int = 50,
    num_vectors: int = 100,
    seed: int = 1337,
    registry: Optional[ComponentRegistry] = None,
    progress_callback: Optional[Callable[[int, int], None]] = None,
) -> List[RoundtripResult]:
    """Run roundtrip tests for every round count in ``[0, max_rounds]``.

    The components of ``spec`` are kept; only ``rounds`` varies.

    Args:
        spec: Base specification (its ``rounds`` is ignored).
        max_rounds: Largest round count tested (inclusive).
        num_vectors: Number of test vectors per round count.
        seed: Random seed for reproducibility.
        registry: Optional component registry shared by all runs.
        progress_callback: Optional callback(current_rounds, max_rounds).

    Returns:
        List of RoundtripResult ordered by round count.
    """
    reg = registry or ComponentRegistry()
    results: List[RoundtripResult] = []

    for rounds in range(max_rounds + 1):
        if progress_callback:
            progress_callback(rounds, max_rounds)

        variant = spec.model_copy(update={"rounds": rounds, "name": f"{spec.name}-r{rounds}"})
        results.append(run_roundtrip_tests(
            variant,
            num_vectors=num_vectors,
            seed=seed + rounds,
            registry=reg,
        ))

    logger.info(
        "Rounds sweep 0..%d: %d/%d round counts perfect",
        max_rounds, sum(1 for r in results if r.is_perfect), len(results),
    )
    return results
