"""Deterministic evaluation of Feistel network configurations.

Provides algebraic unit testing (roundtrip verification across round
counts) and statistical diffusion measurement (avalanche).

Research / education only. Do NOT use in production.
"""

from .roundtrip import RoundtripResult, RoundtripFailure, run_roundtrip_tests, run_rounds_sweep
from .avalanche import AvalancheResult, avalanche_plaintext, avalanche_key
from .report import EvaluationReport

__all__ = [
    "RoundtripResult",
    "RoundtripFailure",
    "run_roundtrip_tests",
    "run_rounds_sweep",
    "AvalancheResult",
    "avalanche_plaintext",
    "avalanche_key",
    "EvaluationReport",
]
