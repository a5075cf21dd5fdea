"""Built-in Feistel components: round functions and key schedules.

Research / education only. Do NOT use in production.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from .key_schedule import iter_subkeys
from .round_function import make_round_function


@dataclass(frozen=True)
class Component:
    """A pluggable piece of the Feistel network."""
    component_id: str
    kind: str  # ROUND_FUNCTION, KEY_SCHEDULE
    description: str
    forward: Callable


_PRF_DESCRIPTIONS = {
    "sha256": "SHA-256(subkey || data), truncated or repeated to len(data)",
    "sha512": "SHA-512(subkey || data), truncated or repeated to len(data)",
    "sha3_256": "SHA3-256(subkey || data), truncated or repeated to len(data)",
    "blake2b": "BLAKE2b-512(subkey || data), truncated or repeated to len(data)",
    "blake2s": "BLAKE2s-256(subkey || data), truncated or repeated to len(data)",
}


def builtin_components() -> Dict[str, Component]:
    """Return all built-in components keyed by id."""
    comps: Dict[str, Component] = {}

    # ========== ROUND FUNCTIONS ==========
    for algo, desc in _PRF_DESCRIPTIONS.items():
        cid = f"prf.{algo}"
        comps[cid] = Component(
            component_id=cid,
            kind="ROUND_FUNCTION",
            description=desc,
            forward=make_round_function(algo),
        )

    # ========== KEY SCHEDULES ==========
    comps["ks.popcount_rotate"] = Component(
        component_id="ks.popcount_rotate",
        kind="KEY_SCHEDULE",
        description="Rotate each key byte left by popcount(key) + round (mod 8)",
        forward=iter_subkeys,
    )

    return comps
