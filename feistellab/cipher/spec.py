from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, Field, field_validator

from .key_schedule import MAX_ROUNDS

DEFAULT_COMPONENTS = {
    "round_function": "prf.sha256",
    "key_schedule": "ks.popcount_rotate",
}


class FeistelSpec(BaseModel):
    """A *research* description of a Feistel network configuration.

    This is NOT a guarantee of security. It names the round count and the
    components to plug in so that networks can be built, evaluated and
    compared reproducibly.
    """

    name: str = Field(..., min_length=3, max_length=80)
    rounds: int = Field(..., ge=0, le=MAX_ROUNDS)

    # Map role -> component_id (registered in ComponentRegistry)
    components: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_COMPONENTS))

    version: str = Field(default="0.1")
    notes: str = Field(default="")
    seed: int = Field(default=1337, description="Used for deterministic test vectors")

    @field_validator("components")
    @classmethod
    def _fill_defaults(cls, v: Dict[str, str]) -> Dict[str, str]:
        merged = dict(DEFAULT_COMPONENTS)
        merged.update(v)
        return merged
