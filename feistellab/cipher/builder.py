from __future__ import annotations

from typing import Optional

from .engine import FeistelNetwork
from .registry import ComponentRegistry
from .spec import FeistelSpec
from .validator import validate_spec


def build_network(spec: FeistelSpec, registry: Optional[ComponentRegistry] = None) -> FeistelNetwork:
    reg = registry or ComponentRegistry()

    ok, errs = validate_spec(spec, reg)
    if not ok:
        raise ValueError(f"Invalid spec {spec.name!r}: " + "; ".join(errs))

    return FeistelNetwork(
        round_function=reg.get(spec.components["round_function"]).forward,
        key_schedule=reg.get(spec.components["key_schedule"]).forward,
    )
