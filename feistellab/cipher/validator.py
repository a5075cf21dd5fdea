from __future__ import annotations

from typing import List, Tuple

from .registry import ComponentRegistry
from .spec import FeistelSpec

_ROLE_KINDS = {
    "round_function": "ROUND_FUNCTION",
    "key_schedule": "KEY_SCHEDULE",
}


def validate_spec(spec: FeistelSpec, registry: ComponentRegistry | None = None) -> Tuple[bool, List[str]]:
    reg = registry or ComponentRegistry()
    errs: List[str] = []

    for role, kind in _ROLE_KINDS.items():
        cid = spec.components.get(role)
        if cid is None:
            errs.append(f"Missing component: {role}")
        elif not reg.exists(cid):
            errs.append(f"Unknown {role} component: {cid}")
        elif reg.get(cid).kind != kind:
            errs.append(f"Component {cid} is a {reg.get(cid).kind}, expected {kind} for {role}")

    for role in spec.components:
        if role not in _ROLE_KINDS:
            errs.append(f"Unsupported component role: {role}")

    return (len(errs) == 0), errs
