"""Structured evaluation report builder.

Aggregates roundtrip and avalanche results into a single serializable
report for JSON export and console display.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .avalanche import AvalancheResult
from .roundtrip import RoundtripResult


@dataclass
class EvaluationReport:
    """Complete evaluation report aggregating all analysis results."""
    timestamp: str = ""
    spec: Optional[Dict[str, Any]] = None
    roundtrip_results: List[RoundtripResult] = field(default_factory=list)
    avalanche_results: List[AvalancheResult] = field(default_factory=list)

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now(timezone.utc).isoformat()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize full report for JSON export."""
        return {
            "timestamp": self.timestamp,
            "spec": self.spec,
            "roundtrip": [r.to_dict() for r in self.roundtrip_results],
            "avalanche": [a.to_dict() for a in self.avalanche_results],
            "summary": {
                "roundtrip_runs": len(self.roundtrip_results),
                "roundtrip_all_pass": all(r.is_perfect for r in self.roundtrip_results),
                "avalanche_all_pass": all(a.passes for a in self.avalanche_results),
                "failing_runs": self.failing_runs(),
            },
        }

    def to_summary(self) -> str:
        """Human-readable summary for the console."""
        lines = [f"Evaluation Report - {self.timestamp}", "=" * 50]

        if self.roundtrip_results:
            rt_pass = sum(1 for r in self.roundtrip_results if r.is_perfect)
            rt_total = len(self.roundtrip_results)
            lines.append(f"\nRoundtrip Tests: {rt_pass}/{rt_total} runs pass")
            for r in self.roundtrip_results:
                lines.append(f"  {r.summary()}")

        if self.avalanche_results:
            av_pass = sum(1 for a in self.avalanche_results if a.passes)
            lines.append(f"\nAvalanche: {av_pass}/{len(self.avalanche_results)} pass")
            for a in self.avalanche_results:
                lines.append(f"  {a.summary()}")

        return "\n".join(lines)

    def failing_runs(self) -> List[str]:
        """Return names of roundtrip runs with failures."""
        return [r.spec_name for r in self.roundtrip_results if not r.is_perfect]
