"""CLI entry point for evaluating a Feistel network configuration.

Usage:
    python scripts/run_evaluation.py                                  # defaults from env/.env
    python scripts/run_evaluation.py --rounds 8 --round-function prf.blake2b
    python scripts/run_evaluation.py --vectors 200 --sweep-max-rounds 10 --trials 50

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from feistellab.cipher.builder import build_network
from feistellab.cipher.registry import ComponentRegistry
from feistellab.cipher.spec import FeistelSpec
from feistellab.config import load_settings
from feistellab.evaluation import (
    EvaluationReport,
    avalanche_key,
    avalanche_plaintext,
    run_roundtrip_tests,
    run_rounds_sweep,
)
from feistellab.utils.repro import make_run_dir, set_global_seed, write_json, write_text

logger = logging.getLogger("run_evaluation")


def _cli_progress(rounds: int, max_rounds: int) -> None:
    """Print sweep progress to stderr."""
    print(f"  [rounds {rounds}/{max_rounds}]", file=sys.stderr)


def main() -> None:
    settings = load_settings()

    parser = argparse.ArgumentParser(
        description="Feistel network evaluation - roundtrip and avalanche",
    )
    parser.add_argument(
        "--name", type=str, default="feistel-default",
        help="Run name used for the output directory (default: feistel-default)",
    )
    parser.add_argument(
        "--rounds", type=int, default=settings.default_rounds,
        help=f"Round count (default: {settings.default_rounds})",
    )
    parser.add_argument(
        "--round-function", type=str, default=settings.round_function,
        help=f"Round function component id (default: {settings.round_function})",
    )
    parser.add_argument(
        "--key-schedule", type=str, default=settings.key_schedule,
        help=f"Key schedule component id (default: {settings.key_schedule})",
    )
    parser.add_argument(
        "--vectors", type=int, default=settings.roundtrip_vectors,
        help=f"Roundtrip test vectors (default: {settings.roundtrip_vectors})",
    )
    parser.add_argument(
        "--sweep-max-rounds", type=int, default=0,
        help="Also sweep roundtrip over rounds 0..N (default: 0, disabled)",
    )
    parser.add_argument(
        "--trials", type=int, default=settings.avalanche_trials,
        help=f"Avalanche trials (default: {settings.avalanche_trials})",
    )
    parser.add_argument(
        "--seed", type=int, default=settings.global_seed,
        help=f"Random seed (default: {settings.global_seed})",
    )
    parser.add_argument(
        "--output-dir", type=str, default=settings.runs_dir,
        help=f"Output directory (default: {settings.runs_dir})",
    )
    parser.add_argument(
        "--list-components", action="store_true",
        help="List registered components and exit",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    registry = ComponentRegistry()

    if args.list_components:
        for comp in registry.list_by_kind("ROUND_FUNCTION") + registry.list_by_kind("KEY_SCHEDULE"):
            print(f"{comp.component_id:24s} {comp.kind:16s} {comp.description}")
        return

    set_global_seed(args.seed)

    spec = FeistelSpec(
        name=args.name,
        rounds=args.rounds,
        components={
            "round_function": args.round_function,
            "key_schedule": args.key_schedule,
        },
        seed=args.seed,
    )

    try:
        network = build_network(spec, registry)
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(2)

    report = EvaluationReport(spec=spec.model_dump())

    logger.info("Roundtrip: %d vectors at %d rounds", args.vectors, spec.rounds)
    report.roundtrip_results.append(
        run_roundtrip_tests(spec, num_vectors=args.vectors, seed=args.seed, registry=registry)
    )

    if args.sweep_max_rounds > 0:
        report.roundtrip_results.extend(run_rounds_sweep(
            spec,
            max_rounds=args.sweep_max_rounds,
            num_vectors=max(1, args.vectors // 10),
            seed=args.seed,
            registry=registry,
            progress_callback=_cli_progress,
        ))

    logger.info("Avalanche: %d trials", args.trials)
    report.avalanche_results.append(
        avalanche_plaintext(network, rounds=spec.rounds, trials=args.trials, seed=args.seed)
    )
    report.avalanche_results.append(
        avalanche_key(network, rounds=spec.rounds, trials=args.trials, seed=args.seed)
    )

    paths = make_run_dir(args.output_dir, spec.name)
    write_json(paths.spec_json, spec.model_dump())
    write_json(paths.report_json, report.to_dict())
    summary = report.to_summary()
    write_text(paths.summary_txt, summary)

    print(summary)
    print(f"\nAll results saved to: {paths.run_dir}")

    if report.failing_runs():
        sys.exit(1)


if __name__ == "__main__":
    main()
