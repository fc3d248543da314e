from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from vanning.config import get_settings
from vanning.containers import DEFAULT_CARGO_PRESET, DEFAULT_CONTAINER_PRESET, get_cargo_dims, get_container_dims
from vanning.diagnostics import build_stats
from vanning.engine import PackingEngine
from vanning.errors import VanningError
from vanning.models import CargoSpec, ContainerSpec, PlacementResult, StrategyId, parse_cargo, parse_container
from vanning.packing import STRATEGY_NAMES

logger = logging.getLogger(__name__)


def load_specs(args: argparse.Namespace) -> tuple[ContainerSpec, CargoSpec]:
    """Preset dims first, then any explicit per-dimension overrides."""
    container_kwargs: dict[str, Any] = get_container_dims(args.container_preset)
    for name in ("width", "height", "depth"):
        value = getattr(args, f"container_{name}")
        if value is not None:
            container_kwargs[name] = value

    cargo_kwargs: dict[str, Any] = get_cargo_dims(args.cargo_preset)
    for name in ("width", "height", "depth", "gap"):
        value = getattr(args, f"cargo_{name}")
        if value is not None:
            cargo_kwargs[name] = value

    return parse_container(container_kwargs), parse_cargo(cargo_kwargs)


def summarize(result: PlacementResult, container: ContainerSpec) -> dict[str, Any]:
    stats = build_stats(result, container)
    return {
        "strategy": result.strategy.value,
        "strategy_name": STRATEGY_NAMES[result.strategy],
        "count": result.count,
        "volume_utilization": round(result.volume_utilization, 4),
        "center_of_gravity": [round(c, 4) for c in result.center_of_gravity],
        "box_dims": list(result.box_dims),
        "status": stats.status,
        "warnings": stats.warning_messages,
    }


def write_plan(plan: dict, path: str = "plan.json") -> None:
    """
    Write a plan dictionary to a JSON file.

    Creates parent folders if needed and overwrites the file on every run.
    """
    output_path = Path(path).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    logger.info("writing plan to %s", output_path)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(plan, f, indent=2, sort_keys=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vanning", description="Container loading simulator")
    parser.add_argument("--container-preset", default=DEFAULT_CONTAINER_PRESET, help="20ft, 40ft or 40ftHC")
    parser.add_argument("--container-width", type=float)
    parser.add_argument("--container-height", type=float)
    parser.add_argument("--container-depth", type=float)
    parser.add_argument("--cargo-preset", default=DEFAULT_CARGO_PRESET, help="small, medium or large")
    parser.add_argument("--cargo-width", type=float)
    parser.add_argument("--cargo-height", type=float)
    parser.add_argument("--cargo-depth", type=float)
    parser.add_argument("--cargo-gap", type=float)
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in StrategyId],
        default=None,
        help="Packing strategy (defaults to VANNING_DEFAULT_STRATEGY or simpleStacking)",
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Run every strategy and print one summary per strategy",
    )
    parser.add_argument("--output", help="Write the full plan (with positions) to this JSON file")
    return parser


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    args = build_parser().parse_args(argv)

    strategies = list(StrategyId) if args.compare else [StrategyId(args.strategy or settings.default_strategy)]
    engine = PackingEngine(max_boxes=settings.max_boxes)
    try:
        container, cargo = load_specs(args)
        results = []
        for strategy in strategies:
            engine.set_strategy(strategy)
            results.append(engine.simulate(container, cargo))
    except VanningError as e:
        logger.error("%s", e)
        return 2

    summaries = [summarize(r, container) for r in results]
    print(json.dumps(summaries if args.compare else summaries[0], indent=2, sort_keys=True))

    if args.output:
        plan = {
            "container": container.model_dump(),
            "cargo": cargo.model_dump(),
            "results": [r.to_wire() for r in results],
            "summaries": summaries,
        }
        write_plan(plan, args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
