"""Container loading (vanning) simulation: grid, pallet and orientation-optimized packing."""

from vanning.diagnostics import LoadingStats, LoadWarning, build_stats, evaluate_warnings
from vanning.engine import PackingEngine, simulate
from vanning.errors import InvalidSpecification, UnknownPreset, UnknownStrategy, VanningError
from vanning.models import CargoSpec, ContainerSpec, PlacementResult, StrategyId
from vanning.packing import STRATEGIES, calculate

__all__ = [
    "STRATEGIES",
    "CargoSpec",
    "ContainerSpec",
    "InvalidSpecification",
    "LoadWarning",
    "LoadingStats",
    "PackingEngine",
    "PlacementResult",
    "StrategyId",
    "UnknownPreset",
    "UnknownStrategy",
    "VanningError",
    "build_stats",
    "calculate",
    "evaluate_warnings",
    "simulate",
]
