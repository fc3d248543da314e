"""Packing strategies: pure functions of (container, cargo)."""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping

from vanning.errors import UnknownStrategy
from vanning.models import CargoSpec, ContainerSpec, PlacementResult, StrategyId
from vanning.packing.optimized import optimized_count, optimized_packing
from vanning.packing.pallet import pallet_count, pallet_loading
from vanning.packing.simple import simple_count, simple_stacking

PackingStrategy = Callable[[ContainerSpec, CargoSpec], PlacementResult]
BoxCounter = Callable[[ContainerSpec, CargoSpec], int]

STRATEGIES: Mapping[StrategyId, PackingStrategy] = MappingProxyType({
    StrategyId.SIMPLE: simple_stacking,
    StrategyId.PALLET: pallet_loading,
    StrategyId.OPTIMIZED: optimized_packing,
})

# count only, no positions built; used to refuse oversized runs up front
STRATEGY_COUNTS: Mapping[StrategyId, BoxCounter] = MappingProxyType({
    StrategyId.SIMPLE: simple_count,
    StrategyId.PALLET: pallet_count,
    StrategyId.OPTIMIZED: optimized_count,
})

STRATEGY_NAMES: Mapping[StrategyId, str] = MappingProxyType({
    StrategyId.SIMPLE: "Simple Stacking",
    StrategyId.PALLET: "Pallet Loading",
    StrategyId.OPTIMIZED: "Optimized Packing",
})


def resolve_strategy(strategy: StrategyId | str) -> StrategyId:
    """Accept a StrategyId or its wire name."""
    try:
        return StrategyId(strategy)
    except ValueError:
        available = ", ".join(s.value for s in StrategyId)
        raise UnknownStrategy(f"Unknown strategy '{strategy}'. Valid: [{available}]") from None


def get_strategy(strategy: StrategyId | str) -> PackingStrategy:
    return STRATEGIES[resolve_strategy(strategy)]


def count_boxes(strategy: StrategyId | str, container: ContainerSpec, cargo: CargoSpec) -> int:
    """Number of boxes a strategy would place."""
    return STRATEGY_COUNTS[resolve_strategy(strategy)](container, cargo)


def calculate(strategy: StrategyId | str, container: ContainerSpec, cargo: CargoSpec) -> PlacementResult:
    """Run one strategy by id."""
    return get_strategy(strategy)(container, cargo)


__all__ = [
    "STRATEGIES",
    "STRATEGY_COUNTS",
    "STRATEGY_NAMES",
    "PackingStrategy",
    "calculate",
    "count_boxes",
    "get_strategy",
    "optimized_packing",
    "pallet_loading",
    "resolve_strategy",
    "simple_stacking",
]
