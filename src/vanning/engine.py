"""Simulation entry points: a stateless function and a thin dispatcher."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from vanning.geometry import container_outline
from vanning.models import CargoSpec, ContainerSpec, PlacementResult, StrategyId, Vec3
from vanning.errors import CapacityExceeded
from vanning.packing import calculate, count_boxes, resolve_strategy

logger = logging.getLogger(__name__)


def simulate(
    container: ContainerSpec,
    cargo: CargoSpec,
    strategy: StrategyId | str = StrategyId.SIMPLE,
) -> PlacementResult:
    """Full recompute of a placement with the given strategy."""
    return calculate(resolve_strategy(strategy), container, cargo)


class PackingEngine:
    """
    Dispatches simulations to the currently selected strategy.

    The only state is the selected StrategyId and the last result. With
    cache_size > 0 results are memoized per (strategy, container, cargo);
    callers always receive their own copy. With max_boxes > 0 a run that
    would place more boxes is refused before any position is built.
    """

    def __init__(
        self,
        strategy: StrategyId | str = StrategyId.SIMPLE,
        cache_size: int = 0,
        max_boxes: int = 0,
    ):
        self._strategy = resolve_strategy(strategy)
        self._max_boxes = max_boxes
        self._cache_size = cache_size
        self._calculate = lru_cache(maxsize=cache_size)(calculate) if cache_size > 0 else calculate
        self.last_result: Optional[PlacementResult] = None

    @property
    def strategy(self) -> StrategyId:
        return self._strategy

    def set_strategy(self, strategy: StrategyId | str) -> None:
        self._strategy = resolve_strategy(strategy)
        logger.debug("strategy set to %s", self._strategy.value)

    def update_container_outline(self, container: ContainerSpec) -> list[tuple[Vec3, Vec3]]:
        """Wireframe edges for a renderer to draw around the load."""
        return container_outline(container)

    def simulate(self, container: ContainerSpec, cargo: CargoSpec) -> PlacementResult:
        if self._max_boxes > 0:
            count = count_boxes(self._strategy, container, cargo)
            if count > self._max_boxes:
                raise CapacityExceeded(
                    f"{self._strategy.value} would place {count} boxes; the limit is {self._max_boxes}"
                )
        result = self._calculate(self._strategy, container, cargo)
        if self._cache_size > 0:
            result = result.model_copy(deep=True)
        self.last_result = result
        return result

    def cache_info(self):
        """lru_cache statistics, or None when memoization is disabled."""
        if self._cache_size > 0:
            return self._calculate.cache_info()
        return None
