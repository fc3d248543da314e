# src/vanning/packing/optimized.py

from __future__ import annotations

import logging

from vanning.geometry import orientations
from vanning.metrics import build_result
from vanning.models import CargoSpec, ContainerSpec, PlacementResult, StrategyId, check_specs
from vanning.packing.simple import grid_dims, grid_positions

logger = logging.getLogger(__name__)


def optimized_count(container: ContainerSpec, cargo: CargoSpec) -> int:
    """Boxes optimized_packing would place, without building the positions."""
    check_specs(container, cargo)
    best = 0
    for w, h, d in orientations(cargo.width, cargo.height, cargo.depth, unique=True):
        cols, rows, layers = grid_dims(container, cargo.oriented(w, h, d))
        best = max(best, cols * rows * layers)
    return best


def optimized_packing(container: ContainerSpec, cargo: CargoSpec) -> PlacementResult:
    """
    Grid-fill with the single cargo orientation that places the most boxes.

    All 6 axis permutations are tried; ties keep the earlier permutation, so the
    unrotated cargo wins whenever it is as good as any rotation. Orientations
    are never mixed within one load.
    """
    check_specs(container, cargo)

    best = build_result(StrategyId.OPTIMIZED, container, cargo, [])
    # duplicates (equal edges) can never beat an earlier identical permutation
    for w, h, d in orientations(cargo.width, cargo.height, cargo.depth, unique=True):
        positions = grid_positions(container, cargo.oriented(w, h, d))
        if len(positions) > best.count:
            best = build_result(StrategyId.OPTIMIZED, container, cargo, positions, box_dims=(w, h, d))
            logger.debug("orientation (%s, %s, %s) -> %d boxes", w, h, d, best.count)

    return best
