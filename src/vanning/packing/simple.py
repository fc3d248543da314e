# src/vanning/packing/simple.py

from __future__ import annotations

import logging

from vanning.geometry import grid_shape
from vanning.metrics import build_result
from vanning.models import CargoSpec, ContainerSpec, PlacementResult, StrategyId, Vec3, check_specs

logger = logging.getLogger(__name__)


def grid_dims(container: ContainerSpec, cargo: CargoSpec) -> tuple[int, int, int]:
    """(cols, rows, layers) of the grid; all zero when any axis holds no box."""
    cols, rows, layers = grid_shape(
        [
            (container.width, cargo.width),
            (container.height, cargo.height),
            (container.depth, cargo.depth),
        ],
        cargo.gap,
    )
    return cols, rows, layers


def simple_count(container: ContainerSpec, cargo: CargoSpec) -> int:
    """Boxes simple_stacking would place, without building the positions."""
    check_specs(container, cargo)
    cols, rows, layers = grid_dims(container, cargo)
    return cols * rows * layers


def grid_positions(container: ContainerSpec, cargo: CargoSpec) -> list[Vec3]:
    """
    Box centers of a plain grid fill, i (X) outer, j (Y) middle, k (Z) inner.

    Boxes start in the (-X, floor, -Z) corner and are spaced by size + gap.
    """
    cols, rows, layers = grid_dims(container, cargo)
    logger.debug("grid cols=%d rows=%d layers=%d", cols, rows, layers)

    if cols * rows * layers == 0:
        return []

    start_x = -container.width / 2 + cargo.width / 2
    start_y = cargo.height / 2
    start_z = -container.depth / 2 + cargo.depth / 2
    step_x = cargo.width + cargo.gap
    step_y = cargo.height + cargo.gap
    step_z = cargo.depth + cargo.gap

    positions: list[Vec3] = []
    for i in range(cols):
        for j in range(rows):
            for k in range(layers):
                positions.append((start_x + i * step_x, start_y + j * step_y, start_z + k * step_z))
    return positions


def simple_stacking(container: ContainerSpec, cargo: CargoSpec) -> PlacementResult:
    """Grid-fill the container along all three axes without rotating the cargo."""
    check_specs(container, cargo)
    return build_result(StrategyId.SIMPLE, container, cargo, grid_positions(container, cargo))
