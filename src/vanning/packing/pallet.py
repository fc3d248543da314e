# src/vanning/packing/pallet.py

from __future__ import annotations

import logging

from vanning.geometry import grid_shape
from vanning.metrics import build_result
from vanning.models import CargoSpec, ContainerSpec, PlacementResult, StrategyId, Vec3, check_specs

logger = logging.getLogger(__name__)

# ISO pallet footprint 1200 mm x 1000 mm; deck height of the pallet itself.
PALLET_WIDTH = 1.2
PALLET_DEPTH = 1.0
PALLET_HEIGHT = 0.15


def pallet_shape(container: ContainerSpec, cargo: CargoSpec) -> tuple[int, int, int, int, int]:
    """
    (pallet_cols, pallet_layers, per_x, per_y, per_z).

    Pallets tile the floor along X and Z and are never stacked; boxes on a
    pallet get whatever height the container leaves above the deck. All five
    are zero when any of them is.
    """
    pallet_cols, pallet_layers, per_x, per_y, per_z = grid_shape(
        [
            (container.width, PALLET_WIDTH),
            (container.depth, PALLET_DEPTH),
            (PALLET_WIDTH, cargo.width),
            (container.height - PALLET_HEIGHT, cargo.height),
            (PALLET_DEPTH, cargo.depth),
        ],
        cargo.gap,
    )
    return pallet_cols, pallet_layers, per_x, per_y, per_z


def pallet_count(container: ContainerSpec, cargo: CargoSpec) -> int:
    """Boxes pallet_loading would place, without building the positions."""
    check_specs(container, cargo)
    pallet_cols, pallet_layers, per_x, per_y, per_z = pallet_shape(container, cargo)
    return pallet_cols * pallet_layers * per_x * per_y * per_z


def pallet_loading(container: ContainerSpec, cargo: CargoSpec) -> PlacementResult:
    """
    Two-level packing: fill standard pallets with boxes, then tile the pallets
    over the container floor in a single layer.

    The single pallet layer models palletized freight where pallets are not
    double-stacked, so the full remaining height is given to each pallet.
    """
    check_specs(container, cargo)

    pallet_cols, pallet_layers, per_x, per_y, per_z = pallet_shape(container, cargo)
    logger.debug(
        "pallets=%dx%d boxes_per_pallet=%dx%dx%d",
        pallet_cols, pallet_layers, per_x, per_y, per_z,
    )

    if pallet_cols * pallet_layers * per_x * per_y * per_z == 0:
        return build_result(StrategyId.PALLET, container, cargo, [])

    step_x = cargo.width + cargo.gap
    step_y = cargo.height + cargo.gap
    step_z = cargo.depth + cargo.gap

    positions: list[Vec3] = []
    for pallet_col in range(pallet_cols):
        for pallet_layer in range(pallet_layers):
            # pallet center on the floor grid
            pallet_x = -container.width / 2 + PALLET_WIDTH / 2 + pallet_col * (PALLET_WIDTH + cargo.gap)
            pallet_z = -container.depth / 2 + PALLET_DEPTH / 2 + pallet_layer * (PALLET_DEPTH + cargo.gap)

            for i in range(per_x):
                for j in range(per_y):
                    for k in range(per_z):
                        x = pallet_x - PALLET_WIDTH / 2 + cargo.width / 2 + i * step_x
                        y = PALLET_HEIGHT + cargo.height / 2 + j * step_y
                        z = pallet_z - PALLET_DEPTH / 2 + cargo.depth / 2 + k * step_z
                        positions.append((x, y, z))

    return build_result(StrategyId.PALLET, container, cargo, positions)
