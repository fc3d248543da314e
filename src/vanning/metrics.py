from __future__ import annotations

from typing import Optional

from vanning.models import ORIGIN, CargoSpec, ContainerSpec, PlacementResult, StrategyId, Vec3


def volume_utilization(container: ContainerSpec, cargo: CargoSpec, count: int) -> float:
    container_volume = container.volume
    return 0.0 if container_volume == 0 else (cargo.volume * count) / container_volume


def center_of_gravity(positions: list[Vec3]) -> Vec3:
    """Equal-mass centroid of box centers; the origin when nothing is placed."""
    n = len(positions)
    if n == 0:
        return ORIGIN
    sum_x = sum_y = sum_z = 0.0
    for x, y, z in positions:
        sum_x += x
        sum_y += y
        sum_z += z
    return (sum_x / n, sum_y / n, sum_z / n)


def build_result(
    strategy: StrategyId,
    container: ContainerSpec,
    cargo: CargoSpec,
    positions: list[Vec3],
    box_dims: Optional[Vec3] = None,
) -> PlacementResult:
    """
    Assemble the aggregate statistics shared by every strategy.

    box_dims is the orientation the boxes were placed in; it defaults to the
    cargo's own (width, height, depth).
    """
    if box_dims is None:
        box_dims = cargo.dims
    if not positions:
        return PlacementResult.empty(strategy, box_dims)
    count = len(positions)
    return PlacementResult(
        strategy=strategy,
        count=count,
        positions=positions,
        volume_utilization=volume_utilization(container, cargo, count),
        center_of_gravity=center_of_gravity(positions),
        box_dims=box_dims,
    )
