from __future__ import annotations

import pytest

from vanning.errors import InvalidSpecification
from vanning.geometry import (
    boxes_overlap,
    centered_bounds,
    container_bounds,
    container_outline,
    fits_inside,
    grid_count,
    grid_shape,
    orientations,
)
from vanning.models import ContainerSpec


def test_boxes_overlap_overlapping() -> None:
    """Test that overlapping boxes are detected."""
    # Box a: (0, 0, 0) to (2, 2, 2)
    a = (0.0, 0.0, 0.0, 2.0, 2.0, 2.0)
    # Box b: (1, 1, 1) to (3, 3, 3) - overlaps with a
    b = (1.0, 1.0, 1.0, 3.0, 3.0, 3.0)

    assert boxes_overlap(a, b) is True


def test_boxes_overlap_not_overlapping() -> None:
    """Test that non-overlapping boxes are detected."""
    a = (0.0, 0.0, 0.0, 1.0, 1.0, 1.0)
    b = (2.0, 2.0, 2.0, 3.0, 3.0, 3.0)

    assert boxes_overlap(a, b) is False


def test_touching_faces_do_not_overlap() -> None:
    a = (0.0, 0.0, 0.0, 1.0, 1.0, 1.0)
    b = (1.0, 0.0, 0.0, 2.0, 1.0, 1.0)

    assert boxes_overlap(a, b) is False


def test_centered_bounds() -> None:
    assert centered_bounds((0.0, 1.0, 0.0), (2.0, 2.0, 4.0)) == (-1.0, 0.0, -2.0, 1.0, 2.0, 2.0)


def test_container_bounds_floor_at_zero() -> None:
    container = ContainerSpec(width=4.0, height=2.0, depth=2.0)

    assert container_bounds(container) == (-2.0, 0.0, -1.0, 2.0, 2.0, 1.0)
    assert fits_inside((-2.0, 0.0, -1.0, 2.0, 2.0, 1.0), container_bounds(container))
    assert not fits_inside((-2.1, 0.0, -1.0, 2.0, 2.0, 1.0), container_bounds(container))


def test_orientations_fixed_order() -> None:
    assert orientations(1, 2, 3) == [
        (1.0, 2.0, 3.0),
        (1.0, 3.0, 2.0),
        (2.0, 1.0, 3.0),
        (2.0, 3.0, 1.0),
        (3.0, 1.0, 2.0),
        (3.0, 2.0, 1.0),
    ]


def test_orientations_unique_drops_duplicates_in_order() -> None:
    assert orientations(1, 1, 1, unique=True) == [(1.0, 1.0, 1.0)]
    assert orientations(1, 2, 1, unique=True) == [(1.0, 2.0, 1.0), (1.0, 1.0, 2.0), (2.0, 1.0, 1.0)]
    assert len(orientations(1, 1, 1)) == 6


def test_grid_count() -> None:
    assert grid_count(5.9, 0.5, 0.01) == 11
    assert grid_count(2.0, 3.0, 0.01) == 0
    # negative extent (e.g. container lower than a pallet deck) clamps to zero
    assert grid_count(-0.5, 0.4, 0.01) == 0


def test_grid_count_rejects_overflowing_ratio() -> None:
    with pytest.raises(InvalidSpecification, match="overflows"):
        grid_count(1e308, 1e-10, 0.0)


def test_grid_shape_is_empty_when_any_axis_misses() -> None:
    # the first axis alone would overflow; the second holds no slot
    assert grid_shape([(1e308, 1e-10), (1.0, 2.0), (1.0, 2.0)], 0.0) == (0, 0, 0)
    assert grid_shape([(5.9, 0.5), (2.39, 0.4), (2.35, 0.5)], 0.01) == (11, 5, 4)


def test_container_outline_has_twelve_axis_aligned_edges() -> None:
    container = ContainerSpec(width=4.0, height=2.0, depth=3.0)
    edges = container_outline(container)

    assert len(edges) == 12
    lengths = sorted(
        max(abs(p - q) for p, q in zip(a, b)) for a, b in edges
    )
    assert lengths == [2.0] * 4 + [3.0] * 4 + [4.0] * 4
    assert min(point[1] for edge in edges for point in edge) == 0.0
