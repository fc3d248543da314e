"""Geometry utilities for axis-aligned cargo placement.

The bounds helpers (``centered_bounds``, ``container_bounds``, ``fits_inside``,
``boxes_overlap``) are public so callers can check a PlacementResult: every box
inside the container and no two boxes overlapping.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from vanning.errors import InvalidSpecification

if TYPE_CHECKING:
    from .models import ContainerSpec, Vec3

Bounds = tuple[float, float, float, float, float, float]


def boxes_overlap(a: Bounds, b: Bounds) -> bool:
    """
    Axis-aligned bounding box (AABB) overlap test.

    a, b are bounds: (x1, y1, z1, x2, y2, z2)

    Overlap exists only if they overlap on ALL 3 axes with positive volume.
    Touching faces/edges (ax2 == bx1) is NOT considered overlap.
    """
    ax1, ay1, az1, ax2, ay2, az2 = a
    bx1, by1, bz1, bx2, by2, bz2 = b

    return (ax1 < bx2 and ax2 > bx1) and (ay1 < by2 and ay2 > by1) and (az1 < bz2 and az2 > bz1)


def centered_bounds(center: "Vec3", dims: "Vec3") -> Bounds:
    """Bounds of a box given its center point and (width, height, depth)."""
    x, y, z = center
    w, h, d = dims
    return (x - w / 2, y - h / 2, z - d / 2, x + w / 2, y + h / 2, z + d / 2)


def container_bounds(container: "ContainerSpec") -> Bounds:
    """Interior bounds: centered on X/Z, floor at Y=0."""
    return (
        -container.width / 2,
        0.0,
        -container.depth / 2,
        container.width / 2,
        container.height,
        container.depth / 2,
    )


def fits_inside(inner: Bounds, outer: Bounds, tol: float = 1e-9) -> bool:
    ix1, iy1, iz1, ix2, iy2, iz2 = inner
    ox1, oy1, oz1, ox2, oy2, oz2 = outer
    return (
        ix1 >= ox1 - tol and iy1 >= oy1 - tol and iz1 >= oz1 - tol
        and ix2 <= ox2 + tol and iy2 <= oy2 + tol and iz2 <= oz2 + tol
    )


def orientations(width: float, height: float, depth: float, unique: bool = False) -> list["Vec3"]:
    """
    The 6 axis-aligned assignments of a box's edges to (X, Y, Z).

    Order is fixed:
      0:(W,H,D) 1:(W,D,H) 2:(H,W,D) 3:(H,D,W) 4:(D,W,H) 5:(D,H,W)
    With unique=True repeated assignments (equal edges) are dropped, keeping
    the first occurrence so the order of the survivors is unchanged.
    """
    W, H, D = float(width), float(height), float(depth)
    dims = [
        (W, H, D),
        (W, D, H),
        (H, W, D),
        (H, D, W),
        (D, W, H),
        (D, H, W),
    ]
    if not unique:
        return dims
    seen: set["Vec3"] = set()
    out: list["Vec3"] = []
    for d in dims:
        if d not in seen:
            seen.add(d)
            out.append(d)
    return out


def grid_count(extent: float, size: float, gap: float) -> int:
    """How many slots of ``size + gap`` fit along ``extent`` (never negative)."""
    ratio = extent / (size + gap)
    if not ratio >= 1:
        return 0
    if math.isinf(ratio):
        raise InvalidSpecification(
            f"Grid too large: {extent!r} / ({size!r} + {gap!r}) overflows"
        )
    return math.floor(ratio)


def grid_shape(axes: list[tuple[float, float]], gap: float) -> tuple[int, ...]:
    """
    Slot counts for several (extent, size) axes sharing one gap.

    When any axis holds no slot the whole grid is empty, so every count is 0
    and the other axes are never floored.
    """
    ratios = [extent / (size + gap) for extent, size in axes]
    if any(not r >= 1 for r in ratios):
        return (0,) * len(axes)
    return tuple(grid_count(extent, size, gap) for extent, size in axes)


def container_outline(container: "ContainerSpec") -> list[tuple["Vec3", "Vec3"]]:
    """The 12 wireframe edges of the container, floor resting at Y=0."""
    x1, y1, z1, x2, y2, z2 = container_bounds(container)
    corners = [(x, y, z) for x in (x1, x2) for y in (y1, y2) for z in (z1, z2)]
    edges: list[tuple["Vec3", "Vec3"]] = []
    for i, a in enumerate(corners):
        for b in corners[i + 1:]:
            # corners joined by an edge differ in exactly one coordinate
            if sum(1 for p, q in zip(a, b) if p != q) == 1:
                edges.append((a, b))
    return edges
