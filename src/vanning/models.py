from __future__ import annotations

import math
from enum import Enum
from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from vanning.errors import InvalidSpecification

Vec3 = Tuple[float, float, float]

ORIGIN: Vec3 = (0.0, 0.0, 0.0)


class StrategyId(str, Enum):
    """Identifiers of the packing strategies (wire names)."""

    SIMPLE = "simpleStacking"
    PALLET = "palletLoading"
    OPTIMIZED = "optimizedPacking"


class ContainerSpec(BaseModel):
    """Usable interior of a shipping container, in meters.

    Centered on X and Z, resting on the floor (Y=0).
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    width: float = Field(gt=0, description="Interior extent along X in meters")
    height: float = Field(gt=0, description="Interior extent along Y in meters")
    depth: float = Field(gt=0, description="Interior extent along Z in meters")

    @property
    def volume(self) -> float:
        return self.width * self.height * self.depth


class CargoSpec(BaseModel):
    """One repeated unit load plus the clearance kept between neighbours."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    width: float = Field(gt=0, description="Box extent along X in meters")
    height: float = Field(gt=0, description="Box extent along Y in meters")
    depth: float = Field(gt=0, description="Box extent along Z in meters")
    gap: float = Field(default=0.0, ge=0, description="Clearance between adjacent boxes in meters")

    @property
    def volume(self) -> float:
        return self.width * self.height * self.depth

    @property
    def dims(self) -> Vec3:
        return (self.width, self.height, self.depth)

    def oriented(self, width: float, height: float, depth: float) -> "CargoSpec":
        """Copy of this cargo with its edges reassigned to other axes."""
        return self.model_copy(update={"width": width, "height": height, "depth": depth})


class PlacementResult(BaseModel):
    """Outcome of one packing run. Recomputed on every call."""

    model_config = ConfigDict(populate_by_name=True)

    strategy: StrategyId = Field(description="Strategy that produced the placement")
    count: int = Field(ge=0, description="Number of boxes placed")
    positions: list[Vec3] = Field(default_factory=list, description="Box centers in placement order")
    volume_utilization: float = Field(
        default=0.0,
        ge=0,
        alias="volumeUtilization",
        description="Cargo volume over container volume (not clamped)",
    )
    center_of_gravity: Vec3 = Field(
        default=ORIGIN,
        alias="centerOfGravity",
        description="Equal-mass centroid of the box centers",
    )
    box_dims: Vec3 = Field(
        alias="boxDims",
        description="Oriented (width, height, depth) of every placed box",
    )

    @classmethod
    def empty(cls, strategy: StrategyId, box_dims: Vec3) -> "PlacementResult":
        """Canonical zero-result for a degenerate fit."""
        return cls(
            strategy=strategy,
            count=0,
            positions=[],
            volume_utilization=0.0,
            center_of_gravity=ORIGIN,
            box_dims=box_dims,
        )

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


def check_specs(container: ContainerSpec, cargo: CargoSpec) -> None:
    """
    Reject dimensions the packing arithmetic cannot handle.

    Models built through the constructor are already validated; this catches
    instances created with ``model_construct`` or mutated copies.
    """
    bad: list[str] = []
    for name in ("width", "height", "depth"):
        value = getattr(container, name)
        if not (isinstance(value, (int, float)) and math.isfinite(value) and value > 0):
            bad.append(f"container.{name}={value!r}")
    for name in ("width", "height", "depth"):
        value = getattr(cargo, name)
        if not (isinstance(value, (int, float)) and math.isfinite(value) and value > 0):
            bad.append(f"cargo.{name}={value!r}")
    gap = cargo.gap
    if not (isinstance(gap, (int, float)) and math.isfinite(gap) and gap >= 0):
        bad.append(f"cargo.gap={gap!r}")
    if bad:
        raise InvalidSpecification("Invalid specification: " + ", ".join(bad))


def _validation_details(exc: ValidationError) -> list[str]:
    return [
        ".".join(str(part) for part in err["loc"]) + f": {err['msg']}"
        for err in exc.errors()
    ]


def parse_container(data: dict[str, Any]) -> ContainerSpec:
    """Build a ContainerSpec from user input, raising InvalidSpecification on bad values."""
    try:
        return ContainerSpec.model_validate(data)
    except ValidationError as exc:
        details = _validation_details(exc)
        raise InvalidSpecification("Invalid container: " + "; ".join(details)) from exc


def parse_cargo(data: dict[str, Any]) -> CargoSpec:
    """Build a CargoSpec from user input, raising InvalidSpecification on bad values."""
    try:
        return CargoSpec.model_validate(data)
    except ValidationError as exc:
        details = _validation_details(exc)
        raise InvalidSpecification("Invalid cargo: " + "; ".join(details)) from exc
