"""Advisory warnings and summary stats derived from a placement result."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

from vanning.models import ContainerSpec, PlacementResult, Vec3

LOW_UTILIZATION_THRESHOLD = 0.5
MAX_LATERAL_COG_OFFSET = 1.0  # meters from the container's vertical center axis
TOP_HEAVY_RATIO = 0.7


class LoadWarning(BaseModel):
    code: str = Field(description="Stable warning code")
    message: str = Field(description="Human-readable advice")


class LoadingStats(BaseModel):
    """What the UI layer displays for one simulation."""

    model_config = ConfigDict(populate_by_name=True)

    count: int
    volume_utilization: float = Field(alias="volumeUtilization")
    center_of_gravity: Vec3 = Field(alias="centerOfGravity")
    status: str
    warnings: list[LoadWarning] = Field(default_factory=list)

    @property
    def warning_messages(self) -> list[str]:
        return [w.message for w in self.warnings]


def lateral_offset(result: PlacementResult) -> float:
    x, _, z = result.center_of_gravity
    return math.sqrt(x ** 2 + z ** 2)


def evaluate_warnings(result: PlacementResult, container: ContainerSpec) -> list[LoadWarning]:
    warnings: list[LoadWarning] = []

    if result.volume_utilization < LOW_UTILIZATION_THRESHOLD:
        warnings.append(LoadWarning(
            code="LOW_UTILIZATION",
            message="Volume utilization is below 50%. Consider revising the cargo size.",
        ))

    if lateral_offset(result) > MAX_LATERAL_COG_OFFSET:
        warnings.append(LoadWarning(
            code="LATERAL_COG",
            message="Center of gravity is far from the container center. The load may shift.",
        ))

    if result.center_of_gravity[1] > container.height * TOP_HEAVY_RATIO:
        warnings.append(LoadWarning(
            code="TOP_HEAVY",
            message="Center of gravity is too high. Risk of tipping over.",
        ))

    return warnings


def utilization_status(volume_utilization: float) -> str:
    """Bucket a utilization ratio into optimal / good / fair / poor."""
    pct = volume_utilization * 100.0
    if pct >= 80:
        return "optimal"
    if pct >= 60:
        return "good"
    if pct >= 40:
        return "fair"
    return "poor"


def build_stats(result: PlacementResult, container: ContainerSpec) -> LoadingStats:
    return LoadingStats(
        count=result.count,
        volume_utilization=result.volume_utilization,
        center_of_gravity=result.center_of_gravity,
        status=utilization_status(result.volume_utilization),
        warnings=evaluate_warnings(result, container),
    )
