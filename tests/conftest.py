from __future__ import annotations

import pytest

from vanning.models import CargoSpec, ContainerSpec


@pytest.fixture
def container_20ft() -> ContainerSpec:
    return ContainerSpec(width=5.9, height=2.39, depth=2.35)


@pytest.fixture
def small_box() -> CargoSpec:
    return CargoSpec(width=0.5, height=0.4, depth=0.5, gap=0.01)
