"""Tests for API output formatting and input validation."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from vanning.api import app, format_output
from vanning.packing import simple_stacking

client = TestClient(app)


def test_simulate_with_presets() -> None:
    response = client.post("/simulate", json={"containerPreset": "20ft", "cargoPreset": "small"})

    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 220
    assert len(data["positions"]) == 220
    assert data["strategy"] == "simpleStacking"
    assert data["strategyName"] == "Simple Stacking"
    assert data["volumeUtilization"] == pytest.approx(22.0 / (5.9 * 2.39 * 2.35))
    assert len(data["centerOfGravity"]) == 3
    assert data["status"] == "good"
    assert data["warnings"] == []
    assert "placements_render" not in data


def test_simulate_explicit_specs_and_strategy() -> None:
    request = {
        "container": {"width": 5.9, "height": 2.39, "depth": 2.35},
        "cargo": {"width": 0.5, "height": 0.4, "depth": 0.5, "gap": 0.01},
        "strategy": "optimizedPacking",
    }

    data = client.post("/simulate", json=request).json()

    assert data["count"] == 224
    assert data["boxDims"] == [0.4, 0.5, 0.5]


def test_preset_with_override() -> None:
    request = {"containerPreset": "20ft", "cargoPreset": "small", "cargo": {"width": 0.4}}

    data = client.post("/simulate", json=request).json()

    # 14 cols instead of 11 once the boxes are narrower
    assert data["count"] == 280
    assert data["boxDims"] == [0.4, 0.4, 0.5]
    assert data["warnings"] == []


def test_render_param_adds_render_data() -> None:
    response = client.post("/simulate?render=1", json={"containerPreset": "20ft", "cargoPreset": "medium"})

    assert response.status_code == 200
    data = response.json()
    assert len(data["placements_render"]) == data["count"]
    assert set(data["placements_render"][0].keys()) == {"x", "y", "z", "dims"}
    assert data["placements_render"][0]["dims"] == [0.8, 0.6, 0.8]
    assert len(data["container_render"]["edges"]) == 12


def test_zero_fit_is_not_an_error() -> None:
    request = {
        "container": {"width": 2, "height": 2.39, "depth": 2.35},
        "cargo": {"width": 3, "height": 0.4, "depth": 0.5, "gap": 0.01},
    }

    response = client.post("/simulate", json=request)

    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 0
    assert data["positions"] == []
    assert data["centerOfGravity"] == [0.0, 0.0, 0.0]


@pytest.mark.parametrize(
    "request_body, error",
    [
        ({"containerPreset": "20ft", "cargo": {"width": -0.5, "height": 0.4, "depth": 0.5}}, "InvalidSpecification"),
        ({"containerPreset": "20ft", "cargoPreset": "small", "strategy": "magic"}, "UnknownStrategy"),
        ({"containerPreset": "60ft", "cargoPreset": "small"}, "UnknownPreset"),
    ],
)
def test_invalid_input_returns_friendly_422(request_body, error) -> None:
    response = client.post("/simulate", json=request_body)

    assert response.status_code == 422
    data = response.json()
    assert data["error"] == error
    assert "summary" in data
    assert "details" in data


def test_missing_container_returns_422() -> None:
    response = client.post("/simulate", json={"cargoPreset": "small"})

    assert response.status_code == 422
    assert "container" in response.json()["detail"]


def test_strategies_and_presets_endpoints() -> None:
    strategies = client.get("/strategies").json()
    presets = client.get("/presets").json()

    assert [s["id"] for s in strategies] == ["simpleStacking", "palletLoading", "optimizedPacking"]
    assert presets["containers"]["20ft"]["width"] == 5.9
    assert presets["cargo"]["small"]["name"] == "Small Box (50x40x50cm)"


def test_health() -> None:
    assert client.get("/health").json()["status"] == "ok"


def test_format_output_guaranteed_fields(container_20ft, small_box) -> None:
    output = format_output(simple_stacking(container_20ft, small_box), container_20ft)

    for key in ("count", "positions", "volumeUtilization", "centerOfGravity", "boxDims", "status", "warnings"):
        assert key in output



def test_run_over_box_limit_returns_422() -> None:
    # 10^12 boxes; refused from the counts alone
    request = {
        "container": {"width": 1000, "height": 1000, "depth": 1000},
        "cargo": {"width": 0.1, "height": 0.1, "depth": 0.1},
        "strategy": "optimizedPacking",
    }

    response = client.post("/simulate", json=request)

    assert response.status_code == 422
    data = response.json()
    assert data["error"] == "CapacityExceeded"
    assert "limit" in data["details"]
