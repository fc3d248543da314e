# src/vanning/containers.py
from __future__ import annotations

from vanning.errors import UnknownPreset
from vanning.models import CargoSpec, ContainerSpec

# Interior dims (meters): width is the long axis (X), depth the short one (Z).
CONTAINER_PRESETS_M: dict[str, dict[str, float]] = {
    "20FT":   {"width": 5.90,  "height": 2.39, "depth": 2.35},
    "40FT":   {"width": 12.03, "height": 2.39, "depth": 2.35},
    "40FTHC": {"width": 12.03, "height": 2.69, "depth": 2.35},
}

CONTAINER_PRESET_NAMES: dict[str, str] = {
    "20FT": "20ft Container",
    "40FT": "40ft Container",
    "40FTHC": "40ft High Cube",
}

CARGO_PRESETS_M: dict[str, dict[str, float]] = {
    "SMALL":  {"width": 0.5, "height": 0.4, "depth": 0.5, "gap": 0.01},
    "MEDIUM": {"width": 0.8, "height": 0.6, "depth": 0.8, "gap": 0.01},
    "LARGE":  {"width": 1.2, "height": 1.0, "depth": 1.2, "gap": 0.01},
}

CARGO_PRESET_NAMES: dict[str, str] = {
    "SMALL": "Small Box (50x40x50cm)",
    "MEDIUM": "Medium Box (80x60x80cm)",
    "LARGE": "Large Box (120x100x120cm)",
}

DEFAULT_CONTAINER_PRESET = "20ft"
DEFAULT_CARGO_PRESET = "small"


def get_container_dims(preset: str) -> dict[str, float]:
    key = preset.strip().upper()
    if key not in CONTAINER_PRESETS_M:
        raise UnknownPreset(f"Unknown container preset '{preset}'. Valid: {sorted(CONTAINER_PRESETS_M.keys())}")
    return dict(CONTAINER_PRESETS_M[key])


def get_cargo_dims(preset: str) -> dict[str, float]:
    key = preset.strip().upper()
    if key not in CARGO_PRESETS_M:
        raise UnknownPreset(f"Unknown cargo preset '{preset}'. Valid: {sorted(CARGO_PRESETS_M.keys())}")
    return dict(CARGO_PRESETS_M[key])


def get_container_preset(preset: str) -> ContainerSpec:
    return ContainerSpec(**get_container_dims(preset))


def get_cargo_preset(preset: str) -> CargoSpec:
    return CargoSpec(**get_cargo_dims(preset))
