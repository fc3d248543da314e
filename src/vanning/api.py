"""FastAPI endpoint for the vanning simulator."""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Query, Response

from vanning.config import get_settings
from vanning.containers import (
    CARGO_PRESET_NAMES,
    CARGO_PRESETS_M,
    CONTAINER_PRESET_NAMES,
    CONTAINER_PRESETS_M,
    get_cargo_dims,
    get_container_dims,
)
from vanning.diagnostics import build_stats
from vanning.engine import PackingEngine
from vanning.errors import VanningError
from vanning.geometry import container_outline
from vanning.models import CargoSpec, ContainerSpec, PlacementResult, StrategyId, parse_cargo, parse_container
from vanning.packing import STRATEGY_NAMES, resolve_strategy

logger = logging.getLogger(__name__)

settings = get_settings()

app = FastAPI(
    title="Vanning Simulator API",
    description="Container loading simulation service",
)

engine = PackingEngine(
    strategy=settings.default_strategy,
    cache_size=settings.cache_size,
    max_boxes=settings.max_boxes,
)


def validate_input(request: dict[str, Any]) -> tuple[ContainerSpec, CargoSpec, StrategyId]:
    """
    Resolve container, cargo and strategy from a request body.

    Explicit dims win over presets; a preset may be combined with partial
    overrides (e.g. a different gap).
    """
    container_kwargs: dict[str, Any] = {}
    if "containerPreset" in request:
        container_kwargs.update(get_container_dims(str(request["containerPreset"])))
    if isinstance(request.get("container"), dict):
        container_kwargs.update(request["container"])
    if not container_kwargs:
        raise HTTPException(status_code=422, detail="Missing 'container' or 'containerPreset'")

    cargo_kwargs: dict[str, Any] = {}
    if "cargoPreset" in request:
        cargo_kwargs.update(get_cargo_dims(str(request["cargoPreset"])))
    if isinstance(request.get("cargo"), dict):
        cargo_kwargs.update(request["cargo"])
    if not cargo_kwargs:
        raise HTTPException(status_code=422, detail="Missing 'cargo' or 'cargoPreset'")

    strategy = resolve_strategy(request.get("strategy", settings.default_strategy))
    return parse_container(container_kwargs), parse_cargo(cargo_kwargs), strategy


def build_placements_render(result: PlacementResult) -> list[dict[str, Any]]:
    """One record per box: center and oriented dims, for instanced rendering."""
    dims = [float(d) for d in result.box_dims]
    return [{"x": x, "y": y, "z": z, "dims": dims} for x, y, z in result.positions]


def format_output(
    result: PlacementResult,
    container: ContainerSpec,
    include_render: bool = False,
) -> dict[str, Any]:
    stats = build_stats(result, container)
    response = result.to_wire()
    response["strategyName"] = STRATEGY_NAMES[result.strategy]
    response["status"] = stats.status
    response["warnings"] = [w.model_dump() for w in stats.warnings]

    if include_render:
        response["placements_render"] = build_placements_render(result)
        response["container_render"] = {
            "width": container.width,
            "height": container.height,
            "depth": container.depth,
            "edges": [[list(a), list(b)] for a, b in container_outline(container)],
        }
    return response


def _error_response(exc: VanningError) -> Response:
    error_response = {
        "error": type(exc).__name__,
        "summary": "Invalid simulation input",
        "details": str(exc),
    }
    return Response(
        content=json.dumps(error_response),
        status_code=422,
        media_type="application/json",
    )


@app.post("/simulate")
async def simulate(
    request: dict[str, Any],
    render: int = Query(0, description="Include rendering data (1) or not (0)"),
) -> Any:
    """
    Run one simulation.

    Input (request body):
        {
            "containerPreset": "20ft",
            "cargo": { "width": 0.5, "height": 0.4, "depth": 0.5, "gap": 0.01 },
            "strategy": "optimizedPacking"
        }
    """
    try:
        container, cargo, strategy = validate_input(request)
        engine.set_strategy(strategy)
        result = engine.simulate(container, cargo)
        response = format_output(result, container, include_render=render == 1)

        logger.info(
            f"strategy={strategy.value}, count={result.count}, "
            f"utilization={result.volume_utilization:.3f}, warnings={len(response['warnings'])}"
        )
        return response

    except VanningError as e:
        logger.warning(f"Rejected simulation input: {e}")
        return _error_response(e)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"ERROR in /simulate endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/presets")
async def presets() -> dict[str, Any]:
    return {
        "containers": {
            key.lower(): {"name": CONTAINER_PRESET_NAMES[key], **dims}
            for key, dims in CONTAINER_PRESETS_M.items()
        },
        "cargo": {
            key.lower(): {"name": CARGO_PRESET_NAMES[key], **dims}
            for key, dims in CARGO_PRESETS_M.items()
        },
    }


@app.get("/strategies")
async def strategies() -> list[dict[str, str]]:
    return [{"id": sid.value, "name": name} for sid, name in STRATEGY_NAMES.items()]


@app.get("/health")
async def health() -> dict[str, Any]:
    return {"status": "ok", "default_strategy": settings.default_strategy.value}
