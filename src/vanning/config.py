"""Runtime settings; loads .env locally via python-dotenv."""

from __future__ import annotations

import logging
import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from vanning.errors import InvalidSpecification
from vanning.models import StrategyId
from vanning.packing import resolve_strategy

DEFAULT_CACHE_SIZE = 128
DEFAULT_MAX_BOXES = 1_000_000


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    default_strategy: StrategyId = Field(default=StrategyId.SIMPLE, description="Strategy used when none is given")
    log_level: str = Field(default="INFO", description="Root logging level for the CLI and API")
    cache_size: int = Field(default=DEFAULT_CACHE_SIZE, ge=0, description="Memoized simulations (0 disables)")
    max_boxes: int = Field(default=DEFAULT_MAX_BOXES, ge=0, description="Largest box count one simulation may place (0 disables)")


def get_settings() -> Settings:
    """Read settings from the environment. A .env file does not override existing variables."""
    load_dotenv(find_dotenv(usecwd=True))

    strategy = resolve_strategy(os.getenv("VANNING_DEFAULT_STRATEGY", StrategyId.SIMPLE.value))

    log_level = os.getenv("VANNING_LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise InvalidSpecification(f"VANNING_LOG_LEVEL must be a logging level name, got '{log_level}'")

    raw_cache = os.getenv("VANNING_CACHE_SIZE", str(DEFAULT_CACHE_SIZE))
    try:
        cache_size = int(raw_cache)
    except ValueError:
        raise InvalidSpecification(f"VANNING_CACHE_SIZE must be an integer, got '{raw_cache}'") from None
    if cache_size < 0:
        raise InvalidSpecification(f"VANNING_CACHE_SIZE must be >= 0, got {cache_size}")

    raw_max = os.getenv("VANNING_MAX_BOXES", str(DEFAULT_MAX_BOXES))
    try:
        max_boxes = int(raw_max)
    except ValueError:
        raise InvalidSpecification(f"VANNING_MAX_BOXES must be an integer, got '{raw_max}'") from None
    if max_boxes < 0:
        raise InvalidSpecification(f"VANNING_MAX_BOXES must be >= 0, got {max_boxes}")

    return Settings(
        default_strategy=strategy,
        log_level=log_level,
        cache_size=cache_size,
        max_boxes=max_boxes,
    )
