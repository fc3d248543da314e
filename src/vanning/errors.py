"""Exceptions raised by the vanning core."""

from __future__ import annotations


class VanningError(ValueError):
    """Base class for all input errors raised by the core."""


class InvalidSpecification(VanningError):
    """A container or cargo spec with a non-positive dimension or a negative gap."""


class UnknownStrategy(VanningError):
    """Strategy id that is not one of the registered packing strategies."""


class UnknownPreset(VanningError):
    """Container or cargo preset key that does not exist."""


class CapacityExceeded(VanningError):
    """A simulation would place more boxes than the configured limit."""
