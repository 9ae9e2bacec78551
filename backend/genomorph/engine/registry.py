"""Ornament registry — each ornament style is a standalone function registered via decorator.

Usage:
    @ornament(variant=0, name="tentacles")
    def tentacles(params: VisualParameters, center: float, radius: float) -> tuple[Primitive, ...]:
        ...

The variant index derived from the genome picks exactly one registered style.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from genomorph.engine.parameters import VisualParameters
    from genomorph.engine.shapes import Primitive

logger = logging.getLogger(__name__)

OrnamentFn = Callable[["VisualParameters", float, float], "tuple[Primitive, ...]"]


@dataclass
class OrnamentSpec:
    variant: int
    name: str
    fn: OrnamentFn
    description: str = ""


class OrnamentRegistry:
    """Variant index → ornament builder."""

    def __init__(self) -> None:
        self._ornaments: dict[int, OrnamentSpec] = {}

    def register(self, spec: OrnamentSpec) -> None:
        if spec.variant in self._ornaments:
            raise ValueError(f"Duplicate ornament variant: {spec.variant}")
        self._ornaments[spec.variant] = spec
        logger.debug("Registered ornament %d (%s)", spec.variant, spec.name)

    def get(self, variant: int) -> OrnamentSpec:
        return self._ornaments[variant]

    def all(self) -> list[OrnamentSpec]:
        return sorted(self._ornaments.values(), key=lambda s: s.variant)

    @property
    def count(self) -> int:
        return len(self._ornaments)


# Module-level singleton
_registry = OrnamentRegistry()


def get_registry() -> OrnamentRegistry:
    return _registry


def ornament(*, variant: int, name: str, description: str = ""):
    """Decorator to register an ornament builder."""

    def decorator(fn: OrnamentFn):
        _registry.register(OrnamentSpec(variant=variant, name=name, fn=fn, description=description))
        return fn

    return decorator
