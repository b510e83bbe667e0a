"""Builder registry — every element kind and shape variant maps to one builder.

Usage:
    @builder(EllipseShape, kind="ellipse")
    def build_ellipse(shape: EllipseShape, ctx: BuildContext) -> list[Primitive]:
        ...

Dispatch is by exact model type, so each document node has exactly one builder.
Adding a new shape = one decorated function. Nothing else changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from rnotesight.engine.builder import BuildContext
    from rnotesight.models.scene import Primitive

logger = logging.getLogger(__name__)

BuilderFn = Callable[[Any, "BuildContext"], "list[Primitive]"]


@dataclass
class BuilderSpec:
    model: type
    kind: str
    fn: BuilderFn
    description: str = ""


class BuilderRegistry:
    """Registry of node builders keyed by document model type."""

    def __init__(self) -> None:
        self._builders: dict[type, BuilderSpec] = {}

    def register(self, spec: BuilderSpec) -> None:
        if spec.model in self._builders:
            raise ValueError(f"Duplicate builder for {spec.model.__name__}")
        self._builders[spec.model] = spec
        logger.debug("Registered builder %s for %s", spec.kind, spec.model.__name__)

    def get(self, model: type) -> BuilderSpec | None:
        return self._builders.get(model)

    def kinds(self) -> list[str]:
        return sorted(s.kind for s in self._builders.values())

    @property
    def count(self) -> int:
        return len(self._builders)


# Module-level singleton
_registry = BuilderRegistry()


def get_registry() -> BuilderRegistry:
    return _registry


def builder(model: type, *, kind: str, description: str = ""):
    """Decorator to register a builder for one document model type."""

    def decorator(fn: BuilderFn) -> BuilderFn:
        _registry.register(BuilderSpec(model=model, kind=kind, fn=fn, description=description))
        return fn

    return decorator
