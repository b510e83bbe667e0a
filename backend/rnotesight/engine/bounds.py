"""Running bounding box for a single render pass."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from rnotesight.models.scene import Viewport


@dataclass
class BoundingBox:
    """Axis-aligned accumulator. Starts inverted so the first point sets it."""

    min_x: float = math.inf
    min_y: float = math.inf
    max_x: float = -math.inf
    max_y: float = -math.inf

    @property
    def is_empty(self) -> bool:
        return self.min_x == math.inf

    def include(self, x: float, y: float) -> None:
        if x < self.min_x:
            self.min_x = x
        if y < self.min_y:
            self.min_y = y
        if x > self.max_x:
            self.max_x = x
        if y > self.max_y:
            self.max_y = y

    def include_all(self, points: Iterable[tuple[float, float]]) -> None:
        for x, y in points:
            self.include(x, y)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    def to_viewport(self, margin: float) -> Viewport:
        return Viewport(
            min_x=self.min_x - margin,
            min_y=self.min_y - margin,
            width=self.max_x - self.min_x + 2 * margin,
            height=self.max_y - self.min_y + 2 * margin,
        )
