"""Reconstruction output: primitives tagged with their layer and appearance."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, Field

from detailos.generation.appearance import Appearance
from detailos.generation.primitives import Primitive, Vec3
from detailos.models.detail import Viewport

class PlacedPrimitive(BaseModel):
    """One primitive in the scene, tagged with its originating layer id."""

    layer_id: str
    name: str
    primitive: Primitive = Field(discriminator="kind")
    appearance: Appearance

class Reconstruction(BaseModel):
    """Everything a renderer needs to draw one detail."""

    detail_id: str
    category: str
    builder: str
    viewport: Viewport
    primitives: list[PlacedPrimitive] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.primitives)

    def layer_ids(self) -> list[str]:
        """Distinct layer ids in placement order."""
        seen: list[str] = []
        for placed in self.primitives:
            if placed.layer_id not in seen:
                seen.append(placed.layer_id)
        return seen

    def for_layer(self, layer_id: str) -> list[PlacedPrimitive]:
        return [p for p in self.primitives if p.layer_id == layer_id]

    def bounds(self) -> tuple[Vec3, Vec3] | None:
        """Axis-aligned bounds of the whole scene, or None when empty."""
        if not self.primitives:
            return None
        lows, highs = zip(*(p.primitive.world_bounds() for p in self.primitives))
        return (
            (min(v[0] for v in lows), min(v[1] for v in lows), min(v[2] for v in lows)),
            (max(v[0] for v in highs), max(v[1] for v in highs), max(v[2] for v in highs)),
        )

    @property
    def stack_height(self) -> float:
        """Vertical extent of the scene in mm."""
        extent = self.bounds()
        if extent is None:
            return 0.0
        return extent[1][1] - extent[0][1]

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, default=str)
