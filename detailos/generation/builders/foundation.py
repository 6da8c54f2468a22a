"""FoundationBuilder — below-grade wall, footing, slab and wall waterproofing."""

from __future__ import annotations

from detailos.generation.appearance import AppearanceLibrary
from detailos.generation.builders.base import DetailBuilder
from detailos.generation.primitives import BoxPrimitive
from detailos.generation.scene import PlacedPrimitive
from detailos.models.detail import SemanticDetail, Viewport

FOOTING_HEIGHT = 300.0
GRAVEL_THICKNESS = 150.0
VAPOR_BARRIER_THICKNESS = 0.25


class FoundationBuilder(DetailBuilder):
    """Builder for foundation details."""

    @property
    def name(self) -> str:
        return "foundation"

    def build(
        self,
        detail: SemanticDetail,
        viewport: Viewport,
        appearances: AppearanceLibrary,
    ) -> list[PlacedPrimitive]:
        wall = self._param(detail, "wallThickness", 250.0)
        slab = self._param(detail, "slabThickness", 150.0)

        width = viewport.width
        height = viewport.height
        depth = viewport.depth

        wall_x = -width / 2 + wall / 2
        wall_face = -width / 2 + wall
        floor_width = width - wall - 50
        floor_x = wall / 2 + 25

        def box(w: float, h: float, x: float, y: float) -> BoxPrimitive:
            return BoxPrimitive(width=w, height=h, depth=depth, position=(x, y, 0.0))

        parts = [
            ("foundation-wall", "concrete", box(wall, height * 0.7, wall_x, height * 0.35)),
            ("footing", "concrete", box(wall * 1.5, FOOTING_HEIGHT, wall_x, -FOOTING_HEIGHT / 2)),
            ("gravel-base", "gravel", box(floor_width, GRAVEL_THICKNESS, floor_x, -GRAVEL_THICKNESS / 2)),
            ("vapor-barrier", "membrane", box(
                floor_width, VAPOR_BARRIER_THICKNESS, floor_x, VAPOR_BARRIER_THICKNESS / 2,
            )),
            ("slab", "concrete", box(floor_width, slab, floor_x, slab / 2)),
            ("wall-membrane", "membrane", box(1.5, height * 0.7 + 100, wall_face + 1, height * 0.35 - 50)),
            ("protection-board", "protection", box(6.0, height * 0.7 + 50, wall_face + 6, height * 0.35 - 25)),
            ("drainage-mat", "drainage", box(8.0, height * 0.6, wall_face + 15, height * 0.3)),
        ]
        return [
            self._place(detail, appearances, layer_id, primitive, tag)
            for layer_id, tag, primitive in parts
        ]
