"""PenetrationBuilder — pipe through a deck with membrane, collar, clamp and sealant."""

from __future__ import annotations

import math

from detailos.generation.appearance import AppearanceLibrary
from detailos.generation.builders.base import DetailBuilder
from detailos.generation.primitives import (
    CircularHole,
    CylinderPrimitive,
    ExtrudedProfile,
    TorusPrimitive,
    rectangle,
)
from detailos.generation.scene import PlacedPrimitive
from detailos.models.detail import SemanticDetail, Viewport

SUBSTRATE_DEPTH = 200.0
MEMBRANE_THICKNESS = 1.5
MEMBRANE_LEVEL = 100.0


class PenetrationBuilder(DetailBuilder):
    """Builder for pipe penetration details."""

    @property
    def name(self) -> str:
        return "penetration"

    def build(
        self,
        detail: SemanticDetail,
        viewport: Viewport,
        appearances: AppearanceLibrary,
    ) -> list[PlacedPrimitive]:
        pipe_diameter = self._param(detail, "pipeDiameter", 100.0)
        collar_height = self._param(detail, "collarHeight", 150.0)

        radius = pipe_diameter / 2
        size = min(viewport.width, viewport.depth)
        # Plates are drawn in plan and laid flat
        flat = -math.pi / 2
        ring = math.pi / 2

        parts = [
            ("substrate", "concrete", ExtrudedProfile(
                outline=rectangle(size, size),
                holes=[CircularHole(radius=radius + 10)],
                depth=SUBSTRATE_DEPTH,
                position=(0.0, -SUBSTRATE_DEPTH / 2, 0.0),
                rotation_x=flat,
            )),
            ("pipe", "steel", CylinderPrimitive(
                radius_top=radius, radius_bottom=radius, height=viewport.height,
                position=(0.0, viewport.height / 2 - 100, 0.0),
            )),
            ("membrane", "membrane", ExtrudedProfile(
                outline=rectangle(size, size),
                holes=[CircularHole(radius=radius - 5)],
                depth=MEMBRANE_THICKNESS,
                position=(0.0, MEMBRANE_LEVEL, 0.0),
                rotation_x=flat,
            )),
            ("collar", "membrane", CylinderPrimitive(
                radius_top=radius + 20, radius_bottom=radius + 60, height=collar_height,
                position=(0.0, MEMBRANE_LEVEL + collar_height / 2, 0.0),
                open_ended=True,
            )),
            ("clamp", "steel", TorusPrimitive(
                radius=radius + 5, tube=8.0,
                position=(0.0, MEMBRANE_LEVEL + collar_height - 20, 0.0),
                rotation_x=ring,
            )),
            ("sealant", "sealant", TorusPrimitive(
                radius=radius + 2, tube=5.0,
                position=(0.0, MEMBRANE_LEVEL + collar_height + 5, 0.0),
                rotation_x=ring,
            )),
        ]
        return [
            self._place(detail, appearances, layer_id, primitive, tag)
            for layer_id, tag, primitive in parts
        ]
