"""RoofAssemblyBuilder — deck, parapet, insulation, membrane, cant strip, coping
and the base flashing held by a termination bar."""

from __future__ import annotations

from detailos.generation.appearance import AppearanceLibrary
from detailos.generation.builders.base import DetailBuilder
from detailos.generation.components import base_flashing
from detailos.generation.primitives import BoxPrimitive, ExtrudedProfile
from detailos.generation.scene import PlacedPrimitive
from detailos.models.detail import SemanticDetail, Viewport

DECK_THICKNESS = 150.0
PARAPET_WIDTH = 200.0
MEMBRANE_THICKNESS = 4.5
CANT_SIZE = 100.0
FLASHING_HEIGHT = 200.0
FASTENER_SPACING = 150.0

COPING_OUTLINE = [
    (0.0, 0.0), (300.0, 0.0), (300.0, -30.0),
    (280.0, -50.0), (20.0, -50.0), (0.0, -30.0),
]


class RoofAssemblyBuilder(DetailBuilder):
    """Builder for roofing details (parapet edge)."""

    @property
    def name(self) -> str:
        return "roofing"

    def build(
        self,
        detail: SemanticDetail,
        viewport: Viewport,
        appearances: AppearanceLibrary,
    ) -> list[PlacedPrimitive]:
        parapet_height = self._param(detail, "parapetHeight", 450.0)
        insulation = self._param(detail, "insulationThickness", 100.0)

        width = viewport.width
        depth = viewport.depth
        top_of_deck = DECK_THICKNESS

        parts = [
            ("deck", "concrete", BoxPrimitive(
                width=width, height=DECK_THICKNESS, depth=depth,
                position=(0.0, DECK_THICKNESS / 2, 0.0),
            )),
            ("parapet", "cmu", BoxPrimitive(
                width=PARAPET_WIDTH, height=parapet_height, depth=depth,
                position=(-width / 2 + 100, top_of_deck + parapet_height / 2, 0.0),
            )),
            ("insulation", "insulation", BoxPrimitive(
                width=width - 220, height=insulation, depth=depth,
                position=(110.0, top_of_deck + insulation / 2, 0.0),
            )),
            ("roof-membrane", "membrane", BoxPrimitive(
                width=width - 200, height=MEMBRANE_THICKNESS, depth=depth,
                position=(100.0, top_of_deck + insulation + 3, 0.0),
            )),
            ("cant-strip", "cant-strip", ExtrudedProfile(
                outline=[(0.0, 0.0), (CANT_SIZE, 0.0), (0.0, CANT_SIZE)],
                depth=depth,
                position=(-width / 2 + 200, top_of_deck + insulation, -depth / 2),
            )),
            ("metal-coping", "metal", ExtrudedProfile(
                outline=list(COPING_OUTLINE),
                depth=depth,
                position=(-width / 2, top_of_deck + parapet_height + 30, -depth / 2),
            )),
        ]
        placed = [
            self._place(detail, appearances, layer_id, primitive, tag)
            for layer_id, tag, primitive in parts
        ]

        # Base flashing turned up the inside face of the parapet
        roof_surface = top_of_deck + insulation + MEMBRANE_THICKNESS
        flashing_height = min(
            self._param(detail, "flashingHeight", FLASHING_HEIGHT),
            max(top_of_deck + parapet_height - roof_surface, 0.0),
        )
        if flashing_height > 0:
            flashing = base_flashing(
                flashing_height,
                depth,
                fastener_spacing=self._param(detail, "fastenerSpacing", FASTENER_SPACING),
                origin=(-width / 2 + PARAPET_WIDTH, roof_surface, -depth / 2),
            )
            for part in flashing:
                layer_id = "base-flashing" if part.role in ("membrane", "lap") else "termination-bar"
                placed.append(self._place(
                    detail, appearances, layer_id, part.primitive, part.tag, name=part.name,
                ))
        return placed
