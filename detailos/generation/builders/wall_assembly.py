"""WallAssemblyBuilder — stud wall with sheathing, air barrier and window frame."""

from __future__ import annotations

from detailos.generation.appearance import AppearanceLibrary
from detailos.generation.builders.base import DetailBuilder
from detailos.generation.primitives import BoxPrimitive
from detailos.generation.scene import PlacedPrimitive
from detailos.models.detail import SemanticDetail, Viewport

STUD_WIDTH = 38.0
STUD_DEPTH = 140.0
AIR_BARRIER_THICKNESS = 1.5
FRAME_DEPTH = 60.0


class WallAssemblyBuilder(DetailBuilder):
    """Builder for air-barrier and wall-assembly details."""

    @property
    def name(self) -> str:
        return "wall-assembly"

    def build(
        self,
        detail: SemanticDetail,
        viewport: Viewport,
        appearances: AppearanceLibrary,
    ) -> list[PlacedPrimitive]:
        stud_spacing = self._param(detail, "studsSpacing", 406.0)
        sheathing = self._param(detail, "sheathing", 12.7)
        opening_width = self._param(detail, "openingWidth", 900.0)

        width = viewport.width
        height = viewport.height

        placed = []

        # A non-positive spacing would never advance
        if stud_spacing <= 0:
            stud_spacing = 406.0
        x = 0.0
        while x < width:
            stud = BoxPrimitive(
                width=STUD_WIDTH, height=height, depth=STUD_DEPTH,
                position=(-width / 2 + x + STUD_WIDTH / 2, height / 2, -STUD_DEPTH / 2),
            )
            placed.append(self._place(
                detail, appearances, "stud", stud, "wood", name=f"stud-{x:g}",
            ))
            x += stud_spacing

        board = BoxPrimitive(
            width=width, height=height, depth=sheathing,
            position=(0.0, height / 2, sheathing / 2),
        )
        placed.append(self._place(detail, appearances, "sheathing", board, "wood"))

        barrier = BoxPrimitive(
            width=width, height=height, depth=AIR_BARRIER_THICKNESS,
            position=(0.0, height / 2, sheathing + 1),
        )
        placed.append(self._place(detail, appearances, "air-barrier", barrier, "air-barrier"))

        frame = BoxPrimitive(
            width=opening_width + 10, height=height * 0.6 + 10, depth=FRAME_DEPTH,
            position=(0.0, height / 2, sheathing + 30),
        )
        placed.append(self._place(detail, appearances, "window-frame", frame, "steel"))

        return placed
