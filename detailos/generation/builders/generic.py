"""GenericStackBuilder — stacks declared layers bottom to top."""

from __future__ import annotations

from detailos.generation.appearance import AppearanceLibrary
from detailos.generation.builders.base import DetailBuilder
from detailos.generation.primitives import BoxPrimitive
from detailos.generation.scene import PlacedPrimitive
from detailos.models.detail import SemanticDetail, Viewport


class GenericStackBuilder(DetailBuilder):
    """Fallback builder: one full-width box per layer, in array order.

    Layer *i* sits on top of layers ``0..i-1``, so the stack height equals
    the sum of the declared thicknesses.
    """

    @property
    def name(self) -> str:
        return "generic"

    def build(
        self,
        detail: SemanticDetail,
        viewport: Viewport,
        appearances: AppearanceLibrary,
    ) -> list[PlacedPrimitive]:
        placed = []
        offset = 0.0
        for layer in detail.layers:
            box = BoxPrimitive(
                width=viewport.width,
                height=layer.thickness,
                depth=viewport.depth,
                position=(0.0, offset + layer.thickness / 2, 0.0),
            )
            placed.append(PlacedPrimitive(
                layer_id=layer.id,
                name=layer.id,
                primitive=box,
                appearance=appearances.for_properties(layer.material, layer.properties),
            ))
            offset += layer.thickness
        return placed
