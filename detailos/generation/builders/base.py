"""Abstract DetailBuilder interface.

A builder knows how to lay out the primitives for one detail category
from the detail's parameters and the scene viewport.
"""

from __future__ import annotations

import abc

from detailos.generation.appearance import AppearanceLibrary
from detailos.generation.primitives import Primitive
from detailos.generation.scene import PlacedPrimitive
from detailos.models.detail import SemanticDetail, Viewport


class DetailBuilder(abc.ABC):
    """Base class for all detail builders."""

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Short builder identifier."""

    @abc.abstractmethod
    def build(
        self,
        detail: SemanticDetail,
        viewport: Viewport,
        appearances: AppearanceLibrary,
    ) -> list[PlacedPrimitive]:
        """Return the placed primitives for *detail*."""

    # Helpers shared by all builders

    @staticmethod
    def _param(detail: SemanticDetail, key: str, default: float) -> float:
        """Get a numeric parameter, falling back to default."""
        val = detail.parameters.get(key)
        if val is not None and not isinstance(val, bool):
            try:
                return float(val)
            except (TypeError, ValueError):
                pass
        return default

    @staticmethod
    def _place(
        detail: SemanticDetail,
        appearances: AppearanceLibrary,
        layer_id: str,
        primitive: Primitive,
        tag: str,
        name: str | None = None,
    ) -> PlacedPrimitive:
        """Tag *primitive* with its layer and resolve its appearance.

        When the detail declares the layer, its material tag and authored
        properties win over the builder's intrinsic *tag*.
        """
        layer = detail.get_layer(layer_id)
        if layer is not None:
            appearance = appearances.for_properties(layer.material, layer.properties)
        else:
            appearance = appearances.get(tag)
        return PlacedPrimitive(
            layer_id=layer_id,
            name=name or layer_id,
            primitive=primitive,
            appearance=appearance,
        )
