"""MaterialTypeResolver — map a layer's free-text identity to a material type.

Usage::

    from detailos.resolver import MaterialTypeResolver

    resolver = MaterialTypeResolver()
    resolver.resolve("roof-membrane", "membrane-sheet", "EPDM MEMBRANE")
    # -> 'membrane-tpo' (the layer-id table wins over the annotation)
"""

from __future__ import annotations

import logging
from typing import Any

from detailos.config import MIN_COVERAGE_PERCENT
from detailos.models.detail import SemanticDetail, SemanticLayer
from detailos.resolver.mapping import (
    KEYWORD_TO_EQUIVALENCY_KEY,
    LAYER_ID_TO_MATERIAL_TYPE,
    MATERIAL_TO_EQUIVALENCY_KEY,
)

logger = logging.getLogger(__name__)


class MaterialTypeResolver:
    """Resolve layers to canonical material-type keys.

    Parameters
    ----------
    layer_ids:
        Extra layer-id entries, merged over the built-in table.
    materials:
        Extra material-tag entries, merged over the built-in table.
    keywords:
        Extra keywords, tried after the built-in ones.

    The built-in tables are copied, never modified.
    """

    def __init__(
        self,
        layer_ids: dict[str, str] | None = None,
        materials: dict[str, str] | None = None,
        keywords: dict[str, str] | None = None,
    ) -> None:
        self.layer_ids = dict(LAYER_ID_TO_MATERIAL_TYPE)
        self.layer_ids.update({k.lower(): v for k, v in (layer_ids or {}).items()})
        self.materials = dict(MATERIAL_TO_EQUIVALENCY_KEY)
        self.materials.update(materials or {})
        self.keywords = dict(KEYWORD_TO_EQUIVALENCY_KEY)
        self.keywords.update(keywords or {})

    def resolve(
        self,
        layer_id: str,
        material: str,
        annotation: str | None = None,
    ) -> str | None:
        """Return the material type for a layer, or *None* if nothing matches.

        Resolution order, first hit wins:

        1. exact layer id
        2. exact material tag
        3. keyword contained in the layer id
        4. keyword contained in the annotation
        """
        id_lower = (layer_id or "").lower()

        by_id = self.layer_ids.get(id_lower)
        if by_id:
            return by_id

        by_material = self.materials.get(material or "")
        if by_material:
            return by_material

        by_keyword = self._match_keyword(id_lower)
        if by_keyword:
            return by_keyword

        if annotation:
            return self._match_keyword(annotation.lower())

        return None

    def resolve_layer(self, layer: SemanticLayer) -> str | None:
        return self.resolve(layer.id, layer.material, layer.annotation)

    def _match_keyword(self, text: str) -> str | None:
        for keyword, key in self.keywords.items():
            if keyword.lower() in text:
                return key
        return None

    # Detail-level helpers

    def enrich_detail(self, detail: SemanticDetail) -> dict[str, str | None]:
        """Return ``{layer_id: material_type}`` for every layer, in order."""
        return {layer.id: self.resolve_layer(layer) for layer in detail.layers}

    def coverage(self, detail: SemanticDetail) -> dict[str, Any]:
        """Report how many layers resolve to a material type."""
        unmapped = [layer.id for layer in detail.layers if self.resolve_layer(layer) is None]
        total = len(detail.layers)
        mapped = total - len(unmapped)
        return {
            "total": total,
            "mapped": mapped,
            "percentage": (mapped / total) * 100 if total > 0 else 0.0,
            "unmapped_layers": unmapped,
        }

    def has_adequate_coverage(self, detail: SemanticDetail) -> bool:
        """True when enough layers resolve for a meaningful comparison."""
        return self.coverage(detail)["percentage"] >= MIN_COVERAGE_PERCENT

    def material_types(self, detail: SemanticDetail) -> list[str]:
        """Unique material types present in the detail, in layer order."""
        found: list[str] = []
        for layer in detail.layers:
            material_type = self.resolve_layer(layer)
            if material_type and material_type not in found:
                found.append(material_type)
        return found


_DEFAULT_RESOLVER = MaterialTypeResolver()


def resolve_material_type(
    layer_id: str,
    material: str,
    annotation: str | None = None,
) -> str | None:
    """Resolve against the built-in tables."""
    return _DEFAULT_RESOLVER.resolve(layer_id, material, annotation)
