"""GeometryReconstructor — main entry point for geometry reconstruction.

Usage::

    from detailos.generation import GeometryReconstructor

    scene = GeometryReconstructor().reconstruct(detail)
    for placed in scene.primitives:
        print(placed.layer_id, placed.primitive.kind)
"""

from __future__ import annotations

import json
import logging
from typing import Any

from detailos.config import DEFAULT_VIEWPORT
from detailos.generation.appearance import AppearanceLibrary
from detailos.generation.builders import get_builder
from detailos.generation.scene import Reconstruction
from detailos.models.detail import SemanticDetail, Viewport

logger = logging.getLogger(__name__)


class GeometryReconstructor:
    """Rebuild parametric geometry from semantic details.

    Parameters
    ----------
    appearances:
        Appearance library shared across reconstructions.  A new one is
        created when omitted.
    """

    def __init__(self, appearances: AppearanceLibrary | None = None) -> None:
        self.appearances = appearances if appearances is not None else AppearanceLibrary()

    def reconstruct(
        self,
        detail: SemanticDetail,
        viewport: Viewport | None = None,
    ) -> Reconstruction:
        """Build the primitive scene for *detail*.

        1. Viewport: the argument, else the detail's own, else the default.
        2. Builder selected by category, generic stack for the rest.
        3. Each primitive is tagged with its layer id and appearance.
        """
        view = viewport or detail.viewport or Viewport(**DEFAULT_VIEWPORT)
        builder = get_builder(detail.category)
        primitives = builder.build(detail, view, self.appearances)

        logger.debug(
            "Reconstructed %s with %s builder: %d primitives",
            detail.id, builder.name, len(primitives),
        )
        return Reconstruction(
            detail_id=detail.id,
            category=detail.category,
            builder=builder.name,
            viewport=view,
            primitives=primitives,
        )


def calculate_compression_ratio(detail: SemanticDetail) -> dict[str, Any]:
    """Compare the size of the semantic record with an equivalent mesh.

    Returns
    -------
    dict
        ``semantic_bytes``, ``estimated_mesh_bytes`` and the rounded
        ``ratio`` between them.
    """
    semantic_bytes = len(json.dumps(detail.to_document(), separators=(",", ":")))
    complexity = len(detail.layers) * 2 + len(detail.connections)
    estimated_mesh_bytes = 500_000 + complexity * 200_000
    return {
        "semantic_bytes": semantic_bytes,
        "estimated_mesh_bytes": estimated_mesh_bytes,
        "ratio": round(estimated_mesh_bytes / semantic_bytes),
    }
