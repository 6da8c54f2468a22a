"""Appearance lookup for material tags.

Builders never create appearances directly; they ask an
:class:`AppearanceLibrary`, which resolves the tag against the base table,
applies layer-authored overrides and caches the result so that identical
requests share one instance.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from detailos.config import (
    DEFAULT_COLOR,
    DEFAULT_METALNESS,
    DEFAULT_ROUGHNESS,
    EMISSIVE_INTENSITY,
)
from detailos.models.detail import LayerProperties

logger = logging.getLogger(__name__)


class Appearance(BaseModel):
    """Surface parameters for one material tag."""

    model_config = ConfigDict(frozen=True)

    tag: str
    color: str = DEFAULT_COLOR
    roughness: float = DEFAULT_ROUGHNESS
    metalness: float = DEFAULT_METALNESS
    emissive: str | None = None
    emissive_intensity: float = 0.0


# tag -> (color, roughness, metalness)
BASE_APPEARANCES: dict[str, tuple[str, float, float]] = {
    # Substrates
    "concrete": ("#808080", 0.85, 0.0),
    "cmu": ("#9a9a9a", 0.9, 0.0),
    "steel": ("#5a5a6a", 0.4, 0.8),
    "wood": ("#c4a574", 0.7, 0.0),
    # Membranes and barriers
    "membrane": ("#1a1a1a", 0.7, 0.0),
    "membrane-sheet": ("#1a1a1a", 0.7, 0.0),
    "membrane-fluid": ("#1f1f1f", 0.6, 0.0),
    "vapor-barrier": ("#1a1a1a", 0.7, 0.0),
    "air-barrier": ("#ff6600", 0.65, 0.0),
    # Insulation
    "insulation": ("#c9a227", 0.3, 0.3),
    "insulation-rigid": ("#c9a227", 0.3, 0.3),
    "insulation-spray": ("#1f1f1f", 0.6, 0.0),
    "cant-strip": ("#c9a227", 0.3, 0.3),
    # Protection and drainage
    "protection": ("#2a2a2a", 0.4, 0.0),
    "protection-board": ("#2a2a2a", 0.4, 0.0),
    "drainage": ("#1f1f1f", 0.5, 0.0),
    "drainage-mat": ("#1f1f1f", 0.5, 0.0),
    "gravel": ("#1f1f1f", 0.5, 0.0),
    # Sealants and accessories
    "sealant": ("#4a4a4a", 0.5, 0.0),
    "backer-rod": ("#e8e8e8", 0.7, 0.0),
    "primer": ("#1a1a1a", 0.5, 0.0),
    # Metals
    "metal": ("#8a8a8a", 0.3, 0.7),
    "flashing": ("#8a8a8a", 0.3, 0.7),
    "flashing-metal": ("#8a8a8a", 0.3, 0.7),
    "termination-bar": ("#c0c0c0", 0.25, 0.8),
}


class AppearanceLibrary:
    """Resolve and cache appearances.

    Parameters
    ----------
    overrides:
        Extra or replacement base entries, ``tag -> (color, roughness,
        metalness)``.  The module table is not modified.
    """

    def __init__(self, overrides: dict[str, tuple[str, float, float]] | None = None) -> None:
        self.base: dict[str, tuple[str, float, float]] = dict(BASE_APPEARANCES)
        self.base.update(overrides or {})
        self._cache: dict[tuple, Appearance] = {}

    def get(
        self,
        tag: str,
        color: str | None = None,
        roughness: float | None = None,
        metalness: float | None = None,
        emissive: str | None = None,
    ) -> Appearance:
        """Return the appearance for *tag* with optional overrides.

        Known tags take authored ``color`` and ``emissive`` over the base
        values.  Unknown tags start from the neutral default and also take
        authored ``roughness`` and ``metalness``.
        """
        key = (tag, color, roughness, metalness, emissive)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        base = self.base.get(tag.lower())
        if base is not None:
            base_color, base_roughness, base_metalness = base
            appearance = Appearance(
                tag=tag,
                color=color or base_color,
                roughness=base_roughness,
                metalness=base_metalness,
                emissive=emissive,
                emissive_intensity=EMISSIVE_INTENSITY if emissive else 0.0,
            )
        else:
            logger.debug("No base appearance for tag %r, using neutral default", tag)
            appearance = Appearance(
                tag=tag,
                color=color or DEFAULT_COLOR,
                roughness=DEFAULT_ROUGHNESS if roughness is None else roughness,
                metalness=DEFAULT_METALNESS if metalness is None else metalness,
                emissive=emissive,
                emissive_intensity=EMISSIVE_INTENSITY if emissive else 0.0,
            )

        self._cache[key] = appearance
        return appearance

    def for_properties(self, tag: str, properties: LayerProperties | None) -> Appearance:
        """Appearance for a tag with a layer's authored properties applied."""
        if properties is None:
            return self.get(tag)
        return self.get(
            tag,
            color=properties.color,
            roughness=properties.roughness,
            metalness=properties.metallic,
            emissive=properties.emissive,
        )

    def __len__(self) -> int:
        return len(self._cache)

    def clear(self) -> None:
        self._cache.clear()
