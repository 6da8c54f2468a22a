"""Geometry Reconstruction.

Turns a semantic detail into positioned primitives with appearances, one
builder per detail category and a generic layer stack for the rest.
"""

from detailos.generation.appearance import Appearance, AppearanceLibrary
from detailos.generation.builders import BUILDER_REGISTRY, get_builder
from detailos.generation.components import (
    Part,
    base_flashing,
    fastener,
    fastener_count,
    fastener_pattern,
    fastener_positions,
    membrane_lap,
    sealant_bead,
    stress_plate,
    termination_bar,
)
from detailos.generation.primitives import (
    BoxPrimitive,
    CylinderPrimitive,
    ExtrudedProfile,
    TorusPrimitive,
)
from detailos.generation.reconstructor import GeometryReconstructor, calculate_compression_ratio
from detailos.generation.scene import PlacedPrimitive, Reconstruction

__all__ = [
    "Appearance",
    "AppearanceLibrary",
    "BUILDER_REGISTRY",
    "BoxPrimitive",
    "CylinderPrimitive",
    "ExtrudedProfile",
    "GeometryReconstructor",
    "Part",
    "PlacedPrimitive",
    "Reconstruction",
    "TorusPrimitive",
    "base_flashing",
    "calculate_compression_ratio",
    "fastener",
    "fastener_count",
    "fastener_pattern",
    "fastener_positions",
    "get_builder",
    "membrane_lap",
    "sealant_bead",
    "stress_plate",
    "termination_bar",
]
