"""Data models for semantic details, material DNA and equivalency data."""

from detailos.models.detail import (
    DimensionAnnotation,
    LayerProperties,
    ProductReference,
    SemanticConnection,
    SemanticDetail,
    SemanticLayer,
    SourceReference,
    Viewport,
)
from detailos.models.dna import CompatibilityResult, FailureMode, MaterialDNA
from detailos.models.equivalency import EquivalencyEntry, ProductEquivalency

__all__ = [
    "CompatibilityResult",
    "DimensionAnnotation",
    "EquivalencyEntry",
    "FailureMode",
    "LayerProperties",
    "MaterialDNA",
    "ProductEquivalency",
    "ProductReference",
    "SemanticConnection",
    "SemanticDetail",
    "SemanticLayer",
    "SourceReference",
    "Viewport",
]
