"""Material Type Resolver — layer identity to equivalency material type."""

from detailos.resolver.mapping import (
    KEYWORD_TO_EQUIVALENCY_KEY,
    LAYER_ID_TO_MATERIAL_TYPE,
    MATERIAL_TO_EQUIVALENCY_KEY,
)
from detailos.resolver.resolver import MaterialTypeResolver, resolve_material_type

__all__ = [
    "KEYWORD_TO_EQUIVALENCY_KEY",
    "LAYER_ID_TO_MATERIAL_TYPE",
    "MATERIAL_TO_EQUIVALENCY_KEY",
    "MaterialTypeResolver",
    "resolve_material_type",
]
