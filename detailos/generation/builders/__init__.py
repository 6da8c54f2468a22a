"""Detail builders — one per detail category."""

from detailos.generation.builders.base import DetailBuilder
from detailos.generation.builders.expansion_joint import ExpansionJointBuilder
from detailos.generation.builders.foundation import FoundationBuilder
from detailos.generation.builders.generic import GenericStackBuilder
from detailos.generation.builders.penetration import PenetrationBuilder
from detailos.generation.builders.roofing import RoofAssemblyBuilder
from detailos.generation.builders.wall_assembly import WallAssemblyBuilder

BUILDER_REGISTRY: dict[str, type[DetailBuilder]] = {
    "expansion-joint": ExpansionJointBuilder,
    "air-barrier": WallAssemblyBuilder,
    "wall-assembly": WallAssemblyBuilder,
    "roofing": RoofAssemblyBuilder,
    "foundation": FoundationBuilder,
    "penetration": PenetrationBuilder,
}


def get_builder(category: str) -> DetailBuilder:
    """Return the builder instance for a detail category."""
    builder_cls = BUILDER_REGISTRY.get(category)
    if builder_cls is None:
        builder_cls = GenericStackBuilder
    return builder_cls()


__all__ = [
    "DetailBuilder",
    "ExpansionJointBuilder",
    "WallAssemblyBuilder",
    "RoofAssemblyBuilder",
    "FoundationBuilder",
    "PenetrationBuilder",
    "GenericStackBuilder",
    "BUILDER_REGISTRY",
    "get_builder",
]
