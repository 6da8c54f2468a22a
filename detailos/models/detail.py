"""SemanticDetail — the compact, manufacturer-agnostic assembly record.

A detail is a stack of layers (bottom to top) plus the relationships
between them, the product bound to each layer and the few structural
parameters needed to rebuild the full geometry.  Documents use camelCase
keys; the models accept either spelling.
"""

from __future__ import annotations

import json
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DetailCategory = Literal[
    "air-barrier",
    "waterproofing",
    "roofing",
    "foundation",
    "wall-assembly",
    "flashing",
    "expansion-joint",
    "penetration",
]

LayerPosition = Literal[
    "substrate",
    "primer",
    "membrane",
    "protection",
    "drainage",
    "insulation",
    "finish",
]

ConnectionType = Literal["overlap", "terminate", "seal", "fasten", "embed", "wrap", "bridge"]

PatternType = Literal["solid", "hatch", "dots", "crosshatch", "diagonal", "stipple"]

ProfileShape = Literal["flat", "curved", "stepped", "tapered"]

CameraAngle = Literal["front", "isometric", "section", "plan"]

ParameterValue = Union[bool, int, float, str]


class _DocumentModel(BaseModel):
    """Base for models read from and written to detail documents."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LayerProperties(_DocumentModel):
    """Authored visual properties of a layer."""

    color: str | None = None
    opacity: float = 1.0
    pattern: PatternType | None = None
    metallic: float | None = None
    roughness: float | None = None
    emissive: str | None = None


class SemanticLayer(_DocumentModel):
    """One physical ply of the assembly."""

    id: str
    material: str
    """Material tag, e.g. 'membrane-sheet'."""

    thickness: float
    """Thickness in mm."""

    position: LayerPosition = "substrate"
    properties: LayerProperties = Field(default_factory=LayerProperties)
    profile: ProfileShape | None = None
    annotation: str | None = None
    """Callout text as drawn on the detail."""


class SemanticConnection(_DocumentModel):
    """Relationship between two layers."""

    type: ConnectionType
    from_layer: str = Field(alias="from")
    to: str
    method: str = ""
    """e.g. 'heat-weld', 'adhesive', 'mechanical'."""

    dimension: float | None = None
    """Overlap dimension in mm."""


class ProductReference(_DocumentModel):
    """Manufacturer product bound to a layer."""

    manufacturer: str
    product: str
    layer: str
    color: str | None = None


class Point3(_DocumentModel):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class DimensionAnnotation(_DocumentModel):
    """A drawn dimension between two points."""

    id: str
    start: Point3 = Field(alias="from")
    end: Point3 = Field(alias="to")
    value: float
    label: str | None = None
    style: Literal["linear", "angular", "radius"] | None = None


class Viewport(_DocumentModel):
    """Scene extent in mm."""

    width: float
    height: float
    depth: float
    camera_angle: CameraAngle | None = None


class SourceReference(_DocumentModel):
    standard: str | None = None
    drawing_ref: str | None = None
    author: str | None = None


class SemanticDetail(_DocumentModel):
    """One construction assembly.

    Layer order is bottom to top.  Instances are treated as read-only:
    operations that change a detail return a new one.
    """

    id: str
    category: DetailCategory
    name: str = ""
    description: str | None = None

    parameters: dict[str, ParameterValue] = Field(default_factory=dict)
    viewport: Viewport | None = None

    layers: list[SemanticLayer] = Field(default_factory=list)
    connections: list[SemanticConnection] = Field(default_factory=list)
    dimensions: list[DimensionAnnotation] = Field(default_factory=list)

    products: list[ProductReference] = Field(default_factory=list)
    version: str = "1.0"
    source: SourceReference | None = None

    # Lookups

    def layer_ids(self) -> list[str]:
        return [layer.id for layer in self.layers]

    def get_layer(self, layer_id: str) -> SemanticLayer | None:
        for layer in self.layers:
            if layer.id == layer_id:
                return layer
        return None

    def product_for_layer(self, layer_id: str) -> ProductReference | None:
        for product in self.products:
            if product.layer == layer_id:
                return product
        return None

    @property
    def total_thickness(self) -> float:
        return sum(layer.thickness for layer in self.layers)

    # Serialisation

    def to_document(self) -> dict[str, Any]:
        """Return the camelCase document form."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_document(), indent=indent)

    @classmethod
    def from_document(cls, data: dict[str, Any]) -> SemanticDetail:
        return cls.model_validate(data)
