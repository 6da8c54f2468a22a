"""Construction DNA — engineering description of a material.

The tiers run from classification (division, category) through physical
properties (chemistry, reinforcement, surface) and performance figures to
the engineering notes that drive compatibility checks.
"""

from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

BaseChemistry = Literal[
    "SBS",
    "APP",
    "TPO",
    "EPDM",
    "PVC",
    "KEE",
    "polyurethane",
    "silicone",
    "acrylic",
    "asphalt",
    "butyl",
    "neoprene",
    "polyiso",
    "xps",
    "eps",
    "mineral-wool",
    "fiberglass",
]

BASE_CHEMISTRIES: tuple[str, ...] = get_args(BaseChemistry)

Reinforcement = Literal["polyester", "fiberglass", "scrim", "none"]

SurfaceTreatment = Literal["granule", "smooth", "film", "foil", "coated"]

FailureSeverity = Literal["low", "medium", "high", "critical"]

CompatibilityStatus = Literal["compatible", "incompatible", "conditional", "unknown"]


class _DNAModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FailureMode(_DNAModel):
    """A documented way a material fails in service."""

    id: str
    name: str
    description: str = ""
    causes: list[str] = Field(default_factory=list)
    prevention: list[str] = Field(default_factory=list)
    severity: FailureSeverity = "medium"


class CompatibilityResult(_DNAModel):
    """Outcome of putting two chemistries in contact."""

    status: CompatibilityStatus
    reason: str | None = None
    conditions: list[str] = Field(default_factory=list)
    recommendation: str | None = None


class MaterialDNA(_DNAModel):
    """Full DNA profile of a material."""

    id: str = ""

    # Classification
    division: str = "07"
    """CSI MasterFormat division."""

    category: str = "Uncategorized"
    assembly_type: str | None = None
    condition: str | None = None
    manufacturer: str | None = None
    product: str | None = None
    spec_sheet_url: str | None = None

    # Physical
    base_chemistry: str | None = None
    reinforcement: Reinforcement | None = None
    surface_treatment: SurfaceTreatment | None = None
    thickness_mil: float | None = None
    color: str | None = None
    sri: float | None = None
    """Solar Reflectance Index."""

    fire_rating: Literal["A", "B", "C", "unrated"] | None = None

    # Performance
    perm_rating: float | None = None
    tensile_strength: float | None = None
    """psi"""

    elongation: float | None = None
    """Percent at break."""

    temp_range_min: float | None = None
    temp_range_max: float | None = None
    """Service temperature range, Fahrenheit."""

    # Engineering notes
    failure_modes: list[FailureMode] = Field(default_factory=list)
    compatibility_notes: list[str] = Field(default_factory=list)
    application_constraints: list[str] = Field(default_factory=list)
    code_references: list[str] = Field(default_factory=list)
