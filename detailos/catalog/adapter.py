"""DetailMaterial — display and appearance record derived from MaterialDNA."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from detailos.config import DEFAULT_COLOR, DEFAULT_MATERIAL_THICKNESS_MM, DEFAULT_ROUGHNESS, MIL_TO_MM
from detailos.models.dna import MaterialDNA

TextureHint = Literal["smooth", "granule", "ribbed", "matte", "foil"]

CHEMISTRY_COLORS: dict[str, str] = {
    "TPO": "#F5F5F5",
    "EPDM": "#1A1A1A",
    "PVC": "#E8E8E8",
    "SBS": "#2D2D2D",
    "APP": "#3D3D3D",
    "polyiso": "#D4A574",
    "xps": "#FF9ECF",
    "eps": "#FFFFFF",
    "silicone": "#E0E0E0",
    "acrylic": "#CCCCCC",
    "polyurethane": "#4A4A4A",
    "asphalt": "#1F1F1F",
    "butyl": "#333333",
    "neoprene": "#2A2A2A",
    "mineral-wool": "#FFE4B5",
    "fiberglass": "#FFE4E1",
    "KEE": "#E8E8E8",
}

SURFACE_ROUGHNESS: dict[str, float] = {
    "smooth": 0.3,
    "granule": 0.9,
    "film": 0.2,
    "foil": 0.1,
    "coated": 0.4,
}


class DetailMaterial(BaseModel):
    """A catalog material ready for display and rendering."""

    id: str
    dna_id: str

    name: str
    manufacturer: str
    product: str
    category: str

    color: str
    roughness: float
    metalness: float
    opacity: float = 1.0
    texture_hint: TextureHint

    thickness_mm: float
    chemistry: str
    spec_sheet_url: str | None = None

    dna: MaterialDNA


def _metalness(chemistry: str, surface: str | None) -> float:
    if surface == "foil":
        return 0.8
    if chemistry in ("aluminum", "steel"):
        return 0.9
    return 0.0


def _texture_hint(surface: str | None) -> TextureHint:
    if surface == "granule":
        return "granule"
    if surface in ("smooth", "film"):
        return "smooth"
    if surface == "foil":
        return "foil"
    return "matte"


def dna_material_to_detail_material(dna: MaterialDNA) -> DetailMaterial:
    """Derive display and appearance fields from a DNA record.

    Colour falls back to the chemistry colour, roughness follows the
    surface treatment and thickness converts from mils (1.5 mm when none
    is declared).
    """
    chemistry = dna.base_chemistry or ""
    return DetailMaterial(
        id=f"mat-{dna.id}",
        dna_id=dna.id,
        name=dna.product or dna.base_chemistry or "Unknown Material",
        manufacturer=dna.manufacturer or "Generic",
        product=dna.product or "",
        category=dna.category or "Uncategorized",
        color=dna.color or CHEMISTRY_COLORS.get(chemistry, DEFAULT_COLOR),
        roughness=SURFACE_ROUGHNESS.get(dna.surface_treatment or "", DEFAULT_ROUGHNESS),
        metalness=_metalness(chemistry, dna.surface_treatment),
        texture_hint=_texture_hint(dna.surface_treatment),
        thickness_mm=dna.thickness_mil * MIL_TO_MM if dna.thickness_mil else DEFAULT_MATERIAL_THICKNESS_MM,
        chemistry=chemistry,
        spec_sheet_url=dna.spec_sheet_url,
        dna=dna,
    )


def convert_dna_materials(materials: list[MaterialDNA]) -> list[DetailMaterial]:
    return [dna_material_to_detail_material(dna) for dna in materials]


def create_quick_material(
    material_id: str,
    chemistry: str,
    *,
    name: str | None = None,
    manufacturer: str | None = None,
    product: str | None = None,
    color: str | None = None,
    thickness_mm: float | None = None,
    spec_sheet_url: str | None = None,
) -> DetailMaterial:
    """Make a material from a chemistry and a few display fields."""
    dna = MaterialDNA(
        id=material_id,
        category="Roofing",
        base_chemistry=chemistry,
        manufacturer=manufacturer,
        product=product or name,
        color=color,
        thickness_mil=thickness_mm / MIL_TO_MM if thickness_mm else None,
        spec_sheet_url=spec_sheet_url,
    )
    material = dna_material_to_detail_material(dna)
    if name:
        material.name = name
    if thickness_mm:
        material.thickness_mm = thickness_mm
    return material
