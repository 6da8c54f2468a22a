"""Chemistry tables: material type to base chemistry, DNA profiles and failure modes."""

from __future__ import annotations

from detailos.models.dna import BASE_CHEMISTRIES, FailureMode, MaterialDNA

MATERIAL_TYPE_TO_CHEMISTRY: dict[str, str] = {
    # Membranes
    "membrane-tpo": "TPO",
    "membrane-epdm": "EPDM",
    "membrane-pvc": "PVC",
    "membrane-mod-bit": "SBS",
    "membrane-self-adhered-waterproofing": "SBS",
    "membrane-air-barrier": "SBS",
    "membrane-fleece": "TPO",
    # Insulation
    "insulation-polyiso": "polyiso",
    "insulation-xps": "xps",
    "insulation-eps": "eps",
    # Coatings
    "coating-silicone": "silicone",
    "coating-acrylic": "acrylic",
    "coating-liquid": "polyurethane",
    # Barriers
    "vapor-barrier": "polyurethane",
    "air-barrier": "SBS",
    # Accessories
    "sealant": "polyurethane",
    "adhesive": "asphalt",
    "primer": "asphalt",
}

COMMON_FAILURE_MODES: dict[str, FailureMode] = {
    "uv-degradation": FailureMode(
        id="uv-degradation",
        name="UV Degradation",
        description="Material breakdown from ultraviolet radiation exposure",
        causes=["Direct sunlight", "No UV stabilizers", "Exposed application"],
        prevention=["Use UV-stable materials", "Apply protective coating", "Cover exposed areas"],
        severity="high",
    ),
    "plasticizer-migration": FailureMode(
        id="plasticizer-migration",
        name="Plasticizer Migration",
        description="Plasticizers leach out causing embrittlement",
        causes=["Incompatible contact materials", "High heat", "Age"],
        prevention=["Use compatible materials", "Install barriers", "Specify non-migratory"],
        severity="high",
    ),
    "ponding-water": FailureMode(
        id="ponding-water",
        name="Ponding Water",
        description="Standing water accelerates deterioration",
        causes=["Inadequate slope", "Blocked drains", "Deflection"],
        prevention=['Minimum 1/4" per foot slope', "Regular drain maintenance"],
        severity="medium",
    ),
    "seam-failure": FailureMode(
        id="seam-failure",
        name="Seam Failure",
        description="Separation at membrane seams",
        causes=["Poor welding", "Contamination", "Stress concentration"],
        prevention=["Proper weld temps", "Clean surfaces", "Adequate overlap"],
        severity="critical",
    ),
    "puncture": FailureMode(
        id="puncture",
        name="Mechanical Puncture",
        description="Physical damage from foot traffic or debris",
        causes=["Foot traffic", "Dropped tools", "Hail"],
        prevention=["Walk pads", "Protection board", "Thicker membrane"],
        severity="medium",
    ),
    "thermal-shock": FailureMode(
        id="thermal-shock",
        name="Thermal Shock",
        description="Damage from rapid temperature changes",
        causes=["HVAC condensate", "Storm fronts", "Improper design"],
        prevention=["Adequate insulation", "Proper expansion joints"],
        severity="medium",
    ),
    "chemical-attack": FailureMode(
        id="chemical-attack",
        name="Chemical Attack",
        description="Degradation from chemical exposure",
        causes=["Oil spills", "Acids", "Solvents", "Grease"],
        prevention=["Chemical-resistant materials", "Containment systems"],
        severity="high",
    ),
}

# Modes every material is exposed to, then the chemistry-specific ones
_UNIVERSAL_FAILURE_MODES = ["puncture", "thermal-shock"]
_CHEMISTRY_FAILURE_MODES: dict[str, list[str]] = {
    "EPDM": ["uv-degradation", "seam-failure"],
    "TPO": ["seam-failure"],
    "PVC": ["plasticizer-migration", "uv-degradation"],
    "SBS": ["ponding-water", "seam-failure"],
    "APP": ["ponding-water", "seam-failure"],
    "silicone": ["chemical-attack"],
    "acrylic": ["chemical-attack"],
}


def _modes(*ids: str) -> list[FailureMode]:
    return [COMMON_FAILURE_MODES[i] for i in ids]


DNA_MATERIAL_PROFILES: dict[str, MaterialDNA] = {
    "membrane-tpo": MaterialDNA(
        id="membrane-tpo",
        division="07 54 00",
        category="Thermoplastic Polyolefin (TPO) Roofing",
        assembly_type="roofing",
        base_chemistry="TPO",
        reinforcement="polyester",
        surface_treatment="smooth",
        thickness_mil=60,
        color="white",
        sri=108,
        fire_rating="A",
        tensile_strength=1200,
        elongation=450,
        temp_range_min=-40,
        temp_range_max=180,
        failure_modes=_modes("seam-failure", "puncture", "thermal-shock"),
        compatibility_notes=[
            "Incompatible with asphalt-based products",
            "Compatible with polyiso insulation",
            "Requires separation from EPDM",
        ],
        application_constraints=[
            "Hot-air weld seams only",
            "Minimum 25°F application temp",
            "Store rolls on end",
        ],
    ),
    "membrane-epdm": MaterialDNA(
        id="membrane-epdm",
        division="07 53 00",
        category="EPDM Roofing",
        assembly_type="roofing",
        base_chemistry="EPDM",
        reinforcement="none",
        surface_treatment="smooth",
        thickness_mil=60,
        color="black",
        sri=6,
        fire_rating="A",
        tensile_strength=1300,
        elongation=300,
        temp_range_min=-65,
        temp_range_max=250,
        failure_modes=_modes("uv-degradation", "seam-failure", "puncture"),
        compatibility_notes=[
            "INCOMPATIBLE with asphalt and bitumen products",
            "INCOMPATIBLE with PVC - plasticizer migration",
            "Compatible with silicone and butyl",
            "Compatible with polyiso insulation",
        ],
        application_constraints=[
            "Adhesive or tape seams",
            "Requires primer on most substrates",
            "Not recommended for recover over asphalt",
        ],
    ),
    "membrane-pvc": MaterialDNA(
        id="membrane-pvc",
        division="07 54 00",
        category="PVC Roofing",
        assembly_type="roofing",
        base_chemistry="PVC",
        reinforcement="polyester",
        surface_treatment="smooth",
        thickness_mil=60,
        color="white",
        sri=107,
        fire_rating="A",
        tensile_strength=2000,
        elongation=200,
        temp_range_min=-20,
        temp_range_max=160,
        failure_modes=_modes("plasticizer-migration", "uv-degradation", "puncture"),
        compatibility_notes=[
            "INCOMPATIBLE with asphalt - causes degradation",
            "INCOMPATIBLE with EPS and XPS - plasticizer destroys foam",
            "INCOMPATIBLE with EPDM",
            "Use polyiso insulation ONLY",
            "Requires barrier from bituminous materials",
        ],
        application_constraints=[
            "Hot-air weld seams only",
            "Must use PVC-compatible accessories",
            "No contact with tar or asphalt",
        ],
    ),
    "membrane-mod-bit": MaterialDNA(
        id="membrane-mod-bit",
        division="07 52 00",
        category="Modified Bituminous Membrane Roofing",
        assembly_type="roofing",
        base_chemistry="SBS",
        reinforcement="polyester",
        surface_treatment="granule",
        thickness_mil=160,
        color="varies",
        fire_rating="A",
        tensile_strength=400,
        elongation=40,
        temp_range_min=-20,
        temp_range_max=280,
        failure_modes=_modes("ponding-water", "seam-failure", "thermal-shock"),
        compatibility_notes=[
            "INCOMPATIBLE with EPDM, TPO, PVC",
            "Compatible with asphalt products",
            "Compatible with polyiso and silicone coatings",
        ],
        application_constraints=[
            "Torch or cold-applied",
            "Minimum 2-ply system",
            "Requires proper slope for drainage",
        ],
    ),
    "membrane-self-adhered-waterproofing": MaterialDNA(
        id="membrane-self-adhered-waterproofing",
        division="07 13 00",
        category="Sheet Waterproofing",
        assembly_type="waterproofing",
        base_chemistry="SBS",
        reinforcement="polyester",
        surface_treatment="film",
        thickness_mil=60,
        color="black",
        perm_rating=0.05,
        temp_range_min=25,
        temp_range_max=140,
        failure_modes=_modes("puncture"),
        compatibility_notes=[
            "Requires protection board in backfill applications",
            "Prime concrete surfaces before application",
        ],
        application_constraints=[
            "Self-adhered - no torch",
            "Minimum 40°F application temp",
            "Apply to dry surfaces only",
        ],
    ),
    "insulation-polyiso": MaterialDNA(
        id="insulation-polyiso",
        division="07 22 00",
        category="Roof Insulation",
        assembly_type="roofing",
        base_chemistry="polyiso",
        surface_treatment="foil",
        temp_range_min=-100,
        temp_range_max=250,
        compatibility_notes=[
            "Compatible with all membrane types",
            "Recommended for PVC applications",
            "Best R-value per inch",
        ],
        application_constraints=["Store flat and dry", "Stagger joints in multiple layers"],
    ),
    "insulation-xps": MaterialDNA(
        id="insulation-xps",
        division="07 22 00",
        category="Roof Insulation",
        assembly_type="roofing",
        base_chemistry="xps",
        surface_treatment="smooth",
        temp_range_min=-100,
        temp_range_max=165,
        compatibility_notes=[
            "INCOMPATIBLE with PVC - plasticizer destroys XPS",
            "Compatible with EPDM, TPO, SBS",
            "Good for below-grade and plaza decks",
        ],
        application_constraints=["Do not use with PVC roofing", "Protect from prolonged UV exposure"],
    ),
}


def normalize_chemistry(name: str) -> str:
    """Return the canonical spelling of a chemistry name.

    Known chemistries match case-insensitively (``"epdm"`` -> ``"EPDM"``);
    anything else is returned stripped and lower-cased, so unknown names
    still compare case-insensitively.
    """
    cleaned = (name or "").strip()
    for known in BASE_CHEMISTRIES:
        if known.lower() == cleaned.lower():
            return known
    return cleaned.lower()


def get_base_chemistry(material_type: str | None) -> str | None:
    if not material_type:
        return None
    return MATERIAL_TYPE_TO_CHEMISTRY.get(material_type)


def get_dna_profile(material_type: str | None) -> MaterialDNA | None:
    if not material_type:
        return None
    return DNA_MATERIAL_PROFILES.get(material_type)


def has_dna_data(material_type: str | None) -> bool:
    return bool(material_type) and (
        material_type in MATERIAL_TYPE_TO_CHEMISTRY or material_type in DNA_MATERIAL_PROFILES
    )


def failure_modes_for(chemistry: str) -> list[FailureMode]:
    """Failure modes a chemistry is exposed to, universal ones first."""
    ids = _UNIVERSAL_FAILURE_MODES + _CHEMISTRY_FAILURE_MODES.get(normalize_chemistry(chemistry), [])
    return [COMMON_FAILURE_MODES[i] for i in ids]
