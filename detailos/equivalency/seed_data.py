"""Seed equivalency catalog.

Keys are material types as produced by the resolver.  Within each type the
reference product scores 1.0 and the others score their similarity to it.
Thicknesses are in mm and only given where the products share a nominal
sheet thickness.
"""

from __future__ import annotations

from typing import Any

_TPO_PRODUCTS: list[dict[str, Any]] = [
    {"manufacturer": "Carlisle SynTec", "product": "Sure-Weld TPO", "thickness": 1.5, "confidenceScore": 1.0},
    {"manufacturer": "GAF", "product": "EverGuard TPO", "thickness": 1.5, "confidenceScore": 0.96},
    {"manufacturer": "Firestone", "product": "UltraPly TPO", "thickness": 1.5, "confidenceScore": 0.95},
    {"manufacturer": "Johns Manville", "product": "TPO RB", "thickness": 1.5, "confidenceScore": 0.94},
]

SEED_EQUIVALENCIES: dict[str, dict[str, Any]] = {
    # -- Below-grade and wall membranes ---------------------------------------
    "membrane-self-adhered-waterproofing": {
        "baseType": "Self-Adhered Waterproofing Membrane",
        "products": [
            {"manufacturer": "GCP Applied Technologies", "product": "BITUTHENE 3000", "thickness": 1.5, "confidenceScore": 1.0},
            {"manufacturer": "Carlisle CCW", "product": "MiraDRI 860", "thickness": 1.5, "confidenceScore": 0.95},
            {"manufacturer": "Tremco", "product": "TREMproof 250GC", "thickness": 1.5, "confidenceScore": 0.92},
            {"manufacturer": "W.R. Meadows", "product": "MEL-ROL", "thickness": 1.5, "confidenceScore": 0.90},
            {"manufacturer": "Henry Company", "product": "Blueskin WP 200", "thickness": 1.5, "confidenceScore": 0.88},
            {"manufacturer": "Sika", "product": "Sikadur Combiflex", "thickness": 1.5, "confidenceScore": 0.85},
        ],
    },
    "membrane-air-barrier": {
        "baseType": "Self-Adhered Air Barrier Membrane",
        "products": [
            {"manufacturer": "GCP Applied Technologies", "product": "PERM-A-BARRIER", "thickness": 1.0, "confidenceScore": 1.0},
            {"manufacturer": "Carlisle CCW", "product": "Air-Bloc 31 MR", "thickness": 1.0, "confidenceScore": 0.94},
            {"manufacturer": "Henry Company", "product": "Blueskin VP100", "thickness": 1.0, "confidenceScore": 0.92},
            {"manufacturer": "Tremco", "product": "ExoAir 120", "thickness": 1.0, "confidenceScore": 0.90},
        ],
    },
    "air-barrier": {
        "baseType": "Fluid-Applied Air Barrier",
        "products": [
            {"manufacturer": "Soprema", "product": "Sopraseal Stick VP", "confidenceScore": 1.0},
            {"manufacturer": "GCP Applied Technologies", "product": "PERM-A-BARRIER VPL 50", "confidenceScore": 0.92},
            {"manufacturer": "W.R. Meadows", "product": "AIR-SHIELD LM", "confidenceScore": 0.90},
            {"manufacturer": "Owens Corning", "product": "PINKWRAP Air Barrier", "confidenceScore": 0.82},
        ],
    },
    "drainage-composite": {
        "baseType": "Drainage Composite Board",
        "products": [
            {"manufacturer": "GCP Applied Technologies", "product": "HYDRODUCT", "confidenceScore": 1.0},
            {"manufacturer": "Carlisle CCW", "product": "CCW MIRADRAIN", "confidenceScore": 0.95},
            {"manufacturer": "W.R. Meadows", "product": "MEADOW-DRAIN", "confidenceScore": 0.93},
        ],
    },
    "vapor-barrier": {
        "baseType": "Self-Adhered Vapor Retarder",
        "products": [
            {"manufacturer": "Carlisle SynTec", "product": "VapAir Seal 725TR", "confidenceScore": 1.0},
            {"manufacturer": "GAF", "product": "SA Vapor Retarder", "confidenceScore": 0.92},
            {"manufacturer": "Firestone", "product": "V-Force Vapor Barrier", "confidenceScore": 0.90},
        ],
    },

    # -- Roofing membranes ----------------------------------------------------
    "membrane-tpo-roofing": {
        "baseType": "TPO Roofing Membrane",
        "products": _TPO_PRODUCTS,
    },
    # The key the resolver produces for roof membranes
    "membrane-tpo": {
        "baseType": "TPO Roofing Membrane",
        "products": _TPO_PRODUCTS + [
            {"manufacturer": "Versico", "product": "VersiWeld TPO", "thickness": 1.5, "confidenceScore": 0.93},
            {"manufacturer": "Duro-Last", "product": "Duro-TECH TPO", "thickness": 1.5, "confidenceScore": 0.90},
        ],
    },
    "membrane-epdm": {
        "baseType": "EPDM Roofing Membrane",
        "products": [
            {"manufacturer": "Carlisle SynTec", "product": "Sure-Seal EPDM", "thickness": 1.5, "confidenceScore": 1.0},
            {"manufacturer": "Firestone", "product": "RubberGard EPDM", "thickness": 1.5, "confidenceScore": 0.96},
            {"manufacturer": "Johns Manville", "product": "JM EPDM", "thickness": 1.5, "confidenceScore": 0.92},
        ],
    },
    "membrane-pvc": {
        "baseType": "PVC Roofing Membrane",
        "products": [
            {"manufacturer": "Sika", "product": "Sarnafil G410", "thickness": 1.5, "confidenceScore": 1.0},
            {"manufacturer": "Carlisle SynTec", "product": "Sure-Flex PVC", "thickness": 1.5, "confidenceScore": 0.94},
            {"manufacturer": "Johns Manville", "product": "JM PVC", "thickness": 1.5, "confidenceScore": 0.92},
        ],
    },
    "membrane-mod-bit": {
        "baseType": "SBS Modified Bitumen Membrane",
        "products": [
            {"manufacturer": "GAF", "product": "Ruberoid 30", "thickness": 3.0, "confidenceScore": 1.0},
            {"manufacturer": "Johns Manville", "product": "DynaLastic 180", "thickness": 3.0, "confidenceScore": 0.93},
            {"manufacturer": "Firestone", "product": "SBS Premium", "thickness": 3.0, "confidenceScore": 0.90},
        ],
    },
    "membrane-fleece": {
        "baseType": "Fleece-Backed Single-Ply Membrane",
        "products": [
            {"manufacturer": "Carlisle SynTec", "product": "Sure-Weld FleeceBACK TPO", "confidenceScore": 1.0},
            {"manufacturer": "Firestone", "product": "RubberGard EPDM FleeceBACK", "confidenceScore": 0.88},
        ],
    },
    "flashing": {
        "baseType": "Roof Edge and Base Flashing",
        "products": [
            {"manufacturer": "Carlisle SynTec", "product": "Sure-Weld Pressure-Sensitive Flashing", "confidenceScore": 1.0},
            {"manufacturer": "Firestone", "product": "QuickSeam SA Flashing", "confidenceScore": 0.95},
            {"manufacturer": "GAF", "product": "EverGuard TPO Flashing", "confidenceScore": 0.93},
        ],
    },

    # -- Insulation and boards ------------------------------------------------
    "insulation-polyiso": {
        "baseType": "Polyisocyanurate Roof Insulation",
        "products": [
            {"manufacturer": "Atlas Roofing", "product": "ACFoam-II", "confidenceScore": 1.0},
            {"manufacturer": "Johns Manville", "product": "ENRGY 3", "confidenceScore": 0.96},
            {"manufacturer": "Hunter Panels", "product": "H-Shield", "confidenceScore": 0.95},
            {"manufacturer": "Carlisle SynTec", "product": "InsulBase", "confidenceScore": 0.94},
            {"manufacturer": "GAF", "product": "EnergyGuard Polyiso", "confidenceScore": 0.94},
            {"manufacturer": "Firestone", "product": "ISO 95+ GL", "confidenceScore": 0.93},
        ],
    },
    "insulation-xps": {
        "baseType": "Extruded Polystyrene Insulation",
        "products": [
            {"manufacturer": "Owens Corning", "product": "FOAMULAR", "confidenceScore": 1.0},
            {"manufacturer": "DuPont (DOW)", "product": "STYROFOAM", "confidenceScore": 0.98},
            {"manufacturer": "Kingspan", "product": "GreenGuard XPS", "confidenceScore": 0.95},
        ],
    },
    "cover-board": {
        "baseType": "Roof Cover Board",
        "products": [
            {"manufacturer": "Georgia-Pacific", "product": "DensDeck Prime", "confidenceScore": 1.0},
            {"manufacturer": "USG", "product": "Securock Gypsum-Fiber", "confidenceScore": 0.95},
            {"manufacturer": "Carlisle SynTec", "product": "SecurShield HD", "confidenceScore": 0.90},
            {"manufacturer": "GAF", "product": "EnergyGuard HD Cover Board", "confidenceScore": 0.90},
        ],
    },

    # -- Coatings -------------------------------------------------------------
    "coating-silicone": {
        "baseType": "Silicone Roof Coating",
        "products": [
            {"manufacturer": "Carlisle SynTec", "product": "Sure-Coat Silicone", "confidenceScore": 1.0},
            {"manufacturer": "Duro-Last", "product": "Duro-Shield Silicone Coating", "confidenceScore": 0.90},
            {"manufacturer": "W.R. Meadows", "product": "Silicone Roof Coating", "confidenceScore": 0.85},
        ],
    },
    "coating-acrylic": {
        "baseType": "Elastomeric Acrylic Roof Coating",
        "products": [
            {"manufacturer": "Mule-Hide", "product": "Acrylic Roof Coating", "confidenceScore": 1.0},
            {"manufacturer": "Polyglass", "product": "PolyBrite 77", "confidenceScore": 0.88},
        ],
    },
    "coating-liquid": {
        "baseType": "Fluid-Applied Membrane",
        "products": [
            {"manufacturer": "Sika", "product": "Sikalastic RoofPro", "confidenceScore": 1.0},
            {"manufacturer": "GCP Applied Technologies", "product": "BITUTHENE LIQUID MEMBRANE", "confidenceScore": 0.90},
            {"manufacturer": "Henry Company", "product": "Aqua-Bloc", "confidenceScore": 0.88},
        ],
    },

    # -- Accessories ----------------------------------------------------------
    "sealant": {
        "baseType": "Elastomeric Joint Sealant",
        "products": [
            {"manufacturer": "Sika", "product": "Sikaflex-1a", "confidenceScore": 1.0},
            {"manufacturer": "Tremco", "product": "Dymonic 100", "confidenceScore": 0.95},
            {"manufacturer": "Pecora", "product": "Dynatrol I-XL", "confidenceScore": 0.93},
        ],
    },
    "primer": {
        "baseType": "Membrane Primer",
        "products": [
            {"manufacturer": "GCP Applied Technologies", "product": "BITUTHENE PRIMER B2", "confidenceScore": 1.0},
            {"manufacturer": "Carlisle CCW", "product": "CCW-702 Primer", "confidenceScore": 0.95},
            {"manufacturer": "W.R. Meadows", "product": "MEL-PRIME W/B", "confidenceScore": 0.92},
            {"manufacturer": "Tremco", "product": "TREMproof Primer", "confidenceScore": 0.90},
        ],
    },
    "adhesive": {
        "baseType": "Membrane Bonding Adhesive",
        "products": [
            {"manufacturer": "Carlisle SynTec", "product": "Sure-Weld Bonding Adhesive", "confidenceScore": 1.0},
            {"manufacturer": "Firestone", "product": "Secure Bond Adhesive", "confidenceScore": 0.93},
            {"manufacturer": "GAF", "product": "EverGuard TPO Bonding Adhesive", "confidenceScore": 0.92},
        ],
    },
    "fastener": {
        "baseType": "Roofing Fastener",
        "products": [
            {"manufacturer": "Carlisle SynTec", "product": "HP-X Fastener", "confidenceScore": 1.0},
            {"manufacturer": "GAF", "product": "Drill-Tec #14 HD", "confidenceScore": 0.95},
            {"manufacturer": "Firestone", "product": "All-Purpose Fastener", "confidenceScore": 0.93},
        ],
    },
}
