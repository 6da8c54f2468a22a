"""Lookup tables from layer identity to equivalency material-type keys.

The keys on the right-hand side are the material types used by the
equivalency database and the chemistry tables.
"""

from __future__ import annotations

# Layer ids used by the standard detail library.
LAYER_ID_TO_MATERIAL_TYPE: dict[str, str] = {
    # Roofing
    "deck": "substrate-concrete",
    "parapet": "substrate-cmu",
    "parapet-wall": "substrate-cmu",
    "vapor-barrier": "vapor-barrier",
    "insulation": "insulation-polyiso",
    "cover-board": "cover-board",
    "roof-membrane": "membrane-tpo",
    "cant-strip": "insulation-polyiso",
    "base-flashing": "flashing",
    "termination-bar": "fastener",
    "metal-coping": "flashing",
    # Foundation
    "foundation-wall": "substrate-concrete",
    "footing": "substrate-concrete",
    "gravel-base": "drainage-composite",
    "slab": "substrate-concrete",
    "wall-membrane": "membrane-self-adhered-waterproofing",
    "protection-board": "cover-board",
    "drainage-mat": "drainage-composite",
    # Air barrier
    "stud": "substrate-wood",
    "sheathing": "substrate-wood",
    "air-barrier": "membrane-air-barrier",
    "flashing-membrane": "membrane-self-adhered-waterproofing",
    "window-frame": "substrate-aluminum",
    # Expansion joint
    "substrate-left": "substrate-concrete",
    "substrate-right": "substrate-concrete",
    "primer": "primer",
    "membrane": "membrane-self-adhered-waterproofing",
    "backer-rod": "sealant",
    "sealant": "sealant",
    # Penetration
    "substrate": "substrate-concrete",
    "pipe": "substrate-steel",
    "collar": "flashing",
    "clamp": "fastener",
}

# Material tags, used when the layer id is not in the table above.
MATERIAL_TO_EQUIVALENCY_KEY: dict[str, str] = {
    # Substrates
    "concrete": "substrate-concrete",
    "cmu": "substrate-cmu",
    "steel": "substrate-steel",
    "wood": "substrate-wood",
    # Membranes
    "membrane-sheet": "membrane-tpo",
    "membrane-fluid": "coating-liquid",
    # Air and vapor barriers
    "air-barrier": "membrane-air-barrier",
    "vapor-barrier": "vapor-barrier",
    # Insulation
    "insulation-rigid": "insulation-polyiso",
    "insulation-spray": "coating-liquid",
    # Protection and drainage
    "protection-board": "cover-board",
    "drainage-mat": "drainage-composite",
    # Metals and flashing
    "flashing-metal": "flashing",
    "termination-bar": "fastener",
    "reglet": "flashing",
    # Sealants and accessories
    "sealant": "sealant",
    "backer-rod": "sealant",
    "primer": "primer",
    "adhesive": "adhesive",
    "cant-strip": "insulation-polyiso",
}

# Keyword fallback.  Order matters: the first keyword found wins, so more
# specific phrases precede the generic ones they contain.
KEYWORD_TO_EQUIVALENCY_KEY: dict[str, str] = {
    # Membranes
    "tpo": "membrane-tpo",
    "epdm": "membrane-epdm",
    "pvc": "membrane-pvc",
    "mod-bit": "membrane-mod-bit",
    "modified bitumen": "membrane-mod-bit",
    "waterproof": "membrane-self-adhered-waterproofing",
    "bituthene": "membrane-self-adhered-waterproofing",
    "fleece": "membrane-fleece",
    # Air barriers
    "air barrier": "membrane-air-barrier",
    "air-barrier": "membrane-air-barrier",
    "perm-a-barrier": "membrane-air-barrier",
    # Insulation
    "polyiso": "insulation-polyiso",
    "polyisocyanurate": "insulation-polyiso",
    "xps": "insulation-xps",
    "extruded polystyrene": "insulation-xps",
    # Coatings
    "silicone": "coating-silicone",
    "acrylic": "coating-acrylic",
    "liquid": "coating-liquid",
    # Drainage
    "drainage": "drainage-composite",
    "drain": "drainage-composite",
    # Vapor barriers
    "vapor": "vapor-barrier",
    "vapour": "vapor-barrier",
    # Accessories
    "sealant": "sealant",
    "flashing": "flashing",
    "fastener": "fastener",
    "adhesive": "adhesive",
    "primer": "primer",
    "cover board": "cover-board",
    "coverboard": "cover-board",
}
