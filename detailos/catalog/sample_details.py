"""Sample detail library: one detail per reconstructable category."""

from __future__ import annotations

from typing import Any

from detailos.models.detail import SemanticDetail


def _layer(
    layer_id: str,
    material: str,
    thickness: float,
    position: str,
    annotation: str,
    profile: str | None = None,
    **properties: Any,
) -> dict[str, Any]:
    properties.setdefault("opacity", 1)
    properties.setdefault("pattern", "solid")
    layer = {
        "id": layer_id,
        "material": material,
        "thickness": thickness,
        "position": position,
        "properties": properties,
        "annotation": annotation,
    }
    if profile:
        layer["profile"] = profile
    return layer


def _conn(kind: str, src: str, dst: str, method: str, dimension: float | None = None) -> dict[str, Any]:
    conn: dict[str, Any] = {"type": kind, "from": src, "to": dst, "method": method}
    if dimension is not None:
        conn["dimension"] = dimension
    return conn


_DOCUMENTS: list[dict[str, Any]] = [
    {
        "id": "WP-003",
        "category": "expansion-joint",
        "name": "Expansion Joint at Foundation Wall",
        "description": "Waterproofing continuity across expansion joint with backer rod and sealant",
        "parameters": {
            "jointWidth": 25,
            "jointDepth": 20,
            "wallThickness": 300,
            "membraneOverlap": 150,
            "backerRodDiameter": 32,
        },
        "viewport": {"width": 500, "height": 400, "depth": 150, "cameraAngle": "isometric"},
        "layers": [
            _layer("substrate-left", "concrete", 300, "substrate", "CONCRETE FOUNDATION WALL",
                   color="#7a7a7a", roughness=0.9),
            _layer("substrate-right", "concrete", 300, "substrate", "CONCRETE FOUNDATION WALL",
                   color="#7a7a7a", roughness=0.9),
            _layer("primer", "primer", 0.5, "primer", "PRIMER", color="#1a1a1a", opacity=0.8),
            _layer("membrane", "membrane-sheet", 1.5, "membrane", "BITUTHENE 3000", "curved",
                   color="#0a0a0a", metallic=0.1),
            _layer("backer-rod", "backer-rod", 32, "finish", "CLOSED-CELL BACKER ROD", "curved",
                   color="#e8e8e8", opacity=0.9),
            _layer("sealant", "sealant", 20, "finish", "POLYURETHANE SEALANT", "curved",
                   color="#4a4a4a", opacity=0.95),
        ],
        "connections": [
            _conn("seal", "primer", "substrate-left", "roller-applied"),
            _conn("seal", "primer", "substrate-right", "roller-applied"),
            _conn("overlap", "membrane", "substrate-left", "adhesive", 150),
            _conn("overlap", "membrane", "substrate-right", "adhesive", 150),
            _conn("bridge", "membrane", "backer-rod", "loop-over"),
            _conn("terminate", "sealant", "membrane", "tooled-joint"),
        ],
        "products": [
            {"manufacturer": "GCP", "product": "BITUTHENE PRIMER B2", "layer": "primer"},
            {"manufacturer": "GCP", "product": "BITUTHENE 3000", "layer": "membrane"},
            {"manufacturer": "DOW", "product": "BACKER ROD", "layer": "backer-rod"},
            {"manufacturer": "SIKA", "product": "SIKAFLEX-1A", "layer": "sealant"},
        ],
        "version": "1.0",
        "source": {"standard": "ASTM C1193", "drawingRef": "Detail WP-003/A201"},
    },
    {
        "id": "AB-001",
        "category": "air-barrier",
        "name": "Air Barrier at Window Head",
        "description": "Fluid-applied air barrier transition at window rough opening",
        "parameters": {
            "openingWidth": 900,
            "studsSpacing": 406,
            "sheathing": 12.7,
            "airBarrierThickness": 1.5,
            "flashingWidth": 150,
        },
        "viewport": {"width": 400, "height": 350, "depth": 200, "cameraAngle": "section"},
        "layers": [
            _layer("stud", "wood", 38, "substrate", "2x6 WOOD STUD", color="#c4a574", roughness=0.7),
            _layer("sheathing", "wood", 12.7, "substrate", '1/2" PLYWOOD SHEATHING',
                   color="#d4b896", pattern="crosshatch"),
            _layer("air-barrier", "air-barrier", 1.5, "membrane", "FLUID-APPLIED AIR BARRIER",
                   color="#ff6b00", opacity=0.9, emissive="#ff6b00"),
            _layer("flashing-membrane", "membrane-sheet", 1, "membrane", "SELF-ADHERED FLASHING",
                   "stepped", color="#2a2a2a"),
            _layer("window-frame", "steel", 50, "finish", "WINDOW FRAME",
                   color="#333333", metallic=0.8, roughness=0.2),
        ],
        "connections": [
            _conn("seal", "air-barrier", "sheathing", "spray-applied"),
            _conn("overlap", "flashing-membrane", "air-barrier", "shingled", 75),
            _conn("seal", "flashing-membrane", "window-frame", "sealant-bed"),
        ],
        "products": [
            {"manufacturer": "PROSOCO", "product": "R-GUARD FASTFLASH", "layer": "air-barrier",
             "color": "#ff6b00"},
            {"manufacturer": "GCP", "product": "VYCOR PLUS", "layer": "flashing-membrane"},
        ],
        "version": "1.0",
    },
    {
        "id": "RF-002",
        "category": "roofing",
        "name": "Roof Edge Termination with Metal Coping",
        "description": "Built-up roofing termination at parapet with metal coping",
        "parameters": {
            "parapetHeight": 450,
            "parapetThickness": 200,
            "copingWidth": 300,
            "insulationThickness": 100,
        },
        "viewport": {"width": 500, "height": 500, "depth": 200, "cameraAngle": "isometric"},
        "layers": [
            _layer("deck", "concrete", 150, "substrate", "CONCRETE DECK", color="#808080"),
            _layer("parapet-wall", "cmu", 200, "substrate", "CMU PARAPET",
                   color="#9a9a9a", pattern="hatch"),
            _layer("vapor-barrier", "vapor-barrier", 0.15, "primer", "VAPOR RETARDER",
                   color="#222222", opacity=0.7),
            _layer("insulation", "insulation-rigid", 100, "insulation", "POLYISO INSULATION",
                   color="#ffd700", opacity=0.9, pattern="crosshatch"),
            _layer("cover-board", "protection-board", 6, "protection", "COVER BOARD", color="#d4d4d4"),
            _layer("roof-membrane", "membrane-sheet", 4.5, "membrane", "EPDM MEMBRANE", color="#1a1a1a"),
            _layer("cant-strip", "cant-strip", 100, "protection", "CANT STRIP", "tapered",
                   color="#ffcc00", opacity=0.9, pattern="diagonal"),
            _layer("base-flashing", "membrane-sheet", 1.5, "membrane", "BASE FLASHING", color="#0a0a0a"),
            _layer("termination-bar", "termination-bar", 3, "finish", "TERMINATION BAR",
                   color="#c0c0c0", metallic=0.7),
            _layer("metal-coping", "flashing-metal", 1.2, "finish", "METAL COPING",
                   color="#a8a8a8", metallic=0.9, roughness=0.3),
        ],
        "connections": [
            _conn("seal", "vapor-barrier", "deck", "fully-adhered"),
            _conn("fasten", "insulation", "deck", "mechanical"),
            _conn("overlap", "roof-membrane", "cover-board", "fully-adhered"),
            _conn("wrap", "base-flashing", "cant-strip", "shingled", 100),
            _conn("terminate", "base-flashing", "termination-bar", "mechanical"),
            _conn("seal", "termination-bar", "parapet-wall", "sealant"),
            _conn("fasten", "metal-coping", "parapet-wall", "cleats"),
        ],
        "products": [
            {"manufacturer": "FIRESTONE", "product": "RUBBERGARD EPDM", "layer": "roof-membrane"},
            {"manufacturer": "CARLISLE", "product": "INSULFOAM", "layer": "insulation"},
            {"manufacturer": "FIRESTONE", "product": "QUICKSEAM SA FLASHING", "layer": "base-flashing"},
        ],
        "version": "1.0",
    },
    {
        "id": "FD-001",
        "category": "foundation",
        "name": "Foundation Wall to Slab-on-Grade",
        "description": "Below-grade waterproofing transition from wall to slab",
        "parameters": {
            "wallHeight": 3000,
            "wallThickness": 250,
            "slabThickness": 150,
            "membraneOverlap": 200,
        },
        "viewport": {"width": 600, "height": 500, "depth": 200, "cameraAngle": "section"},
        "layers": [
            _layer("foundation-wall", "concrete", 250, "substrate", "FOUNDATION WALL", color="#7a7a7a"),
            _layer("footing", "concrete", 300, "substrate", "STRIP FOOTING", color="#6a6a6a"),
            _layer("gravel-base", "drainage-mat", 150, "drainage", "COMPACTED GRAVEL",
                   color="#a89078", opacity=0.8, pattern="stipple"),
            _layer("under-slab-membrane", "membrane-sheet", 0.25, "membrane", "VAPOR BARRIER",
                   color="#1a1a1a", opacity=0.9),
            _layer("slab", "concrete", 150, "substrate", "CONCRETE SLAB", color="#888888"),
            _layer("wall-membrane", "membrane-sheet", 1.5, "membrane", "WALL WATERPROOFING",
                   color="#0a0a0a"),
            _layer("protection-board", "protection-board", 6, "protection", "PROTECTION BOARD",
                   color="#d4d4d4", opacity=0.9),
            _layer("drainage-mat", "drainage-mat", 8, "drainage", "DRAINAGE MAT",
                   color="#2a5a2a", opacity=0.85, pattern="dots"),
        ],
        "connections": [
            _conn("seal", "wall-membrane", "foundation-wall", "fully-adhered"),
            _conn("overlap", "wall-membrane", "under-slab-membrane", "shingled", 200),
            _conn("seal", "wall-membrane", "footing", "fillet"),
        ],
        "products": [
            {"manufacturer": "GCP", "product": "BITUTHENE 3000", "layer": "wall-membrane"},
            {"manufacturer": "GCP", "product": "HYDRODUCT 220", "layer": "drainage-mat"},
            {"manufacturer": "STEGO", "product": "STEGO WRAP 15-MIL", "layer": "under-slab-membrane"},
        ],
        "version": "1.0",
    },
    {
        "id": "PN-001",
        "category": "penetration",
        "name": "Pipe Penetration Through Waterproofing",
        "description": "Round pipe penetration with collar and sealant",
        "parameters": {
            "pipeDiameter": 100,
            "collarHeight": 150,
            "membraneThickness": 1.5,
            "sealantWidth": 25,
        },
        "viewport": {"width": 350, "height": 350, "depth": 350, "cameraAngle": "isometric"},
        "layers": [
            _layer("substrate", "concrete", 200, "substrate", "CONCRETE SUBSTRATE", color="#7a7a7a"),
            _layer("pipe", "steel", 100, "substrate", '4" STEEL PIPE', "curved",
                   color="#505050", metallic=0.6),
            _layer("membrane", "membrane-sheet", 1.5, "membrane", "WATERPROOFING MEMBRANE",
                   color="#0a0a0a"),
            _layer("collar", "membrane-sheet", 1.5, "membrane", "PIPE COLLAR", "curved",
                   color="#1a1a1a"),
            _layer("clamp", "steel", 25, "finish", "STAINLESS CLAMP", "curved",
                   color="#a0a0a0", metallic=0.8),
            _layer("sealant", "sealant", 10, "finish", "POLYURETHANE SEALANT",
                   color="#4a4a4a", opacity=0.9),
        ],
        "connections": [
            _conn("seal", "membrane", "substrate", "fully-adhered"),
            _conn("wrap", "collar", "pipe", "prefabricated"),
            _conn("overlap", "collar", "membrane", "shingled", 100),
            _conn("fasten", "clamp", "pipe", "mechanical"),
            _conn("seal", "sealant", "pipe", "gun-applied"),
        ],
        "products": [
            {"manufacturer": "GCP", "product": "BITUTHENE 3000", "layer": "membrane"},
            {"manufacturer": "PORTALS PLUS", "product": "PIPE COLLAR", "layer": "collar"},
            {"manufacturer": "SIKA", "product": "SIKAFLEX-1A", "layer": "sealant"},
        ],
        "version": "1.0",
    },
]

SAMPLE_DETAILS: list[SemanticDetail] = [SemanticDetail.from_document(doc) for doc in _DOCUMENTS]


def get_detail_by_id(detail_id: str) -> SemanticDetail | None:
    for detail in SAMPLE_DETAILS:
        if detail.id == detail_id:
            return detail.model_copy(deep=True)
    return None


def get_details_by_category(category: str) -> list[SemanticDetail]:
    return [d.model_copy(deep=True) for d in SAMPLE_DETAILS if d.category == category]


def all_manufacturers(details: list[SemanticDetail] | None = None) -> list[str]:
    """Sorted unique manufacturers named by the details' product references."""
    names = {
        product.manufacturer
        for detail in (SAMPLE_DETAILS if details is None else details)
        for product in detail.products
    }
    return sorted(names)
