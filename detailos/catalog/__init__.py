"""Material catalog: DNA import, display materials and bundled sample details."""

from detailos.catalog.adapter import (
    DetailMaterial,
    convert_dna_materials,
    create_quick_material,
    dna_material_to_detail_material,
)
from detailos.catalog.dna import normalize_dna, validate_dna
from detailos.catalog.importer import (
    DetailLoadResult,
    ImportResult,
    ImportStats,
    export_materials,
    import_materials,
    load_details,
)
from detailos.catalog.sample_details import (
    SAMPLE_DETAILS,
    all_manufacturers,
    get_detail_by_id,
    get_details_by_category,
)
from detailos.catalog.store import MaterialStore

__all__ = [
    "DetailLoadResult",
    "DetailMaterial",
    "ImportResult",
    "ImportStats",
    "MaterialStore",
    "SAMPLE_DETAILS",
    "all_manufacturers",
    "convert_dna_materials",
    "create_quick_material",
    "dna_material_to_detail_material",
    "export_materials",
    "get_detail_by_id",
    "get_details_by_category",
    "import_materials",
    "load_details",
    "normalize_dna",
    "validate_dna",
]
