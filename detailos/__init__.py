"""DetailOS — semantic construction details, manufacturer switching and material compatibility."""

__version__ = "0.1.0"

from detailos.api.facade import DetailOS
from detailos.catalog.adapter import DetailMaterial
from detailos.catalog.importer import ImportResult, export_materials, import_materials, load_details
from detailos.catalog.sample_details import SAMPLE_DETAILS, get_detail_by_id
from detailos.catalog.store import MaterialStore
from detailos.comparison.engine import ComparisonEngine
from detailos.comparison.report import DifferenceReport
from detailos.compatibility.analyzer import CompatibilityAnalyzer
from detailos.compatibility.matrix import CompatibilityMatrix, check_compatibility
from detailos.compatibility.report import DetailAnalysis
from detailos.equivalency.database import EquivalencyDatabase
from detailos.equivalency.switcher import ManufacturerSwitcher, switch_manufacturer
from detailos.generation.reconstructor import GeometryReconstructor, calculate_compression_ratio
from detailos.generation.scene import Reconstruction
from detailos.models.detail import SemanticDetail, SemanticLayer
from detailos.models.dna import CompatibilityResult, MaterialDNA
from detailos.models.equivalency import EquivalencyEntry, ProductEquivalency
from detailos.resolver.resolver import MaterialTypeResolver, resolve_material_type
from detailos.validation.report import DetailValidationReport
from detailos.validation.validator import DetailValidator

__all__ = [
    "__version__",
    # Facade
    "DetailOS",
    # Models
    "CompatibilityResult",
    "EquivalencyEntry",
    "MaterialDNA",
    "ProductEquivalency",
    "SemanticDetail",
    "SemanticLayer",
    # Components
    "CompatibilityAnalyzer",
    "CompatibilityMatrix",
    "ComparisonEngine",
    "DetailAnalysis",
    "DetailMaterial",
    "DetailValidationReport",
    "DetailValidator",
    "DifferenceReport",
    "EquivalencyDatabase",
    "GeometryReconstructor",
    "ImportResult",
    "ManufacturerSwitcher",
    "MaterialStore",
    "MaterialTypeResolver",
    "Reconstruction",
    # Catalog
    "SAMPLE_DETAILS",
    "get_detail_by_id",
    # Functions
    "calculate_compression_ratio",
    "check_compatibility",
    "export_materials",
    "import_materials",
    "load_details",
    "resolve_material_type",
    "switch_manufacturer",
]
