"""Construction DNA profiles & Compatibility Analyzer.

Chemistry tables for material types, an unordered compatibility table and
an adjacent-layer scan that reports chemical conflicts within a detail.
"""

from detailos.compatibility.analyzer import CompatibilityAnalyzer, check_material_compatibility
from detailos.compatibility.chemistry import (
    COMMON_FAILURE_MODES,
    DNA_MATERIAL_PROFILES,
    MATERIAL_TYPE_TO_CHEMISTRY,
    failure_modes_for,
    get_base_chemistry,
    get_dna_profile,
    has_dna_data,
    normalize_chemistry,
)
from detailos.compatibility.matrix import CompatibilityMatrix, check_compatibility
from detailos.compatibility.report import CompatibilityWarning, DetailAnalysis, MaterialInfo

__all__ = [
    "COMMON_FAILURE_MODES",
    "DNA_MATERIAL_PROFILES",
    "MATERIAL_TYPE_TO_CHEMISTRY",
    "CompatibilityAnalyzer",
    "CompatibilityMatrix",
    "CompatibilityWarning",
    "DetailAnalysis",
    "MaterialInfo",
    "check_compatibility",
    "check_material_compatibility",
    "failure_modes_for",
    "get_base_chemistry",
    "get_dna_profile",
    "has_dna_data",
    "normalize_chemistry",
]
