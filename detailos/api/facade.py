"""DetailOS — the single entry point for detail operations.

Usage::

    from detailos import DetailOS
    from detailos.catalog import get_detail_by_id

    dos = DetailOS()
    detail = get_detail_by_id("WP-003")
    dos.validate(detail)
    dos.reconstruct(detail)
    dos.switch_manufacturer(detail, "Henry Company")
    dos.difference_report(detail, "Carlisle CCW", "Henry Company")
    dos.analyze(detail)
    dos.import_materials("catalog.zip")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from detailos.catalog.importer import (
    DetailLoadResult,
    ImportResult,
    export_materials,
    import_materials,
    load_details,
)
from detailos.catalog.store import MaterialStore
from detailos.comparison.engine import ComparisonEngine
from detailos.comparison.report import DifferenceReport
from detailos.compatibility.analyzer import CompatibilityAnalyzer
from detailos.compatibility.matrix import CompatibilityMatrix
from detailos.compatibility.report import DetailAnalysis
from detailos.equivalency.database import EquivalencyDatabase
from detailos.equivalency.switcher import ManufacturerSwitcher
from detailos.generation.appearance import AppearanceLibrary
from detailos.generation.reconstructor import GeometryReconstructor
from detailos.generation.scene import Reconstruction
from detailos.models.detail import SemanticDetail, Viewport
from detailos.models.dna import CompatibilityResult, MaterialDNA
from detailos.models.equivalency import EquivalencyEntry, ProductEquivalency
from detailos.resolver.resolver import MaterialTypeResolver
from detailos.validation.report import DetailValidationReport
from detailos.validation.validator import DetailValidator

logger = logging.getLogger(__name__)


class DetailOS:
    """The public interface for semantic details.

    Owns one resolver, one equivalency database, one compatibility matrix,
    one appearance cache and one material store.  The engines share them,
    so data registered here is seen by every operation.

    Parameters
    ----------
    seed:
        If *True* (default), the equivalency database and compatibility
        matrix start with the built-in data.
    database, matrix, resolver:
        Pre-built components to use instead of fresh ones.
    """

    def __init__(
        self,
        *,
        seed: bool = True,
        database: EquivalencyDatabase | None = None,
        matrix: CompatibilityMatrix | None = None,
        resolver: MaterialTypeResolver | None = None,
    ) -> None:
        self.resolver = resolver if resolver is not None else MaterialTypeResolver()
        self.database = database if database is not None else EquivalencyDatabase(seed=seed)
        self.matrix = matrix if matrix is not None else CompatibilityMatrix(seed=seed)
        self.appearances = AppearanceLibrary()
        self.materials = MaterialStore()

        self.validator = DetailValidator(self.resolver)
        self.reconstructor = GeometryReconstructor(self.appearances)
        self.switcher = ManufacturerSwitcher(self.database, self.resolver)
        self.analyzer = CompatibilityAnalyzer(self.matrix, self.resolver)
        self.comparison = ComparisonEngine(self.database, self.resolver)

    # -- Details ------------------------------------------------------------

    def validate(self, detail: SemanticDetail) -> DetailValidationReport:
        return self.validator.validate(detail)

    def resolve(self, detail: SemanticDetail) -> dict[str, str | None]:
        """Material type per layer id."""
        return self.resolver.enrich_detail(detail)

    def reconstruct(
        self,
        detail: SemanticDetail,
        viewport: Viewport | None = None,
    ) -> Reconstruction:
        return self.reconstructor.reconstruct(detail, viewport)

    def load_details(self, source: str | Path | dict[str, Any] | list[Any]) -> DetailLoadResult:
        return load_details(source)

    # -- Equivalency --------------------------------------------------------

    def switch_manufacturer(self, detail: SemanticDetail, target: str) -> SemanticDetail:
        return self.switcher.switch(detail, target)

    def find_equivalents(self, manufacturer: str, product: str) -> list[EquivalencyEntry]:
        return self.database.find_equivalents(manufacturer, product)

    def manufacturers_for(self, material_type: str) -> list[str]:
        return self.database.manufacturers_for(material_type)

    def register_equivalency(
        self,
        material_type: str,
        data: ProductEquivalency | dict[str, Any],
    ) -> ProductEquivalency:
        entry = self.database.register(material_type, data)
        logger.info("Registered equivalency for %s (%d products)", material_type, len(entry.products))
        return entry

    def difference_report(self, detail: SemanticDetail, mfr_a: str, mfr_b: str) -> DifferenceReport:
        return self.comparison.get_difference_report(detail, mfr_a, mfr_b)

    # -- Compatibility ------------------------------------------------------

    def register_compatibility(
        self,
        a: str,
        b: str,
        result: CompatibilityResult | dict[str, Any],
    ) -> CompatibilityResult:
        stored = self.matrix.register(a, b, result)
        logger.info("Registered compatibility %s/%s: %s", a, b, stored.status)
        return stored

    def check_compatibility(self, a: str, b: str) -> CompatibilityResult:
        """Compatibility of two chemistries."""
        return self.matrix.check(a, b)

    def analyze(self, detail: SemanticDetail) -> DetailAnalysis:
        return self.analyzer.analyze_detail(detail)

    # -- Material catalog ---------------------------------------------------

    def import_materials(self, path: str | Path) -> ImportResult:
        """Import a catalog file and add its materials to the store."""
        result = import_materials(path)
        if result.success:
            self.materials.add_dna(result.materials)
        return result

    def export_materials(self, materials: list[MaterialDNA] | None = None) -> str:
        """Export *materials*, or everything in the store."""
        if materials is None:
            materials = [m.dna for m in self.materials.all()]
        return export_materials(materials)
