"""ComparisonEngine — compare manufacturers over a detail's layers.

Usage::

    from detailos.comparison import ComparisonEngine

    report = ComparisonEngine().get_difference_report(
        detail, "GCP Applied Technologies", "Carlisle CCW",
    )
    print(report.overall_equivalency_score)
"""

from __future__ import annotations

import logging

from detailos.comparison.report import DifferenceReport, DimensionChange, ProductChange
from detailos.config import LOW_CONFIDENCE_THRESHOLD
from detailos.equivalency.database import EquivalencyDatabase
from detailos.equivalency.switcher import ManufacturerSwitcher
from detailos.models.detail import SemanticDetail
from detailos.resolver.resolver import MaterialTypeResolver

logger = logging.getLogger(__name__)


class ComparisonEngine:
    """Orchestrates the resolver and the equivalency database.

    Parameters
    ----------
    database:
        Equivalency data.  Seeded when omitted.
    resolver:
        Material type resolver.  Built-in tables when omitted.
    """

    def __init__(
        self,
        database: EquivalencyDatabase | None = None,
        resolver: MaterialTypeResolver | None = None,
    ) -> None:
        self.database = database if database is not None else EquivalencyDatabase()
        self.resolver = resolver if resolver is not None else MaterialTypeResolver()

    def get_difference_report(
        self,
        detail: SemanticDetail,
        mfr_a: str,
        mfr_b: str,
    ) -> DifferenceReport:
        """Layer-by-layer product differences going from *mfr_a* to *mfr_b*.

        Layers whose material type cannot be resolved, or for which either
        manufacturer has no product, are skipped with a warning.  Each
        change scores the lower of the two confidences; the overall score
        is the mean over all changes, 0 when there are none.
        """
        changes: list[ProductChange] = []
        warnings: list[str] = []

        for layer in detail.layers:
            material_type = self.resolver.resolve_layer(layer)
            if material_type is None:
                warnings.append(f"Could not resolve material type for layer: {layer.id}")
                continue

            equivalency = self.database.get(material_type)
            if equivalency is None:
                warnings.append(f"No equivalency data for: {material_type}")
                continue

            entry_a = equivalency.entry_for(mfr_a)
            if entry_a is None:
                warnings.append(f"{mfr_a} has no product for {material_type}")
                continue
            entry_b = equivalency.entry_for(mfr_b)
            if entry_b is None:
                warnings.append(f"{mfr_b} has no product for {material_type}")
                continue

            change = ProductChange(
                layer_id=layer.id,
                material_type=material_type,
                from_manufacturer=mfr_a,
                from_product=entry_a.product,
                to_manufacturer=mfr_b,
                to_product=entry_b.product,
                confidence_score=min(entry_a.confidence_score, entry_b.confidence_score),
            )
            if (
                entry_a.thickness is not None
                and entry_b.thickness is not None
                and entry_a.thickness != entry_b.thickness
            ):
                change.dimension_changes.append(DimensionChange(
                    property="thickness",
                    from_value=entry_a.thickness,
                    to_value=entry_b.thickness,
                ))
            changes.append(change)

            if entry_b.confidence_score < LOW_CONFIDENCE_THRESHOLD:
                warnings.append(
                    f"{entry_b.product} has {entry_b.confidence_score * 100:.0f}% confidence"
                )

        score = sum(c.confidence_score for c in changes) / len(changes) if changes else 0.0
        logger.debug(
            "Compared %s: %s -> %s, %d changes, score %.2f",
            detail.id, mfr_a, mfr_b, len(changes), score,
        )
        return DifferenceReport(
            detail_id=detail.id,
            from_manufacturer=mfr_a,
            to_manufacturer=mfr_b,
            product_changes=changes,
            warnings=warnings,
            overall_equivalency_score=score,
        )

    def compare_many(
        self,
        detail: SemanticDetail,
        manufacturers: list[str],
    ) -> dict[str, SemanticDetail]:
        """One switched variant of *detail* per manufacturer, in order."""
        switcher = ManufacturerSwitcher(self.database, self.resolver)
        return {mfr: switcher.switch(detail, mfr) for mfr in manufacturers}
