"""CompatibilityAnalyzer — scan adjacent layers for chemical conflicts.

Usage::

    from detailos.compatibility import CompatibilityAnalyzer

    analysis = CompatibilityAnalyzer().analyze_detail(detail)
    print(analysis.summary_message)
"""

from __future__ import annotations

import logging

from detailos.compatibility.chemistry import (
    failure_modes_for,
    get_base_chemistry,
    get_dna_profile,
)
from detailos.compatibility.matrix import CompatibilityMatrix
from detailos.compatibility.report import CompatibilityWarning, DetailAnalysis, MaterialInfo
from detailos.models.detail import SemanticDetail
from detailos.models.dna import CompatibilityResult
from detailos.resolver.resolver import MaterialTypeResolver

logger = logging.getLogger(__name__)


class CompatibilityAnalyzer:
    """Check every adjacent layer pair of a detail.

    Parameters
    ----------
    matrix:
        Compatibility table.  Seeded when omitted.
    resolver:
        Material type resolver.  Built-in tables when omitted.
    """

    def __init__(
        self,
        matrix: CompatibilityMatrix | None = None,
        resolver: MaterialTypeResolver | None = None,
    ) -> None:
        self.matrix = matrix if matrix is not None else CompatibilityMatrix()
        self.resolver = resolver if resolver is not None else MaterialTypeResolver()

    def analyze_detail(self, detail: SemanticDetail) -> DetailAnalysis:
        """Compare layer *i* with layer *i+1* for every *i*.

        Only adjacent pairs are compared, and only when both chemistries
        are known.  Incompatible and conditional results become warnings.
        """
        layers = detail.layers
        material_types = [self.resolver.resolve_layer(layer) for layer in layers]
        chemistries = [get_base_chemistry(t) for t in material_types]

        info: list[MaterialInfo] = []
        for layer, material_type, chemistry in zip(layers, material_types, chemistries):
            profile = get_dna_profile(material_type)
            info.append(MaterialInfo(
                layer_id=layer.id,
                layer_name=layer.annotation or layer.id,
                material_type=material_type,
                chemistry=chemistry,
                failure_modes=failure_modes_for(chemistry) if chemistry else [],
                compatibility_notes=list(profile.compatibility_notes) if profile else [],
            ))

        warnings: list[CompatibilityWarning] = []
        pairs_evaluated = 0
        pairs_checked = 0
        for i in range(len(layers) - 1):
            pairs_evaluated += 1
            chem_a, chem_b = chemistries[i], chemistries[i + 1]
            if not chem_a or not chem_b:
                continue
            pairs_checked += 1
            result = self.matrix.check(chem_a, chem_b)
            if result.status in ("incompatible", "conditional"):
                warnings.append(CompatibilityWarning(
                    layer1_id=layers[i].id,
                    layer1_name=info[i].layer_name,
                    layer1_chemistry=chem_a,
                    layer2_id=layers[i + 1].id,
                    layer2_name=info[i + 1].layer_name,
                    layer2_chemistry=chem_b,
                    result=result,
                ))

        analysis = DetailAnalysis(
            detail_id=detail.id,
            total_layers=len(layers),
            layers_with_chemistry=sum(1 for c in chemistries if c),
            pairs_evaluated=pairs_evaluated,
            pairs_checked=pairs_checked,
            warnings=warnings,
            material_info=info,
        )
        logger.debug("Analyzed %s: %s", detail.id, analysis.summary_message)
        return analysis

    def check_material_compatibility(self, type_a: str, type_b: str) -> CompatibilityResult:
        """Compatibility of two material types via their chemistries."""
        chem_a = get_base_chemistry(type_a)
        chem_b = get_base_chemistry(type_b)
        if not chem_a or not chem_b:
            return CompatibilityResult(
                status="unknown",
                reason="Insufficient DNA data for one or both materials",
            )
        return self.matrix.check(chem_a, chem_b)


def check_material_compatibility(type_a: str, type_b: str) -> CompatibilityResult:
    """Module-level form using the seeded matrix."""
    return CompatibilityAnalyzer().check_material_compatibility(type_a, type_b)
