"""Tests for chemistry tables, CompatibilityMatrix and CompatibilityAnalyzer."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from detailos.catalog.sample_details import SAMPLE_DETAILS, get_detail_by_id
from detailos.compatibility import (
    CompatibilityAnalyzer,
    CompatibilityMatrix,
    check_compatibility,
    check_material_compatibility,
    failure_modes_for,
    get_base_chemistry,
    get_dna_profile,
    has_dna_data,
    normalize_chemistry,
)
from detailos.models.detail import SemanticDetail
from detailos.models.dna import BASE_CHEMISTRIES


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _detail(*layers: tuple[str, str, str | None]) -> SemanticDetail:
    """Build a detail from ``(id, material, annotation)`` triples."""
    return SemanticDetail.from_document({
        "id": "CMP-1",
        "category": "roofing",
        "name": "Compatibility Stack",
        "layers": [
            {"id": layer_id, "material": material, "thickness": 1.0, "annotation": annotation}
            for layer_id, material, annotation in layers
        ],
    })


@pytest.fixture
def matrix() -> CompatibilityMatrix:
    return CompatibilityMatrix()


@pytest.fixture
def analyzer(matrix) -> CompatibilityAnalyzer:
    return CompatibilityAnalyzer(matrix)


# ---------------------------------------------------------------------------
# Chemistry tables
# ---------------------------------------------------------------------------

class TestChemistry:
    def test_normalize_known(self):
        assert normalize_chemistry("epdm") == "EPDM"
        assert normalize_chemistry(" Polyiso ") == "polyiso"

    def test_normalize_unknown_lowercased(self):
        assert normalize_chemistry("Kryptonite") == "kryptonite"

    def test_base_chemistry(self):
        assert get_base_chemistry("membrane-epdm") == "EPDM"
        assert get_base_chemistry("membrane-self-adhered-waterproofing") == "SBS"
        assert get_base_chemistry("substrate-concrete") is None
        assert get_base_chemistry(None) is None

    def test_dna_profile(self):
        profile = get_dna_profile("membrane-tpo")
        assert profile.base_chemistry == "TPO"
        assert profile.fire_rating == "A"
        assert get_dna_profile("substrate-concrete") is None

    def test_has_dna_data(self):
        assert has_dna_data("sealant")
        assert not has_dna_data("substrate-wood")
        assert not has_dna_data(None)

    def test_failure_modes_universal_first(self):
        ids = [m.id for m in failure_modes_for("pvc")]
        assert ids[:2] == ["puncture", "thermal-shock"]
        assert "plasticizer-migration" in ids


# ---------------------------------------------------------------------------
# Matrix
# ---------------------------------------------------------------------------

class TestCompatibilityMatrix:
    def test_self_compatible(self, matrix):
        for chemistry in BASE_CHEMISTRIES:
            assert matrix.check(chemistry, chemistry).status == "compatible"
        assert matrix.check("Kryptonite", "kryptonite").status == "compatible"

    def test_epdm_asphalt_incompatible(self):
        result = check_compatibility("EPDM", "asphalt")
        assert result.status == "incompatible"
        assert result.reason

    def test_symmetric(self, matrix):
        for a, b, _ in matrix.pairs():
            assert matrix.check(a, b) == matrix.check(b, a)

    def test_case_insensitive(self, matrix):
        assert matrix.check("epdm", "ASPHALT").status == "incompatible"

    def test_conditional_carries_conditions(self, matrix):
        result = matrix.check("TPO", "EPDM")
        assert result.status == "conditional"
        assert result.conditions == ["Install polyester fabric separation"]

    def test_first_catalog_entry_wins(self, matrix):
        result = matrix.check("PVC", "EPDM")
        assert result.reason == "Plasticizer migration from PVC attacks EPDM"

    def test_unknown_pair(self, matrix):
        result = matrix.check("silicone", "xps")
        assert result.status == "unknown"
        assert result.reason == "No compatibility data available for this material combination"

    def test_register_replaces(self, matrix):
        matrix.register("silicone", "xps", {"status": "compatible"})
        assert matrix.check("xps", "silicone").status == "compatible"
        matrix.register("xps", "silicone", {"status": "conditional", "conditions": ["Prime first"]})
        assert matrix.check("silicone", "xps").status == "conditional"

    def test_register_unknown_names_case_insensitive(self, matrix):
        matrix.register("Aluminum", "copper", {"status": "incompatible", "reason": "Galvanic corrosion"})
        assert matrix.check("aluminum", "Copper").status == "incompatible"
        assert matrix.check("COPPER", "ALUMINUM").reason == "Galvanic corrosion"

    def test_register_rejects_bad_status(self, matrix):
        with pytest.raises(ValidationError):
            matrix.register("silicone", "xps", {"status": "maybe"})

    def test_check_returns_copy(self, matrix):
        matrix.check("EPDM", "asphalt").reason = "changed"
        assert matrix.check("EPDM", "asphalt").reason != "changed"

    def test_from_catalog(self):
        matrix = CompatibilityMatrix.from_catalog({
            "EPDM": {"silicone": {"status": "compatible"}},
            "silicone": {"EPDM": {"status": "incompatible"}},
        })
        assert len(matrix) == 1
        assert matrix.check("silicone", "EPDM").status == "compatible"

    def test_unseeded(self):
        matrix = CompatibilityMatrix(seed=False)
        assert len(matrix) == 0
        assert matrix.check("EPDM", "asphalt").status == "unknown"


# ---------------------------------------------------------------------------
# Analyzer
# ---------------------------------------------------------------------------

class TestCompatibilityAnalyzer:
    def test_incompatible_adjacent_pair(self, analyzer):
        detail = _detail(
            ("deck", "concrete", None),
            ("insulation", "insulation-rigid", None),
            ("membrane-1", "custom", "EPDM MEMBRANE"),
            ("bitumen", "custom", "MODIFIED BITUMEN CAP"),
        )
        analysis = analyzer.analyze_detail(detail)
        assert analysis.pairs_evaluated == 3
        assert analysis.pairs_checked == 2
        assert len(analysis.warnings) == 1
        warning = analysis.warnings[0]
        assert (warning.layer1_id, warning.layer2_id) == ("membrane-1", "bitumen")
        assert (warning.layer1_chemistry, warning.layer2_chemistry) == ("EPDM", "SBS")
        assert analysis.severity == "critical"
        assert analysis.has_critical_issues
        assert analysis.summary_message == "1 incompatible material combination found"

    def test_non_adjacent_pairs_never_compared(self, analyzer):
        # EPDM and asphalt are incompatible but separated by polyiso
        detail = _detail(
            ("epdm-sheet", "custom", None),
            ("insulation", "insulation-rigid", None),
            ("glue", "adhesive", None),
        )
        analysis = analyzer.analyze_detail(detail)
        assert analysis.pairs_evaluated == 2
        assert analysis.warnings == []
        assert analysis.severity == "ok"

    def test_conditional_is_warning(self, analyzer):
        detail = _detail(("tpo-sheet", "custom", None), ("pvc-sheet", "custom", None))
        analysis = analyzer.analyze_detail(detail)
        assert analysis.conditional_count == 1
        assert analysis.severity == "warning"
        assert analysis.summary_message == "1 conditional compatibility warning"

    def test_pairs_evaluated_is_n_minus_one(self, analyzer):
        for detail in SAMPLE_DETAILS:
            analysis = analyzer.analyze_detail(detail)
            assert analysis.pairs_evaluated == len(detail.layers) - 1

    def test_empty_detail(self, analyzer):
        analysis = analyzer.analyze_detail(SemanticDetail(id="E", category="roofing"))
        assert analysis.pairs_evaluated == 0
        assert analysis.coverage == 0.0
        assert analysis.summary_message == "No layers to analyze"

    def test_coverage(self, analyzer):
        detail = _detail(("deck", "concrete", None), ("insulation", "insulation-rigid", None))
        analysis = analyzer.analyze_detail(detail)
        assert analysis.coverage == pytest.approx(0.5)
        assert analysis.material_info[0].chemistry is None
        assert analysis.material_info[1].chemistry == "polyiso"

    def test_material_info_failure_modes(self, analyzer):
        analysis = analyzer.analyze_detail(get_detail_by_id("RF-002"))
        membrane = next(i for i in analysis.material_info if i.layer_id == "roof-membrane")
        assert membrane.chemistry == "TPO"
        assert membrane.compatibility_notes
        assert any(m.id == "puncture" for m in membrane.failure_modes)

    def test_uses_registered_data(self, matrix, analyzer):
        detail = _detail(("insulation", "insulation-rigid", None), ("coat", "custom", "SILICONE COATING"))
        assert analyzer.analyze_detail(detail).warnings == []
        matrix.register("polyiso", "silicone", {"status": "incompatible", "reason": "test"})
        assert analyzer.analyze_detail(detail).incompatible_count == 1

    def test_check_material_compatibility(self):
        assert check_material_compatibility("membrane-epdm", "adhesive").status == "incompatible"
        result = check_material_compatibility("membrane-epdm", "substrate-concrete")
        assert result.status == "unknown"
        assert result.reason == "Insufficient DNA data for one or both materials"

    def test_reports(self, analyzer):
        detail = _detail(("tpo-sheet", "custom", "TPO"), ("pvc-sheet", "custom", "PVC"))
        analysis = analyzer.analyze_detail(detail)
        md = analysis.to_markdown()
        assert "# Compatibility Analysis: CMP-1" in md
        assert "CONDITIONAL" in md
        data = json.loads(analysis.to_json())
        assert data["severity"] == "warning"
        assert data["pairs_evaluated"] == 1
