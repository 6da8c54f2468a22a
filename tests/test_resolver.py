"""Tests for MaterialTypeResolver."""

from __future__ import annotations

import pytest

from detailos.catalog.sample_details import SAMPLE_DETAILS, get_detail_by_id
from detailos.models.detail import SemanticDetail
from detailos.resolver import LAYER_ID_TO_MATERIAL_TYPE, MaterialTypeResolver, resolve_material_type


@pytest.fixture
def resolver() -> MaterialTypeResolver:
    return MaterialTypeResolver()


# ---------------------------------------------------------------------------
# Resolution order
# ---------------------------------------------------------------------------

class TestResolve:
    def test_layer_id_wins_over_annotation(self, resolver):
        assert resolver.resolve("roof-membrane", "membrane-sheet", "EPDM MEMBRANE") == "membrane-tpo"

    def test_module_function_matches(self):
        assert resolve_material_type("roof-membrane", "membrane-sheet", "EPDM MEMBRANE") == "membrane-tpo"

    def test_layer_id_case_insensitive(self, resolver):
        assert resolver.resolve("WALL-MEMBRANE", "unknown") == "membrane-self-adhered-waterproofing"

    def test_material_tag(self, resolver):
        assert resolver.resolve("layer-7", "insulation-rigid") == "insulation-polyiso"

    def test_keyword_in_layer_id(self, resolver):
        assert resolver.resolve("epdm-sheet", "custom") == "membrane-epdm"

    def test_keyword_in_annotation(self, resolver):
        assert resolver.resolve("layer-7", "custom", "60 MIL PVC MEMBRANE") == "membrane-pvc"

    def test_keyword_order_first_wins(self, resolver):
        # "air barrier" precedes "vapor" in the keyword table
        assert resolver.resolve("x", "custom", "AIR BARRIER / VAPOR RETARDER") == "membrane-air-barrier"

    def test_unresolved(self, resolver):
        assert resolver.resolve("layer-7", "custom", "MYSTERY") is None
        assert resolver.resolve("layer-7", "custom") is None

    def test_custom_tables_do_not_leak(self):
        custom = MaterialTypeResolver(layer_ids={"Green-Roof": "drainage-composite"})
        assert custom.resolve("green-roof", "custom") == "drainage-composite"
        assert "green-roof" not in LAYER_ID_TO_MATERIAL_TYPE
        assert MaterialTypeResolver().resolve("green-roof", "custom") is None


# ---------------------------------------------------------------------------
# Detail helpers
# ---------------------------------------------------------------------------

class TestDetailHelpers:
    def test_enrich_detail_keeps_order(self, resolver):
        detail = get_detail_by_id("RF-002")
        enriched = resolver.enrich_detail(detail)
        assert list(enriched) == detail.layer_ids()
        assert enriched["insulation"] == "insulation-polyiso"

    def test_sample_details_fully_resolved(self, resolver):
        for detail in SAMPLE_DETAILS:
            assert resolver.coverage(detail)["percentage"] == pytest.approx(100.0), detail.id

    def test_coverage_partial(self, resolver):
        detail = SemanticDetail.from_document({
            "id": "C-1",
            "category": "waterproofing",
            "layers": [
                {"id": "deck", "material": "concrete", "thickness": 150},
                {"id": "mystery", "material": "custom", "thickness": 5},
            ],
        })
        coverage = resolver.coverage(detail)
        assert coverage["total"] == 2
        assert coverage["mapped"] == 1
        assert coverage["percentage"] == pytest.approx(50.0)
        assert coverage["unmapped_layers"] == ["mystery"]
        assert resolver.has_adequate_coverage(detail)

    def test_coverage_empty(self, resolver):
        detail = SemanticDetail(id="E", category="roofing")
        assert resolver.coverage(detail)["percentage"] == 0.0
        assert not resolver.has_adequate_coverage(detail)

    def test_material_types_unique(self, resolver):
        types = resolver.material_types(get_detail_by_id("FD-001"))
        assert types.count("substrate-concrete") == 1
        assert types[0] == "substrate-concrete"
