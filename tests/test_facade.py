"""Tests for the DetailOS facade."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

import detailos
from detailos import DetailOS
from detailos.catalog.sample_details import get_detail_by_id
from detailos.models.detail import SemanticDetail
from detailos.resolver.resolver import MaterialTypeResolver


@pytest.fixture
def dos() -> DetailOS:
    return DetailOS()


class TestDetailOS:
    def test_package_exports(self):
        assert detailos.__version__
        assert detailos.DetailOS is DetailOS

    def test_components_share_state(self, dos):
        assert dos.switcher.database is dos.database
        assert dos.comparison.database is dos.database
        assert dos.analyzer.matrix is dos.matrix
        assert dos.analyzer.resolver is dos.resolver
        assert dos.reconstructor.appearances is dos.appearances
        assert dos.validator.resolver is dos.resolver

    def test_instances_are_independent(self):
        first, second = DetailOS(), DetailOS()
        first.register_compatibility("silicone", "xps", {"status": "incompatible", "reason": "test"})
        assert first.check_compatibility("xps", "silicone").status == "incompatible"
        assert second.check_compatibility("xps", "silicone").status == "unknown"

    def test_unseeded(self):
        dos = DetailOS(seed=False)
        assert dos.manufacturers_for("sealant") == []
        assert dos.check_compatibility("EPDM", "asphalt").status == "unknown"

    def test_validate_and_resolve(self, dos):
        detail = get_detail_by_id("RF-002")
        assert dos.validate(detail).valid
        assert dos.resolve(detail)["roof-membrane"] == "membrane-tpo"

    def test_validation_uses_facade_resolver(self):
        dos = DetailOS(resolver=MaterialTypeResolver(layer_ids={"custom-ply": "sealant"}))
        detail = SemanticDetail.from_document({
            "id": "V-CUSTOM",
            "category": "waterproofing",
            "name": "Custom Ply",
            "layers": [{"id": "custom-ply", "material": "unobtainium", "thickness": 3}],
        })
        assert DetailOS().validate(detail).issues_for_rule("semantic.unresolved_material")
        assert dos.validate(detail).issues_for_rule("semantic.unresolved_material") == []

    def test_reconstruct(self, dos):
        scene = dos.reconstruct(get_detail_by_id("FD-001"))
        assert scene.builder == "foundation"
        assert len(dos.appearances) > 0

    def test_equivalency_operations(self, dos):
        detail = get_detail_by_id("WP-003")
        switched = dos.switch_manufacturer(detail, "Tremco")
        assert switched.product_for_layer("membrane").product == "TREMproof 250GC"
        equivalents = dos.find_equivalents("Sika", "Sikaflex-1a")
        assert [e.manufacturer for e in equivalents] == ["Tremco", "Pecora"]

    def test_usage_example_names_are_seeded(self, dos):
        detail = get_detail_by_id("WP-003")
        switched = dos.switch_manufacturer(detail, "Henry Company")
        assert switched.product_for_layer("membrane").product == "Blueskin WP 200"
        report = dos.difference_report(detail, "Carlisle CCW", "Henry Company")
        assert [c.layer_id for c in report.product_changes] == ["membrane"]

    def test_registered_equivalency_reaches_switcher(self, dos):
        dos.register_equivalency("primer", {
            "baseType": "Primer",
            "products": [{"manufacturer": "Tremco", "product": "Primer 171", "confidenceScore": 1.0}],
        })
        switched = dos.switch_manufacturer(get_detail_by_id("WP-003"), "Tremco")
        assert switched.product_for_layer("primer").product == "Primer 171"

    def test_analyze_and_difference_report(self, dos):
        detail = get_detail_by_id("WP-003")
        analysis = dos.analyze(detail)
        assert analysis.pairs_evaluated == len(detail.layers) - 1
        report = dos.difference_report(detail, "GCP Applied Technologies", "Carlisle CCW")
        assert report.product_changes
        assert 0.0 <= report.overall_equivalency_score <= 1.0

    def test_import_fills_store(self, dos, tmp_path: Path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"materials": [
            {"id": "tpo", "baseChemistry": "TPO", "manufacturer": "GAF"},
            {"id": "epdm", "baseChemistry": "EPDM", "manufacturer": "Carlisle SynTec"},
        ]}), encoding="utf-8")
        result = dos.import_materials(path)
        assert result.success
        assert len(dos.materials) == 2

        exported = json.loads(dos.export_materials())
        assert [m["id"] for m in exported["materials"]] == ["tpo", "epdm"]

    def test_failed_import_leaves_store(self, dos, tmp_path: Path):
        path = tmp_path / "catalog.txt"
        path.write_text("nothing", encoding="utf-8")
        assert not dos.import_materials(path).success
        assert len(dos.materials) == 0

    def test_load_details(self, dos):
        result = dos.load_details([get_detail_by_id("PN-001").to_document()])
        assert [d.id for d in result.details] == ["PN-001"]
