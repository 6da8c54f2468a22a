"""Tests for DetailValidator, its rule sets and the validation report."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from detailos.catalog.sample_details import SAMPLE_DETAILS, get_detail_by_id
from detailos.models.detail import SemanticDetail
from detailos.resolver.resolver import MaterialTypeResolver
from detailos.validation.report import DetailValidationReport
from detailos.validation.rules.base import ValidationIssue, ValidationRule
from detailos.validation.validator import DetailValidator


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _detail(**overrides) -> SemanticDetail:
    doc = {
        "id": "V-001",
        "category": "waterproofing",
        "name": "Validation Stack",
        "layers": [
            {"id": "deck", "material": "concrete", "thickness": 150},
            {"id": "membrane", "material": "membrane-sheet", "thickness": 1.5},
        ],
        "connections": [{"type": "seal", "from": "membrane", "to": "deck"}],
        "products": [{"manufacturer": "GAF", "product": "EverGuard TPO", "layer": "membrane"}],
    }
    doc.update(overrides)
    return SemanticDetail.from_document(doc)


class _ExplodingRule(ValidationRule):
    @property
    def name(self) -> str:
        return "test.exploding"

    @property
    def description(self) -> str:
        return "Always raises."

    def check(self, detail):
        raise RuntimeError("boom")


# ---------------------------------------------------------------------------
# Validator
# ---------------------------------------------------------------------------

class TestDetailValidator:
    def test_default_rules_loaded(self):
        names = [r.name for r in DetailValidator().rules]
        assert "references.connection_layers" in names
        assert "geometric.non_negative_thickness" in names
        assert "semantic.identity" in names

    def test_well_formed_detail_passes(self):
        report = DetailValidator().validate(_detail())
        assert report.valid
        assert report.status == "passed"
        assert report.errors == []

    def test_sample_details_are_valid(self):
        validator = DetailValidator()
        for detail in SAMPLE_DETAILS:
            assert validator.validate(detail).valid, detail.id

    def test_unknown_connection_endpoint(self):
        detail = _detail(connections=[{"type": "seal", "from": "membrane", "to": "ghost"}])
        report = DetailValidator().validate(detail)
        assert not report.valid
        assert report.status == "failed"
        assert any("ghost" in e for e in report.errors)

    def test_unknown_product_layer(self):
        detail = _detail(products=[{"manufacturer": "GAF", "product": "X", "layer": "ghost"}])
        report = DetailValidator().validate(detail)
        assert not report.valid
        assert report.issues_for_rule("references.product_layers")

    def test_empty_layers(self):
        detail = _detail(layers=[], connections=[], products=[])
        report = DetailValidator().validate(detail)
        assert not report.valid
        assert "At least one layer required" in report.errors

    def test_duplicate_layer_ids(self):
        detail = _detail(layers=[
            {"id": "deck", "material": "concrete", "thickness": 150},
            {"id": "deck", "material": "concrete", "thickness": 100},
            {"id": "membrane", "material": "membrane-sheet", "thickness": 1.5},
        ])
        report = DetailValidator().validate(detail)
        assert report.issues_for_rule("references.unique_layer_ids")

    def test_negative_thickness(self):
        detail = _detail(layers=[
            {"id": "deck", "material": "concrete", "thickness": -5},
            {"id": "membrane", "material": "membrane-sheet", "thickness": 1.5},
        ])
        report = DetailValidator().validate(detail)
        assert not report.valid
        assert report.issues_for_rule("geometric.non_negative_thickness")

    def test_zero_thickness_allowed(self):
        detail = _detail(layers=[
            {"id": "deck", "material": "concrete", "thickness": 0},
            {"id": "membrane", "material": "membrane-sheet", "thickness": 1.5},
        ])
        assert DetailValidator().validate(detail).valid

    def test_blank_name_is_warning(self):
        report = DetailValidator().validate(_detail(name=""))
        assert report.valid
        assert report.status == "warnings"
        assert report.warnings

    def test_unresolved_material_is_info(self):
        detail = _detail(layers=[
            {"id": "deck", "material": "concrete", "thickness": 150},
            {"id": "membrane", "material": "membrane-sheet", "thickness": 1.5},
            {"id": "mystery", "material": "unobtainium", "thickness": 3},
        ])
        report = DetailValidator().validate(detail)
        issues = report.issues_for_rule("semantic.unresolved_material")
        assert len(issues) == 1
        assert issues[0].severity == "info"
        assert report.status == "passed"

    def test_custom_layer_ids_resolve(self):
        detail = _detail(layers=[
            {"id": "deck", "material": "concrete", "thickness": 150},
            {"id": "custom-ply", "material": "unobtainium", "thickness": 3},
        ])
        assert DetailValidator().validate(detail).issues_for_rule("semantic.unresolved_material")

        validator = DetailValidator(MaterialTypeResolver(layer_ids={"custom-ply": "sealant"}))
        assert validator.validate(detail).issues_for_rule("semantic.unresolved_material") == []

    def test_rule_exception_does_not_abort(self):
        validator = DetailValidator()
        validator.add_rule(_ExplodingRule())
        report = validator.validate(_detail())
        assert report.valid

    def test_input_not_modified(self):
        detail = get_detail_by_id("WP-003")
        before = detail.model_dump()
        DetailValidator().validate(detail)
        assert detail.model_dump() == before


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

class TestDetailValidationReport:
    def _report(self) -> DetailValidationReport:
        return DetailValidationReport(
            detail_id="V-001",
            category="waterproofing",
            status="failed",
            issues=[
                ValidationIssue(
                    rule_name="references.connection_layers",
                    severity="error",
                    message="Connection references unknown layer: x",
                ),
                ValidationIssue(rule_name="semantic.identity", severity="warning", message="Detail V-001 has no name"),
            ],
            validated_at="2024-01-01T00:00:00+00:00",
        )

    def test_properties(self):
        report = self._report()
        assert not report.valid
        assert report.errors == ["Connection references unknown layer: x"]
        assert report.warnings == ["Detail V-001 has no name"]

    def test_to_markdown(self):
        md = self._report().to_markdown()
        assert "# Validation Report: V-001" in md
        assert "FAILED" in md

    def test_to_json(self):
        data = json.loads(self._report().to_json())
        assert data["detail_id"] == "V-001"
        assert len(data["issues"]) == 2

    def test_issue_rejects_unknown_severity(self):
        with pytest.raises(ValidationError):
            ValidationIssue(rule_name="semantic.identity", severity="fatal", message="x")

    def test_issue_to_dict(self):
        issue = ValidationIssue(rule_name="geometric.thickness", severity="error", message="m", layer_id="deck")
        assert issue.to_dict() == {
            "rule_name": "geometric.thickness",
            "severity": "error",
            "message": "m",
            "layer_id": "deck",
            "suggestion": "",
        }
