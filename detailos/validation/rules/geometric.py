"""Geometric validation rules."""

from __future__ import annotations

from detailos.models.detail import SemanticDetail
from detailos.validation.rules.base import ValidationIssue, ValidationRule


class NonNegativeThickness(ValidationRule):
    """Layer thickness must be >= 0."""

    @property
    def name(self) -> str:
        return "geometric.non_negative_thickness"

    @property
    def description(self) -> str:
        return "Layer thickness (mm) must not be negative."

    def check(self, detail: SemanticDetail) -> list[ValidationIssue]:
        return [
            ValidationIssue(
                rule_name=self.name,
                severity="error",
                message=f"Layer {layer.id} has negative thickness ({layer.thickness} mm)",
                layer_id=layer.id,
                suggestion="Use 0 for membranes too thin to model.",
            )
            for layer in detail.layers
            if layer.thickness < 0
        ]


class GeometricRules:
    """Collection of all geometric validation rules."""

    @staticmethod
    def all_rules() -> list[ValidationRule]:
        return [NonNegativeThickness()]
