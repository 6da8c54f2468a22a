"""Semantic validation rules — identity fields and material resolution."""

from __future__ import annotations

from detailos.models.detail import SemanticDetail
from detailos.resolver.resolver import MaterialTypeResolver
from detailos.validation.rules.base import ValidationIssue, ValidationRule


class Identity(ValidationRule):
    """A detail should carry a non-blank id and name."""

    @property
    def name(self) -> str:
        return "semantic.identity"

    @property
    def description(self) -> str:
        return "Detail id and name should not be blank."

    def check(self, detail: SemanticDetail) -> list[ValidationIssue]:
        issues: list[ValidationIssue] = []
        if not detail.id.strip():
            issues.append(ValidationIssue(
                rule_name=self.name,
                severity="warning",
                message="Detail id is blank",
                suggestion="Use the drawing reference, e.g. 'WP-003'.",
            ))
        if not detail.name.strip():
            issues.append(ValidationIssue(
                rule_name=self.name,
                severity="warning",
                message=f"Detail {detail.id or '<blank>'} has no name",
                suggestion="Add a short descriptive name.",
            ))
        return issues


class UnresolvedMaterial(ValidationRule):
    """Layers whose material type is unknown drop out of product and
    compatibility analysis."""

    def __init__(self, resolver: MaterialTypeResolver | None = None) -> None:
        self.resolver = resolver if resolver is not None else MaterialTypeResolver()

    @property
    def name(self) -> str:
        return "semantic.unresolved_material"

    @property
    def description(self) -> str:
        return "Flag layers that cannot be mapped to a material type."

    def check(self, detail: SemanticDetail) -> list[ValidationIssue]:
        return [
            ValidationIssue(
                rule_name=self.name,
                severity="info",
                message=f"Layer {layer.id} ({layer.material}) has no known material type",
                layer_id=layer.id,
                suggestion="Use a standard layer id or material tag, or add an annotation.",
            )
            for layer in detail.layers
            if self.resolver.resolve_layer(layer) is None
        ]


class SemanticRules:
    """Collection of all semantic validation rules."""

    @staticmethod
    def all_rules(resolver: MaterialTypeResolver | None = None) -> list[ValidationRule]:
        return [Identity(), UnresolvedMaterial(resolver)]
