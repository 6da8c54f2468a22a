"""Reference integrity rules — layer ids and the records that point at them."""

from __future__ import annotations

from collections import Counter

from detailos.models.detail import SemanticDetail
from detailos.validation.rules.base import ValidationIssue, ValidationRule


class NonEmptyLayers(ValidationRule):
    """A detail must contain at least one layer."""

    @property
    def name(self) -> str:
        return "references.non_empty_layers"

    @property
    def description(self) -> str:
        return "Detail must declare at least one layer."

    def check(self, detail: SemanticDetail) -> list[ValidationIssue]:
        if detail.layers:
            return []
        return [ValidationIssue(
            rule_name=self.name,
            severity="error",
            message="At least one layer required",
            suggestion="Add the layer stack, bottom to top.",
        )]


class UniqueLayerIds(ValidationRule):
    """Layer ids identify geometry and product bindings, so they must be unique."""

    @property
    def name(self) -> str:
        return "references.unique_layer_ids"

    @property
    def description(self) -> str:
        return "Every layer id must be unique within the detail."

    def check(self, detail: SemanticDetail) -> list[ValidationIssue]:
        counts = Counter(detail.layer_ids())
        return [
            ValidationIssue(
                rule_name=self.name,
                severity="error",
                message=f"Duplicate layer id: {layer_id} ({count} occurrences)",
                layer_id=layer_id,
                suggestion="Rename one of the layers.",
            )
            for layer_id, count in counts.items()
            if count > 1
        ]


class ConnectionLayers(ValidationRule):
    """Connection endpoints must name existing layers."""

    @property
    def name(self) -> str:
        return "references.connection_layers"

    @property
    def description(self) -> str:
        return "Connection from/to must reference existing layer ids."

    def check(self, detail: SemanticDetail) -> list[ValidationIssue]:
        issues: list[ValidationIssue] = []
        known = set(detail.layer_ids())
        for conn in detail.connections:
            for endpoint in (conn.from_layer, conn.to):
                if endpoint not in known:
                    issues.append(ValidationIssue(
                        rule_name=self.name,
                        severity="error",
                        message=f"Connection references unknown layer: {endpoint}",
                        layer_id=endpoint,
                        suggestion=f"Fix the {conn.type} connection or add layer '{endpoint}'.",
                    ))
        return issues


class ProductLayers(ValidationRule):
    """Product references must bind to existing layers."""

    @property
    def name(self) -> str:
        return "references.product_layers"

    @property
    def description(self) -> str:
        return "Product references must point at existing layer ids."

    def check(self, detail: SemanticDetail) -> list[ValidationIssue]:
        known = set(detail.layer_ids())
        return [
            ValidationIssue(
                rule_name=self.name,
                severity="error",
                message=f"Product references unknown layer: {product.layer}",
                layer_id=product.layer,
                suggestion=f"Bind {product.manufacturer} {product.product} to an existing layer.",
            )
            for product in detail.products
            if product.layer not in known
        ]


class ReferenceRules:
    """Collection of all reference integrity rules."""

    @staticmethod
    def all_rules() -> list[ValidationRule]:
        return [
            NonEmptyLayers(),
            UniqueLayerIds(),
            ConnectionLayers(),
            ProductLayers(),
        ]
