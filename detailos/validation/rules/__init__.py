"""Validation rules — references, geometric, semantic."""

from detailos.validation.rules.base import ValidationIssue, ValidationRule
from detailos.validation.rules.geometric import GeometricRules
from detailos.validation.rules.references import ReferenceRules
from detailos.validation.rules.semantic import SemanticRules

__all__ = [
    "ValidationIssue",
    "ValidationRule",
    "GeometricRules",
    "ReferenceRules",
    "SemanticRules",
]
