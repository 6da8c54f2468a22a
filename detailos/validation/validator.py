"""DetailValidator — main entry point for the validation suite.

Usage::

    from detailos.validation import DetailValidator

    report = DetailValidator().validate(detail)
    if not report.valid:
        print(report.to_markdown())
"""

from __future__ import annotations

import logging

from detailos.models.detail import SemanticDetail
from detailos.resolver.resolver import MaterialTypeResolver
from detailos.validation.report import DetailValidationReport
from detailos.validation.rules.base import ValidationIssue, ValidationRule
from detailos.validation.rules.geometric import GeometricRules
from detailos.validation.rules.references import ReferenceRules
from detailos.validation.rules.semantic import SemanticRules

logger = logging.getLogger(__name__)


class DetailValidator:
    """Validation engine with a pluggable rule registry.

    Loads default rules on init.  Additional rules can be registered
    via :meth:`add_rule`.

    Parameters
    ----------
    resolver:
        Material type resolver used by the semantic rules.  Built-in
        tables when omitted.
    """

    def __init__(self, resolver: MaterialTypeResolver | None = None) -> None:
        self.resolver = resolver if resolver is not None else MaterialTypeResolver()
        self.rules: list[ValidationRule] = []
        self._load_default_rules()

    def _load_default_rules(self) -> None:
        self.rules.extend(ReferenceRules.all_rules())
        self.rules.extend(GeometricRules.all_rules())
        self.rules.extend(SemanticRules.all_rules(self.resolver))

    def add_rule(self, rule: ValidationRule) -> None:
        """Register an additional validation rule."""
        self.rules.append(rule)

    def validate(self, detail: SemanticDetail) -> DetailValidationReport:
        """Run every registered rule against *detail*.

        Parameters
        ----------
        detail:
            The detail to check.  It is not modified.

        Returns
        -------
        DetailValidationReport
            ``status`` is ``failed`` when any error was found, ``warnings``
            when only warnings were found, ``passed`` otherwise.
        """
        all_issues: list[ValidationIssue] = []
        for rule in self.rules:
            try:
                all_issues.extend(rule.check(detail))
            except Exception:
                logger.debug("Rule %s failed", rule.name, exc_info=True)

        if any(i.severity == "error" for i in all_issues):
            status = "failed"
        elif any(i.severity == "warning" for i in all_issues):
            status = "warnings"
        else:
            status = "passed"

        logger.debug("Validated %s: %s (%d issues)", detail.id, status, len(all_issues))
        return DetailValidationReport(
            detail_id=detail.id,
            category=detail.category,
            status=status,
            issues=all_issues,
        )
