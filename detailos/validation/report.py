"""DetailValidationReport and VALIDATION.md generation."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

from detailos.validation.rules.base import ValidationIssue


class DetailValidationReport:
    """Complete validation report for a semantic detail."""

    def __init__(
        self,
        detail_id: str = "",
        category: str = "",
        status: str = "passed",
        issues: list[ValidationIssue] | None = None,
        validated_at: datetime | str | None = None,
    ) -> None:
        self.detail_id = detail_id
        self.category = category
        self.status = status
        self.issues = issues or []
        if validated_at is None:
            self.validated_at = datetime.now(timezone.utc)
        elif isinstance(validated_at, str):
            self.validated_at = datetime.fromisoformat(validated_at)
        else:
            self.validated_at = validated_at

    @property
    def valid(self) -> bool:
        """True when no issue has severity ``error``."""
        return not any(i.severity == "error" for i in self.issues)

    @property
    def errors(self) -> list[str]:
        return [i.message for i in self.issues if i.severity == "error"]

    @property
    def warnings(self) -> list[str]:
        return [i.message for i in self.issues if i.severity == "warning"]

    def issues_for_rule(self, rule_name: str) -> list[ValidationIssue]:
        return [i for i in self.issues if i.rule_name == rule_name]

    def to_markdown(self) -> str:
        """Generate VALIDATION.md content."""
        lines: list[str] = []

        lines.append(f"# Validation Report: {self.detail_id or 'Unknown'}")
        lines.append("")
        lines.append(f"**Category:** `{self.category}`")
        lines.append(f"**Status:** {self.status.upper()}")
        lines.append(f"**Validated:** {self.validated_at.strftime('%Y-%m-%d %H:%M UTC')}")
        lines.append("")

        errors = sum(1 for i in self.issues if i.severity == "error")
        warnings = sum(1 for i in self.issues if i.severity == "warning")
        infos = sum(1 for i in self.issues if i.severity == "info")
        lines.append(f"**Summary:** {errors} errors, {warnings} warnings, {infos} info")
        lines.append("")

        if self.issues:
            lines.append("## Issues")
            lines.append("")
            lines.append("| Severity | Rule | Layer | Message | Suggestion |")
            lines.append("|----------|------|-------|---------|------------|")
            for issue in self.issues:
                msg = issue.message.replace("|", "\\|")
                sug = issue.suggestion.replace("|", "\\|")
                lines.append(
                    f"| {issue.severity.upper()} | {issue.rule_name} "
                    f"| {issue.layer_id or '-'} | {msg} | {sug} |"
                )
            lines.append("")
        else:
            lines.append("No issues found. Detail passes all validation checks.")
            lines.append("")

        return "\n".join(lines)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, default=str)

    def to_dict(self) -> dict[str, Any]:
        return {
            "detail_id": self.detail_id,
            "category": self.category,
            "status": self.status,
            "valid": self.valid,
            "validated_at": self.validated_at.isoformat(),
            "issues": [i.to_dict() for i in self.issues],
        }
