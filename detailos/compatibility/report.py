"""DetailAnalysis — result of a compatibility scan, with Markdown and JSON output."""

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, Field

from detailos.models.dna import CompatibilityResult, FailureMode

AnalysisSeverity = Literal["critical", "warning", "ok"]


class CompatibilityWarning(BaseModel):
    """A problematic pair of adjacent layers."""

    layer1_id: str
    layer1_name: str
    layer1_chemistry: str
    layer2_id: str
    layer2_name: str
    layer2_chemistry: str
    result: CompatibilityResult


class MaterialInfo(BaseModel):
    """What is known about one layer's material."""

    layer_id: str
    layer_name: str
    material_type: str | None = None
    chemistry: str | None = None
    failure_modes: list[FailureMode] = Field(default_factory=list)
    compatibility_notes: list[str] = Field(default_factory=list)


class DetailAnalysis(BaseModel):
    """Compatibility analysis of one detail."""

    detail_id: str = ""
    total_layers: int = 0
    layers_with_chemistry: int = 0
    pairs_evaluated: int = 0
    """Adjacent pairs visited: always ``total_layers - 1`` (0 when empty)."""

    pairs_checked: int = 0
    """Adjacent pairs where both chemistries were known."""

    warnings: list[CompatibilityWarning] = Field(default_factory=list)
    material_info: list[MaterialInfo] = Field(default_factory=list)

    @property
    def coverage(self) -> float:
        """Share of layers with a known chemistry, 0..1."""
        if self.total_layers == 0:
            return 0.0
        return self.layers_with_chemistry / self.total_layers

    @property
    def incompatible_count(self) -> int:
        return sum(1 for w in self.warnings if w.result.status == "incompatible")

    @property
    def conditional_count(self) -> int:
        return sum(1 for w in self.warnings if w.result.status == "conditional")

    @property
    def has_critical_issues(self) -> bool:
        return self.incompatible_count > 0

    @property
    def severity(self) -> AnalysisSeverity:
        if self.incompatible_count:
            return "critical"
        if self.conditional_count:
            return "warning"
        return "ok"

    @property
    def summary_message(self) -> str:
        if self.total_layers == 0:
            return "No layers to analyze"
        if not self.warnings:
            return f"All {self.layers_with_chemistry} analyzed layers are compatible"
        if self.has_critical_issues:
            n = self.incompatible_count
            return f"{n} incompatible material combination{'s' if n > 1 else ''} found"
        n = self.conditional_count
        return f"{n} conditional compatibility warning{'s' if n > 1 else ''}"

    def to_dict(self) -> dict[str, Any]:
        data = self.model_dump()
        data.update(
            coverage=self.coverage,
            severity=self.severity,
            incompatible_count=self.incompatible_count,
            conditional_count=self.conditional_count,
            summary_message=self.summary_message,
        )
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, default=str)

    def to_markdown(self) -> str:
        lines: list[str] = []
        lines.append(f"# Compatibility Analysis: {self.detail_id or 'Unknown'}")
        lines.append("")
        lines.append(f"**Severity:** {self.severity.upper()}")
        lines.append(f"**Coverage:** {self.coverage:.0%} ({self.layers_with_chemistry}/{self.total_layers} layers)")
        lines.append(f"**Summary:** {self.summary_message}")
        lines.append("")

        if self.warnings:
            lines.append("## Warnings")
            lines.append("")
            lines.append("| Status | Layer | Layer | Reason |")
            lines.append("|--------|-------|-------|--------|")
            for w in self.warnings:
                reason = (w.result.reason or "").replace("|", "\\|")
                lines.append(
                    f"| {w.result.status.upper()} | {w.layer1_name} ({w.layer1_chemistry}) "
                    f"| {w.layer2_name} ({w.layer2_chemistry}) | {reason} |"
                )
            lines.append("")

        return "\n".join(lines)
