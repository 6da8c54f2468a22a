"""DifferenceReport — product-level comparison of two manufacturers."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, Field


class DimensionChange(BaseModel):
    property: str
    from_value: float
    to_value: float
    unit: str = "mm"


class ProductChange(BaseModel):
    """How one layer changes between two manufacturers."""

    layer_id: str
    material_type: str
    from_manufacturer: str
    from_product: str
    to_manufacturer: str
    to_product: str
    confidence_score: float = Field(ge=0.0, le=1.0)
    dimension_changes: list[DimensionChange] = Field(default_factory=list)


class DifferenceReport(BaseModel):
    """Result of :meth:`ComparisonEngine.get_difference_report`."""

    detail_id: str = ""
    from_manufacturer: str = ""
    to_manufacturer: str = ""
    product_changes: list[ProductChange] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    overall_equivalency_score: float = Field(default=0.0, ge=0.0, le=1.0)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, default=str)

    def to_markdown(self) -> str:
        lines: list[str] = []
        lines.append(
            f"# Difference Report: {self.from_manufacturer} vs {self.to_manufacturer}"
        )
        lines.append("")
        lines.append(f"**Detail:** {self.detail_id or 'Unknown'}")
        lines.append(f"**Overall equivalency:** {self.overall_equivalency_score:.0%}")
        lines.append("")

        if self.product_changes:
            lines.append("| Layer | From | To | Confidence | Changes |")
            lines.append("|-------|------|----|------------|---------|")
            for change in self.product_changes:
                dims = ", ".join(
                    f"{d.property} {d.from_value:g} -> {d.to_value:g} {d.unit}"
                    for d in change.dimension_changes
                ) or "-"
                lines.append(
                    f"| {change.layer_id} | {change.from_product} | {change.to_product} "
                    f"| {change.confidence_score:.0%} | {dims} |"
                )
            lines.append("")

        if self.warnings:
            lines.append("## Warnings")
            lines.append("")
            for warning in self.warnings:
                lines.append(f"- {warning}")
            lines.append("")

        return "\n".join(lines)
