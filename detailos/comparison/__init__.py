"""Comparison Orchestrator — manufacturer difference reports and variants."""

from detailos.comparison.engine import ComparisonEngine
from detailos.comparison.report import DifferenceReport, DimensionChange, ProductChange

__all__ = ["ComparisonEngine", "DifferenceReport", "DimensionChange", "ProductChange"]
