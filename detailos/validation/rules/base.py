"""Abstract ValidationRule interface."""

from __future__ import annotations

import abc
from typing import Any, Literal

from pydantic import BaseModel

from detailos.models.detail import SemanticDetail


class ValidationIssue(BaseModel):
    """A single validation issue found by a rule."""

    rule_name: str
    severity: Literal["error", "warning", "info"]
    message: str
    layer_id: str = ""
    suggestion: str = ""

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()


class ValidationRule(abc.ABC):
    """Base class for all detail validation rules."""

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Short rule identifier."""

    @property
    @abc.abstractmethod
    def description(self) -> str:
        """Human-readable description."""

    @abc.abstractmethod
    def check(self, detail: SemanticDetail) -> list[ValidationIssue]:
        """Run this rule against a detail.

        Returns list of issues (empty if passing).
        """
