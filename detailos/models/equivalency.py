"""Equivalency catalog entries."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class EquivalencyEntry(BaseModel):
    """One manufacturer's offering for a canonical material type."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    manufacturer: str
    product: str
    thickness: float | None = None
    """Declared thickness in mm, if the catalog fixes one."""

    confidence_score: float = Field(ge=0.0, le=1.0)
    """Similarity to the reference product; the reference scores 1.0."""


class ProductEquivalency(BaseModel):
    """All known offerings for one material type."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    base_type: str
    products: list[EquivalencyEntry] = Field(default_factory=list)

    def entry_for(self, manufacturer: str) -> EquivalencyEntry | None:
        for entry in self.products:
            if entry.manufacturer == manufacturer:
                return entry
        return None

    def manufacturers(self) -> list[str]:
        seen: list[str] = []
        for entry in self.products:
            if entry.manufacturer not in seen:
                seen.append(entry.manufacturer)
        return seen
