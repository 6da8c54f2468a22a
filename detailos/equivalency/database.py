"""EquivalencyDatabase — material type to interchangeable products.

Each instance owns its data; seeding copies the seed catalog.
"""

from __future__ import annotations

import logging
from typing import Any

from detailos.models.equivalency import EquivalencyEntry, ProductEquivalency

logger = logging.getLogger(__name__)


class EquivalencyDatabase:
    """In-memory equivalency catalog.

    Parameters
    ----------
    seed:
        If *True* (default), load ``SEED_EQUIVALENCIES`` on construction.
    """

    def __init__(self, *, seed: bool = True) -> None:
        self._types: dict[str, ProductEquivalency] = {}
        if seed:
            self._seed()

    def _seed(self) -> None:
        from detailos.equivalency.seed_data import SEED_EQUIVALENCIES
        for material_type, data in SEED_EQUIVALENCIES.items():
            self.register(material_type, data)
        logger.info("Seeded %d equivalency types.", len(SEED_EQUIVALENCIES))

    # -- Registration ---------------------------------------------------------

    def register(
        self,
        material_type: str,
        data: ProductEquivalency | dict[str, Any],
    ) -> ProductEquivalency:
        """Add or extend the entry for *material_type*.

        New manufacturers are appended in order.  A manufacturer already
        present has its entry replaced.  Malformed data raises pydantic's
        ``ValidationError`` and leaves the database unchanged.
        """
        incoming = (
            data.model_copy(deep=True)
            if isinstance(data, ProductEquivalency)
            else ProductEquivalency.model_validate(data)
        )
        existing = self._types.get(material_type)
        if existing is None:
            self._types[material_type] = incoming
            logger.debug("Registered %s with %d products", material_type, len(incoming.products))
            return incoming

        products = list(existing.products)
        for entry in incoming.products:
            for i, current in enumerate(products):
                if current.manufacturer == entry.manufacturer:
                    products[i] = entry
                    break
            else:
                products.append(entry)
        merged = ProductEquivalency(base_type=incoming.base_type or existing.base_type, products=products)
        self._types[material_type] = merged
        logger.debug("Extended %s to %d products", material_type, len(products))
        return merged

    # -- Queries --------------------------------------------------------------

    def get(self, material_type: str) -> ProductEquivalency | None:
        return self._types.get(material_type)

    def material_types(self) -> list[str]:
        return list(self._types)

    def __contains__(self, material_type: object) -> bool:
        return material_type in self._types

    def __len__(self) -> int:
        return len(self._types)

    def entry_for(self, material_type: str, manufacturer: str) -> EquivalencyEntry | None:
        """The entry *manufacturer* offers for *material_type*, if any."""
        equivalency = self._types.get(material_type)
        if equivalency is None:
            return None
        return equivalency.entry_for(manufacturer)

    def manufacturers_for(self, material_type: str) -> list[str]:
        """Manufacturers offering *material_type*; empty when unknown."""
        equivalency = self._types.get(material_type)
        if equivalency is None:
            return []
        return equivalency.manufacturers()

    def find_equivalents(self, manufacturer: str, product: str) -> list[EquivalencyEntry]:
        """Entries interchangeable with ``(manufacturer, product)``.

        The first material type, in registration order, that lists the pair
        owns it; the other manufacturers of that type are returned.  The
        queried manufacturer is never part of the result.
        """
        for equivalency in self._types.values():
            listed = any(
                e.manufacturer == manufacturer and e.product == product
                for e in equivalency.products
            )
            if listed:
                return [e.model_copy() for e in equivalency.products if e.manufacturer != manufacturer]
        return []

    # -- Serialisation --------------------------------------------------------

    def to_catalog(self) -> dict[str, Any]:
        """Return the JSON-compatible catalog form."""
        return {
            material_type: equivalency.model_dump(by_alias=True, exclude_none=True)
            for material_type, equivalency in self._types.items()
        }

    @classmethod
    def from_catalog(cls, catalog: dict[str, Any], *, seed: bool = False) -> EquivalencyDatabase:
        db = cls(seed=seed)
        for material_type, data in catalog.items():
            db.register(material_type, data)
        return db
