"""ManufacturerSwitcher — substitute one manufacturer's products into a detail."""

from __future__ import annotations

import logging

from detailos.equivalency.database import EquivalencyDatabase
from detailos.models.detail import ProductReference, SemanticDetail
from detailos.resolver.resolver import MaterialTypeResolver

logger = logging.getLogger(__name__)


class ManufacturerSwitcher:
    """Produce manufacturer variants of a detail.

    Parameters
    ----------
    database:
        Equivalency data to draw products from.  Seeded when omitted.
    resolver:
        Material type resolver.  Built-in tables when omitted.
    """

    def __init__(
        self,
        database: EquivalencyDatabase | None = None,
        resolver: MaterialTypeResolver | None = None,
    ) -> None:
        self.database = database if database is not None else EquivalencyDatabase()
        self.resolver = resolver if resolver is not None else MaterialTypeResolver()

    def switch(self, detail: SemanticDetail, target: str) -> SemanticDetail:
        """Return a copy of *detail* using *target*'s products.

        Every layer whose material type has an entry for *target* takes
        that entry's thickness (when declared) and product; a product
        reference is created for layers that had none.  Other layers are
        left as they are.  The input is not modified, and switching an
        already switched detail to the same target changes nothing.
        """
        variant = detail.model_copy(deep=True)
        switched = 0

        for layer in variant.layers:
            material_type = self.resolver.resolve_layer(layer)
            if material_type is None:
                continue
            entry = self.database.entry_for(material_type, target)
            if entry is None:
                continue

            if entry.thickness is not None:
                layer.thickness = entry.thickness

            refs = [p for p in variant.products if p.layer == layer.id]
            if refs:
                for ref in refs:
                    ref.manufacturer = target
                    ref.product = entry.product
            else:
                variant.products.append(ProductReference(
                    manufacturer=target,
                    product=entry.product,
                    layer=layer.id,
                ))
            switched += 1

        logger.debug("Switched %d layers of %s to %s", switched, detail.id, target)
        return variant


def switch_manufacturer(
    detail: SemanticDetail,
    target: str,
    database: EquivalencyDatabase | None = None,
    resolver: MaterialTypeResolver | None = None,
) -> SemanticDetail:
    """Functional form of :meth:`ManufacturerSwitcher.switch`."""
    return ManufacturerSwitcher(database, resolver).switch(detail, target)
