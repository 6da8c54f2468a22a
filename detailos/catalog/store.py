"""MaterialStore — in-memory catalog of DetailMaterials with JSON persistence."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from detailos.catalog.adapter import DetailMaterial, dna_material_to_detail_material
from detailos.models.dna import MaterialDNA

logger = logging.getLogger(__name__)


class MaterialStore:
    """Keeps imported materials, keyed by id, in insertion order."""

    def __init__(self, materials: list[DetailMaterial] | None = None) -> None:
        self._materials: dict[str, DetailMaterial] = {}
        for material in materials or []:
            self.add(material)

    # -- Mutation ----------------------------------------------------------

    def add(self, material: DetailMaterial) -> None:
        """Add *material*, replacing one with the same id in place."""
        self._materials[material.id] = material

    def add_dna(self, dna_materials: list[MaterialDNA]) -> int:
        for dna in dna_materials:
            self.add(dna_material_to_detail_material(dna))
        return len(dna_materials)

    def remove(self, material_id: str) -> bool:
        return self._materials.pop(material_id, None) is not None

    def clear(self) -> None:
        self._materials.clear()

    def replace(self, materials: list[DetailMaterial]) -> None:
        self.clear()
        for material in materials:
            self.add(material)

    # -- Queries -----------------------------------------------------------

    def __len__(self) -> int:
        return len(self._materials)

    def __contains__(self, material_id: object) -> bool:
        return material_id in self._materials

    def all(self) -> list[DetailMaterial]:
        return list(self._materials.values())

    def get_by_id(self, material_id: str) -> DetailMaterial | None:
        return self._materials.get(material_id)

    def get_by_dna_id(self, dna_id: str) -> DetailMaterial | None:
        for material in self._materials.values():
            if material.dna_id == dna_id:
                return material
        return None

    def by_chemistry(self, chemistry: str) -> list[DetailMaterial]:
        wanted = chemistry.lower()
        return [m for m in self._materials.values() if m.chemistry.lower() == wanted]

    def by_manufacturer(self, manufacturer: str) -> list[DetailMaterial]:
        needle = manufacturer.lower()
        return [m for m in self._materials.values() if needle in m.manufacturer.lower()]

    def by_category(self, category: str) -> list[DetailMaterial]:
        return [m for m in self._materials.values() if m.category == category]

    def search(self, query: str) -> list[DetailMaterial]:
        """Case-insensitive match on name, manufacturer, product or chemistry."""
        needle = query.lower().strip()
        if not needle:
            return self.all()
        return [
            m
            for m in self._materials.values()
            if any(needle in field.lower() for field in (m.name, m.manufacturer, m.product, m.chemistry))
        ]

    def chemistries(self) -> list[str]:
        return sorted({m.chemistry for m in self._materials.values() if m.chemistry})

    def manufacturers(self) -> list[str]:
        return sorted({m.manufacturer for m in self._materials.values()})

    def grouped_by_chemistry(self) -> dict[str, list[DetailMaterial]]:
        groups: dict[str, list[DetailMaterial]] = {}
        for material in self._materials.values():
            groups.setdefault(material.chemistry or "Other", []).append(material)
        return groups

    # -- Persistence -------------------------------------------------------

    def save(self, path: str | Path) -> Path:
        """Write the underlying DNA records as a ``{"materials": [...]}`` file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "materials": [m.dna.model_dump(by_alias=True, exclude_none=True) for m in self._materials.values()]
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        logger.info("Saved %d materials to %s", len(self), path)
        return path

    @classmethod
    def load(cls, path: str | Path) -> MaterialStore:
        from detailos.catalog.importer import import_materials

        result = import_materials(path)
        store = cls()
        store.add_dna(result.materials)
        return store
