"""Validation and normalisation of raw MaterialDNA documents."""

from __future__ import annotations

import logging
from typing import Any, get_args

from pydantic import ValidationError

from detailos.models.dna import FailureMode, MaterialDNA, Reinforcement, SurfaceTreatment

logger = logging.getLogger(__name__)

_NUMERIC_FIELDS = (
    "thicknessMil",
    "sri",
    "permRating",
    "tensileStrength",
    "elongation",
    "tempRangeMin",
    "tempRangeMax",
)
_TEXT_FIELDS = (
    "assemblyType",
    "condition",
    "manufacturer",
    "product",
    "specSheetUrl",
    "baseChemistry",
    "color",
)
_LIST_FIELDS = ("compatibilityNotes", "applicationConstraints", "codeReferences")
_FIRE_RATINGS = ("A", "B", "C", "unrated")


def validate_dna(data: Any, warnings: list[str]) -> bool:
    """Decide whether *data* can become a material.

    An object with a string ``id`` is accepted.  One with neither
    chemistry, product nor manufacturer is accepted with a warning.
    """
    if not isinstance(data, dict):
        return False
    if not data.get("id") or not isinstance(data["id"], str):
        warnings.append('Material missing required "id" field, skipped')
        return False
    if not (data.get("baseChemistry") or data.get("product") or data.get("manufacturer")):
        warnings.append(f"Material {data['id']} has no chemistry, product, or manufacturer")
    return True


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _text(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def normalize_dna(data: dict[str, Any]) -> MaterialDNA:
    """Build a MaterialDNA from an accepted document.

    Fields of the wrong type are dropped rather than rejected, and
    defaults fill in division and category.
    """
    fields: dict[str, Any] = {
        "id": data["id"],
        "division": _text(data.get("division")) or "07",
        "category": _text(data.get("category")) or "Uncategorized",
    }
    for key in _TEXT_FIELDS:
        if isinstance(data.get(key), str):
            fields[key] = data[key]
    for key in _NUMERIC_FIELDS:
        if _is_number(data.get(key)):
            fields[key] = data[key]
    for key in _LIST_FIELDS:
        if isinstance(data.get(key), list):
            fields[key] = [str(item) for item in data[key]]

    if data.get("reinforcement") in get_args(Reinforcement):
        fields["reinforcement"] = data["reinforcement"]
    if data.get("surfaceTreatment") in get_args(SurfaceTreatment):
        fields["surfaceTreatment"] = data["surfaceTreatment"]
    if data.get("fireRating") in _FIRE_RATINGS:
        fields["fireRating"] = data["fireRating"]

    if isinstance(data.get("failureModes"), list):
        modes = []
        for raw in data["failureModes"]:
            try:
                modes.append(FailureMode.model_validate(raw))
            except ValidationError:
                logger.debug("Dropped malformed failure mode in %s", data["id"], exc_info=True)
        fields["failureModes"] = modes

    return MaterialDNA.model_validate(fields)


def extract_materials(data: Any, warnings: list[str]) -> tuple[list[MaterialDNA], int]:
    """Pull materials out of a list, a ``{"materials": [...]}`` wrapper or a
    single object.

    Returns the materials and the number of items skipped.
    """
    if isinstance(data, list):
        items = data
    elif isinstance(data, dict) and isinstance(data.get("materials"), list):
        items = data["materials"]
    else:
        items = [data]

    materials: list[MaterialDNA] = []
    skipped = 0
    for item in items:
        if not validate_dna(item, warnings):
            skipped += 1
            continue
        try:
            materials.append(normalize_dna(item))
        except ValidationError as exc:
            warnings.append(f"Material {item['id']} is invalid, skipped: {exc.error_count()} error(s)")
            logger.debug("Rejected material %s", item["id"], exc_info=True)
            skipped += 1
    return materials, skipped
