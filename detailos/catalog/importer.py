"""Import and export of material catalogs and detail documents.

Accepts a single ``.json`` file or a ``.zip`` bundle of them.  Archive
metadata (``__MACOSX``, ``.DS_Store`` and friends) is ignored.
"""

from __future__ import annotations

import json
import logging
import zipfile
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from detailos.catalog.dna import extract_materials
from detailos.config import ARCHIVE_GARBAGE_PATTERNS
from detailos.models.detail import SemanticDetail
from detailos.models.dna import MaterialDNA

logger = logging.getLogger(__name__)


class ImportStats(BaseModel):
    files_processed: int = 0
    materials_found: int = 0
    materials_imported: int = 0
    materials_skipped: int = 0


class ImportResult(BaseModel):
    """Outcome of a material import."""

    success: bool = False
    materials: list[MaterialDNA] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    stats: ImportStats = Field(default_factory=ImportStats)


class DetailLoadResult(BaseModel):
    """Outcome of loading detail documents."""

    details: list[SemanticDetail] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


def is_archive_garbage(name: str) -> bool:
    """True for directory entries and OS metadata inside an archive."""
    if name.endswith("/") or "__MACOSX" in name or "/." in name:
        return True
    basename = name.rsplit("/", 1)[-1]
    return any(basename == p or basename.startswith(p) for p in ARCHIVE_GARBAGE_PATTERNS)


def _json_entries(archive: zipfile.ZipFile) -> list[str]:
    return [
        name
        for name in archive.namelist()
        if not is_archive_garbage(name) and name.lower().endswith(".json")
    ]


# ---------------------------------------------------------------------------
# Materials
# ---------------------------------------------------------------------------


def _collect(result: ImportResult, data: Any) -> None:
    materials, skipped = extract_materials(data, result.warnings)
    result.materials.extend(materials)
    result.stats.materials_found += len(materials) + skipped
    result.stats.materials_skipped += skipped


def import_materials(path: str | Path) -> ImportResult:
    """Import MaterialDNA records from a ``.json`` file or ``.zip`` bundle.

    Parameters
    ----------
    path:
        File to read.  The extension decides the format.

    Returns
    -------
    ImportResult
        ``success`` is True when at least one material was imported.
        Problems in individual archive entries are reported in ``errors``
        without aborting the rest.
    """
    path = Path(path)
    result = ImportResult()
    suffix = path.suffix.lower()

    if suffix == ".json":
        result.stats.files_processed = 1
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            result.errors.append(f"Failed to parse {path.name}: {exc}")
            return result
        _collect(result, data)

    elif suffix == ".zip":
        try:
            with zipfile.ZipFile(path) as archive:
                for name in _json_entries(archive):
                    result.stats.files_processed += 1
                    try:
                        data = json.loads(archive.read(name).decode("utf-8"))
                    except ValueError as exc:
                        result.errors.append(f"Failed to parse {name}: {exc}")
                        continue
                    _collect(result, data)
        except (OSError, zipfile.BadZipFile) as exc:
            result.errors.append(f"Failed to open {path.name}: {exc}")
            return result
        if result.stats.files_processed == 0:
            result.warnings.append("No JSON files found in archive")

    else:
        result.errors.append("Unsupported file type. Use .json or .zip")
        return result

    result.stats.materials_imported = len(result.materials)
    result.success = len(result.materials) > 0
    logger.info(
        "Imported %d materials from %s (%d skipped)",
        result.stats.materials_imported,
        path.name,
        result.stats.materials_skipped,
    )
    return result


def export_materials(materials: list[MaterialDNA], indent: int | None = 2) -> str:
    """Serialise materials to the ``{"materials": [...]}`` catalog form."""
    payload = {"materials": [m.model_dump(by_alias=True, exclude_none=True) for m in materials]}
    return json.dumps(payload, indent=indent)


# ---------------------------------------------------------------------------
# Details
# ---------------------------------------------------------------------------


def _detail_documents(data: Any) -> list[Any]:
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for key in ("details", "materials"):
            if isinstance(data.get(key), list):
                return data[key]
    return [data]


def _add_details(result: DetailLoadResult, data: Any, source: str) -> None:
    for index, doc in enumerate(_detail_documents(data)):
        try:
            result.details.append(SemanticDetail.from_document(doc))
        except ValidationError as exc:
            label = doc.get("id") if isinstance(doc, dict) and doc.get("id") else f"#{index}"
            result.warnings.append(f"Invalid detail {label} in {source}: {exc.error_count()} error(s)")
            logger.debug("Rejected detail %s from %s", label, source, exc_info=True)


def load_details(source: str | Path | dict[str, Any] | list[Any]) -> DetailLoadResult:
    """Load semantic details from a document, a ``.json`` file or a ``.zip``.

    A document may be a single detail, a list of details or an object
    wrapping a ``details`` list.  Documents that fail validation are
    reported as warnings.
    """
    result = DetailLoadResult()

    if isinstance(source, (dict, list)):
        _add_details(result, source, "document")
        return result

    path = Path(source)
    if path.suffix.lower() == ".zip":
        try:
            with zipfile.ZipFile(path) as archive:
                for name in _json_entries(archive):
                    try:
                        data = json.loads(archive.read(name).decode("utf-8"))
                    except ValueError as exc:
                        result.warnings.append(f"Failed to parse {name}: {exc}")
                        continue
                    _add_details(result, data, name)
        except (OSError, zipfile.BadZipFile) as exc:
            result.warnings.append(f"Failed to open {path.name}: {exc}")
            return result
    else:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as exc:
            result.warnings.append(f"Failed to open {path.name}: {exc}")
            return result
        except ValueError as exc:
            result.warnings.append(f"Failed to parse {path.name}: {exc}")
            return result
        _add_details(result, data, path.name)

    logger.info("Loaded %d details from %s", len(result.details), path.name)
    return result
