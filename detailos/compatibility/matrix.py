"""CompatibilityMatrix — explicit unordered table of chemistry pairs."""

from __future__ import annotations

import logging
from typing import Any

from detailos.compatibility.chemistry import normalize_chemistry
from detailos.models.dna import CompatibilityResult

logger = logging.getLogger(__name__)

_UNKNOWN_REASON = "No compatibility data available for this material combination"


class CompatibilityMatrix:
    """Compatibility results keyed by unordered chemistry pair.

    ``check(a, b)`` and ``check(b, a)`` always agree because each pair is
    stored once under a ``frozenset`` key.

    Parameters
    ----------
    seed:
        If *True* (default), load ``SEED_COMPATIBILITY`` on construction.
    """

    def __init__(self, *, seed: bool = True) -> None:
        self._pairs: dict[frozenset[str], CompatibilityResult] = {}
        if seed:
            self._seed()

    def _seed(self) -> None:
        from detailos.compatibility.seed_data import SEED_COMPATIBILITY
        added = self.load_catalog(SEED_COMPATIBILITY)
        logger.info("Seeded %d compatibility pairs.", added)

    @staticmethod
    def _key(a: str, b: str) -> frozenset[str]:
        return frozenset((normalize_chemistry(a), normalize_chemistry(b)))

    def register(
        self,
        a: str,
        b: str,
        result: CompatibilityResult | dict[str, Any],
    ) -> CompatibilityResult:
        """Store *result* for the pair, replacing any previous entry."""
        stored = (
            result.model_copy(deep=True)
            if isinstance(result, CompatibilityResult)
            else CompatibilityResult.model_validate(result)
        )
        self._pairs[self._key(a, b)] = stored
        logger.debug("Registered %s/%s: %s", a, b, stored.status)
        return stored

    def load_catalog(self, catalog: dict[str, dict[str, Any]]) -> int:
        """Load ``{chemA: {chemB: result}}``.  Pairs already present are kept.

        Returns the number of pairs added.
        """
        added = 0
        for a, row in catalog.items():
            for b, data in row.items():
                if self._key(a, b) in self._pairs:
                    continue
                self.register(a, b, data)
                added += 1
        return added

    @classmethod
    def from_catalog(cls, catalog: dict[str, dict[str, Any]], *, seed: bool = False) -> CompatibilityMatrix:
        matrix = cls(seed=seed)
        matrix.load_catalog(catalog)
        return matrix

    def check(self, a: str, b: str) -> CompatibilityResult:
        """Compatibility of two chemistries.

        Identical chemistries are compatible.  Unlisted pairs are
        ``unknown`` with a reason.
        """
        if normalize_chemistry(a) == normalize_chemistry(b):
            return CompatibilityResult(status="compatible")
        found = self._pairs.get(self._key(a, b))
        if found is not None:
            return found.model_copy(deep=True)
        return CompatibilityResult(status="unknown", reason=_UNKNOWN_REASON)

    def pairs(self) -> list[tuple[str, str, CompatibilityResult]]:
        out = []
        for key, result in self._pairs.items():
            a, b = sorted(key)
            out.append((a, b, result))
        return out

    def __len__(self) -> int:
        return len(self._pairs)


_DEFAULT_MATRIX: CompatibilityMatrix | None = None


def check_compatibility(a: str, b: str) -> CompatibilityResult:
    """Check against the seeded default matrix."""
    global _DEFAULT_MATRIX
    if _DEFAULT_MATRIX is None:
        _DEFAULT_MATRIX = CompatibilityMatrix()
    return _DEFAULT_MATRIX.check(a, b)
