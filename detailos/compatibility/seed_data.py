"""Seed compatibility catalog, chemistry -> chemistry -> result.

Pairs are unordered once loaded.  Where both directions are listed the
first one encountered is kept.
"""

from __future__ import annotations

from typing import Any

SEED_COMPATIBILITY: dict[str, dict[str, dict[str, Any]]] = {
    "EPDM": {
        "asphalt": {
            "status": "incompatible",
            "reason": "Asphalt oils migrate into EPDM causing swelling and degradation",
        },
        "TPO": {
            "status": "conditional",
            "reason": "Requires separation layer",
            "conditions": ["Install polyester fabric separation"],
        },
        "PVC": {"status": "incompatible", "reason": "Plasticizer migration from PVC attacks EPDM"},
        "silicone": {"status": "compatible"},
        "butyl": {"status": "compatible"},
        "polyiso": {"status": "compatible"},
        "SBS": {"status": "incompatible", "reason": "Asphalt in SBS is incompatible with EPDM"},
    },
    "TPO": {
        "asphalt": {"status": "incompatible", "reason": "Asphalt oils degrade TPO membrane"},
        "PVC": {
            "status": "conditional",
            "reason": "Different weld temperatures, not recommended to mix",
            "conditions": ["Use mechanical termination between materials"],
        },
        "polyiso": {"status": "compatible"},
        "SBS": {"status": "incompatible", "reason": "Asphalt in SBS is incompatible with TPO"},
        "silicone": {"status": "compatible"},
    },
    "PVC": {
        "asphalt": {"status": "incompatible", "reason": "Asphalt attacks PVC causing degradation"},
        "eps": {
            "status": "incompatible",
            "reason": "Plasticizer migration destroys EPS",
            "recommendation": "Use XPS or polyiso instead",
        },
        "xps": {
            "status": "incompatible",
            "reason": "Plasticizer migration destroys XPS",
            "recommendation": "Use polyiso instead",
        },
        "polyiso": {"status": "compatible"},
        "SBS": {"status": "incompatible", "reason": "Asphalt in SBS attacks PVC"},
        "butyl": {
            "status": "conditional",
            "reason": "May cause staining",
            "conditions": ["Use separation sheet"],
        },
    },
    "SBS": {
        "polyiso": {"status": "compatible"},
        "silicone": {"status": "compatible"},
        "acrylic": {"status": "compatible"},
    },
}
