"""Equivalency Database & Matcher.

Interchangeable products per material type, and substitution of a target
manufacturer's products into a detail.
"""

from detailos.equivalency.database import EquivalencyDatabase
from detailos.equivalency.seed_data import SEED_EQUIVALENCIES
from detailos.equivalency.switcher import ManufacturerSwitcher, switch_manufacturer

__all__ = [
    "EquivalencyDatabase",
    "ManufacturerSwitcher",
    "SEED_EQUIVALENCIES",
    "switch_manufacturer",
]
