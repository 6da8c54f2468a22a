"""Detail validation suite.

Structured checks for reference integrity, geometry and material
resolution of semantic details.
"""

from detailos.validation.report import DetailValidationReport
from detailos.validation.validator import DetailValidator

__all__ = ["DetailValidator", "DetailValidationReport"]
