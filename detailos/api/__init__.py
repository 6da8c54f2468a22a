"""Python API — the :class:`DetailOS` facade is the single entry point."""

from detailos.api.facade import DetailOS

__all__ = ["DetailOS"]
