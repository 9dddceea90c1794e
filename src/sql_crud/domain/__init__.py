"""Record runtime."""

from .record import CrudRecord

__all__ = ["CrudRecord"]
