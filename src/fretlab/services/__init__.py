"""Service layer."""

from .selection_service import SelectionService

__all__ = [
    "SelectionService",
]
