"""Domain events for the observer pattern."""

from enum import Enum


class SelectionEvent(Enum):
    """
    Changes to the current selection.

    Selections are ephemeral: they are never persisted, and each service
    instance holds its own.
    """

    TAPPED = "tapped"                    # Tap added or removed a note
    CONFIG_REPLACED = "config_replaced"  # Whole selection replaced (preset, reset)
    ROOT_CHANGED = "root_changed"        # Root reassigned without a tap edit
    OCTAVES_CHANGED = "octaves_changed"  # Octave set replaced
    VIEW_CHANGED = "view_changed"        # View mode switched
    CLEARED = "cleared"                  # Selection emptied
