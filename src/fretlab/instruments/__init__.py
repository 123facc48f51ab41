"""Instrument layouts that project highlight maps onto keys and frets."""

from .fretboard import FretboardLayout, FretPosition
from .keyboard import KeyboardLayout, KeyInfo
from .tunings import TUNINGS, Tuning, get_tuning

__all__ = [
    "FretPosition",
    "FretboardLayout",
    "KeyInfo",
    "KeyboardLayout",
    "TUNINGS",
    "Tuning",
    "get_tuning",
]
