"""Degree Color Palette.

Every highlighted note is colored from its *extended degree*: the signed
semitone distance from the selection root, not reduced to one octave.

## Hue and Octave Bands

- **Hue** is fixed by ``degree mod 12`` from a 12-entry palette, so every
  fifth is the same hue whatever its octave.
- **Saturation, lightness, alpha** follow the octave band ``degree // 12``.
  Higher bands are paler and more transparent, so a 9th (band 1) is
  recognizably related to, but distinguishable from, a 2nd (band 0).
- Bands are clamped to ``[0, 8]``; very large or negative degrees reuse the
  nearest defined band.

```
degree:    0    7   12   19   24 ...
band:      0    0    1    1    2
hue:      114  210  114  210  114
lightness .40  .40  .45  .45  .50
```

Example:
    ```python
    from fretlab.colors import color_for_degree

    fifth = color_for_degree(7)
    twelfth = color_for_degree(19)
    assert fifth.hue == twelfth.hue
    assert twelfth.lightness > fifth.lightness
    ```
"""

from fretlab.models.color import Color

# Hue (degrees) per pitch-class degree: R, ♭2, 2, ♭3, 3, 4, ♭5, 5, ♭6, 6, ♭7, 7
DEGREE_HUES: tuple[int, ...] = (114, 55, 150, 34, 174, 185, 18, 210, 6, 224, 318, 241)

BASE_SATURATION = 0.5

# Per octave band
BAND_SATURATION: tuple[float, ...] = (0.95, 0.90, 0.85, 0.80, 0.75, 0.70, 0.65, 0.60, 0.55)
BAND_LIGHTNESS: tuple[float, ...] = (0.40, 0.45, 0.50, 0.55, 0.60, 0.65, 0.70, 0.75, 0.80)
BAND_ALPHA: tuple[float, ...] = (1.00, 0.95, 0.90, 0.85, 0.80, 0.75, 0.70, 0.65, 0.60)

BAND_COUNT = len(BAND_SATURATION)


def octave_band(degree: int) -> int:
    """Octave band of an extended degree, clamped to the defined bands."""
    return min(max(degree // 12, 0), BAND_COUNT - 1)


def color_for_degree(degree: int) -> Color:
    """
    Color for an extended degree.

    Args:
        degree: Semitones from the root; may be negative or exceed an octave

    Returns:
        HSLA color; hue depends only on ``degree mod 12``
    """
    band = octave_band(degree)
    return Color(
        hue=DEGREE_HUES[degree % 12],
        saturation=round(BASE_SATURATION * BAND_SATURATION[band], 4),
        lightness=BAND_LIGHTNESS[band],
        alpha=BAND_ALPHA[band],
    )


def degree_palette(bands: int = 1) -> list[Color]:
    """Colors for every degree in the first ``bands`` octave bands."""
    return [color_for_degree(d) for d in range(12 * max(bands, 0))]


__all__ = [
    "BAND_COUNT",
    "DEGREE_HUES",
    "color_for_degree",
    "degree_palette",
    "octave_band",
]
