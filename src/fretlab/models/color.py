"""Color model for highlight rendering."""

import colorsys

from pydantic import BaseModel, ConfigDict, Field


class Color(BaseModel):
    """HSLA color.

    Hue is in degrees; saturation, lightness and alpha are fractions. The
    renderer decides how to draw it, so conversions to RGB and hex are
    provided alongside.

    The model is frozen so equal colors hash equally.
    """

    model_config = ConfigDict(frozen=True)

    hue: float = Field(ge=0.0, lt=360.0, description="Hue in degrees (0-360)")
    saturation: float = Field(ge=0.0, le=1.0, description="Saturation (0.0-1.0)")
    lightness: float = Field(ge=0.0, le=1.0, description="Lightness (0.0-1.0)")
    alpha: float = Field(default=1.0, ge=0.0, le=1.0, description="Opacity (0.0-1.0)")

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to 8-bit RGB.

        Example:
            >>> Color(hue=0, saturation=1.0, lightness=0.5).to_rgb_tuple()
            (255, 0, 0)
        """
        r, g, b = colorsys.hls_to_rgb(self.hue / 360.0, self.lightness, self.saturation)
        return (round(r * 255), round(g * 255), round(b * 255))

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#FF0000'), alpha dropped."""
        r, g, b = self.to_rgb_tuple()
        return f"#{r:02X}{g:02X}{b:02X}"

    def to_css(self) -> str:
        """Convert to a CSS ``hsla()`` expression."""
        return (
            f"hsla({self.hue:g}, {self.saturation * 100:.0f}%, "
            f"{self.lightness * 100:.0f}%, {self.alpha:.2f})"
        )
