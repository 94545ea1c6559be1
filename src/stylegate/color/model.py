"""Color model: the normalized RGB value every color check works on."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ColorValue:
    """A parsed color literal normalized to 8-bit sRGB channels.

    Attributes:
        r: Red channel in [0, 255].
        g: Green channel in [0, 255].
        b: Blue channel in [0, 255].
        alpha: Opacity in [0, 1], or None when the literal carried none.
    """

    r: int
    g: int
    b: int
    alpha: float | None = None

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"Channel out of range: {channel}")
        if self.alpha is not None and not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"Alpha out of range: {self.alpha}")

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def __str__(self) -> str:
        return self.hex
