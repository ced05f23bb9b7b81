from dataclasses import dataclass

# A4 in PDF points; 28.35pt is a 10mm margin.
A4_WIDTH = 595.28
A4_HEIGHT = 841.89
DEFAULT_MARGIN = 28.35


@dataclass(frozen=True)
class DecodedImage:
    """RGB pixel buffer produced by an ImageDecoder."""

    width: int
    height: int
    pixels: bytes
    mode: str = "RGB"


@dataclass(frozen=True)
class PageLayout:
    """Page size and fixed margin, all in points."""

    width: float = A4_WIDTH
    height: float = A4_HEIGHT
    margin: float = DEFAULT_MARGIN

    @property
    def printable_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def printable_height(self) -> float:
        return self.height - 2 * self.margin


@dataclass(frozen=True)
class Placement:
    """Where the image lands on the page, in points from the bottom-left corner."""

    x: float
    y: float
    width: float
    height: float
    scale: float
