from dataclasses import dataclass

DEFAULT_FRAGMENT_HEIGHT = 12.0


@dataclass(frozen=True)
class Coordinates:
    """Box on page 1 in PDF points, top-left origin."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class TextFragment:
    """A positioned run of text reported by a PDF engine for page 1."""

    text: str
    x: float
    y: float
    width: float
    height: float

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(x=self.x, y=self.y, width=self.width, height=self.height)


def make_fragment(text: str, x0: float, top: float, x1: float, bottom: float) -> TextFragment:
    """Build a fragment from a bounding box, substituting the default height for flat boxes."""
    height = bottom - top
    return TextFragment(
        text=text,
        x=float(x0),
        y=float(top),
        width=float(x1 - x0),
        height=float(height) if height > 0 else DEFAULT_FRAGMENT_HEIGHT,
    )
