"""
Positioned text fragments reported by a PDF page reader.

Coordinates are in PDF user space: the origin is the bottom-left corner of
the page and y grows upwards. TextRuns and Lines live only for the duration
of a single page reconstruction.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Extent:
    width: float
    height: float


@dataclass(frozen=True)
class TextRun:
    """One atomic text fragment with its baseline origin and size"""

    text: str
    position: Point
    extent: Extent = Extent(0.0, 0.0)

    @classmethod
    def at(cls, text: str, x: float, y: float, width: float = 0.0, height: float = 0.0) -> "TextRun":
        return cls(text=text, position=Point(x, y), extent=Extent(width, height))


@dataclass
class Line:
    """Runs judged to share a vertical position, ordered left to right"""

    anchor_y: float  # Top-down y of the run that opened the line
    runs: list[TextRun] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)
