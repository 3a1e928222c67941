"""Drawing surface contract used by the overlay.

The host tool owns the real surface; the overlay only issues pen/brush
changes plus line and rectangle primitives through the Painter interface.
RecordingPainter keeps the primitives in memory, which is what headless
inspection and the test suite draw into.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Color:
    """RGBA color, channels in 0-255."""
    r: int
    g: int
    b: int
    a: int = 255

    def with_alpha(self, alpha: int) -> "Color":
        return replace(self, a=alpha)

    @classmethod
    def from_hex(cls, value: str, alpha: int = 255) -> "Color":
        """Parse '#rrggbb' (or '#rrggbbaa') into a Color.

        Raises:
            ValueError: If value is not a valid hex color
        """
        text = value.strip().lstrip("#")
        if len(text) not in (6, 8):
            raise ValueError(f"Invalid hex color: {value!r}")
        try:
            channels = [int(text[i:i + 2], 16) for i in range(0, len(text), 2)]
        except ValueError:
            raise ValueError(f"Invalid hex color: {value!r}")
        if len(channels) == 4:
            alpha = channels[3]
        return cls(channels[0], channels[1], channels[2], alpha)

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


# Named colors shared with the host palette
YELLOW = Color(255, 255, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
DARK_BLUE = Color(0, 0, 128)
DARK_MAGENTA = Color(128, 0, 128)


@dataclass(frozen=True)
class Pen:
    color: Color
    cosmetic: bool = False  # Fixed on-screen width regardless of zoom


class Painter(ABC):
    """Host drawing surface."""

    @abstractmethod
    def set_pen(self, color: Color, cosmetic: bool = False):
        """Set the outline/line pen."""

    @abstractmethod
    def set_brush(self, color: Color):
        """Set the fill brush."""

    @abstractmethod
    def draw_line(self, x1: float, y1: float, x2: float, y2: float):
        """Draw a line segment in layout coordinates."""

    @abstractmethod
    def draw_rect(self, xl: float, yl: float, xh: float, yh: float):
        """Draw a filled rectangle in layout coordinates."""


@dataclass
class DrawCommand:
    """A single recorded primitive with the pen/brush active at the time."""
    op: str  # "line" or "rect"
    coords: Tuple[float, float, float, float]
    pen: Optional[Pen] = None
    brush: Optional[Color] = None
    layer: str = ""


@dataclass
class RecordingPainter(Painter):
    """Painter that keeps every primitive in memory.

    The composer tags each layer through begin_layer() so recorded
    commands can be grouped per layer afterwards.
    """
    commands: List[DrawCommand] = field(default_factory=list)
    pen: Optional[Pen] = None
    brush: Optional[Color] = None
    current_layer: str = ""

    def begin_layer(self, name: str):
        self.current_layer = name

    def set_pen(self, color: Color, cosmetic: bool = False):
        self.pen = Pen(color, cosmetic)

    def set_brush(self, color: Color):
        self.brush = color

    def draw_line(self, x1: float, y1: float, x2: float, y2: float):
        self.commands.append(DrawCommand(
            "line", (x1, y1, x2, y2), self.pen, None, self.current_layer
        ))

    def draw_rect(self, xl: float, yl: float, xh: float, yh: float):
        self.commands.append(DrawCommand(
            "rect", (xl, yl, xh, yh), self.pen, self.brush, self.current_layer
        ))

    @property
    def lines(self) -> List[DrawCommand]:
        return [c for c in self.commands if c.op == "line"]

    @property
    def rects(self) -> List[DrawCommand]:
        return [c for c in self.commands if c.op == "rect"]

    def by_layer(self, name: str) -> List[DrawCommand]:
        return [c for c in self.commands if c.layer == name]

    def layer_order(self) -> List[str]:
        """Layer names in the order their first primitive was drawn."""
        order: List[str] = []
        for command in self.commands:
            if command.layer not in order:
                order.append(command.layer)
        return order

    def clear(self):
        self.commands.clear()
        self.pen = None
        self.brush = None
        self.current_layer = ""
