from dataclasses import dataclass
from typing import Optional, Tuple

from .content import DisplayLine


Point = Tuple[float, float]
Rect = Tuple[float, float, float, float]


@dataclass(frozen=True)
class Box:
    id: int
    x: float
    y: float
    width: float
    height: float
    lines: Tuple[DisplayLine, ...]
    parent_id: Optional[int] = None

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    @property
    def left_center(self) -> Point:
        return (self.x, self.center_y)

    @property
    def right_center(self) -> Point:
        return (self.right, self.center_y)

    @property
    def rect(self) -> Rect:
        return (self.x, self.y, self.width, self.height)

    def overlaps(self, other: "Box") -> bool:
        return (
            self.x < other.right
            and self.right > other.x
            and self.y < other.bottom
            and self.bottom > other.y
        )
