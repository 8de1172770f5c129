from dataclasses import dataclass
from typing import Tuple

from .node import Box, Point


@dataclass(frozen=True)
class Edge:
    from_box_id: int
    to_box_id: int
    from_anchor: Point
    to_anchor: Point

    @classmethod
    def between(cls, parent: Box, child: Box) -> "Edge":
        return cls(
            from_box_id=parent.id,
            to_box_id=child.id,
            from_anchor=parent.right_center,
            to_anchor=child.left_center,
        )

    @property
    def control_points(self) -> Tuple[Point, Point]:
        # Control points share the horizontal midpoint, flat at both ends.
        (x0, y0), (x1, y1) = self.from_anchor, self.to_anchor
        mid_x = (x0 + x1) / 2
        return (mid_x, y0), (mid_x, y1)
