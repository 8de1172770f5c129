from dataclasses import dataclass

from .node import Box


@dataclass
class CanvasExtent:
    max_x: float = 0
    max_y: float = 0

    def include(self, x: float = 0, y: float = 0) -> None:
        self.max_x = max(self.max_x, x)
        self.max_y = max(self.max_y, y)

    def include_box(self, box: Box) -> None:
        self.include(box.right, box.bottom)
