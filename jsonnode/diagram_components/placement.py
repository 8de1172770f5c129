import logging
from typing import List, Optional

from .core import CollisionPolicy
from .node import Rect

logger = logging.getLogger(__name__)


def rects_overlap(x: float, y: float, width: float, height: float, other: Rect) -> bool:
    ox, oy, ow, oh = other
    return x < ox + ow and x + width > ox and y < oy + oh and y + height > oy


class PlacementResolver:

    def __init__(
        self,
        buffer: int = 10,
        policy: CollisionPolicy = CollisionPolicy.FIXED_POINT,
    ) -> None:
        self.buffer = buffer
        self.policy = policy
        self.occupied: List[Rect] = []

    def _first_collision(self, x: float, y: float, width: float, height: float) -> Optional[Rect]:
        for rect in self.occupied:
            if rects_overlap(x, y, width, height, rect):
                return rect
        return None

    def _single_pass(self, x: float, y: float, width: float, height: float) -> float:
        adjusted_y = y
        for rect in self.occupied:
            if rects_overlap(x, adjusted_y, width, height, rect):
                _, oy, _, oh = rect
                adjusted_y = oy + oh + self.buffer
                logger.debug("Pushed box at x=%s down to y=%s", x, adjusted_y)
        return adjusted_y

    def _fixed_point(self, x: float, y: float, width: float, height: float) -> float:
        adjusted_y = y
        while True:
            rect = self._first_collision(x, adjusted_y, width, height)
            if rect is None:
                return adjusted_y
            _, oy, _, oh = rect
            adjusted_y = oy + oh + self.buffer
            logger.debug("Pushed box at x=%s down to y=%s", x, adjusted_y)

    def resolve(self, x: float, y: float, width: float, height: float) -> float:
        if self.policy is CollisionPolicy.SINGLE_PASS:
            adjusted_y = self._single_pass(x, y, width, height)
        else:
            adjusted_y = self._fixed_point(x, y, width, height)
        self.occupied.append((x, adjusted_y, width, height))
        return adjusted_y
