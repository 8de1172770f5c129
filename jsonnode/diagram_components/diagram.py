import itertools
import json
import logging
from dataclasses import dataclass, field, replace
from typing import Any, Iterator, List, Optional, Set

from ..errors import (
    ConfigurationError,
    CyclicStructureError,
    DiagramError,
    LayoutOverflowError,
    UnsupportedValueKind,
)
from .canvas import CanvasExtent
from .content import DisplayLine, extract_lines, is_array, is_container, is_object
from .core import LayoutConfig
from .edge import Edge
from .node import Box
from .placement import PlacementResolver
from .sizing import Measure, calculate_size, wcwidth_measure

logger = logging.getLogger(__name__)


@dataclass
class Layout:
    boxes: List[Box]
    edges: List[Edge]
    max_x: float
    max_y: float
    config: LayoutConfig = field(default_factory=LayoutConfig)

    @property
    def root(self) -> Box:
        return self.boxes[0]

    def box(self, box_id: int) -> Box:
        return self.boxes[box_id]

    def children(self, box_id: int) -> List[Box]:
        return [box for box in self.boxes if box.parent_id == box_id]

    @property
    def width(self) -> float:
        return self.max_x + self.config.canvas_margin

    @property
    def height(self) -> float:
        return self.max_y + self.config.canvas_margin


class LayoutContext:

    def __init__(self, config: LayoutConfig, measure: Measure) -> None:
        self.config = config
        self.measure = measure
        self.boxes: List[Box] = []
        self.edges: List[Edge] = []
        self.extent = CanvasExtent()
        self.resolver = PlacementResolver(
            buffer=config.collision_buffer, policy=config.collision_policy
        )
        self._ids: Iterator[int] = itertools.count()
        self._active: Set[int] = set()

    def place(
        self,
        lines: List[DisplayLine],
        x: float,
        y: float,
        parent: Optional[Box] = None,
    ) -> Box:
        width, height = calculate_size(lines, self.measure, self.config)
        adjusted_y = self.resolver.resolve(x, y, width, height)
        box = Box(
            id=next(self._ids),
            x=x,
            y=adjusted_y,
            width=width,
            height=height,
            lines=tuple(lines),
            parent_id=parent.id if parent else None,
        )
        self.boxes.append(box)
        if parent is not None:
            self.edges.append(Edge.between(parent, box))
        self.extent.include_box(box)
        return box

    def _enter(self, value: Any, depth: int) -> None:
        if depth > self.config.max_depth:
            raise LayoutOverflowError(
                f"JSON nesting exceeds max_depth={self.config.max_depth}. "
                "Increase max_depth via LayoutConfig(..., max_depth=...)."
            )
        if is_container(value):
            marker = id(value)
            if marker in self._active:
                raise CyclicStructureError(
                    f"{type(value).__name__} at depth {depth} contains itself."
                )
            self._active.add(marker)

    def _leave(self, value: Any) -> None:
        if is_container(value):
            self._active.discard(id(value))

    def build(
        self,
        value: Any,
        x: float,
        y: float,
        parent: Optional[Box] = None,
        depth: int = 1,
    ) -> Box:
        self._enter(value, depth)
        box = self.place(extract_lines(value), x, y, parent)

        running_y = box.y
        child_x = box.right + self.config.horizontal_gap
        step = self.config.array_item_step

        if is_array(value):
            for index, item in enumerate(value):
                self.build(item, child_x, running_y + index * step, box, depth + 1)
            if value:
                running_y += len(value) * step + self.config.sibling_gap

        elif is_object(value):
            for key, item in value.items():
                if is_array(item):
                    self.build(item, child_x, running_y, box, depth + 1)
                    running_y += len(item) * step + self.config.sibling_gap
                elif is_object(item):
                    nested = self._build_property_object(key, item, child_x, running_y, box, depth)
                    running_y += nested.height + self.config.sibling_gap

        self.extent.include(box.right, running_y)
        self._leave(value)
        return box

    def _build_property_object(
        self,
        key: str,
        value: Any,
        x: float,
        y: float,
        parent: Box,
        depth: int,
    ) -> Box:
        if not self.config.property_junctions:
            return self.build(value, x, y, parent, depth + 1)
        junction = self.place([DisplayLine("", key)], x, y, parent)
        return self.build(value, junction.right + self.config.horizontal_gap, y, junction, depth + 1)

    def to_layout(self) -> Layout:
        return Layout(
            boxes=list(self.boxes),
            edges=list(self.edges),
            max_x=self.extent.max_x,
            max_y=self.extent.max_y,
            config=self.config,
        )


def build_layout(
    value: Any,
    config: Optional[LayoutConfig] = None,
    measure: Optional[Measure] = None,
) -> Layout:
    config = config or LayoutConfig()
    if measure is None:
        measure = wcwidth_measure
    context = LayoutContext(config, measure)
    logger.debug("Starting layout with %s collision policy", config.collision_policy.value)

    origin_x, origin_y = config.origin
    try:
        context.build(value, origin_x, origin_y)
    except RecursionError as exc:
        raise LayoutOverflowError(
            f"JSON nesting exhausted the interpreter stack before max_depth={config.max_depth}. "
            "Lower max_depth via LayoutConfig(..., max_depth=...)."
        ) from exc

    layout = context.to_layout()
    logger.debug(
        "Laid out %d boxes and %d edges within %sx%s",
        len(layout.boxes),
        len(layout.edges),
        layout.max_x,
        layout.max_y,
    )
    return layout


def _reject_constant(name: str) -> Any:
    raise UnsupportedValueKind(f"{name} has no JSON literal form.")


class JsonDiagram:

    def __init__(
        self,
        value: Any,
        *,
        measure: Optional[Measure] = None,
        config: Optional[LayoutConfig] = None,
        **overrides: Any,
    ) -> None:
        if measure is not None and not callable(measure):
            raise ConfigurationError("measure must be callable when provided.")
        base = config or LayoutConfig()
        if not isinstance(base, LayoutConfig):
            raise ConfigurationError("config must be a LayoutConfig instance.")
        try:
            self.config = replace(base, **overrides) if overrides else base
        except TypeError as exc:
            raise ConfigurationError(str(exc)) from exc
        self.value = value
        self.measure = measure or wcwidth_measure

    @classmethod
    def from_json(cls, text: str, **kwargs: Any) -> "JsonDiagram":
        try:
            value = json.loads(text, parse_constant=_reject_constant)
        except json.JSONDecodeError as exc:
            raise DiagramError(f"Input is not valid JSON: {exc}") from exc
        return cls(value, **kwargs)

    def layout(self) -> Layout:
        return build_layout(self.value, self.config, self.measure)

    def render(self) -> str:
        from .svg import render_svg

        return render_svg(self.layout())

    def summary(self):
        from .summary import layout_table

        return layout_table(self.layout())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"JsonDiagram(value={self.value!r})"


def json_to_svg(value: Any, *, measure: Optional[Measure] = None, **overrides: Any) -> str:
    return JsonDiagram(value, measure=measure, **overrides).render()
