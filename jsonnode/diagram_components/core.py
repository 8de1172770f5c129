from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from ..errors import ConfigurationError


class CollisionPolicy(Enum):

    FIXED_POINT = "fixed_point"
    SINGLE_PASS = "single_pass"

    @classmethod
    def for_name(cls, name: Union[str, "CollisionPolicy"]) -> "CollisionPolicy":
        if isinstance(name, CollisionPolicy):
            return name
        key = name.lower().strip().replace("-", "_")
        if key in {"fixed_point", "fixed", "rescan", "strict"}:
            return cls.FIXED_POINT
        if key in {"single_pass", "single", "legacy"}:
            return cls.SINGLE_PASS
        raise ValueError(f"Unknown collision policy: {name}")


@dataclass(frozen=True)
class Font:

    family: str = "monospace"
    size_px: int = 12


@dataclass
class LayoutConfig:

    padding: int = 10
    line_height: int = 18
    font_size: int = 12
    font_family: str = "monospace"
    horizontal_gap: int = 100
    collision_buffer: int = 10
    array_item_spacing: int = 30
    sibling_gap: int = 50
    origin: Tuple[int, int] = (50, 50)
    canvas_margin: int = 150
    max_depth: int = 200
    collision_policy: Union[str, CollisionPolicy] = CollisionPolicy.FIXED_POINT
    # True inserts a one-line property-name box between an object and each
    # nested object. False attaches the nested object directly to its parent.
    property_junctions: bool = False

    def __post_init__(self) -> None:
        for name in (
            "padding",
            "line_height",
            "font_size",
            "horizontal_gap",
            "collision_buffer",
            "array_item_spacing",
            "sibling_gap",
            "canvas_margin",
            "max_depth",
        ):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer.")
            if value < 0:
                raise ConfigurationError(f"{name} must not be negative.")

        if self.line_height < 1:
            raise ConfigurationError("line_height must be at least 1 pixel.")
        if self.font_size < 1:
            raise ConfigurationError("font_size must be at least 1 pixel.")
        if self.max_depth < 1:
            raise ConfigurationError("max_depth must be at least 1.")

        if not isinstance(self.font_family, str) or not self.font_family.strip():
            raise ConfigurationError("font_family must be a non-empty string.")

        if (
            not isinstance(self.origin, (tuple, list))
            or len(self.origin) != 2
            or not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in self.origin)
        ):
            raise ConfigurationError("origin must be an (x, y) pair of numbers.")
        self.origin = (self.origin[0], self.origin[1])

        if not isinstance(self.property_junctions, bool):
            raise ConfigurationError("property_junctions must be a boolean value.")

        if not isinstance(self.collision_policy, (str, CollisionPolicy)):
            raise ConfigurationError("collision_policy must be a string or CollisionPolicy.")
        try:
            self.collision_policy = CollisionPolicy.for_name(self.collision_policy)
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc

    @property
    def font(self) -> Font:
        return Font(family=self.font_family, size_px=self.font_size)

    @property
    def array_item_step(self) -> int:
        return self.line_height + self.array_item_spacing
