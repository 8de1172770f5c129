import json
import math
from dataclasses import dataclass
from typing import Any, List

from ..errors import UnsupportedValueKind


EMPTY_OBJECT_LABEL = "{}"


@dataclass(frozen=True)
class DisplayLine:
    key: str
    label: str

    @property
    def text(self) -> str:
        return f"{self.key}: {self.label}"

    @property
    def display_text(self) -> str:
        if self.key:
            return f"{self.key}: {self.label}"
        return self.label


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    return isinstance(value, dict)


def is_container(value: Any) -> bool:
    return is_array(value) or is_object(value)


def array_label(value: Any) -> str:
    return f"Array({len(value)})"


def literal_text(value: Any) -> str:
    if isinstance(value, float) and not math.isfinite(value):
        raise UnsupportedValueKind(f"{value!r} has no JSON literal form.")
    if value is None or isinstance(value, (bool, int, float, str)):
        return json.dumps(value, ensure_ascii=False)
    raise UnsupportedValueKind(
        f"Cannot display value of type {type(value).__name__!r} as JSON."
    )


def _property_label(value: Any) -> str:
    if is_array(value):
        return array_label(value)
    if is_object(value):
        return EMPTY_OBJECT_LABEL
    return literal_text(value)


def extract_lines(value: Any) -> List[DisplayLine]:
    if is_array(value):
        return [DisplayLine("", array_label(value))]

    if is_object(value):
        if not value:
            return [DisplayLine("", EMPTY_OBJECT_LABEL)]
        lines: List[DisplayLine] = []
        for key, item in value.items():
            if not isinstance(key, str):
                raise UnsupportedValueKind(
                    f"Object keys must be strings, got {type(key).__name__!r}."
                )
            lines.append(DisplayLine(key, _property_label(item)))
        return lines

    return [DisplayLine("", literal_text(value))]
