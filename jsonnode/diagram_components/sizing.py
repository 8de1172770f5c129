import math
from typing import Callable, Optional, Sequence, Tuple

from wcwidth import wcwidth

from ..errors import MeasurementError
from .content import DisplayLine
from .core import Font, LayoutConfig


Measure = Callable[[str, Font], float]

# Advance of one monospace cell relative to the font size.
MONOSPACE_ADVANCE = 0.6


def wcwidth_measure(text: str, font: Font) -> float:
    cells = sum(max(wcwidth(char), 1) for char in text)
    return cells * font.size_px * MONOSPACE_ADVANCE


def measure_text(measure: Optional[Measure], text: str, font: Font) -> float:
    if measure is None or not callable(measure):
        raise MeasurementError("No text measurement function is available.")
    try:
        width = measure(text, font)
    except (MeasurementError, RecursionError):
        raise
    except Exception as exc:
        raise MeasurementError(f"Failed to measure {text!r}: {exc}") from exc

    if isinstance(width, bool) or not isinstance(width, (int, float)):
        raise MeasurementError(
            f"Measurement of {text!r} returned {type(width).__name__}, expected a number."
        )
    if not math.isfinite(width) or width < 0:
        raise MeasurementError(f"Measurement of {text!r} returned invalid width {width!r}.")
    return width


def calculate_size(
    lines: Sequence[DisplayLine],
    measure: Optional[Measure],
    config: LayoutConfig,
) -> Tuple[float, int]:
    font = config.font
    widest = max((measure_text(measure, line.text, font) for line in lines), default=0)
    width = widest + config.padding * 2
    height = len(lines) * config.line_height + config.padding * 2
    return width, height
