from .json_diagram import *
from .errors import *

__version__ = "0.1.0"
__all__ = [
    "JsonDiagram",
    "Layout",
    "LayoutConfig",
    "CollisionPolicy",
    "Font",
    "Box",
    "Edge",
    "DisplayLine",
    "CanvasExtent",
    "PlacementResolver",
    "SvgStyle",
    "build_layout",
    "extract_lines",
    "json_to_svg",
    "layout_table",
    "render_svg",
    "wcwidth_measure",
    "DiagramError",
    "ConfigurationError",
    "LayoutOverflowError",
    "CyclicStructureError",
    "MeasurementError",
    "UnsupportedValueKind",
]
