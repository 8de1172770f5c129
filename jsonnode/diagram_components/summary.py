from typing import TYPE_CHECKING

from rich.table import Table
from rich.text import Text

from .svg import fmt

if TYPE_CHECKING:
    from .diagram import Layout


def layout_table(layout: "Layout", *, title: str = "Layout") -> Table:
    table = Table(title=title)
    table.add_column("id", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("width", justify="right")
    table.add_column("height", justify="right")
    table.add_column("parent", justify="right")
    table.add_column("lines")

    for box in layout.boxes:
        table.add_row(
            str(box.id),
            fmt(box.x),
            fmt(box.y),
            fmt(box.width),
            fmt(box.height),
            "" if box.parent_id is None else str(box.parent_id),
            Text("\n".join(line.display_text for line in box.lines)),
        )

    table.caption = f"{len(layout.boxes)} boxes, {len(layout.edges)} edges, canvas {fmt(layout.width)}x{fmt(layout.height)}"
    return table
