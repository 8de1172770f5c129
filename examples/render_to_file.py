import sys
from pathlib import Path

from jsonnode.json_diagram import JsonDiagram
from rich.console import Console


def main() -> None:
    console = Console()
    if len(sys.argv) < 2:
        console.print("[red]usage:[/red] render_to_file.py INPUT.json [OUTPUT.svg]")
        raise SystemExit(2)

    source = Path(sys.argv[1])
    target = Path(sys.argv[2]) if len(sys.argv) > 2 else source.with_suffix(".svg")

    diagram = JsonDiagram.from_json(source.read_text(encoding="utf-8"))
    target.write_text(diagram.render(), encoding="utf-8")
    console.print(diagram.summary())
    console.print(f"[green]wrote[/green] {target}")


if __name__ == "__main__":
    main()
