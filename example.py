from jsonnode.json_diagram import JsonDiagram
from rich import print


class Diagram(JsonDiagram):
    def __init__(self, *args, **kwargs):
        kwargs.setdefault("property_junctions", True)
        super().__init__(*args, **kwargs)


def main() -> None:
    diagram = Diagram({"service": "api", "replicas": [1, 2], "limits": {"cpu": "500m"}})
    print(diagram.summary())
    print(diagram.render())


if __name__ == "__main__":
    main()
