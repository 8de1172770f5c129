from jsonnode.json_diagram import CollisionPolicy, JsonDiagram
from rich import print
from rich.panel import Panel


PAYLOAD = {
    "first": [{"a": 1, "b": 2, "c": 3, "d": 4}, {"e": 5}],
    "second": [[1, 2, 3], [4, 5, 6]],
    "third": {"x": {"y": {"z": True}}},
}


def main() -> None:
    for policy in CollisionPolicy:
        diagram = JsonDiagram(PAYLOAD, collision_policy=policy)
        print(Panel(diagram.summary(), title=policy.value))


if __name__ == "__main__":
    main()
