from jsonnode.json_diagram import JsonDiagram
from rich import print


PAYLOAD = {
    "name": "jsonnode",
    "version": "0.1.0",
    "private": False,
    "keywords": ["json", "svg", "diagram"],
    "author": {"name": "", "email": None},
    "scripts": {},
}


def main() -> None:
    diagram = JsonDiagram(PAYLOAD)
    print(diagram.summary())


if __name__ == "__main__":
    main()
