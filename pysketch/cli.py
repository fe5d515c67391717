"""The ``pysketch`` command: creates new sketch projects from templates."""

from __future__ import annotations

import os
import sys
from pathlib import Path

BASIC_TEMPLATE = """\
from pysketch.colors import color
from pysketch.sketch import Sketch

sketch = Sketch()


@sketch.setup
def setup():
    sketch.create_canvas(400, 400)


@sketch.draw
def draw():
    sketch.background(color(255))
    sketch.point(200, 200)


if __name__ == "__main__":
    sketch.run()
"""

RECTANGLE_TEMPLATE = """\
from pysketch.colors import rgb, rgba
from pysketch.sketch import Sketch

sketch = Sketch()


@sketch.setup
def setup():
    sketch.create_canvas(400, 400)


@sketch.draw
def draw():
    sketch.background(rgba(240, 240, 240, 255))

    # A central rectangle
    sketch.fill(rgb(200, 200, 100))
    sketch.rectangle(100, 100, 200, 150)

    # A smaller square
    sketch.fill(rgb(100, 200, 200))
    sketch.square(150, 150, 100)


if __name__ == "__main__":
    sketch.run()
"""

LINE_TEMPLATE = """\
from pysketch.colors import color, rgb
from pysketch.sketch import Sketch

sketch = Sketch()


@sketch.setup
def setup():
    sketch.create_canvas(400, 400)


@sketch.draw
def draw():
    sketch.background(color(255))

    # A grid of lines
    sketch.stroke(color(200))
    for i in range(0, 400, 20):
        sketch.line(0, i, 400, i)
        sketch.line(i, 0, i, 400)

    # Two diagonals
    sketch.stroke(rgb(255, 100, 100))
    sketch.stroke_weight(3)
    sketch.line(0, 0, 400, 400)
    sketch.line(0, 400, 400, 0)


if __name__ == "__main__":
    sketch.run()
"""

TEMPLATES = {
    "basic": BASIC_TEMPLATE,
    "rectangle": RECTANGLE_TEMPLATE,
    "line": LINE_TEMPLATE,
}

DEFAULT_TEMPLATE = "basic"
REQUIREMENTS = "pysketch\n"

_TEMPLATE_LIST = """\
  basic     - Basic template with a single point (default)
  rectangle - Template with rectangles and squares
  line      - Template with a grid of lines"""


class ProjectError(Exception):
    """Raised when a project cannot be created."""


def print_usage() -> None:
    """Print the command's help text."""
    print("pysketch - generative art in Python")
    print()
    print("Usage:")
    print("  pysketch new <project-name> [template]    Create a new sketch project")
    print("  pysketch list-templates                  List the available templates")
    print("  pysketch help                            Show this help")
    print()
    print("Available templates:")
    print(_TEMPLATE_LIST)


def list_templates() -> None:
    """Print the available templates."""
    print("Templates available for pysketch:")
    print()
    print(_TEMPLATE_LIST)


def create_new_project(project_name: str, template_name: str = "") -> Path:
    """Create a project directory holding ``main.py`` and ``requirements.txt``."""
    if not project_name:
        raise ProjectError("project name not specified")
    template_name = template_name or DEFAULT_TEMPLATE
    try:
        template = TEMPLATES[template_name]
    except KeyError:
        raise ProjectError(
            f"template '{template_name}' not found. "
            "Use 'pysketch list-templates' to see the available options"
        ) from None

    project_dir = Path(project_name)
    try:
        os.mkdir(project_dir, 0o755)
    except OSError as exc:
        raise ProjectError(f"could not create the project directory: {exc}") from exc

    try:
        (project_dir / "main.py").write_text(template, encoding="utf-8")
    except OSError as exc:
        raise ProjectError(f"could not create main.py: {exc}") from exc
    try:
        (project_dir / "requirements.txt").write_text(REQUIREMENTS, encoding="utf-8")
    except OSError as exc:
        raise ProjectError(f"could not create requirements.txt: {exc}") from exc

    print(f"Project '{project_name}' created with the '{template_name}' template!")
    print()
    print("To run your project:")
    print(f"  cd {project_name}")
    print("  pip install -r requirements.txt")
    print("  python main.py")
    return project_dir


def main(argv: list[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print_usage()
        return 1

    match args[0]:
        case "new":
            if len(args) < 2:
                print("Error: project name not specified")
                print()
                print_usage()
                return 1
            template_name = args[2] if len(args) >= 3 else ""
            try:
                create_new_project(args[1], template_name)
            except ProjectError as exc:
                print(f"Error: {exc}")
                return 1
        case "list-templates":
            list_templates()
        case "help":
            print_usage()
        case command:
            print(f"Unknown command: {command}")
            print()
            print_usage()
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())