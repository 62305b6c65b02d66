"""The starter ``main.go`` written into every new project."""

from __future__ import annotations

ENTRY_POINT_FILENAME: str = "main.go"

MAIN_GO_TEMPLATE: str = """package main

import "fmt"

func main() {{
\tfmt.Println("Hello from {project_name}!")
}}
"""


def render_main_go(project_name: str) -> str:
    """Interpolate *project_name* into :data:`MAIN_GO_TEMPLATE`."""
    return MAIN_GO_TEMPLATE.format(project_name=project_name)
