"""Jinja2 template rendering for type declarations.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``sharpgen/templates/`` directory and renders them with a declaration context.
Class, interface and enum skeletons live in templates; their members arrive
already rendered and indented.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for C# type declarations.

    Templates are looked up by name under ``template_dir`` (the bundled
    ``sharpgen/templates/`` by default). The context holds the declaration
    header parts and its members, already rendered and indented.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render *template_path* (e.g. ``"class.cs.j2"``) with *context*.

        No trailing newline is added; the output is a single declaration.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


_default_renderer: TemplateRenderer | None = None


def get_renderer() -> TemplateRenderer:
    """Return the shared renderer for the bundled templates."""
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = TemplateRenderer()
    return _default_renderer
