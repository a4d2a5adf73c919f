"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``nextkit/scaffolder/templates/`` directory and renders them with
command-specific context data (module, route and component names).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateNotFound, select_autoescape

from nextkit.utils import camel_case, capitalize_first, kebab_case, pascal_case


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

TEMPLATE_SUFFIX = ".j2"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    Template identifiers are paths relative to the template directory without
    the ``.j2`` suffix, e.g. ``"lib/api.ts"`` resolves to
    ``templates/lib/api.ts.j2``.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["pascal_case"] = pascal_case
        self.env.filters["camel_case"] = camel_case
        self.env.filters["kebab_case"] = kebab_case
        self.env.filters["capitalize_first"] = capitalize_first

    def render(self, template_id: str, context: dict[str, Any] | None = None) -> str:
        """Render the template *template_id* with *context*.

        Raises:
            jinja2.TemplateNotFound: no such template is bundled.
        """
        template = self.env.get_template(template_id + TEMPLATE_SUFFIX)
        return template.render(**(context or {}))

    def render_string(self, template_string: str, context: dict[str, Any] | None = None) -> str:
        """Render an inline template string with the provided context."""
        return self.env.from_string(template_string).render(**(context or {}))

    def has_template(self, template_id: str) -> bool:
        try:
            self.env.get_template(template_id + TEMPLATE_SUFFIX)
        except TemplateNotFound:
            return False
        return True

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return the sorted template identifiers under *prefix*."""
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()[: -len(TEMPLATE_SUFFIX)]
            for p in search_dir.rglob("*" + TEMPLATE_SUFFIX)
        )
