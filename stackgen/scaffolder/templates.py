"""Jinja2-backed template loading for project scaffolding.

Provides the TemplateRenderer class which locates asset files under the
``stackgen/scaffolder/templates/`` directory through a Jinja2 loader.  The
generated files are boilerplate copied byte-for-byte, so templates are read
as raw source and never rendered with a context.
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Loads scaffold assets from a template directory.

    Template names are ``/``-separated paths relative to the template root,
    e.g. ``"express/auth/index.ts"``.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            keep_trailing_newline=True,
            autoescape=False,
        )

    def source(self, template_name: str) -> str:
        """Return the verbatim text of *template_name*.

        Raises:
            jinja2.TemplateNotFound: If no such asset exists.
        """
        text, _filename, _uptodate = self.env.loader.get_source(self.env, template_name)
        return text

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all template names under *prefix*."""
        names = self.env.list_templates()
        if prefix:
            prefix = prefix.rstrip("/") + "/"
            names = [n for n in names if n.startswith(prefix)]
        return sorted(names)
