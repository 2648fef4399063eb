"""Jinja2 template rendering for generated files.

Provides the TemplateRenderer class which loads Jinja2 templates from a
package ``templates/`` directory and renders them with run-specific context.
Rendering is pure: writing the result to disk is the caller's concern.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


class TemplateRenderer:
    """Renders ``.j2`` templates found under *template_dir*."""

    def __init__(self, template_dir: str | Path) -> None:
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["title_case"] = title_case
        self.env.filters["kebab_case"] = kebab_case
        self.env.filters["js_string"] = js_string

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"sitemap.ts.j2"``).
            context: Dictionary of variables available inside the template.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


# ---------------------------------------------------------------------------
# Case conversion (also registered as Jinja2 filters)
# ---------------------------------------------------------------------------


def title_case(value: str) -> str:
    """Convert ``my-cool_app`` or ``my cool app`` to ``My Cool App``."""
    parts = re.split(r"[-_\s]+", value)
    return " ".join(word[:1].upper() + word[1:].lower() for word in parts if word)


def kebab_case(value: str) -> str:
    """Convert ``My Cool App!`` to ``my-cool-app``.

    Whitespace runs become a single hyphen; anything outside ``[a-z0-9-]``
    is dropped.
    """
    result = re.sub(r"\s+", "-", value.lower())
    return re.sub(r"[^a-z0-9-]", "", result)


def js_string(value: str | None) -> str:
    """Render *value* as a double-quoted JavaScript string literal."""
    return json.dumps(value or "", ensure_ascii=False)
