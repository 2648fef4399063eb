"""Replacement rule table for renaming the starter template.

Each rule pairs a literal string shipped in the template with its
project-specific replacement. Matching is literal: a rule whose source text
is absent from a file simply does nothing.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

from templatekit.errors import InvalidProjectNameError
from templatekit.templates import kebab_case, title_case

_PROJECT_NAME_RE = re.compile(r"^[a-zA-Z0-9\s_-]+$")


class ReplacementRule(BaseModel):
    """A literal ``source`` -> ``target`` substitution."""

    model_config = ConfigDict(frozen=True)

    source: str
    target: str


def get_replacements(project_name: str) -> tuple[ReplacementRule, ...]:
    """Return the ordered rule table for *project_name*.

    Order only matters where sources overlap: the full README heading and
    the ``default:``/``template:`` metadata strings must run before the bare
    ``Next.js Template`` rule consumes their shared text.
    """
    title = title_case(project_name)
    kebab = kebab_case(project_name)

    pairs = [
        # README.md
        ("# Next.js Template", f"# {title}"),
        (
            "A comprehensive Next.js template with routing, API routes, loading "
            "states, and error boundaries.",
            f"{title} - Built with Next.js",
        ),
        # package.json
        ('"name": "next.js-template-basic"', f'"name": "{kebab}"'),
        # src/app/layout.tsx
        ('default: "Next.js Template"', f'default: "{title}"'),
        ('template: "%s | Next.js Template"', f'template: "%s | {title}"'),
        ("keywords: [", "keywords: ["),
        (
            '["Next.js", "React", "TypeScript", "Template"]',
            '["Next.js", "React", "TypeScript"]',
        ),
        # src/app/page.tsx
        ("Next.js Template", title),
        (
            "A comprehensive starter template with routing, API routes, loading\n"
            "            states, and error boundaries.",
            f"Welcome to {title}",
        ),
        # src/app/about/page.tsx
        ("About page for the Next.js template", f"About {title}"),
        ("About This Template", f"About {title}"),
        (
            "This is a comprehensive Next.js template demonstrating best practices "
            "for routing, API routes, loading states, and error handling.",
            f"{title} is a Next.js application.",
        ),
        # src/app/dashboard/settings/page.tsx
        (
            "Note: This is a template page. Form inputs are disabled for demonstration.",
            "Configure your application settings here.",
        ),
    ]
    return tuple(ReplacementRule(source=s, target=t) for s, t in pairs)


def is_valid_project_name(name: str | None) -> bool:
    """Letters, digits, spaces, hyphens and underscores; not blank."""
    if not name or not name.strip():
        return False
    return bool(_PROJECT_NAME_RE.match(name))


def validate_project_name(name: str | None) -> str:
    """Return *name* unchanged or raise :class:`InvalidProjectNameError`."""
    if not is_valid_project_name(name):
        raise InvalidProjectNameError(name or "")
    return name  # type: ignore[return-value]
