"""Add component-library entries to ``tailwind.config.ts``."""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, Field

from templatekit.layout.structure import SourceDocument, Span
from templatekit.utils import print_success, print_warning

_CONTENT_RE = re.compile(r"\bcontent\s*:\s*\[")
_PLUGINS_RE = re.compile(r"\bplugins\s*:\s*\[")


class TailwindConfig(BaseModel):
    """Tailwind additions a component library needs."""

    content: list[str] = Field(default_factory=list, description="Globs appended to 'content'")
    plugins: list[str] = Field(default_factory=list, description="Plugin expressions, verbatim")


def _append_to_array(doc: SourceDocument, pattern: re.Pattern[str], items: list[str], multiline: bool) -> bool:
    """Append the *items* missing from the array found by *pattern*."""
    match = doc.find_code(pattern)
    if match is None:
        return False
    open_pos = match.end() - 1
    close_pos = doc.match_bracket(open_pos)
    if close_pos is None:
        return False

    existing = doc.text[open_pos + 1 : close_pos]
    missing = [item for item in items if item not in existing]
    if not missing:
        return False

    body = existing.rstrip()
    if multiline:
        if body and not body.endswith(","):
            body += ","
        additions = "".join(f'\n    "{item}",' for item in missing)
        new_inner = f"{body}{additions}\n  "
    else:
        parts = [body.strip().rstrip(",")] if body.strip() else []
        new_inner = ", ".join(parts + missing)

    text = doc.text
    doc.replace_span(Span(open_pos + 1, close_pos), new_inner)
    return doc.text != text


def _add_plugins_property(doc: SourceDocument, plugins: list[str]) -> bool:
    """Insert ``plugins: [...]`` before the config object's closing brace."""
    span = doc.find_object_declaration("config")
    if span is not None:
        close_pos = doc.text.rfind("}", span.start, span.end)
    else:
        close_pos = doc.last_code_index("}")
    if close_pos is None or close_pos < 0:
        return False

    before = doc.text[:close_pos].rstrip()
    prefix = "" if before.endswith((",", "{")) else ","
    insert_from = len(before)
    property_text = f"{prefix}\n  plugins: [{', '.join(plugins)}],\n"
    doc.replace_span(Span(insert_from, close_pos), property_text)
    return True


def update_tailwind_config(path: Path, tailwind: TailwindConfig | None) -> bool:
    """Merge *tailwind* into the config at *path*.

    Missing files are skipped with a warning. Entries already present are
    never duplicated, so the function is safe to re-run.

    Returns:
        ``True`` if the file was written.
    """
    if tailwind is None:
        return False
    if not path.is_file():
        print_warning(f"{path.name} not found, skipping tailwind config update")
        return False

    doc = SourceDocument(path.read_text(encoding="utf-8"))
    changed = False

    if tailwind.content:
        changed |= _append_to_array(doc, _CONTENT_RE, tailwind.content, multiline=True)

    if tailwind.plugins:
        if doc.find_code(_PLUGINS_RE) is None:
            changed |= _add_plugins_property(doc, tailwind.plugins)
        else:
            changed |= _append_to_array(doc, _PLUGINS_RE, tailwind.plugins, multiline=False)

    if not changed:
        return False

    path.write_text(doc.text, encoding="utf-8")
    print_success(f"Updated {path.name}")
    return True
