"""Load SEO answers from a JSON template file."""

from __future__ import annotations

import json
from pathlib import Path

from templatekit.errors import TemplateLoadError
from templatekit.seo.models import SeoConfig, strip_template_annotations, validate_seo_config
from templatekit.utils import load_json, print_error


def read_template(path: Path) -> dict:
    """Read and parse *path*.

    Raises:
        TemplateLoadError: If the file is missing or is not valid JSON.
    """
    if not path.is_file():
        raise TemplateLoadError(f"Template file not found: {path}")
    try:
        return load_json(path)
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
        raise TemplateLoadError(f"Error loading template file: {exc}") from exc


def load_template_file(path: str | Path, root: Path | None = None) -> SeoConfig | None:
    """Load and validate an SEO template.

    Relative paths are resolved against *root* (the working directory when
    omitted). Every failure prints a message and returns ``None`` so the
    caller can fall back to another input source.
    """
    candidate = Path(path)
    if not candidate.is_absolute():
        candidate = (root or Path.cwd()) / candidate

    try:
        data = read_template(candidate)
    except TemplateLoadError as exc:
        print_error(f"\n{exc}\n")
        return None

    data = strip_template_annotations(data)
    if not validate_seo_config(data):
        return None
    return SeoConfig.from_template(data)
