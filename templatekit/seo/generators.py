"""Render the SEO scaffold files.

Every ``generate_*`` function is pure: it takes a validated ``SeoConfig`` and
returns the full file content as text. Writing is done by
:class:`templatekit.seo.pipeline.SeoPipeline`.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from templatekit.seo.models import BusinessType, SeoConfig
from templatekit.templates import TemplateRenderer

_TEMPLATE_DIR = Path(__file__).parent / "templates"

# Static routes of the starter template, listed in the generated sitemap.
SITEMAP_ROUTES: tuple[str, ...] = ("", "/about", "/dashboard", "/dashboard/settings")
ROBOTS_DISALLOW: tuple[str, ...] = ("/api/", "/admin/")
MANIFEST_ICONS: tuple[dict[str, str], ...] = (
    {"src": "/icon-192.png", "sizes": "192x192"},
    {"src": "/icon-512.png", "sizes": "512x512"},
)


class GeneratedFile(BaseModel):
    """A rendered file and its path relative to the project root."""

    path: str
    content: str


@lru_cache(maxsize=1)
def get_renderer() -> TemplateRenderer:
    return TemplateRenderer(_TEMPLATE_DIR)


def _render(template: str, config: SeoConfig | None = None, **extra: Any) -> str:
    return get_renderer().render(template, {"config": config, **extra})


def change_frequency(business_type: BusinessType) -> str:
    """Sitemap ``changeFrequency``: blogs publish daily, everything else weekly."""
    return "daily" if business_type is BusinessType.BLOG else "weekly"


def generate_seo_config(config: SeoConfig) -> str:
    return _render("seo.config.ts.j2", config)


def generate_metadata_helper() -> str:
    """The metadata helper reads everything from ``seo.config`` at runtime."""
    return _render("metadata-helper.ts.j2")


def generate_structured_data(config: SeoConfig) -> str:
    """JSON-LD helpers; ``getArticleSchema`` is included for blogs only."""
    return _render("structured-data.tsx.j2", config)


def generate_sitemap(config: SeoConfig) -> str:
    return _render(
        "sitemap.ts.j2",
        config,
        routes=SITEMAP_ROUTES,
        change_frequency=change_frequency(config.business_type),
    )


def generate_robots(config: SeoConfig) -> str:
    return _render("robots.ts.j2", config, disallow=list(ROBOTS_DISALLOW))


def generate_manifest(config: SeoConfig) -> str:
    return _render("manifest.ts.j2", config, icons=MANIFEST_ICONS)


def generate_seo_guide(config: SeoConfig) -> str:
    return _render("SEO_GUIDE.md.j2", config, icons=MANIFEST_ICONS)


def generated_source_files(config: SeoConfig) -> list[GeneratedFile]:
    """The source modules written before the layout is patched."""
    return [
        GeneratedFile(path="src/lib/seo.config.ts", content=generate_seo_config(config)),
        GeneratedFile(path="src/lib/metadata-helper.ts", content=generate_metadata_helper()),
        GeneratedFile(path="src/lib/structured-data.tsx", content=generate_structured_data(config)),
        GeneratedFile(path="src/app/sitemap.ts", content=generate_sitemap(config)),
        GeneratedFile(path="src/app/robots.ts", content=generate_robots(config)),
        GeneratedFile(path="src/app/manifest.ts", content=generate_manifest(config)),
    ]


def generated_guide(config: SeoConfig) -> GeneratedFile:
    return GeneratedFile(path="docs/SEO_GUIDE.md", content=generate_seo_guide(config))
