"""Point the root layout at the generated SEO modules."""

from __future__ import annotations

from pathlib import Path

from templatekit.layout.providers import GLOBALS_CSS_IMPORT
from templatekit.layout.structure import SourceDocument
from templatekit.seo.models import SeoConfig
from templatekit.utils import print_info, print_success, print_warning

SEO_CONFIG_MODULE = "@/lib/seo.config"
STRUCTURED_DATA_MODULE = "@/lib/structured-data"

SEO_IMPORTS: tuple[tuple[str, str], ...] = (
    (SEO_CONFIG_MODULE, f'import {{ seoConfig }} from "{SEO_CONFIG_MODULE}";'),
    (
        STRUCTURED_DATA_MODULE,
        f'import {{ getOrganizationSchema, getWebsiteSchema }} from "{STRUCTURED_DATA_MODULE}";',
    ),
)

METADATA_BLOCK = """export const metadata: Metadata = {
  metadataBase: new URL(seoConfig.siteUrl),
  title: {
    default: seoConfig.defaultTitle,
    template: seoConfig.titleTemplate,
  },
  description: seoConfig.description,
  keywords: [...seoConfig.keywords],
  authors: [{ name: seoConfig.author }],
  creator: seoConfig.author,
  openGraph: {
    type: "website",
    locale: seoConfig.locale,
    url: seoConfig.siteUrl,
    siteName: seoConfig.siteName,
    title: seoConfig.defaultTitle,
    description: seoConfig.description,
    images: [...seoConfig.openGraph.images],
  },
  twitter: {
    card: "summary_large_image",
    title: seoConfig.defaultTitle,
    description: seoConfig.description,
    site: seoConfig.twitter.site,
    creator: seoConfig.twitter.creator,
    images: seoConfig.openGraph.images.map((img) => img.url),
  },
  robots: {
    index: true,
    follow: true,
    googleBot: {
      index: true,
      follow: true,
      "max-video-preview": -1,
      "max-image-preview": "large",
      "max-snippet": -1,
    },
  },
  verification: {
    google: seoConfig.verification.google,
    yandex: seoConfig.verification.yandex,
    // bing: seoConfig.verification.bing, // Uncomment when you have the code
  },
};"""

JSON_LD_MARKER = "getOrganizationSchema()"

JSON_LD_SCRIPT = """
        <script
          type="application/ld+json"
          dangerouslySetInnerHTML={{
            __html: JSON.stringify([
              getOrganizationSchema(),
              getWebsiteSchema(),
            ]),
          }}
        />"""


def patch_layout_source(text: str) -> tuple[str, list[str]]:
    """Apply the SEO changes to layout source *text*.

    Returns:
        ``(new_text, notes)`` where *notes* lists anything that could not be
        applied (missing metadata export, missing ``{children}``).
    """
    doc = SourceDocument(text)
    notes: list[str] = []

    anchor = GLOBALS_CSS_IMPORT
    for module, statement in SEO_IMPORTS:
        if not doc.has_import_from(module):
            doc.insert_import(statement, after_source=anchor)
        anchor = module

    span = doc.find_object_declaration("metadata")
    if span is None:
        notes.append("no 'export const metadata' found; metadata left unchanged")
    else:
        doc.replace_span(span, METADATA_BLOCK)

    if not _has_code(doc, JSON_LD_MARKER):
        if not doc.insert_after_children(JSON_LD_SCRIPT):
            notes.append("no {children} expression found; JSON-LD script not added")

    return doc.text, notes


def _has_code(doc: SourceDocument, needle: str) -> bool:
    pos = doc.text.find(needle)
    while pos != -1:
        if doc.in_code(pos):
            return True
        pos = doc.text.find(needle, pos + 1)
    return False


def update_layout(config: SeoConfig, layout_path: Path) -> bool:
    """Patch *layout_path* to use ``seoConfig`` and emit site JSON-LD.

    The metadata export is located by brace matching, so other statements
    in the file are never touched. Re-running on an already patched layout
    leaves it byte-identical.

    Returns:
        ``True`` if the file was written.
    """
    name = layout_path.name
    if not layout_path.is_file():
        print_warning(f"{name} not found, skipping layout update")
        return False

    original = layout_path.read_text(encoding="utf-8")
    patched, notes = patch_layout_source(original)
    for note in notes:
        print_warning(f"{name}: {note}")

    if patched == original:
        print_info(f"{name} already uses {config.site_name} SEO settings")
        return False

    layout_path.write_text(patched, encoding="utf-8")
    print_success(f"Updated: {name}")
    return True
