"""Tests for pointing the root layout at the generated SEO modules."""

from __future__ import annotations

from pathlib import Path

import pytest

from templatekit.seo.layout import (
    JSON_LD_SCRIPT,
    METADATA_BLOCK,
    SEO_IMPORTS,
    patch_layout_source,
    update_layout,
)
from templatekit.seo.models import SeoConfig

pytestmark = pytest.mark.unit

SEO_CONFIG_IMPORT = SEO_IMPORTS[0][1]
STRUCTURED_DATA_IMPORT = SEO_IMPORTS[1][1]


@pytest.fixture
def config(minimal_template) -> SeoConfig:
    return SeoConfig.from_template(minimal_template)


class TestPatchLayoutSource:
    def test_full_patch(self, layout_path: Path):
        text, notes = patch_layout_source(layout_path.read_text(encoding="utf-8"))

        assert notes == []
        assert (
            f'import "./globals.css";\n{SEO_CONFIG_IMPORT}\n{STRUCTURED_DATA_IMPORT}\n'
        ) in text
        assert METADATA_BLOCK in text
        assert "Next.js Template" not in text
        assert "{children}" + JSON_LD_SCRIPT in text
        assert "const inter = Inter" in text
        assert text.rstrip().endswith("}")

    def test_rest_of_file_untouched(self, layout_path: Path):
        original = layout_path.read_text(encoding="utf-8")
        text, _ = patch_layout_source(original)
        tail = original[original.index("export default function RootLayout") :]
        assert text.endswith(tail.replace("{children}", "{children}" + JSON_LD_SCRIPT))

    def test_existing_imports_not_duplicated(self, layout_path: Path):
        original = layout_path.read_text(encoding="utf-8")
        once, _ = patch_layout_source(original)
        twice, _ = patch_layout_source(once)
        assert twice == once
        assert twice.count(SEO_CONFIG_IMPORT) == 1
        assert twice.count("getOrganizationSchema(),") == 1

    def test_braces_inside_strings(self):
        source = (
            'import "./globals.css";\n'
            "export const metadata = {\n"
            '  description: "curly }; inside",\n'
            "  other: { nested: true },\n"
            "};\n"
            "export const viewport = { width: 1 };\n"
            "export default function L({ children }: P) {\n"
            "  return <body>{children}</body>;\n"
            "}\n"
        )
        text, notes = patch_layout_source(source)
        assert "curly" not in text
        assert "export const viewport = { width: 1 };" in text
        assert "function L({ children }: P) {\n" in text
        assert "<body>{children}" + JSON_LD_SCRIPT + "</body>" in text
        assert notes == []

    def test_missing_metadata_and_children(self):
        text, notes = patch_layout_source('import "./globals.css";\nexport default 1;\n')
        assert len(notes) == 2
        assert SEO_CONFIG_IMPORT in text
        assert "export const metadata" not in text

    def test_import_order_without_globals(self):
        source = 'import type { Metadata } from "next";\n\n<body>{children}</body>\n'
        text, _ = patch_layout_source(source)
        assert text.startswith(
            f'import type {{ Metadata }} from "next";\n{SEO_CONFIG_IMPORT}\n{STRUCTURED_DATA_IMPORT}\n'
        )


class TestUpdateLayout:
    def test_writes_then_is_idempotent(self, config, layout_path: Path):
        assert update_layout(config, layout_path) is True
        first = layout_path.read_text(encoding="utf-8")
        assert update_layout(config, layout_path) is False
        assert layout_path.read_text(encoding="utf-8") == first

    def test_missing_layout(self, config, tmp_path: Path):
        assert update_layout(config, tmp_path / "layout.tsx") is False
