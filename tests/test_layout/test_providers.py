"""Tests for wrapping the root layout with a component-library provider."""

from __future__ import annotations

from pathlib import Path

import pytest

from templatekit.layout.providers import (
    inject_provider,
    update_layout_for_chakra,
    update_layout_for_heroui,
)

pytestmark = pytest.mark.unit

HEROUI_IMPORT = 'import { HeroUIProvider } from "@heroui/react";'


class TestInjectProvider:
    def test_heroui(self, layout_path: Path):
        assert update_layout_for_heroui(layout_path) is True
        text = layout_path.read_text(encoding="utf-8")

        assert text.startswith('"use client";\n\nimport type { Metadata } from "next";')
        assert f'import "./globals.css";\n{HEROUI_IMPORT}\n' in text
        assert (
            "<HeroUIProvider>\n"
            "        {children}\n"
            "      </HeroUIProvider>"
        ) in text
        assert text.count("{children}") == 1

    def test_second_run_is_byte_identical(self, layout_path: Path):
        update_layout_for_heroui(layout_path)
        first = layout_path.read_bytes()
        assert update_layout_for_heroui(layout_path) is False
        assert layout_path.read_bytes() == first

    def test_chakra(self, layout_path: Path):
        assert update_layout_for_chakra(layout_path) is True
        text = layout_path.read_text(encoding="utf-8")
        assert 'import { ChakraProvider } from "@chakra-ui/react";' in text
        assert "<ChakraProvider>" in text
        assert "</ChakraProvider>" in text

    def test_existing_directive_is_kept_single(self, layout_path: Path):
        original = layout_path.read_text(encoding="utf-8")
        layout_path.write_text('"use client";\n\n' + original, encoding="utf-8")
        update_layout_for_heroui(layout_path)
        assert layout_path.read_text(encoding="utf-8").count('"use client"') == 1

    def test_missing_file(self, tmp_path: Path):
        assert update_layout_for_heroui(tmp_path / "layout.tsx") is False
        assert not (tmp_path / "layout.tsx").exists()

    def test_without_globals_import_uses_last_import(self, layout_path: Path):
        text = layout_path.read_text(encoding="utf-8").replace('import "./globals.css";\n', "")
        layout_path.write_text(text, encoding="utf-8")

        assert update_layout_for_heroui(layout_path) is True
        patched = layout_path.read_text(encoding="utf-8")
        assert f'import {{ Inter }} from "next/font/google";\n{HEROUI_IMPORT}\n' in patched

    def test_without_children_leaves_file_untouched(self, tmp_path: Path):
        layout = tmp_path / "layout.tsx"
        original = 'import "./globals.css";\n\nexport default function L() { return <body />; }\n'
        layout.write_text(original, encoding="utf-8")

        assert inject_provider(layout, "XProvider", "x-ui") is False
        assert layout.read_text(encoding="utf-8") == original

    def test_apostrophe_in_jsx_text_does_not_hide_children(self, tmp_path: Path):
        layout = tmp_path / "layout.tsx"
        layout.write_text(
            'import "./globals.css";\n'
            "export default function L({ children }) {\n"
            "  return <body><p>Don't</p>{children}</body>;\n"
            "}\n",
            encoding="utf-8",
        )
        assert inject_provider(layout, "XProvider", "x-ui") is True
        text = layout.read_text(encoding="utf-8")
        assert "<p>Don't</p><XProvider>" in text
        assert "{children}\n      </XProvider></body>" in text

    def test_mentioning_provider_name_does_not_block_wrap(self, tmp_path: Path):
        layout = tmp_path / "layout.tsx"
        layout.write_text(
            'import { XProvider } from "x-ui";\n'
            'import "./globals.css";\n'
            "export default function L({ children }) {\n"
            "  return <body>{children}</body>;\n"
            "}\n",
            encoding="utf-8",
        )
        assert inject_provider(layout, "XProvider", "x-ui") is True
        text = layout.read_text(encoding="utf-8")
        assert text.count('import { XProvider } from "x-ui";') == 1
        assert "<XProvider>" in text

    def test_commented_children_is_not_wrapped(self, tmp_path: Path):
        layout = tmp_path / "layout.tsx"
        layout.write_text(
            'import "./globals.css";\n'
            "// renders {children} below\n"
            "export default function L(props) {\n"
            "  return (\n"
            "      <body>\n"
            "        {children}\n"
            "      </body>\n"
            "  );\n"
            "}\n",
            encoding="utf-8",
        )
        inject_provider(layout, "XProvider", "x-ui")
        text = layout.read_text(encoding="utf-8")
        assert "// renders {children} below\n" in text
        assert "<XProvider>\n        {children}\n      </XProvider>" in text
