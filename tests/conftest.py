"""Shared pytest fixtures for the templatekit test suite.

Provides reusable fixtures for:
- A miniature copy of the Next.js starter template under ``tmp_path``
- ``Settings`` pointing at that tree
- Scripted prompters that replay canned answers
- A mocked package-manager runner
"""

from __future__ import annotations

import json
import textwrap
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import pytest

from templatekit.config import Settings
from templatekit.prompts import Prompter


# ---------------------------------------------------------------------------
# Template file contents
# ---------------------------------------------------------------------------

README_MD = textwrap.dedent(
    """\
    # Next.js Template

    A comprehensive Next.js template with routing, API routes, loading states, and error boundaries.

    ## Getting Started

    Run `npm run dev` and open http://localhost:3000.
    """
)

PACKAGE_JSON = json.dumps(
    {
        "name": "next.js-template-basic",
        "version": "0.1.0",
        "private": True,
        "scripts": {"dev": "next dev", "build": "next build"},
    },
    indent=2,
) + "\n"

LAYOUT_TSX = textwrap.dedent(
    """\
    import type { Metadata } from "next";
    import { Inter } from "next/font/google";
    import "./globals.css";

    const inter = Inter({ subsets: ["latin"] });

    export const metadata: Metadata = {
      title: {
        default: "Next.js Template",
        template: "%s | Next.js Template",
      },
      description: "A comprehensive Next.js template with routing, API routes, loading states, and error boundaries.",
      keywords: ["Next.js", "React", "TypeScript", "Template"],
    };

    export default function RootLayout({
      children,
    }: Readonly<{
      children: React.ReactNode;
    }>) {
      return (
        <html lang="en">
          <body className={inter.className}>
            {children}
          </body>
        </html>
      );
    }
    """
)

PAGE_TSX = (
    "export default function Home() {\n"
    "  return (\n"
    "    <main>\n"
    "      <h1>Next.js Template</h1>\n"
    "      <p>\n"
    "        A comprehensive starter template with routing, API routes, loading\n"
    "            states, and error boundaries.\n"
    "      </p>\n"
    "    </main>\n"
    "  );\n"
    "}\n"
)

ABOUT_TSX = textwrap.dedent(
    """\
    import type { Metadata } from "next";

    export const metadata: Metadata = {
      title: "About",
      description: "About page for the Next.js template",
    };

    export default function AboutPage() {
      return (
        <section>
          <h1>About This Template</h1>
          <p>This is a comprehensive Next.js template demonstrating best practices for routing, API routes, loading states, and error handling.</p>
        </section>
      );
    }
    """
)

SETTINGS_TSX = textwrap.dedent(
    """\
    export default function SettingsPage() {
      return (
        <div>
          <h1>Settings</h1>
          <p>Note: This is a template page. Form inputs are disabled for demonstration.</p>
        </div>
      );
    }
    """
)

TAILWIND_CONFIG_TS = textwrap.dedent(
    """\
    import type { Config } from "tailwindcss";

    const config: Config = {
      content: [
        "./src/pages/**/*.{js,ts,jsx,tsx,mdx}",
        "./src/components/**/*.{js,ts,jsx,tsx,mdx}",
        "./src/app/**/*.{js,ts,jsx,tsx,mdx}",
      ],
      theme: {
        extend: {},
      },
      plugins: [],
    };
    export default config;
    """
)

TEMPLATE_FILES: dict[str, str] = {
    "README.md": README_MD,
    "package.json": PACKAGE_JSON,
    "src/app/layout.tsx": LAYOUT_TSX,
    "src/app/page.tsx": PAGE_TSX,
    "src/app/about/page.tsx": ABOUT_TSX,
    "src/app/dashboard/settings/page.tsx": SETTINGS_TSX,
    "tailwind.config.ts": TAILWIND_CONFIG_TS,
}


# ---------------------------------------------------------------------------
# Paths & settings
# ---------------------------------------------------------------------------

@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """A fresh copy of the starter template's customizable files."""
    root = tmp_path / "template"
    for rel, content in TEMPLATE_FILES.items():
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def settings(template_root: Path) -> Settings:
    """Settings rooted at the temporary template, without the clean install."""
    return Settings(root_dir=template_root, clean_install=False)


@pytest.fixture
def layout_path(template_root: Path) -> Path:
    return template_root / "src" / "app" / "layout.tsx"


# ---------------------------------------------------------------------------
# Prompts & commands
# ---------------------------------------------------------------------------

class ScriptedInput:
    """Replays answers in order and records every question asked."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = iter(answers)
        self.questions: list[str] = []

    def __call__(self, question: str) -> str:
        self.questions.append(question)
        try:
            return next(self._answers)
        except StopIteration:
            raise AssertionError(f"Unexpected prompt: {question!r}") from None


@pytest.fixture
def make_prompter() -> Callable[..., tuple[Prompter, ScriptedInput]]:
    """Factory: ``prompter, script = make_prompter("answer 1", "answer 2")``."""

    def _make(*answers: str) -> tuple[Prompter, ScriptedInput]:
        script = ScriptedInput(answers)
        return Prompter(input_func=script), script

    return _make


@pytest.fixture
def runner() -> AsyncMock:
    """Package-manager runner that always succeeds."""
    return AsyncMock(return_value=(0, "", ""))


@pytest.fixture
def minimal_template() -> dict[str, Any]:
    """The smallest SEO template document that passes validation."""
    return {
        "siteName": "A",
        "siteTagline": "B",
        "siteUrl": "https://a.com",
        "author": "C",
        "businessType": "blog",
        "keywords": [],
    }
