"""Interactive collection of SEO answers."""

from __future__ import annotations

import json
from pathlib import Path

from templatekit.prompts import Prompter, print_menu
from templatekit.seo.models import BusinessType, SeoConfig, SocialLinks
from templatekit.templates import title_case
from templatekit.utils import console, load_json

DEFAULT_PROJECT_NAME = "my-app"


def read_project_name(package_json: Path) -> str:
    """The ``name`` field of *package_json*, or ``my-app`` if unreadable."""
    try:
        name = load_json(package_json).get("name")
    except (OSError, json.JSONDecodeError, UnicodeDecodeError):
        return DEFAULT_PROJECT_NAME
    return name if isinstance(name, str) and name else DEFAULT_PROJECT_NAME


def parse_keywords(raw: str) -> list[str]:
    """Split comma-separated input, trimming and dropping empty entries."""
    return [part.strip() for part in raw.split(",") if part.strip()]


def select_business_type(prompter: Prompter) -> BusinessType:
    console.print("\n[bold]Select your business type:[/bold]\n")
    options = [(bt.value, bt.display_name) for bt in BusinessType]
    print_menu(options)
    key = prompter.choose(
        options,
        f"\nEnter your choice (1-{len(options)}): ",
        "Invalid choice. Please try again.",
    )
    return BusinessType(key)


def collect_seo_info(prompter: Prompter, package_json: Path) -> SeoConfig:
    """Prompt for every ``SeoConfig`` field in turn.

    The site name defaults to the title-cased ``package.json`` name and the
    locale to ``en``. Social profiles are optional; blank answers are left
    unset.
    """
    default_site_name = title_case(read_project_name(package_json))

    console.print("\n[bold]Please provide the following information:[/bold]\n")

    site_name = prompter.ask(f"Site name ({default_site_name}): ", default_site_name)
    site_tagline = prompter.ask("Site tagline/description: ")
    site_url = prompter.ask("Production URL (e.g., https://example.com): ")
    author = prompter.ask("Author/Company name: ")
    locale = prompter.ask("Primary language (en): ", "en")

    business_type = select_business_type(prompter)

    keywords = parse_keywords(
        prompter.ask("\nPrimary keywords (comma-separated, 3-5 recommended): ")
    )

    console.print("\n[bold]Social media[/bold] (optional, press Enter to skip):\n")
    social = SocialLinks(
        twitter=prompter.ask("Twitter/X handle (without @): "),
        facebook=prompter.ask("Facebook page URL: "),
        linkedin=prompter.ask("LinkedIn URL: "),
    )

    return SeoConfig(
        site_name=site_name,
        site_tagline=site_tagline,
        site_url=site_url,
        author=author,
        locale=locale,
        business_type=business_type,
        keywords=keywords,
        social=social,
    )
