"""CLI entry points for ``templatekit-setup`` and ``templatekit-seo``."""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence

from templatekit.config import Settings
from templatekit.customize.pipeline import CustomizePipeline
from templatekit.errors import InvalidProjectNameError, PackageInstallError
from templatekit.seo.pipeline import SeoPipeline
from templatekit.utils import console, print_error


def _setup_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="templatekit-setup",
        description="Customize the Next.js starter template for your project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  templatekit-setup\n"
            '  templatekit-setup "Acme Store"\n'
        ),
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        default=None,
        help="Project name (prompted for when omitted)",
    )
    return parser


def _seo_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="templatekit-seo",
        description="Generate SEO configuration, sitemap, robots and manifest files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  templatekit-seo\n"
            "  templatekit-seo --template=seo-template.json\n"
        ),
    )
    parser.add_argument(
        "--template",
        default=None,
        help="Path to a JSON file pre-filling the SEO answers",
    )
    return parser


def setup_main(argv: Sequence[str] | None = None) -> None:
    """Entry point for ``templatekit-setup``."""
    args = _setup_parser().parse_args(argv)
    pipeline = CustomizePipeline(Settings.from_env())

    try:
        asyncio.run(pipeline.run(args.project_name))
    except InvalidProjectNameError as exc:
        print_error(f"\nError: {exc}\n")
        sys.exit(1)
    except PackageInstallError as exc:
        print_error(f"\n{exc}\n")
        sys.exit(1)
    except (KeyboardInterrupt, EOFError):
        console.print("\nSetup aborted.")
        sys.exit(1)
    except Exception as exc:
        print_error(f"\nError during setup: {exc}")
        sys.exit(1)


def seo_main(argv: Sequence[str] | None = None) -> None:
    """Entry point for ``templatekit-seo``."""
    args = _seo_parser().parse_args(argv)
    pipeline = SeoPipeline(Settings.from_env())

    try:
        asyncio.run(pipeline.run(args.template))
    except (KeyboardInterrupt, EOFError):
        console.print("\nSEO setup aborted.")
        sys.exit(1)
    except Exception as exc:
        print_error(f"\nError during SEO setup: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    setup_main()
