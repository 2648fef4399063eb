"""Wrap the root layout's children with a component-library provider."""

from __future__ import annotations

from pathlib import Path

from templatekit.layout.structure import SourceDocument
from templatekit.utils import print_info, print_success, print_warning

GLOBALS_CSS_IMPORT = "./globals.css"
CLIENT_DIRECTIVE = "use client"


def inject_provider(layout_path: Path, provider: str, package: str) -> bool:
    """Add ``<provider>`` around ``{children}`` in *layout_path*.

    The file is left untouched when a ``<provider>`` element already appears
    in it, so repeated runs never double-wrap. It is also left untouched when
    no ``{children}`` expression can be found, so a later run can still
    complete the setup.

    Args:
        layout_path: Root layout file to patch.
        provider: Component name, e.g. ``"HeroUIProvider"``.
        package: Module that exports *provider*.

    Returns:
        ``True`` if the file was written.
    """
    name = layout_path.name
    if not layout_path.is_file():
        print_warning(f"{name} not found, skipping {provider} setup")
        return False

    doc = SourceDocument(layout_path.read_text(encoding="utf-8"))
    if doc.contains(f"<{provider}>"):
        print_info(f"{provider} already configured in {name}")
        return False

    if doc.find_children() is None:
        print_warning(f"No {{children}} expression found in {name}; {provider} not added")
        return False

    doc.ensure_directive(CLIENT_DIRECTIVE)

    statement = f'import {{ {provider} }} from "{package}";'
    if not doc.contains(statement):
        if not doc.insert_import(statement, after_source=GLOBALS_CSS_IMPORT):
            print_warning(
                f'No import of "{GLOBALS_CSS_IMPORT}" in {name}; '
                f"placed the {provider} import after the last import instead"
            )

    doc.wrap_children(f"<{provider}>", f"</{provider}>")

    layout_path.write_text(doc.text, encoding="utf-8")
    print_success(f"Updated {name} with {provider}")
    return True


def update_layout_for_heroui(layout_path: Path) -> bool:
    return inject_provider(layout_path, "HeroUIProvider", "@heroui/react")


def update_layout_for_chakra(layout_path: Path) -> bool:
    return inject_provider(layout_path, "ChakraProvider", "@chakra-ui/react")
