"""Structural patching of the template's root layout file."""

from templatekit.layout.providers import (
    inject_provider,
    update_layout_for_chakra,
    update_layout_for_heroui,
)
from templatekit.layout.structure import SourceDocument

__all__ = [
    "SourceDocument",
    "inject_provider",
    "update_layout_for_chakra",
    "update_layout_for_heroui",
]
