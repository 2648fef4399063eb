"""Project renaming and component-library installation.

Quick usage::

    from templatekit.customize import CustomizePipeline

    summary = await CustomizePipeline(settings).run("Acme Store")
"""

from templatekit.customize.libraries import COMPONENT_LIBRARIES, get_library
from templatekit.customize.patcher import update_file
from templatekit.customize.pipeline import CustomizePipeline
from templatekit.customize.replacements import ReplacementRule, get_replacements

__all__ = [
    "COMPONENT_LIBRARIES",
    "CustomizePipeline",
    "ReplacementRule",
    "get_library",
    "get_replacements",
    "update_file",
]
