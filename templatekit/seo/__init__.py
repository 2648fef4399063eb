"""SEO scaffold generation.

Quick usage::

    from templatekit.seo import SeoPipeline

    summary = await SeoPipeline(settings).run(template_path="seo-template.json")
"""

from templatekit.seo.loader import load_template_file
from templatekit.seo.models import BusinessType, SeoConfig, validate_seo_config
from templatekit.seo.pipeline import SeoPipeline

__all__ = [
    "BusinessType",
    "SeoConfig",
    "SeoPipeline",
    "load_template_file",
    "validate_seo_config",
]
