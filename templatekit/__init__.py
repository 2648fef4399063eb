"""templatekit -- customization toolkit for the Next.js starter template.

Two commands are exposed:

* ``templatekit-setup`` renames the template and installs a component library.
* ``templatekit-seo`` generates the SEO scaffold and patches the root layout.

Quick usage::

    import asyncio

    from templatekit.config import Settings
    from templatekit.customize import CustomizePipeline

    settings = Settings(root_dir="/path/to/template")
    summary = asyncio.run(CustomizePipeline(settings).run("Acme Store"))
"""

__version__ = "0.1.0"
