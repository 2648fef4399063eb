"""SEO setup orchestrator.

The configuration comes from the first input source that yields a valid
``SeoConfig``:

1. ``FLAG`` -- the ``--template=<path>`` argument, when given.
2. ``TEMPLATE_PROMPT`` -- a template path entered at the prompt, when the
   user says they have one.
3. ``INTERACTIVE`` -- field-by-field questions; always succeeds.

After a confirmation the scaffold files are written, the root layout is
patched and the usage guide is generated.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from templatekit.config import Settings
from templatekit.prompts import Prompter
from templatekit.seo.collector import collect_seo_info
from templatekit.seo.generators import GeneratedFile, generated_guide, generated_source_files
from templatekit.seo.layout import update_layout
from templatekit.seo.loader import load_template_file
from templatekit.seo.models import SeoConfig
from templatekit.utils import (
    BANNER_WIDTH,
    console,
    display_path,
    ensure_dir,
    print_banner,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
    write_text_async,
)


class ConfigSource(str, Enum):
    FLAG = "flag"
    TEMPLATE_PROMPT = "template_prompt"
    INTERACTIVE = "interactive"
    READY = "ready"


class SeoPipeline:
    """Drives one SEO setup run against ``settings.root_dir``."""

    def __init__(self, settings: Settings, prompter: Prompter | None = None) -> None:
        self.settings = settings
        self.prompter = prompter or Prompter()

    # ------------------------------------------------------------------
    # Configuration sources
    # ------------------------------------------------------------------

    def resolve_config(self, template_path: str | None = None) -> tuple[SeoConfig, ConfigSource]:
        """Walk the input sources in order until one produces a config.

        Returns:
            The config and the source that produced it.
        """
        state = ConfigSource.FLAG if template_path else ConfigSource.TEMPLATE_PROMPT
        config: SeoConfig | None = None
        produced_by = state

        while state is not ConfigSource.READY:
            produced_by = state
            if state is ConfigSource.FLAG:
                console.print(
                    f"Loading configuration from template: {template_path}\n", markup=False
                )
                config = load_template_file(template_path, self.settings.root_dir)
                if config is None:
                    self._fallback_notice()
                state = ConfigSource.READY if config else ConfigSource.TEMPLATE_PROMPT
            elif state is ConfigSource.TEMPLATE_PROMPT:
                config = self._config_from_prompted_template()
                state = ConfigSource.READY if config else ConfigSource.INTERACTIVE
            else:
                config = collect_seo_info(self.prompter, self.settings.package_json_path)
                state = ConfigSource.READY

        assert config is not None
        return config, produced_by

    def _config_from_prompted_template(self) -> SeoConfig | None:
        if not self.prompter.confirm("Do you have a template file? (y/N): ", default=False):
            return None
        default = self.settings.default_seo_template
        path = self.prompter.ask(f"Enter template file path ({default}): ", default)
        config = load_template_file(path, self.settings.root_dir)
        if config is None:
            self._fallback_notice()
        return config

    def _fallback_notice(self) -> None:
        print_info("Falling back to interactive mode...")

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------

    async def run(self, template_path: str | None = None) -> dict[str, Any]:
        """Execute the SEO setup flow.

        Returns:
            A summary dict: ``cancelled``, ``source``, ``generated`` (relative
            paths written) and ``layout_updated``.
        """
        print_banner("SEO Setup for Next.js")
        console.print("This script will help you set up comprehensive SEO for your site.\n")

        config, source = self.resolve_config(template_path)
        self._print_config_summary(config)

        if not self.prompter.confirm("\nProceed with SEO setup? (Y/n): ", default=True):
            print_warning("\nSEO setup cancelled.\n")
            return {"cancelled": True, "source": source.value, "generated": [], "layout_updated": False}

        console.print("\n[bold]Generating SEO files...[/bold]\n")
        written = [await self._write(f) for f in generated_source_files(config)]

        console.print("\n[bold]Updating existing files...[/bold]\n")
        layout_updated = update_layout(config, self.settings.layout_path)

        console.print("\n[bold]Generating documentation...[/bold]\n")
        written.append(await self._write(generated_guide(config)))

        ensure_dir(self.settings.og_dir)
        print_success("Created: public/og/ (add your Open Graph images here)")

        self._print_report(written, layout_updated)
        return {
            "cancelled": False,
            "source": source.value,
            "generated": written,
            "layout_updated": layout_updated,
        }

    async def _write(self, generated: GeneratedFile) -> str:
        target = self.settings.root_dir / generated.path
        await write_text_async(target, generated.content)
        print_success(f"Created: {generated.path}")
        return generated.path

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def _print_config_summary(self, config: SeoConfig) -> None:
        console.print()
        print_summary_table(
            {
                "Site Name": config.site_name,
                "URL": config.site_url,
                "Business Type": config.business_type.value,
                "Keywords": ", ".join(config.keywords),
            },
            title="Configuration Summary",
        )

    def _print_report(self, written: list[str], layout_updated: bool) -> None:
        layout = display_path(self.settings.layout_path, self.settings.root_dir)
        console.print("\n" + "=" * BANNER_WIDTH)
        console.print("[bold green]SEO Setup Complete![/bold green]\n")
        console.print("Generated Files:")
        for path in written:
            console.print(f"  {path}")
        console.print("\nUpdated Files:")
        console.print(f"  {layout}" if layout_updated else "  (none)")
        console.print("\nNext Steps:")
        console.print("  1. Add verification codes in src/lib/seo.config.ts")
        console.print("  2. Create Open Graph images in public/og/")
        console.print("  3. Review docs/SEO_GUIDE.md for detailed instructions")
        console.print("  4. Test your metadata: https://metatags.io")
        console.print("=" * BANNER_WIDTH + "\n")
