"""Template customization orchestrator.

Steps, in order:

1. Obtain and validate the project name.
2. Rewrite the template's placeholder text with the project name.
3. Let the user pick a component library.
4. Optionally reinstall dependencies from the lockfile.
5. Install and configure the chosen library.
6. Print next steps.
"""

from __future__ import annotations

from typing import Any

from rich.markup import escape

from templatekit.config import ProjectConfig, Settings
from templatekit.customize.libraries import (
    CommandRunner,
    clean_install,
    select_component_library,
    setup_component_library,
)
from templatekit.customize.patcher import update_files
from templatekit.customize.replacements import get_replacements, validate_project_name
from templatekit.prompts import Prompter
from templatekit.utils import BANNER_WIDTH, console, print_banner, print_success, run_command


class CustomizePipeline:
    """Drives one customization run against ``settings.root_dir``.

    Attributes:
        settings: Paths and package-manager options for the run.
        prompter: Source of interactive answers.
        runner: Coroutine used to execute package-manager commands.
    """

    def __init__(
        self,
        settings: Settings,
        prompter: Prompter | None = None,
        runner: CommandRunner = run_command,
    ) -> None:
        self.settings = settings
        self.prompter = prompter or Prompter()
        self.runner = runner

    async def run(self, project_name: str | None = None) -> dict[str, Any]:
        """Execute the full customization flow.

        Args:
            project_name: Name from the command line. Prompted for when
                ``None`` or empty.

        Returns:
            A summary dict with ``project_name``, ``component_library`` and
            ``files_updated``.

        Raises:
            InvalidProjectNameError: If the name fails validation.
            PackageInstallError: If a package-manager install fails.
        """
        print_banner("Next.js Template Setup")
        console.print("This script will customize the template for your project.\n")

        if not project_name:
            project_name = self.prompter.ask("Enter your project name: ")
        config = ProjectConfig(project_name=validate_project_name(project_name))

        console.print(f'\n[bold]Setting up project:[/bold] "{escape(config.project_name)}"\n')

        rules = get_replacements(config.project_name)
        updated = update_files(self.settings.root_dir, self.settings.files_to_update, rules)
        print_success(f"Updated {updated} file(s) with your project name.")

        library_key = select_component_library(self.prompter)
        config = config.model_copy(update={"component_library": library_key})

        if self.settings.clean_install:
            await clean_install(self.settings, runner=self.runner)

        await setup_component_library(library_key, self.settings, runner=self.runner)

        self._print_next_steps(config)
        return {
            "project_name": config.project_name,
            "component_library": config.component_library,
            "files_updated": updated,
        }

    def _print_next_steps(self, config: ProjectConfig) -> None:
        pm = self.settings.package_manager
        console.print("\n" + "=" * BANNER_WIDTH)
        console.print("[bold green]Setup complete![/bold green]\n")
        console.print("Next steps:")
        if config.component_library == "none":
            console.print(f"  1. Run: {pm} install")
        else:
            console.print("  1. Review the component library setup instructions above")
        console.print(f"  2. Run: {pm} run dev")
        console.print("  3. Start building your application!")
        console.print("=" * BANNER_WIDTH + "\n")
