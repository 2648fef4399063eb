"""Component library registry and installer.

Each supported library is a ``ComponentLibrary`` subclass that reports which
packages it needs, performs its own post-install setup, and supplies the
instructions printed afterwards. The registry is keyed by the short name the
user picks from the menu.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from templatekit.config import Settings
from templatekit.customize.tailwind import TailwindConfig, update_tailwind_config
from templatekit.errors import PackageInstallError
from templatekit.layout.providers import update_layout_for_chakra, update_layout_for_heroui
from templatekit.prompts import Prompter, print_menu
from templatekit.utils import (
    BANNER_WIDTH,
    console,
    print_info,
    print_success,
    print_warning,
    run_command,
)

CommandRunner = Callable[..., Awaitable[tuple[int, str, str]]]

SHADCN_CLI = ["npx", "shadcn@latest"]


# ---------------------------------------------------------------------------
# Library variants
# ---------------------------------------------------------------------------


class ComponentLibrary:
    """Base descriptor. Subclasses override the capability methods they need."""

    key: str = ""
    name: str = ""
    description: str = ""
    packages: tuple[str, ...] = ()
    dev_packages: tuple[str, ...] = ()
    common_components: tuple[str, ...] = ()
    tailwind: TailwindConfig | None = None
    setup_instructions: str = ""

    def packages_to_install(self) -> list[str]:
        return list(self.packages)

    def dev_packages_to_install(self) -> list[str]:
        return list(self.dev_packages)

    async def apply_custom_setup(self, settings: Settings, runner: CommandRunner) -> None:
        """Post-install hook. The base implementation does nothing."""

    def instructions(self) -> str:
        return self.setup_instructions


class NoLibrary(ComponentLibrary):
    key = "none"
    name = "None"
    description = "Skip component library installation"


class HeroUILibrary(ComponentLibrary):
    key = "heroui"
    name = "Hero UI"
    description = "React components built on top of Tailwind CSS"
    packages = ("@heroui/react", "framer-motion")
    tailwind = TailwindConfig(
        content=["./node_modules/@heroui/theme/dist/**/*.{js,ts,jsx,tsx}"],
        plugins=["require('@heroui/react')"],
    )
    setup_instructions = """
Hero UI has been installed and configured!

  Installed packages: @heroui/react, framer-motion
  Added HeroUIProvider to layout.tsx
  Updated tailwind.config.ts

You can now use Hero UI components:
  import { Button, Card, Input } from '@heroui/react';

Check the documentation: https://www.heroui.com/docs
"""

    async def apply_custom_setup(self, settings: Settings, runner: CommandRunner) -> None:
        update_layout_for_heroui(settings.layout_path)
        update_tailwind_config(settings.tailwind_config_path, self.tailwind)


class ShadcnLibrary(ComponentLibrary):
    key = "shadcn"
    name = "shadcn/ui"
    description = "Beautifully designed components built with Radix UI and Tailwind CSS"
    common_components = ("button", "card", "input", "label", "dialog", "dropdown-menu")
    setup_instructions = """
shadcn/ui has been installed and configured!

  Initialized shadcn/ui with default config
  Installed common components: button, card, input, label, dialog, dropdown-menu

You can now use components:
  import { Button } from "@/components/ui/button";
  import { Card } from "@/components/ui/card";

Add more components: npx shadcn@latest add [component]
Check the documentation: https://ui.shadcn.com/docs
"""

    async def apply_custom_setup(self, settings: Settings, runner: CommandRunner) -> None:
        """Initialise shadcn/ui, then add each common component.

        A failed ``init`` skips the component adds. A failed ``add`` is
        reported and the remaining components are still attempted.
        """
        print_info("Initializing shadcn/ui...")
        returncode, _, _ = await runner([*SHADCN_CLI, "init", "-y", "-d"], cwd=settings.root_dir)
        if returncode != 0:
            print_warning(
                "shadcn/ui setup had issues. You may need to run setup commands manually."
            )
            return

        print_info("Installing common components...")
        failed: list[str] = []
        for component in self.common_components:
            console.print(f"Installing {component}...")
            returncode, _, _ = await runner(
                [*SHADCN_CLI, "add", component, "-y"], cwd=settings.root_dir
            )
            if returncode != 0:
                failed.append(component)
                print_warning(
                    f"Could not add {component}. Run manually: "
                    f"npx shadcn@latest add {component}"
                )
        if failed:
            print_warning(f"shadcn/ui components not installed: {', '.join(failed)}")


class ChakraLibrary(ComponentLibrary):
    key = "chakra"
    name = "Chakra UI"
    description = "Simple, modular and accessible component library"
    packages = ("@chakra-ui/react", "@emotion/react", "@emotion/styled", "framer-motion")
    setup_instructions = """
Chakra UI has been installed and configured!

  Installed packages: @chakra-ui/react, @emotion/react, @emotion/styled, framer-motion
  Added ChakraProvider to layout.tsx

You can now use Chakra UI components:
  import { Button, Box, Card, Input } from '@chakra-ui/react';

Check the documentation: https://chakra-ui.com/docs
"""

    async def apply_custom_setup(self, settings: Settings, runner: CommandRunner) -> None:
        update_layout_for_chakra(settings.layout_path)


# Menu order is registry order.
COMPONENT_LIBRARIES: dict[str, ComponentLibrary] = {
    lib.key: lib for lib in (NoLibrary(), HeroUILibrary(), ShadcnLibrary(), ChakraLibrary())
}


def get_library(key: str) -> ComponentLibrary:
    """Look up a library by key; raises ``KeyError`` for unknown keys."""
    return COMPONENT_LIBRARIES[key]


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------


def select_component_library(prompter: Prompter) -> str:
    """Show the numbered library menu and return the chosen key."""
    console.print("\n[bold]Select a Component Library:[/bold]\n")
    options = [(key, lib.name) for key, lib in COMPONENT_LIBRARIES.items()]
    print_menu(options, [lib.description for lib in COMPONENT_LIBRARIES.values()])

    count = len(options)
    return prompter.choose(
        options,
        f"Enter your choice (1-{count}): ",
        f"Invalid choice. Please enter a number between 1 and {count}.",
    )


# ---------------------------------------------------------------------------
# Installation
# ---------------------------------------------------------------------------


async def install_packages(
    packages: list[str],
    settings: Settings,
    is_dev: bool = False,
    runner: CommandRunner = run_command,
) -> None:
    """Install *packages* with the configured package manager.

    Raises:
        PackageInstallError: If the install command exits non-zero. The
            error carries the command to run by hand.
    """
    if not packages:
        return

    cmd = [settings.package_manager, "install"]
    if is_dev:
        cmd.append("--save-dev")
    cmd.extend(packages)

    console.print(
        f"\n[bold]Installing {'dev ' if is_dev else ''}packages:[/bold] {' '.join(packages)}\n"
    )
    returncode, _, _ = await runner(cmd, cwd=settings.root_dir)
    if returncode != 0:
        raise PackageInstallError(" ".join(cmd), returncode)
    print_success("Packages installed successfully!")


async def clean_install(settings: Settings, runner: CommandRunner = run_command) -> None:
    """Reinstall dependencies from the lockfile (``<package_manager> ci``)."""
    cmd = [settings.package_manager, "ci"]
    print_info("Cleaning and installing dependencies...")
    returncode, _, _ = await runner(cmd, cwd=settings.root_dir)
    if returncode != 0:
        raise PackageInstallError(" ".join(cmd), returncode)
    print_success("Dependencies cleaned and installed successfully!")


async def setup_component_library(
    key: str,
    settings: Settings,
    runner: CommandRunner = run_command,
) -> ComponentLibrary:
    """Install and configure the library registered under *key*.

    Order: regular packages, dev packages, custom setup, instructions.

    Returns:
        The library descriptor that was set up.
    """
    library = get_library(key)
    if isinstance(library, NoLibrary):
        print_info("Skipping component library installation.")
        return library

    console.print(f"\n[bold magenta]Setting up {library.name}...[/bold magenta]\n")

    await install_packages(library.packages_to_install(), settings, is_dev=False, runner=runner)
    await install_packages(library.dev_packages_to_install(), settings, is_dev=True, runner=runner)
    await library.apply_custom_setup(settings, runner)

    instructions = library.instructions()
    if instructions:
        console.print("\n" + "=" * BANNER_WIDTH)
        console.print(instructions, highlight=False, markup=False)
        console.print("=" * BANNER_WIDTH + "\n")
    return library
