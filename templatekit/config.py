"""templatekit configuration.

Typed settings for a single customization or SEO run. Both models are
Pydantic v2 so they validate at construction time; ``ProjectConfig`` is
frozen and is rebuilt with ``model_copy`` rather than mutated.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

# Template files that carry the placeholder project name.
DEFAULT_FILES_TO_UPDATE: tuple[str, ...] = (
    "README.md",
    "package.json",
    "src/app/layout.tsx",
    "src/app/page.tsx",
    "src/app/about/page.tsx",
    "src/app/dashboard/settings/page.tsx",
)

_FALSY = {"0", "false", "no", "off"}


class ProjectConfig(BaseModel):
    """Parameters of the current customization run."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Human-entered project name")
    component_library: str | None = Field(
        default=None, description="Registry key of the chosen component library"
    )


class Settings(BaseModel):
    """Tunables and derived paths for a templatekit run.

    Instances are created once by the CLI entry point (usually through
    :meth:`from_env`) and passed down to every component.
    """

    root_dir: Path = Field(default_factory=Path.cwd)
    package_manager: str = Field(default="npm")
    clean_install: bool = Field(
        default=True, description="Run '<package_manager> ci' before installing a library"
    )
    files_to_update: list[str] = Field(default_factory=lambda: list(DEFAULT_FILES_TO_UPDATE))
    layout_file: str = Field(default="src/app/layout.tsx")
    tailwind_config_file: str = Field(default="tailwind.config.ts")
    default_seo_template: str = Field(default="seo-template.json")

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def layout_path(self) -> Path:
        """The root layout that receives providers and SEO metadata."""
        return self.root_dir / self.layout_file

    @property
    def tailwind_config_path(self) -> Path:
        return self.root_dir / self.tailwind_config_file

    @property
    def package_json_path(self) -> Path:
        return self.root_dir / "package.json"

    @property
    def og_dir(self) -> Path:
        """Placeholder directory for Open Graph images."""
        return self.root_dir / "public" / "og"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            TEMPLATEKIT_ROOT, TEMPLATEKIT_PACKAGE_MANAGER,
            TEMPLATEKIT_CLEAN_INSTALL.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("TEMPLATEKIT_ROOT"):
            kwargs["root_dir"] = Path(os.environ["TEMPLATEKIT_ROOT"])
        if os.environ.get("TEMPLATEKIT_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["TEMPLATEKIT_PACKAGE_MANAGER"]
        if os.environ.get("TEMPLATEKIT_CLEAN_INSTALL"):
            kwargs["clean_install"] = (
                os.environ["TEMPLATEKIT_CLEAN_INSTALL"].strip().lower() not in _FALSY
            )
        return cls(**kwargs)
