"""Unit tests for ProjectConfig and Settings (templatekit.config).

Tests cover:
- ProjectConfig immutability and model_copy
- Settings defaults and derived paths (properties)
- Settings.from_env
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from templatekit.config import DEFAULT_FILES_TO_UPDATE, ProjectConfig, Settings


# ---------------------------------------------------------------------------
# ProjectConfig
# ---------------------------------------------------------------------------


class TestProjectConfig:
    @pytest.mark.unit
    def test_library_defaults_to_none(self):
        assert ProjectConfig(project_name="Acme").component_library is None

    @pytest.mark.unit
    def test_frozen(self):
        config = ProjectConfig(project_name="Acme")
        with pytest.raises(ValidationError):
            config.component_library = "heroui"

    @pytest.mark.unit
    def test_model_copy_builds_new_instance(self):
        config = ProjectConfig(project_name="Acme")
        chosen = config.model_copy(update={"component_library": "chakra"})
        assert chosen.component_library == "chakra"
        assert chosen.project_name == "Acme"
        assert config.component_library is None

    @pytest.mark.unit
    def test_project_name_required(self):
        with pytest.raises(ValidationError):
            ProjectConfig()


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class TestSettings:
    @pytest.mark.unit
    def test_defaults(self):
        settings = Settings(root_dir=Path("/proj"))
        assert settings.package_manager == "npm"
        assert settings.clean_install is True
        assert settings.files_to_update == list(DEFAULT_FILES_TO_UPDATE)
        assert settings.default_seo_template == "seo-template.json"

    @pytest.mark.unit
    def test_root_defaults_to_cwd(self):
        assert Settings().root_dir == Path.cwd()

    @pytest.mark.unit
    def test_derived_paths(self):
        root = Path("/proj")
        settings = Settings(root_dir=root)
        assert settings.layout_path == root / "src" / "app" / "layout.tsx"
        assert settings.tailwind_config_path == root / "tailwind.config.ts"
        assert settings.package_json_path == root / "package.json"
        assert settings.og_dir == root / "public" / "og"

    @pytest.mark.unit
    def test_custom_layout_file(self):
        settings = Settings(root_dir=Path("/proj"), layout_file="app/layout.jsx")
        assert settings.layout_path == Path("/proj/app/layout.jsx")

    @pytest.mark.unit
    def test_files_to_update_not_shared(self):
        a = Settings()
        a.files_to_update.append("extra.md")
        assert "extra.md" not in Settings().files_to_update


# ---------------------------------------------------------------------------
# Settings.from_env
# ---------------------------------------------------------------------------


class TestSettingsFromEnv:
    @pytest.mark.unit
    def test_empty_env_uses_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings.from_env()
        assert settings.package_manager == "npm"
        assert settings.clean_install is True

    @pytest.mark.unit
    def test_root_and_package_manager(self, tmp_path: Path):
        env = {"TEMPLATEKIT_ROOT": str(tmp_path), "TEMPLATEKIT_PACKAGE_MANAGER": "pnpm"}
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()
        assert settings.root_dir == tmp_path
        assert settings.package_manager == "pnpm"

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["0", "false", "No", " off "])
    def test_clean_install_disabled(self, value):
        with patch.dict(os.environ, {"TEMPLATEKIT_CLEAN_INSTALL": value}, clear=True):
            assert Settings.from_env().clean_install is False

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["1", "true", "yes"])
    def test_clean_install_enabled(self, value):
        with patch.dict(os.environ, {"TEMPLATEKIT_CLEAN_INSTALL": value}, clear=True):
            assert Settings.from_env().clean_install is True
