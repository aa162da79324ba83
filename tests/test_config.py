"""Unit tests for ScaffoldConfig and related Pydantic models (tangible_create.config).

Tests cover:
- Defaults: manifest, renames, bootstrap steps, bundled template dir
- RenameRule.target_path
- save/load round trip and from_env
- Validation of BootstrapStep
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from tangible_create.config import (
    DEFAULT_MANIFEST,
    DEFAULT_TEMPLATE_DIR,
    BootstrapStep,
    RenameRule,
    ScaffoldConfig,
)


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


class TestScaffoldConfigDefaults:
    @pytest.mark.unit
    def test_manifest(self):
        assert ScaffoldConfig().manifest == [
            "docs/index.md",
            "includes/enqueue.php",
            "package.json",
            "readme.txt",
            "tangible-plugin.php",
            "tangible.config.js",
        ]

    @pytest.mark.unit
    def test_manifest_is_a_copy(self):
        config = ScaffoldConfig()
        config.manifest.append("extra.txt")
        assert "extra.txt" not in DEFAULT_MANIFEST

    @pytest.mark.unit
    def test_bootstrap_steps(self):
        steps = ScaffoldConfig().bootstrap
        assert steps[0] == BootstrapStep(command="npm install --audit=false --loglevel=error", required=True)
        assert steps[1].command == "composer install"
        assert steps[1].required is False

    @pytest.mark.unit
    def test_renames(self):
        assert ScaffoldConfig().renames == [RenameRule(source="tangible-plugin.php")]

    @pytest.mark.unit
    def test_template_dir_is_bundled(self):
        config = ScaffoldConfig()
        assert config.template_dir == DEFAULT_TEMPLATE_DIR
        assert config.template_dir.is_dir()
        for rel in config.manifest:
            assert (config.template_dir / rel).is_file(), rel

    @pytest.mark.unit
    def test_misc_defaults(self):
        config = ScaffoldConfig()
        assert config.skip_bootstrap is False
        assert config.dev_command == "npm run dev"


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class TestRenameRule:
    @pytest.mark.unit
    def test_default_target(self):
        assert RenameRule(source="tangible-plugin.php").target_path("my-plugin") == "my-plugin.php"

    @pytest.mark.unit
    def test_nested_source_keeps_directory(self):
        rule = RenameRule(source="languages/plugin.pot", target="{name}{suffix}")
        assert rule.target_path("my-plugin") == "languages/my-plugin.pot"

    @pytest.mark.unit
    def test_custom_pattern(self):
        rule = RenameRule(source="assets/app.js", target="{name}-app{suffix}")
        assert rule.target_path("x") == "assets/x-app.js"


class TestBootstrapStep:
    @pytest.mark.unit
    def test_required_by_default(self):
        assert BootstrapStep(command="npm ci").required is True

    @pytest.mark.unit
    def test_empty_command_rejected(self):
        with pytest.raises(ValidationError):
            BootstrapStep(command="")

    @pytest.mark.unit
    def test_frozen(self):
        step = BootstrapStep(command="npm ci")
        with pytest.raises(ValidationError):
            step.required = False


# ---------------------------------------------------------------------------
# Serialisation
# ---------------------------------------------------------------------------


class TestSerialisation:
    @pytest.mark.unit
    def test_save_and_load(self, tmp_path: Path):
        config = ScaffoldConfig(
            template_dir=tmp_path / "tpl",
            manifest=["a.txt"],
            renames=[RenameRule(source="entry.php", target="{name}-main{suffix}")],
            bootstrap=[BootstrapStep(command="make", required=False, hint="run make")],
            skip_bootstrap=True,
        )
        path = config.save(tmp_path / "nested" / "config.json")
        assert path.is_file()
        assert ScaffoldConfig.load(path) == config

    @pytest.mark.unit
    def test_load_invalid(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text('{"bootstrap": [{"command": ""}]}', encoding="utf-8")
        with pytest.raises(ValidationError):
            ScaffoldConfig.load(path)

    @pytest.mark.unit
    def test_from_env_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            assert ScaffoldConfig.from_env() == ScaffoldConfig()

    @pytest.mark.unit
    def test_from_env_overrides(self, tmp_path: Path):
        env = {"TANGIBLE_TEMPLATE_DIR": str(tmp_path), "TANGIBLE_SKIP_INSTALL": "yes"}
        with patch.dict(os.environ, env, clear=True):
            config = ScaffoldConfig.from_env()
        assert config.template_dir == tmp_path
        assert config.skip_bootstrap is True

    @pytest.mark.unit
    def test_from_env_skip_install_false(self):
        with patch.dict(os.environ, {"TANGIBLE_SKIP_INSTALL": "0"}, clear=True):
            assert ScaffoldConfig.from_env().skip_bootstrap is False
