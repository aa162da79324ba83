"""Shared pytest fixtures for the create-tangible-plugin test suite.

Provides reusable fixtures for:
- A small template tree with manifest, include and static files
- A ScaffoldConfig pointing at that tree
- A fake subprocess runner for the dependency bootstrap
- A sample ProjectRequest
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from tangible_create.config import BootstrapStep, RenameRule, ScaffoldConfig
from tangible_create.scaffolder import BootstrapRunner, ProjectRequest


# ---------------------------------------------------------------------------
# Template tree
# ---------------------------------------------------------------------------

TEMPLATE_FILES: dict[str, str] = {
    "tangible-plugin.php": (
        "<?php\n"
        "/**\n"
        " * Plugin Name: <%= project.title %>\n"
        " * Description: <%= project.description %>\n"
        " */\n"
        "define( '<%= constant(project.name) %>_VERSION', '0.0.1' );\n"
        "function <%= snake(project.name) %>() {}\n"
    ),
    "package.json": '{\n  "name": "<%= project.name %>"\n}\n',
    "docs/index.md": "# <%= project.title %>\n\n<%= include(\"usage.md\") %>",
    "docs/usage.md": "Run <%= project.name %> with `npm run dev`.\n",
    "includes/raw.php": "<?php // <%= project.name %> stays as written\n",
}

BINARY_FILE = "assets/logo.bin"
BINARY_CONTENT = bytes(range(256))

MANIFEST = ["tangible-plugin.php", "package.json", "docs/index.md"]


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A template root containing manifest, include, static and binary files."""
    root = tmp_path / "template"
    for rel_path, content in TEMPLATE_FILES.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    binary = root / BINARY_FILE
    binary.parent.mkdir(parents=True, exist_ok=True)
    binary.write_bytes(BINARY_CONTENT)
    return root


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Parent directory in which projects are created."""
    workspace = tmp_path / "workspace"
    workspace.mkdir()
    return workspace


# ---------------------------------------------------------------------------
# Configuration & project
# ---------------------------------------------------------------------------

@pytest.fixture
def scaffold_config(template_dir: Path) -> ScaffoldConfig:
    return ScaffoldConfig(
        template_dir=template_dir,
        manifest=list(MANIFEST),
        renames=[RenameRule(source="tangible-plugin.php")],
        bootstrap=[
            BootstrapStep(command="npm install --audit=false --loglevel=error", required=True),
            BootstrapStep(command="composer install", required=False),
        ],
    )


@pytest.fixture
def project() -> ProjectRequest:
    return ProjectRequest(name="my-plugin", description="Does useful things.")


# ---------------------------------------------------------------------------
# Subprocess
# ---------------------------------------------------------------------------

def make_runner(returncodes: dict[str, int] | None = None) -> MagicMock:
    """Build a ``subprocess.run`` stand-in returning per-command exit codes."""
    returncodes = returncodes or {}

    def _run(command: str, **kwargs) -> subprocess.CompletedProcess:
        return subprocess.CompletedProcess(command, returncodes.get(command, 0))

    return MagicMock(side_effect=_run)


@pytest.fixture
def fake_runner() -> MagicMock:
    """A runner where every command succeeds."""
    return make_runner()


@pytest.fixture
def bootstrap_runner(scaffold_config: ScaffoldConfig, fake_runner: MagicMock) -> BootstrapRunner:
    return BootstrapRunner(scaffold_config.bootstrap, runner=fake_runner)


@pytest.fixture
def runner_factory():
    """Return ``make_runner`` so tests can choose exit codes per command."""
    return make_runner
