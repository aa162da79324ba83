"""create-tangible-plugin configuration.

Centralised, typed configuration for a scaffold run. All settings use
Pydantic v2 models so they can be validated at construction time and
serialised to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "scaffolder" / "template"

# Files rewritten through the template engine after the raw copy. Anything
# not listed here is copied byte-for-byte.
DEFAULT_MANIFEST: list[str] = [
    "docs/index.md",
    "includes/enqueue.php",
    "package.json",
    "readme.txt",
    "tangible-plugin.php",
    "tangible.config.js",
]

_TRUTHY = {"1", "true", "yes", "on"}


class BootstrapStep(BaseModel):
    """One dependency install command run inside the new project.

    A failing ``required`` step stops the run; a failing optional step only
    prints ``hint`` (or the command itself) so the operator can retry it by
    hand.
    """

    model_config = ConfigDict(frozen=True)

    command: str = Field(..., min_length=1)
    required: bool = Field(default=True)
    hint: str | None = Field(default=None, description="Remediation shown when an optional step fails")


class RenameRule(BaseModel):
    """A generic template file that is renamed after the project.

    ``target`` is formatted with ``name`` (the project name) and ``suffix``
    (the extension of ``source``) and placed in the same directory as
    ``source``.
    """

    model_config = ConfigDict(frozen=True)

    source: str = Field(..., min_length=1)
    target: str = Field(default="{name}{suffix}")

    def target_path(self, project_name: str) -> str:
        """Return the template-root-relative path ``source`` is renamed to."""
        source = Path(self.source)
        filename = self.target.format(name=project_name, suffix=source.suffix)
        return (source.parent / filename).as_posix()


DEFAULT_BOOTSTRAP: list[BootstrapStep] = [
    BootstrapStep(command="npm install --audit=false --loglevel=error", required=True),
    BootstrapStep(command="composer install", required=False),
]


class ScaffoldConfig(BaseModel):
    """Everything a scaffold run needs besides the project metadata.

    Instances are typically created once by the CLI entry point and passed
    to ``ProjectGenerator``.
    """

    template_dir: Path = Field(default=DEFAULT_TEMPLATE_DIR)
    manifest: list[str] = Field(default_factory=lambda: list(DEFAULT_MANIFEST))
    renames: list[RenameRule] = Field(
        default_factory=lambda: [RenameRule(source="tangible-plugin.php")]
    )
    bootstrap: list[BootstrapStep] = Field(default_factory=lambda: list(DEFAULT_BOOTSTRAP))
    skip_bootstrap: bool = Field(default=False)
    dev_command: str = Field(default="npm run dev", description="Shown in the completion hint")

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path the file was written to.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "ScaffoldConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            TANGIBLE_TEMPLATE_DIR, TANGIBLE_SKIP_INSTALL.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("TANGIBLE_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["TANGIBLE_TEMPLATE_DIR"])
        if os.environ.get("TANGIBLE_SKIP_INSTALL", "").strip().lower() in _TRUTHY:
            kwargs["skip_bootstrap"] = True
        return cls(**kwargs)
