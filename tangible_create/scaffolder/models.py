"""Records shared by the renderer and the scaffold orchestrator."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, model_validator

from . import casing

PROJECT_NAME_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"

_NAME_RE = re.compile(PROJECT_NAME_PATTERN)


def is_valid_project_name(name: str) -> bool:
    """Lowercase alphanumeric with optional interior dashes."""
    return bool(_NAME_RE.match(name))


class ProjectRequest(BaseModel):
    """Metadata collected from the operator for one new project."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., pattern=PROJECT_NAME_PATTERN, description="Project slug and folder name")
    title: str = Field(default="", description="Human readable title, defaults to the title-cased name")
    description: str = Field(default="")

    @model_validator(mode="before")
    @classmethod
    def _default_title(cls, data: Any) -> Any:
        if isinstance(data, dict) and not (data.get("title") or "").strip() and data.get("name"):
            data = {**data, "title": casing.title(data["name"])}
        return data


@dataclass(frozen=True)
class RenderContext:
    """Names available to template expressions.

    Built once per scaffold run and shared read-only by every render.
    """

    project: ProjectRequest
    kebab: Callable[[str], str] = casing.kebab
    title: Callable[[str], str] = casing.title
    snake: Callable[[str], str] = casing.snake
    constant: Callable[[str], str] = casing.constant
    pascal: Callable[[str], str] = casing.pascal
    camel: Callable[[str], str] = casing.camel

    def template_vars(self) -> dict[str, Any]:
        """Return a fresh mapping of bare template names to values."""
        return {
            "project": self.project,
            "kebab": self.kebab,
            "title": self.title,
            "snake": self.snake,
            "constant": self.constant,
            "pascal": self.pascal,
            "camel": self.camel,
        }


@dataclass
class RenderOutcome:
    """Result of rendering one manifest file."""

    path: str
    ok: bool
    error: str | None = None
    warnings: list[str] = field(default_factory=list)
