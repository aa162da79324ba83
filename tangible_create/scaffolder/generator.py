"""Main scaffolding orchestrator.

Takes a ``ProjectRequest`` and a ``ScaffoldConfig`` and materialises a new
plugin project in a fresh directory.  The run moves through these stages,
each of which completes before the next one starts:

1. GUARD_CHECKED     -- the target directory does not exist yet.
2. DIR_CREATED       -- the target directory was created (never merged into).
3. TREE_COPIED       -- the whole template tree was copied verbatim.
4. TEMPLATES_RENDERED -- every manifest file was rendered concurrently.  A
   file that fails keeps its raw copy; the run carries on.
5. ENTRY_RENAMED     -- generic entry files were renamed after the project.
6. DEPENDENCIES_BOOTSTRAPPED -- install commands ran in the project root.

Nothing is rolled back: when a later stage fails the partially created
directory stays in place for the operator to inspect and remove.
"""

from __future__ import annotations

import asyncio
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from ..config import ScaffoldConfig
from ..utils import console, print_step
from .bootstrap import BootstrapResult, BootstrapRunner
from .errors import ProjectExistsError, ScaffoldState, StructuralIOError
from .guard import project_exists, project_path
from .models import ProjectRequest, RenderContext, RenderOutcome
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


@dataclass
class ScaffoldResult:
    """What a scaffold run produced."""

    project_root: Path
    state: ScaffoldState = ScaffoldState.START
    renders: list[RenderOutcome] = field(default_factory=list)
    renamed: dict[str, str] = field(default_factory=dict)
    bootstrap: list[BootstrapResult] = field(default_factory=list)

    @property
    def failed_renders(self) -> list[RenderOutcome]:
        return [outcome for outcome in self.renders if not outcome.ok]

    @property
    def succeeded(self) -> bool:
        return self.state is ScaffoldState.DONE


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Scaffold orchestrator.

    Given a ``ProjectRequest``, creates ``<output_dir>/<name>`` containing:
    - every file of the template tree
    - the manifest files rendered with the project metadata
    - the entry files renamed after the project
    - installed dependencies (unless ``skip_bootstrap`` is set)
    """

    def __init__(
        self,
        project: ProjectRequest,
        config: ScaffoldConfig | None = None,
        *,
        renderer: TemplateRenderer | None = None,
        bootstrap: BootstrapRunner | None = None,
    ) -> None:
        self.project = project
        self.config = config or ScaffoldConfig()
        self.context = RenderContext(project)
        self.renderer = renderer or TemplateRenderer(self.config.template_dir)
        self.bootstrap = bootstrap or BootstrapRunner(self.config.bootstrap)

    # -- Public API --------------------------------------------------------

    async def generate(self, output_dir: str | Path) -> ScaffoldResult:
        """Generate the project inside *output_dir*.

        Raises:
            ProjectExistsError: The project directory already exists.
            StructuralIOError: Creating, copying or renaming failed.
            BootstrapError: A required install command failed.
        """
        project_root = project_path(output_dir, self.project.name)
        result = ScaffoldResult(project_root=project_root)

        # 1. Refuse to reuse an existing directory
        if project_exists(output_dir, self.project.name):
            raise ProjectExistsError(project_root)
        if not self.config.template_dir.is_dir():
            raise StructuralIOError(f"Template directory not found: {self.config.template_dir}")
        result.state = ScaffoldState.GUARD_CHECKED

        # 2. Create the project directory
        await self._create_directory(project_root)
        result.state = ScaffoldState.DIR_CREATED

        # 3. Copy the template tree verbatim
        await self._copy_tree(project_root)
        result.state = ScaffoldState.TREE_COPIED

        # 4. Render placeholder-bearing files
        result.renders = await self._render_manifest(project_root)
        result.state = ScaffoldState.TEMPLATES_RENDERED

        # 5. Rename generic entry files after the project
        result.renamed = await self._rename_entries(project_root)
        result.state = ScaffoldState.ENTRY_RENAMED

        # 6. Install dependencies
        if not self.config.skip_bootstrap:
            print_step("Installing dependencies")
            result.bootstrap = self.bootstrap.run(project_root)
            result.state = ScaffoldState.DEPENDENCIES_BOOTSTRAPPED

        result.state = ScaffoldState.DONE
        return result

    # -- Stages ------------------------------------------------------------

    async def _create_directory(self, project_root: Path) -> None:
        try:
            await asyncio.to_thread(project_root.mkdir)
        except FileExistsError:
            raise ProjectExistsError(project_root, ScaffoldState.GUARD_CHECKED) from None
        except OSError as exc:
            raise StructuralIOError(
                f"Could not create {project_root}: {exc}", ScaffoldState.GUARD_CHECKED
            ) from exc

    async def _copy_tree(self, project_root: Path) -> None:
        console.print(f"Copying template from {self.config.template_dir}", style="dim", markup=False)
        try:
            await asyncio.to_thread(
                shutil.copytree, self.config.template_dir, project_root, dirs_exist_ok=True
            )
        except OSError as exc:
            raise StructuralIOError(
                f"Could not copy template into {project_root}: {exc}", ScaffoldState.DIR_CREATED
            ) from exc

    async def _render_manifest(self, project_root: Path) -> list[RenderOutcome]:
        """Render every manifest file concurrently.

        Each render settles on its own; one failing file does not cancel or
        hide the others.
        """
        tasks = [
            self.renderer.render_to_file(relative_path, project_root, self.context)
            for relative_path in self.config.manifest
        ]
        return list(await asyncio.gather(*tasks))

    async def _rename_entries(self, project_root: Path) -> dict[str, str]:
        renamed: dict[str, str] = {}
        for rule in self.config.renames:
            target = rule.target_path(self.project.name)
            if target == rule.source:
                continue

            source_path = project_root / rule.source
            target_path = project_root / target
            if not source_path.is_file():
                raise StructuralIOError(
                    f"Cannot rename {rule.source}: file not found in project",
                    ScaffoldState.TEMPLATES_RENDERED,
                )
            if target_path.exists():
                raise StructuralIOError(
                    f"Cannot rename {rule.source}: {target} already exists",
                    ScaffoldState.TEMPLATES_RENDERED,
                )
            try:
                await asyncio.to_thread(source_path.rename, target_path)
            except OSError as exc:
                raise StructuralIOError(
                    f"Could not rename {rule.source} to {target}: {exc}",
                    ScaffoldState.TEMPLATES_RENDERED,
                ) from exc
            renamed[rule.source] = target
        return renamed
