"""Create an MCP server project from the bundled template."""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .config import ScaffoldConfig
from .console import Prompt, Reporter
from .errors import BuildError, ReplicationError
from .manifest import build_manifest, write_manifest
from .naming import default_project_name, resolve_project_name
from .preflight import check_destination, check_template_source
from .readme import build_readme, write_readme
from .replicate import replicate
from .tooling import BuildOutcome, Runner, Which, detect_package_manager, install_and_build

__all__ = ["ProjectScaffolder", "ScaffoldResult", "ScaffoldStage"]


LOGGER = logging.getLogger(__name__)


class ScaffoldStage(str, Enum):
    """Progress of a scaffold run. Stages only ever move forward."""

    START = "start"
    GUARD_CHECKED = "guard_checked"
    NAME_PROMPTED = "name_prompted"
    TREE_COPIED = "tree_copied"
    AUX_FILES_COPIED = "aux_files_copied"
    MANIFEST_WRITTEN = "manifest_written"
    README_WRITTEN = "readme_written"
    BUILD_ATTEMPTED = "build_attempted"
    DONE = "done"
    FAILED = "failed"


@dataclass(slots=True)
class ScaffoldResult:
    """Outcome of a completed run.

    The scaffold itself always succeeded when a result exists; ``build``
    tells whether the install and build step did too.
    """

    project_name: str
    project_dir: Path
    files: list[Path] = field(default_factory=list)
    build: BuildOutcome = field(default_factory=BuildOutcome.skipped)

    @property
    def degraded(self) -> bool:
        return self.build.warning is not None


class ProjectScaffolder:
    """Run the scaffold steps in order against ``config.target_dir``."""

    def __init__(
        self,
        config: ScaffoldConfig,
        prompt: Prompt,
        reporter: Reporter,
        *,
        runner: Runner = subprocess.run,
        which: Which = shutil.which,
    ) -> None:
        self.config = config
        self.prompt = prompt
        self.reporter = reporter
        self._runner = runner
        self._which = which
        self.stage = ScaffoldStage.START

    def _advance(self, stage: ScaffoldStage) -> None:
        LOGGER.debug("scaffold stage %s -> %s", self.stage.value, stage.value)
        self.stage = stage

    def run(self) -> ScaffoldResult:
        """Scaffold the project and return the result.

        Raises :class:`~create_mcp_server.errors.ScaffoldError` subclasses for
        fatal failures; :attr:`stage` is left at ``FAILED`` in that case.
        """

        try:
            return self._run()
        except Exception:
            self.stage = ScaffoldStage.FAILED
            raise

    def _run(self) -> ScaffoldResult:
        config = self.config
        check_destination(config.target_dir)
        check_template_source(config.source_dir)
        self._advance(ScaffoldStage.GUARD_CHECKED)

        default_name = default_project_name(config.target_dir)
        answer = self.prompt.ask(f"📝 Enter a name for your MCP server [{default_name}]: ")
        project_name = resolve_project_name(answer, config.target_dir)
        self._advance(ScaffoldStage.NAME_PROMPTED)

        result = ScaffoldResult(project_name=project_name, project_dir=config.target_dir)

        copied = replicate(
            config.source_dir,
            config.destination_source_dir,
            on_copy=self.reporter.file_created,
        )
        result.files.extend(copied)
        self._advance(ScaffoldStage.TREE_COPIED)

        try:
            result.files.extend(self._copy_auxiliary_files())
            self._advance(ScaffoldStage.AUX_FILES_COPIED)

            manifest_path = write_manifest(build_manifest(project_name), config.target_dir, config.manifest_filename)
            self.reporter.file_created(manifest_path)
            result.files.append(manifest_path)
            self._advance(ScaffoldStage.MANIFEST_WRITTEN)

            readme_path = write_readme(
                build_readme(project_name, config.target_dir), config.target_dir, config.readme_filename
            )
            self.reporter.file_created(readme_path)
            result.files.append(readme_path)
            self._advance(ScaffoldStage.README_WRITTEN)
        except OSError as exc:
            raise ReplicationError(f"could not write project files: {exc}") from exc

        self.reporter.success("✅ Source files copied successfully!")

        result.build = self._install_and_build()
        self._advance(ScaffoldStage.BUILD_ATTEMPTED)

        self._advance(ScaffoldStage.DONE)
        return result

    def _copy_auxiliary_files(self) -> list[Path]:
        copied: list[Path] = []
        for name in self.config.auxiliary_files:
            source = self.config.template_root / name
            if not source.is_file():
                LOGGER.debug("auxiliary file %s not in template, skipping", source)
                continue
            destination = self.config.target_dir / name
            shutil.copyfile(source, destination)
            self.reporter.file_created(destination)
            copied.append(destination)
        return copied

    def _install_and_build(self) -> BuildOutcome:
        if not self.config.install:
            LOGGER.debug("dependency installation disabled")
            return BuildOutcome.skipped()

        package_manager = detect_package_manager(which=self._which)
        try:
            install_and_build(
                package_manager,
                self.config.target_dir,
                runner=self._runner,
                on_step=lambda message: self.reporter.info(f"\n{message}"),
            )
        except BuildError as exc:
            LOGGER.warning("install/build step failed: %s", exc)
            self.reporter.warning(f"\n⚠️ Couldn't automatically install dependencies or build: {exc}")
            self.reporter.warning("\nYou can install dependencies and build manually:")
            self.reporter.line(f"  cd {self.config.target_dir}")
            self.reporter.line(f"  {package_manager} install")
            self.reporter.line(f"  {package_manager} run build")
            return BuildOutcome(package_manager=package_manager, warning=str(exc))

        self.reporter.success("\n✅ Dependencies installed and project built successfully!")
        return BuildOutcome(package_manager=package_manager)
