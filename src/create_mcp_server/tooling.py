"""Package manager detection and the install/build step."""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Sequence

from .errors import BuildError

__all__ = [
    "DEFAULT_CANDIDATES",
    "FALLBACK_PACKAGE_MANAGER",
    "BuildOutcome",
    "detect_package_manager",
    "install_and_build",
]


LOGGER = logging.getLogger(__name__)

DEFAULT_CANDIDATES: tuple[str, ...] = ("bun", "npm")
FALLBACK_PACKAGE_MANAGER = "npm"

Runner = Callable[..., object]
Which = Callable[[str], Optional[str]]


@dataclass(frozen=True, slots=True)
class BuildOutcome:
    """Result of the optional dependency installation and build.

    ``warning`` holds the failure message when the step failed. A skipped
    step has ``attempted`` set to ``False`` and no warning.
    """

    package_manager: str | None
    attempted: bool = True
    warning: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.attempted and self.warning is None

    @classmethod
    def skipped(cls) -> "BuildOutcome":
        return cls(package_manager=None, attempted=False)


def detect_package_manager(
    candidates: Sequence[str] = DEFAULT_CANDIDATES,
    *,
    which: Which = shutil.which,
    default: str = FALLBACK_PACKAGE_MANAGER,
) -> str:
    """Return the first of ``candidates`` found on ``PATH``, or ``default``."""

    for candidate in candidates:
        if which(candidate):
            LOGGER.debug("using package manager %s", candidate)
            return candidate
    LOGGER.debug("no package manager found on PATH, defaulting to %s", default)
    return default


def _run(cmd: list[str], *, cwd: Path, runner: Runner) -> None:
    try:
        runner(cmd, cwd=str(cwd), check=True)
    except subprocess.CalledProcessError as exc:
        raise BuildError(f"Command failed with exit code {exc.returncode}: {' '.join(cmd)}", command=cmd) from exc
    except OSError as exc:
        raise BuildError(f"Could not run {' '.join(cmd)}: {exc}", command=cmd) from exc


def install_and_build(
    package_manager: str,
    project_dir: str | Path,
    *,
    runner: Runner = subprocess.run,
    on_step: Callable[[str], None] | None = None,
) -> None:
    """Install dependencies and build the project in ``project_dir``.

    Both commands inherit the terminal's streams. Raises :class:`BuildError`
    on the first failing command.
    """

    project_dir = Path(project_dir)
    steps = (
        (f"📦 Installing dependencies using {package_manager}...", [package_manager, "install"]),
        ("🔨 Building project...", [package_manager, "run", "build"]),
    )
    for message, cmd in steps:
        if on_step is not None:
            on_step(message)
        LOGGER.debug("running %s in %s", cmd, project_dir)
        _run(cmd, cwd=project_dir, runner=runner)
