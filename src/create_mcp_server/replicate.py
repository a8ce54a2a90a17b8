"""Mirror a template directory into the destination project."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Callable

from .errors import ReplicationError
from .exclusions import is_excluded

__all__ = ["replicate"]


LOGGER = logging.getLogger(__name__)


def _copy_tree(
    source: Path,
    destination: Path,
    on_copy: Callable[[Path], None] | None,
    copied: list[Path],
) -> None:
    destination.mkdir(parents=True, exist_ok=True)

    for entry in source.iterdir():
        if is_excluded(entry.name):
            LOGGER.debug("skipping excluded entry %s", entry)
            continue

        target = destination / entry.name
        if entry.is_dir():
            _copy_tree(entry, target, on_copy, copied)
            continue

        shutil.copyfile(entry, target)
        LOGGER.debug("copied %s -> %s", entry, target)
        copied.append(target)
        if on_copy is not None:
            on_copy(target)


def replicate(
    source_dir: str | Path,
    destination_dir: str | Path,
    *,
    on_copy: Callable[[Path], None] | None = None,
) -> list[Path]:
    """Copy every non-excluded file below ``source_dir`` into ``destination_dir``.

    Missing destination directories are created and existing files are
    overwritten. Excluded entries are skipped together with everything below
    them. ``on_copy`` is called once per copied file with its destination path.

    The copy is not transactional: when the filesystem refuses an operation a
    :class:`ReplicationError` is raised and whatever was already copied stays
    in place.
    """

    source = Path(source_dir)
    destination = Path(destination_dir)
    if not source.is_dir():
        raise ReplicationError(f"template directory {source} does not exist")

    copied: list[Path] = []
    try:
        _copy_tree(source, destination, on_copy, copied)
    except OSError as exc:
        raise ReplicationError(f"could not copy {source} to {destination}: {exc}") from exc
    return copied
