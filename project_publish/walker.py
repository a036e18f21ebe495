"""Lazy traversal of project folders.

Relative paths use the ignore matcher's form: ``/`` is the walked folder,
separators are ``/`` and directories end with ``/``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional

from project_publish.ignore import PathFilter
from project_publish.models import FileEntry

logger = logging.getLogger(__name__)


def iter_files(
    folder: Path,
    path_filter: Optional[PathFilter] = None,
    exclude: Iterable[Path] = (),
) -> Iterator[FileEntry]:
    excluded = {path.resolve() for path in exclude}
    yield from _walk(folder, "/", path_filter, excluded)


def _walk(
    directory: Path,
    relative: str,
    path_filter: Optional[PathFilter],
    excluded: set[Path],
) -> Iterator[FileEntry]:
    for child in sorted(directory.iterdir(), key=lambda item: item.name):
        if child.is_symlink() and child.is_dir():
            logger.debug("Skipping directory link %s%s", relative, child.name)
            continue
        is_dir = child.is_dir()
        child_relative = f"{relative}{child.name}{'/' if is_dir else ''}"

        if is_dir:
            if excluded and child.resolve() in excluded:
                logger.debug("Skipping excluded folder %s", child_relative)
                continue
            if (
                path_filter is not None
                and path_filter.is_ignored(child_relative)
                and not path_filter.may_reinclude_below(child_relative)
            ):
                logger.debug("Skipping %s", child_relative)
                continue
            yield from _walk(child, child_relative, path_filter, excluded)
            continue

        if not child.is_file():
            logger.debug("Skipping non-regular file %s", child_relative)
            continue
        if path_filter is not None and path_filter.is_ignored(child_relative):
            logger.debug("Skipping %s", child_relative)
            continue
        yield FileEntry(source=child, relative=child_relative)


def iter_top_level_files(folder: Path) -> Iterator[FileEntry]:
    for child in sorted(folder.iterdir(), key=lambda item: item.name):
        if child.is_file():
            yield FileEntry(source=child, relative=f"/{child.name}")
