from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from project_publish.config import ConfigRepository, PublishConfig
from project_publish.constants import IGNORE_FILENAME, TARGET_SUFFIX


@dataclass(frozen=True)
class ProjectLayout:
    root: Path
    target: Path
    build_dir: Optional[Path]
    recordings_dir: Optional[Path]
    documentation_dir: Optional[Path]
    ignore_files: tuple[Path, ...]

    @property
    def name(self) -> str:
        return self.root.name


class ProjectService:
    def __init__(self, root: Path, config: Optional[PublishConfig] = None) -> None:
        self.root = root.expanduser().resolve()
        self.config = config if config is not None else ConfigRepository(self.root).load()

    def resolve(
        self,
        target: Optional[Path] = None,
        ignore_files: Sequence[Path] = (),
    ) -> ProjectLayout:
        return ProjectLayout(
            root=self.root,
            target=self.resolve_target(target),
            build_dir=self.find_build_dir(),
            recordings_dir=self._optional_dir(self.config.recordings_dir),
            documentation_dir=self._optional_dir(self.config.documentation_dir),
            ignore_files=self.resolve_ignore_files(ignore_files),
        )

    def resolve_target(self, target: Optional[Path] = None) -> Path:
        if target is not None:
            return target.expanduser().resolve()
        parent = self.root.parent
        if self.config.target_dir:
            return (parent / Path(self.config.target_dir).expanduser()).resolve()
        return parent / f"{self.root.name}{TARGET_SUFFIX}"

    def find_build_dir(self) -> Optional[Path]:
        names = {child.name for child in self.root.iterdir() if child.is_dir()}
        for candidate in self.config.build_dirs:
            if candidate in names:
                return self.root / candidate
        return None

    def resolve_ignore_files(self, explicit: Sequence[Path] = ()) -> tuple[Path, ...]:
        """Ignore files in load order.

        Declared files are returned whether or not they exist so that
        loading reports the unreadable ones. Without declarations the root
        ``.gitignore`` is used when present.
        """
        if explicit:
            return tuple(path.expanduser() for path in explicit)
        if self.config.ignore_files is not None:
            return tuple(self.root / name for name in self.config.ignore_files)
        default = self.root / IGNORE_FILENAME
        if default.is_file():
            return (default,)
        return ()

    def _optional_dir(self, name: str) -> Optional[Path]:
        path = self.root / name
        if path.is_dir():
            return path
        return None
