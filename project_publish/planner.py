import logging
from pathlib import Path
from typing import Callable, Iterator, Optional

from project_publish.constants import BUILD_ARCHIVE_NAME
from project_publish.ignore import PathFilter
from project_publish.models import (
    FileEntry,
    PublishPlan,
    PublishStep,
    StepKind,
    StepMode,
)
from project_publish.project import ProjectLayout
from project_publish.utils import is_under
from project_publish.walker import iter_files, iter_top_level_files

logger = logging.getLogger(__name__)


class PublishPlanner:
    """Enumerates the files every publish step will process."""

    def __init__(
        self, layout: ProjectLayout, path_filter: Optional[PathFilter] = None
    ) -> None:
        self.layout = layout
        self.path_filter = path_filter

    def build(self) -> PublishPlan:
        layout = self.layout
        plan = PublishPlan(
            project_name=layout.name,
            target=layout.target,
            steps=[],
            errors=[],
            skipped=[],
        )

        if layout.build_dir is None:
            plan.skipped.append("No build folder found.")
        else:
            build_dir = layout.build_dir
            self._add_step(
                plan,
                StepKind.BUILD,
                StepMode.ZIP,
                build_dir,
                layout.target / BUILD_ARCHIVE_NAME,
                lambda: iter_files(build_dir),
            )

        exclude = [layout.target] if is_under(layout.target, layout.root) else []
        self._add_step(
            plan,
            StepKind.SOURCE,
            StepMode.ZIP,
            layout.root,
            layout.target / f"{layout.name}.zip",
            lambda: iter_files(layout.root, self.path_filter, exclude=exclude),
        )

        for kind, folder in (
            (StepKind.RECORDINGS, layout.recordings_dir),
            (StepKind.DOCUMENTATION, layout.documentation_dir),
        ):
            if folder is None:
                plan.skipped.append(f"No {kind.value} folder found.")
                continue
            self._add_step(
                plan,
                kind,
                StepMode.COPY,
                folder,
                layout.target,
                lambda folder=folder: iter_top_level_files(folder),
            )

        logger.info("Total files to copy: %d", plan.total_files)
        return plan

    @staticmethod
    def _add_step(
        plan: PublishPlan,
        kind: StepKind,
        mode: StepMode,
        source_dir: Path,
        output: Path,
        enumerate_files: Callable[[], Iterator[FileEntry]],
    ) -> None:
        try:
            files = list(enumerate_files())
        except OSError as exc:
            plan.errors.append(exc)
            return
        plan.steps.append(
            PublishStep(
                kind=kind,
                mode=mode,
                source_dir=source_dir,
                output=output,
                files=files,
            )
        )
