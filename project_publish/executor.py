import logging
import shutil
import zipfile
from pathlib import Path
from typing import Iterator, Optional, Protocol

from project_publish.constants import COPY_CHUNK_SIZE
from project_publish.errors import TargetFolderError
from project_publish.models import (
    FileEntry,
    PublishPlan,
    PublishReport,
    PublishStep,
    StepKind,
    StepMode,
    StepResult,
    StepStatus,
)
from project_publish.progress import NullProgressReporter, ProgressReporter

logger = logging.getLogger(__name__)


class StepHandler(Protocol):
    def run(self, step: PublishStep) -> Iterator[FileEntry]: ...


class ZipStepHandler:
    """Writes the step's files into a fresh archive, one entry per file.

    Entries are named ``<source folder name>/<relative path>``.
    """

    def run(self, step: PublishStep) -> Iterator[FileEntry]:
        root_name = step.source_dir.name
        with zipfile.ZipFile(
            step.output, "w", compression=zipfile.ZIP_DEFLATED
        ) as archive:
            for entry in step.files:
                name = entry.archive_name(root_name)
                logger.debug("Compressing %s", name)
                info = zipfile.ZipInfo.from_file(
                    entry.source, name, strict_timestamps=False
                )
                info.compress_type = zipfile.ZIP_DEFLATED
                with entry.source.open("rb") as source, archive.open(
                    info, "w"
                ) as destination:
                    shutil.copyfileobj(source, destination, COPY_CHUNK_SIZE)
                yield entry


class CopyStepHandler:
    def run(self, step: PublishStep) -> Iterator[FileEntry]:
        for entry in step.files:
            destination = step.output / entry.source.name
            logger.debug("Copying %s to %s", entry.source, destination)
            shutil.copy2(entry.source, destination)
            yield entry


class PublishExecutor:
    def __init__(self, progress: Optional[ProgressReporter] = None) -> None:
        self.progress = progress or NullProgressReporter()
        self.handlers: dict[StepMode, StepHandler] = {
            StepMode.ZIP: ZipStepHandler(),
            StepMode.COPY: CopyStepHandler(),
        }

    def execute(self, plan: PublishPlan) -> PublishReport:
        self._create_target(plan.target)
        logger.info("Project will be published to %s", plan.target)

        report = PublishReport(target=plan.target, total_files=plan.total_files)
        title = f"publishing {plan.project_name}"
        try:
            for kind in StepKind:
                step = plan.step(kind)
                if step is None:
                    report.results.append(
                        StepResult(
                            kind=kind,
                            status=StepStatus.SKIPPED,
                            output=plan.target,
                            processed=0,
                            detail=f"no {kind.value} to publish",
                        )
                    )
                    continue
                report.results.append(self._run_step(step, title, report))
        finally:
            self.progress.clear()
        return report

    def _run_step(
        self, step: PublishStep, title: str, report: PublishReport
    ) -> StepResult:
        handler = self.handlers.get(step.mode)
        if handler is None:
            return StepResult(
                kind=step.kind,
                status=StepStatus.FAILED,
                output=step.output,
                processed=0,
                detail=f"Unknown step mode: {step.mode.value}",
            )

        logger.info("%s from %s", step.label, step.source_dir)
        done_before = report.processed
        processed = 0
        try:
            for _entry in handler.run(step):
                processed += 1
                self.progress.update(
                    title,
                    step.label,
                    self._fraction(done_before + processed, report.total_files),
                )
        except Exception as exc:
            logger.error("Unable to publish %s: %s", step.kind.value, exc)
            return StepResult(
                kind=step.kind,
                status=StepStatus.FAILED,
                output=step.output,
                processed=processed,
                detail=f"{step.kind.value} failed: {exc}",
            )
        return StepResult(
            kind=step.kind,
            status=StepStatus.DONE,
            output=step.output,
            processed=processed,
            detail=f"{processed} files",
        )

    @staticmethod
    def _create_target(target: Path) -> None:
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise TargetFolderError(target, exc.strerror or str(exc)) from exc

    @staticmethod
    def _fraction(processed: int, total: int) -> float:
        if total <= 0:
            return 1.0
        return processed / total
