from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class StepKind(str, Enum):
    BUILD = "build"
    SOURCE = "source"
    RECORDINGS = "recordings"
    DOCUMENTATION = "documentation"


class StepMode(str, Enum):
    ZIP = "zip"
    COPY = "copy"


class StepStatus(str, Enum):
    DONE = "done"
    FAILED = "failed"
    SKIPPED = "skipped"


STEP_LABELS: dict[StepKind, str] = {
    StepKind.BUILD: "Copying build files",
    StepKind.SOURCE: "Copying source files",
    StepKind.RECORDINGS: "Copying recordings",
    StepKind.DOCUMENTATION: "Copying documentation",
}


@dataclass(frozen=True)
class FileEntry:
    source: Path
    relative: str

    def archive_name(self, root_name: str) -> str:
        return f"{root_name}{self.relative}"


@dataclass
class PublishStep:
    kind: StepKind
    mode: StepMode
    source_dir: Path
    output: Path
    files: list[FileEntry] = field(default_factory=list)

    @property
    def label(self) -> str:
        return STEP_LABELS[self.kind]


@dataclass
class PublishPlan:
    project_name: str
    target: Path
    steps: list[PublishStep]
    errors: list[Exception]
    skipped: list[str]

    def is_valid(self) -> bool:
        return not self.errors

    @property
    def total_files(self) -> int:
        return sum(len(step.files) for step in self.steps)

    def step(self, kind: StepKind) -> Optional[PublishStep]:
        for step in self.steps:
            if step.kind == kind:
                return step
        return None


@dataclass(frozen=True)
class StepResult:
    kind: StepKind
    status: StepStatus
    output: Path
    processed: int
    detail: str


@dataclass
class PublishReport:
    target: Path
    total_files: int
    results: list[StepResult] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return sum(result.processed for result in self.results)

    @property
    def failures(self) -> list[StepResult]:
        return [
            result for result in self.results if result.status == StepStatus.FAILED
        ]

    @property
    def failed(self) -> int:
        return len(self.failures)
