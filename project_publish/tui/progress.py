from typing import Optional

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskID,
    TaskProgressColumn,
    TextColumn,
)


class RichProgressReporter:
    """Progress bar fed with completion fractions."""

    def __init__(self, console: Console | None = None) -> None:
        self._progress = Progress(
            TextColumn("[bold]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=console,
            transient=True,
        )
        self._task: Optional[TaskID] = None

    def update(self, title: str, info: str, fraction: float) -> None:
        description = f"{title} / {info}"
        if self._task is None:
            self._progress.start()
            self._task = self._progress.add_task(description, total=1.0)
        self._progress.update(self._task, description=description, completed=fraction)

    def clear(self) -> None:
        if self._task is not None:
            self._progress.stop()
            self._task = None
