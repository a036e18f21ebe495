from typing import Protocol


class ProgressReporter(Protocol):
    def update(self, title: str, info: str, fraction: float) -> None: ...

    def clear(self) -> None: ...


class NullProgressReporter:
    def update(self, title: str, info: str, fraction: float) -> None:
        return None

    def clear(self) -> None:
        return None
