from project_publish.tui.progress import RichProgressReporter
from project_publish.tui.renderers import PublishConsoleUI

__all__ = ["PublishConsoleUI", "RichProgressReporter"]
