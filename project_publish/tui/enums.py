from enum import Enum

from project_publish.models import StepStatus


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


STEP_STATUS_STYLE = {
    StepStatus.DONE: UIStyle.GREEN.value,
    StepStatus.SKIPPED: UIStyle.DIM.value,
    StepStatus.FAILED: UIStyle.RED.value,
}
