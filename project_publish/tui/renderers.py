from typing import Optional

from rich.console import Console

from project_publish.ignore import Rule, RuleSet
from project_publish.models import PublishPlan, PublishReport
from project_publish.tui.enums import UIStyle
from project_publish.tui.sections import UISection
from project_publish.tui.tables import CheckTable, PlanTable, ReportTable, RuleTable
from project_publish.utils import compact_home_paths_in_text


class PublishConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_plan(self, plan: PublishPlan, mode: str, show_files: bool = False) -> None:
        self.console.print(
            UISection.wrap(
                "plan overview",
                PlanTable.summary_block(plan, mode=mode),
                style=UIStyle.BLUE.value,
            )
        )

        if plan.steps:
            self.console.print(
                UISection.wrap(
                    "steps",
                    PlanTable.steps_table(plan.steps),
                    style=UIStyle.CYAN.value,
                )
            )
        else:
            self.console.print(
                UISection.note("steps", "Nothing to publish.", style=UIStyle.DIM.value)
            )

        if show_files:
            for step in plan.steps:
                if not step.files:
                    continue
                self.console.print(
                    UISection.wrap(
                        f"{step.kind.value} files",
                        PlanTable.files_table(step),
                        style=UIStyle.MAGENTA.value,
                    )
                )

        if plan.errors:
            errors_text = "\n".join(
                [f"- {compact_home_paths_in_text(str(item))}" for item in plan.errors]
            )
            self.console.print(
                UISection.note("errors", errors_text, style=UIStyle.RED.value)
            )

        if plan.skipped:
            skipped_text = "\n".join(
                [f"- {compact_home_paths_in_text(item)}" for item in plan.skipped]
            )
            self.console.print(
                UISection.note("skipped", skipped_text, style=UIStyle.YELLOW.value)
            )

    def render_report(self, report: PublishReport) -> None:
        self.console.print(ReportTable.stats_panel(report))
        self.console.print(
            UISection.wrap(
                "steps",
                ReportTable.results_table(report),
                style=UIStyle.CYAN.value,
            )
        )
        if report.failures:
            failure_text = "\n".join(
                [
                    f"- {compact_home_paths_in_text(result.detail)}"
                    for result in report.failures
                ]
            )
            self.console.print(
                UISection.note("failures", failure_text, style=UIStyle.RED.value)
            )

    def render_rules(self, rule_set: RuleSet) -> None:
        if rule_set.is_empty:
            self.console.print(
                UISection.note(
                    "ignore rules",
                    "No ignore rules loaded.",
                    style=UIStyle.YELLOW.value,
                )
            )
            return
        self.console.print(
            UISection.wrap(
                "ignore rules",
                RuleTable.rules_table(rule_set),
                style=UIStyle.BLUE.value,
            )
        )

    def render_check(self, results: list[tuple[str, Optional[Rule]]]) -> None:
        self.console.print(
            UISection.wrap(
                "ignore check",
                CheckTable.results_table(results),
                style=UIStyle.BLUE.value,
            )
        )
