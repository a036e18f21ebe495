from typing import Optional

from rich.panel import Panel
from rich.table import Column, Table
from rich.text import Text

from project_publish.ignore import Rule, RuleSet
from project_publish.models import PublishPlan, PublishReport, PublishStep
from project_publish.tui.enums import STEP_STATUS_STYLE, UIStyle
from project_publish.utils import compact_home_path


class PlanTable:
    @staticmethod
    def summary_block(plan: PublishPlan, mode: str):
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Mode", mode)
        table.add_row("Project", plan.project_name)
        table.add_row("Target", compact_home_path(plan.target))
        table.add_row("Files", str(plan.total_files))
        return table

    @staticmethod
    def steps_table(steps: list[PublishStep]) -> Table:
        table = Table(
            Column(header="Step", width=14),
            Column(header="Mode", width=6),
            Column(header="Files", width=7, justify="right"),
            Column(header="Source", overflow="ellipsis", max_width=48),
            Column(header="Output", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for step in steps:
            table.add_row(
                step.kind.value,
                step.mode.value,
                str(len(step.files)),
                compact_home_path(step.source_dir),
                compact_home_path(step.output),
            )
        return table

    @staticmethod
    def files_table(step: PublishStep) -> Table:
        table = Table(
            Column(header="Path", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for entry in step.files:
            table.add_row(Text(entry.relative))
        return table


class ReportTable:
    @staticmethod
    def stats_panel(report: PublishReport) -> Panel:
        stats: dict[str, str] = {
            "processed": f"{report.processed}/{report.total_files}",
            "failed": str(report.failed),
            "target": compact_home_path(report.target),
        }
        table = Table(show_header=False, box=None)
        for key, value in stats.items():
            table.add_row(f"[bold]{key}[/bold]", value)
        return Panel(
            table,
            title="publish",
            border_style=UIStyle.GREEN.value if report.failed == 0 else UIStyle.RED.value,
        )

    @staticmethod
    def results_table(report: PublishReport) -> Table:
        table = Table(
            Column(header="Step", width=14),
            Column(header="Status", width=8),
            Column(header="Files", width=7, justify="right"),
            Column(header="Detail", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for result in report.results:
            style = STEP_STATUS_STYLE.get(result.status, UIStyle.WHITE.value)
            table.add_row(
                result.kind.value,
                f"[{style}]{result.status.value}[/{style}]",
                str(result.processed),
                Text(result.detail),
            )
        return table


class RuleTable:
    @staticmethod
    def rules_table(rule_set: RuleSet) -> Table:
        table = Table(
            Column(header="#", width=4, justify="right"),
            Column(header="Rule", overflow="fold"),
            Column(header="Flags", width=16),
            Column(header="Source", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for rule in rule_set:
            table.add_row(
                str(rule.source_order + 1),
                Text(rule.raw),
                RuleTable.flags(rule),
                Text(compact_home_path(rule.location())),
            )
        return table

    @staticmethod
    def flags(rule: Rule) -> str:
        flags: list[str] = []
        if rule.negated:
            flags.append("negated")
        if rule.anchored_to_root:
            flags.append("anchored")
        if rule.directory_only:
            flags.append("dir")
        return " ".join(flags) or "-"


class CheckTable:
    @staticmethod
    def results_table(results: list[tuple[str, Optional[Rule]]]) -> Table:
        table = Table(
            Column(header="Path", overflow="fold"),
            Column(header="Result", width=10),
            Column(header="Rule", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for path, rule in results:
            ignored = rule is not None and not rule.negated
            result = (
                f"[{UIStyle.YELLOW.value}]ignored[/{UIStyle.YELLOW.value}]"
                if ignored
                else f"[{UIStyle.GREEN.value}]included[/{UIStyle.GREEN.value}]"
            )
            detail = "" if rule is None else f"{compact_home_path(rule.location())}: {rule.raw}"
            table.add_row(Text(path), result, Text(detail))
        return table
