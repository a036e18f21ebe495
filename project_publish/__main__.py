import logging
from pathlib import Path
from typing import Callable, Optional

import click
from rich.console import Console

from project_publish.errors import PublishError
from project_publish.executor import PublishExecutor
from project_publish.ignore import PathFilter
from project_publish.models import PublishPlan
from project_publish.planner import PublishPlanner
from project_publish.project import ProjectLayout, ProjectService
from project_publish.tui import PublishConsoleUI, RichProgressReporter
from project_publish.utils import normalize_query_path


def _root_option() -> Callable:
    return click.option(
        "--root",
        type=click.Path(exists=True, file_okay=False, path_type=Path),
        default=Path("."),
        show_default=True,
        help="Project root folder.",
    )


def _ignore_file_option() -> Callable:
    return click.option(
        "--ignore-file",
        "ignore_files",
        multiple=True,
        type=click.Path(dir_okay=True, path_type=Path),
        help="Ignore rule file, in load order. Replaces the default .gitignore.",
    )


def _target_option() -> Callable:
    return click.option(
        "--target",
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        help="Output folder. Defaults to '<project> Package' next to the project.",
    )


def _load_project(
    root: Path, target: Optional[Path], ignore_files: tuple[Path, ...]
) -> tuple[ProjectLayout, PathFilter]:
    try:
        layout = ProjectService(root).resolve(target=target, ignore_files=ignore_files)
        path_filter = PathFilter.from_files(layout.ignore_files)
    except PublishError as exc:
        raise click.ClickException(str(exc))
    return layout, path_filter


def _build_plan(layout: ProjectLayout, path_filter: PathFilter) -> PublishPlan:
    try:
        return PublishPlanner(layout, path_filter).build()
    except Exception as exc:
        raise click.ClickException(f"Fatal: {exc}")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="Log every processed path.")
def cli(verbose: bool) -> None:
    """Package a project into a sibling 'Package' folder."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command(help="Build and print a dry-run publish plan.")
@_root_option()
@_target_option()
@_ignore_file_option()
@click.option("--files", "show_files", is_flag=True, help="List every planned file.")
def plan(
    root: Path,
    target: Optional[Path],
    ignore_files: tuple[Path, ...],
    show_files: bool,
) -> None:
    ui = PublishConsoleUI(Console())
    layout, path_filter = _load_project(root, target, ignore_files)
    plan_result = _build_plan(layout, path_filter)

    ui.render_plan(plan_result, mode="plan", show_files=show_files)

    if plan_result.errors:
        raise click.exceptions.Exit(1)


@cli.command(help="Zip the build and sources and copy recordings and documentation.")
@_root_option()
@_target_option()
@_ignore_file_option()
def publish(
    root: Path, target: Optional[Path], ignore_files: tuple[Path, ...]
) -> None:
    console = Console()
    ui = PublishConsoleUI(console)
    layout, path_filter = _load_project(root, target, ignore_files)
    plan_result = _build_plan(layout, path_filter)

    ui.render_plan(plan_result, mode="publish")

    if not plan_result.is_valid():
        raise click.ClickException(
            "Publish aborted due to enumeration errors above."
        )

    executor = PublishExecutor(progress=RichProgressReporter(console))
    try:
        report = executor.execute(plan_result)
    except PublishError as exc:
        raise click.ClickException(str(exc))
    ui.render_report(report)

    if report.failed:
        raise click.exceptions.Exit(1)


@cli.command(help="Show whether paths are ignored and which rule decided.")
@click.argument("paths", nargs=-1, required=True)
@_root_option()
@_ignore_file_option()
def check(root: Path, ignore_files: tuple[Path, ...], paths: tuple[str, ...]) -> None:
    ui = PublishConsoleUI(Console())
    layout, path_filter = _load_project(root, None, ignore_files)
    results = []
    for raw in paths:
        normalized = normalize_query_path(raw, layout.root)
        results.append((normalized, path_filter.deciding_rule(normalized)))
    ui.render_check(results)


@cli.command(help="List loaded ignore rules in evaluation order.")
@_root_option()
@_ignore_file_option()
def rules(root: Path, ignore_files: tuple[Path, ...]) -> None:
    ui = PublishConsoleUI(Console())
    _, path_filter = _load_project(root, None, ignore_files)
    ui.render_rules(path_filter.rule_set)


def main() -> int:
    try:
        rv = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return rv if isinstance(rv, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
