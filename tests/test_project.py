from pathlib import Path

import pytest

from project_publish.config import PublishConfig
from project_publish.errors import RuleParseError
from project_publish.ignore import PathFilter
from project_publish.project import ProjectService


def test_default_layout(project_root: Path) -> None:
    layout = ProjectService(project_root).resolve()

    assert layout.name == "MyGame"
    assert layout.target == project_root.parent / "MyGame Package"
    assert layout.build_dir == project_root / "Build"
    assert layout.recordings_dir == project_root / "Recordings"
    assert layout.documentation_dir == project_root / "Documentation"
    assert layout.ignore_files == (project_root / ".gitignore",)


def test_missing_optional_folders(tmp_path: Path, write_tree) -> None:
    root = write_tree(tmp_path / "Empty", {"main.c": "int main;"}).resolve()

    layout = ProjectService(root).resolve()

    assert layout.build_dir is None
    assert layout.recordings_dir is None
    assert layout.documentation_dir is None
    assert layout.ignore_files == ()


def test_build_folder_follows_configured_order(tmp_path: Path, write_tree) -> None:
    root = write_tree(tmp_path / "Game", {"builds/a": "a", "Builds/b": "b"}).resolve()
    names = {child.name for child in root.iterdir()}
    if names != {"builds", "Builds"}:
        pytest.skip("case-insensitive filesystem")

    assert ProjectService(root).find_build_dir() == root / "Builds"
    config = PublishConfig(build_dirs=("builds", "Builds"))
    assert ProjectService(root, config=config).find_build_dir() == root / "builds"


def test_build_folder_must_be_a_directory(tmp_path: Path, write_tree) -> None:
    root = write_tree(tmp_path / "Game", {"Build": "not a folder"}).resolve()

    assert ProjectService(root).find_build_dir() is None


def test_target_from_config_is_relative_to_parent(project_root: Path) -> None:
    config = PublishConfig(target_dir="Releases/MyGame")

    target = ProjectService(project_root, config=config).resolve_target()

    assert target == project_root.parent / "Releases" / "MyGame"


def test_explicit_target_wins(project_root: Path, tmp_path: Path) -> None:
    config = PublishConfig(target_dir="Releases")
    explicit = tmp_path / "out"

    target = ProjectService(project_root, config=config).resolve_target(explicit)

    assert target == explicit.resolve()


def test_config_file_is_read_from_root(project_root: Path) -> None:
    (project_root / "publish.yaml").write_text(
        "recordings_dir: Documentation\n", encoding="utf-8"
    )

    layout = ProjectService(project_root).resolve()

    assert layout.recordings_dir == project_root / "Documentation"


def test_declared_ignore_files_are_kept_even_when_missing(project_root: Path) -> None:
    config = PublishConfig(ignore_files=(".gitignore", ".publishignore"))

    layout = ProjectService(project_root, config=config).resolve()

    assert layout.ignore_files == (
        project_root / ".gitignore",
        project_root / ".publishignore",
    )
    with pytest.raises(RuleParseError, match="publishignore"):
        PathFilter.from_files(layout.ignore_files)


def test_explicit_ignore_files_replace_defaults(project_root: Path, tmp_path: Path) -> None:
    custom = tmp_path / "custom.ignore"
    custom.write_text("*.cs\n", encoding="utf-8")

    layout = ProjectService(project_root).resolve(ignore_files=[custom])

    assert layout.ignore_files == (custom,)
