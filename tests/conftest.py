import sys
from pathlib import Path

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


PROJECT_FILES: dict[str, str] = {
    ".gitignore": "# Generated\nLibrary/\nTemp/\n\n*.log\n!keep.log\n/Build/\n",
    "Assets/Scripts/Player.cs": "class Player {}\n",
    "Assets/Scenes/Main.unity": "scene\n",
    "Library/cache.bin": "cache",
    "Temp/tmp.txt": "tmp",
    "debug.log": "debug",
    "keep.log": "keep",
    "Build/Game.exe": "exe",
    "Build/Data/level0": "level",
    "Recordings/demo.mp4": "video",
    "Recordings/raw/take1.mp4": "raw",
    "Documentation/README.pdf": "pdf",
}


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def write_tree():
    def _write(root: Path, files: dict[str, str]) -> Path:
        root.mkdir(parents=True, exist_ok=True)
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _write


@pytest.fixture
def project_root(tmp_path: Path, write_tree) -> Path:
    return write_tree(tmp_path / "MyGame", PROJECT_FILES).resolve()


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
