from typing import Final


CONFIG_FILENAME: Final[str] = "publish.yaml"
IGNORE_FILENAME: Final[str] = ".gitignore"

TARGET_SUFFIX: Final[str] = " Package"
BUILD_ARCHIVE_NAME: Final[str] = "Build.zip"

BUILD_DIR_NAMES: Final[tuple[str, ...]] = (
    "Build",
    "Builds",
    "build",
    "builds",
)
RECORDINGS_DIRNAME: Final[str] = "Recordings"
DOCUMENTATION_DIRNAME: Final[str] = "Documentation"

COPY_CHUNK_SIZE: Final[int] = 4096
