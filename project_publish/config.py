"""Per-project ``publish.yaml`` settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from jsonschema import Draft202012Validator

from project_publish.constants import (
    BUILD_DIR_NAMES,
    CONFIG_FILENAME,
    DOCUMENTATION_DIRNAME,
    RECORDINGS_DIRNAME,
)
from project_publish.errors import InvalidConfigSchemaError, InvalidYamlFormatError
from project_publish.utils import format_schema_error, read_yaml_safe


_NAME_LIST = {
    "type": "array",
    "items": {"type": "string", "minLength": 1},
}

CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "target_dir": {"type": "string", "minLength": 1},
        "build_dirs": _NAME_LIST,
        "recordings_dir": {"type": "string", "minLength": 1},
        "documentation_dir": {"type": "string", "minLength": 1},
        "ignore_files": _NAME_LIST,
    },
}

_VALIDATOR = Draft202012Validator(CONFIG_SCHEMA)


@dataclass(frozen=True)
class PublishConfig:
    target_dir: Optional[str] = None
    build_dirs: tuple[str, ...] = BUILD_DIR_NAMES
    recordings_dir: str = RECORDINGS_DIRNAME
    documentation_dir: str = DOCUMENTATION_DIRNAME
    ignore_files: Optional[tuple[str, ...]] = field(default=None)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "PublishConfig":
        defaults = cls()
        ignore_files = payload.get("ignore_files")
        return cls(
            target_dir=payload.get("target_dir"),
            build_dirs=tuple(payload.get("build_dirs", defaults.build_dirs)),
            recordings_dir=payload.get("recordings_dir", defaults.recordings_dir),
            documentation_dir=payload.get(
                "documentation_dir", defaults.documentation_dir
            ),
            ignore_files=tuple(ignore_files) if ignore_files is not None else None,
        )


class ConfigRepository:
    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def config_path(self) -> Path:
        return self._root / CONFIG_FILENAME

    def load(self) -> PublishConfig:
        payload, error = read_yaml_safe(self.config_path)
        if error is not None:
            raise InvalidYamlFormatError(self.config_path, error)
        if payload is None:
            return PublishConfig()
        self.validate(payload)
        return PublishConfig.from_payload(payload)

    def validate(self, payload: Any) -> None:
        error = next(iter(_VALIDATOR.iter_errors(payload)), None)
        if error is not None:
            raise InvalidConfigSchemaError(self.config_path, format_schema_error(error))
