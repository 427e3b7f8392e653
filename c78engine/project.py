"""Project configuration and the project it describes."""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass, field
from pathlib import Path

from .filesystem import (
    ASSETLOCATION,
    ASSETLOCATION_REGISTRY,
    ASSETLOCATION_SCRIPTMODULE,
    DEFAULT_PROJECT_NAME,
    FILE_EXT_PROJECT,
    PathLike,
    is_directory,
    relative_path_to,
)
from .uuid import UUID


class ProjectError(ValueError):
    """Raised when a project cannot be created, read or written."""


def _is_empty(path: Path) -> bool:
    return path == Path("")


def _relative_to(path: Path, base: Path) -> Path:
    """Make an absolute ``path`` relative to ``base``; tidy a relative one lexically."""
    if not path.is_absolute():
        return path if _is_empty(path) else Path(os.path.normpath(path))
    try:
        return relative_path_to(path, base)
    except ValueError as error:
        raise ProjectError(str(error)) from error


@dataclass
class ProjectConfig:
    """Settings of a project that do not depend on where it is stored.

    ``asset_directory`` is relative to the project directory; the registry and
    script module paths are relative to the asset directory.
    """

    name: str = DEFAULT_PROJECT_NAME
    start_scene: UUID = field(default_factory=UUID.invalid)
    asset_directory: Path = Path(ASSETLOCATION)
    asset_registry_path: Path = Path(ASSETLOCATION_REGISTRY)
    script_module_path: Path = Path(ASSETLOCATION_SCRIPTMODULE)

    def __post_init__(self) -> None:
        self.asset_directory = Path(self.asset_directory)
        self.asset_registry_path = Path(self.asset_registry_path)
        self.script_module_path = Path(self.script_module_path)

    def normalize(self, project_directory: PathLike) -> None:
        """Rewrite absolute paths as paths relative to where they belong."""
        project_directory = Path(project_directory)
        self.asset_directory = _relative_to(self.asset_directory, project_directory)
        asset_base = project_directory / self.asset_directory
        self.asset_registry_path = _relative_to(self.asset_registry_path, asset_base)
        self.script_module_path = _relative_to(self.script_module_path, asset_base)

    def asset_directory_path(self, project_directory: PathLike) -> Path:
        return Path(project_directory) / self.asset_directory

    def asset_registry_path_in(self, project_directory: PathLike) -> Path:
        return self.asset_directory_path(project_directory) / self.asset_registry_path

    def script_module_path_in(self, project_directory: PathLike) -> Path:
        return self.asset_directory_path(project_directory) / self.script_module_path

    def project_file_path(self, project_directory: PathLike) -> Path:
        return Path(project_directory) / (self.name + FILE_EXT_PROJECT)


@dataclass
class Project:
    """A project: its configuration and the directory it lives in."""

    config: ProjectConfig = field(default_factory=ProjectConfig)
    project_directory: Path | None = None

    def __post_init__(self) -> None:
        if self.project_directory is not None:
            self.project_directory = Path(self.project_directory)

    @classmethod
    def create(cls, project_directory: PathLike, config: ProjectConfig | None = None) -> Project:
        """Create a project in an absolute directory; the config is copied."""
        directory = Path(project_directory)
        if not directory.is_absolute():
            raise ProjectError(f"project directory {directory} must be absolute")
        if not is_directory(directory):
            raise ProjectError(f"project directory {directory} must be a directory")
        config = dataclasses.replace(config) if config is not None else ProjectConfig()
        if not config.name:
            raise ProjectError("a project cannot be created with an empty name")
        if _is_empty(config.asset_registry_path):
            raise ProjectError("a project cannot be created with an empty asset registry path")
        return cls(config=config, project_directory=directory)

    def _directory(self) -> Path:
        if self.project_directory is None:
            raise ProjectError("project has no directory")
        return self.project_directory

    def asset_directory(self) -> Path:
        return self.config.asset_directory_path(self._directory())

    def asset_registry_path(self) -> Path:
        return self.config.asset_registry_path_in(self._directory())

    def script_module_path(self) -> Path:
        return self.config.script_module_path_in(self._directory())

    def project_file_path(self) -> Path:
        return self.config.project_file_path(self._directory())