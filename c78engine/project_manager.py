"""Keeps track of the project being edited."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

from .filesystem import PathLike
from .project import Project, ProjectConfig, ProjectError
from .project_serializer import load_project, save_project

SaveFilePrompt = Callable[[], Optional[PathLike]]


class ProjectManager:
    """Creates, opens, saves and closes the single active project.

    ``save_file_prompt`` is asked for a file when a project without one is
    saved; returning ``None`` cancels the save.
    """

    def __init__(self, save_file_prompt: SaveFilePrompt | None = None) -> None:
        self._save_file_prompt = save_file_prompt
        self._active_project: Project | None = None
        self._active_project_file: Path | None = None

    def create_project(self, project_directory: PathLike, config: ProjectConfig | None = None) -> Project:
        """Make a new project active, saving and closing the current one first."""
        if self._active_project is not None:
            self.close_project(True)
        self._active_project = Project.create(project_directory, config)
        self._active_project_file = None
        return self._active_project

    def open_project(self, project_file: PathLike) -> Project:
        """Load a project file and make it active, saving the current one first."""
        if self._active_project is not None:
            self.close_project(True)
        self._active_project = None
        self._active_project = load_project(project_file)
        self._active_project_file = Path(project_file)
        return self._active_project

    def save_project(self, project_file: PathLike | None = None) -> bool:
        """Save the active project; return False if no file was chosen."""
        project = self.active_project()
        if project_file is not None and str(project_file):
            self._active_project_file = Path(project_file)
        elif self._active_project_file is None:
            chosen = self._save_file_prompt() if self._save_file_prompt is not None else None
            if chosen is None or not str(chosen):
                return False
            self._active_project_file = Path(chosen)
        save_project(project, self._active_project_file)
        return True

    def close_project(self, save: bool = True) -> bool:
        """Close the active project; return False if the requested save did not happen."""
        self.active_project()
        if save and not self.save_project():
            return False
        self._active_project = None
        self._active_project_file = None
        return True

    def has_active_project(self) -> bool:
        return self._active_project is not None

    def active_project(self) -> Project:
        if self._active_project is None:
            raise ProjectError("there is no active project")
        return self._active_project

    def has_active_project_file(self) -> bool:
        return self._active_project_file is not None

    def active_project_file(self) -> Path | None:
        return self._active_project_file

    def reload_project(self) -> Project:
        """Load a fresh copy of the active project file; the active project is kept."""
        if self._active_project_file is None:
            raise ProjectError("there is no active project file to reload")
        return load_project(self._active_project_file)