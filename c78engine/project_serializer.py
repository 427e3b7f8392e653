"""Reading and writing project files."""

from __future__ import annotations

from pathlib import Path

import yaml

from .filesystem import (
    EntryType,
    PathLike,
    exists,
    extension_to_entry_type,
    is_file,
    read_text,
    write_file,
)
from .project import Project, ProjectConfig, ProjectError
from .uuid import UUID

_ROOT_KEY = "Project"
_FIELDS = ("Name", "StartScene", "AssetDirectory", "AssetRegistry", "ScriptModule")


def project_to_yaml(project: Project) -> str:
    """Serialise a project's configuration as YAML text."""
    config = project.config
    document = {
        _ROOT_KEY: {
            "Name": config.name,
            "StartScene": config.start_scene.encode(),
            "AssetDirectory": config.asset_directory.as_posix(),
            "AssetRegistry": config.asset_registry_path.as_posix(),
            "ScriptModule": config.script_module_path.as_posix(),
        }
    }
    return yaml.safe_dump(document, sort_keys=False, default_flow_style=False)


def project_from_yaml(text: str) -> Project:
    """Build a project, without a directory, from YAML text."""
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as error:
        raise ProjectError(f"project text could not be parsed: {error}") from error
    if not isinstance(document, dict):
        raise ProjectError("project text could not be loaded")
    node = document.get(_ROOT_KEY)
    if not isinstance(node, dict):
        raise ProjectError("file does not contain a project")
    for key in _FIELDS:
        if node.get(key) is None:
            raise ProjectError(f"project file does not contain {key}")
    try:
        start_scene = UUID.decode(str(node["StartScene"]))
    except ValueError as error:
        raise ProjectError(str(error)) from error
    config = ProjectConfig(
        name=str(node["Name"]),
        start_scene=start_scene,
        asset_directory=Path(str(node["AssetDirectory"])),
        asset_registry_path=Path(str(node["AssetRegistry"])),
        script_module_path=Path(str(node["ScriptModule"])),
    )
    return Project(config=config)


def _check_file_path(path: PathLike) -> Path:
    if not str(path):
        raise ProjectError("file path is empty")
    p = Path(path)
    if not p.is_absolute():
        raise ProjectError(f"file path {p} is not absolute")
    if not is_file(p):
        raise ProjectError(f"file path {p} is not a file")
    return p


def import_project(path: PathLike) -> Project:
    """Read a project file; its directory is not set on the result."""
    p = _check_file_path(path)
    if not exists(p):
        raise ProjectError(f"project file {p} does not exist")
    file_type = extension_to_entry_type(p)
    if file_type is EntryType.PROJECT:
        text = read_text(p)
        if not text:
            raise ProjectError(f"project file {p} is empty")
        project = project_from_yaml(text)
        project.config.normalize(p.parent)
        return project
    if file_type is EntryType.BINARY:
        raise ProjectError("binary projects cannot be imported")
    raise ProjectError(f"{p} is neither a project nor a binary file")


def export_project(project: Project, path: PathLike) -> Path:
    """Write ``project`` to a project file and return its path."""
    p = _check_file_path(path)
    file_type = extension_to_entry_type(p)
    if file_type is EntryType.PROJECT:
        return write_file(p, project_to_yaml(project))
    if file_type is EntryType.BINARY:
        raise ProjectError("binary projects cannot be exported")
    raise ProjectError(f"{p} is neither a project nor a binary file")


def load_project(project_file: PathLike) -> Project:
    """Load a project from an absolute project file and set its directory."""
    p = Path(project_file)
    if not p.is_absolute():
        raise ProjectError(f"project file {p} must be absolute")
    if not is_file(p):
        raise ProjectError(f"project file {p} must be a file")
    project = import_project(p)
    project.project_directory = p.parent
    return project


def save_project(project: Project, project_file: PathLike | None = None) -> Path:
    """Save ``project``; a first save needs a file that fixes its directory.

    Without ``project_file`` the project is written to its default file name
    inside its directory. Returns the written path.
    """
    if project_file is not None and str(project_file):
        p = Path(project_file)
        if not p.is_absolute():
            raise ProjectError(f"project file {p} is not an absolute path")
        if project.project_directory is not None and p.parent != project.project_directory:
            raise ProjectError("the project directory cannot be changed after it was first set")
        project.project_directory = p.parent
    else:
        if project.project_directory is None or not project.project_directory.is_absolute():
            raise ProjectError("project directory is not an absolute path and no project file was given")
        p = project.project_file_path()
    project.config.normalize(project.project_directory)
    return export_project(project, p)