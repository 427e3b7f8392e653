"""Editor settings stored as YAML: window sizes and recently opened projects."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .filesystem import EntryType, PathLike, exists, extension_to_entry_type, root_directory

logger = logging.getLogger(__name__)

CONFIG_FILE = "config/editor.yml"
PROJECT_HISTORY_FILE = "config/LatestProjects.yml"

_DEFAULT_SIZE = (1920, 1080)


def _write_yaml(path: Path, document: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(document, sort_keys=False, default_flow_style=None))


def _read_yaml(path: Path) -> object:
    return yaml.safe_load(path.read_text())


def _size(value: object, key: str) -> tuple[int, int]:
    if (
        not isinstance(value, (list, tuple))
        or len(value) != 2
        or not all(isinstance(v, int) and not isinstance(v, bool) and v >= 0 for v in value)
    ):
        raise ValueError(f"{key} must be a pair of unsigned integers, got {value!r}")
    return (value[0], value[1])


class WindowConfig:
    """Default and last used window size of the editor."""

    def __init__(self, config_file: PathLike | None = None) -> None:
        self.config_file = Path(config_file) if config_file is not None else root_directory() / CONFIG_FILE
        self.default_window_size: tuple[int, int] = _DEFAULT_SIZE
        self.last_window_size: tuple[int, int] = _DEFAULT_SIZE

    def load(self) -> None:
        """Read the settings; a missing, unreadable or incomplete file is replaced by the current values.

        Raises ``ValueError`` if a size entry is present but malformed.
        """
        if not self.config_file.exists():
            logger.info("Creating WindowConfig! (First time setup)")
            self.save()
        try:
            data = _read_yaml(self.config_file)
        except yaml.YAMLError as error:
            logger.error("Loading WindowConfig file %s failed, due to:\n  %s", self.config_file, error)
            self.save()
            return
        node = data.get("WindowConfig") if isinstance(data, dict) else None
        if not isinstance(node, dict):
            self.save()
            return
        self.default_window_size = _size(node.get("DefaultWindowSize"), "DefaultWindowSize")
        self.last_window_size = _size(node.get("LastWindowSize"), "LastWindowSize")
        logger.info("WindowConfig loaded!")

    def save(self) -> None:
        document = {
            "WindowConfig": {
                "DefaultWindowSize": list(self.default_window_size),
                "LastWindowSize": list(self.last_window_size),
            }
        }
        _write_yaml(self.config_file.absolute(), document)
        logger.info("WindowConfig saved!")


def _is_existing_project(path: Path) -> bool:
    return exists(path) and extension_to_entry_type(path) is EntryType.PROJECT


class ProjectHistory:
    """The set of recently opened project files that still exist."""

    def __init__(self, config_file: PathLike | None = None) -> None:
        self.config_file = Path(config_file) if config_file is not None else Path(PROJECT_HISTORY_FILE)
        self.projects: set[Path] = set()

    def load(self) -> None:
        """Read the history, keeping only existing project files.

        A missing, unreadable or malformed file is replaced by the current set.
        """
        if not self.config_file.exists():
            logger.info("Creating ProjectHistory! (First time setup)")
            self.save()
        try:
            data = _read_yaml(self.config_file)
        except yaml.YAMLError as error:
            logger.error("Loading ProjectHistory file %s failed, due to:\n  %s", self.config_file, error)
            self.save()
            return
        node = data.get("ProjectHistory") if isinstance(data, dict) else None
        if not isinstance(node, list):
            self.save()
            return
        self.projects = {
            Path(str(entry)) for entry in node if entry is not None and _is_existing_project(Path(str(entry)))
        }
        logger.info("ProjectHistory loaded!")

    def save(self) -> None:
        """Write the existing project files of the set, in sorted order."""
        entries = [str(path) for path in sorted(self.projects) if _is_existing_project(path)]
        _write_yaml(self.config_file, {"ProjectHistory": entries})
        logger.info("ProjectHistory saved!")

    def add(self, path: PathLike) -> None:
        """Remember ``path`` and save the history."""
        self.projects.add(Path(path))
        self.save()