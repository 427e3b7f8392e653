"""Engine file types, well-known locations and small file helpers."""

from __future__ import annotations

import enum
import os
import shutil
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0
VERSION_NUMBER = ((VERSION_MAJOR * 1000) + VERSION_MINOR) * 1000 + VERSION_PATCH
VERSION_STRING = f"v{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}"

ENGINE_TITLE = "C78Engine"
WINDOW_DEFAULT_NAME = "C78E Window"
DEFAULT_PROJECT_NAME = "C78Project"
DEFAULT_ASSET_NAME = "C78Asset"
DEFAULT_SCENE_NAME = "C78Scene"

FILE_EXT_SCENE = ".sce"
FILE_EXT_PROJECT = ".pce"
FILE_EXT_ASSETREGISTRY = ".ace"
FILE_EXT_BINARY = ".bce"
FILE_EXT_ASSETPACK = FILE_EXT_BINARY
FILE_EXT_SHADERPACK = FILE_EXT_BINARY
FILE_EXT_CACHE = ".cce"

# Relative to the project directory.
ASSETLOCATION = "assets"
# Relative to the asset directory.
ASSETLOCATION_REGISTRY = "AssetRegistry" + FILE_EXT_ASSETREGISTRY
ASSETLOCATION_SCRIPTMODULE = "Scripts" + FILE_EXT_BINARY
ASSETLOCATION_CACHE = "cache"
ASSETLOCATION_SCENE = "scenes"
ASSETLOCATION_MODEL = "models"
ASSETLOCATION_TEXTURE = "textures"
ASSETLOCATION_FONT = "fonts"
ASSETLOCATION_SHADER = "shaders"
ASSETLOCATION_SCRIPT = "scripts"

PROJECT_NAME_MAX_LENGTH = 128


class EntryType(enum.IntEnum):
    """Kinds of file system entries the engine distinguishes."""

    DIRECTORY = 0
    BINARY = 1
    PROJECT = 2
    SCENE = 3
    ASSET_REGISTRY = 4
    IMAGE = 5
    SHADER = 6
    MODEL = 7
    MESH = 8
    MATERIAL = 9
    FONT = 10
    MISC = 11


_EXTENSION_MAP: dict[str, EntryType] = {
    FILE_EXT_PROJECT: EntryType.PROJECT,
    FILE_EXT_SCENE: EntryType.SCENE,
    FILE_EXT_ASSETREGISTRY: EntryType.ASSET_REGISTRY,
    FILE_EXT_BINARY: EntryType.BINARY,
    ".png": EntryType.IMAGE,
    ".jpg": EntryType.IMAGE,
    ".jpeg": EntryType.IMAGE,
    ".obj": EntryType.MODEL,
    ".mtl": EntryType.MATERIAL,
    ".glsl": EntryType.SHADER,
    ".ttf": EntryType.FONT,
    "": EntryType.MISC,
}

_ENTRY_TYPE_NAMES: dict[EntryType, str] = {
    EntryType.DIRECTORY: "Directory",
    EntryType.BINARY: "Binary",
    EntryType.PROJECT: "Project",
    EntryType.SCENE: "Scene",
    EntryType.ASSET_REGISTRY: "AssetRegistry",
    EntryType.IMAGE: "Image",
    EntryType.SHADER: "Shader",
    EntryType.MODEL: "Model",
    EntryType.MESH: "Mesh",
    EntryType.MATERIAL: "Material",
    EntryType.FONT: "Font",
    EntryType.MISC: "File",
}

_ENTRY_TYPES_BY_NAME: dict[str, EntryType] = {
    **{name: entry for entry, name in _ENTRY_TYPE_NAMES.items() if entry is not EntryType.MISC},
    "Misc": EntryType.MISC,
}


def root_directory() -> Path:
    """The engine root: the parent of the working directory on Windows, else the working directory."""
    cwd = Path.cwd()
    return cwd.parent if os.name == "nt" else cwd


def engine_directory() -> Path:
    return root_directory() / "C78Engine"


def editor_directory() -> Path:
    return root_directory() / "C78Editor"


def extension_to_entry_type(path: PathLike) -> EntryType:
    """Classify ``path`` as a directory or by its extension."""
    if is_directory(path):
        return EntryType.DIRECTORY
    return _EXTENSION_MAP.get(Path(path).suffix, EntryType.MISC)


def extensions_from_entry_type(entry_type: EntryType) -> list[str]:
    """Extensions belonging to ``entry_type``, sorted; ``[""]`` if it has none."""
    if entry_type is EntryType.DIRECTORY:
        return []
    extensions = sorted(ext for ext, kind in _EXTENSION_MAP.items() if kind is entry_type)
    return extensions or [""]


def entry_type_to_string(entry_type: EntryType) -> str:
    try:
        return _ENTRY_TYPE_NAMES[EntryType(entry_type)]
    except (ValueError, KeyError):
        raise ValueError(f"{entry_type!r} is not a valid entry type") from None


def entry_type_from_string(text: str) -> EntryType:
    try:
        return _ENTRY_TYPES_BY_NAME[text]
    except KeyError:
        raise ValueError(f"{text!r} does not name an entry type") from None


def asset_entry_types() -> list[EntryType]:
    return [
        EntryType.IMAGE,
        EntryType.SHADER,
        EntryType.MODEL,
        EntryType.MESH,
        EntryType.MATERIAL,
        EntryType.FONT,
    ]


def exists(path: PathLike) -> bool:
    return Path(path).exists()


def is_directory(path: PathLike) -> bool:
    """True for anything that is not a regular file and has no extension."""
    p = Path(path)
    return not p.is_file() and not p.suffix


def is_file(path: PathLike) -> bool:
    """True for anything that is not a directory and has an extension."""
    p = Path(path)
    return not p.is_dir() and bool(p.suffix)


def create_directory_if_not_present(path: PathLike) -> Path:
    p = Path(path)
    if not is_directory(p):
        raise ValueError(f"{p} is not a directory path")
    p.mkdir(parents=True, exist_ok=True)
    return p


def create_file_if_not_present(path: PathLike) -> Path:
    p = Path(path)
    if not is_file(p):
        raise ValueError(f"{p} is not a file path")
    if not p.exists():
        if p.parent != p:
            p.parent.mkdir(parents=True, exist_ok=True)
        p.touch()
    return p


def relative_path_to(path: PathLike, base_directory: PathLike | None = None) -> Path:
    """``path`` relative to ``base_directory`` (the root by default), or ``path`` itself if none exists."""
    base = root_directory() if base_directory is None else Path(base_directory)
    if not is_directory(base):
        raise ValueError(f"base directory {base} is not a directory")
    if not base.is_absolute():
        raise ValueError(f"base directory {base} is not an absolute path")
    try:
        relative = os.path.relpath(normalize_path(path), normalize_path(base))
    except ValueError:
        return Path(path)
    return Path(relative) if relative else Path(path)


def normalize_path(path: PathLike) -> Path:
    """Resolve the longest existing prefix of ``path`` and normalise the rest lexically."""
    p = Path(path)
    parts = p.parts
    if not parts:
        return p
    existing = next(
        (count for count in range(len(parts), 0, -1) if Path(*parts[:count]).exists()),
        None,
    )
    if existing is None:
        return Path(os.path.normpath(p))
    head = Path(*parts[:existing]).resolve(strict=True)
    rest = parts[existing:]
    return Path(os.path.normpath(head.joinpath(*rest))) if rest else head


def _require_absolute(path: PathLike) -> Path:
    if not str(path):
        raise ValueError("path must not be empty")
    p = Path(path)
    if not p.is_absolute():
        raise ValueError(f"path {p} is not absolute")
    return p


def read_text(path: PathLike) -> str:
    return _require_absolute(path).read_text()


def read_binary(path: PathLike) -> bytes:
    p = _require_absolute(path)
    data = p.read_bytes()
    if not data:
        raise ValueError(f"tried to read empty file {p}")
    return data


def write_file(path: PathLike, data: str | bytes) -> Path:
    """Write text or bytes to ``path``, creating it and its directories as needed."""
    p = create_file_if_not_present(_require_absolute(path))
    if isinstance(data, str):
        p.write_text(data)
    else:
        p.write_bytes(bytes(data))
    return p


def remove_file(path: PathLike) -> bool:
    """Delete a file; return whether it existed."""
    p = Path(path)
    if not is_file(p):
        raise ValueError(f"{p} is not a file path")
    try:
        p.unlink()
    except FileNotFoundError:
        return False
    return True


def remove_directory(path: PathLike) -> bool:
    """Delete a directory tree; return whether anything was removed."""
    p = Path(path)
    if not is_directory(p):
        raise ValueError(f"{p} is not a directory path")
    if not p.exists():
        return False
    shutil.rmtree(p)
    return True