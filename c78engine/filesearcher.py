"""Wildcard file name search: ``*`` stands for any run of characters."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence

from .filesystem import PathLike

_ILLEGAL = ("/", "\\", "%", '"')


def validate_directive(directive: str) -> bool:
    """False if the directive holds a path separator, ``%`` or a double quote."""
    return not any(char in directive for char in _ILLEGAL)


def parse_directive(directive: str) -> list[str]:
    """Split a directive on ``*``; a leading wildcard gives an empty first part."""
    return directive.split("*")


def _find(haystack: str, needle: str, match_case: bool) -> int:
    if match_case:
        return haystack.find(needle)
    return haystack.lower().find(needle.lower())


def match_filename(filename: str, patterns: Sequence[str], match_case: bool) -> bool:
    """True if ``filename`` holds the patterns in order.

    The first part, when not empty, must begin the name exactly (this check
    always respects case); the later parts may follow anywhere after it.
    """
    if not patterns:
        return True
    first = patterns[0]
    if first and not filename.startswith(first):
        return False
    pos = len(first)
    for pattern in patterns[1:]:
        if not pattern:
            continue
        if pos >= len(filename):
            return False
        found = _find(filename[pos:], pattern, match_case)
        if found < 0:
            return False
        pos += found + len(pattern)
    return True


def _walk(directory: Path, patterns: Sequence[str], recursive: bool, match_case: bool) -> list[Path]:
    result: list[Path] = []
    with os.scandir(directory) as entries:
        ordered = sorted(entries, key=lambda entry: entry.name)
    for entry in ordered:
        path = Path(entry.path)
        if match_filename(entry.name, patterns, match_case):
            result.append(path)
        if recursive and entry.is_dir():
            result.extend(_walk(path, patterns, True, match_case))
    return result


def search(
    base_directory: PathLike,
    directive: str,
    recursive: bool = True,
    match_case: bool = False,
) -> list[Path]:
    """Entries under ``base_directory`` whose names match ``directive``.

    An invalid directive yields no results.
    """
    if not validate_directive(directive):
        return []
    return _walk(Path(base_directory), parse_directive(directive), recursive, match_case)