from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class SourceLocation:
    file_path: Optional[str] = None
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based


def location_from_mark(file_path: Optional[str], mark) -> SourceLocation:
    """Create a SourceLocation from a PyYAML mark (0-based line/column)."""

    if mark is None:
        return SourceLocation(file_path=file_path)

    return SourceLocation(
        file_path=file_path,
        line=int(mark.line) + 1,
        column=int(mark.column) + 1,
    )


def location_from_yaml_error(file_path: Optional[str], exc: Exception) -> SourceLocation:
    mark = getattr(exc, "problem_mark", None) or getattr(exc, "context_mark", None)
    return location_from_mark(file_path, mark)


def _format_file_path(file_path: str) -> str:
    # URLs are shown as given
    if "://" in file_path:
        return file_path

    root = os.environ.get("YAML_MANIFEST_FILE_SOURCE_ROOT")
    if not root:
        return file_path

    try:
        return str(Path(file_path).relative_to(root))
    except ValueError:
        return file_path


def format_source(loc: Optional[SourceLocation]) -> str:
    if not loc:
        return ""

    if loc.file_path is None:
        if loc.line is None:
            return ""
        if loc.column is None:
            return f" (line {loc.line})"
        return f" (line {loc.line}, column {loc.column})"

    file_path = _format_file_path(loc.file_path)
    if loc.line is not None and loc.column is not None:
        return f" (source= {file_path}:{loc.line}:{loc.column})"
    if loc.line is not None:
        return f" (source= {file_path}:{loc.line})"
    return f" (source= {file_path})"
