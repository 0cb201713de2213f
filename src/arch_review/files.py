from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator


logger = logging.getLogger(__name__)

DEFAULT_INCLUDE_EXTS = {
    ".js",
    ".jsx",
    ".ts",
    ".tsx",
    ".mjs",
    ".cjs",
}

DEFAULT_EXCLUDE_DIRS = {
    ".git",
    "node_modules",
    "dist",
    "build",
    ".next",
    "coverage",
}


def iter_candidate_files(
    targets: Iterable[str | Path],
    *,
    include_exts: set[str] | None = None,
    exclude_dirs: set[str] | None = None,
) -> Iterator[Path]:
    include = include_exts or DEFAULT_INCLUDE_EXTS
    exclude = exclude_dirs or DEFAULT_EXCLUDE_DIRS

    for target in targets:
        root = Path(target)
        if root.is_file():
            yield root
            continue
        if not root.is_dir():
            logger.warning("Skipping missing path: %s", root)
            continue
        for path in sorted(root.rglob("*")):
            if not path.is_file():
                continue
            if any(part in exclude for part in path.relative_to(root).parts):
                continue
            if path.suffix.lower() in include:
                yield path


def read_source(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.warning("Skipping unreadable file %s: %s", path, exc)
        return None


def display_path(path: Path) -> str:
    """Repository-style path: relative to the working directory when possible."""
    try:
        return path.resolve().relative_to(Path.cwd().resolve()).as_posix()
    except ValueError:
        return path.as_posix()
