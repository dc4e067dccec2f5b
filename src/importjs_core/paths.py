"""Path helpers shared by the configuration and module resolution code.

All returned paths use POSIX separators, matching how import paths are
written in JavaScript sources.
"""

import os
from pathlib import Path, PurePosixPath
from typing import Union

PathLike = Union[str, Path]

# Tried in order when a relative specifier names a file without extension.
RESOLVE_EXTENSIONS = (".js", ".jsx", ".json")
INDEX_FILES = ("index.js", "index.jsx")


def _to_posix(path: str) -> str:
    return path.replace(os.sep, "/") if os.sep != "/" else path


def normalize_path(path: PathLike, working_directory: PathLike) -> str:
    """Return `path` relative to `working_directory` where possible.

    Paths outside the working directory are returned absolute. A leading
    ``./`` is stripped from relative input.
    """
    raw = str(path)
    if not raw:
        return ""
    candidate = Path(raw)
    if candidate.is_absolute():
        try:
            raw = str(candidate.relative_to(Path(working_directory)))
        except ValueError:
            return _to_posix(raw)
    normalized = _to_posix(raw)
    while normalized.startswith("./"):
        normalized = normalized[2:]
    return normalized


def _resolve_file(base: Path) -> Union[Path, None]:
    if base.is_file():
        return base
    for ext in RESOLVE_EXTENSIONS:
        with_ext = base.with_name(base.name + ext)
        if with_ext.is_file():
            return with_ext
    if base.is_dir():
        for index in INDEX_FILES:
            if (base / index).is_file():
                return base / index
    return None


def require_resolve(specifier: str, working_directory: PathLike) -> str:
    """Resolve a module specifier to a path relative to `working_directory`.

    Relative specifiers are looked up on disk. Bare specifiers map into
    ``node_modules`` when installed there. Anything unresolvable is returned
    unchanged.
    """
    root = Path(working_directory)
    if specifier.startswith(("./", "../")):
        resolved = _resolve_file(root / specifier)
        if resolved is None:
            return specifier
        return normalize_path(os.path.normpath(resolved.resolve()), root.resolve())

    installed = root / "node_modules" / specifier
    if installed.exists() or _resolve_file(installed) is not None:
        return str(PurePosixPath("node_modules", *PurePosixPath(specifier).parts))
    return specifier
