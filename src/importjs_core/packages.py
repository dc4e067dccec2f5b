"""Dependency discovery from package.json."""

import json
import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

PACKAGE_JSON = "package.json"
DEPENDENCY_SECTIONS = ("dependencies", "peerDependencies")
DEV_DEPENDENCY_SECTION = "devDependencies"


def find_package_dependencies(
    working_directory: Union[str, Path], include_dev_dependencies: bool = False
) -> list[str]:
    """Return the package names declared in ``package.json``.

    A missing or malformed file yields an empty list.
    """
    path = Path(working_directory) / PACKAGE_JSON
    if not path.is_file():
        return []
    try:
        with open(path, "r", encoding="utf-8") as f:
            package = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Unable to read %s: %s", path, e)
        return []
    if not isinstance(package, dict):
        return []

    sections = list(DEPENDENCY_SECTIONS)
    if include_dev_dependencies:
        sections.append(DEV_DEPENDENCY_SECTION)

    names: list[str] = []
    for section in sections:
        for name in package.get(section) or {}:
            if name not in names:
                names.append(name)
    return names
