"""Readers for the two project config formats.

Both readers return ``None`` when the file does not exist so callers can fall
through to the next candidate. Anything present but unreadable raises
:class:`ConfigParseError`.
"""

import json
import logging
import runpy
import traceback
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from .errors import ConfigParseError

logger = logging.getLogger(__name__)

# Name the executable config must bind its settings to.
EXPORT_NAME = "config"


def read_python_file(path: Path) -> Optional[dict[str, Any]]:
    """Execute a Python config file and return its exported ``config`` mapping.

    A file that runs cleanly but binds nothing to ``config`` yields ``{}``.
    """
    if not path.is_file():
        return None
    logger.debug("Executing config file %s", path)
    try:
        namespace = runpy.run_path(str(path), run_name="__importjs_config__")
    except Exception as e:
        raise ConfigParseError(path, "".join(traceback.format_exception(e)).rstrip()) from e

    exported = namespace.get(EXPORT_NAME)
    if exported is None:
        return {}
    if not isinstance(exported, Mapping):
        raise ConfigParseError(
            path, f"`{EXPORT_NAME}` must be a dict, got {type(exported).__name__}"
        )
    return dict(exported)


def read_json_file(path: Path) -> Optional[dict[str, Any]]:
    """Read a JSON config file; the top-level value must be an object."""
    if not path.is_file():
        return None
    logger.debug("Reading config file %s", path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(path, f"Invalid JSON: {e}") from e
    except OSError as e:
        raise ConfigParseError(path, str(e)) from e
    if not isinstance(data, dict):
        raise ConfigParseError(path, "Config JSON must be an object")
    return data
