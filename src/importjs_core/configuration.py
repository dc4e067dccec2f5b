"""Effective configuration for a single import-resolution request.

Config layers, highest priority first:
1) User config: .importjs.py (preferred) or .importjs.json (deprecated)
2) Environment presets named in the user config's `environments`, in order
3) System defaults (always present, defines every known key)

Most keys take the value of the highest layer that defines them. Keys in
MERGABLE_CONFIG_OPTIONS combine across layers instead: lists concatenate and
dicts union, with the higher layer winning on conflicting entries.

Any value may be a callable. It is invoked lazily on each `get` with a
`ResolutionContext`, so settings can depend on the file being edited.
"""

import copy
import logging
import os
import posixpath
import re
import warnings
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Optional, Sequence, Union

from packaging.version import InvalidVersion, Version

from .__version__ import __version__
from .environments import get_environment
from .errors import (
    ConfigError,
    ConfigExportError,
    DeprecatedFormatWarning,
    UnknownConfigKeyWarning,
    VersionMismatchError,
)
from .file_utils import read_json_file, read_python_file
from .js_module import JsModule
from .paths import normalize_path, require_resolve
from .settings import (
    SettingPolicy,
    check_for_unknown_configuration,
    check_setting_types,
    DEFAULT_CONFIG,
    policy_for,
)

logger = logging.getLogger(__name__)

JSON_CONFIG_FILE = ".importjs.json"
PY_CONFIG_FILE = ".importjs.py"

FILENAME_PLACEHOLDER = re.compile(r"\{filename\}")

# Resolved paths under these prefixes are package imports, never made relative.
PACKAGE_NAMESPACE_PREFIXES = ("meteor/", "node_modules/")

DEPRECATED_JSON_MESSAGE = (
    "Using JSON to configure ImportJS is deprecated and will go away "
    f"in a future version. Use an `{PY_CONFIG_FILE}` file instead."
)


@dataclass(frozen=True)
class ResolutionContext:
    """Arguments passed to callable setting values."""

    config: "Configuration"
    path_to_current_file: str
    path_to_imported_module: Optional[str] = None
    module_name: Optional[str] = None


def _precedence(version: str) -> Version:
    # build metadata ("+build.5") does not take part in precedence
    return Version(Version(version).public)


def check_current_version(minimum_version: str, current_version: str) -> None:
    """Raise VersionMismatchError if `current_version` < `minimum_version`."""
    try:
        if _precedence(current_version) >= _precedence(str(minimum_version)):
            return
    except InvalidVersion as e:
        raise VersionMismatchError(str(minimum_version), current_version, str(e)) from e
    raise VersionMismatchError(str(minimum_version), current_version)


def merged_value(values: Sequence[Any], key: str, context: ResolutionContext) -> Any:
    """Fold per-layer values for `key`, highest priority first."""
    policy = policy_for(key)
    merged: Union[list[Any], dict[str, Any], None] = None
    for value in values:
        # results never alias a layer's static value
        value = value(context) if callable(value) else copy.deepcopy(value)
        if policy is SettingPolicy.OVERRIDE:
            return value
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            if merged is None:
                merged = []
            elif not isinstance(merged, list):
                logger.warning("Skipping list value for `%s` while merging dicts", key)
                continue
            merged.extend(value)
        elif isinstance(value, Mapping):
            if merged is None:
                merged = {}
            elif not isinstance(merged, dict):
                logger.warning("Skipping dict value for `%s` while merging lists", key)
                continue
            for entry, entry_value in value.items():
                merged.setdefault(entry, entry_value)
        else:
            # scalars are not mergeable; first one wins outright
            return value
    return merged


class Configuration:
    """Layered configuration scoped to one file in one working directory."""

    def __init__(
        self,
        path_to_current_file: Union[str, Path],
        working_directory: Optional[Union[str, Path]] = None,
        *,
        tool_version: Optional[str] = None,
    ) -> None:
        self.working_directory = Path(working_directory) if working_directory else Path(os.getcwd())
        self.path_to_current_file = normalize_path(path_to_current_file, self.working_directory)
        self.tool_version = tool_version or __version__

        self._messages: list[str] = []
        self._layers: list[Mapping[str, Any]] = []

        user_config: Optional[dict[str, Any]] = None
        try:
            user_config = self.load_user_config()
        except ConfigError as e:
            self._add_message(f"Unable to parse configuration file. Reason:\n{e}")

        if user_config:
            self._layers.append(MappingProxyType(user_config))
            for message in check_for_unknown_configuration(user_config):
                self._add_message(message, UnknownConfigKeyWarning)
            for message in check_setting_types(user_config):
                self._add_message(message)

            for environment in self.get("environments") or []:
                preset = get_environment(environment)
                if preset is None:
                    self._add_message(f"Unknown environment: `{environment}`")
                    continue
                self._layers.append(MappingProxyType(preset))

        self._layers.append(DEFAULT_CONFIG)
        logger.debug(
            "Assembled %d config layers for %s in %s",
            len(self._layers),
            self.path_to_current_file or "<no file>",
            self.working_directory,
        )

        check_current_version(self.get("minimumVersion"), self.tool_version)

    @property
    def messages(self) -> tuple[str, ...]:
        """Diagnostics collected while loading the configuration."""
        return tuple(self._messages)

    @property
    def layers(self) -> tuple[Mapping[str, Any], ...]:
        return tuple(self._layers)

    def _add_message(self, message: str, category: Optional[type[Warning]] = None) -> None:
        self._messages.append(message)
        logger.warning(message)
        if category is not None:
            warnings.warn(message, category, stacklevel=3)

    def get(
        self,
        key: str,
        *,
        path_to_imported_module: Optional[str] = None,
        module_name: Optional[str] = None,
    ) -> Any:
        """Return the effective value for `key`, or None if no layer defines it."""
        applying = [layer[key] for layer in self._layers if key in layer]
        context = ResolutionContext(
            config=self,
            path_to_current_file=self.path_to_current_file,
            path_to_imported_module=path_to_imported_module,
            module_name=module_name,
        )
        return merged_value(applying, key, context)

    def load_user_config(self) -> Optional[dict[str, Any]]:
        """Read the project config file, preferring the Python format.

        Raises:
            ConfigExportError: .importjs.py exists but exports nothing.
            ConfigParseError: a config file exists but cannot be read.
        """
        py_path = self.working_directory / PY_CONFIG_FILE
        py_config = read_python_file(py_path)
        if py_config is not None and len(py_config) == 0:
            # Forgetting to bind `config` leaves the export empty; surface it
            # instead of silently running on defaults.
            raise ConfigExportError(py_path)
        if py_config:
            return py_config

        json_config = read_json_file(self.working_directory / JSON_CONFIG_FILE)
        if json_config is not None:
            self._add_message(DEPRECATED_JSON_MESSAGE, DeprecatedFormatWarning)
        return json_config

    def resolve_alias(
        self, variable_name: str, path_to_current_file: Optional[str] = None
    ) -> Optional[JsModule]:
        """Resolve `variable_name` through the `aliases` table."""
        aliases = self.get("aliases")
        if not isinstance(aliases, Mapping):
            return None
        import_path = aliases.get(variable_name)
        if not import_path:
            return None

        # entries may be {"path": ...}
        if isinstance(import_path, Mapping):
            import_path = import_path.get("path")
            if not import_path:
                return None

        if path_to_current_file:
            stem, _ = posixpath.splitext(posixpath.basename(str(path_to_current_file)))
            import_path = FILENAME_PLACEHOLDER.sub(lambda _: stem, import_path, count=1)
        return JsModule(import_path=import_path, variable_name=variable_name)

    def resolve_named_exports(self, variable_name: str) -> Optional[JsModule]:
        """Find the module whose `namedExports` entry lists `variable_name`."""
        all_named_exports = self.get("namedExports")
        if not isinstance(all_named_exports, Mapping):
            return None
        import_path = next(
            (
                module
                for module, names in all_named_exports.items()
                if variable_name in names
            ),
            None,
        )
        if import_path is None:
            return None

        relative_file_path = require_resolve(import_path, self.working_directory)
        js_module = JsModule(
            import_path=import_path,
            variable_name=variable_name,
            has_named_exports=True,
        )
        if relative_file_path.startswith(PACKAGE_NAMESPACE_PREFIXES):
            return js_module

        js_module.make_relative_to(self.path_to_current_file)
        return js_module
