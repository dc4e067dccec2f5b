"""ImportJS Core - layered configuration and import target resolution."""

from .__version__ import __version__, __version_info__

from .configuration import Configuration, ResolutionContext, check_current_version, merged_value
from .environments import ENVIRONMENTS
from .js_module import JsModule
from .logging_utils import configure_logging
from .settings import (
    DEFAULT_CONFIG,
    KNOWN_CONFIGURATION_OPTIONS,
    MERGABLE_CONFIG_OPTIONS,
    SettingPolicy,
)
from .errors import (
    ImportJSError,
    ConfigError,
    ConfigParseError,
    ConfigExportError,
    VersionMismatchError,
    UnknownConfigKeyWarning,
    DeprecatedFormatWarning,
)

__all__ = [
    # Version
    "__version__",
    "__version_info__",
    # Config
    "Configuration",
    "ResolutionContext",
    "check_current_version",
    "merged_value",
    "configure_logging",
    "DEFAULT_CONFIG",
    "ENVIRONMENTS",
    "KNOWN_CONFIGURATION_OPTIONS",
    "MERGABLE_CONFIG_OPTIONS",
    "SettingPolicy",
    # Modules
    "JsModule",
    # Errors
    "ImportJSError",
    "ConfigError",
    "ConfigParseError",
    "ConfigExportError",
    "VersionMismatchError",
    "UnknownConfigKeyWarning",
    "DeprecatedFormatWarning",
]
