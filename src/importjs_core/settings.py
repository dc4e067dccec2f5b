"""Setting keys, merge policy, system defaults and user-config validation."""

from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, StrictBool, StrictInt, StrictStr
from pydantic import ValidationError as PydanticValidationError

from .packages import find_package_dependencies


class SettingPolicy(str, Enum):
    """How values for one key combine across config layers."""

    OVERRIDE = "override"
    MERGE = "merge"


KNOWN_CONFIGURATION_OPTIONS = (
    "aliases",
    "coreModules",
    "declarationKeyword",
    "environments",
    "excludes",
    "groupImports",
    "ignorePackagePrefixes",
    "importDevDependencies",
    "importFunction",
    "logLevel",
    "maxLineLength",
    "minimumVersion",
    "moduleNameFormatter",
    "moduleSideEffectImports",
    "namedExports",
    "stripFileExtensions",
    "tab",
)

# Defaults and environment values for these keys are combined with the user
# config instead of being replaced by it.
MERGABLE_CONFIG_OPTIONS = frozenset({"aliases", "coreModules", "namedExports"})


def policy_for(key: str) -> SettingPolicy:
    if key in MERGABLE_CONFIG_OPTIONS:
        return SettingPolicy.MERGE
    return SettingPolicy.OVERRIDE


def _default_module_name_formatter(ctx: Any) -> Optional[str]:
    return ctx.module_name


def _default_module_side_effect_imports(ctx: Any) -> list[str]:
    return []


def _default_package_dependencies(ctx: Any) -> list[str]:
    return find_package_dependencies(
        ctx.config.working_directory, ctx.config.get("importDevDependencies")
    )


DEFAULT_CONFIG: Mapping[str, Any] = MappingProxyType({
    "aliases": {},
    "declarationKeyword": "import",
    "coreModules": [],
    "namedExports": {},
    "environments": [],
    "excludes": [],
    "groupImports": True,
    "ignorePackagePrefixes": [],
    "importDevDependencies": False,
    "importFunction": "require",
    "logLevel": "info",
    "maxLineLength": 80,
    "minimumVersion": "0.0.0",
    "moduleNameFormatter": _default_module_name_formatter,
    "moduleSideEffectImports": _default_module_side_effect_imports,
    "stripFileExtensions": [".js", ".jsx"],
    "tab": "  ",
    "packageDependencies": _default_package_dependencies,
})


# Validation


Generator = Callable[..., Any]


class AliasTarget(BaseModel):
    """Structured alias entry; only `path` is interpreted."""

    path: StrictStr

    model_config = ConfigDict(extra="allow")


class UserSettings(BaseModel):
    """Shape of a project config. Every setting may also be a generator."""

    aliases: Optional[Union[dict[str, Union[StrictStr, AliasTarget]], Generator]] = None
    coreModules: Optional[Union[list[StrictStr], Generator]] = None
    declarationKeyword: Optional[Union[Literal["import", "const", "let", "var"], Generator]] = None
    environments: Optional[Union[list[StrictStr], Generator]] = None
    excludes: Optional[Union[list[StrictStr], Generator]] = None
    groupImports: Optional[Union[StrictBool, Generator]] = None
    ignorePackagePrefixes: Optional[Union[list[StrictStr], Generator]] = None
    importDevDependencies: Optional[Union[StrictBool, Generator]] = None
    importFunction: Optional[Union[StrictStr, Generator]] = None
    logLevel: Optional[Union[Literal["debug", "info", "warn", "error"], Generator]] = None
    maxLineLength: Optional[Union[StrictInt, Generator]] = None
    minimumVersion: Optional[Union[StrictStr, Generator]] = None
    moduleNameFormatter: Optional[Generator] = None
    moduleSideEffectImports: Optional[Union[list[StrictStr], Generator]] = None
    namedExports: Optional[Union[dict[str, list[StrictStr]], Generator]] = None
    stripFileExtensions: Optional[Union[list[StrictStr], Generator]] = None
    tab: Optional[Union[StrictStr, Generator]] = None

    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)


def check_for_unknown_configuration(config: Mapping[str, Any]) -> list[str]:
    return [
        f"Unknown configuration: `{option}`"
        for option in config
        if option not in KNOWN_CONFIGURATION_OPTIONS
    ]


def check_setting_types(config: Mapping[str, Any]) -> list[str]:
    """Validate known keys; one message per offending key."""
    known = {key: value for key, value in config.items() if key in KNOWN_CONFIGURATION_OPTIONS}
    try:
        UserSettings.model_validate(known)
    except PydanticValidationError as e:
        reasons: dict[str, str] = {}
        for error in e.errors():
            key = str(error["loc"][0])
            # a union reports one error per member; keep the first
            reasons.setdefault(key, error["msg"])
        return [f"Invalid configuration `{key}`: {reason}" for key, reason in reasons.items()]
    return []
