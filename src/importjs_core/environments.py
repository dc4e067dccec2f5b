"""Built-in environment presets.

A preset is a partial config layer. Presets listed in the user config's
`environments` setting are stacked between the user layer and the defaults.
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from .packages import find_package_dependencies

logger = logging.getLogger(__name__)

NODE_CORE_MODULES = [
    "assert",
    "buffer",
    "child_process",
    "cluster",
    "console",
    "constants",
    "crypto",
    "dgram",
    "dns",
    "domain",
    "events",
    "fs",
    "http",
    "https",
    "module",
    "net",
    "os",
    "path",
    "process",
    "punycode",
    "querystring",
    "readline",
    "repl",
    "stream",
    "string_decoder",
    "sys",
    "timers",
    "tls",
    "tty",
    "url",
    "util",
    "v8",
    "vm",
    "zlib",
]

METEOR_CORE_MODULES = [
    "meteor/accounts-base",
    "meteor/blaze",
    "meteor/check",
    "meteor/ddp-client",
    "meteor/ddp-rate-limiter",
    "meteor/ejson",
    "meteor/email",
    "meteor/http",
    "meteor/meteor",
    "meteor/mongo",
    "meteor/random",
    "meteor/reactive-var",
    "meteor/session",
    "meteor/templating",
    "meteor/tracker",
]

METEOR_NAMED_EXPORTS = {
    "meteor/accounts-base": ["AccountsClient", "AccountsServer", "Accounts"],
    "meteor/blaze": ["Blaze"],
    "meteor/check": ["check", "Match"],
    "meteor/ddp-rate-limiter": ["DDPRateLimiter"],
    "meteor/ejson": ["EJSON"],
    "meteor/email": ["Email"],
    "meteor/http": ["HTTP"],
    "meteor/meteor": ["Meteor"],
    "meteor/mongo": ["Mongo"],
    "meteor/random": ["Random"],
    "meteor/reactive-var": ["ReactiveVar"],
    "meteor/session": ["Session"],
    "meteor/templating": ["Template"],
    "meteor/tracker": ["Tracker"],
}


def _meteor_module_name(ctx: Any) -> str:
    # App files are imported by absolute path from the project root.
    module_name = ctx.module_name or ""
    if module_name.startswith(("./", "../")) and ctx.path_to_imported_module:
        return "/" + ctx.path_to_imported_module
    return module_name


def _meteor_package_dependencies(ctx: Any) -> list[str]:
    working_directory = Path(ctx.config.working_directory)
    packages = find_package_dependencies(
        working_directory, ctx.config.get("importDevDependencies")
    )
    meteor_packages = working_directory / ".meteor" / "packages"
    if meteor_packages.is_file():
        for line in meteor_packages.read_text(encoding="utf-8").splitlines():
            name = line.split("#", 1)[0].split("@", 1)[0].strip()
            if name:
                packages.append(f"meteor/{name}")
    return packages


NODE_ENVIRONMENT: Mapping[str, Any] = MappingProxyType({
    "coreModules": NODE_CORE_MODULES,
})

METEOR_ENVIRONMENT: Mapping[str, Any] = MappingProxyType({
    "coreModules": METEOR_CORE_MODULES,
    "namedExports": METEOR_NAMED_EXPORTS,
    "moduleNameFormatter": _meteor_module_name,
    "packageDependencies": _meteor_package_dependencies,
})

ENVIRONMENTS: dict[str, Mapping[str, Any]] = {
    "node": NODE_ENVIRONMENT,
    "meteor": METEOR_ENVIRONMENT,
}


def get_environment(name: str) -> Mapping[str, Any] | None:
    """Look up a preset layer by name; ``None`` if it is not registered."""
    return ENVIRONMENTS.get(name)
