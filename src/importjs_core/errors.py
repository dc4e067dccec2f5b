"""Exception taxonomy for importjs-core."""

from pathlib import Path


class ImportJSError(Exception):
    """Base exception for all importjs-core errors."""

    pass


# Config errors


class ConfigError(ImportJSError):
    """Failed to load the project configuration."""

    pass


class ConfigParseError(ConfigError):
    """Config file content could not be parsed or evaluated."""

    def __init__(self, path: Path, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Parse error in {path}: {details}")


class ConfigExportError(ConfigError):
    """Executable config ran but exported nothing."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"Nothing exported from {path.name}. You need to assign a dict to "
            "`config` to specify what gets exported from the file."
        )


# Version errors


class VersionMismatchError(ImportJSError):
    """Running tool is older than the configured `minimumVersion`."""

    def __init__(self, minimum_version: str, current_version: str, reason: str = "") -> None:
        self.minimum_version = minimum_version
        self.current_version = current_version
        message = (
            "The configuration file for this project requires version "
            f"{minimum_version} or newer. You are using {current_version}."
        )
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


# Diagnostic categories (emitted through `warnings`, never raised)


class UnknownConfigKeyWarning(UserWarning):
    """User config contains a key outside the known set."""


class DeprecatedFormatWarning(DeprecationWarning):
    """Legacy JSON config file was used."""
