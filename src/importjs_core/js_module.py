"""Resolved import target handed to the import-insertion layer."""

import posixpath
from dataclasses import dataclass
from typing import Optional


@dataclass
class JsModule:
    """A module that can satisfy an import for `variable_name`."""

    import_path: str
    variable_name: Optional[str] = None
    has_named_exports: bool = False

    def make_relative_to(self, path_to_file: str) -> None:
        """Rewrite `import_path` relative to the directory of `path_to_file`.

        Both paths are expected relative to the same working directory.
        """
        base = posixpath.dirname(path_to_file) or "."
        import_path = posixpath.relpath(self.import_path, base)
        # relpath drops the "./" for siblings
        if not import_path.startswith("."):
            import_path = f"./{import_path}"
        self.import_path = import_path
