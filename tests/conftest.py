import json
import sys
import textwrap
import warnings
from pathlib import Path
from typing import Any, Optional

import pytest
from hypothesis import settings

# Ensure src/ is importable when running tests from a checkout.
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from importjs_core.errors import DeprecatedFormatWarning, UnknownConfigKeyWarning  # noqa: E402

# Silence diagnostics that tests trigger on purpose; they are asserted via
# Configuration.messages or pytest.warns where they matter.
warnings.filterwarnings("ignore", category=DeprecatedFormatWarning)
warnings.filterwarnings("ignore", category=UnknownConfigKeyWarning)

# Prevent Hypothesis from writing a local example database (e.g. `.hypothesis/`) during tests.
settings.register_profile("importjs-tests", database=None)
settings.load_profile("importjs-tests")


def write_py_config(project_root: Path, source: str) -> Path:
    """Write `.importjs.py` with the given (dedented) Python source."""
    path = project_root / ".importjs.py"
    path.write_text(textwrap.dedent(source).lstrip(), encoding="utf-8")
    return path


def write_json_config(project_root: Path, data: Any, *, raw: Optional[str] = None) -> Path:
    """Write `.importjs.json`; `raw` bypasses JSON encoding for malformed input."""
    path = project_root / ".importjs.json"
    path.write_text(raw if raw is not None else json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Empty project root with a source file at src/app.js."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "app.js").write_text("", encoding="utf-8")
    return tmp_path
