"""Tests for reverse lookup through `namedExports`."""

from pathlib import Path

from conftest import write_py_config
from importjs_core.configuration import Configuration


def test_local_module_is_made_relative_to_current_file(project: Path):
    (project / "utils").mkdir()
    (project / "utils" / "math.js").write_text("", encoding="utf-8")
    (project / "src" / "components").mkdir()
    write_py_config(project, 'config = {"namedExports": {"./utils/math": ["add", "sub"]}}\n')

    config = Configuration("src/components/Button.js", project)
    js_module = config.resolve_named_exports("add")

    assert js_module.import_path == "../../utils/math"
    assert js_module.variable_name == "add"
    assert js_module.has_named_exports is True


def test_sibling_module_gets_dot_slash(project: Path):
    (project / "src" / "math.js").write_text("", encoding="utf-8")
    write_py_config(project, 'config = {"namedExports": {"./src/math": ["sub"]}}\n')

    js_module = Configuration("src/app.js", project).resolve_named_exports("sub")

    assert js_module.import_path == "./math"


def test_installed_package_is_left_unchanged(project: Path):
    (project / "node_modules" / "lodash").mkdir(parents=True)
    write_py_config(project, 'config = {"namedExports": {"lodash": ["debounce", "throttle"]}}\n')

    js_module = Configuration("src/app.js", project).resolve_named_exports("throttle")

    assert js_module.import_path == "lodash"
    assert js_module.has_named_exports is True


def test_meteor_namespace_is_left_unchanged(project: Path):
    write_py_config(project, 'config = {"environments": ["meteor"]}\n')

    js_module = Configuration("src/app.js", project).resolve_named_exports("Meteor")

    assert js_module.import_path == "meteor/meteor"


def test_first_declaring_module_wins(project: Path):
    (project / "node_modules" / "a").mkdir(parents=True)
    (project / "node_modules" / "b").mkdir(parents=True)
    write_py_config(project, 'config = {"namedExports": {"a": ["x"], "b": ["x", "y"]}}\n')

    config = Configuration("src/app.js", project)

    assert config.resolve_named_exports("x").import_path == "a"
    assert config.resolve_named_exports("y").import_path == "b"


def test_unknown_symbol_is_none(project: Path):
    write_py_config(project, 'config = {"namedExports": {"lodash": ["debounce"]}}\n')

    assert Configuration("src/app.js", project).resolve_named_exports("map") is None


def test_no_named_exports_configured(project: Path):
    assert Configuration("src/app.js", project).resolve_named_exports("add") is None


def test_scalar_named_exports_setting_resolves_nothing(project: Path):
    write_py_config(project, 'config = {"namedExports": "lodash"}\n')

    assert Configuration("src/app.js", project).resolve_named_exports("debounce") is None
