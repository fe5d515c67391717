import ast

import pytest

from pysketch.cli import (
    TEMPLATES,
    ProjectError,
    create_new_project,
    list_templates,
    main,
    print_usage,
)


@pytest.mark.parametrize("name", ["basic", "rectangle", "line"])
def test_created_templates_are_valid_python(tmp_path, name):
    result = create_new_project(str(tmp_path / name), name)
    tree = ast.parse((result / "main.py").read_text(encoding="utf-8"))
    assert any(isinstance(node, ast.FunctionDef) and node.name == "draw" for node in ast.walk(tree))


def test_create_project_default_template(tmp_path, capsys):
    target = tmp_path / "proj"
    result = create_new_project(str(target), "")
    assert result == target
    assert (target / "main.py").read_text(encoding="utf-8") == TEMPLATES["basic"]
    assert "pysketch" in (target / "requirements.txt").read_text(encoding="utf-8")
    assert "'basic'" in capsys.readouterr().out


def test_create_project_named_template(tmp_path):
    target = tmp_path / "grid"
    create_new_project(str(target), "line")
    assert (target / "main.py").read_text(encoding="utf-8") == TEMPLATES["line"]


def test_empty_name_raises():
    with pytest.raises(ProjectError):
        create_new_project("", "basic")


def test_unknown_template_raises_and_creates_nothing(tmp_path):
    target = tmp_path / "proj"
    with pytest.raises(ProjectError, match="nope"):
        create_new_project(str(target), "nope")
    assert not target.exists()


def test_existing_directory_raises(tmp_path):
    target = tmp_path / "proj"
    target.mkdir()
    with pytest.raises(ProjectError):
        create_new_project(str(target), "basic")


def test_usage_and_listing_name_all_templates(capsys):
    print_usage()
    list_templates()
    out = capsys.readouterr().out
    assert all(out.count(name) >= 2 for name in TEMPLATES)


def test_main_without_arguments_fails(capsys):
    assert main([]) == 1
    assert "list-templates" in capsys.readouterr().out


def test_main_help_and_list_succeed(capsys):
    assert main(["help"]) == 0
    assert main(["list-templates"]) == 0
    assert "rectangle" in capsys.readouterr().out


def test_main_unknown_command(capsys):
    assert main(["bogus"]) == 1
    assert "bogus" in capsys.readouterr().out


def test_main_new_without_name(capsys):
    assert main(["new"]) == 1
    assert "Error" in capsys.readouterr().out


def test_main_new_creates_project(tmp_path):
    target = tmp_path / "shapes"
    assert main(["new", str(target), "rectangle"]) == 0
    assert (target / "main.py").read_text(encoding="utf-8") == TEMPLATES["rectangle"]


def test_main_new_reports_error(tmp_path, capsys):
    assert main(["new", str(tmp_path / "x"), "missing"]) == 1
    assert "missing" in capsys.readouterr().out