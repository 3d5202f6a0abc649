import json

import pytest

from basestr.cli import main

STUB = """\
from typing import Callable


class Custom:
    def __str__(self) -> str: ...


class Plain: ...


class Money: ...


good: Custom
bad: Plain
mixed: Custom | Plain
money: Money
fn: Callable[[], None]
"""


@pytest.fixture
def stub_path(tmp_path):
    path = tmp_path / "types.py"
    path.write_text(STUB, encoding="utf-8")
    return str(path)


def test_reports_every_name_by_default(stub_path, capsys):
    assert main([stub_path]) == 1
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "good: always",
        "bad: never",
        "mixed: sometimes",
        "money: never",
        "fn: always",
    ]


def test_selected_useful_names_exit_zero(stub_path, capsys):
    assert main([stub_path, "good", "fn"]) == 0
    assert capsys.readouterr().out.splitlines() == ["good: always", "fn: always"]


def test_reject_functions_flag(stub_path, capsys):
    assert main([stub_path, "fn", "--reject-functions"]) == 1
    assert capsys.readouterr().out.splitlines() == ["fn: function"]


def test_ignore_type_flag_widens_defaults(stub_path, capsys):
    assert main([stub_path, "money", "--ignore-type", "Money"]) == 0
    assert capsys.readouterr().out.splitlines() == ["money: always"]


def test_options_json(stub_path, capsys):
    options = json.dumps({"ignoredTypeNames": ["Plain"], "rejectFunctions": True})
    assert main([stub_path, "bad", "fn", "--options", options]) == 1
    assert capsys.readouterr().out.splitlines() == ["bad: always", "fn: function"]


def test_explain_lists_offending_constituents(stub_path, capsys):
    assert main([stub_path, "mixed", "--explain"]) == 1
    assert capsys.readouterr().out.splitlines() == ["mixed: sometimes", "  offending: Plain"]


def test_bad_options_exit_with_usage_error(stub_path):
    with pytest.raises(SystemExit) as info:
        main([stub_path, "--options", "[1, 2]"])
    assert info.value.code == 2


def test_stub_errors_exit_two(tmp_path, capsys):
    path = tmp_path / "broken.py"
    path.write_text("x: Missing\n", encoding="utf-8")
    assert main([str(path)]) == 2
    assert "unknown type name: Missing" in capsys.readouterr().err


def test_unknown_name_and_missing_file_exit_two(stub_path, tmp_path, capsys):
    assert main([stub_path, "nope"]) == 2
    assert main([str(tmp_path / "absent.py")]) == 2
    err = capsys.readouterr().err
    assert "no annotated name 'nope'" in err


def test_undecodable_stub_exits_two(tmp_path, capsys):
    path = tmp_path / "binary.py"
    path.write_bytes(b"x: int\n\xff\xfe\n")
    assert main([str(path)]) == 2
    assert capsys.readouterr().err.startswith(f"error: {path}: ")


def test_string_options_are_usage_errors(stub_path):
    for options in ('{"ignoredTypeNames": "Error"}', '{"rejectFunctions": "false"}'):
        with pytest.raises(SystemExit) as info:
            main([stub_path, "--options", options])
        assert info.value.code == 2
