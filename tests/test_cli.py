"""
Tests for the command-line front end.
"""

import pytest

from twotouch.cli import main


def test_encode_prints_each_candidate(capsys):
    assert main(["encode", "ごくろうさん"]) == 0

    assert capsys.readouterr().out.splitlines() == ["5963", "25042395133103"]


def test_encode_without_shortcuts(capsys):
    assert main(["encode", "--no-shortcuts", "ごくろうさん"]) == 0

    assert capsys.readouterr().out.splitlines() == ["25042395133103"]


def test_decode(capsys):
    assert main(["decode", "81225223"]) == 0

    assert capsys.readouterr().out.splitlines() == ["やきにく"]


def test_multiple_inputs_are_prefixed(capsys):
    assert main(["decode", "48564940", "81225223"]) == 0

    assert capsys.readouterr().out.splitlines() == ["48564940: RUST", "81225223: やきにく"]


def test_errors_go_to_stderr_and_set_exit_code(capsys):
    assert main(["decode", "8080", "48564940"]) == 1

    captured = capsys.readouterr()
    assert "error:" in captured.err
    assert captured.out.splitlines() == ["48564940: RUST"]


def test_encode_error(capsys):
    assert main(["encode", "筋肉"]) == 1

    assert "no two-touch code" in capsys.readouterr().err


def test_command_is_required():
    with pytest.raises(SystemExit):
        main([])
