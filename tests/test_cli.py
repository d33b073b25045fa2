import pytest

from huelerp import __version__
from huelerp.cli import main, split_colors


def test_split_colors():
    assert split_colors(["#FF0000 #00FF00", "0000FF"]) == ["#FF0000", "#00FF00", "0000FF"]


def test_main_prints_gradient(console, term_output):
    code = main(["--gradient-length", "3", "--colors", "#FF0000", "#0000FF"], console=console)
    assert code == 0
    out = term_output.getvalue()
    assert out.count("\n") == 3
    assert "#00FF00" in out
    assert "(0, 255, 0)" in out


def test_main_inline(console, term_output):
    code = main(["--gradient-length", "3", "--colors", "FF0000", "0000FF", "--inline-colors"], console=console)
    assert code == 0
    out = term_output.getvalue()
    assert "\n" not in out
    assert "#FF0000" in out and "#00FF00" in out and "#0000FF" in out


def test_main_space_delimited_colors(console, term_output):
    main(["--gradient-length", "5", "--colors", "#FF0000 #0000FF"], console=console)
    assert term_output.getvalue().count("\n") == 5


def test_main_rejects_short_gradient(console, capsys):
    with pytest.raises(SystemExit) as info:
        main(["--gradient-length", "2", "--colors", "#FF0000", "#00FF00", "#0000FF"], console=console)
    assert info.value.code == 1
    assert "Gradient length must be greater than the color amount" in capsys.readouterr().err


def test_main_rejects_single_color(console, capsys):
    with pytest.raises(SystemExit) as info:
        main(["--gradient-length", "5", "--colors", "#FF0000"], console=console)
    assert info.value.code == 1
    assert "At least two colors" in capsys.readouterr().err


def test_main_rejects_malformed_hex(console, capsys, term_output):
    with pytest.raises(SystemExit) as info:
        main(["--gradient-length", "5", "--colors", "#FF0000", "#XYZ123"], console=console)
    assert info.value.code == 1
    assert "Malformed hex color" in capsys.readouterr().err
    assert term_output.getvalue() == ""


def test_main_requires_arguments(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--colors", "#FF0000", "#0000FF"])
    assert info.value.code == 2


def test_version(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert f"huelerp {__version__}" in capsys.readouterr().out
