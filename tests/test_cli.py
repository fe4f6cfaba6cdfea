import json

from rulepass.charsets import NUMBERS
from rulepass.cli import main
from rulepass.config import config_path, load_config


def _passwords(out):
    return [line.split(": ", 1)[1] for line in out.splitlines() if line.startswith("Password #")]


def test_generate_numbers_only(config_dir, capsys):
    assert main(["generate", "--length", "20", "--numbers", "-n", "3"]) == 0
    pws = _passwords(capsys.readouterr().out)
    assert len(pws) == 3
    for pw in pws:
        assert len(pw) == 20
        assert set(pw) <= set(NUMBERS)


def test_generate_uses_saved_defaults(config_dir, capsys):
    assert main(["config", "set", "length", "9"]) == 0
    assert main(["config", "set", "classes", "upper"]) == 0
    capsys.readouterr()
    assert main(["generate"]) == 0
    (pw,) = _passwords(capsys.readouterr().out)
    assert len(pw) == 9
    assert pw.isupper() and pw.isalpha()


def test_generate_exhausted(config_dir, capsys):
    code = main(["generate", "--custom", "a", "--length", "2", "--no-repeats", "--attempts", "3"])
    assert code == 2
    assert "iterations exhausted" in capsys.readouterr().out


def test_generate_exclude(config_dir, capsys):
    assert main(["generate", "--custom", "ab", "--exclude", "b", "--length", "1", "-n", "5"]) == 0
    assert _passwords(capsys.readouterr().out) == ["a"] * 5


def test_config_set_rejects_unknown_class(config_dir, capsys):
    assert main(["config", "set", "classes", "lower,emoji"]) == 2
    assert load_config()["classes"] == ["lower", "upper", "numbers", "special"]


def test_config_set_bool(config_dir):
    assert main(["config", "set", "no_adjacent_repeats", "yes"]) == 0
    assert load_config()["no_adjacent_repeats"] is True


def test_config_show(config_dir, capsys):
    assert main(["config", "show"]) == 0
    out = capsys.readouterr().out
    assert "max_attempts" in out


def test_config_set_bracketed_class_name(config_dir, capsys):
    assert main(["config", "set", "classes", "[/red]"]) == 2
    assert "[/red]" in capsys.readouterr().out
    assert load_config()["classes"] == ["lower", "upper", "numbers", "special"]


def test_generate_ignores_bad_saved_classes(config_dir, capsys):
    for bad in (["[/red]"], [1]):
        with open(config_path(), "w", encoding="utf-8") as f:
            json.dump({"classes": bad, "length": 12}, f)
        assert main(["generate"]) == 0
        (pw,) = _passwords(capsys.readouterr().out)
        assert len(pw) == 12


def test_copies_must_be_positive(config_dir):
    for copies in ("0", "-3"):
        try:
            main(["generate", "--numbers", "--copies", copies])
            code = None
        except SystemExit as e:
            code = e.code
        assert code == 2
