import io
import subprocess
from unittest import mock

import pytest

from remotecache import usage
from remotecache.usage import Option, console_width, print_help, wrap, wrap_line

FOX = "the quick brown fox jumped over the lazy dog"


@pytest.mark.parametrize(
    "text, wrap_at, padding, expected",
    [
        (
            FOX,
            10,
            "__",
            "the\n__quick\n__brown\n__fox\n__jumped\n__over the\n__lazy dog",
        ),
        (FOX, 50, "__", FOX),
    ],
)
def test_wrap_line(text, wrap_at, padding, expected):
    assert wrap_line(text, wrap_at, padding) == expected


def test_wrap_line_unchanged_when_no_room():
    assert wrap_line(FOX, 2, "____") == FOX


def test_wrap():
    text = (
        "the quick brown fox jumped over the lazy dog\n"
        "the second line is even longer than the first, with some super important\n"
        "information that overflows\n"
        "and finally a fourth line with some gibberish"
    )
    expected = (
        "the quick brown fox\n"
        "  jumped over the lazy\n"
        "  dog\n"
        "  the second line is even\n"
        "  longer than the first,\n"
        "  with some super\n"
        "  important\n"
        "  information that\n"
        "  overflows\n"
        "  and finally a fourth\n"
        "  line with some\n"
        "  gibberish"
    )
    assert wrap(text, 2, 25) == expected


def test_help_printer(monkeypatch):
    monkeypatch.setenv("COLUMNS", "35")

    options = [
        Option(
            "foo",
            "you really should specify this value, otherwise some terrible things will happen",
            value="42",
            env_vars=("FOO",),
        ),
        Option(
            "bar",
            "this is another flag with a description long enough to test the wrapping",
            value=1,
            env_vars=("BAR",),
        ),
    ]

    expected = (
        "remotecache - A remote build cache for Bazel and other REAPI clients\n"
        "\n"
        "USAGE:\n"
        "   cli.test [options]\n"
        "\n"
        "OPTIONS:\n"
        "   --foo value you really should\n"
        "      specify this value, otherwise\n"
        "      some terrible things will\n"
        '      happen (default: "42") [$FOO]\n'
        "\n"
        "   --bar value this is another\n"
        "      flag with a description long\n"
        "      enough to test the wrapping\n"
        "      (default: 1) [$BAR]\n"
        "\n"
        "   --help, -h  show help\n"
    )

    out = io.StringIO()
    print_help("cli.test", options, out)
    assert out.getvalue() == expected


def test_option_str():
    option = Option("x", "pick one", takes_value=False, env_vars=("A", "B"))
    assert str(option) == "-x\tpick one [$A, $B]"


def test_option_default_text_wins():
    option = Option("port", "the port", value=0, default_text="0, ie disabled")
    assert str(option) == "--port value\tthe port (default: 0, ie disabled)"


def test_console_width_from_env(monkeypatch):
    monkeypatch.setenv("COLUMNS", " 100 ")
    assert console_width() == 100


def test_console_width_minimum(monkeypatch):
    monkeypatch.setenv("COLUMNS", "10")
    assert console_width() == usage.MINIMUM_WIDTH


def test_console_width_falls_back_to_tput(monkeypatch):
    monkeypatch.setenv("COLUMNS", "junk")
    completed = subprocess.CompletedProcess(args=[], returncode=0, stdout="120\n")
    with mock.patch.object(usage.subprocess, "run", return_value=completed):
        assert console_width() == 120


def test_console_width_default_when_tput_fails(monkeypatch):
    monkeypatch.delenv("COLUMNS", raising=False)
    with mock.patch.object(usage.subprocess, "run", side_effect=FileNotFoundError("tput")):
        assert console_width() == usage.DEFAULT_WIDTH