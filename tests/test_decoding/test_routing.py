from dataclasses import dataclass, field
from typing import Annotated

import pytest

from writ import DecodeError, command, new, option


@dataclass
class BottomSpec:
    bottom: Annotated[
        int, option("b, bottomval", description="an option on a bottom-level command")
    ] = 0


@dataclass
class MidSpec:
    mid: Annotated[
        int, option("m, midval", description="an option on a mid-level command")
    ] = 0
    bottom_spec: Annotated[
        BottomSpec,
        command("bottom", aliases="third", description="a bottom-level command"),
    ] = field(default_factory=BottomSpec)


@dataclass
class TopSpec:
    mid_spec: Annotated[
        MidSpec,
        command("mid", aliases="second, 2nd", description="a mid-level command"),
    ] = field(default_factory=MidSpec)
    top: Annotated[
        int, option("t, topval", description="an option on a top-level command")
    ] = 0


def field_values(spec: TopSpec) -> dict[str, int]:
    return {
        "top": spec.top,
        "mid": spec.mid_spec.mid,
        "bottom": spec.mid_spec.bottom_spec.bottom,
    }


VALID_ROUTES = [
    # path: top
    ([], "top", [], None, None),
    (["-"], "top", ["-"], None, None),
    (["-", "mid"], "top", ["-", "mid"], None, None),
    (["--"], "top", [], None, None),
    (["--", "mid"], "top", ["mid"], None, None),
    (["-t", "1"], "top", [], "top", 1),
    (["foo", "-t", "1"], "top", ["foo"], "top", 1),
    (["-t", "1", "foo"], "top", ["foo"], "top", 1),
    (["foo", "bar"], "top", ["foo", "bar"], None, None),
    (["foo", "-t", "1", "bar"], "top", ["foo", "bar"], "top", 1),
    (["-t", "1", "--", "mid"], "top", ["mid"], "top", 1),
    (["-", "-t", "1", "--", "mid"], "top", ["-", "mid"], "top", 1),
    (["--", "-t", "1", "mid"], "top", ["-t", "1", "mid"], "top", 0),
    (["--", "-t", "1", "-", "mid"], "top", ["-t", "1", "-", "mid"], "top", 0),
    (["bottom"], "top", ["bottom"], None, None),
    (["third"], "top", ["third"], None, None),
    (["bottom", "mid"], "top", ["bottom", "mid"], None, None),
    (["bottom", "-", "second"], "top", ["bottom", "-", "second"], None, None),
    # path: top mid
    (["mid"], "top mid", [], None, None),
    (["mid", "-"], "top mid", ["-"], None, None),
    (["mid", "--"], "top mid", [], None, None),
    (["mid", "-", "bottom"], "top mid", ["-", "bottom"], None, None),
    (["mid", "--", "bottom"], "top mid", ["bottom"], None, None),
    (["mid", "-t", "1"], "top mid", [], "top", 1),
    (["mid", "-", "-t", "1"], "top mid", ["-"], "top", 1),
    (["mid", "--", "-t", "1"], "top mid", ["-t", "1"], "top", 0),
    (["-t", "1", "mid"], "top mid", [], "top", 1),
    (["mid", "foo", "-t", "1"], "top mid", ["foo"], "top", 1),
    (["-t", "1", "mid", "foo"], "top mid", ["foo"], "top", 1),
    (["mid", "foo", "-m", "2"], "top mid", ["foo"], "mid", 2),
    (["mid", "-m", "2", "foo"], "top mid", ["foo"], "mid", 2),
    (["second", "foo", "bar"], "top mid", ["foo", "bar"], None, None),
    (["2nd", "foo", "bar"], "top mid", ["foo", "bar"], None, None),
    (["-t", "1", "second", "foo", "bar"], "top mid", ["foo", "bar"], "top", 1),
    (["2nd", "foo", "-m", "2", "bar"], "top mid", ["foo", "bar"], "mid", 2),
    (["mid", "-m", "2", "foo", "-t", "1", "bar"], "top mid", ["foo", "bar"], "top", 1),
    (["mid", "-m", "2", "foo", "-t", "1", "bar"], "top mid", ["foo", "bar"], "mid", 2),
    (["-t", "1", "mid", "foo", "bar", "-m", "2"], "top mid", ["foo", "bar"], "mid", 2),
    (["mid", "-m", "2", "--"], "top mid", [], "mid", 2),
    (["mid", "--", "-m", "2"], "top mid", ["-m", "2"], "mid", 0),
    (["mid", "--", "bottom", "-b", "3"], "top mid", ["bottom", "-b", "3"], None, None),
    (
        ["mid", "--", "bottom", "-b", "3", "--"],
        "top mid",
        ["bottom", "-b", "3", "--"],
        None,
        None,
    ),
    (
        ["mid", "--", "bottom", "--", "-b", "3"],
        "top mid",
        ["bottom", "--", "-b", "3"],
        None,
        None,
    ),
    # path: top mid bottom
    (["mid", "bottom"], "top mid bottom", [], None, None),
    (["mid", "bottom", "-"], "top mid bottom", ["-"], None, None),
    (["mid", "bottom", "--"], "top mid bottom", [], None, None),
    (["mid", "bottom", "-t", "1"], "top mid bottom", [], "top", 1),
    (["mid", "-t", "1", "bottom"], "top mid bottom", [], "top", 1),
    (["-t", "1", "mid", "bottom"], "top mid bottom", [], "top", 1),
    (["mid", "bottom", "foo", "-b", "3"], "top mid bottom", ["foo"], "bottom", 3),
    (["mid", "third", "-b", "3", "foo"], "top mid bottom", ["foo"], "bottom", 3),
    (["2nd", "third", "foo", "bar"], "top mid bottom", ["foo", "bar"], None, None),
    (
        ["mid", "-m", "2", "bottom", "foo", "-b", "3", "bar"],
        "top mid bottom",
        ["foo", "bar"],
        "mid",
        2,
    ),
    (
        ["-t", "1", "second", "third", "foo", "bar", "-b", "3"],
        "top mid bottom",
        ["foo", "bar"],
        "bottom",
        3,
    ),
    (["mid", "bottom", "-", "-b", "3", "--"], "top mid bottom", ["-"], "bottom", 3),
    (["mid", "bottom", "--", "-b", "3"], "top mid bottom", ["-b", "3"], "bottom", 0),
    (
        ["mid", "bottom", "-", "--", "-b", "3"],
        "top mid bottom",
        ["-", "-b", "3"],
        "bottom",
        0,
    ),
]

INVALID_ROUTES = [
    ["-m", "2"],
    ["--midval", "2"],
    ["-b", "3"],
    ["--bottomval", "3"],
    ["--bogus", "4"],
    ["--foo"],
    ["--foo=bar"],
    ["-f"],
    ["-fbar"],
    ["-m", "2", "mid"],
    ["--midval", "2", "mid"],
    ["-b", "3", "mid"],
    ["mid", "-b", "3"],
    ["mid", "--bogus", "4"],
    ["mid", "-fbar"],
    ["mid", "-b", "3", "bottom"],
    ["bottom", "-b", "3"],
    ["-b", "3", "mid", "bottom"],
]


@pytest.mark.parametrize("args, path, positional, name, value", VALID_ROUTES)
def test_valid_routes(args, path, positional, name, value):
    spec = TopSpec()
    cmd = new("top", spec)

    decoded_path, decoded_positional = cmd.decode(args)

    assert decoded_path.first() is cmd
    assert str(decoded_path) == path
    assert decoded_positional == positional
    if name is not None:
        assert field_values(spec)[name] == value


@pytest.mark.parametrize("args", INVALID_ROUTES)
def test_invalid_routes(args):
    cmd = new("top", TopSpec())

    with pytest.raises(DecodeError):
        cmd.decode(args)


def test_decode_error_carries_partial_path():
    cmd = new("top", TopSpec())

    with pytest.raises(DecodeError) as excinfo:
        cmd.decode(["mid", "foo", "-b", "3"])

    assert str(excinfo.value.path) == "top mid"
    assert excinfo.value.positional == ["foo"]
    assert "'-b' is not recognized" in str(excinfo.value)


def test_selected_command_is_last_in_path():
    cmd = new("top", TopSpec())

    path, _ = cmd.decode(["second", "third"])

    assert path.last() is cmd.subcommand("mid").subcommand("bottom")
    assert [c.name for c in path] == ["top", "mid", "bottom"]


def test_command_string_is_its_name():
    cmd = new("top", TopSpec())

    assert str(cmd) == "top"
    assert str(cmd.subcommand("mid")) == "mid"
    assert str(cmd.subcommand("mid").subcommand("bottom")) == "bottom"
    assert cmd.subcommand("2nd") is cmd.subcommand("mid")
    assert cmd.subcommand("bogus") is None


def test_nearest_command_wins_for_shared_option_names():
    from writ import Command, Option, new_option_decoder

    values = {"first": "", "second": ""}
    second = Command(
        name="second",
        options=[Option(names=["bar"], decoder=new_option_decoder(values, "second", str))],
    )
    first = Command(
        name="first",
        options=[Option(names=["bar"], decoder=new_option_decoder(values, "first", str))],
        subcommands=[second],
    )

    first.decode(["--bar", "a", "second", "--bar", "b"])

    assert values == {"first": "a", "second": "b"}


def test_arguments_are_not_modified():
    cmd = new("top", TopSpec())
    args = ["mid", "-t1", "--", "bottom"]

    cmd.decode(args)

    assert args == ["mid", "-t1", "--", "bottom"]
