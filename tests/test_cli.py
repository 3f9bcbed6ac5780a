"""Tests for the pace command line."""

import pytest

from pace_calculator.cli.pace import USAGE, build_parser, main


def test_pace_mode(capsys):
    assert main(["4:30k"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[0] == "At that pace:"
    assert out[2] == "\tMarathon       3h09m54s"
    assert len(out) == 6


def test_pace_mode_miles(capsys):
    assert main(["6:52m"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[2] == "\tMarathon       3h00m03s"


def test_distance_mode(capsys):
    assert main(["10k", "45m"]) == 0

    assert capsys.readouterr().out.splitlines() == [
        "10.00 km / 6.21 miles in 45m:",
        "\t4m30s / km",
        "\t7m14s / mile",
    ]


def test_distance_mode_with_races(capsys):
    assert main(["10k", "45m", "--races"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[3] == "At that pace:"
    assert out[7] == "\t10k            45m"


def test_usage_for_wrong_argument_count(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == USAGE + "\n"

    assert main(["a", "b", "c"]) == 0
    assert capsys.readouterr().out.startswith("pace has two modes")


def test_invalid_unit_is_reported(capsys):
    assert main(["10x", "1h"]) == 1

    out = capsys.readouterr().out
    assert out == "Invalid distance unit 'x'. Must be 'k' or 'm'\n"


def test_malformed_colon_time_is_reported(capsys):
    assert main(["10k", "1:2:3"]) == 1

    out = capsys.readouterr().out
    assert out == "1:2:3 invalid format, expected e.g. '7:30'\n"


def test_bad_number_is_reported(capsys):
    assert main(["abck", "1h"]) == 1

    out = capsys.readouterr().out
    assert out.startswith("Invalid number 'abc' in 'abck'")
    assert "expected a distance" in out


def test_invalid_pace_unit_is_reported(capsys):
    assert main(["4:30x"]) == 1

    assert capsys.readouterr().out == "Invalid pace unit 'x'. Must be 'k' or 'm'\n"


def test_name_width_from_env_file(tmp_path, capsys):
    env_file = tmp_path / "pace.env"
    env_file.write_text("PACE_NAME_WIDTH=10\n")

    assert main(["5:00k", "--env-file", str(env_file)]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[4] == "\t10k       50m"


def test_parser_flags():
    args = build_parser().parse_args(["10k", "1h", "--races", "-v"])

    assert args.args == ["10k", "1h"]
    assert args.races
    assert args.verbose
    assert args.env_file is None


@pytest.mark.parametrize(
    "argv",
    [
        ["10k", "9" * 5000],
        ["10k", "9" * 400],
        ["1" + "0" * 400 + "k", "1h"],
        ["9" * 400 + "k"],
    ],
)
def test_oversized_numbers_are_reported(argv, capsys):
    assert main(argv) == 1

    out = capsys.readouterr().out
    assert out.startswith("Invalid number")
    assert "/ km" not in out


def test_pace_mode_bad_colon_form_names_pace(capsys):
    assert main(["4:30:00k"]) == 1

    assert capsys.readouterr().out == "4:30:00k invalid format, expected e.g. '7:30'\n"
