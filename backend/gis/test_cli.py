from __future__ import annotations

import pytest

from . import cli


@pytest.fixture(autouse=True)
def no_log_files(monkeypatch) -> None:
    monkeypatch.setattr(cli, "configure_logging", lambda: None)


def test_convert(capsys) -> None:
    assert cli.main(["convert", "3 45.0 N 2 12.25 W"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "DD: 3.75°, -2.20417°",
        "D: 3.75° N 2.20417° W",
        "DM: 3°45.0' N 2°12.25' W",
        "DMS: 3°45'0.0\" N 2°12'15.0\" W",
    ]


def test_convert_options(capsys) -> None:
    args = ["convert", "3.75, -2.25", "--separator", "comma", "--delimiters", "none", "--precision", "2", "1", "0"]
    assert cli.main(args) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[2] == "DM: 3 45.0, -2 15.0"
    assert out[3] == "DMS: 3 45 0.0, -2 15 0.0"


def test_convert_failure(capsys) -> None:
    assert cli.main(["convert", "foo"]) == 2
    assert capsys.readouterr().out == ""


def test_distance(capsys) -> None:
    assert cli.main(["distance", "0.5 S, 0.0 E", "0.5 N, 0.0 E", "--algorithm", "equirect"]) == 0
    assert capsys.readouterr().out.strip() == "equirect: 110574.0 m"

    assert cli.main(["distance", "0.0, 0.0", "1.0, 0.0"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split(":")[0] for line in lines] == ["equirect", "haversine"]


def test_heading(capsys) -> None:
    assert cli.main(["heading", "35.0 N,45.0 E", "35.0 N,135.0 E"]) == 0
    assert 60.0 < float(capsys.readouterr().out) < 61.0


def test_travel(capsys) -> None:
    assert cli.main(["travel", "10.0, 20.0", "NNE", "0"]) == 0
    assert capsys.readouterr().out.strip() == "10.0°, 20.0°"


def test_travel_bad_direction() -> None:
    with pytest.raises(SystemExit):
        cli.main(["travel", "10.0, 20.0", "up", "10"])


def test_link(capsys) -> None:
    assert cli.main(["link", "54 28 0.0 N 56 16 0.0 E", "--zoom", "15", "--https"]) == 0
    assert capsys.readouterr().out.strip() == (
        "https://www.google.com/maps/place/"
        "54%C2%B028'0.0%22%20N%2056%C2%B016'0.0%22%20E"
        "/@54.4666667%C2%B0,%2056.2666667%C2%B0,15z"
    )


def test_link_bad_zoom() -> None:
    assert cli.main(["link", "10.0, 20.0", "--zoom", "30"]) == 2
