import math
import os

import pytest

from cglraster.mathutil import PI, clamp, degrees, radians, resolve_path


def test_radians_of_half_turn_is_pi():
    assert radians(180) == pytest.approx(PI)


def test_degrees_of_math_pi_is_half_turn():
    assert degrees(math.pi) == pytest.approx(180.0)


@pytest.mark.parametrize("value", [-720.0, -45.0, 0.0, 33.3, 90.0, 1234.5])
def test_degrees_radians_round_trip(value):
    assert degrees(radians(value)) == pytest.approx(value)


@pytest.mark.parametrize(
    "x, lo, hi, expected",
    [
        (5, 0, 10, 5),
        (-3, 0, 10, 0),
        (42, 0, 10, 10),
        (0.5, 0.0, 1.0, 0.5),
        (1.5, 0.0, 1.0, 1.0),
    ],
)
def test_clamp(x, lo, hi, expected):
    assert clamp(x, lo, hi) == expected


def test_clamp_result_stays_in_range():
    for x in range(-20, 21):
        result = clamp(x, -5, 7)
        assert -5 <= result <= 7


def test_resolve_path_makes_relative_path_absolute(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    resolved = resolve_path("drawing.svg")
    assert os.path.isabs(resolved)
    assert resolved == os.path.join(os.path.realpath(tmp_path), "drawing.svg")


def test_resolve_path_accepts_pathlike(tmp_path):
    target = tmp_path / "a" / ".." / "b.svg"
    assert resolve_path(target) == os.path.join(os.path.realpath(tmp_path), "b.svg")