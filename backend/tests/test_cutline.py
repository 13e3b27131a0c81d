"""Tests for cut line construction and side classification."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from graticut.services.cutline import (  # type: ignore
    ANTIMERIDIAN,
    NORTH_POLE_LINE,
    SOUTH_POLE_LINE,
    CutLine,
    along_axis,
    default_cut_lines,
    is_full_parallel_range,
    is_pole_line,
    make_cut_line,
    side,
)
from graticut.services.errors import CutError, InvalidCutLineKind, NonMonotonicInterval  # type: ignore


def test_interval_must_increase() -> None:
    with pytest.raises(NonMonotonicInterval):
        CutLine(kind="meridian", deg=0.0, start=10.0, end=10.0)
    with pytest.raises(CutError):
        make_cut_line("parallel", 0, 50, -50)


def test_make_cut_line_normalises_values() -> None:
    line = make_cut_line(" Meridian ", 30, -45, 45)
    assert line == CutLine(kind="meridian", deg=30.0, start=-45.0, end=45.0)
    assert isinstance(line.deg, float)


def test_unknown_kind_fails_on_use() -> None:
    line = make_cut_line("diagonal", 0, -1, 1)
    with pytest.raises(InvalidCutLineKind):
        along_axis(line)
    with pytest.raises(ValueError):
        side((0.0, 0.0), line)


def test_side_of_antimeridian_follows_longitude_sign() -> None:
    assert side((170.0, 0.0), ANTIMERIDIAN) == 1
    assert side((-170.0, 0.0), ANTIMERIDIAN) == -1


def test_side_of_other_lines() -> None:
    equator = make_cut_line("parallel", 0, -180, 180)
    assert side((0.0, 5.0), equator) == 1
    assert side((0.0, -5.0), equator) == -1
    # Every point lies below the north pole
    assert side((0.0, 89.0), NORTH_POLE_LINE) == -1
    assert side((0.0, -89.0), NORTH_POLE_LINE) == -1
    greenwich = make_cut_line("meridian", 0, -90, 90)
    assert side((5.0, 0.0), greenwich) == -1
    assert side((-5.0, 0.0), greenwich) == 1


def test_axes_and_ranges() -> None:
    assert along_axis(ANTIMERIDIAN) == 1
    assert along_axis(NORTH_POLE_LINE) == 0
    assert is_full_parallel_range(SOUTH_POLE_LINE)
    assert is_pole_line(NORTH_POLE_LINE)
    assert not is_pole_line(ANTIMERIDIAN)
    assert not is_pole_line(make_cut_line("parallel", 90, 0, 180))


def test_default_cut_lines() -> None:
    extra = make_cut_line("meridian", -20, 0, 90)
    assert default_cut_lines() == [ANTIMERIDIAN, NORTH_POLE_LINE, SOUTH_POLE_LINE]
    assert default_cut_lines(azimuthal=True) == [SOUTH_POLE_LINE]
    assert default_cut_lines(False, [extra])[-1] == extra
