"""Tests for the permissive coordinate grammar in text.py."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from euclid_spatial.text import try_parse, try_parse_2d, try_parse_3d


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1,2", (1.0, 2.0)),
        ("(1; 2)", (1.0, 2.0)),
        ("1 2", (1.0, 2.0)),
        ("1,5,2,5", (1.5, 2.5)),
        ("  1;2  ", (1.0, 2.0)),
        ("1   2", (1.0, 2.0)),
        ("1 , 2", (1.0, 2.0)),
        ("-1.5e2, +3E-1", (-150.0, 0.3)),
        (".5; -,25", (0.5, -0.25)),
        ("(1.5 2.5)", (1.5, 2.5)),
        ("1,2;3", (1.2, 3.0)),      # only the semicolon can separate
    ],
)
def test_try_parse_2d_accepts_supported_forms(text, expected) -> None:
    assert try_parse_2d(text) == pytest.approx(expected)


@pytest.mark.parametrize(
    "text",
    [
        "1,2,3",      # reads as 1,2 | 3 and as 1 | 2,3
        "",
        "   ",
        None,
        "abc",
        "(1,2",       # unbalanced
        "1,2)",
        "1",
        "1,",
        ",2",
        "1;;2",
        "1e,2",
        "e5 2",
        "((1,2))",
        "1 ,2",       # ",2" is itself a coordinate, so also 1 | 0.2
        "(1 ,2)",
        "1\t2",
    ],
)
def test_try_parse_2d_rejects_invalid_or_ambiguous_text(text) -> None:
    assert try_parse_2d(text) is None


def test_try_parse_3d_reads_triples() -> None:
    assert try_parse_3d("1,2,3") == (1.0, 2.0, 3.0)
    assert try_parse_3d("(1; 2; 3)") == (1.0, 2.0, 3.0)
    assert try_parse_3d("1,5 2,5 -3,5") == (1.5, 2.5, -3.5)


def test_try_parse_3d_rejects_ambiguous_decimal_commas() -> None:
    # 1 | 2,3 | 4 and 1,2 | 3 | 4 and 1 | 2 | 3,4 are all valid readings
    assert try_parse_3d("1,2,3,4") is None


def test_try_parse_3d_rejects_pairs() -> None:
    assert try_parse_3d("1,2") is None


def test_conversion_is_locale_independent() -> None:
    assert try_parse_2d("1.25;2,75") == (1.25, 2.75)


def test_try_parse_requires_positive_dimension() -> None:
    with pytest.raises(ValueError):
        try_parse("1", 0)


def test_try_parse_single_coordinate() -> None:
    assert try_parse("(4,5)", 1) == (4.5,)
