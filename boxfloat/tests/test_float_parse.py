#    Copyright 2026 Two Sigma Open Source, LLC
#
#    Licensed under the Apache License, Version 2.0 (the "License");
#    you may not use this file except in compliance with the License.
#    You may obtain a copy of the License at
#
#        http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS,
#    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#    See the License for the specific language governing permissions and
#    limitations under the License.

"""Tests for the float literal parser.

Float Parse Tests
=================

Test Strategy:
    1. Accepted forms: signs, NaN/Infinity, decimal, hex, type suffixes,
       surrounding whitespace
    2. Rejected forms: absent, empty, partial matches, foreign digits
    3. Rounding: values are rounded once, straight to binary32
"""

import math

import pytest

from boxfloat.codecs.float_parse import parse_bits, parse_float
from boxfloat.config import (
    FP_CANONICAL_NAN,
    FP_MAX_FINITE,
    FP_NEG_INF,
    FP_NEG_ZERO,
    FP_POS_INF,
    FP_POS_ZERO,
)
from boxfloat.exceptions import BoxedFloatError, FloatFormatError


@pytest.mark.parametrize(
    "text, bits",
    [
        ("3.14", 0x4048F5C3),
        ("1", 0x3F800000),
        ("+1", 0x3F800000),
        ("-1.0", 0xBF800000),
        ("1.", 0x3F800000),
        (".5", 0x3F000000),
        ("1e3", 0x447A0000),
        ("1E+3d", 0x447A0000),
        ("1.5f", 0x3FC00000),
        ("1.5F", 0x3FC00000),
        ("2.5D", 0x40200000),
        ("  2.5  ", 0x40200000),
        ("\t-2.5\n", 0xC0200000),
        ("0.0", FP_POS_ZERO),
        ("-0.0", FP_NEG_ZERO),
        ("-0", FP_NEG_ZERO),
        ("000.000e99999", FP_POS_ZERO),
        ("NaN", FP_CANONICAL_NAN),
        ("-NaN", FP_CANONICAL_NAN),
        ("Infinity", FP_POS_INF),
        ("+Infinity", FP_POS_INF),
        ("-Infinity", FP_NEG_INF),
        ("0x1p0", 0x3F800000),
        ("0x1.8p1", 0x40400000),
        ("-0x1p-1f", 0xBF000000),
        ("0X.8P1", 0x3F800000),
        ("0x1.0p-149", 0x00000001),
        ("0x0p0", FP_POS_ZERO),
    ],
)
def test_accepted_literals(text, bits):
    """Every form of the grammar decodes to the expected pattern."""
    assert parse_bits(text) == bits


@pytest.mark.parametrize(
    "text",
    [
        "abc",
        "1.2.3",
        "1e",
        "e5",
        ".",
        "+",
        "-",
        "1 2",
        "1_000",
        "0x1.0",
        "0xp1",
        "nan",
        "inf",
        "infinity",
        "Infinityf",
        "NaNf",
        "1.5ff",
        "١",  # ARABIC-INDIC DIGIT ONE
        "--1",
        "1e5.5",
    ],
)
def test_rejected_literals(text):
    """Anything that is not a whole float literal raises FloatFormatError."""
    with pytest.raises(FloatFormatError) as exc_info:
        parse_float(text)
    assert exc_info.value.text == text
    assert exc_info.value.reason == "syntax"


@pytest.mark.parametrize(
    "text, reason",
    [(None, "null"), ("", "empty"), ("   ", "empty"), (b"1.0", "type"), (1.0, "type")],
)
def test_absent_empty_and_non_string_input(text, reason):
    """Absent, empty and non-string input are format errors with a reason."""
    with pytest.raises(FloatFormatError) as exc_info:
        parse_float(text)
    assert exc_info.value.reason == reason
    assert exc_info.value.text == text


def test_format_error_hierarchy():
    """FloatFormatError is both a package error and a ValueError."""
    with pytest.raises(ValueError):
        parse_float("abc")
    with pytest.raises(BoxedFloatError):
        parse_float("abc")


def test_overflow_and_underflow():
    """Out-of-range literals round to ±Infinity and ±0.0."""
    assert parse_bits("3.4028235E38") == FP_MAX_FINITE
    assert parse_bits("3.4028236E38") == FP_POS_INF
    assert parse_bits("3.4028236e39") == FP_POS_INF
    assert parse_bits("-1e999999999999999") == FP_NEG_INF
    assert parse_bits("1e-46") == FP_POS_ZERO
    assert parse_bits("-1e-999999999999999") == FP_NEG_ZERO
    assert parse_bits("0x1p128") == FP_POS_INF
    assert parse_bits("0x1p-151") == FP_POS_ZERO


def test_smallest_subnormal_boundary():
    """Values just above 2^-150 (about 7.006e-46) reach MIN_VALUE."""
    assert parse_bits("7e-46") == FP_POS_ZERO
    assert parse_bits("7.1e-46") == 0x00000001
    assert parse_bits("1.4E-45") == 0x00000001


def test_rounding_is_single_step():
    """A literal just above a binary32 midpoint rounds up.

    float("1.0000000596046447762") lands exactly on the midpoint between
    1.0 and its successor, so narrowing from binary64 would round down.
    """
    assert parse_float("1.0000000596046447762") == 1.0 + 2.0**-23
    assert parse_float("1.000000059604644775390625") == 1.0


@pytest.mark.parametrize(
    "text, bits",
    [
        ("1.00000005960464477539062500000000001", 0x3F800001),
        ("-1.00000005960464477539062500000000001", 0xBF800001),
        ("340282356779733661637539395458142568447", FP_MAX_FINITE),
        ("340282356779733661637539395458142568448", FP_POS_INF),
        ("0x1.fffffep-127", 0x00800000),
        ("-0x1.fffffep-127", 0x80800000),
        ("0x1.fffffcp-127", 0x007FFFFF),
    ],
)
def test_rounding_past_the_28th_digit(text, bits):
    """Long decimal literals and hex literals with negative exponents round once."""
    assert parse_bits(text) == bits


def test_long_digit_strings():
    """Many digits are handled exactly."""
    assert parse_float("0." + "0" * 500 + "1") == 0.0
    assert parse_float("1" + "0" * 30) == parse_float("1e30")
    assert parse_float("0.1" + "0" * 400) == parse_float("0.1")


def test_parse_float_returns_binary32_values():
    """Results are exactly representable in binary32."""
    assert parse_float("3.14") == 3.140000104904175
    assert parse_float("0.1") == 0.10000000149011612
    assert math.isnan(parse_float("NaN"))
    assert math.copysign(1.0, parse_float("-0.0")) == -1.0
