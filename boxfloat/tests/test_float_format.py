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

"""Tests for canonical decimal rendering."""

import math

import pytest

from boxfloat.codecs import float_format
from boxfloat.codecs.float_format import format_bits, shortest_digits, to_string
from boxfloat.exceptions import BoxedFloatError
from boxfloat.models.fp_bits import bits_to_float


@pytest.mark.parametrize(
    "value, expected",
    [
        (math.nan, "NaN"),
        (math.inf, "Infinity"),
        (-math.inf, "-Infinity"),
        (0.0, "0.0"),
        (-0.0, "-0.0"),
        (1.0, "1.0"),
        (-1.0, "-1.0"),
        (100.0, "100.0"),
        (100.5, "100.5"),
        (0.1, "0.1"),
        (0.3, "0.3"),
        (3.14, "3.14"),
        (0.001, "0.001"),
        (1e-4, "1.0E-4"),
        (-1e-5, "-1.0E-5"),
        (9999999.0, "9999999.0"),
        (1234567.0, "1234567.0"),
        (1e7, "1.0E7"),
        (12345678.0, "1.2345678E7"),
        (1e10, "1.0E10"),
    ],
)
def test_to_string(value, expected):
    """Literals, plain notation in [1e-3, 1e7) and E-notation elsewhere."""
    assert to_string(value) == expected


def test_extreme_values():
    """Largest finite, smallest normal and smallest subnormal values."""
    assert format_bits(0x7F7FFFFF) == "3.4028235E38"
    assert format_bits(0xFF7FFFFF) == "-3.4028235E38"
    assert format_bits(0x00800000) == "1.1754944E-38"
    assert format_bits(0x00000001) == "1.4E-45"


def test_negative_nan_renders_without_sign():
    """Sign bits on NaN are not rendered."""
    assert format_bits(0xFFC00000) == "NaN"


def test_shortest_digits():
    """Digits are the shortest ones identifying the binary32 value."""
    assert shortest_digits(0x3F800000) == ("1", 0)
    assert shortest_digits(0x3DCCCCCD) == ("1", -1)  # 0.1f
    assert shortest_digits(0x00000001) == ("1", -45)
    assert shortest_digits(0x00000001, min_digits=2) == ("14", -45)


def test_binary64_input_is_narrowed_before_formatting():
    """The rendering describes the binary32 value, not the binary64 input."""
    assert to_string(0.1) == to_string(bits_to_float(0x3DCCCCCD))
    assert to_string(1e39) == "Infinity"


def test_unexpected_digit_rendering_raises(monkeypatch):
    """A malformed numpy rendering is reported as a package error."""
    monkeypatch.setattr(
        float_format.np, "format_float_scientific", lambda *args, **kwargs: "inf"
    )
    with pytest.raises(BoxedFloatError):
        format_bits(0x3F800000)
