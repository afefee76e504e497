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

"""Tests for the total-order comparator.

Ordering Tests
==============

The expected chain, lowest to highest:

    -Inf < -MAX_VALUE < -1.0 < -MIN_VALUE < -0.0 < +0.0
         < MIN_VALUE < 1.0 < MAX_VALUE < +Inf < NaN
"""

import math

import pytest

from boxfloat.config import FP_CANONICAL_NAN, FP_NEG_ZERO, FP_POS_INF, FP_POS_ZERO
from boxfloat.models.fp_bits import bits_to_float
from boxfloat.models.ordering import (
    compare,
    compare_bits,
    order_key_from_bits,
    total_order_key,
)

MAX_VALUE = bits_to_float(0x7F7FFFFF)
MIN_VALUE = bits_to_float(0x00000001)

ORDERED_CHAIN = [
    -math.inf,
    -MAX_VALUE,
    -1.0,
    -MIN_VALUE,
    -0.0,
    0.0,
    MIN_VALUE,
    1.0,
    MAX_VALUE,
    math.inf,
    math.nan,
]


def test_simple_ordering():
    """Ordinary values follow native comparison."""
    assert compare(1.0, 2.0) == -1
    assert compare(2.0, 1.0) == 1
    assert compare(1.0, 1.0) == 0


def test_nan_is_equal_to_nan():
    """All NaNs are one equivalence class, whatever their sign or payload."""
    assert compare(math.nan, math.nan) == 0
    assert compare(math.nan, -math.nan) == 0
    assert compare(math.nan, bits_to_float(0x7F800001)) == 0


@pytest.mark.parametrize("other", ORDERED_CHAIN[:-1])
def test_nan_is_greater_than_everything_else(other):
    """NaN orders after every non-NaN value, including +Infinity."""
    assert compare(math.nan, other) == 1
    assert compare(other, math.nan) == -1


def test_positive_zero_is_greater_than_negative_zero():
    """+0.0 orders strictly after -0.0 although they are numerically equal."""
    assert 0.0 == -0.0
    assert compare(0.0, -0.0) == 1
    assert compare(-0.0, 0.0) == -1
    assert compare(-0.0, -0.0) == 0


def test_chain_is_strictly_increasing():
    """Every element of the chain orders before every later element."""
    for i, low in enumerate(ORDERED_CHAIN):
        for high in ORDERED_CHAIN[i + 1 :]:
            assert compare(low, high) == -1, (low, high)
            assert compare(high, low) == 1, (high, low)


def test_sorting_with_total_order_key():
    """sorted() with total_order_key reproduces the chain from any order."""
    shuffled = [ORDERED_CHAIN[i] for i in (10, 4, 7, 0, 9, 2, 5, 1, 8, 3, 6)]
    result = sorted(shuffled, key=total_order_key)
    assert [total_order_key(v) for v in result] == [
        total_order_key(v) for v in ORDERED_CHAIN
    ]


def test_order_keys_for_special_patterns():
    """Sign-magnitude patterns map to offset-binary keys."""
    assert order_key_from_bits(FP_POS_ZERO) == 0x80000000
    assert order_key_from_bits(FP_NEG_ZERO) == 0x7FFFFFFF
    assert order_key_from_bits(FP_CANONICAL_NAN) > order_key_from_bits(FP_POS_INF)


def test_compare_bits_matches_compare():
    """The bit-level comparator agrees with the float-level one."""
    assert compare_bits(FP_POS_ZERO, FP_NEG_ZERO) == 1
    assert compare_bits(FP_CANONICAL_NAN, FP_CANONICAL_NAN) == 0
    assert compare_bits(0xBF800000, 0x3F800000) == -1  # -1.0 < 1.0
