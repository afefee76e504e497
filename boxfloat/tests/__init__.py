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

"""Test suite for the boxfloat package.

Modules
-------
test_fp_bits
    Bit packing, narrowing, NaN canonicalization, exact Decimal conversion

test_ordering
    Total-order keys and the three-way comparator

test_float_format / test_float_parse
    Canonical rendering and the float literal grammar

test_boxed_float
    BoxedFloat construction, equality, hashing, conversions, logging

test_int_utils
    Sign extension and saturating float -> integer conversion

test_properties
    Hypothesis property tests (total order laws, round-trips, hashing)

Usage
-----
::

    pytest boxfloat/tests
"""
