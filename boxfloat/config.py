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

"""Central configuration constants for the binary32 value type.

Config
======

All layout constants are derived from the IEEE 754 single-precision format:

    ┌──────┬──────────────┬─────────────────────────────┐
    │ sign │ exponent (8) │       fraction (23)         │
    │  31  │   30 .. 23   │          22 .. 0            │
    └──────┴──────────────┴─────────────────────────────┘

Nothing here is read from the environment; behavior is fixed at import time.
"""

# Format widths
SIZE = 32
FRACTION_BITS = 23
EXPONENT_BIAS = 127

# Exponent range of finite normal values
MAX_EXPONENT = 127
MIN_EXPONENT = -126

# Exponent of the least significant bit of the smallest subnormal (2^-149)
MIN_SUBNORMAL_EXPONENT = MIN_EXPONENT - FRACTION_BITS

# Masks
MASK32 = 0xFFFFFFFF
FP_SIGN_MASK = 0x80000000
FP_EXP_MASK = 0x7F800000
FP_MANT_MASK = 0x007FFFFF

# Special bit patterns
FP_POS_ZERO = 0x00000000
FP_NEG_ZERO = 0x80000000
FP_POS_INF = 0x7F800000
FP_NEG_INF = 0xFF800000
FP_CANONICAL_NAN = 0x7FC00000  # Canonical quiet NaN
FP_MAX_FINITE = 0x7F7FFFFF
FP_MIN_NORMAL = 0x00800000
FP_MIN_SUBNORMAL = 0x00000001

# Decimal rendering switches to E-notation outside [1e-3, 1e7), by decimal exponent
PLAIN_NOTATION_MIN_EXP10 = -3
PLAIN_NOTATION_MAX_EXP10 = 7

# Working precision floor (decimal digits) for exact Decimal <-> binary32 work.
# Covers a 2^200 scale factor plus guard digits; input digits are added on top.
DECIMAL_PRECISION_FLOOR = 200

# Integer conversion widths (two's complement)
BYTE_BITS = 8
SHORT_BITS = 16
INT_BITS = 32
LONG_BITS = 64
