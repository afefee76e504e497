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

"""IEEE 754 single-precision bit model.

FP Bits
=======

This module is the bit-level layer under the boxed float. It uses Python's
struct module for bit-accurate binary32 packing and the decimal module for
exact conversion between decimal values and binary32.

The model handles:
    - Packing/unpacking (float <-> 32-bit pattern)
    - Narrowing binary64 -> binary32 (round to nearest even)
    - NaN canonicalization
    - Classification on bit patterns (NaN, infinity, zero, sign)
    - Exact Decimal -> binary32 conversion with a single rounding

Special Value Handling:
    - NaN: every NaN pattern canonicalizes to quiet NaN 0x7FC00000
    - Infinity: ±Inf handled per IEEE 754, including narrowing overflow
    - Zero: +0 and -0 keep distinct patterns
"""

from __future__ import annotations

import math
import struct
from decimal import Decimal, localcontext, ROUND_HALF_EVEN

from boxfloat.config import (
    DECIMAL_PRECISION_FLOOR,
    EXPONENT_BIAS,
    FP_CANONICAL_NAN,
    FP_EXP_MASK,
    FP_MANT_MASK,
    FP_NEG_INF,
    FP_NEG_ZERO,
    FP_POS_INF,
    FP_POS_ZERO,
    FP_SIGN_MASK,
    FRACTION_BITS,
    MASK32,
    MIN_SUBNORMAL_EXPONENT,
)
from boxfloat.float_types import FloatBits
from boxfloat.utils.conversion_logger import ConversionLogger

# Every finite value at or above 2^128 rounds to infinity, and every
# magnitude at or below 2^-150 rounds to zero.
_OVERFLOW_THRESHOLD = Decimal(2**128)
_UNDERFLOW_SCALE = 2 ** (-(MIN_SUBNORMAL_EXPONENT - 1))


def bits_to_float(bits: int) -> float:
    """Convert 32-bit integer to IEEE 754 single-precision float."""
    packed = struct.pack(">I", bits & MASK32)
    return struct.unpack(">f", packed)[0]


def float_to_bits(f: float) -> FloatBits:
    """Convert a float to its canonical single-precision bit pattern.

    Values that are not exactly representable are rounded to nearest even.
    All NaNs map to FP_CANONICAL_NAN.
    """
    if math.isnan(f):
        return FloatBits(FP_CANONICAL_NAN)
    if math.isinf(f):
        return FloatBits(FP_NEG_INF if f < 0.0 else FP_POS_INF)
    try:
        packed = struct.pack(">f", f)
    except OverflowError:
        # Value too large for float32: saturate to signed infinity.
        return FloatBits(FP_NEG_INF if f < 0.0 else FP_POS_INF)
    return FloatBits(struct.unpack(">I", packed)[0])


def narrow_to_float32(f: float) -> float:
    """Narrow a binary64 value to the nearest binary32 value.

    Overflow yields ±infinity and tiny magnitudes flush to signed zero, as a
    native (float) cast does. Neither case is an error; both are logged at
    DEBUG level.
    """
    bits = float_to_bits(f)
    if (is_inf(bits) and not math.isinf(f)) or (is_zero(bits) and f != 0.0):
        ConversionLogger.log_narrowing(f, bits)
    return bits_to_float(bits)


def is_nan(bits: int) -> bool:
    """Check if bits represent a NaN value."""
    exp = (bits & FP_EXP_MASK) >> FRACTION_BITS
    mant = bits & FP_MANT_MASK
    return exp == 0xFF and mant != 0


def is_inf(bits: int) -> bool:
    """Check if bits represent an infinity value."""
    exp = (bits & FP_EXP_MASK) >> FRACTION_BITS
    mant = bits & FP_MANT_MASK
    return exp == 0xFF and mant == 0


def is_zero(bits: int) -> bool:
    """Check if bits represent a zero value (+0 or -0)."""
    return (bits & ~FP_SIGN_MASK & MASK32) == 0


def is_negative(bits: int) -> bool:
    """Check if the sign bit is set."""
    return bool(bits & FP_SIGN_MASK)


def canonicalize_nan(bits: int) -> FloatBits:
    """Convert any NaN to canonical quiet NaN."""
    if is_nan(bits):
        return FloatBits(FP_CANONICAL_NAN)
    return FloatBits(bits & MASK32)


def decimal_to_float32(d: Decimal) -> FloatBits:
    """Convert Decimal to float32 bits with proper rounding.

    This implements direct single-precision rounding from Decimal to avoid
    double-rounding issues that occur when going Decimal -> float64 -> float32.

    The working precision grows with the number of input digits, so every
    scaling step below is exact and the only rounding is the final RNE step.
    """
    if d.is_nan():
        return FloatBits(FP_CANONICAL_NAN)
    if d.is_infinite():
        return FloatBits(FP_NEG_INF if d < 0 else FP_POS_INF)
    if d == 0:
        # Preserve sign of zero
        return FloatBits(FP_NEG_ZERO if d.is_signed() else FP_POS_ZERO)

    # Extract sign and work with absolute value (copy_abs never rounds)
    sign = 1 if d.is_signed() else 0
    d_abs = d.copy_abs()

    if d_abs >= _OVERFLOW_THRESHOLD:
        return FloatBits(FP_NEG_INF if sign else FP_POS_INF)

    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION_FLOOR + len(d_abs.as_tuple().digits)
        ctx.rounding = ROUND_HALF_EVEN

        if d_abs * _UNDERFLOW_SCALE <= 1:
            # At or below half the smallest subnormal: ties go to even (zero)
            return FloatBits(FP_NEG_ZERO if sign else FP_POS_ZERO)

        # Find the binary exponent using binary search (no floating-point ln)
        # Find e such that 2^e <= d_abs < 2^(e+1)
        two = Decimal(2)

        if d_abs >= 1:
            # Search upward from 0
            exp_estimate = 0
            power = Decimal(1)
            while power * 2 <= d_abs:
                power *= 2
                exp_estimate += 1
        else:
            # Search downward from 0
            exp_estimate = -1
            power = Decimal("0.5")
            while power > d_abs:
                power /= 2
                exp_estimate -= 1

        biased_exp = exp_estimate + EXPONENT_BIAS

        if biased_exp >= 255:
            # Overflow to infinity
            return FloatBits(FP_NEG_INF if sign else FP_POS_INF)
        elif biased_exp >= 1:
            # Normal number: scale so the 24-bit significand sits at [50:27]
            # with guard at [26], round at [25] and sticky below.
            scale_exp = 50 - exp_estimate
            if scale_exp >= 0:
                scaled = d_abs * (two**scale_exp)
            else:
                scaled = d_abs / (two ** (-scale_exp))

            scaled_int = int(scaled)
            remainder = scaled - scaled_int

            mantissa_24 = scaled_int >> 27
            guard = (scaled_int >> 26) & 1
            round_bit = (scaled_int >> 25) & 1
            sticky = 1 if ((scaled_int & 0x1FFFFFF) != 0 or remainder != 0) else 0

            # Round to nearest even (RNE)
            lsb = mantissa_24 & 1
            round_up = guard & (round_bit | sticky | lsb)

            if round_up:
                mantissa_24 += 1
                # Check for mantissa overflow (1.111...1 + 1 = 10.000...0)
                if mantissa_24 >= (1 << 24):
                    mantissa_24 >>= 1
                    biased_exp += 1
                    if biased_exp >= 255:
                        return FloatBits(FP_NEG_INF if sign else FP_POS_INF)

            # Remove implicit 1 bit to get 23-bit mantissa
            mantissa_23 = mantissa_24 & FP_MANT_MASK
            return FloatBits((sign << 31) | (biased_exp << FRACTION_BITS) | mantissa_23)
        else:
            # Subnormal: bits positioned on the 2^-149 grid
            shift = 1 - biased_exp

            if shift >= 25:
                # Complete underflow to zero
                return FloatBits(FP_NEG_ZERO if sign else FP_POS_ZERO)

            scale_exp = 49 + biased_exp - exp_estimate
            scaled = d_abs * (two**scale_exp)

            scaled_int = int(scaled)
            remainder = scaled - scaled_int

            mantissa = scaled_int >> 27
            guard = (scaled_int >> 26) & 1
            round_bit = (scaled_int >> 25) & 1
            sticky = 1 if ((scaled_int & 0x1FFFFFF) != 0 or remainder != 0) else 0

            # Round to nearest even
            lsb = mantissa & 1
            round_up = guard & (round_bit | sticky | lsb)

            if round_up:
                mantissa += 1
                # If mantissa overflows to 2^23, it becomes smallest normal
                if mantissa >= (1 << FRACTION_BITS):
                    return FloatBits((sign << 31) | (1 << FRACTION_BITS))

            mantissa_23 = mantissa & FP_MANT_MASK
            return FloatBits((sign << 31) | mantissa_23)  # biased_exp = 0
