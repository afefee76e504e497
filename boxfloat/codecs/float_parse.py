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

"""Float literal parsing with a single binary32 rounding.

Float Parse
===========

Accepted grammar (after trimming leading/trailing characters <= U+0020):

    literal   := [sign] ( "NaN" | "Infinity" | decimal | hex )
    sign      := "+" | "-"
    decimal   := ( digits ["." [digits]] | "." digits ) [exponent] [suffix]
    exponent  := ("e" | "E") [sign] digits
    hex       := ("0x" | "0X") ( hexdigits ["." [hexdigits]] | "." hexdigits )
                 ("p" | "P") [sign] digits [suffix]
    suffix    := "f" | "F" | "d" | "D"

The whole trimmed string must match; there is no partial parsing. Values
are rounded once, directly from their exact decimal or binary value to
binary32 (round half to even), so a string never goes through binary64 on
the way. Overflow yields ±Infinity and underflow yields ±0.0.
"""

from __future__ import annotations

import re
from decimal import Decimal

from boxfloat.config import (
    FP_CANONICAL_NAN,
    FP_NEG_INF,
    FP_NEG_ZERO,
    FP_POS_INF,
    FP_POS_ZERO,
    MAX_EXPONENT,
    MIN_SUBNORMAL_EXPONENT,
)
from boxfloat.exceptions import FloatFormatError
from boxfloat.float_types import FloatBits
from boxfloat.models.fp_bits import bits_to_float, decimal_to_float32
from boxfloat.utils.conversion_logger import ConversionLogger

__all__ = ["parse_bits", "parse_float"]

_TRIM_CHARS = "".join(chr(code) for code in range(0x21))

_FLOAT_LITERAL = re.compile(
    r"""
    (?P<sign>[+-])?
    (?:
        (?P<nan>NaN)
      | (?P<inf>Infinity)
      | 0[xX](?P<hex_int>[0-9a-fA-F]*)(?:\.(?P<hex_frac>[0-9a-fA-F]*))?
        [pP](?P<hex_exp>[+-]?[0-9]+)[fFdD]?
      | (?P<int>[0-9]*)(?:\.(?P<frac>[0-9]*))?
        (?:[eE](?P<exp>[+-]?[0-9]+))?[fFdD]?
    )
    """,
    re.VERBOSE,
)

# Exponents with more digits than this are far outside the binary32 range
_MAX_EXPONENT_DIGITS = 9

# Decimal exponent bounds outside of which the value is surely ±Inf or ±0
_MAX_DECIMAL_ADJUSTED = 39
_MIN_DECIMAL_ADJUSTED = -46


def _signed_inf(negative: bool) -> FloatBits:
    return FloatBits(FP_NEG_INF if negative else FP_POS_INF)


def _signed_zero(negative: bool) -> FloatBits:
    return FloatBits(FP_NEG_ZERO if negative else FP_POS_ZERO)


def _reject(text: object, reason: str) -> FloatFormatError:
    """Build (and log) the format error for a rejected input."""
    ConversionLogger.log_parse_rejection(text, reason)
    if reason == "null":
        return FloatFormatError("Float literal is null", text=text, reason=reason)
    if reason == "type":
        return FloatFormatError(
            f"Float literal must be a string, not {type(text).__name__}",
            text=text,
            reason=reason,
        )
    if reason == "empty":
        return FloatFormatError("Empty float literal", text=text, reason=reason)
    return FloatFormatError(f'For input string: "{text}"', text=text, reason=reason)


def _exponent(digits: str) -> int | None:
    """Parse a signed exponent string; None when it is absurdly large."""
    magnitude = digits.lstrip("+-").lstrip("0")
    if len(magnitude) > _MAX_EXPONENT_DIGITS:
        return None
    value = int(magnitude or "0")
    return -value if digits.startswith("-") else value


def _decimal_bits(negative: bool, int_part: str, frac_part: str, exp: str) -> FloatBits:
    """Round a decimal literal to binary32."""
    digits = (int_part + frac_part).lstrip("0")
    if not digits:
        return _signed_zero(negative)

    exp10 = _exponent(exp) if exp else 0
    if exp10 is None:
        huge_positive = not exp.startswith("-")
        return _signed_inf(negative) if huge_positive else _signed_zero(negative)
    exp10 -= len(frac_part)

    # Value lies in [10^adjusted, 10^(adjusted + 1))
    adjusted = exp10 + len(digits) - 1
    if adjusted > _MAX_DECIMAL_ADJUSTED:
        return _signed_inf(negative)
    if adjusted < _MIN_DECIMAL_ADJUSTED:
        return _signed_zero(negative)

    value = Decimal((1 if negative else 0, tuple(int(d) for d in digits), exp10))
    return decimal_to_float32(value)


def _hex_bits(negative: bool, int_part: str, frac_part: str, exp: str) -> FloatBits:
    """Round a hexadecimal literal (mantissa * 2^exp) to binary32."""
    mantissa = int(int_part + frac_part, 16)
    if mantissa == 0:
        return _signed_zero(negative)

    exp2 = _exponent(exp)
    if exp2 is None:
        return _signed_zero(negative) if exp.startswith("-") else _signed_inf(negative)
    exp2 -= 4 * len(frac_part)

    # Value lies in [2^top, 2^(top + 1))
    top = exp2 + mantissa.bit_length() - 1
    if top > MAX_EXPONENT:
        return _signed_inf(negative)
    if top < MIN_SUBNORMAL_EXPONENT - 2:
        return _signed_zero(negative)

    sign = "-" if negative else ""
    if exp2 >= 0:
        value = Decimal(f"{sign}{mantissa << exp2}")
    else:
        # m * 2^-k == (m * 5^k) * 10^-k, exactly
        value = Decimal(f"{sign}{mantissa * 5 ** -exp2}E{exp2}")
    return decimal_to_float32(value)


def parse_bits(text: object) -> FloatBits:
    """Parse a float literal into its binary32 bit pattern.

    Args:
        text: The string representation of a float value

    Returns:
        Bit pattern of the correctly rounded value (NaN is canonical)

    Raises:
        FloatFormatError: text is None, not a string, empty, or not a
            float literal
    """
    if text is None:
        raise _reject(text, "null")
    if not isinstance(text, str):
        raise _reject(text, "type")

    trimmed = text.strip(_TRIM_CHARS)
    if not trimmed:
        raise _reject(text, "empty")

    match = _FLOAT_LITERAL.fullmatch(trimmed)
    if match is None:
        raise _reject(text, "syntax")

    negative = match.group("sign") == "-"
    if match.group("nan"):
        return FloatBits(FP_CANONICAL_NAN)
    if match.group("inf"):
        return _signed_inf(negative)

    if match.group("hex_exp") is not None:
        hex_int = match.group("hex_int") or ""
        hex_frac = match.group("hex_frac") or ""
        if not (hex_int or hex_frac):
            raise _reject(text, "syntax")
        return _hex_bits(negative, hex_int, hex_frac, match.group("hex_exp"))

    int_part = match.group("int") or ""
    frac_part = match.group("frac") or ""
    if not (int_part or frac_part):
        raise _reject(text, "syntax")
    return _decimal_bits(negative, int_part, frac_part, match.group("exp") or "")


def parse_float(text: object) -> float:
    """Parse the specified string as a float value.

    The result is a Python float holding the binary32 value.

    Raises:
        FloatFormatError: text is None, has a length of zero after trimming,
            or can not be parsed as a float value

    Example:
        >>> parse_float("3.14")
        3.140000104904175
        >>> parse_float("-0.0")
        -0.0
    """
    return bits_to_float(parse_bits(text))
