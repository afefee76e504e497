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

"""Structured logging for lossy conversions and rejected literals.

Conversion Logger
=================

Provides compact, context-rich debug messages for the few places where a
conversion silently changes a value (narrowing overflow and underflow) or
where text is rejected by the parser. Everything is logged at DEBUG level on
the "boxfloat" logger hierarchy; the library never configures handlers.
"""

from __future__ import annotations

import logging

from boxfloat.config import FP_POS_INF, FP_SIGN_MASK, MASK32

log = logging.getLogger("boxfloat.conversion")


class ConversionLogger:
    """Structured debug logging for binary32 conversions."""

    @staticmethod
    def log_parse_rejection(text: object, reason: str) -> None:
        """Log a float literal that failed to parse.

        Args:
            text: Offending input (may be None or a non-string)
            reason: Short cause tag ("null", "type", "empty", "syntax")
        """
        log.debug("parse rejected [%s] input=%.64r", reason, text)

    @staticmethod
    def log_narrowing(source: float, bits: int) -> None:
        """Log a binary64 -> binary32 narrowing that left the finite range.

        Only overflow to infinity and underflow of a nonzero value to zero are
        reported; ordinary rounding is not.

        Args:
            source: The binary64 input
            bits: The resulting binary32 bit pattern
        """
        if not log.isEnabledFor(logging.DEBUG):
            return
        parts = [f"narrowing {source!r}", f"→ 0x{bits:08x}"]
        magnitude = bits & MASK32 & ~FP_SIGN_MASK
        if magnitude == FP_POS_INF:
            parts.append("[OVERFLOW]")
        elif magnitude == 0:
            parts.append("[UNDERFLOW]")
        log.debug(" ".join(parts))
