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

"""Custom exceptions for boxed float failures.

Exceptions
==========

Parsing is the only fallible operation on a boxed float, so the hierarchy is
small: a package-wide base class and the format error raised for text that
is not a float literal.
"""

from __future__ import annotations


class BoxedFloatError(Exception):
    """Base exception for all boxfloat failures.

    All package-specific exceptions inherit from this base class,
    allowing callers to catch them with a single handler.
    """

    pass


class FloatFormatError(BoxedFloatError, ValueError):
    """Text could not be decoded into a float value.

    Raised when the input is absent (None), empty after trimming, or does
    not match the float literal grammar as a whole. Also a ValueError, so
    callers that treat it like float("...") failures keep working.
    """

    def __init__(self, message: str, text: object = None, reason: str = "syntax"):
        """Initialize format error with the offending input.

        Args:
            message: Error description
            text: The input that failed to parse (None when absent)
            reason: Short cause tag ("null", "type", "empty" or "syntax")
        """
        super().__init__(message)
        self.text = text
        self.reason = reason
