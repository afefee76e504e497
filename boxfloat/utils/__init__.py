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

"""Utility functions shared by the models and codecs.

Modules
-------
int_utils
    Integer width conversions:
    - Sign extension for various bit widths
    - Signed 32-bit folding
    - Saturating float -> integer truncation

conversion_logger
    Structured debug logging:
    - Rejected float literals with the rejection reason
    - Narrowing overflow to infinity and underflow to zero

Usage
-----
Import utilities as needed::

    from boxfloat.utils.int_utils import saturating_truncate

    saturating_truncate(1e10, bits=32)  # 2147483647
"""

from boxfloat.utils.int_utils import (
    saturating_truncate,
    sign_extend,
    signed_bounds,
    to_signed32,
)

# ConversionLogger is imported directly by the modules that log:
# from boxfloat.utils.conversion_logger import ConversionLogger

__all__ = [
    "saturating_truncate",
    "sign_extend",
    "signed_bounds",
    "to_signed32",
]
