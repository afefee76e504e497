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

"""Text codecs for binary32 values.

Modules
-------
float_format
    Canonical decimal rendering:
    - "NaN", "Infinity", "-Infinity", "0.0", "-0.0" literals
    - Shortest round-trip digits, plain notation in [1e-3, 1e7)
    - E-notation elsewhere ("1.0E10", "1.4E-45")

float_parse
    Float literal grammar:
    - Signs, "NaN", "Infinity", decimal and hexadecimal forms
    - Optional f/F/d/D type suffix
    - Single correctly rounded conversion to binary32

Every finite value rendered by float_format parses back to the same bits.
"""

from boxfloat.codecs.float_format import to_string
from boxfloat.codecs.float_parse import parse_bits, parse_float

__all__ = ["to_string", "parse_bits", "parse_float"]
