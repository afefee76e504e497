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

"""Type aliases for bit patterns and their renderings.

Types
=====
"""

from typing import NewType

FloatBits = NewType("FloatBits", int)
"""32-bit IEEE 754 single-precision bit pattern (0 to 2^32-1)."""

HexBits = NewType("HexBits", str)
"""Lowercase hexadecimal rendering of a FloatBits value, no leading zeros."""

OrderKey = NewType("OrderKey", int)
"""Unsigned 32-bit key whose integer order is the float total order."""
