# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Population count strategies.

Both strategies count the set bits in a run of whole bytes, the caller is
responsible for masking any padding out of the final byte before counting it.

- table_popcount uses a 256 entry lookup table, one lookup per byte.
- hardware_popcount hands the buffer to numpy.bitwise_count, which uses the
  CPU population count instruction where the platform has one.

The two must agree for every input.
"""

from typing import Callable

import numpy

# POPCOUNT_TABLE[byte] -> number of set bits in byte
POPCOUNT_TABLE: bytes = bytes(bin(byte).count("1") for byte in range(256))

PopcountFunction = Callable[[memoryview], int]


def table_popcount(buffer: memoryview) -> int:
    table = POPCOUNT_TABLE
    return sum(table[byte] for byte in buffer)


def hardware_popcount(buffer: memoryview) -> int:
    if len(buffer) == 0:
        return 0
    view = numpy.frombuffer(buffer, dtype=numpy.uint8)
    return int(numpy.bitwise_count(view).sum(dtype=numpy.uint64))


def byte_popcount(byte: int) -> int:
    """Set bits in a single byte value."""
    return POPCOUNT_TABLE[byte & 0xFF]


def select_popcount(use_hardware: bool) -> PopcountFunction:
    if use_hardware:
        return hardware_popcount
    return table_popcount
