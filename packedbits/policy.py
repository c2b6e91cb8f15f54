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
The two switches which change how a BitArray behaves without changing what it
does: whether lengths and indices are checked, and how bits are counted.

A BitArray reads its policy once, when it is constructed, and binds the
matching functions then.
"""

from dataclasses import dataclass

from packedbits import config
from packedbits.popcount import PopcountFunction
from packedbits.popcount import select_popcount


@dataclass(frozen=True)
class BitArrayPolicy:
    bounds_assertions: bool = True
    hardware_popcount: bool = False

    @property
    def popcount_function(self) -> PopcountFunction:
        return select_popcount(self.hardware_popcount)

    def describe(self) -> str:
        bounds = "checked" if self.bounds_assertions else "unchecked"
        counter = "hardware" if self.hardware_popcount else "table"
        return f"{bounds}/{counter}"


def default_policy() -> BitArrayPolicy:
    """The policy described by the loaded configuration."""
    return BitArrayPolicy(
        bounds_assertions=config.ENABLE_BOUNDS_ASSERTIONS,
        hardware_popcount=config.USE_HARDWARE_POPCOUNT,
    )


CHECKED = BitArrayPolicy(bounds_assertions=True, hardware_popcount=False)
UNCHECKED = BitArrayPolicy(bounds_assertions=False, hardware_popcount=False)
