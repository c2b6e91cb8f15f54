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
BitArray

A fixed length run of boolean flags packed eight to a byte. Bit n lives in
byte n // 8 at offset n % 8, counted from the least significant bit, so

    bit:   7 6 5 4 3 2 1 0 | 15 14 13 12 11 10 9 8 | ...
    byte:  [      0       ] [         1          ]

Storage is always whole bytes, so when the length is not a multiple of eight
the last byte carries padding bits which are not part of the array. The
aggregate queries (all, any, none, popcount) mask the last byte as they read
it, so a padding bit that has been written (for example by an unchecked
negative index) can never be observed. fill() and clear() also leave the
padding unset.

The array never grows or shrinks, and is not safe to mutate from more than one
thread at a time; callers wanting to share one should hold a lock around it.
"""

import logging
import operator
from typing import Optional
from typing import Tuple

from packedbits import config
from packedbits.exceptions import AllocationError
from packedbits.exceptions import BitIndexError
from packedbits.exceptions import InvalidLengthError
from packedbits.policy import BitArrayPolicy
from packedbits.policy import default_policy
from packedbits.popcount import byte_popcount

logger = logging.getLogger(__name__)


class BitArray:
    __slots__ = ("_length", "_storage", "_last_mask", "_policy", "_locate", "_popcount")

    def __init__(self, length: int, policy: Optional[BitArrayPolicy] = None):
        """
        Allocate a BitArray of `length` bits, all unset.

        Parameters:
            length: integer
                The number of bits, must be at least one.
            policy: BitArrayPolicy (optional)
                Bounds checking and popcount strategy, defaults to the policy
                described by the configuration.

        Raises:
            InvalidLengthError: length is not positive (bounds assertions only)
            AllocationError: the buffer could not be allocated
        """
        if policy is None:
            policy = default_policy()

        if policy.bounds_assertions:
            if isinstance(length, bool):
                raise InvalidLengthError(length)
            try:
                length = operator.index(length)
            except TypeError as err:
                raise InvalidLengthError(length) from err
            if length < 1:
                raise InvalidLengthError(length)

        nbytes = (length + 7) // 8
        if nbytes > config.MAX_BITARRAY_ALLOCATION:
            raise AllocationError(nbytes, config.MAX_BITARRAY_ALLOCATION)
        try:
            storage = bytearray(nbytes)
        except (MemoryError, OverflowError) as err:
            raise AllocationError(nbytes) from err

        loose_bits = length % 8
        self._length = length
        self._storage = storage
        self._last_mask = (1 << loose_bits) - 1 if loose_bits else 0xFF
        self._policy = policy
        self._locate = self._checked_locate if policy.bounds_assertions else self._unchecked_locate
        self._popcount = policy.popcount_function

        logger.debug("BitArray of %d bits allocated %d bytes [%s]", length, nbytes, policy.describe())

    @classmethod
    def new(cls, length: int, policy: Optional[BitArrayPolicy] = None) -> Optional["BitArray"]:
        """
        Construct a BitArray, reporting an allocation failure by returning None
        rather than raising.
        """
        try:
            return cls(length, policy)
        except AllocationError as err:
            logger.warning("BitArray of %s bits not created - %s", length, err)
            return None

    def release(self) -> None:
        """
        Drop the storage. The BitArray must not be used afterwards, doing so is
        not detected.
        """
        logger.debug("BitArray of %d bits released", self._length)
        self._storage = None

    delete = release

    def __enter__(self) -> "BitArray":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.release()

    # index arithmetic

    def _unchecked_locate(self, index: int) -> Tuple[int, int]:
        return index >> 3, 1 << (index & 7)

    def _checked_locate(self, index: int) -> Tuple[int, int]:
        if index < 0 or index >= self._length:
            raise BitIndexError(index, self._length)
        return index >> 3, 1 << (index & 7)

    # single bit operations

    def check(self, index: int) -> bool:
        """True if the bit at index is set."""
        byte_index, bit_mask = self._locate(index)
        return bool(self._storage[byte_index] & bit_mask)

    def set(self, index: int) -> None:
        byte_index, bit_mask = self._locate(index)
        self._storage[byte_index] |= bit_mask

    def unset(self, index: int) -> None:
        byte_index, bit_mask = self._locate(index)
        self._storage[byte_index] &= ~bit_mask

    def flip(self, index: int) -> None:
        byte_index, bit_mask = self._locate(index)
        self._storage[byte_index] ^= bit_mask

    def __getitem__(self, index: int) -> bool:
        return self.check(index)

    def __setitem__(self, index: int, value: bool) -> None:
        if value:
            self.set(index)
        else:
            self.unset(index)

    # whole array operations

    def fill(self) -> None:
        """Set every bit in [0, length), the padding stays unset."""
        storage = self._storage
        last = len(storage) - 1
        storage[:last] = b"\xff" * last
        storage[last] = self._last_mask

    def clear(self) -> None:
        """Unset every byte of storage, padding included."""
        self._storage[:] = bytes(len(self._storage))

    # aggregate queries, each masks the padding out of the last byte

    def all(self) -> bool:
        storage = self._storage
        last = len(storage) - 1
        if storage.count(0xFF, 0, last) != last:
            return False
        mask = self._last_mask
        return (storage[last] & mask) == mask

    def any(self) -> bool:
        storage = self._storage
        last = len(storage) - 1
        if storage[last] & self._last_mask:
            return True
        return storage.count(0, 0, last) != last

    def none(self) -> bool:
        return not self.any()

    def popcount(self) -> int:
        """The number of set bits, padding excluded."""
        storage = self._storage
        last = len(storage) - 1
        with memoryview(storage) as view:
            total = self._popcount(view[:last])
        return total + byte_popcount(storage[last] & self._last_mask)

    # accessors

    def length(self) -> int:
        return self._length

    def __len__(self) -> int:
        return self._length

    def capacity(self) -> int:
        """Physical bits backing the array, the length rounded up to a whole byte."""
        return len(self._storage) * 8

    @property
    def nbytes(self) -> int:
        return len(self._storage)

    @property
    def padding(self) -> int:
        return self.capacity() - self._length

    @property
    def policy(self) -> BitArrayPolicy:
        return self._policy

    def __repr__(self) -> str:
        if self._storage is None:
            return f"<BitArray length={self._length} released>"
        return f"<BitArray length={self._length} popcount={self.popcount()}>"
