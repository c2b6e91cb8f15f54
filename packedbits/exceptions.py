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
Bespoke error types for packedbits.

Exception Hierarchy:

Exception
 ├── AllocationError (MemoryError)
 └── Error
     └── ProgrammingError *
         ├── InvalidLengthError (ValueError)
         └── BitIndexError (IndexError)

ProgrammingErrors are caller bugs, they are only raised when the BitArray was
built with bounds assertions enabled.
"""

from typing import Optional


# ======================== Begin Runtime Errors ========================
class AllocationError(MemoryError):
    """The storage for a BitArray could not be allocated."""

    def __init__(self, requested_bytes: int, limit: Optional[int] = None):
        self.requested_bytes = requested_bytes
        self.limit = limit
        if limit is not None:
            message = f"Unable to allocate {requested_bytes} bytes for BitArray, the configured limit is {limit} bytes."
        else:
            message = f"Unable to allocate {requested_bytes} bytes for BitArray."
        super().__init__(message)


# ======================== End Runtime Errors ==========================


# ======================== Begin Superclasses ========================
# These should not be thrown directly
class Error(Exception):
    """
    Base class for the packedbits programming errors, you can use this to catch
    all of them with one except statement.
    """


class ProgrammingError(Error):
    """
    Raised when a precondition of a BitArray operation is violated, these are
    bugs in the calling code rather than conditions to recover from.
    """


# ======================== End Superclasses ==========================


# ======================== Begin Precondition Errors ========================
class InvalidLengthError(ProgrammingError, ValueError):
    """A BitArray must hold at least one bit."""

    def __init__(self, length):
        self.length = length
        message = f"BitArray length must be a positive integer, got {length!r}."
        super().__init__(message)


class BitIndexError(ProgrammingError, IndexError):
    """The bit index is outside [0, length)."""

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        message = f"Index out of range, {index} is not in [0, {length})."
        super().__init__(message)


# ======================== End Precondition Errors ==========================
