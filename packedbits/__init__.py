# isort: skip_file
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
packedbits is a compact, fixed length array of boolean flags, packed eight to
a byte.

To get started:
    from packedbits import BitArray
    flags = BitArray(1000)
    flags.set(42)
    flags.popcount()

Bounds checking and the population count strategy are set by a BitArrayPolicy,
the default policy comes from the environment or a packedbits.yaml file.
"""

from packedbits import config
from packedbits.__version__ import __author__
from packedbits.__version__ import __build__
from packedbits.__version__ import __version__
from packedbits.bitarray import BitArray
from packedbits.exceptions import AllocationError
from packedbits.exceptions import BitIndexError
from packedbits.exceptions import InvalidLengthError
from packedbits.policy import BitArrayPolicy
from packedbits.policy import default_policy

__all__ = (
    "AllocationError",
    "BitArray",
    "BitArrayPolicy",
    "BitIndexError",
    "InvalidLengthError",
    "config",
    "default_policy",
    "__author__",
    "__build__",
    "__version__",
)
