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
Configuration values are read from the environment first, then from a
`packedbits.yaml` file in the working directory, and finally fall back to the
defaults declared at the bottom of this module.

These values only seed the default BitArrayPolicy and the allocation ceiling,
individual BitArrays can be given their own policy.
"""

import datetime
import typing
from os import environ
from pathlib import Path

import dotenv
import psutil

_config_values: dict = {}

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def is_debug(environment=environ) -> bool:
    """PACKEDBITS_DEBUG is switched on, values such as "false" or "0" leave it off."""
    return str(environment.get("PACKEDBITS_DEBUG", "")).strip().lower() in _TRUTHY


# python-dotenv allows us to keep configuration in an environment file, it has to
# be loaded before anything below reads the environment
_env_path = Path.cwd() / ".env"
if _env_path.exists():  # pragma: no cover
    dotenv.load_dotenv(dotenv_path=_env_path)
    if is_debug():
        print(f"{datetime.datetime.now()} [LOADER] Loading `.env` file.")

# we need a preliminary version of this variable
_PACKEDBITS_DEBUG = is_debug()


def memory_allocation_calculation(allocation) -> int:
    """
    Work out the largest buffer a single BitArray may allocate.
    If the allocation is between 0 and 1, it's treated as a percentage of the total system memory.
    If the allocation is 1 or greater, it's treated as an absolute value in megabytes.

    Parameters:
        allocation (float|int): Memory allocation value which could be a percentage or an absolute value.

    Returns:
        int: Memory size in bytes.
    """
    total_memory = psutil.virtual_memory().total

    if 0 < allocation < 1:  # Treat as a percentage
        return int(total_memory * allocation)
    elif allocation >= 1:  # Treat as an absolute value in MB
        return int(allocation * 1024 * 1024)
    else:
        raise ValueError("Invalid memory allocation value. Must be a positive number.")


def to_bool(value) -> bool:
    """
    Interpret a configuration value as a boolean, environment variables arrive as
    strings so "false" needs to mean False.
    """
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return value != 0
    text = str(value).strip().lower()
    if text in _TRUTHY:
        return True
    if text in _FALSY:
        return False
    raise ValueError(f"Cannot interpret '{value}' as a boolean configuration value.")


def parse_yaml(yaml_str):
    """
    Parse the flat subset of YAML used by packedbits.yaml; scalars, inline lists
    and simple block lists.
    """

    def line_value(value):
        value = value.strip()
        if value.isdigit():
            value = int(value)
        elif value.replace(".", "", 1).isdigit():
            value = float(value)
        elif value.lower() == "true":
            return True
        elif value.lower() == "false":
            return False
        elif value.lower() == "none":
            return None
        elif value.startswith("["):
            return [val.strip() for val in value[1:-1].split(",")]
        elif value.startswith("-"):
            return [val.strip() for val in value.split("-") if val.strip()]
        return value

    result: dict = {}
    lines = yaml_str.strip().split("\n")
    key = ""
    value: typing.Any = ""
    in_list = False
    list_key = ""
    for line in lines:
        ## remove comments
        line = line.split("#")[0]
        line = line.strip()
        if not line:
            continue
        if in_list:
            if line.startswith("- "):
                result[list_key].append(line[2:].strip())
                continue
            in_list = False
        key, value = line.split(":", 1)
        if not value.split():
            in_list = True
            list_key = key.strip()
            result[list_key] = []
        else:
            result[key.strip()] = line_value(value)
    return result


try:  # pragma: no cover
    _config_path = Path(".") / "packedbits.yaml"
    if _config_path.exists():
        with open(_config_path, "r", encoding="UTF8") as _config_file:
            _config_values = parse_yaml(_config_file.read())
        if _PACKEDBITS_DEBUG:
            print(f"{datetime.datetime.now()} [LOADER] Loading config from {_config_path}")
except (OSError, ValueError) as exception:  # pragma: no cover # a broken file means use the defaults
    if _PACKEDBITS_DEBUG:
        print(
            f"{datetime.datetime.now()} [LOADER] Config file {_config_path} not used - {exception}"
        )


def get(key, default=None):
    value = environ.get(key)
    if value is None:
        value = _config_values.get(key, default)
    return value


# fmt:off

# check lengths and indices before touching the buffer
ENABLE_BOUNDS_ASSERTIONS: bool = to_bool(get("ENABLE_BOUNDS_ASSERTIONS", True))
# count bits with numpy.bitwise_count rather than the lookup table
USE_HARDWARE_POPCOUNT: bool = to_bool(get("USE_HARDWARE_POPCOUNT", False))
# the largest buffer a single BitArray may claim, either megabytes or fraction of system memory
MAX_BITARRAY_ALLOCATION: int = memory_allocation_calculation(float(get("MAX_BITARRAY_ALLOCATION", 0.5)))

# fmt:on
