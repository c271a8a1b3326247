"""
 * Copyright(c) 2021 to 2022 ZettaScale Technology and others
 *
 * This program and the accompanying materials are made available under the
 * terms of the Eclipse Public License v. 2.0 which is available at
 * http://www.eclipse.org/legal/epl-2.0, or the Eclipse Distribution License
 * v. 1.0 which is available at
 * http://www.eclipse.org/org/documents/edl-v10.php.
 *
 * SPDX-License-Identifier: EPL-2.0 OR BSD-3-Clause
"""

import sys
from enum import Enum
from typing import Any, Tuple


if sys.version_info < (3, 7):
    raise NotImplementedError("This package cannot be used in Python version 3.6 or lower.")
elif sys.version_info < (3, 8):
    # We are in Python 3.7
    from typing_extensions import Protocol, runtime_checkable  # noqa F401
else:
    from typing import Protocol, runtime_checkable  # noqa F401


def non_ptr_type(handle: Any) -> Any:
    """Normalize a handle to the type it refers to: enum members and other instances map to
    their class, classes are returned unchanged."""
    if isinstance(handle, type):
        return handle
    return type(handle)


def short_type_name(datatype: type) -> str:
    """Short type identifier: last segment of the defining module, a dot, then the qualified class name."""
    module = getattr(datatype, "__module__", None) or ""
    name = getattr(datatype, "__qualname__", None) or datatype.__name__
    if not module or module == "builtins":
        return name
    return f"{module.rsplit('.', 1)[-1]}.{name}"


def to_int(value: Any) -> Tuple[int, bool]:
    """Coerce a loosely typed value to int, returns (value, ok)."""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return int(value), True
    if isinstance(value, int):
        return int(value), True
    if isinstance(value, float):
        return int(value), True
    if isinstance(value, (str, bytes)):
        try:
            return int(value, 0), True
        except ValueError:
            return 0, False
    return 0, False


def to_bool(value: Any) -> Tuple[bool, bool]:
    """Coerce a loosely typed value to bool, returns (value, ok)."""
    if isinstance(value, bool):
        return value, True
    if isinstance(value, (int, float)):
        return value != 0, True
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "yes", "on", "1"):
            return True, True
        if lowered in ("false", "no", "off", "0", ""):
            return False, True
        return False, False
    if value is None:
        return False, False
    return bool(value), True


__all__ = ["Protocol", "runtime_checkable", "non_ptr_type", "short_type_name", "to_int", "to_bool"]
