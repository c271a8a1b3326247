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

Bit flags are defined as ordinary ordinal enums: ordinal ``i`` is bit ``i`` of
an integer. The helpers here shift on the fly, so the flag definitions never
have to be pre-computed masks. Python integers are immutable, every helper that
modifies flags returns the new value.
"""

from typing import Callable, Iterator, Optional

from .core import UnknownNameError, UnknownValueError
from .internal import bitflag_separator


def mask(*ordinals: int) -> int:
    """Integer with the bit of each given ordinal set.

    Examples
    --------
    >>> mask(0, 2)
    5
    """
    bits = 0
    for ordinal in ordinals:
        bits |= 1 << int(ordinal)
    return bits


def has(bits: int, ordinal: int) -> bool:
    return bits & (1 << int(ordinal)) != 0


def has_any(bits: int, *ordinals: int) -> bool:
    return bits & mask(*ordinals) != 0


def has_all(bits: int, *ordinals: int) -> bool:
    m = mask(*ordinals)
    return bits & m == m


def set_flags(bits: int, *ordinals: int) -> int:
    return bits | mask(*ordinals)


def clear_flags(bits: int, *ordinals: int) -> int:
    return bits & ~mask(*ordinals)


def toggle_flags(bits: int, *ordinals: int) -> int:
    return bits ^ mask(*ordinals)


def set_state(bits: int, state: bool, *ordinals: int) -> int:
    if state:
        return set_flags(bits, *ordinals)
    return clear_flags(bits, *ordinals)


def ordinals(bits: int, n: int) -> Iterator[int]:
    """Ordinals in ``[0, n)`` that are set, ascending."""
    for i in range(n):
        if has(bits, i):
            yield i


def encode(bits: int, n: int, stringify: Callable[[int], str],
           defined: Optional[Callable[[int], bool]] = None) -> str:
    """Names of the set bits in ascending ordinal order joined by ``|``, the empty set is ``""``.
    With ``defined``, a set bit without a name raises
    :class:`UnknownValueError<enumkit.core.UnknownValueError>`, such text could not be decoded."""
    names = []
    for i in ordinals(bits, n):
        if defined is not None and not defined(i):
            raise UnknownValueError(f"Bit {i} is set but has no name, ordinal {i} is undefined")
        names.append(stringify(i))
    return bitflag_separator.join(names)


def decode(text: str, n: int, parse: Callable[[str], int]) -> int:
    """Inverse of :func:`encode`. Every segment must parse to an ordinal in ``[0, n)``, the first
    segment that does not raises :class:`UnknownNameError<enumkit.core.UnknownNameError>` and no
    bits are returned."""
    if text == "":
        return 0

    bits = 0
    for segment in text.split(bitflag_separator):
        ordinal = parse(segment)
        if ordinal < 0 or ordinal >= n:
            raise UnknownNameError(f"String: {segment} is not a valid bit flag, ordinal {ordinal} outside [0, {n})")
        bits |= 1 << ordinal
    return bits


__all__ = [
    "mask", "has", "has_any", "has_all", "set_flags", "clear_flags", "toggle_flags", "set_state",
    "ordinals", "encode", "decode"
]
