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

from enum import Enum
from inspect import isclass
from typing import Any, Dict, Optional, Sequence, Type

from .core import UnknownNameError, UnknownValueError
from ._type_helper import Protocol, runtime_checkable, short_type_name


@runtime_checkable
class SupportsConversion(Protocol):
    """The conversion capability every registered enum type supplies.

    ``stringify`` maps an ordinal to its canonical name and falls back to
    ``"<TypeName>(<ordinal>)"`` for ordinals without a name. ``parse`` is an
    exact, case-sensitive match against the canonical names and raises
    :class:`UnknownNameError<enumkit.core.UnknownNameError>` otherwise.
    ``count`` is the number of ordinals, the registry stores it as ``N``.
    """
    typename: str

    def stringify(self, ordinal: int) -> str:
        ...

    def parse(self, name: str) -> int:
        ...

    def count(self) -> int:
        ...


class EnumConversion:
    """Shared behaviour of the stock conversions. Subclasses provide the name table."""

    datatype: Optional[type] = None

    def __init__(self, typename: str) -> None:
        self.typename = typename

    def stringify(self, ordinal: int) -> str:
        raise NotImplementedError()

    def parse(self, name: str) -> int:
        raise NotImplementedError()

    def count(self) -> int:
        raise NotImplementedError()

    def fallback(self, ordinal: int) -> str:
        return f"{self.typename.rsplit('.', 1)[-1]}({ordinal})"

    def unknown_name(self, name: str) -> UnknownNameError:
        return UnknownNameError(f"String: {name} is not a valid option for type: {self.typename}")

    def is_defined(self, ordinal: int) -> bool:
        return is_defined(self, ordinal)

    def make(self, ordinal: int) -> Any:
        """Typed value for an ordinal, plain int when there is no datatype."""
        return ordinal

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(typename='{self.typename}', count={self.count()})"


class EnumClassConversion(EnumConversion):
    """Conversion backed by a Python :class:`enum.Enum` class with integer values.
    Aliases are not part of the canonical name table."""

    def __init__(self, datatype: Type[Enum], count: Optional[int] = None, typename: Optional[str] = None) -> None:
        super().__init__(typename or getattr(datatype, "__kit_typename__", None) or short_type_name(datatype))
        self.datatype = datatype
        self._names: Dict[int, str] = {}
        self._ordinals: Dict[str, int] = {}

        for member in datatype:
            try:
                ordinal = int(member.value)
            except (TypeError, ValueError):
                raise TypeError(f"Enum {self.typename} member {member.name} does not have an integer value.")
            self._names[ordinal] = member.name
            self._ordinals[member.name] = ordinal

        if count is None:
            count = max(self._names) + 1 if self._names else 0
        self._count = count

    def stringify(self, ordinal: int) -> str:
        name = self._names.get(ordinal)
        if name is None:
            return self.fallback(ordinal)
        return name

    def parse(self, name: str) -> int:
        if name not in self._ordinals:
            raise self.unknown_name(name)
        return self._ordinals[name]

    def count(self) -> int:
        return self._count

    def is_defined(self, ordinal: int) -> bool:
        return ordinal in self._names

    def make(self, ordinal: int) -> Any:
        if ordinal not in self._names:
            raise UnknownValueError(f"Value {ordinal} is not defined for type: {self.typename}")
        return self.datatype(ordinal)


class NameTableConversion(EnumConversion):
    """Conversion backed by a sequence of names indexed by ordinal, the shape a
    stringer style code generator emits. Empty entries are undefined ordinals."""

    def __init__(self, typename: str, names: Sequence[str], count: Optional[int] = None) -> None:
        super().__init__(typename)
        self._names = tuple(names)
        self._ordinals = {name: i for i, name in enumerate(self._names) if name}
        self._count = len(self._names) if count is None else count

    def stringify(self, ordinal: int) -> str:
        if 0 <= ordinal < len(self._names) and self._names[ordinal]:
            return self._names[ordinal]
        return self.fallback(ordinal)

    def parse(self, name: str) -> int:
        if name not in self._ordinals:
            raise self.unknown_name(name)
        return self._ordinals[name]

    def count(self) -> int:
        return self._count

    def is_defined(self, ordinal: int) -> bool:
        return 0 <= ordinal < len(self._names) and bool(self._names[ordinal])


def is_defined(conversion: SupportsConversion, ordinal: int) -> bool:
    """Whether the conversion has a canonical name for ``ordinal``, works for any capability."""
    if isinstance(conversion, EnumConversion) and type(conversion).is_defined is not EnumConversion.is_defined:
        return conversion.is_defined(ordinal)
    try:
        return conversion.parse(conversion.stringify(ordinal)) == ordinal
    except ValueError:
        return False


def make_value(conversion: SupportsConversion, ordinal: int) -> Any:
    if isinstance(conversion, EnumConversion):
        return conversion.make(ordinal)
    return ordinal


def conversion_for(handle: Any) -> SupportsConversion:
    """Resolve the conversion capability of an enum class, an enum member or a capability object."""
    if isclass(handle) and issubclass(handle, Enum):
        conversion = handle.__dict__.get("__kit_conversion__")
        if conversion is None:
            conversion = EnumClassConversion(handle)
        return conversion
    if isinstance(handle, Enum):
        return conversion_for(type(handle))
    if not isclass(handle) and isinstance(handle, SupportsConversion):
        return handle
    raise TypeError(f"{handle!r} is not an enum type and does not supply a conversion.")


__all__ = [
    "SupportsConversion", "EnumConversion", "EnumClassConversion", "NameTableConversion",
    "conversion_for", "is_defined", "make_value"
]
