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

import logging
import threading
from copy import deepcopy
from enum import Enum
from inspect import isclass
from types import MappingProxyType
from collections.abc import MutableMapping
from dataclasses import dataclass, field, replace
from typing import Any, Callable, ClassVar, Dict, Iterator, List, Mapping, Optional, Tuple, Union

from . import bitflag
from .core import (UnknownNameError, NotReferenceableError, MissingAlternateTableError,
                   BitWidthOverflowError, UnknownValueError, UnknownTypeError, RegistrySealedError)
from .conversion import SupportsConversion, conversion_for, is_defined, make_value
from .internal import config, max_bitflag_bits
from ._type_helper import non_ptr_type, short_type_name, to_int, to_bool


log = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnumTypeDescriptor:
    """Handle of a registered enum type. It is a key for the registry and owns no values.

    Attributes
    ----------
    name: str
        Short type identifier, ``<last module segment>.<class name>``.
    conversion: SupportsConversion
        The name <-> ordinal capability of the type.
    datatype: type, optional
        The Python class of the enum, when there is one.
    """
    name: str
    conversion: SupportsConversion = field(compare=False)
    datatype: Optional[type] = field(default=None, compare=False)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class EnumProperties:
    """Properties of a registered enum type. The record is read-only, :meth:`EnumRegistry.set_prop`
    replaces it.

    The historical property keys remain usable with :meth:`get`: ``N`` is :attr:`n`,
    ``BitFlag`` is :attr:`bit_flag` (only present when true) and ``AltStrings`` is
    :attr:`alt_strings` (only present when set). All other keys live in :attr:`extra`.
    """
    n: int = 0
    bit_flag: bool = False
    alt_strings: Optional[Mapping[int, str]] = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    typed_keys: ClassVar[Dict[str, str]] = {"N": "n", "BitFlag": "bit_flag", "AltStrings": "alt_strings"}

    def __post_init__(self) -> None:
        if self.alt_strings is not None and not isinstance(self.alt_strings, MappingProxyType):
            object.__setattr__(self, "alt_strings", MappingProxyType(dict(self.alt_strings)))
        if not isinstance(self.extra, MappingProxyType):
            object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    def get(self, key: str, default: Any = None) -> Any:
        if key == "N":
            return self.n
        if key == "BitFlag":
            return True if self.bit_flag else default
        if key == "AltStrings":
            return self.alt_strings if self.alt_strings is not None else default
        return self.extra.get(key, default)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def asdict(self) -> Dict[str, Any]:
        data = dict(self.extra)
        data["N"] = self.n
        if self.bit_flag:
            data["BitFlag"] = True
        if self.alt_strings is not None:
            data["AltStrings"] = dict(self.alt_strings)
        return data


@dataclass(frozen=True)
class EnumValue:
    """One defined value of an enum type, for display purposes."""
    name: str
    value: int
    type: EnumTypeDescriptor

    def __str__(self) -> str:
        return self.name


def _check_alt_strings(name: str, n: int, alts: Any) -> Dict[int, str]:
    if not isinstance(alts, Mapping):
        raise TypeError(f"AltStrings of {name} must be a mapping from int to str, is {type(alts).__name__}.")
    checked = {}
    for ordinal, alt in alts.items():
        if not isinstance(ordinal, int) or not isinstance(alt, str):
            raise TypeError(f"AltStrings of {name} must map int to str, got {ordinal!r}: {alt!r}.")
        if ordinal < 0 or ordinal >= n:
            raise ValueError(f"AltStrings of {name} has ordinal {ordinal} outside [0, {n}).")
        checked[ordinal] = alt
    return checked


class EnumRegistry:
    """Map from short type names to enum types, their properties and their cached values.

    Register each type once, typically at import time of the module that defines it:

    >>> enums.register(MyEnum)
    >>> enums.register_alt_lower(MyFlags, bit_flag=True, prefix="My")

    Registration is serialized by a lock and reads are plain dict lookups. Call :meth:`seal`
    when initialization is done; registering afterwards raises
    :class:`RegistrySealedError<enumkit.core.RegistrySealedError>` in strict mode.
    """

    def __init__(self, strict: Optional[bool] = None) -> None:
        self._enums: Dict[str, EnumTypeDescriptor] = {}
        self._props: Dict[str, EnumProperties] = {}
        self._vals: Dict[Tuple[str, bool], Tuple[EnumValue, ...]] = {}
        self._lock = threading.RLock()
        self._sealed = False
        self._strict = config.strict_seal if strict is None else strict

    # Registration

    def register(self, datatype: Any, bit_flag: bool = False,
                 props: Optional[Mapping[str, Any]] = None) -> EnumTypeDescriptor:
        """Add an enum type to the registry, replacing any type registered under the same name.

        Parameters
        ----------
        datatype:
            An :class:`enum.Enum` class with integer values, or an object supplying the conversion capability.
        bit_flag: bool
            Each ordinal is a bit of a set of flags, strings are ``|`` separated lists of names.
        props: Mapping[str, Any], optional
            Additional properties. They are deep-copied, so one template can serve many registrations.

        Raises
        ------
        BitWidthOverflowError
            A bit flag type defines 64 or more values.
        """
        return self._add(datatype, bit_flag, props, None)

    def register_alt_lower(self, datatype: Any, bit_flag: bool = False,
                           props: Optional[Mapping[str, Any]] = None, prefix: str = "") -> EnumTypeDescriptor:
        """Like :meth:`register`, and set the alternative names to the canonical names with the
        leading ``prefix`` removed and lower-cased, which is what json or xml style formats mostly want."""
        return self._add(datatype, bit_flag, props, prefix)

    def _add(self, datatype: Any, bit_flag: bool, props: Optional[Mapping[str, Any]],
             alt_prefix: Optional[str]) -> EnumTypeDescriptor:
        conversion = conversion_for(datatype)
        name = conversion.typename
        n = conversion.count()

        extra: Dict[str, Any] = {}
        alt_strings = None
        if props:
            extra = deepcopy(dict(props))
            flag, _ = to_bool(extra.pop("BitFlag", False))
            bit_flag = bit_flag or flag
            extra.pop("N", None)
            if "AltStrings" in extra:
                alt_strings = _check_alt_strings(name, n, extra.pop("AltStrings"))

        if bit_flag and n >= max_bitflag_bits:
            raise BitWidthOverflowError(
                f"Enum {name} is a bit flag type with {n} values, at most {max_bitflag_bits - 1} fit."
            )

        if alt_prefix is not None:
            alt_strings = self._lower_names(conversion, n, alt_prefix)
        properties = EnumProperties(n=n, bit_flag=bool(bit_flag), alt_strings=alt_strings, extra=extra)

        datatype = getattr(conversion, "datatype", None) or (datatype if isclass(datatype) else None)
        descriptor = EnumTypeDescriptor(name, conversion, datatype)

        with self._lock:
            self._check_seal(name)
            if name in self._enums:
                log.warning(f"Enum {name} was registered before, replacing its definition.")
            self._enums[name] = descriptor
            self._props[name] = properties
            self._invalidate(name)

        log.debug(f"Registered enum {name} with n: {n}, bit flag: {bit_flag}.")
        return descriptor

    @staticmethod
    def _lower_names(conversion: SupportsConversion, n: int, prefix: str) -> Dict[int, str]:
        alts = {}
        for i in range(n):
            if not is_defined(conversion, i):
                continue
            name = conversion.stringify(i)
            if prefix and name.startswith(prefix):
                name = name[len(prefix):]
            alts[i] = name.lower()
        return alts

    def set_prop(self, handle: Any, key: str, value: Any) -> None:
        """Set a property of a registered type. Meant for initialization, it obeys :meth:`seal`."""
        name = self._name_of(handle)
        with self._lock:
            self._check_seal(name)
            properties = self._props.get(name)
            if properties is None:
                raise UnknownTypeError(f"Enum type {name} is not registered.")
            if key == "N":
                raise ValueError("N is defined by the conversion of the type and cannot be set.")
            elif key == "BitFlag":
                flag, _ = to_bool(value)
                if flag and properties.n >= max_bitflag_bits:
                    raise BitWidthOverflowError(
                        f"Enum {name} has {properties.n} values, at most {max_bitflag_bits - 1} fit."
                    )
                self._props[name] = replace(properties, bit_flag=flag)
            elif key == "AltStrings":
                alts = None if value is None else _check_alt_strings(name, properties.n, value)
                self._props[name] = replace(properties, alt_strings=alts)
                self._invalidate(name)
            else:
                extra = dict(properties.extra)
                extra[key] = deepcopy(value)
                self._props[name] = replace(properties, extra=extra)

    def _check_seal(self, name: str) -> None:
        if not self._sealed:
            return
        if self._strict:
            raise RegistrySealedError(f"Cannot register enum {name}.")
        log.warning(f"Registering enum {name} on a sealed registry.")

    def _invalidate(self, name: str) -> None:
        self._vals.pop((name, False), None)
        self._vals.pop((name, True), None)

    def seal(self) -> None:
        """End of initialization, no further registrations are expected."""
        with self._lock:
            self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    # Queries, none of them modify the registry

    def _name_of(self, handle: Any) -> str:
        if isinstance(handle, str):
            return handle
        if isinstance(handle, EnumTypeDescriptor):
            return handle.name
        if isinstance(handle, EnumValue):
            return handle.type.name
        datatype = non_ptr_type(handle) if isinstance(handle, Enum) else handle
        if isclass(datatype) and issubclass(datatype, Enum):
            conversion = datatype.__dict__.get("__kit_conversion__")
            return conversion.typename if conversion is not None else short_type_name(datatype)
        if isinstance(handle, SupportsConversion):
            return handle.typename
        raise TypeError(f"{handle!r} is not an enum type, enum value or conversion.")

    def lookup(self, name: str) -> Optional[EnumTypeDescriptor]:
        """Find an enum type by its short type name, ``None`` if not registered."""
        return self._enums.get(name)

    def is_registered(self, handle: Any) -> bool:
        return self._name_of(handle) in self._enums

    def properties(self, handle: Any) -> Optional[EnumProperties]:
        return self._props.get(self._name_of(handle))

    def prop(self, handle: Any, key: str, default: Any = None) -> Any:
        properties = self._props.get(self._name_of(handle))
        if properties is None:
            return default
        return properties.get(key, default)

    def alt_strings(self, handle: Any) -> Optional[Mapping[int, str]]:
        properties = self._props.get(self._name_of(handle))
        if properties is None or properties.alt_strings is None:
            return None
        return properties.alt_strings

    def is_bit_flag(self, handle: Any) -> bool:
        properties = self._props.get(self._name_of(handle))
        return properties is not None and properties.bit_flag

    def n_values(self, handle: Any) -> int:
        properties = self._props.get(self._name_of(handle))
        return properties.n if properties is not None else 0

    def all_tagged(self, key: str) -> List[EnumTypeDescriptor]:
        """All registered types that have the property ``key``, whatever its value."""
        return [self._enums[name] for name, properties in list(self._props.items()) if key in properties]

    def names(self) -> List[str]:
        return sorted(self._enums)

    def __contains__(self, handle: Any) -> bool:
        return self.is_registered(handle)

    def __iter__(self) -> Iterator[EnumTypeDescriptor]:
        return iter(list(self._enums.values()))

    def __len__(self) -> int:
        return len(self._enums)

    def __repr__(self) -> str:
        return f"EnumRegistry({len(self)} types{', sealed' if self._sealed else ''})"

    # Conversions

    def _resolve(self, handle: Any) -> Tuple[EnumTypeDescriptor, EnumProperties]:
        name = self._name_of(handle)
        descriptor = self._enums.get(name)
        if descriptor is not None:
            return descriptor, self._props[name]
        if isinstance(handle, (str, EnumTypeDescriptor, EnumValue)):
            raise UnknownTypeError(f"Enum type {name} is not registered.")
        # Unregistered enum classes still convert with their canonical names
        conversion = conversion_for(handle)
        return EnumTypeDescriptor(name, conversion, getattr(conversion, "datatype", None)), \
            EnumProperties(n=conversion.count())

    @staticmethod
    def to_int(value: Any) -> int:
        if isinstance(value, EnumValue):
            return value.value
        ival, ok = to_int(value)
        if not ok:
            raise TypeError(f"Cannot convert {value!r} to an enum integer value.")
        return ival

    def from_int(self, datatype: Any, ival: int) -> Any:
        """Typed value for ``ival``: an enum member for scalar enum classes, the int itself for bit flags."""
        descriptor, properties = self._resolve(datatype)
        if properties.bit_flag:
            return int(ival)
        return make_value(descriptor.conversion, int(ival))

    def _alt_table(self, descriptor: EnumTypeDescriptor, properties: EnumProperties) -> Mapping[int, str]:
        if properties.alt_strings is None:
            raise MissingAlternateTableError(f"No alternative string map for type {descriptor.name}.")
        return properties.alt_strings

    def _alt_stringify(self, descriptor: EnumTypeDescriptor, properties: EnumProperties) -> Callable[[int], str]:
        alts = self._alt_table(descriptor, properties)

        def stringify(ordinal: int) -> str:
            if ordinal not in alts:
                raise UnknownValueError(f"Value {ordinal} has no alternative string for type {descriptor.name}.")
            return alts[ordinal]
        return stringify

    def _alt_parse(self, descriptor: EnumTypeDescriptor, properties: EnumProperties) -> Callable[[str], int]:
        alts = self._alt_table(descriptor, properties)

        def parse(text: str) -> int:
            for ordinal, alt in alts.items():
                if alt == text:
                    return ordinal
            raise UnknownNameError(f"String: {text} not found in alt list of strings for type {descriptor.name}")
        return parse

    def _alt_first_stringify(self, descriptor: EnumTypeDescriptor,
                             properties: EnumProperties) -> Callable[[int], str]:
        alts = properties.alt_strings or {}
        canonical = descriptor.conversion.stringify

        def stringify(ordinal: int) -> str:
            if ordinal in alts:
                return alts[ordinal]
            return canonical(ordinal)
        return stringify

    def _alt_first_parse(self, descriptor: EnumTypeDescriptor, properties: EnumProperties) -> Callable[[str], int]:
        canonical = descriptor.conversion.parse
        if properties.alt_strings is None:
            return canonical
        alt = self._alt_parse(descriptor, properties)

        def parse(text: str) -> int:
            try:
                return alt(text)
            except UnknownNameError:
                return canonical(text)
        return parse

    @staticmethod
    def _named(descriptor: EnumTypeDescriptor, properties: EnumProperties, alt: bool) -> Callable[[int], bool]:
        alts = properties.alt_strings if alt else None

        def named(ordinal: int) -> bool:
            return (alts is not None and ordinal in alts) or is_defined(descriptor.conversion, ordinal)
        return named

    def _format(self, value: Any, datatype: Any, stringify_for: Callable, alt: bool = False) -> str:
        descriptor, properties = self._resolve(value if datatype is None else datatype)
        ival = self.to_int(value)
        stringify = stringify_for(descriptor, properties)
        if properties.bit_flag:
            return bitflag.encode(ival, properties.n, stringify, self._named(descriptor, properties, alt))
        return stringify(ival)

    def _parse(self, datatype: Any, text: str, parse_for: Callable) -> Any:
        descriptor, properties = self._resolve(datatype)
        parse = parse_for(descriptor, properties)
        if properties.bit_flag:
            return bitflag.decode(text, properties.n, parse)
        return make_value(descriptor.conversion, parse(text))

    def to_string(self, value: Any, datatype: Any = None) -> str:
        """Canonical string of ``value``. Bit flag types give the ``|`` separated names of the set bits.
        Pass ``datatype`` when ``value`` is a plain int."""
        return self._format(value, datatype, lambda d, p: d.conversion.stringify)

    def from_string(self, datatype: Any, text: str) -> Any:
        """Parse a canonical string, bit flag types accept ``|`` separated names.

        Raises
        ------
        UnknownNameError
            The string, or for bit flags any of its segments, is not a name of the type.
        """
        return self._parse(datatype, text, lambda d, p: d.conversion.parse)

    def to_alt_string(self, value: Any, datatype: Any = None) -> str:
        return self._format(value, datatype, self._alt_stringify, alt=True)

    def from_alt_string(self, datatype: Any, text: str) -> Any:
        return self._parse(datatype, text, self._alt_parse)

    def to_string_alt_first(self, value: Any, datatype: Any = None) -> str:
        """Alternative string where one exists, canonical string otherwise."""
        return self._format(value, datatype, self._alt_first_stringify, alt=True)

    def from_string_alt_first(self, datatype: Any, text: str) -> Any:
        """Parse alternative names first and fall back to the canonical names."""
        return self._parse(datatype, text, self._alt_first_parse)

    def bitflags_to_string(self, bits: int, datatype: Any) -> str:
        descriptor, properties = self._resolve(datatype)
        return bitflag.encode(self.to_int(bits), properties.n, descriptor.conversion.stringify,
                              self._named(descriptor, properties, False))

    def bitflags_from_string(self, datatype: Any, text: str) -> int:
        descriptor, properties = self._resolve(datatype)
        return bitflag.decode(text, properties.n, descriptor.conversion.parse)

    def bitflags_from_string_alt_first(self, datatype: Any, text: str) -> int:
        descriptor, properties = self._resolve(datatype)
        return bitflag.decode(text, properties.n, self._alt_first_parse(descriptor, properties))

    def from_any_string(self, datatype: Any, text: str) -> Any:
        """Bit flag types decode the names bitwise, alternative names first; other types parse
        alternative names first and then canonical names."""
        if self.is_bit_flag(datatype):
            return self.bitflags_from_string_alt_first(datatype, text)
        return self.from_string_alt_first(datatype, text)

    @staticmethod
    def assign(target: Any, attr: Union[str, Any], value: Any) -> None:
        """Store ``value`` as ``target.attr``, or ``target[attr]`` for mutable mappings."""
        if isinstance(target, MutableMapping):
            target[attr] = value
            return
        if isinstance(target, (Enum, int, float, str, bytes, tuple, frozenset)) or target is None:
            raise NotReferenceableError(f"Cannot assign to {attr} of immutable {type(target).__name__}.")
        try:
            setattr(target, attr, value)
        except (AttributeError, TypeError) as e:
            raise NotReferenceableError(f"Cannot assign to {attr} of {type(target).__name__}: {e}") from e

    def set_any_from_string(self, target: Any, attr: Union[str, Any], text: str, datatype: Any = None) -> Any:
        """Parse ``text`` with :meth:`from_any_string` and assign the result to ``target.attr``.
        Without ``datatype`` the type of the current value is used, which only works for scalar enums."""
        if datatype is None:
            current = target.get(attr) if isinstance(target, Mapping) else getattr(target, attr, None)
            if not isinstance(current, Enum):
                raise TypeError(f"Cannot determine the enum type of {attr}, pass datatype.")
            datatype = type(current)
        value = self.from_any_string(datatype, text)
        self.assign(target, attr, value)
        return value

    # Values

    def values(self, handle: Any, alt: bool = False) -> Tuple[EnumValue, ...]:
        """All values of a type in ordinal order. With ``alt`` the alternative names are used where they exist.
        Ordinals without a name show as ``<TypeName>(<ordinal>)``. Built once per type and naming."""
        name = self._name_of(handle)
        key = (name, bool(alt))
        vals = self._vals.get(key)
        if vals is not None:
            return vals

        with self._lock:
            vals = self._vals.get(key)
            if vals is None:
                descriptor = self._enums.get(name)
                if descriptor is None:
                    raise UnknownTypeError(f"Enum type {name} is not registered.")
                vals = self._build_values(descriptor, self._props[name], bool(alt))
                self._vals[key] = vals
        return vals

    def type_values(self, datatype: Any, alt: bool = False) -> Tuple[EnumValue, ...]:
        return self.values(datatype, alt)

    @staticmethod
    def _build_values(descriptor: EnumTypeDescriptor, properties: EnumProperties,
                      alt: bool) -> Tuple[EnumValue, ...]:
        conversion = descriptor.conversion
        alts = properties.alt_strings if alt else None
        placeholder = descriptor.name.rsplit('.', 1)[-1]
        vals = []
        for i in range(properties.n):
            if alts is not None and i in alts:
                name = alts[i]
            elif is_defined(conversion, i):
                name = conversion.stringify(i)
            else:
                name = f"{placeholder}({i})"
            vals.append(EnumValue(name, i, descriptor))
        return tuple(vals)


enums = EnumRegistry()


__all__ = ["EnumTypeDescriptor", "EnumProperties", "EnumValue", "EnumRegistry", "enums"]
