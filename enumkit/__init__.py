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

from enum import IntEnum
from typing import Any, Dict, Optional, Type, TypeVar, Union

from . import internal, core, bitflag, conversion, registry, marshal
from ._main import KitEnumMeta
from .registry import EnumRegistry, EnumValue, EnumTypeDescriptor, EnumProperties, enums


_TKE = TypeVar('_TKE', bound='KitEnum')


class KitEnum(IntEnum, metaclass=KitEnumMeta):
    """Integer enum with a short type name and a canonical string form.

    ``str()`` of a member is its name. The class keyword ``typename`` overrides the
    short type name and ``sentinel`` names the member that holds the number of values:

    >>> class Flags(KitEnum, sentinel="FlagsN"):
    ...     IsField = 0
    ...     HasChildren = 1
    ...     FlagsN = 2
    """

    def _generate_next_value_(name, start, count, last_values):
        return last_values[-1] + 1 if last_values else count

    def __str__(self) -> str:
        return self.name

    def __format__(self, format_spec: str) -> str:
        return str.__format__(str(self), format_spec)

    def marshal_text(self, registry: Optional[EnumRegistry] = None) -> bytes:
        return marshal.marshal_text(self, registry=registry)

    def marshal_json(self, registry: Optional[EnumRegistry] = None) -> bytes:
        return marshal.marshal_json(self, registry=registry)

    @classmethod
    def unmarshal_text(cls: Type[_TKE], data: Union[bytes, str], registry: Optional[EnumRegistry] = None) -> Any:
        return marshal.unmarshal_text(cls, data, registry=registry)

    @classmethod
    def unmarshal_json(cls: Type[_TKE], data: Union[bytes, str], registry: Optional[EnumRegistry] = None) -> Any:
        return marshal.unmarshal_json(cls, data, registry=registry)


def make_kit_enum(class_name: str, fields: Dict[str, int], *, typename: Optional[str] = None,
                  sentinel: Optional[str] = None, module: Optional[str] = None) -> Type[KitEnum]:
    kwds = {}
    if typename:
        kwds["typename"] = typename
    if sentinel:
        kwds["sentinel"] = sentinel

    namespace = KitEnumMeta.__prepare__(class_name, (KitEnum,), **kwds)
    namespace["__module__"] = module or __name__
    namespace["__qualname__"] = class_name

    for fieldname, value in fields.items():
        namespace[fieldname] = value

    return KitEnumMeta(class_name, (KitEnum,), namespace)


__all__ = [
    "internal", "core", "bitflag", "conversion", "registry", "marshal",
    "KitEnum", "make_kit_enum", "EnumRegistry", "EnumValue", "EnumTypeDescriptor", "EnumProperties", "enums"
]
