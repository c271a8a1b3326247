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

from enum import EnumMeta
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple

from .conversion import EnumClassConversion
from ._type_helper import short_type_name


class KitEnumMeta(EnumMeta):
    __kit_typename__: ClassVar[str]
    __kit_sentinel__: ClassVar[Optional[str]]
    __kit_count__: ClassVar[int]
    __kit_conversion__: ClassVar[EnumClassConversion]

    @classmethod
    def __prepare__(metacls, __name: str, __bases: Tuple[type, ...], **kwds: Any) -> Mapping[str, Any]:
        typename = None
        if "typename" in kwds:
            typename = kwds["typename"]
            del kwds["typename"]

        sentinel = None
        if "sentinel" in kwds:
            sentinel = kwds["sentinel"]
            del kwds["sentinel"]

        namespace: Dict[str, Any] = super().__prepare__(__name, __bases, **kwds)

        if typename:
            namespace["__kit_typename__"] = typename

        namespace["__kit_sentinel__"] = sentinel

        return namespace

    def __new__(metacls, name, bases, namespace, **kwds):
        new_cls = super().__new__(metacls, name, bases, namespace)

        if "__kit_typename__" not in namespace:
            new_cls.__kit_typename__ = short_type_name(new_cls)
        else:
            new_cls.__kit_typename__ = namespace["__kit_typename__"]

        count = None
        sentinel = namespace.get("__kit_sentinel__")
        if sentinel:
            if sentinel not in new_cls.__members__:
                raise TypeError(f"Sentinel {sentinel} is not a member of {name}.")
            count = int(new_cls.__members__[sentinel].value)

        new_cls.__kit_conversion__ = EnumClassConversion(new_cls, count=count, typename=new_cls.__kit_typename__)
        new_cls.__kit_count__ = new_cls.__kit_conversion__.count()

        return new_cls

    def __repr__(cls):
        # Note, this is the _class_ repr
        if cls.__name__ == "KitEnum":
            return "KitEnum"
        return f"{cls.__name__}(KitEnum, typename='{cls.__kit_typename__}')"
