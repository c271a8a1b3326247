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

Enums are much safer to store as names than as their numerical values, which can
change over time. The text form is the canonical name, or the ``|`` separated names
of the set bits for bit flag types. The JSON form is the text form in double quotes.
"""

import json
from enum import Enum
from typing import Any, Mapping, Optional, Union

from .core import UnknownNameError
from .registry import EnumRegistry, enums


_Data = Union[bytes, bytearray, str]


def _text(data: _Data) -> str:
    if isinstance(data, (bytes, bytearray)):
        try:
            return bytes(data).decode("utf-8")
        except UnicodeDecodeError as e:
            raise UnknownNameError(f"Data is not valid utf-8 text: {e}") from e
    return data


def marshal_text(value: Any, datatype: Any = None, registry: Optional[EnumRegistry] = None) -> bytes:
    registry = enums if registry is None else registry
    return registry.to_string(value, datatype).encode("utf-8")


def unmarshal_text(datatype: Any, data: _Data, registry: Optional[EnumRegistry] = None) -> Any:
    registry = enums if registry is None else registry
    return registry.from_string(datatype, _text(data))


def marshal_json(value: Any, datatype: Any = None, registry: Optional[EnumRegistry] = None) -> bytes:
    return b'"' + marshal_text(value, datatype, registry) + b'"'


def unmarshal_json(datatype: Any, data: _Data, registry: Optional[EnumRegistry] = None) -> Any:
    return unmarshal_text(datatype, _text(data).strip('"'), registry)


def unmarshal_text_into(target: Any, attr: Any, data: _Data, datatype: Any = None,
                        registry: Optional[EnumRegistry] = None) -> Any:
    """Decode ``data`` and store it as ``target.attr``. Without ``datatype`` the type of
    the current value is used."""
    registry = enums if registry is None else registry
    if datatype is None:
        datatype = _current_type(target, attr)
    value = unmarshal_text(datatype, data, registry)
    registry.assign(target, attr, value)
    return value


def unmarshal_json_into(target: Any, attr: Any, data: _Data, datatype: Any = None,
                        registry: Optional[EnumRegistry] = None) -> Any:
    return unmarshal_text_into(target, attr, _text(data).strip('"'), datatype, registry)


def _current_type(target: Any, attr: Any) -> type:
    current = target.get(attr) if isinstance(target, Mapping) else getattr(target, attr, None)
    if not isinstance(current, Enum):
        raise TypeError(f"Cannot determine the enum type of {attr}, pass datatype.")
    return type(current)


class EnumJSONEncoder(json.JSONEncoder):
    """:class:`json.JSONEncoder` that writes enum members as their names.

    Examples
    --------
    >>> json.dumps({"state": MyEnum.A}, cls=EnumJSONEncoder)
    '{"state": "A"}'
    """

    def __init__(self, *args, registry: Optional[EnumRegistry] = None, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.registry = enums if registry is None else registry

    def _names(self, o: Any) -> Any:
        # IntEnum members are ints to json, they never reach default()
        if isinstance(o, Enum):
            return self.registry.to_string(o)
        if isinstance(o, dict):
            return {self._names(k): self._names(v) for k, v in o.items()}
        if isinstance(o, (list, tuple)):
            return [self._names(v) for v in o]
        return o

    def iterencode(self, o: Any, _one_shot: bool = False):
        return super().iterencode(self._names(o), _one_shot)

    def default(self, o: Any) -> Any:
        if isinstance(o, Enum):
            return self.registry.to_string(o)
        return super().default(o)


__all__ = [
    "marshal_text", "unmarshal_text", "marshal_json", "unmarshal_json",
    "unmarshal_text_into", "unmarshal_json_into", "EnumJSONEncoder"
]
