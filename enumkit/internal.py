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

import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional


class EnumKitConfigException(Exception):
    pass


# Bit positions available in a bit flag value, the wire representation is a signed 64 bit integer
max_bitflag_bits = 64

bitflag_separator = "|"

_truthy = ("1", "true", "yes", "on")
_falsy = ("0", "false", "no", "off")


def _env_bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    if name not in environ:
        return default
    value = environ[name].strip().lower()
    if value in _truthy:
        return True
    if value in _falsy:
        return False
    raise EnumKitConfigException(f"Environment variable {name} must be a boolean, got '{environ[name]}'")


def _env_log_level(environ: Mapping[str, str], name: str) -> Optional[int]:
    if name not in environ:
        return None
    value = environ[name].strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise EnumKitConfigException(f"Environment variable {name} is not a log level: '{value}'")
    return level


@dataclass(frozen=True)
class EnumKitConfig:
    """
    Process wide settings, read from the environment when enumkit is imported.

    Attributes
    ----------
    strict_seal: bool
        Registering on a sealed registry raises instead of logging a warning.
        Set with ``ENUMKIT_STRICT_SEAL``, defaults to ``__debug__``.
    log_level: int, optional
        Level applied to the ``enumkit`` logger, set with ``ENUMKIT_LOG_LEVEL``.
    """
    strict_seal: bool = __debug__
    log_level: Optional[int] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'EnumKitConfig':
        environ = os.environ if environ is None else environ
        return cls(
            strict_seal=_env_bool(environ, "ENUMKIT_STRICT_SEAL", __debug__),
            log_level=_env_log_level(environ, "ENUMKIT_LOG_LEVEL")
        )

    def apply_logging(self) -> None:
        if self.log_level is not None:
            logging.getLogger("enumkit").setLevel(self.log_level)


config = EnumKitConfig.from_env()
config.apply_logging()


__all__ = ["EnumKitConfig", "EnumKitConfigException", "config", "max_bitflag_bits", "bitflag_separator"]
