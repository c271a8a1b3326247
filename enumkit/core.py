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

from typing import Optional


class EnumKitException(Exception):
    """This exception is raised when an enum conversion or a registry operation cannot be completed.
    Print the exception directly or convert it to string for a detailed description.

    Attributes
    ----------
    code: int
        One of the ``ENUMKIT_`` constants that indicates the type of error.
    msg: str
        A human readable description of where the error occurred
    """

    ENUMKIT_OK = 0  # Success
    ENUMKIT_ERROR = -1  # Non specific error
    ENUMKIT_UNKNOWN_NAME = -2  # String matches no known name
    ENUMKIT_NOT_REFERENCEABLE = -3  # Mutation target cannot be assigned
    ENUMKIT_MISSING_ALT_TABLE = -4  # No alternate name table registered
    ENUMKIT_BIT_WIDTH_OVERFLOW = -5  # Bit-flag type does not fit in 64 bits
    ENUMKIT_UNKNOWN_VALUE = -6  # Ordinal has no name
    ENUMKIT_UNKNOWN_TYPE = -7  # Type is not registered
    ENUMKIT_REGISTRY_SEALED = -8  # Registration after the registry was sealed

    error_message_mapping = {
        ENUMKIT_OK: ("ENUMKIT_OK", "Success"),
        ENUMKIT_ERROR: ("ENUMKIT_ERROR", "Non specific error"),
        ENUMKIT_UNKNOWN_NAME: ("ENUMKIT_UNKNOWN_NAME", "String is not a valid option"),
        ENUMKIT_NOT_REFERENCEABLE: (
            "ENUMKIT_NOT_REFERENCEABLE",
            "Target of the assignment cannot be modified",
        ),
        ENUMKIT_MISSING_ALT_TABLE: (
            "ENUMKIT_MISSING_ALT_TABLE",
            "No alternative string map registered for type",
        ),
        ENUMKIT_BIT_WIDTH_OVERFLOW: (
            "ENUMKIT_BIT_WIDTH_OVERFLOW",
            "Bit flag type defines 64 or more bits",
        ),
        ENUMKIT_UNKNOWN_VALUE: ("ENUMKIT_UNKNOWN_VALUE", "Value has no name"),
        ENUMKIT_UNKNOWN_TYPE: ("ENUMKIT_UNKNOWN_TYPE", "Type is not registered"),
        ENUMKIT_REGISTRY_SEALED: (
            "ENUMKIT_REGISTRY_SEALED",
            "Registry was sealed, no further registrations allowed",
        ),
    }

    def __init__(self, code: int, msg: Optional[str] = None, **kwargs) -> None:
        """Initialize an EnumKitException. Code should be one of the ENUMKIT_* constants."""
        self.code = code
        self.msg = msg or ""
        super().__init__(self.msg, **kwargs)

    def __str__(self) -> str:
        if self.code in self.error_message_mapping:
            msg = self.error_message_mapping[self.code]
            return f"[{msg[0]}] {msg[1]}. {self.msg}"
        return f"[EnumKitException] Got an unexpected error code '{self.code}'. {self.msg}"

    def __repr__(self) -> str:
        return str(self)


class UnknownNameError(EnumKitException, ValueError):
    def __init__(self, msg: Optional[str] = None) -> None:
        super().__init__(EnumKitException.ENUMKIT_UNKNOWN_NAME, msg)


class NotReferenceableError(EnumKitException, TypeError):
    def __init__(self, msg: Optional[str] = None) -> None:
        super().__init__(EnumKitException.ENUMKIT_NOT_REFERENCEABLE, msg)


class MissingAlternateTableError(EnumKitException):
    def __init__(self, msg: Optional[str] = None) -> None:
        super().__init__(EnumKitException.ENUMKIT_MISSING_ALT_TABLE, msg)


class BitWidthOverflowError(EnumKitException):
    def __init__(self, msg: Optional[str] = None) -> None:
        super().__init__(EnumKitException.ENUMKIT_BIT_WIDTH_OVERFLOW, msg)


class UnknownValueError(EnumKitException, ValueError):
    def __init__(self, msg: Optional[str] = None) -> None:
        super().__init__(EnumKitException.ENUMKIT_UNKNOWN_VALUE, msg)


class UnknownTypeError(EnumKitException, KeyError):
    def __init__(self, msg: Optional[str] = None) -> None:
        super().__init__(EnumKitException.ENUMKIT_UNKNOWN_TYPE, msg)


class RegistrySealedError(EnumKitException):
    def __init__(self, msg: Optional[str] = None) -> None:
        super().__init__(EnumKitException.ENUMKIT_REGISTRY_SEALED, msg)


__all__ = [
    "EnumKitException", "UnknownNameError", "NotReferenceableError", "MissingAlternateTableError",
    "BitWidthOverflowError", "UnknownValueError", "UnknownTypeError", "RegistrySealedError"
]
