from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    SCHEMA_VIOLATION = "schema_violation"
    PROVIDER_FORMAT = "provider_format"
    TIMESTAMP_FORMAT = "timestamp_format"


PROVIDER_FORMAT_MESSAGE = "`provider` must be a valid UUID"
TIMESTAMP_FORMAT_MESSAGE = "`t` must be an ISO 8601 timestamp"


class HeimdallrValidatorError(Exception):
    """Base class for every error raised by this package."""


class PacketValidationError(HeimdallrValidatorError, ValueError):
    """A packet or document failed validation.

    Raised only by the raise-style helpers (``check_packet``, ``check_data``
    and ``ValidationResult.raise_for_error``); ``validate_*`` return the
    failure instead.
    """

    def __init__(self, kind: ErrorKind | str, message: str, detail: Optional[Any] = None):
        super().__init__(message)
        self.kind = ErrorKind(kind)
        self.message = message
        self.detail = detail

    def __repr__(self) -> str:
        return f"PacketValidationError(kind={self.kind.value!r}, message={self.message!r})"


class PacketConfigurationError(HeimdallrValidatorError):
    """The validator was used or configured incorrectly."""


class UnknownPacketTypeError(PacketConfigurationError, LookupError):
    def __init__(self, packet_type: Any, known: tuple = ()):
        self.packet_type = packet_type
        msg = f"unknown packet type {packet_type!r}"
        if known:
            msg += f" (expected one of: {', '.join(known)})"
        super().__init__(msg)
