"""Validator for Heimdallr telemetry packets.

Checks event, sensor and control packets against their JSON schemas and
verifies the ``provider`` UUID and ``t`` timestamp formats.
"""

from .errors import (
    ErrorKind,
    HeimdallrValidatorError,
    PacketConfigurationError,
    PacketValidationError,
    UnknownPacketTypeError,
)
from .formats import valid_timestamp, valid_uuid
from .schemas import PACKET_SCHEMAS, PacketType, SchemaDiagnostic, ValidationResult
from .validator import (
    PacketValidator,
    check_data,
    check_packet,
    default_validator,
    validate_data,
    validate_packet,
)

__version__ = "1.0.0"

__all__ = [
    "ErrorKind",
    "HeimdallrValidatorError",
    "PacketConfigurationError",
    "PacketValidationError",
    "UnknownPacketTypeError",
    "valid_timestamp",
    "valid_uuid",
    "PACKET_SCHEMAS",
    "PacketType",
    "SchemaDiagnostic",
    "ValidationResult",
    "PacketValidator",
    "check_data",
    "check_packet",
    "default_validator",
    "validate_data",
    "validate_packet",
]
