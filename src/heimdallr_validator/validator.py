"""Packet validation: structural JSON-Schema check, then field format checks.

Checks short-circuit in a fixed order (schema -> provider -> timestamp) so a
failing packet always yields exactly one error.
"""
from __future__ import annotations

import copy
from typing import Any, Dict, Mapping, Optional, Tuple

from jsonschema import Draft4Validator
from jsonschema.exceptions import best_match
from jsonschema.validators import validator_for

from heimdallr_validator.config import get_settings
from heimdallr_validator.errors import (
    ErrorKind,
    PROVIDER_FORMAT_MESSAGE,
    TIMESTAMP_FORMAT_MESSAGE,
    UnknownPacketTypeError,
)
from heimdallr_validator.formats import valid_timestamp, valid_uuid
from heimdallr_validator.schemas.packets import PACKET_SCHEMAS, PacketType
from heimdallr_validator.schemas.result import SchemaDiagnostic, ValidationResult
from heimdallr_validator.utils.logger_util import get_logger

logger = get_logger(__name__)


def _json_pointer(parts) -> str:
    return "".join("/" + str(p).replace("~", "~0").replace("/", "~1") for p in parts)


def _type_name(packet_type: Any) -> str:
    return getattr(packet_type, "value", packet_type)


def _structural_check(validator, document: Any) -> Optional[ValidationResult]:
    """Run one jsonschema validator; None means the document conforms."""
    error = best_match(validator.iter_errors(document))
    if error is None:
        return None
    # copies, so the result never holds on to the caller's packet
    diagnostic = SchemaDiagnostic(
        message=error.message,
        path=_json_pointer(error.absolute_path),
        schema_path=_json_pointer(error.absolute_schema_path),
        keyword=error.validator,
        expected=copy.deepcopy(error.validator_value),
        actual=copy.deepcopy(error.instance),
    )
    return ValidationResult.failure(ErrorKind.SCHEMA_VIOLATION, error.message, diagnostic)


class PacketValidator:
    """Validates Heimdallr packets against a fixed schema table.

    The table is injected (defaults to the built-in ``PACKET_SCHEMAS``) and
    copied once; one draft-04 validator is compiled per packet type at
    construction. Nothing is mutated afterwards, so a single instance can be
    shared between threads.
    """

    def __init__(self, schemas: Mapping[Any, Mapping[str, Any]] = PACKET_SCHEMAS, trace_packets: bool | None = None):
        self._schemas: Dict[Any, Dict[str, Any]] = {k: copy.deepcopy(dict(v)) for k, v in schemas.items()}
        self._validators = {k: Draft4Validator(v) for k, v in self._schemas.items()}
        if trace_packets is None:
            trace_packets = get_settings().trace_packets
        self.trace_packets = bool(trace_packets)

    @property
    def packet_types(self) -> Tuple[Any, ...]:
        return tuple(self._schemas)

    def _type_names(self) -> Tuple[str, ...]:
        return tuple(str(_type_name(k)) for k in self._schemas)

    def _lookup(self, packet_type: Any):
        # PacketType is a str enum, so "event" and PacketType.EVENT hit the same entry
        try:
            return self._validators[packet_type]
        except (KeyError, TypeError):
            raise UnknownPacketTypeError(packet_type, self._type_names()) from None

    def schema_for(self, packet_type: PacketType | str) -> Dict[str, Any]:
        """Return a copy of the schema registered for ``packet_type``."""
        self._lookup(packet_type)
        return copy.deepcopy(self._schemas[packet_type])

    def validate_packet(self, packet_type: PacketType | str, packet: Any) -> ValidationResult:
        """Validate ``packet`` as a packet of ``packet_type``.

        Raises UnknownPacketTypeError for a type missing from the table;
        every other failure is returned as a ValidationResult.
        """
        validator = self._lookup(packet_type)
        type_name = _type_name(packet_type)
        if self.trace_packets:
            logger.debug("validate_packet type=%s packet=%r", type_name, packet)

        result = _structural_check(validator, packet)
        if result is None:
            result = self._field_check(packet)
        if result is None:
            result = ValidationResult.success()

        if result.valid:
            logger.debug("packet type=%s valid", type_name)
        else:
            logger.debug("packet type=%s invalid kind=%s: %s", type_name, result.kind.value, result.message)
        return result

    def _field_check(self, packet: Any) -> Optional[ValidationResult]:
        # an injected schema need not require an object
        if not isinstance(packet, Mapping):
            return None
        if "provider" in packet and not valid_uuid(packet["provider"]):
            return ValidationResult.failure(ErrorKind.PROVIDER_FORMAT, PROVIDER_FORMAT_MESSAGE)
        if "t" in packet and not valid_timestamp(packet["t"]):
            return ValidationResult.failure(ErrorKind.TIMESTAMP_FORMAT, TIMESTAMP_FORMAT_MESSAGE)
        return None

    def validate_data(self, data: Any, schema: Mapping[str, Any]) -> ValidationResult:
        """Validate arbitrary ``data`` against a caller-supplied JSON schema.

        Only the structural check runs. The schema's ``$schema`` keyword picks
        the draft; without one draft-04 is used.
        """
        if self.trace_packets:
            logger.debug("validate_data schema=%r data=%r", schema, data)
        cls = validator_for(schema, default=Draft4Validator)
        result = _structural_check(cls(schema), data)
        if result is None:
            return ValidationResult.success()
        logger.debug("data invalid: %s", result.message)
        return result

    def check_packet(self, packet_type: PacketType | str, packet: Any) -> bool:
        """Like validate_packet but raises PacketValidationError on failure."""
        return self.validate_packet(packet_type, packet).raise_for_error()

    def check_data(self, data: Any, schema: Mapping[str, Any]) -> bool:
        return self.validate_data(data, schema).raise_for_error()


default_validator = PacketValidator()


def validate_packet(packet_type: PacketType | str, packet: Any) -> ValidationResult:
    return default_validator.validate_packet(packet_type, packet)


def validate_data(data: Any, schema: Mapping[str, Any]) -> ValidationResult:
    return default_validator.validate_data(data, schema)


def check_packet(packet_type: PacketType | str, packet: Any) -> bool:
    return default_validator.check_packet(packet_type, packet)


def check_data(data: Any, schema: Mapping[str, Any]) -> bool:
    return default_validator.check_data(data, schema)
