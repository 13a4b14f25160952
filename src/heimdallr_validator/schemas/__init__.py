"""Packet schema table and the validation result contract."""

from .packets import PacketType, PACKET_SCHEMAS, EVENT_SCHEMA, SENSOR_SCHEMA, CONTROL_SCHEMA
from .result import SchemaDiagnostic, ValidationResult

__all__ = [
    "PacketType",
    "PACKET_SCHEMAS",
    "EVENT_SCHEMA",
    "SENSOR_SCHEMA",
    "CONTROL_SCHEMA",
    "SchemaDiagnostic",
    "ValidationResult",
]
