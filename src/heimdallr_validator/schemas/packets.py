from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping


class PacketType(str, Enum):
    EVENT = "event"
    SENSOR = "sensor"
    CONTROL = "control"


def _timestamped_schema(title: str) -> Dict[str, Any]:
    # event and sensor packets share one shape
    return {
        "title": title,
        "type": "object",
        "properties": {
            "subtype": {"type": "string"},
            "data": {},
            "t": {"type": "string"},
        },
        "required": ["subtype", "data", "t"],
        "additionalProperties": False,
    }


EVENT_SCHEMA = _timestamped_schema("Heimdallr event packet")
SENSOR_SCHEMA = _timestamped_schema("Heimdallr sensor packet")
CONTROL_SCHEMA = {
    "title": "Heimdallr control packet",
    "type": "object",
    "properties": {
        "subtype": {"type": "string"},
        "data": {},
        "provider": {"type": "string"},
        "persistent": {"type": "boolean"},
    },
    "required": ["subtype", "data", "provider"],
    "additionalProperties": False,
}

# Read-only table consulted by PacketValidator. Never mutate the schema dicts
# in place; PacketValidator.schema_for hands out copies.
PACKET_SCHEMAS: Mapping[PacketType, Dict[str, Any]] = MappingProxyType({
    PacketType.EVENT: EVENT_SCHEMA,
    PacketType.SENSOR: SENSOR_SCHEMA,
    PacketType.CONTROL: CONTROL_SCHEMA,
})
