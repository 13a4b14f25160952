import pytest
from pydantic import ValidationError

from heimdallr_validator import (
    ErrorKind,
    PACKET_SCHEMAS,
    PacketType,
    PacketValidator,
    UnknownPacketTypeError,
    ValidationResult,
    default_validator,
)


def test_schema_table_covers_every_packet_type():
    assert set(PACKET_SCHEMAS) == set(PacketType)
    assert default_validator.packet_types == (PacketType.EVENT, PacketType.SENSOR, PacketType.CONTROL)


def test_schema_table_is_read_only():
    with pytest.raises(TypeError):
        PACKET_SCHEMAS[PacketType.EVENT] = {}
    with pytest.raises(TypeError):
        PACKET_SCHEMAS["telemetry"] = {}


def test_schema_for_returns_copy():
    schema = default_validator.schema_for("control")
    assert schema["required"] == ["subtype", "data", "provider"]
    schema["required"].clear()
    schema["additionalProperties"] = True
    assert default_validator.schema_for(PacketType.CONTROL)["required"] == ["subtype", "data", "provider"]
    assert default_validator.validate_packet("control", {}).kind == ErrorKind.SCHEMA_VIOLATION


def test_schema_for_unknown_type():
    with pytest.raises(UnknownPacketTypeError):
        default_validator.schema_for("telemetry")


def test_validator_copies_injected_schemas():
    schemas = {"note": {"type": "object", "required": ["text"]}}
    validator = PacketValidator(schemas)
    schemas["note"]["required"] = []
    assert not validator.validate_packet("note", {}).valid
    assert validator.packet_types == ("note",)


def test_event_and_sensor_share_shape():
    event = default_validator.schema_for("event")
    sensor = default_validator.schema_for("sensor")
    assert event["title"] == "Heimdallr event packet"
    assert sensor["title"] == "Heimdallr sensor packet"
    event.pop("title")
    sensor.pop("title")
    assert event == sensor


def test_result_contract():
    ok = ValidationResult.success()
    assert ok.valid and ok.raise_for_error() is True

    bad = ValidationResult.failure(ErrorKind.PROVIDER_FORMAT, "`provider` must be a valid UUID")
    assert not bad

    with pytest.raises(ValidationError):
        ValidationResult(valid=False)
    with pytest.raises(ValidationError):
        ValidationResult(valid=True, kind=ErrorKind.SCHEMA_VIOLATION, message="x")


def test_result_is_frozen():
    ok = ValidationResult.success()
    with pytest.raises(ValidationError):
        ok.valid = False
