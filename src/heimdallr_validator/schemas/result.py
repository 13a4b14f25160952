from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from heimdallr_validator.errors import ErrorKind, PacketValidationError


class SchemaDiagnostic(BaseModel):
    """Where and why a document failed its JSON schema."""

    model_config = ConfigDict(frozen=True)

    message: str
    # JSON pointer into the instance; "" is the document root
    path: str = ""
    schema_path: str = ""
    keyword: Optional[str] = None
    expected: Any = None
    actual: Any = None


class ValidationResult(BaseModel):
    """Outcome of one validation call: success, or exactly one error."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    kind: Optional[ErrorKind] = None
    message: Optional[str] = None
    detail: Optional[SchemaDiagnostic] = None

    @model_validator(mode="after")
    def _one_outcome(self):
        if self.valid and (self.kind is not None or self.message is not None):
            raise ValueError("a successful result carries no error")
        if not self.valid and (self.kind is None or not self.message):
            raise ValueError("a failed result needs an error kind and message")
        return self

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, detail: SchemaDiagnostic | None = None) -> "ValidationResult":
        return cls(valid=False, kind=kind, message=message, detail=detail)

    def __bool__(self) -> bool:
        return self.valid

    def raise_for_error(self) -> bool:
        """Return True when valid, raise PacketValidationError otherwise."""
        if self.valid:
            return True
        raise PacketValidationError(self.kind, self.message, self.detail)
