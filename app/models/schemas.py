from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Enums
# ============================================================================


class CipherType(str, Enum):
    """Supported cipher and codec kinds."""

    CAESAR = "caesar"
    BASE64 = "base64"
    MORSE = "morse"
    HEX = "hex"
    BINARY = "binary"
    ROT13 = "rot13"
    SUBSTITUTION = "substitution"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES: dict[CipherType, str] = {
    CipherType.CAESAR: "Caesar Cipher",
    CipherType.BASE64: "Base64",
    CipherType.MORSE: "Morse Code",
    CipherType.HEX: "Hexadecimal",
    CipherType.BINARY: "Binary",
    CipherType.ROT13: "ROT13",
    CipherType.SUBSTITUTION: "Substitution",
}


class Direction(str, Enum):
    """Transform direction."""

    ENCODE = "encode"
    DECODE = "decode"


class ErrorKind(str, Enum):
    """Failure taxonomy reported by the cipher engine."""

    EMPTY_INPUT = "empty_input"
    INVALID_BASE64 = "invalid_base64"
    INVALID_UTF8_OUTPUT = "invalid_utf8_output"
    NO_ENCODABLE_CHARACTERS = "no_encodable_characters"
    INVALID_MORSE_FORMAT = "invalid_morse_format"
    ODD_LENGTH_HEX = "odd_length_hex"
    INVALID_HEX_DIGITS = "invalid_hex_digits"
    INVALID_BINARY_TOKEN = "invalid_binary_token"
    INVALID_KEY_LENGTH = "invalid_key_length"
    UNSUPPORTED_CIPHER = "unsupported_cipher"
    INVALID_DIRECTION = "invalid_direction"


class ExportFormat(str, Enum):
    """Export formats for an operation record."""

    PLAIN_TEXT = "plain_text"
    JSON = "json"

    @property
    def file_extension(self) -> str:
        return "txt" if self is ExportFormat.PLAIN_TEXT else "json"


# ============================================================================
# Request Schemas
# ============================================================================


class CodecRequest(BaseModel):
    """Request schema for /encode and /decode endpoints."""

    text: str
    cipher_type: CipherType
    parameters: dict[str, Any] = Field(default_factory=dict)
    record: bool = True


class TransformRequest(CodecRequest):
    """Request schema for /transform endpoint."""

    direction: Direction


# ============================================================================
# Response Schemas
# ============================================================================


class TransformResponse(BaseModel):
    """Response schema for a successful transform."""

    output: str
    cipher_type: CipherType
    direction: Direction
    metadata: dict[str, str] = Field(default_factory=dict)
    operation_id: int | None = None


class CipherInfo(BaseModel):
    """A supported cipher kind and the parameters it consumes."""

    cipher_type: CipherType
    name: str
    description: str
    parameters: list[str] = []


class ReferenceEntryResponse(BaseModel):
    """Static reference entry."""

    model_config = ConfigDict(from_attributes=True)

    title: str
    category: str
    description: str
    content: str
    cipher_type: CipherType | None = None


class OperationRecord(BaseModel):
    """Single history item."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    cipher_type: CipherType
    direction: Direction
    input_text: str
    output_text: str
    parameters: dict[str, Any] = Field(default_factory=dict)
    details: dict[str, str] = Field(default_factory=dict)
    created_at: datetime


class HistoryResponse(BaseModel):
    """Response schema for /history endpoint."""

    items: list[OperationRecord]
    total: int
    page: int
    page_size: int


class ClearHistoryResponse(BaseModel):
    """Response schema for DELETE /history."""

    deleted: int


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
