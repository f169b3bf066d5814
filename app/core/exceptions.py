from typing import Any

from app.models.schemas import ErrorKind


class CodeCipherError(Exception):
    """Base exception for all CodeCipher errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class CipherError(CodeCipherError):
    """
    Base exception for cipher handler failures.

    Handlers raise these; the dispatcher turns them into a failed
    TransformResult so they never cross the engine boundary.
    """

    kind: ErrorKind
    default_message: str = "Transformation failed"

    def __init__(self, message: str | None = None, details: dict[str, Any] | None = None):
        super().__init__(message or self.default_message, details)


class EmptyInputError(CipherError):
    """Raised when the input text is empty."""

    kind = ErrorKind.EMPTY_INPUT
    default_message = "Input text cannot be empty"


class InvalidBase64Error(CipherError):
    """Raised when Base64 input is malformed."""

    kind = ErrorKind.INVALID_BASE64
    default_message = "Invalid Base64 string"


class InvalidUtf8OutputError(CipherError):
    """Raised when decoded bytes are not valid UTF-8."""

    kind = ErrorKind.INVALID_UTF8_OUTPUT
    default_message = "Could not decode to valid UTF-8 string"


class NoEncodableCharactersError(CipherError):
    """Raised when Morse encoding produces no output."""

    kind = ErrorKind.NO_ENCODABLE_CHARACTERS
    default_message = "Text contains unsupported characters for Morse code"


class InvalidMorseFormatError(CipherError):
    """Raised when Morse decoding produces no output."""

    kind = ErrorKind.INVALID_MORSE_FORMAT
    default_message = "Invalid Morse code format"


class OddLengthHexError(CipherError):
    """Raised when hex input has an odd number of digits."""

    kind = ErrorKind.ODD_LENGTH_HEX
    default_message = "Hex string must have even number of characters"

    def __init__(self, length: int):
        super().__init__(details={"length": length})


class InvalidHexDigitsError(CipherError):
    """Raised when hex input contains non-hex characters."""

    kind = ErrorKind.INVALID_HEX_DIGITS
    default_message = "Invalid hexadecimal characters"


class InvalidBinaryTokenError(CipherError):
    """Raised when a binary token is not an 8-bit binary number."""

    kind = ErrorKind.INVALID_BINARY_TOKEN
    default_message = "Invalid binary format"

    def __init__(self, token: str):
        super().__init__(details={"token": token})


class InvalidKeyLengthError(CipherError):
    """Raised when a substitution key is missing or not 26 characters."""

    kind = ErrorKind.INVALID_KEY_LENGTH
    default_message = "Substitution key must be exactly 26 characters"

    def __init__(self, length: int | None):
        super().__init__(details={"length": length})


class UnsupportedCipherError(CipherError):
    """Raised when no handler is registered for a cipher kind."""

    kind = ErrorKind.UNSUPPORTED_CIPHER
    default_message = "Unsupported cipher type"

    def __init__(self, cipher_type: Any):
        super().__init__(details={"cipher_type": str(cipher_type)})


class InvalidDirectionError(CipherError):
    """Raised when the direction is neither encode nor decode."""

    kind = ErrorKind.INVALID_DIRECTION
    default_message = "Direction must be encode or decode"

    def __init__(self, direction: Any):
        super().__init__(details={"direction": str(direction)})


class OperationNotFoundError(CodeCipherError):
    """Raised when a history record does not exist."""

    def __init__(self, operation_id: int):
        super().__init__(
            f"Operation with ID {operation_id} not found",
            {"operation_id": operation_id},
        )
