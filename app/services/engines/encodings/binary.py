from app.core.exceptions import InvalidBinaryTokenError, InvalidUtf8OutputError
from app.models.schemas import CipherType
from app.services.engines.base import CipherEngine, Parameters, TransformSuccess
from app.services.engines.registry import EngineRegistry


@EngineRegistry.register
class BinaryEngine(CipherEngine):
    """
    Binary encoding engine.

    Every UTF-8 byte becomes an 8-bit zero-padded group; groups are
    separated by a single space.
    """

    name = "Binary"
    cipher_type = CipherType.BINARY
    description = "Binary representation"

    def encode(self, text: str, params: Parameters) -> TransformSuccess:
        """Encode text as space-separated bytes."""
        return TransformSuccess(
            output=" ".join(format(byte, "08b") for byte in text.encode("utf-8"))
        )

    def decode(self, text: str, params: Parameters) -> TransformSuccess:
        """Decode space-separated binary bytes."""
        data = bytearray()

        for token in text.split(" "):
            if not token:
                continue
            data.append(self._parse_byte(token))

        try:
            return TransformSuccess(output=data.decode("utf-8"))
        except UnicodeDecodeError:
            raise InvalidUtf8OutputError()

    def _parse_byte(self, token: str) -> int:
        """Parse one token as an unsigned 8-bit binary number."""
        if any(char not in "01" for char in token):
            raise InvalidBinaryTokenError(token)

        value = int(token, 2)
        if value > 0xFF:
            raise InvalidBinaryTokenError(token)

        return value
