import string

from app.core.exceptions import InvalidHexDigitsError, InvalidUtf8OutputError, OddLengthHexError
from app.models.schemas import CipherType
from app.services.engines.base import CipherEngine, Parameters, TransformSuccess
from app.services.engines.registry import EngineRegistry


@EngineRegistry.register
class HexEngine(CipherEngine):
    """Hexadecimal encoding of the UTF-8 bytes of the text."""

    name = "Hexadecimal"
    cipher_type = CipherType.HEX
    description = "Hexadecimal encoding"

    def encode(self, text: str, params: Parameters) -> TransformSuccess:
        """Encode as uppercase hex pairs with no separator."""
        return TransformSuccess(output=text.encode("utf-8").hex().upper())

    def decode(self, text: str, params: Parameters) -> TransformSuccess:
        """Decode hex pairs; spaces between digits are ignored."""
        clean_hex = text.replace(" ", "")

        if len(clean_hex) % 2 != 0:
            raise OddLengthHexError(len(clean_hex))

        if any(char not in string.hexdigits for char in clean_hex):
            raise InvalidHexDigitsError()

        data = bytes(int(clean_hex[i:i + 2], 16) for i in range(0, len(clean_hex), 2))

        try:
            return TransformSuccess(output=data.decode("utf-8"))
        except UnicodeDecodeError:
            raise InvalidUtf8OutputError()
