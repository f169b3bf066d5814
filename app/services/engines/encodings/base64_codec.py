import base64
import binascii

from app.core.exceptions import InvalidBase64Error, InvalidUtf8OutputError
from app.models.schemas import CipherType
from app.services.engines.base import CipherEngine, Parameters, TransformSuccess
from app.services.engines.registry import EngineRegistry


@EngineRegistry.register
class Base64Engine(CipherEngine):
    """
    Base64 encoding engine.

    Encodes the UTF-8 bytes of the text with the standard alphabet
    (A-Z, a-z, 0-9, +, /) and '=' padding. Decoding is strict: characters
    outside the alphabet or bad padding are rejected.
    """

    name = "Base64"
    cipher_type = CipherType.BASE64
    description = "Text to Base64 encoding"

    def encode(self, text: str, params: Parameters) -> TransformSuccess:
        """Encode text as Base64."""
        encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
        return TransformSuccess(
            output=encoded,
            metadata={"size_increase": f"{len(encoded) - len(text)} characters"},
        )

    def decode(self, text: str, params: Parameters) -> TransformSuccess:
        """Decode Base64 back to text."""
        try:
            data = base64.b64decode(text, validate=True)
        except (binascii.Error, ValueError):
            raise InvalidBase64Error()

        try:
            return TransformSuccess(output=data.decode("utf-8"))
        except UnicodeDecodeError:
            raise InvalidUtf8OutputError()
