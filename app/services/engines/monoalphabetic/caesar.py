import string
from typing import ClassVar

from app.models.schemas import CipherType
from app.services.engines.base import (
    DEFAULT_CAESAR_SHIFT,
    CaesarParameters,
    CipherEngine,
    Parameters,
    TransformSuccess,
)
from app.services.engines.registry import EngineRegistry


@EngineRegistry.register
class CaesarEngine(CipherEngine):
    """
    Caesar cipher engine.

    The Caesar cipher is a simple substitution cipher that shifts each letter
    by a fixed amount. Case is preserved and anything that is not an ASCII
    letter passes through unchanged.
    """

    name = "Caesar Cipher"
    cipher_type = CipherType.CAESAR
    description = "Classic shift cipher"
    parameter_names = ("shift",)

    UPPER: ClassVar[str] = string.ascii_uppercase
    LOWER: ClassVar[str] = string.ascii_lowercase

    def encode(self, text: str, params: Parameters) -> TransformSuccess:
        """Shift letters forward."""
        shift = self._parse_shift(params)
        return TransformSuccess(
            output=self.shift_text(text, shift),
            metadata={"shift": str(shift), "direction": "encode"},
        )

    def decode(self, text: str, params: Parameters) -> TransformSuccess:
        """Shift letters back."""
        shift = self._parse_shift(params)
        return TransformSuccess(
            output=self.shift_text(text, -shift),
            metadata={"shift": str(shift), "direction": "decode"},
        )

    def shift_text(self, text: str, shift: int) -> str:
        """Rotate every ASCII letter by shift positions within its case."""
        offset = shift % 26
        result = []

        for char in text:
            if char in self.UPPER:
                idx = self.UPPER.index(char)
                result.append(self.UPPER[(idx + offset) % 26])
            elif char in self.LOWER:
                idx = self.LOWER.index(char)
                result.append(self.LOWER[(idx + offset) % 26])
            else:
                result.append(char)

        return "".join(result)

    def _parse_shift(self, params: Parameters) -> int:
        """Take the shift from Caesar parameters, defaulting to 3."""
        if isinstance(params, CaesarParameters):
            return params.shift
        return DEFAULT_CAESAR_SHIFT
