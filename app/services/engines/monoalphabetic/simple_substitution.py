import string
from typing import ClassVar

from app.core.exceptions import InvalidKeyLengthError
from app.models.schemas import CipherType
from app.services.engines.base import (
    CipherEngine,
    Parameters,
    SubstitutionParameters,
    TransformSuccess,
)
from app.services.engines.registry import EngineRegistry


@EngineRegistry.register
class SimpleSubstitutionEngine(CipherEngine):
    """
    Simple Substitution cipher engine.

    Each letter is replaced with the letter at the same position of a
    26-character key. The key is not checked for being a permutation:
    duplicate key letters give a many-to-one encoding, and decoding keeps
    the last alphabet letter written for a repeated key letter.
    """

    name = "Substitution"
    cipher_type = CipherType.SUBSTITUTION
    description = "Custom character mapping"
    parameter_names = ("key",)

    ALPHABET: ClassVar[str] = string.ascii_uppercase

    def encode(self, text: str, params: Parameters) -> TransformSuccess:
        """Encode using the substitution key."""
        key = self._parse_key(params)
        mapping = dict(zip(self.ALPHABET, key))
        return TransformSuccess(output=self._substitute(text, mapping))

    def decode(self, text: str, params: Parameters) -> TransformSuccess:
        """Decode using the inverse of the substitution key."""
        key = self._parse_key(params)
        inverse = dict(zip(key, self.ALPHABET))
        return TransformSuccess(output=self._substitute(text, inverse))

    def _parse_key(self, params: Parameters) -> str:
        """Return the uppercased key, or raise if it is not 26 characters."""
        key = params.key if isinstance(params, SubstitutionParameters) else None

        if key is None or len(key) != 26:
            raise InvalidKeyLengthError(None if key is None else len(key))

        return key.upper()

    def _substitute(self, text: str, mapping: dict[str, str]) -> str:
        """Map letters by their uppercase form, keeping the original case."""
        result = []

        for char in text:
            if char.isalpha():
                mapped = mapping.get(char.upper()[0], char)
                result.append(mapped if char.isupper() else mapped.lower()[0])
            else:
                result.append(char)

        return "".join(result)
