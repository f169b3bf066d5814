from types import MappingProxyType
from collections.abc import Mapping
from typing import ClassVar

from app.core.exceptions import InvalidMorseFormatError, NoEncodableCharactersError
from app.models.schemas import CipherType
from app.services.engines.base import CipherEngine, Parameters, TransformSuccess
from app.services.engines.registry import EngineRegistry


# International Morse code. Space maps to a single space token.
MORSE_CODE: Mapping[str, str] = MappingProxyType({
    "A": "·−", "B": "−···", "C": "−·−·", "D": "−··", "E": "·",
    "F": "··−·", "G": "−−·", "H": "····", "I": "··", "J": "·−−−",
    "K": "−·−", "L": "·−··", "M": "−−", "N": "−·", "O": "−−−",
    "P": "·−−·", "Q": "−−·−", "R": "·−·", "S": "···", "T": "−",
    "U": "··−", "V": "···−", "W": "·−−", "X": "−··−", "Y": "−·−−",
    "Z": "−−··", "0": "−−−−−", "1": "·−−−−", "2": "··−−−",
    "3": "···−−", "4": "····−", "5": "·····", "6": "−····",
    "7": "−−···", "8": "−−−··", "9": "−−−−·", " ": " ",
})

REVERSE_MORSE_CODE: Mapping[str, str] = MappingProxyType(
    {pattern: char for char, pattern in MORSE_CODE.items()}
)


@EngineRegistry.register
class MorseEngine(CipherEngine):
    """
    Morse code engine.

    Letters are separated by one space. A space in the input becomes its own
    space token, so words end up separated by three spaces when encoded;
    decoding splits words on two consecutive spaces.
    """

    name = "Morse Code"
    cipher_type = CipherType.MORSE
    description = "International Morse Code"

    LETTER_SEPARATOR: ClassVar[str] = " "
    WORD_SEPARATOR: ClassVar[str] = "  "

    def encode(self, text: str, params: Parameters) -> TransformSuccess:
        """Encode text, silently dropping characters with no Morse pattern."""
        patterns = [MORSE_CODE[char] for char in text.upper() if char in MORSE_CODE]
        morse = self.LETTER_SEPARATOR.join(patterns)

        if not morse:
            raise NoEncodableCharactersError()

        return TransformSuccess(output=morse)

    def decode(self, text: str, params: Parameters) -> TransformSuccess:
        """Decode Morse, dropping unknown patterns."""
        words = []
        for word in text.split(self.WORD_SEPARATOR):
            tokens = [token for token in word.split(self.LETTER_SEPARATOR) if token]
            words.append(
                "".join(REVERSE_MORSE_CODE[token] for token in tokens if token in REVERSE_MORSE_CODE)
            )

        decoded = " ".join(words)
        if not decoded:
            raise InvalidMorseFormatError()

        return TransformSuccess(output=decoded)
