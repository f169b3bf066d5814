from typing import ClassVar

from app.models.schemas import CipherType
from app.services.engines.base import CaesarParameters, CipherEngine, Parameters, TransformSuccess
from app.services.engines.monoalphabetic.caesar import CaesarEngine
from app.services.engines.registry import EngineRegistry


@EngineRegistry.register
class ROT13Engine(CipherEngine):
    """
    ROT13 cipher engine.

    ROT13 is a special case of the Caesar cipher with a fixed shift of 13.
    Since 13 is exactly half of 26, applying ROT13 twice returns the original text,
    making encoding and decoding identical operations.
    """

    name = "ROT13"
    cipher_type = CipherType.ROT13
    description = "13-position shift cipher"

    SHIFT: ClassVar[int] = 13

    def __init__(self) -> None:
        self._caesar = CaesarEngine()

    def encode(self, text: str, params: Parameters) -> TransformSuccess:
        """Apply ROT13."""
        return self._caesar.encode(text, CaesarParameters(shift=self.SHIFT))

    def decode(self, text: str, params: Parameters) -> TransformSuccess:
        """Same as encode for ROT13."""
        return self._caesar.encode(text, CaesarParameters(shift=self.SHIFT))
