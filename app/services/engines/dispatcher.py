"""
Cipher dispatcher - the single entry point into the cipher engine.

Routes transform(text, kind, direction, parameters) to the registered
handler and turns every handler failure into a TransformFailure, so no
exception crosses the engine boundary.
"""

from collections.abc import Mapping
from typing import Any

from app.core.exceptions import (
    CipherError,
    EmptyInputError,
    InvalidDirectionError,
    UnsupportedCipherError,
)
from app.core.logging_config import get_logger
from app.models.schemas import CipherType, Direction
from app.services.engines.base import (
    CaesarParameters,
    Parameters,
    SubstitutionParameters,
    TransformFailure,
    TransformResult,
    parameters_from_mapping,
)
from app.services.engines.registry import EngineRegistry

logger = get_logger("engines.dispatcher")


class CipherDispatcher:
    """
    Stateless cipher engine service.

    Instances are cheap and independent; create one wherever it is needed
    instead of sharing a global.
    """

    def __init__(self, registry: EngineRegistry | None = None):
        self.registry = registry or EngineRegistry()

    def transform(
        self,
        text: str,
        cipher_type: CipherType,
        direction: Direction,
        params: Parameters | Mapping[str, Any] = None,
    ) -> TransformResult:
        """
        Encode or decode text with the given cipher kind.

        Args:
            text: Input text; empty text fails with EmptyInput
            cipher_type: Which handler to use
            direction: Encode or decode
            params: Typed parameters, or a raw mapping such as {"shift": 3}

        Returns:
            TransformSuccess or TransformFailure
        """
        try:
            if text == "":
                raise EmptyInputError()

            try:
                cipher_type = CipherType(cipher_type)
            except (TypeError, ValueError):
                raise UnsupportedCipherError(cipher_type) from None
            try:
                direction = Direction(direction)
            except (TypeError, ValueError):
                raise InvalidDirectionError(direction) from None

            engine = self.registry.get_engine(cipher_type)
            if engine is None:
                raise UnsupportedCipherError(cipher_type.value)

            if params is not None and not isinstance(params, (CaesarParameters, SubstitutionParameters)):
                params = parameters_from_mapping(cipher_type, params)

            logger.debug(
                "Dispatching %s %s (%d characters)",
                cipher_type.value,
                direction.value,
                len(text),
            )
            return engine.process(text, direction, params)

        except CipherError as e:
            logger.info("Transform failed: %s (%s)", e.kind.value, e.details)
            return TransformFailure(kind=e.kind, reason=e.message)

    def encode(
        self,
        text: str,
        cipher_type: CipherType,
        params: Parameters | Mapping[str, Any] = None,
    ) -> TransformResult:
        """Shortcut for transform(..., Direction.ENCODE, ...)."""
        return self.transform(text, cipher_type, Direction.ENCODE, params)

    def decode(
        self,
        text: str,
        cipher_type: CipherType,
        params: Parameters | Mapping[str, Any] = None,
    ) -> TransformResult:
        """Shortcut for transform(..., Direction.DECODE, ...)."""
        return self.transform(text, cipher_type, Direction.DECODE, params)
