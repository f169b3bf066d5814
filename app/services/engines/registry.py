from typing import Type

from app.models.schemas import CipherType
from app.services.engines.base import CipherEngine


class EngineRegistry:
    """
    Registry for cipher handlers.

    Holds the handler class for every cipher kind. Instances are created
    per registry object, so nothing is shared between callers.
    """

    _engines: dict[CipherType, Type[CipherEngine]] = {}

    def __init__(self) -> None:
        self._instances: dict[CipherType, CipherEngine] = {}

    @classmethod
    def register(cls, engine_class: Type[CipherEngine]) -> Type[CipherEngine]:
        """
        Register a cipher handler class.

        Can be used as a decorator:
            @EngineRegistry.register
            class CaesarEngine(CipherEngine):
                ...

        Args:
            engine_class: The handler class to register

        Returns:
            The handler class (for decorator usage)
        """
        cls._engines[engine_class.cipher_type] = engine_class
        return engine_class

    def get_engine(self, cipher_type: CipherType) -> CipherEngine | None:
        """
        Get a handler instance for the specified cipher kind.

        Args:
            cipher_type: The kind of cipher

        Returns:
            Handler instance or None if not found
        """
        if cipher_type not in self._engines:
            return None

        # Lazy instantiation, cached on this registry only
        if cipher_type not in self._instances:
            self._instances[cipher_type] = self._engines[cipher_type]()

        return self._instances[cipher_type]

    def get_all_engines(self) -> list[CipherEngine]:
        """
        Get all registered handlers, in CipherType declaration order.

        Returns:
            List of handler instances
        """
        return [
            self.get_engine(cipher_type)
            for cipher_type in CipherType
            if cipher_type in self._engines
        ]

    @classmethod
    def list_registered(cls) -> list[CipherType]:
        """
        List all registered cipher kinds.

        Returns:
            List of registered cipher kinds
        """
        return list(cls._engines.keys())


# Import engines to trigger registration
def _load_engines() -> None:
    """Load all handler modules to trigger registration."""
    from app.services.engines import encodings, monoalphabetic  # noqa: F401


# Load engines when module is imported
_load_engines()
