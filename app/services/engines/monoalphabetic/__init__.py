"""Monoalphabetic cipher engines."""

from app.services.engines.monoalphabetic.caesar import CaesarEngine
from app.services.engines.monoalphabetic.rot13 import ROT13Engine
from app.services.engines.monoalphabetic.simple_substitution import SimpleSubstitutionEngine

__all__ = [
    "CaesarEngine",
    "ROT13Engine",
    "SimpleSubstitutionEngine",
]
