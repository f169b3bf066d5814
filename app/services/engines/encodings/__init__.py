"""Byte and signal encodings."""

from app.services.engines.encodings.base64_codec import Base64Engine
from app.services.engines.encodings.binary import BinaryEngine
from app.services.engines.encodings.hexadecimal import HexEngine
from app.services.engines.encodings.morse import MorseEngine

__all__ = [
    "Base64Engine",
    "BinaryEngine",
    "HexEngine",
    "MorseEngine",
]
