from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar

from app.models.schemas import CipherType, Direction, ErrorKind


# ============================================================================
# Parameters
# ============================================================================


DEFAULT_CAESAR_SHIFT = 3


@dataclass(frozen=True)
class CaesarParameters:
    """Shift amount for the Caesar handler."""

    shift: int = DEFAULT_CAESAR_SHIFT


@dataclass(frozen=True)
class SubstitutionParameters:
    """Cipher alphabet for the substitution handler."""

    key: str | None = None


Parameters = CaesarParameters | SubstitutionParameters | None


def _parse_shift(value: Any) -> int:
    """Parse a raw shift value, falling back to the default when malformed."""
    if isinstance(value, bool):
        return DEFAULT_CAESAR_SHIFT
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return DEFAULT_CAESAR_SHIFT
    return DEFAULT_CAESAR_SHIFT


def parameters_from_mapping(
    cipher_type: CipherType,
    mapping: Mapping[str, Any] | None,
) -> Parameters:
    """
    Convert a loose parameter mapping into the variant for a cipher kind.

    Args:
        cipher_type: Kind the parameters are meant for
        mapping: Raw values such as {"shift": 3} or {"key": "..."}; anything
            that is not a mapping counts as no parameters

    Returns:
        The typed parameters, or None for kinds that take none
    """
    if not isinstance(mapping, Mapping):
        mapping = {}

    if cipher_type == CipherType.CAESAR:
        return CaesarParameters(shift=_parse_shift(mapping.get("shift", DEFAULT_CAESAR_SHIFT)))

    if cipher_type == CipherType.SUBSTITUTION:
        key = mapping.get("key")
        return SubstitutionParameters(key=key if isinstance(key, str) else None)

    return None


# ============================================================================
# Results
# ============================================================================


@dataclass(frozen=True)
class TransformSuccess:
    """Successful transform output."""

    output: str
    metadata: dict[str, str] = field(default_factory=dict)

    ok: ClassVar[bool] = True


@dataclass(frozen=True)
class TransformFailure:
    """Failed transform with a user-facing reason."""

    kind: ErrorKind
    reason: str

    ok: ClassVar[bool] = False

    @property
    def metadata(self) -> dict[str, str]:
        return {}


TransformResult = TransformSuccess | TransformFailure


# ============================================================================
# Engine contract
# ============================================================================


class CipherEngine(ABC):
    """
    Abstract base class for all cipher handlers.

    Each handler must provide:
    - encode(): Transform plaintext
    - decode(): Reverse the transform

    Handlers are stateless. Failures are raised as CipherError subclasses
    and converted to TransformFailure by the dispatcher.
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    description: str
    parameter_names: ClassVar[tuple[str, ...]] = ()

    @abstractmethod
    def encode(self, text: str, params: Parameters) -> TransformSuccess:
        """
        Encode text.

        Args:
            text: Non-empty input text
            params: Parameters for this handler, if any

        Returns:
            TransformSuccess with output and metadata
        """
        pass

    @abstractmethod
    def decode(self, text: str, params: Parameters) -> TransformSuccess:
        """
        Decode text.

        Args:
            text: Non-empty input text
            params: Parameters for this handler, if any

        Returns:
            TransformSuccess with output and metadata
        """
        pass

    def process(self, text: str, direction: Direction, params: Parameters) -> TransformSuccess:
        """Route to encode() or decode()."""
        if direction == Direction.ENCODE:
            return self.encode(text, params)
        return self.decode(text, params)
