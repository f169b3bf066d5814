"""Tests for Caesar and ROT13 cipher engines."""

import string

import pytest

from app.models.schemas import CipherType, Direction
from app.services.engines.base import CaesarParameters, SubstitutionParameters
from app.services.engines.monoalphabetic.caesar import CaesarEngine
from app.services.engines.monoalphabetic.rot13 import ROT13Engine


class TestCaesarEngine:
    """Test suite for Caesar cipher engine."""

    @pytest.fixture
    def engine(self):
        return CaesarEngine()

    @pytest.fixture
    def sample_plaintext(self):
        return "HelloWorld"

    def test_encode_decode_roundtrip(self, engine, sample_plaintext):
        """Test that encode followed by decode returns original."""
        for shift in range(1, 26):
            params = CaesarParameters(shift=shift)
            encoded = engine.encode(sample_plaintext, params)
            decoded = engine.decode(encoded.output, params)
            assert decoded.output == sample_plaintext

    def test_encode_shift_3(self, engine):
        """Test specific encoding with shift 3."""
        result = engine.encode("HELLO", CaesarParameters(shift=3))
        assert result.output == "KHOOR"

    def test_encode_shift_7(self, engine):
        """Test specific encoding with shift 7."""
        result = engine.encode("HELLO", CaesarParameters(shift=7))
        assert result.output == "OLSSV"

    def test_decode_shift_7(self, engine):
        """Test specific decoding with shift 7."""
        result = engine.decode("OLSSV", CaesarParameters(shift=7))
        assert result.output == "HELLO"

    def test_default_shift_is_3(self, engine):
        assert engine.encode("abc", None).output == "def"
        assert engine.encode("abc", CaesarParameters()).output == "def"

    def test_other_parameter_variant_uses_default(self, engine):
        result = engine.encode("abc", SubstitutionParameters(key="Q" * 26))
        assert result.output == "def"

    def test_preserves_case(self, engine):
        result = engine.encode("Hello, World!", CaesarParameters(shift=1))
        assert result.output == "Ifmmp, Xpsme!"

    def test_wraps_around(self, engine):
        assert engine.encode("xyzXYZ", CaesarParameters(shift=3)).output == "abcABC"
        assert engine.decode("abcABC", CaesarParameters(shift=3)).output == "xyzXYZ"

    def test_non_letters_pass_through(self, engine):
        text = "123 !?-_ é ß 日本"
        assert engine.encode(text, CaesarParameters(shift=5)).output == text

    def test_negative_and_large_shifts(self, engine):
        """Shifts are reduced mod 26."""
        assert engine.encode("A", CaesarParameters(shift=-1)).output == "Z"
        assert engine.encode("A", CaesarParameters(shift=27)).output == "B"
        assert engine.encode("A", CaesarParameters(shift=26)).output == "A"

    def test_metadata(self, engine):
        """Metadata reports the requested shift, not the negated one."""
        encoded = engine.encode("A", CaesarParameters(shift=5))
        decoded = engine.decode("F", CaesarParameters(shift=5))

        assert encoded.metadata == {"shift": "5", "direction": "encode"}
        assert decoded.metadata == {"shift": "5", "direction": "decode"}

    def test_roundtrip_all_letters(self, engine):
        text = string.ascii_letters
        for shift in range(1, 26):
            params = CaesarParameters(shift=shift)
            assert engine.decode(engine.encode(text, params).output, params).output == text


class TestROT13Engine:
    """Test suite for ROT13 engine."""

    @pytest.fixture
    def engine(self):
        return ROT13Engine()

    def test_known_value(self, engine):
        assert engine.encode("Hello", None).output == "Uryyb"

    def test_self_reciprocal(self, engine):
        """ROT13 applied twice should return original text."""
        for text in ["HELLOWORLD", "abcXYZ", "TheQuickBrownFox"]:
            once = engine.encode(text, None).output
            assert engine.encode(once, None).output == text

    def test_decode_equals_encode(self, engine):
        assert engine.decode("Uryyb", None).output == "Hello"
        assert engine.decode("Hello", None).output == engine.encode("Hello", None).output

    def test_ignores_caesar_parameters(self, engine):
        result = engine.encode("A", CaesarParameters(shift=1))
        assert result.output == "N"

    def test_metadata_always_encode(self, engine):
        assert engine.decode("Uryyb", None).metadata == {"shift": "13", "direction": "encode"}

    def test_through_dispatcher(self, dispatcher):
        result = dispatcher.transform("Uryyb", CipherType.ROT13, Direction.DECODE, {"shift": 4})
        assert result.ok
        assert result.output == "Hello"
        assert result.metadata["shift"] == "13"
