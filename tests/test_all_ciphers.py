"""
Tests for the encoding and substitution engines.
"""
import pytest

from app.core.exceptions import (
    InvalidBase64Error,
    InvalidBinaryTokenError,
    InvalidHexDigitsError,
    InvalidKeyLengthError,
    InvalidMorseFormatError,
    InvalidUtf8OutputError,
    NoEncodableCharactersError,
    OddLengthHexError,
)
from app.models.schemas import CipherType, ErrorKind
from app.services.engines.base import SubstitutionParameters
from app.services.engines.encodings.morse import MORSE_CODE, REVERSE_MORSE_CODE
from app.services.engines.registry import EngineRegistry

REVERSED_ALPHABET = "ZYXWVUTSRQPONMLKJIHGFEDCBA"

UNICODE_SAMPLES = [
    "Hello",
    "Hello, World!",
    "naïve café",
    "日本語のテキスト",
    "emoji 🔐🗝️",
    "tabs\tand\nnewlines",
    " ",
]


class TestCipherRegistry:
    """Test the cipher registry."""

    def test_all_ciphers_registered(self):
        """Verify every cipher kind is registered."""
        registered = EngineRegistry.list_registered()

        for cipher_type in CipherType:
            assert cipher_type in registered, f"{cipher_type} not registered"

    def test_get_all_engines_in_declaration_order(self):
        registry = EngineRegistry()
        engines = registry.get_all_engines()

        assert [engine.cipher_type for engine in engines] == list(CipherType)

    def test_registries_do_not_share_instances(self):
        first = EngineRegistry().get_engine(CipherType.MORSE)
        second = EngineRegistry().get_engine(CipherType.MORSE)

        assert first is not second

    def test_instances_cached_per_registry(self):
        registry = EngineRegistry()
        assert registry.get_engine(CipherType.HEX) is registry.get_engine(CipherType.HEX)


class TestBase64Engine:
    """Test Base64 engine."""

    @pytest.fixture
    def engine(self):
        return EngineRegistry().get_engine(CipherType.BASE64)

    def test_encode_known_value(self, engine):
        result = engine.encode("Hello", None)
        assert result.output == "SGVsbG8="
        assert result.metadata == {"size_increase": "3 characters"}

    def test_size_increase_counts_characters(self, engine):
        # "é" is one character but two UTF-8 bytes
        result = engine.encode("é", None)
        assert result.output == "w6k="
        assert result.metadata == {"size_increase": "3 characters"}

    def test_decode_known_value(self, engine):
        assert engine.decode("SGVsbG8=", None).output == "Hello"

    def test_roundtrip_unicode(self, engine):
        for text in UNICODE_SAMPLES:
            assert engine.decode(engine.encode(text, None).output, None).output == text

    @pytest.mark.parametrize("bad", ["SGVsbG8", "SGV$bG8=", "SGVs bG8=", "====", "Zm9v!", "é"])
    def test_decode_rejects_malformed(self, engine, bad):
        with pytest.raises(InvalidBase64Error):
            engine.decode(bad, None)

    def test_decode_rejects_invalid_utf8(self, engine):
        # 0xFF 0xFE is not valid UTF-8
        with pytest.raises(InvalidUtf8OutputError):
            engine.decode("//4=", None)


class TestMorseEngine:
    """Test Morse engine."""

    @pytest.fixture
    def engine(self):
        return EngineRegistry().get_engine(CipherType.MORSE)

    def test_table_is_bidirectional(self):
        assert len(MORSE_CODE) == 37
        assert len(REVERSE_MORSE_CODE) == len(MORSE_CODE)
        for char, pattern in MORSE_CODE.items():
            assert REVERSE_MORSE_CODE[pattern] == char

    def test_tables_are_immutable(self):
        with pytest.raises(TypeError):
            MORSE_CODE["A"] = "..."  # type: ignore[index]

    def test_encode_sos(self, engine):
        assert engine.encode("SOS", None).output == "··· −−− ···"

    def test_encode_lowercase_and_drops_unknown(self, engine):
        assert engine.encode("s!o?s", None).output == "··· −−− ···"

    def test_encode_word_gap(self, engine):
        # The space token sits between two single separators
        assert engine.encode("E T", None).output == "·   −"

    def test_encode_nothing_encodable(self, engine):
        with pytest.raises(NoEncodableCharactersError):
            engine.encode("!?@#", None)

    def test_decode_words(self, engine):
        assert engine.decode("···· ··  −·−− −−− ··−", None).output == "HI YOU"

    def test_decode_drops_unknown_patterns(self, engine):
        assert engine.decode("··· ...... −−− ···", None).output == "SOS"

    def test_decode_invalid(self, engine):
        with pytest.raises(InvalidMorseFormatError):
            engine.decode("...---...", None)

    @pytest.mark.parametrize("text", ["SOS", "HELLO WORLD", "abc 123", "A  B", " LEADING", "0123456789"])
    def test_roundtrip(self, engine, text):
        encoded = engine.encode(text, None).output
        assert engine.decode(encoded, None).output == text.upper()


class TestHexEngine:
    """Test hexadecimal engine."""

    @pytest.fixture
    def engine(self):
        return EngineRegistry().get_engine(CipherType.HEX)

    def test_encode_known_value(self, engine):
        assert engine.encode("Hello", None).output == "48656C6C6F"

    def test_encode_multibyte(self, engine):
        assert engine.encode("é", None).output == "C3A9"

    def test_decode_known_value(self, engine):
        assert engine.decode("48656C6C6F", None).output == "Hello"

    def test_decode_lowercase_and_spaces(self, engine):
        assert engine.decode("48 65 6c 6c 6f", None).output == "Hello"

    def test_roundtrip_unicode(self, engine):
        for text in UNICODE_SAMPLES:
            assert engine.decode(engine.encode(text, None).output, None).output == text

    def test_decode_odd_length(self, engine):
        with pytest.raises(OddLengthHexError):
            engine.decode("486", None)

    @pytest.mark.parametrize("bad", ["ZZ", "+f", "0x", "4g", "é1"])
    def test_decode_invalid_digits(self, engine, bad):
        with pytest.raises(InvalidHexDigitsError):
            engine.decode(bad, None)

    def test_decode_invalid_utf8(self, engine):
        with pytest.raises(InvalidUtf8OutputError):
            engine.decode("FFFE", None)


class TestBinaryEngine:
    """Test binary engine."""

    @pytest.fixture
    def engine(self):
        return EngineRegistry().get_engine(CipherType.BINARY)

    def test_encode_known_value(self, engine):
        assert engine.encode("Hi", None).output == "01001000 01101001"

    def test_decode_known_value(self, engine):
        assert engine.decode("01001000 01101001", None).output == "Hi"

    def test_decode_extra_spaces_and_short_tokens(self, engine):
        assert engine.decode("  1001000   1101001 ", None).output == "Hi"

    def test_roundtrip_unicode(self, engine):
        for text in UNICODE_SAMPLES:
            assert engine.decode(engine.encode(text, None).output, None).output == text

    @pytest.mark.parametrize("bad", ["notbinary", "01001000 2", "100000000", "0100\t1000", "-1"])
    def test_decode_invalid_tokens(self, engine, bad):
        with pytest.raises(InvalidBinaryTokenError):
            engine.decode(bad, None)

    def test_decode_invalid_utf8(self, engine):
        with pytest.raises(InvalidUtf8OutputError):
            engine.decode("11111111", None)


class TestSimpleSubstitutionEngine:
    """Test substitution engine."""

    @pytest.fixture
    def engine(self):
        return EngineRegistry().get_engine(CipherType.SUBSTITUTION)

    @pytest.fixture
    def params(self):
        return SubstitutionParameters(key=REVERSED_ALPHABET)

    def test_encode_known_value(self, engine, params):
        assert engine.encode("AB", params).output == "ZY"

    def test_preserves_case_and_non_letters(self, engine, params):
        assert engine.encode("Hello, World!", params).output == "Svool, Dliow!"

    def test_lowercase_key_is_normalized(self, engine):
        params = SubstitutionParameters(key=REVERSED_ALPHABET.lower())
        assert engine.encode("Ab", params).output == "Zy"

    def test_roundtrip(self, engine):
        params = SubstitutionParameters(key="QWERTYUIOPASDFGHJKLZXCVBNM")
        text = "The Quick Brown Fox, 42!"
        encoded = engine.encode(text, params).output

        assert encoded != text
        assert engine.decode(encoded, params).output == text

    @pytest.mark.parametrize("key", [None, "", "ABC", REVERSED_ALPHABET + "A"])
    def test_invalid_key_length(self, engine, key):
        with pytest.raises(InvalidKeyLengthError) as exc_info:
            engine.encode("HELLO", SubstitutionParameters(key=key))
        assert exc_info.value.kind == ErrorKind.INVALID_KEY_LENGTH

    def test_missing_parameters(self, engine):
        with pytest.raises(InvalidKeyLengthError):
            engine.decode("HELLO", None)

    def test_duplicate_key_letters_last_write_wins(self, engine):
        """A non-permutation key is accepted; decoding keeps the last mapping."""
        key = "A" * 26
        params = SubstitutionParameters(key=key)

        assert engine.encode("HELLO", params).output == "AAAAA"
        assert engine.decode("AAAAA", params).output == "ZZZZZ"
        # Letters missing from the inverse map pass through
        assert engine.decode("Bb", params).output == "Bb"
