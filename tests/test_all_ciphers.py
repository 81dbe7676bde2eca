"""
Comprehensive tests for all cipher engines.
"""
import pytest

from polysquare.core.exceptions import EngineNotFoundError, InvalidKeyError
from polysquare.models.schemas import CipherFamily, CipherType
from polysquare.services.engines.polygraphic.keywords import (
    parse_keyword_pair,
    random_keyword,
    random_keyword_pair,
)
from polysquare.services.engines.registry import EngineRegistry
from polysquare.services.squares.key_matrix import ALPHABET


class TestCipherRegistry:
    """Test the cipher registry."""

    def test_all_ciphers_registered(self):
        """Verify all expected ciphers are registered."""
        engines = EngineRegistry().get_all_engines()

        assert {engine.cipher_type for engine in engines} == {
            CipherType.PLAYFAIR,
            CipherType.TWO_SQUARE,
            CipherType.FOUR_SQUARE,
        }
        assert all(engine.cipher_family == CipherFamily.POLYGRAPHIC for engine in engines)

    def test_engines_are_cached(self):
        registry = EngineRegistry()
        assert registry.get_engine(CipherType.PLAYFAIR) is registry.get_engine(CipherType.PLAYFAIR)

    def test_unknown_engine(self):
        registry = EngineRegistry()

        assert registry.get_engine("hill") is None
        with pytest.raises(EngineNotFoundError):
            registry.require_engine("hill")


class TestPlayfairEngine:
    """Test the Playfair engine."""

    @pytest.fixture
    def engine(self):
        return EngineRegistry().get_engine(CipherType.PLAYFAIR)

    def test_encrypt_decrypt(self, engine):
        ciphertext = engine.encrypt("hide the gold in the tree stump", "playfair example")
        assert ciphertext == "BMODZBXDNABEKUDMUIXMMOUVIF"

        result = engine.decrypt_with_key(ciphertext, {"keyword": "playfair example"})
        assert result.plaintext == "HIDETHEGOLDINTHETREXESTUMP"
        assert "P L A Y F" in result.explanation

    def test_roundtrip_random_key(self, engine):
        plaintext = "HELPMEOBIWANKENOBI"
        key = engine.generate_random_key()

        encrypted = engine.encrypt(plaintext, key)
        result = engine.decrypt_with_key(encrypted, key)

        assert result.plaintext == plaintext

    def test_invalid_key(self, engine):
        with pytest.raises(InvalidKeyError):
            engine.parse_key({"key": 42})

    def test_key_squares(self, engine):
        squares = engine.key_squares("playfair example")
        assert squares == {"key": ["PLAYF", "IREXM", "BCDGH", "KNOQS", "TUVWZ"]}


class TestTwoSquareEngine:
    """Test the Two-Square engine."""

    @pytest.fixture
    def engine(self):
        return EngineRegistry().get_engine(CipherType.TWO_SQUARE)

    def test_encrypt_decrypt(self, engine):
        key = {"key1": "EXAMPLE", "key2": "KEYWORD"}

        assert engine.encrypt("help me obi wan kenobi", key) == "HECMXWSRKYXPHWNODG"
        assert engine.decrypt_with_key("HECMXWSRKYXPHWNODG", key).plaintext == "HELPMEOBIWANKENOBI"

    def test_comma_separated_key(self, engine):
        assert engine.parse_key("example, keyword") == ("EXAMPLE", "KEYWORD")
        assert engine.encrypt("joe", "example,keyword") == "NYMT"

    def test_roundtrip_random_key(self, engine):
        plaintext = "ATTACKATDAWN"
        key = engine.generate_random_key()

        encrypted = engine.encrypt(plaintext, key)
        result = engine.decrypt_with_key(encrypted, key)

        assert result.plaintext == plaintext

    def test_explain(self, engine):
        explanation = engine.explain("NYMT", "IOEX", {"key1": "EXAMPLE", "key2": "KEYWORD"})
        assert "E X A M P" in explanation
        assert "K E Y W O" in explanation


class TestFourSquareEngine:
    """Test the Four-Square engine."""

    @pytest.fixture
    def engine(self):
        return EngineRegistry().get_engine(CipherType.FOUR_SQUARE)

    def test_encrypt_decrypt(self, engine):
        key = {"key1": "EXAMPLE", "key2": "KEYWORD"}

        assert engine.encrypt("joe", key) == "DIAZ"
        assert engine.decrypt_with_key("DIAZ", key).plaintext == "IOEX"

    def test_legacy_key_names(self, engine):
        assert engine.parse_key({"keyword1": "example", "keyword2": "keyword"}) == ("EXAMPLE", "KEYWORD")

    @pytest.mark.parametrize("key", ["EXAMPLE", "A,B,C", 42, {"key1": 1, "key2": "B"}])
    def test_invalid_key(self, engine, key):
        with pytest.raises(InvalidKeyError):
            engine.parse_key(key)

    def test_key_squares(self, engine):
        squares = engine.key_squares({"key1": "EXAMPLE", "key2": "KEYWORD"})
        plain_rows = [ALPHABET[i:i + 5] for i in range(0, 25, 5)]

        assert squares["top_left"] == plain_rows
        assert squares["bottom_right"] == plain_rows
        assert squares["top_right"][0] == "EXAMP"
        assert squares["bottom_left"][0] == "KEYWO"

    def test_roundtrip_random_key(self, engine):
        plaintext = "WEAREDISCOVEREDSAVEYOURSELFX"
        key = engine.generate_random_key()

        encrypted = engine.encrypt(plaintext, key)
        result = engine.decrypt_with_key(encrypted, key)

        assert result.plaintext == plaintext


class TestKeywords:
    """Test the key helpers shared by the engines."""

    def test_parse_keyword_pair(self):
        assert parse_keyword_pair({"key1": "jam", "key2": "Keyword"}) == ("IAM", "KEYWORD")
        assert parse_keyword_pair(" example , keyword ") == ("EXAMPLE", "KEYWORD")

    def test_random_keyword(self):
        for _ in range(20):
            keyword = random_keyword()
            assert 5 <= len(keyword) <= 10
            assert set(keyword) <= set(ALPHABET)

    def test_random_keyword_pair(self):
        key = random_keyword_pair()

        assert set(key) == {"key1", "key2"}
        assert parse_keyword_pair(key) == (key["key1"], key["key2"])
