# =============================================================================
# test_options.py - Lexer Configuration Tests
# =============================================================================
# Tests for LexerOptions defaults, string coercion and environment loading.
# =============================================================================

import logging

import pytest

from exprlex.options import ENV_ON_UNRECOGNIZED, LexerOptions, UnrecognizedPolicy


class TestLexerOptions:
    """Test option construction."""

    def test_default_policy_is_error(self):
        assert LexerOptions().on_unrecognized is UnrecognizedPolicy.ERROR

    def test_string_policy_is_coerced(self):
        """Plain strings are converted to UnrecognizedPolicy."""
        assert LexerOptions("stop").on_unrecognized is UnrecognizedPolicy.STOP

    def test_invalid_policy_rejected(self):
        with pytest.raises(ValueError):
            LexerOptions("ignore")


class TestFromEnv:
    """Test loading options from environment variables."""

    def test_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv(ENV_ON_UNRECOGNIZED, raising=False)
        assert LexerOptions.from_env() == LexerOptions()

    def test_policy_from_env(self, monkeypatch):
        """Values are case-insensitive."""
        monkeypatch.setenv(ENV_ON_UNRECOGNIZED, " SKIP ")
        assert LexerOptions.from_env().on_unrecognized is UnrecognizedPolicy.SKIP

    def test_invalid_value_is_ignored(self, monkeypatch, caplog):
        """Invalid values keep the default and are logged."""
        caplog.set_level(logging.WARNING, logger="exprlex.options")
        monkeypatch.setenv(ENV_ON_UNRECOGNIZED, "explode")
        assert LexerOptions.from_env().on_unrecognized is UnrecognizedPolicy.ERROR
        assert "Ignoring EXPRLEX_ON_UNRECOGNIZED='explode'" in caplog.text
