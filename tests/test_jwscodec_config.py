import logging

import pytest
from pydantic import ValidationError

from components.jwscodec import HS256Codec, JwsSettings


def test_defaults():
    cfg = JwsSettings()
    assert cfg.max_token_length is None
    assert cfg.rejection_log_level == "INFO"
    assert cfg.rejection_level_no == logging.INFO


def test_default_codec_settings_do_not_read_env(monkeypatch):
    monkeypatch.setenv("JWS_MAX_TOKEN_LENGTH", "10")
    assert HS256Codec().settings.max_token_length is None


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("JWS_MAX_TOKEN_LENGTH", "1024")
    monkeypatch.setenv("JWS_REJECTION_LOG_LEVEL", "debug")
    cfg = JwsSettings()
    assert cfg.max_token_length == 1024
    assert cfg.rejection_log_level == "DEBUG"
    assert cfg.rejection_level_no == logging.DEBUG


def test_invalid_values():
    with pytest.raises(ValidationError):
        JwsSettings(max_token_length=0)
    with pytest.raises(ValidationError):
        JwsSettings(rejection_log_level="LOUD")


def test_settings_are_frozen():
    cfg = JwsSettings()
    with pytest.raises(ValidationError):
        cfg.max_token_length = 1
