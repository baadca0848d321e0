"""
Tests for session configuration and logging setup.
"""
import json
import logging

import pytest
from gomoku.config import SessionConfig
from gomoku.log import setup_logging


def test_default_config():
    """Test default flag values."""
    config = SessionConfig()
    assert config.to_dict() == {
        'reviewing': False,
        'show_win_hint': True,
        'show_ordinals': False,
        'stone_locked': False,
    }


def test_dict_round_trip():
    """Test to_dict and from_dict."""
    config = SessionConfig(show_ordinals=True, stone_locked=True)
    assert SessionConfig.from_dict(config.to_dict()) == config


def test_from_dict_rejects_unknown_keys():
    """Test that typos in config files are reported."""
    with pytest.raises(ValueError, match="show_hint"):
        SessionConfig.from_dict({'show_hint': True})


def test_save_and_load(tmp_path):
    """Test saving to and loading from a JSON file."""
    path = tmp_path / "session.json"
    SessionConfig(reviewing=True).save(path)

    assert json.loads(path.read_text())['reviewing'] == True
    assert SessionConfig.load(path) == SessionConfig(reviewing=True)
    assert SessionConfig.load(str(path)).reviewing == True


def test_load_partial_file(tmp_path):
    """Test that missing keys fall back to defaults."""
    path = tmp_path / "session.json"
    path.write_text('{"stone_locked": true}')

    config = SessionConfig.load(path)
    assert config.stone_locked == True
    assert config.show_win_hint == True


def test_load_missing_file(tmp_path):
    """Test that a missing config file raises."""
    with pytest.raises(FileNotFoundError):
        SessionConfig.load(tmp_path / "missing.json")


def test_setup_logging_levels(monkeypatch):
    """Test that level names are resolved and unknown ones rejected."""
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

    setup_logging("debug")
    setup_logging(logging.INFO)
    assert [c['level'] for c in calls] == [logging.DEBUG, logging.INFO]

    with pytest.raises(ValueError):
        setup_logging("chatty")


@pytest.mark.parametrize("value", ["no", 0, 1, None, [True]])
def test_from_dict_rejects_non_bool_values(value):
    """Test that flags must be real booleans."""
    with pytest.raises(ValueError, match="reviewing"):
        SessionConfig.from_dict({'reviewing': value})


def test_load_rejects_string_flag(tmp_path):
    """Test that a quoted flag in a config file is reported."""
    path = tmp_path / "session.json"
    path.write_text('{"stone_locked": "false"}')

    with pytest.raises(ValueError, match="stone_locked"):
        SessionConfig.load(path)
