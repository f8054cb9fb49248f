"""
Test script for configuration system.
"""
import json

from othello import Board, Config, EngineConfig, get_default_config


def test_config_creation(tmp_path):
    """Test creating, saving and loading a config."""
    config = get_default_config()
    assert config.project_name == "othello-engine"
    assert config.engine.strict_cell_values is True
    assert config.engine.end_on_double_pass is False
    assert config.logging.log_dir is None

    config.engine.end_on_double_pass = True
    config.logging.log_level = "DEBUG"
    test_path = tmp_path / "configs" / "test_config.json"
    config.save(str(test_path))

    loaded_config = Config.load(str(test_path))
    assert config.to_dict() == loaded_config.to_dict(), "Loaded config should match original"
    assert isinstance(loaded_config.engine, EngineConfig)


def test_partial_config_uses_defaults(tmp_path):
    config_path = tmp_path / "partial.json"
    config_path.write_text(json.dumps({"engine": {"strict_cell_values": False}}))

    config = Config.load(str(config_path))

    assert config.engine.strict_cell_values is False
    assert config.engine.end_on_double_pass is False
    assert config.logging.log_level == "INFO"
    assert config.project_name == "othello-engine"


def test_engine_uses_config():
    config = Config.from_dict({"engine": {"end_on_double_pass": True}})
    board = Board(config.engine)
    assert board.config.end_on_double_pass is True
    assert Board().config == EngineConfig()
