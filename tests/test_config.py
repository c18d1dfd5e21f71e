"""
Test Configuration Module
========================

Unit tests for configuration loading and validation.
"""

import pytest
from pathlib import Path

# Add parent directory to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import (
    Config, DialogueConfig, LexiconConfig, UIConfig, load_config, save_config
)
from core.exceptions import ConfigError


class TestDialogueConfig:
    """Tests for DialogueConfig."""

    def test_default_values(self):
        """Test default configuration values."""
        config = DialogueConfig()
        assert config.history_size == 10
        assert config.positive_threshold == 0.5
        assert config.negative_threshold == -0.5
        assert config.seed is None

    def test_validation_valid(self):
        DialogueConfig(history_size=1).validate()  # Should not raise

    def test_validation_invalid_history_size(self):
        with pytest.raises(ConfigError):
            DialogueConfig(history_size=0).validate()

    def test_validation_inverted_thresholds(self):
        with pytest.raises(ConfigError):
            DialogueConfig(positive_threshold=-1.0, negative_threshold=1.0).validate()

    def test_validation_empty_responses(self):
        with pytest.raises(ConfigError):
            DialogueConfig(responses={"default": []}).validate()

    @pytest.mark.parametrize("field_name", ["positive_threshold", "negative_threshold"])
    def test_validation_non_numeric_threshold(self, field_name):
        with pytest.raises(ConfigError) as exc_info:
            DialogueConfig(**{field_name: "high"}).validate()
        assert field_name in str(exc_info.value)

    def test_validation_bool_threshold(self):
        with pytest.raises(ConfigError):
            DialogueConfig(positive_threshold=True).validate()

    @pytest.mark.parametrize("size", [True, 2.5, "10"])
    def test_validation_non_integer_history_size(self, size):
        with pytest.raises(ConfigError):
            DialogueConfig(history_size=size).validate()

    @pytest.mark.parametrize("seed", [[1, 2], "7", 1.5, False])
    def test_validation_bad_seed(self, seed):
        with pytest.raises(ConfigError):
            DialogueConfig(seed=seed).validate()

    def test_validation_integer_seed(self):
        DialogueConfig(seed=0).validate()


class TestLexiconConfig:
    """Tests for LexiconConfig."""

    def test_validation_non_numeric_score(self):
        with pytest.raises(ConfigError):
            LexiconConfig(sentiment_scores={"meh": "low"}).validate()

    def test_validation_blank_stop_word(self):
        with pytest.raises(ConfigError):
            LexiconConfig(stop_words=["  "]).validate()


class TestUIConfig:
    """Tests for UIConfig."""

    def test_default_values(self):
        config = UIConfig()
        assert config.bot_label == "Bot: "
        assert config.quit_command == "quit"

    def test_validation_empty_quit(self):
        with pytest.raises(ConfigError):
            UIConfig(quit_command="").validate()

    @pytest.mark.parametrize("field_name", ["bot_label", "user_prompt", "quit_command"])
    def test_validation_non_string(self, field_name):
        with pytest.raises(ConfigError) as exc_info:
            UIConfig(**{field_name: 123}).validate()
        assert field_name in str(exc_info.value)


class TestConfig:
    """Tests for main Config class."""

    def test_default_values(self):
        """Test default configuration values."""
        config = Config()
        assert config.app_name == "Sentibot"
        assert config.dialogue is not None
        assert config.lexicon is not None

    def test_invalid_log_level(self):
        config = Config(log_level="LOUD")
        with pytest.raises(ConfigError):
            config.validate()

    def test_non_string_log_level(self):
        with pytest.raises(ConfigError):
            Config(log_level=5).validate()

    def test_json_logs_default(self):
        config = Config()
        assert config.json_logs is False
        assert config.to_dict()["json_logs"] is False

    def test_to_dict(self):
        """Test conversion to dictionary."""
        d = Config().to_dict()
        assert "app_name" in d
        assert "dialogue" in d
        assert d["ui"]["quit_command"] == "quit"


class TestLoadConfig:
    """Tests for load_config and save_config."""

    def test_defaults_without_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SENTIBOT_CONFIG_DIR", str(tmp_path))
        config = load_config(load_env=False)
        assert config.dialogue.history_size == 10
        assert config.config_dir == str(tmp_path)

    def test_load_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "app_name: Moodbot\n"
            "dialogue:\n"
            "  history_size: 5\n"
            "  seed: 11\n"
            "  unknown_key: ignored\n"
            "lexicon:\n"
            "  sentiment_scores:\n"
            "    awesome: 1.75\n"
        )

        config = load_config(str(config_file), load_env=False)

        assert config.app_name == "Moodbot"
        assert config.dialogue.history_size == 5
        assert config.dialogue.seed == 11
        assert config.lexicon.sentiment_scores == {"awesome": 1.75}

    def test_default_dir_yaml_is_picked_up(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SENTIBOT_CONFIG_DIR", str(tmp_path))
        (tmp_path / "config.yaml").write_text("ui:\n  bot_label: 'Sentibot> '\n")

        config = load_config(load_env=False)
        assert config.ui.bot_label == "Sentibot> "

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("dialogue: [unclosed\n")
        with pytest.raises(ConfigError):
            load_config(str(config_file), load_env=False)

    def test_invalid_values_rejected(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("dialogue:\n  history_size: 0\n")
        with pytest.raises(ConfigError):
            load_config(str(config_file), load_env=False)

    def test_env_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SENTIBOT_CONFIG_DIR", str(tmp_path))
        monkeypatch.setenv("SENTIBOT_DIALOGUE_HISTORY_SIZE", "3")
        monkeypatch.setenv("SENTIBOT_DIALOGUE_SEED", "99")
        monkeypatch.setenv("SENTIBOT_UI_SHOW_BANNER", "no")
        monkeypatch.setenv("SENTIBOT_LOG_LEVEL", "DEBUG")

        config = load_config()

        assert config.dialogue.history_size == 3
        assert config.dialogue.seed == 99
        assert config.ui.show_banner is False
        assert config.log_level == "DEBUG"

    def test_yaml_wrong_types_rejected(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("dialogue:\n  positive_threshold: high\n")
        with pytest.raises(ConfigError):
            load_config(str(config_file), load_env=False)

        config_file.write_text("log_level: 5\n")
        with pytest.raises(ConfigError):
            load_config(str(config_file), load_env=False)

        config_file.write_text("ui:\n  quit_command: 123\n")
        with pytest.raises(ConfigError):
            load_config(str(config_file), load_env=False)

    def test_json_logs_from_yaml_and_env(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("json_logs: true\n")
        assert load_config(str(config_file), load_env=False).json_logs is True

        monkeypatch.setenv("SENTIBOT_CONFIG_DIR", str(tmp_path / "empty"))
        monkeypatch.setenv("SENTIBOT_JSON_LOGS", "1")
        assert load_config().json_logs is True

    def test_env_bad_number(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SENTIBOT_CONFIG_DIR", str(tmp_path))
        monkeypatch.setenv("SENTIBOT_DIALOGUE_HISTORY_SIZE", "ten")
        with pytest.raises(ConfigError):
            load_config()

    def test_save_and_reload(self, tmp_path):
        config = Config()
        config.dialogue.history_size = 4
        config.dialogue.responses = {"default": ["Go on."]}

        path = save_config(config, str(tmp_path / "saved.yaml"))
        reloaded = load_config(str(path), load_env=False)

        assert reloaded.dialogue.history_size == 4
        assert reloaded.dialogue.responses == {"default": ["Go on."]}
