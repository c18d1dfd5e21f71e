"""
Configuration Management - YAML-based configuration with environment overrides
=============================================================================

This module handles all configuration aspects including:
- Built-in defaults (no file is needed to run)
- Loading from YAML files
- Environment variable overrides
- Configuration validation
"""

import os
import yaml
from pathlib import Path
from typing import Any, Dict, Optional, List
from dataclasses import dataclass, field, asdict

from .exceptions import ConfigError


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class LexiconConfig:
    """
    Lexicon extensions.

    Entries here are merged on top of the built-in word tables.
    """
    sentiment_scores: Dict[str, float] = field(default_factory=dict)
    stop_words: List[str] = field(default_factory=list)

    def validate(self) -> None:
        """Validate lexicon extensions."""
        if not isinstance(self.sentiment_scores, dict):
            raise ConfigError("sentiment_scores must be a mapping")
        if not isinstance(self.stop_words, list):
            raise ConfigError("stop_words must be a list")

        for word, score in self.sentiment_scores.items():
            if not isinstance(word, str) or not word.strip():
                raise ConfigError("Sentiment words must be non-empty strings", {"word": word})
            if not _is_number(score):
                raise ConfigError(
                    f"Sentiment score for '{word}' must be a number, got {score!r}"
                )

        for word in self.stop_words:
            if not isinstance(word, str) or not word.strip():
                raise ConfigError("Stop words must be non-empty strings", {"word": word})


@dataclass
class DialogueConfig:
    """
    Dialogue behavior configuration.

    Controls classification thresholds, reply selection and the
    size of the rolling input history.
    """
    history_size: int = 10
    positive_threshold: float = 0.5
    negative_threshold: float = -0.5

    # Fixed seed makes reply selection reproducible
    seed: Optional[int] = None

    # Per-category reply overrides, e.g. {"default": ["Go on."]}
    responses: Dict[str, List[str]] = field(default_factory=dict)

    def validate(self) -> None:
        """Validate dialogue configuration parameters."""
        if not _is_int(self.history_size) or self.history_size < 1:
            raise ConfigError(f"history_size must be at least 1, got {self.history_size}")

        for name in ("positive_threshold", "negative_threshold"):
            value = getattr(self, name)
            if not _is_number(value):
                raise ConfigError(f"{name} must be a number, got {value!r}")

        if self.seed is not None and not _is_int(self.seed):
            raise ConfigError(f"seed must be an integer, got {self.seed!r}")

        if self.negative_threshold > self.positive_threshold:
            raise ConfigError(
                "negative_threshold must not exceed positive_threshold",
                {
                    "positive_threshold": self.positive_threshold,
                    "negative_threshold": self.negative_threshold,
                }
            )

        if not isinstance(self.responses, dict):
            raise ConfigError("responses must be a mapping of category to replies")

        for category, replies in self.responses.items():
            if not isinstance(replies, list) or not replies:
                raise ConfigError(f"Responses for '{category}' must be a non-empty list")


@dataclass
class UIConfig:
    """
    User interface configuration.

    Settings shared by the console loop and the terminal UI.
    """
    bot_label: str = "Bot: "
    user_prompt: str = "You: "
    quit_command: str = "quit"
    show_banner: bool = True

    def validate(self) -> None:
        """Validate UI configuration."""
        for name in ("bot_label", "user_prompt", "quit_command"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigError(f"{name} must be a string, got {value!r}")

        if not self.quit_command:
            raise ConfigError("quit_command cannot be empty")


@dataclass
class Config:
    """
    Main configuration container.

    Aggregates all configuration sections into a single object
    and provides methods for validating and exporting.
    """
    app_name: str = "Sentibot"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "WARNING"
    log_dir: str = ""
    json_logs: bool = False

    lexicon: LexiconConfig = field(default_factory=LexiconConfig)
    dialogue: DialogueConfig = field(default_factory=DialogueConfig)
    ui: UIConfig = field(default_factory=UIConfig)

    # Set at runtime
    config_dir: str = ""

    def validate(self) -> None:
        """
        Validate all configuration sections.

        Raises:
            ConfigError: If any configuration section is invalid
        """
        if not isinstance(self.log_level, str):
            raise ConfigError(f"log_level must be a string, got {self.log_level!r}")
        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ConfigError(f"Invalid log level: {self.log_level}")

        self.lexicon.validate()
        self.dialogue.validate()
        self.ui.validate()

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "app_name": self.app_name,
            "version": self.version,
            "debug": self.debug,
            "log_level": self.log_level,
            "log_dir": self.log_dir,
            "json_logs": self.json_logs,
            "lexicon": asdict(self.lexicon),
            "dialogue": asdict(self.dialogue),
            "ui": asdict(self.ui),
        }


def get_default_config_dir() -> Path:
    """
    Get the default configuration directory path.

    Returns:
        Path to the configuration directory
    """
    if "SENTIBOT_CONFIG_DIR" in os.environ:
        return Path(os.environ["SENTIBOT_CONFIG_DIR"])

    if "XDG_CONFIG_HOME" in os.environ:
        return Path(os.environ["XDG_CONFIG_HOME"]) / "sentibot"

    return Path.home() / ".config" / "sentibot"


def load_config(config_path: Optional[str] = None, load_env: bool = True) -> Config:
    """
    Load configuration from YAML file with environment variable overrides.

    This function loads configuration in the following order:
    1. Default values from dataclass
    2. Values from YAML file (explicit path, or config.yaml in the
       default config directory when present)
    3. Environment variable overrides

    Args:
        config_path: Path to configuration file (optional, must exist if given)
        load_env: Whether to apply environment variable overrides

    Returns:
        Config object with loaded values

    Raises:
        ConfigError: If configuration is invalid or cannot be loaded
    """
    config = Config()
    config.config_dir = str(get_default_config_dir())

    if config_path:
        yaml_path = Path(config_path)
        if not yaml_path.exists():
            raise ConfigError("Config file not found", {"path": str(yaml_path)})
        config.config_dir = str(yaml_path.parent)
    else:
        yaml_path = Path(config.config_dir) / "config.yaml"

    if yaml_path.exists():
        try:
            with open(yaml_path, "r", encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse config file: {e}", {"path": str(yaml_path)})
        except IOError as e:
            raise ConfigError(f"Failed to read config file: {e}", {"path": str(yaml_path)})

        if not isinstance(yaml_config, dict):
            raise ConfigError("Config file must contain a mapping", {"path": str(yaml_path)})

        _apply_yaml_config(config, yaml_config)

    if load_env:
        _apply_env_overrides(config)

    config.validate()

    return config


def _apply_yaml_config(config: Config, yaml_config: Dict[str, Any]) -> None:
    """
    Apply YAML configuration values to Config object.

    Unknown keys are ignored.
    """
    for key in ("app_name", "version", "debug", "log_level", "log_dir", "json_logs"):
        if key in yaml_config:
            setattr(config, key, yaml_config[key])

    for section in ("lexicon", "dialogue", "ui"):
        section_cfg = yaml_config.get(section)
        if not section_cfg:
            continue
        if not isinstance(section_cfg, dict):
            raise ConfigError(f"Section '{section}' must be a mapping")

        section_obj = getattr(config, section)
        for key, value in section_cfg.items():
            if hasattr(section_obj, key):
                setattr(section_obj, key, value)


def _apply_env_overrides(config: Config) -> None:
    """
    Apply environment variable overrides to Config object.

    Environment variables follow the pattern: SENTIBOT_SECTION_KEY
    For example: SENTIBOT_DIALOGUE_HISTORY_SIZE, SENTIBOT_UI_BOT_LABEL
    """
    env_mappings = {
        "SENTIBOT_DEBUG": (None, "debug", bool),
        "SENTIBOT_LOG_LEVEL": (None, "log_level"),
        "SENTIBOT_LOG_DIR": (None, "log_dir"),
        "SENTIBOT_JSON_LOGS": (None, "json_logs", bool),

        "SENTIBOT_DIALOGUE_HISTORY_SIZE": ("dialogue", "history_size", int),
        "SENTIBOT_DIALOGUE_SEED": ("dialogue", "seed", int),
        "SENTIBOT_DIALOGUE_POSITIVE_THRESHOLD": ("dialogue", "positive_threshold", float),
        "SENTIBOT_DIALOGUE_NEGATIVE_THRESHOLD": ("dialogue", "negative_threshold", float),

        "SENTIBOT_UI_BOT_LABEL": ("ui", "bot_label"),
        "SENTIBOT_UI_USER_PROMPT": ("ui", "user_prompt"),
        "SENTIBOT_UI_SHOW_BANNER": ("ui", "show_banner", bool),
    }

    for env_var, mapping in env_mappings.items():
        value = os.environ.get(env_var)
        if value is None:
            continue

        section, key = mapping[0], mapping[1]
        converter = mapping[2] if len(mapping) > 2 else str
        target = config if section is None else getattr(config, section)

        if converter == bool:
            converted = value.lower() in ("true", "1", "yes", "on")
        else:
            try:
                converted = converter(value)
            except ValueError:
                raise ConfigError(
                    f"Invalid value for {env_var}: {value!r}",
                    {"expected": converter.__name__}
                )

        setattr(target, key, converted)


def save_config(config: Config, config_path: Optional[str] = None) -> Path:
    """
    Save configuration to YAML file.

    Args:
        config: Config object to save
        config_path: Path to save configuration (optional)

    Returns:
        Path the configuration was written to

    Raises:
        ConfigError: If configuration cannot be saved
    """
    if config_path:
        yaml_path = Path(config_path)
    else:
        yaml_path = Path(config.config_dir or get_default_config_dir()) / "config.yaml"

    try:
        yaml_path.parent.mkdir(parents=True, exist_ok=True)
        with open(yaml_path, "w", encoding="utf-8") as f:
            yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
    except IOError as e:
        raise ConfigError(f"Failed to save config file: {e}", {"path": str(yaml_path)})

    return yaml_path
