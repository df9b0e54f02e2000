"""Configuration management for git-conv-commit."""
from pathlib import Path
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
import tomli
import tomli_w
import os
import re

DEFAULT_CONFIG_FILENAME = ".gitconvcommit.toml"
ENV_PREFIX = "GIT_CONV_COMMIT_"

STRING_FIELDS = ['issue_separator', 'log_file', 'log_directory', 'editor', 'prompt_color', 'active_color', 'hint_color']
BOOL_FIELDS = ['require_scope', 'always_log']
INT_FIELDS = ['max_short_length']


class Config(BaseModel):
    """Configuration settings for git-conv-commit.

    Values come from the config file in the repository root, then from
    ``GIT_CONV_COMMIT_*`` environment variables, then from keyword
    arguments, each overriding the previous.
    """

    max_short_length: int = Field(
        default=50,
        ge=1,
        description="Maximum number of characters in the short description"
    )

    require_scope: bool = Field(
        default=True,
        description="Whether the scope prompt rejects empty answers"
    )

    issue_separator: str = Field(
        default=", ",
        description="Separator placed between references when several issues are linked"
    )

    always_log: bool = Field(
        default=False,
        description="Whether to always generate log files"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Path to log file (if not using automatic log file generation)"
    )

    log_directory: str = Field(
        default=".gitconvcommit",
        description="Directory for automatically named log files"
    )

    editor: Optional[str] = Field(
        default=None,
        description="Editor command for the breaking change description (defaults to $EDITOR)"
    )

    prompt_color: str = Field(default="white", description="Color of prompt text")
    active_color: str = Field(default="yellow", description="Color of choice numbers")
    hint_color: str = Field(default="bright_black", description="Color of hints and defaults")

    @staticmethod
    def _sanitize_string(value: str) -> str:
        """Strip control characters and cap the length of a string setting."""
        if not value:
            return value

        value = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', value)

        if len(value) > 1000:
            value = value[:1000]

        return value

    @staticmethod
    def _is_safe_path(path: str) -> bool:
        """Check if a path is safe (relative, no path traversal)."""
        if not path:
            return False

        if '..' in path or path.startswith('/') or '\\' in path:
            return False

        if os.path.isabs(path):
            return False

        return True

    @classmethod
    def load(cls, repo_path: Path) -> 'Config':
        """Load configuration from the config file.

        Args:
            repo_path: Path to the git repository

        Returns:
            Config: Configuration object with values from file or defaults
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        if not config_path.exists():
            return cls()

        try:
            with config_path.open('rb') as f:
                config_data = tomli.load(f)

            for key in STRING_FIELDS:
                if key in config_data and isinstance(config_data[key], str):
                    config_data[key] = cls._sanitize_string(config_data[key])

            if config_data.get('log_file') and not cls._is_safe_path(config_data['log_file']):
                print(f"Warning: Unsafe log file path '{config_data['log_file']}', using default")
                config_data['log_file'] = None

            return cls(**{**config_data, **cls._env_data()})
        except Exception as e:
            print(f"Warning: Error reading config file: {e}")
            return cls()

    def save(self, repo_path: Path) -> None:
        """Save configuration to the config file.

        Args:
            repo_path: Path to the git repository
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        # TOML has no null
        config_dict = {k: v for k, v in self.model_dump().items() if v is not None}

        if config_dict.get('log_file') and not self._is_safe_path(config_dict['log_file']):
            print(f"Warning: Unsafe log file path '{config_dict['log_file']}', not saving")
            del config_dict['log_file']

        with config_path.open('wb') as f:
            tomli_w.dump(config_dict, f)

    def get_log_file(self) -> Optional[Path]:
        """Get the path to the log file.

        If always_log is True, generates a timestamped log file name inside
        ``log_directory``. Otherwise, returns the configured log_file path if set.

        Returns:
            Optional[Path]: Path to the log file, or None if logging is disabled
        """
        if self.always_log:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            return Path(self.log_directory) / f"gcc_log-{timestamp}.log"
        elif self.log_file:
            if self._is_safe_path(self.log_file):
                return Path(self.log_file)
            else:
                print(f"Warning: Unsafe log file path '{self.log_file}', using default")
                return None
        return None

    @classmethod
    def _env_data(cls) -> dict:
        """Read ``GIT_CONV_COMMIT_*`` environment variables into field values."""
        env_data = {}

        for field_name in STRING_FIELDS + BOOL_FIELDS + INT_FIELDS:
            env_var = ENV_PREFIX + field_name.upper()
            if env_var not in os.environ:
                continue
            value = os.environ[env_var]

            if field_name in STRING_FIELDS:
                value = cls._sanitize_string(value)
            elif field_name in BOOL_FIELDS:
                value = value.lower() in ['true', '1', 'yes', 'on']

            env_data[field_name] = value

        return env_data

    def __init__(self, **data):
        """Initialize config with environment variable support and sanitization."""
        super().__init__(**{**self._env_data(), **data})
