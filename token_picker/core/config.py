"""Configuration management for the token picker.

Loads configuration from environment variables or .env file.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_ROOT_GROUP = "ld"


@dataclass
class PickerConfig:
    """Settings shared by the catalog, the categorizer and the CLI."""

    # Top-level namespace that holds the tokens ("" means the whole document)
    root_group: str = DEFAULT_ROOT_GROUP

    # Optional YAML file overriding the default category rules
    category_rules_path: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "PickerConfig":
        """Load configuration from environment variables."""
        rules_path = os.getenv("TOKEN_PICKER_CATEGORY_RULES")
        return cls(
            root_group=os.getenv("TOKEN_PICKER_ROOT_GROUP", DEFAULT_ROOT_GROUP),
            category_rules_path=Path(rules_path) if rules_path else None,
        )

    @classmethod
    def load(cls, env_file: Optional[Path] = None) -> "PickerConfig":
        """
        Load configuration from .env file and environment variables.

        Args:
            env_file: Optional path to .env file. If not provided,
                      looks for .env in the project root.

        Returns:
            PickerConfig instance with loaded values
        """
        if env_file:
            load_dotenv(env_file)
        else:
            project_root = Path(__file__).parent.parent.parent
            env_path = project_root / ".env"
            if env_path.exists():
                load_dotenv(env_path)

        return cls.from_env()

    def has_category_rules(self) -> bool:
        """Check if a category rules file is configured."""
        return self.category_rules_path is not None


# Global config instance (lazy loaded)
_config: Optional[PickerConfig] = None


def get_config() -> PickerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = PickerConfig.load()
    return _config


def reload_config(env_file: Optional[Path] = None) -> PickerConfig:
    """Reload configuration from environment."""
    global _config
    _config = PickerConfig.load(env_file)
    return _config
