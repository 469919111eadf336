"""Configuration management for Kit.

Repository configuration lives in .kit/config in INI format. Only
core.repositoryformatversion is enforced; everything else is kept as
parsed so callers can inspect it.
"""

import os
import configparser
from pathlib import Path
from typing import Optional, Dict


class Config:
    """
    Reads a Kit repository configuration file.

    Values are looked up in this order:
    1. Environment variables (KIT_<SECTION>_<KEY>)
    2. Repository config
    3. Fallback value

    Keys without a value are allowed and read back as None.
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize Config.

        Args:
            config_path: Path to the repository config file
        """
        self.config_path = config_path
        self._parser = configparser.ConfigParser(allow_no_value=True, interpolation=None)

    def load(self) -> 'Config':
        """
        Parse the config file.

        Returns:
            Config: self for method chaining

        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not UTF-8
            configparser.Error: If the file is not valid INI
        """
        parser = configparser.ConfigParser(allow_no_value=True, interpolation=None)
        with open(self.config_path, 'r', encoding='utf-8') as f:
            parser.read_file(f, source=str(self.config_path))
        self._parser = parser
        return self

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Args:
            section: Config section (e.g., 'core')
            key: Config key (e.g., 'repositoryformatversion')
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        env_key = f"KIT_{section.upper()}_{key.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value

        if self._parser.has_option(section, key):
            return self._parser.get(section, key)

        return fallback

    def get_int(self, section: str, key: str) -> Optional[int]:
        """
        Get a configuration value as an integer.

        Returns:
            The integer value, or None if the key is missing

        Raises:
            ValueError: If the value is not an integer
        """
        value = self.get(section, key)
        if value is None:
            return None
        return int(value.strip())

    def as_dict(self) -> Dict[str, Dict[str, Optional[str]]]:
        """
        Return the parsed file as nested dicts.

        Returns:
            Dict of section names to key/value dicts (values may be None)
        """
        return {
            section: dict(self._parser.items(section))
            for section in self._parser.sections()
        }

    def __repr__(self) -> str:
        return f"Config(path={self.config_path})"
