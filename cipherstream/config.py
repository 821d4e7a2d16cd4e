"""
Configuration management for cipherstream.

Persists the default cipher chain and read size in a small JSON file and
builds reader chains from it.
"""

import json
import logging
import os
from typing import List, Optional

from .encoding.alphabet import UnknownAlphabetError, get_alphabet
from .encoding.reader import SubstitutionReader, new_reader

CONFIG_DIR_ENV = "CIPHERSTREAM_CONFIG_DIR"
CONFIG_FILE_NAME = "cipherstream.json"
DEFAULT_CHAIN = ["rot13"]
DEFAULT_READ_SIZE = 8192

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration operations fail."""
    pass


class CipherStreamConfig:
    """
    Simple configuration manager for cipherstream.

    Holds the cipher chain (innermost first) and the preferred read size.
    """

    def __init__(self, config_dir: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_dir: Directory for configuration files. Defaults to
                $CIPHERSTREAM_CONFIG_DIR, then ~/.cipherstream/
        """
        if config_dir is None:
            config_dir = os.environ.get(CONFIG_DIR_ENV) or os.path.expanduser("~/.cipherstream")

        self.config_dir = config_dir
        self.config_file_path = os.path.join(config_dir, CONFIG_FILE_NAME)

        os.makedirs(config_dir, exist_ok=True)

    def config_exists(self) -> bool:
        """Check if a configuration file exists."""
        return os.path.exists(self.config_file_path)

    def _load(self) -> dict:
        if not self.config_exists():
            return {}

        try:
            with open(self.config_file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid configuration file {self.config_file_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read configuration: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError("Configuration file must contain a JSON object")
        return data

    def _save(self, data: dict) -> None:
        try:
            with open(self.config_file_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration: {e}") from e
        logger.info("Configuration saved to %s", self.config_file_path)

    def get_chain(self) -> List[str]:
        """
        Load the configured cipher chain.

        Returns:
            Alphabet names, innermost first

        Raises:
            ConfigError: If the stored chain is malformed or names are unknown
        """
        chain = self._load().get("chain", DEFAULT_CHAIN)
        if not isinstance(chain, list) or not chain or not all(isinstance(n, str) for n in chain):
            raise ConfigError("Cipher chain must be a non-empty list of names")

        self._validate_names(chain)
        return list(chain)

    def set_chain(self, names: List[str]) -> None:
        """
        Store a cipher chain.

        Args:
            names: Alphabet names, innermost first

        Raises:
            ConfigError: If the chain is empty or a name is unknown
        """
        if not names:
            raise ConfigError("Cipher chain must not be empty")

        self._validate_names(names)
        data = self._load()
        data["chain"] = [name.lower() for name in names]
        self._save(data)

    def get_read_size(self) -> int:
        """
        Load the preferred read size in bytes.

        Raises:
            ConfigError: If the stored value is not a positive integer
        """
        size = self._load().get("read_size", DEFAULT_READ_SIZE)
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ConfigError(f"Read size must be a positive integer, got {size!r}")
        return size

    def set_read_size(self, size: int) -> None:
        """
        Store the preferred read size.

        Raises:
            ConfigError: If size is not a positive integer
        """
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ConfigError(f"Read size must be a positive integer, got {size!r}")

        data = self._load()
        data["read_size"] = size
        self._save(data)

    def build_reader(self, source) -> SubstitutionReader:
        """
        Wrap source in the configured reader chain.

        Args:
            source: Byte source

        Returns:
            Outermost SubstitutionReader
        """
        chain = self.get_chain()
        logger.debug("Building reader chain %s", "+".join(chain))
        return new_reader(source, *chain)

    @staticmethod
    def _validate_names(names: List[str]) -> None:
        for name in names:
            try:
                get_alphabet(name)
            except UnknownAlphabetError:
                raise ConfigError(f"Unknown cipher: {name}") from None
