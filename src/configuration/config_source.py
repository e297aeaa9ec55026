"""INI configuration source exposing typed, section-scoped lookups."""

import configparser
import logging
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when configuration is missing, unreadable or malformed."""


class ConfigSection:
    """Typed lookups within a single configuration section."""

    def __init__(self, name: str, section: configparser.SectionProxy):
        self.name = name
        self._section = section

    def contains(self, key: str) -> bool:
        return key in self._section

    def get_string(self, key: str) -> str:
        if key not in self._section:
            raise ConfigurationError(f"Missing key '{key}' in section [{self.name}]")
        return self._section[key]

    def get_int(self, key: str) -> int:
        raw = self.get_string(key)
        try:
            return int(raw.strip())
        except ValueError:
            raise ConfigurationError(
                f"Key '{key}' in section [{self.name}] is not an integer: {raw!r}"
            ) from None

    def keys(self) -> List[str]:
        return list(self._section.keys())


class ConfigSource:
    """A parsed configuration document.

    Keys are case-insensitive, as in any INI file. Values are returned as
    raw strings; series literals are converted by
    :func:`src.configuration.series_parser.parse_series`.
    """

    def __init__(self, parser: configparser.ConfigParser):
        self._parser = parser

    @classmethod
    def from_string(cls, text: str) -> "ConfigSource":
        parser = configparser.ConfigParser(interpolation=None)
        try:
            parser.read_string(text)
        except configparser.Error as e:
            raise ConfigurationError(f"Configuration load failed - {e}") from e
        return cls(parser)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ConfigSource":
        path = Path(path)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            text = f.read()

        source = cls.from_string(text)
        logger.info("Loaded configuration from %s (%d sections)", path, len(source.sections()))
        return source

    def has_section(self, name: str) -> bool:
        return self._parser.has_section(name)

    def section(self, name: str) -> ConfigSection:
        if not self._parser.has_section(name):
            raise ConfigurationError(f"Missing configuration section [{name}]")
        return ConfigSection(name, self._parser[name])

    def sections(self) -> List[str]:
        return self._parser.sections()
