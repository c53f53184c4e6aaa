import os
from typing import Optional, TextIO

import yaml

from wordcrawl.exceptions import InvalidConfigurationError


class ConfigFileStore:
    """Filesystem/YAML IO for crawl config files.

    Responsibility: locate, read, and parse YAML (or JSON) documents.
    It does NOT validate crawl settings; see `CrawlerConfigParser`.
    """

    def __init__(self, *, configs_dir: Optional[str] = None):
        self.configs_dir = configs_dir or os.getcwd()

    def _resolve_path(self, config_path: str) -> str:
        return config_path if os.path.isabs(config_path) else os.path.join(self.configs_dir, config_path)

    def load_yaml_dict(self, config_path: str) -> dict:
        """Return the parsed document at `config_path`."""
        full_path = self._resolve_path(config_path)
        if not os.path.isfile(full_path):
            raise InvalidConfigurationError(config_path, "file not found")
        try:
            with open(full_path, "r", encoding="utf-8") as f:
                return self.read(f)
        except OSError as e:
            raise InvalidConfigurationError(config_path, f"unreadable: {e}") from e

    def read(self, stream: TextIO) -> dict:
        """Parse a document from an open stream. The stream is left open."""
        try:
            data = yaml.safe_load(stream)
        except yaml.YAMLError as e:
            raise InvalidConfigurationError("<document>", f"malformed YAML/JSON: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise InvalidConfigurationError("<document>", "top level must be a mapping")
        return data
