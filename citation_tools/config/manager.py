"""
Centralized configuration management for citation-tools.
"""
import os
import configparser
from typing import Dict, Any, Optional
from pathlib import Path


class ConfigManager:
    """Centralized configuration management."""

    DEFAULTS = {
        'CONTACT': {
            'email': '',
            'tool_name': 'citation-tools',
        },
        'APIS': {
            'crossref_api': 'https://api.crossref.org',
            'arxiv_export': 'https://export.arxiv.org/bibtex',
            'pmc_idconv_api': 'https://pmc.ncbi.nlm.nih.gov/tools/idconv/api/v1/articles/',
            'openlibrary_api': 'https://openlibrary.org/api/books',
            'openalex_api': 'https://api.openalex.org',
        },
        'NETWORK': {
            'timeout': '10',
            'rate_limit_delay': '0',
        },
        'HISTORY': {
            'enabled': 'true',
            'history_file': '~/.citation_tools/history.json',
            'max_entries': '100',
        },
    }

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration manager.

        Args:
            config_file: Path to configuration file. If None, uses default location.
        """
        self.config_file = str(config_file or self._get_default_config_path())
        self.config = configparser.ConfigParser()
        self._load_config()

    def _get_default_config_path(self) -> str:
        """Get default configuration file path."""
        return str(Path.home() / ".citation_tools" / "config.conf")

    def _load_config(self):
        """Load configuration from file."""
        # Defaults first so a partial file still yields every option
        self.config.read_dict(self.DEFAULTS)
        if os.path.exists(self.config_file):
            self.config.read(self.config_file, encoding='utf-8')
        else:
            self._create_default_config()

    def _create_default_config(self):
        """Create default configuration file."""
        config_dir = Path(self.config_file).parent
        config_dir.mkdir(parents=True, exist_ok=True)
        self.save_config()

    def get(self, section: str, key: str, fallback: Any = None) -> Any:
        """Get configuration value."""
        try:
            return self.config.get(section, key, fallback=fallback)
        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback

    def get_int(self, section: str, key: str, fallback: int = 0) -> int:
        """Get integer configuration value; malformed values fall back."""
        try:
            return self.config.getint(section, key, fallback=fallback)
        except ValueError:
            return fallback

    def get_float(self, section: str, key: str, fallback: float = 0.0) -> float:
        """Get float configuration value; malformed values fall back."""
        try:
            return self.config.getfloat(section, key, fallback=fallback)
        except ValueError:
            return fallback

    def get_section(self, section: str) -> Dict[str, str]:
        """Get entire configuration section."""
        try:
            return dict(self.config[section])
        except KeyError:
            return {}

    def set(self, section: str, key: str, value: str):
        """Set configuration value."""
        if not self.config.has_section(section):
            self.config.add_section(section)
        self.config.set(section, key, value)

    def save_config(self):
        """Save configuration to file."""
        with open(self.config_file, 'w', encoding='utf-8') as f:
            self.config.write(f)

    def get_path(self, section: str, key: str) -> Optional[Path]:
        """Get configured path with ~ expanded."""
        value = self.get(section, key, '')
        if not value:
            return None
        return Path(value).expanduser()

    def is_enabled(self, section: str, key: str) -> bool:
        """Check if a feature is enabled."""
        return str(self.get(section, key, 'false')).strip().lower() == 'true'
