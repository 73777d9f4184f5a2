"""Configuration management for Rift.

This module provides a clean interface for reading and writing
both repository-local and global configuration files.
"""

import os
import configparser
from pathlib import Path
from typing import Optional, Dict

from .errors import RiftIOError

DEFAULT_REPO_CONFIG = {
    'core': {
        'repositoryformatversion': '0',
        'ignorefile': '.riftignore',
    },
}


class Config:
    """
    Manages Rift configuration files.
    
    Configuration is stored in INI format:
    - Global config: ~/.riftconfig
    - Repository config: .rift/config
    
    Repository config takes precedence over global config.
    Environment variables take highest precedence.
    """
    
    GLOBAL_CONFIG_PATH = Path.home() / '.riftconfig'
    
    def __init__(self, repo_config_path: Optional[Path] = None):
        """
        Initialize Config manager.
        
        Args:
            repo_config_path: Path to repository config file, if in a repo
        """
        self.repo_config_path = repo_config_path
        self._global_config = None
        self._repo_config = None
    
    @staticmethod
    def _read(path: Path) -> configparser.ConfigParser:
        parser = configparser.ConfigParser()
        try:
            parser.read(path, encoding='utf-8')
        except configparser.Error as exc:
            raise RiftIOError(f"Invalid config file: {exc}", path) from exc
        return parser
    
    @property
    def global_config(self) -> configparser.ConfigParser:
        """Load and return global configuration."""
        if self._global_config is None:
            self._global_config = self._read(self.GLOBAL_CONFIG_PATH)
        return self._global_config
    
    @property
    def repo_config(self) -> Optional[configparser.ConfigParser]:
        """Load and return repository configuration."""
        if self._repo_config is None and self.repo_config_path:
            self._repo_config = self._read(self.repo_config_path)
        return self._repo_config
    
    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.
        
        Priority order (highest to lowest):
        1. Environment variables (RIFT_<SECTION>_<KEY>)
        2. Repository config
        3. Global config
        4. Fallback value
        
        Args:
            section: Config section (e.g., 'core')
            key: Config key (e.g., 'ignorefile')
            fallback: Default value if not found
            
        Returns:
            Configuration value or fallback
        """
        env_key = f"RIFT_{section.upper()}_{key.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value
        
        if self.repo_config and self.repo_config.has_option(section, key):
            return self.repo_config.get(section, key)
        
        if self.global_config.has_option(section, key):
            return self.global_config.get(section, key)
        
        return fallback
    
    def _target(self, global_config: bool):
        if global_config:
            return self.global_config, self.GLOBAL_CONFIG_PATH
        if not self.repo_config_path:
            raise ValueError("No repository config path available")
        return self.repo_config, self.repo_config_path
    
    def _save(self, config: configparser.ConfigParser, config_path: Path) -> None:
        try:
            with open(config_path, 'w', encoding='utf-8') as f:
                config.write(f)
        except OSError as exc:
            raise RiftIOError(f"Cannot write config: {exc.strerror}", config_path) from exc
    
    def set(self, section: str, key: str, value: str, global_config: bool = False) -> None:
        """
        Set a configuration value.
        
        Args:
            section: Config section
            key: Config key
            value: Value to set
            global_config: If True, write to global config; otherwise repo config
        """
        config, config_path = self._target(global_config)
        
        if not config.has_section(section):
            config.add_section(section)
        
        config.set(section, key, value)
        self._save(config, config_path)
    
    def unset(self, section: str, key: str, global_config: bool = False) -> bool:
        """
        Remove a configuration value.
        
        Returns:
            True if value was removed, False if it didn't exist
        """
        config, config_path = self._target(global_config)
        
        if not config.has_option(section, key):
            return False
        
        config.remove_option(section, key)
        
        # Remove empty sections
        if not config.options(section):
            config.remove_section(section)
        
        self._save(config, config_path)
        return True
    
    def list_all(self, global_only: bool = False, repo_only: bool = False) -> Dict[str, Dict[str, str]]:
        """
        List all configuration values.
        
        Args:
            global_only: Only show global config
            repo_only: Only show repo config
            
        Returns:
            Dict of sections to key-value dicts
        """
        result: Dict[str, Dict[str, str]] = {}
        
        if not repo_only:
            for section in self.global_config.sections():
                result.setdefault(section, {})
                for key, value in self.global_config.items(section):
                    result[section][f"{key} (global)"] = value
        
        if not global_only and self.repo_config:
            for section in self.repo_config.sections():
                result.setdefault(section, {})
                for key, value in self.repo_config.items(section):
                    result[section][key] = value
        
        return result


def write_default_config(config_path: Path) -> bool:
    """
    Write the default repository config if none exists.
    
    Returns:
        True if a new file was written
    """
    if config_path.exists():
        return False
    
    parser = configparser.ConfigParser()
    parser.read_dict(DEFAULT_REPO_CONFIG)
    try:
        with open(config_path, 'w', encoding='utf-8') as f:
            parser.write(f)
    except OSError as exc:
        raise RiftIOError(f"Cannot write config: {exc.strerror}", config_path) from exc
    return True

