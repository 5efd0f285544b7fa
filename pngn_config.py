#!/usr/bin/env python3
"""
🐧 PNGN Palette 256 - Configuration Module
==========================================
Copyright (c) 2025 PNGN-Tec LLC

Centralized Configuration System
=================================
Runtime configuration for the 256-color palette library:
- Matcher cache sizing and feature switches
- Escape sequence output behaviour (reset prefix, color on/off)
- Debug and logging settings
- Environment variable overrides
- Runtime reloading with change notifications

Environment Overrides
=====================
- PNGN_MATCH_CACHE_SIZE: Maximum cached RGB lookups
- PNGN_MATCH_CACHE: Enable/disable the matcher cache (true/false)
- PNGN_RESET_BEFORE_COLOR: Prefix color escapes with a reset (true/false)
- PNGN_ENABLE_COLOR: Enable/disable colored output (true/false)
- NO_COLOR: Any value disables colored output
- PNGN_DEBUG: Enable debug mode
- PNGN_LOG_LEVEL: Logging level name for the demo script
"""

import threading
import logging
import os
from typing import Optional, Callable
from dataclasses import dataclass, field

# Configure logging
logger = logging.getLogger('pngn_config')

_TRUE_VALUES = ('true', '1', 'yes', 'on')
_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def _env_flag(name: str) -> bool:
    return os.environ[name].strip().lower() in _TRUE_VALUES


# ============================================================================
# MATCHER CONFIGURATION
# ============================================================================

@dataclass
class MatcherConfig:
    """
    RGB matcher cache configuration.

    Attributes:
        cache_size: Maximum number of cached (r, g, b) lookups
        enable_caching: Master switch for the lookup cache
    """

    cache_size: int = 4096
    enable_caching: bool = True

    def validate(self) -> bool:
        """Validate matcher configuration"""
        if self.cache_size <= 0:
            raise ValueError("Matcher cache size must be positive")
        return True


# ============================================================================
# OUTPUT CONFIGURATION
# ============================================================================

@dataclass
class OutputConfig:
    """Escape sequence output configuration"""

    # Emit ESC[39m / ESC[49m before a color, like a stream write
    reset_before_color: bool = True

    # Global switch for colored text
    enable_color: bool = True

    def validate(self) -> bool:
        """Validate output configuration"""
        if not isinstance(self.reset_before_color, bool):
            raise ValueError("reset_before_color must be a boolean")
        if not isinstance(self.enable_color, bool):
            raise ValueError("enable_color must be a boolean")
        return True


# ============================================================================
# MAIN CONFIGURATION CLASS
# ============================================================================

@dataclass
class PaletteSystemConfig:
    """Complete system configuration"""

    matcher: MatcherConfig = field(default_factory=MatcherConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    # System-wide settings
    debug_mode: bool = False
    log_level: str = "INFO"

    def validate(self) -> bool:
        """Validate entire configuration"""
        self.matcher.validate()
        self.output.validate()
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")
        return True


# ============================================================================
# CONFIGURATION MANAGER (SINGLETON)
# ============================================================================

class ConfigurationManager:
    """
    Singleton configuration manager with runtime reloading.
    Thread-safe management of global configuration with change notifications.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._config = PaletteSystemConfig()
        self._callbacks = []
        self._config_lock = threading.RLock()
        self._load_environment_overrides(self._config)

        self._initialized = True
        logger.info("Configuration manager initialized")

    def _load_environment_overrides(self, config: PaletteSystemConfig):
        """Load configuration overrides from environment variables"""

        # Matcher settings
        if 'PNGN_MATCH_CACHE_SIZE' in os.environ:
            config.matcher.cache_size = int(os.environ['PNGN_MATCH_CACHE_SIZE'])
        if 'PNGN_MATCH_CACHE' in os.environ:
            config.matcher.enable_caching = _env_flag('PNGN_MATCH_CACHE')

        # Output settings
        if 'PNGN_RESET_BEFORE_COLOR' in os.environ:
            config.output.reset_before_color = _env_flag('PNGN_RESET_BEFORE_COLOR')
        if 'PNGN_ENABLE_COLOR' in os.environ:
            config.output.enable_color = _env_flag('PNGN_ENABLE_COLOR')
        if 'NO_COLOR' in os.environ:
            config.output.enable_color = False

        # Debug mode
        if 'PNGN_DEBUG' in os.environ:
            config.debug_mode = _env_flag('PNGN_DEBUG')
        if 'PNGN_LOG_LEVEL' in os.environ:
            config.log_level = os.environ['PNGN_LOG_LEVEL'].upper()

    @property
    def config(self) -> PaletteSystemConfig:
        """Get current configuration"""
        with self._config_lock:
            return self._config

    def reload(self, new_config: Optional[PaletteSystemConfig] = None) -> bool:
        """
        Reload configuration and notify callbacks.

        Args:
            new_config: New configuration to apply (reloads from env if None)

        Returns:
            True if reload successful
        """
        with self._config_lock:
            old_config = self._config

            try:
                if new_config is None:
                    new_config = PaletteSystemConfig()
                    self._load_environment_overrides(new_config)
                new_config.validate()
                self._config = new_config

                # Notify callbacks
                self._notify_callbacks(old_config, self._config)

                logger.info("Configuration reloaded successfully")
                return True

            except ValueError as e:
                logger.error(f"Configuration reload failed: {e}")
                self._config = old_config
                return False

    def register_callback(self, callback: Callable[[PaletteSystemConfig, PaletteSystemConfig], None]):
        """
        Register callback for configuration changes.

        Args:
            callback: Function called with (old_config, new_config)
        """
        self._callbacks.append(callback)

    def unregister_callback(self, callback: Callable):
        """Remove a registered callback"""
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def _notify_callbacks(self, old_config: PaletteSystemConfig, new_config: PaletteSystemConfig):
        """Notify all registered callbacks of configuration change"""
        for callback in list(self._callbacks):
            try:
                callback(old_config, new_config)
            except Exception as e:
                logger.error(f"Callback notification failed: {e}")


# ============================================================================
# PUBLIC API FUNCTIONS
# ============================================================================

_manager = ConfigurationManager()

def get_config() -> PaletteSystemConfig:
    """Get current system configuration"""
    return _manager.config

def reload_config(new_config: Optional[PaletteSystemConfig] = None) -> bool:
    """Reload system configuration"""
    return _manager.reload(new_config)

def register_config_callback(callback: Callable[[PaletteSystemConfig, PaletteSystemConfig], None]):
    """Register for configuration change notifications"""
    _manager.register_callback(callback)

def unregister_config_callback(callback: Callable):
    """Unregister a configuration change callback"""
    _manager.unregister_callback(callback)

def get_matcher_config() -> MatcherConfig:
    """Get matcher configuration"""
    return _manager.config.matcher

def get_output_config() -> OutputConfig:
    """Get output configuration"""
    return _manager.config.output
