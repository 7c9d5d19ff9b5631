"""
Configuration module for the i18n generator
"""

from .settings import GeneratorSettings, DEFAULT_IMPORTS
from .load_config import load_settings, get_settings, reload_settings

__all__ = ['GeneratorSettings', 'DEFAULT_IMPORTS', 'load_settings', 'get_settings', 'reload_settings']
