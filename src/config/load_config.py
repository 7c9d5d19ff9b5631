"""
Process-wide access to the generator settings
"""

import logging
from typing import Any, Mapping, Optional
from .settings import GeneratorSettings

logger = logging.getLogger(__name__)

# Settings of the current process; the catalog itself is never cached
_settings: Optional[GeneratorSettings] = None


def load_settings(options: Optional[Mapping[str, Any]] = None) -> GeneratorSettings:
    """
    Build the settings once and return the cached instance afterwards

    Options given after the first call are ignored; use reload_settings()
    to apply new ones.
    """
    global _settings

    if _settings is not None:
        return _settings

    try:
        settings = GeneratorSettings.from_options(options) if options else GeneratorSettings.from_env()
    except Exception as e:
        logger.error(f"Invalid generator configuration: {e}")
        raise

    logger.info(f"Generating {settings.export_path} from {settings.import_path}")
    logger.debug(f"Generator settings: {settings}")
    _settings = settings
    return _settings


def get_settings() -> GeneratorSettings:
    return _settings if _settings is not None else load_settings()


def reload_settings(options: Optional[Mapping[str, Any]] = None) -> GeneratorSettings:
    """Drop the cached settings and build them again"""
    global _settings
    _settings = None
    return load_settings(options)
