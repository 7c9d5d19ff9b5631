"""
Configuration settings with validation
"""

import codecs
import os
from dataclasses import dataclass, fields
from typing import Any, List, Mapping, Optional

from dotenv import load_dotenv

from utils.exceptions import ConfigurationError
from utils.string_utils import normalize

# Load environment variables
load_dotenv()

DEFAULT_IMPORTS = ['package:l10n/l10n.dart']

# Values that mean "use the default imports" when passed as the only import
_NULL_IMPORTS = {'none', 'null'}

ENV_VARIABLES = {
    'import_path': 'I18N_IMPORT_PATH',
    'export_path': 'I18N_EXPORT_PATH',
    'encoding': 'I18N_ENCODING',
    'export_encoding': 'I18N_EXPORT_ENCODING',
    'base_name': 'I18N_BASE_NAME',
    'convert': 'I18N_CONVERT',
    'base_class_name': 'I18N_BASE_CLASS_NAME',
    'enum_class_name': 'I18N_ENUM_CLASS_NAME',
    'imports': 'I18N_IMPORTS',
    'log_level': 'LOG_LEVEL',
}


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ('true', '1', 'yes', 'on'):
        return True
    if text in ('false', '0', 'no', 'off'):
        return False
    raise ConfigurationError(f"Invalid boolean value: {value!r}")


def _parse_imports(value: Any) -> Optional[List[str]]:
    if value is None:
        return None
    if isinstance(value, str):
        value = [part.strip() for part in value.split(',')]
    imports = [str(item).strip() for item in value if item is not None and str(item).strip()]
    if not imports or (len(imports) == 1 and imports[0].lower() in _NULL_IMPORTS):
        return None
    return imports


@dataclass
class GeneratorSettings:
    """I18N generator configuration"""
    import_path: str
    export_path: str
    encoding: str = 'utf-8'
    export_encoding: str = 'utf-8'
    base_name: str = 'I18N'
    convert: bool = True
    base_class_name: str = 'L10N'
    enum_class_name: str = 'I18NLocale'
    imports: List[str] = None
    log_level: str = 'INFO'

    def __post_init__(self):
        # Validate paths
        if not self.import_path or not str(self.import_path).strip():
            raise ConfigurationError("The import path is not provided.")
        if not self.export_path or not str(self.export_path).strip():
            raise ConfigurationError("The export path is not provided.")
        self.import_path = str(self.import_path)
        self.export_path = str(self.export_path)

        # Validate encodings
        for name in ('encoding', 'export_encoding'):
            value = getattr(self, name) or 'utf-8'
            try:
                codecs.lookup(value)
            except LookupError:
                raise ConfigurationError(f"Unknown {name.replace('_', ' ')}: {value}")
            setattr(self, name, value)

        # Names end up as Dart identifiers
        self.base_name = normalize(self.base_name or '') or 'I18N'
        self.base_class_name = normalize(self.base_class_name or '') or 'L10N'
        self.enum_class_name = normalize(self.enum_class_name or '') or 'I18NLocale'
        self.convert = _parse_bool(self.convert)

        self.imports = _parse_imports(self.imports) or list(DEFAULT_IMPORTS)

        # Validate log level
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if str(self.log_level).upper() not in valid_levels:
            raise ConfigurationError(f"Log level must be one of: {', '.join(valid_levels)}")
        self.log_level = str(self.log_level).upper()

    @classmethod
    def from_env(cls) -> 'GeneratorSettings':
        """Create settings from environment variables"""
        return cls.from_options({})

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> 'GeneratorSettings':
        """
        Create settings from explicit options

        Options that are missing or None fall back to the environment, then
        to the defaults.
        """
        options = options or {}
        values = {}
        for field in fields(cls):
            value = options.get(field.name)
            if value is None:
                value = os.getenv(ENV_VARIABLES[field.name])
            if value is not None:
                values[field.name] = value

        return cls(
            import_path=values.pop('import_path', ''),
            export_path=values.pop('export_path', ''),
            **values
        )
