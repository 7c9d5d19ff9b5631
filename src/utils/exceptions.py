"""
Errors raised while building and emitting the translation catalog
"""

from typing import Iterable, Optional

# Name of the abstract locale in messages
ABSTRACT_LABEL = 'abstract'


class GeneratorError(ValueError):
    """Base class for all structural generation errors"""
    pass


class ConfigurationError(GeneratorError):
    """A required option is missing or an option value is invalid"""
    pass


class CatalogStructureError(GeneratorError):
    """A decoded translation file does not have a usable structure"""
    pass


class EmptyCatalogError(GeneratorError):
    """No locale and no abstract content resolved from the input files"""

    def __init__(self, message: str = 'No languages or abstract base provided.'):
        super().__init__(message)


class KeyConsistencyError(GeneratorError):
    """A key of one locale is missing from the locale it is checked against"""

    def __init__(self, key_path: str, locale: str, baseline: Optional[str] = None):
        self.key_path = key_path
        self.locale = locale
        self.baseline = baseline
        super().__init__(f'Key "{key_path}" not present in "{baseline or ABSTRACT_LABEL}".')


class NestedPathError(GeneratorError):
    """A nested group was expected at a key path that does not hold one"""

    def __init__(self, keys: Iterable[str], reached: Iterable[str] = ()):
        self.keys = tuple(keys)
        self.reached = tuple(reached)
        super().__init__(
            f'The nested key "{".".join(self.keys)}" could not be fetched '
            f'(stopped after "{".".join(self.reached)}").'
        )
