"""
Services of the i18n generator pipeline
"""

from .locale_classifier import LocaleClassifier, normalize_locale_key
from .catalog_builder import CatalogBuilder
from .catalog_validator import CatalogValidator, check_keys
from .resolvers import TypeResolver, IdentifierResolver
from .dart_emitter import DartEmitter
from .generator_service import I18NGeneratorService

__all__ = [
    'LocaleClassifier',
    'normalize_locale_key',
    'CatalogBuilder',
    'CatalogValidator',
    'check_keys',
    'TypeResolver',
    'IdentifierResolver',
    'DartEmitter',
    'I18NGeneratorService',
]
