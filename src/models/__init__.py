"""
Data models for the i18n generator
"""

from .translation import TranslationKey, LeafKind, Leaf, Group
from .catalog import Catalog, ABSTRACT_LOCALE

__all__ = ['TranslationKey', 'LeafKind', 'Leaf', 'Group', 'Catalog', 'ABSTRACT_LOCALE']
