"""
Catalog data model
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List

from .translation import Group

# The schema-only pseudo-locale
ABSTRACT_LOCALE = ''


@dataclass
class Catalog:
    """All locales of one generation pass mapped to their merged trees"""
    locales: Dict[str, Group] = field(default_factory=dict)
    abstract_supplied: bool = False

    def __getitem__(self, locale: str) -> Group:
        return self.locales[locale]

    def __setitem__(self, locale: str, tree: Group) -> None:
        self.locales[locale] = tree

    def __contains__(self, locale: object) -> bool:
        return locale in self.locales

    def __iter__(self) -> Iterator[str]:
        return iter(self.locales)

    def __len__(self) -> int:
        return len(self.locales)

    @property
    def abstract(self) -> Group:
        return self.locales.get(ABSTRACT_LOCALE) or Group()

    @property
    def has_abstract(self) -> bool:
        """True when the abstract locale holds any keys"""
        return len(self.locales.get(ABSTRACT_LOCALE) or ()) > 0

    @property
    def concrete_locales(self) -> List[str]:
        """Concrete locale keys in first-seen order"""
        return [locale for locale in self.locales if locale != ABSTRACT_LOCALE]

    @property
    def is_empty(self) -> bool:
        return all(len(tree) == 0 for tree in self.locales.values())
